"""
MMEX Report — Configuration: paths, table names, schema constants.
"""
import os
from pathlib import Path

# ---------------------------------------------------------------------------
# Paths: override with MMEX_DB_PATH / MMEX_REPORTS_DIR env vars
# ---------------------------------------------------------------------------
_home_dir = Path(os.environ.get("MMEX_HOME", str(Path.home() / "Documents" / "MMEX")))
DEFAULT_DB_PATH = Path(os.environ.get("MMEX_DB_PATH", str(_home_dir / "finance.mmb")))
REPORTS_FOLDER = Path(os.environ.get("MMEX_REPORTS_DIR", str(_home_dir / "reports")))

# ---------------------------------------------------------------------------
# MMEX tables (schema with the flexible parent/child category table)
# ---------------------------------------------------------------------------
TRANSACTION_TABLE = "checkingaccount_v1"
ACCOUNT_TABLE = "accountlist_v1"
CATEGORY_TABLE = "category_v1"
PAYEE_TABLE = "payee_v1"

# ---------------------------------------------------------------------------
# Category hierarchy
# ---------------------------------------------------------------------------
ROOT_PARENT_ID = -1
CATEGORY_SEPARATOR = ":"
MAX_CATEGORY_LEVELS = 2

# ---------------------------------------------------------------------------
# Transaction codes
# ---------------------------------------------------------------------------
DEPOSIT_CODE = "Deposit"
TRANSFER_CODE = "Transfer"

# ---------------------------------------------------------------------------
# Join projections (cleaned column names)
# ---------------------------------------------------------------------------
ACCOUNT_COLS = ["accountid", "accountname", "accounttype", "initialbal"]
TO_ACCOUNT_RENAME = {"accountid": "toaccountid", "accountname": "toaccountname"}
PAYEE_COLS = ["payeeid", "payeename"]
JOIN_KEYS = ["accountid", "toaccountid", "payeeid", "categid"]

# Output column names of the analysis normalizer
FULL_CATEGORY_COL = "cat_name"
CATEGORY_COL = "categname"
SUBCATEGORY_COL = "subcategname"
