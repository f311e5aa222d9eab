"""
Join pipeline: transactions + accounts (source and destination) + payees +
resolved categories, and the normalized table built on top of it.

Note that this does not join every table in the MMEX database, only
checkingaccount, accountlist, payee and category.
"""
from __future__ import annotations

from pathlib import Path

import pandas as pd

from mmex.config import (
    TRANSACTION_TABLE, ACCOUNT_TABLE, CATEGORY_TABLE, PAYEE_TABLE,
    ACCOUNT_COLS, TO_ACCOUNT_RENAME, PAYEE_COLS, JOIN_KEYS,
)
from mmex.data.categories import resolve_categories
from mmex.data.db import MmexDatabase
from mmex.data.errors import MmexError, QueryError
from mmex.data.normalize import normalize_transactions
from mmex.data.reader import read_table, require_tables


def _as_key(s: pd.Series) -> pd.Series:
    return pd.to_numeric(s, errors="coerce").astype("Int64")


def _project(df: pd.DataFrame, cols: list[str], table: str) -> pd.DataFrame:
    missing = [c for c in cols if c not in df.columns]
    if missing:
        raise MmexError(f"Table '{table}' is missing column(s): {', '.join(missing)}")
    return df[cols].copy()


# ---------------------------------------------------------------------------
# Categories
# ---------------------------------------------------------------------------

def read_raw_categories(db: MmexDatabase) -> pd.DataFrame:
    raw = read_table(db, CATEGORY_TABLE)
    if "parentid" not in raw.columns:
        raise QueryError(
            f"select * from {CATEGORY_TABLE}", db.path,
            "no PARENTID column; database predates the parent/child category schema",
        )
    return raw


def read_categories(db: MmexDatabase) -> pd.DataFrame:
    return resolve_categories(read_raw_categories(db))


def read_resolved_categories(db_path: str | Path) -> pd.DataFrame:
    """Fully-qualified category names, e.g. 'Food:Groceries', sorted by name."""
    with MmexDatabase.open(db_path) as db:
        return read_categories(db)


# ---------------------------------------------------------------------------
# Join
# ---------------------------------------------------------------------------

def join_transactions(
    transactions: pd.DataFrame,
    accounts: pd.DataFrame,
    payees: pd.DataFrame,
    categories: pd.DataFrame,
) -> pd.DataFrame:
    """Left-join the reference tables onto the transactions.

    Output has exactly one row per transaction as long as the reference ids
    are unique. Join keys are compared as nullable integers on both sides.
    """
    tran = transactions.copy()
    for key in JOIN_KEYS:
        if key not in tran.columns:
            raise MmexError(f"Table '{TRANSACTION_TABLE}' is missing column: {key}")
        tran[key] = _as_key(tran[key])

    account = _project(accounts, ACCOUNT_COLS, ACCOUNT_TABLE)
    account["accountid"] = _as_key(account["accountid"])

    to_account = account[["accountid", "accountname"]].rename(columns=TO_ACCOUNT_RENAME)

    payee = _project(payees, PAYEE_COLS, PAYEE_TABLE)
    payee["payeeid"] = _as_key(payee["payeeid"])

    category = categories[["categid", "categname"]].copy()
    category["categid"] = _as_key(category["categid"])

    df = (
        tran
        .merge(account, on="accountid", how="left")
        .merge(to_account, on="toaccountid", how="left")
        .merge(payee, on="payeeid", how="left")
        .merge(category, on="categid", how="left")
    )
    return df


def build_joined(db: MmexDatabase, categories: pd.DataFrame | None = None) -> pd.DataFrame:
    """Join within an open session; pass ``categories`` if already resolved."""
    require_tables(db, [TRANSACTION_TABLE, ACCOUNT_TABLE, PAYEE_TABLE, CATEGORY_TABLE])
    df_tran = read_table(db, TRANSACTION_TABLE)
    df_account = read_table(db, ACCOUNT_TABLE)
    df_category = read_categories(db) if categories is None else categories
    df_payee = read_table(db, PAYEE_TABLE)
    return join_transactions(df_tran, df_account, df_payee, df_category)


def build_joined_table(db_path: str | Path) -> pd.DataFrame:
    """Read the selected MMEX tables and combine them into one DataFrame.

    No analysis conventions are applied here; see read_normalized_table.
    """
    with MmexDatabase.open(db_path) as db:
        return build_joined(db)


# ---------------------------------------------------------------------------
# Normalized table
# ---------------------------------------------------------------------------

def read_normalized(db: MmexDatabase) -> pd.DataFrame:
    return normalize_transactions(build_joined(db))


def read_normalized_table(db_path: str | Path) -> pd.DataFrame:
    """The joined table with signed amounts, date-only ``transdate`` and
    ``categname`` / ``subcategname`` split out of ``cat_name``.
    """
    with MmexDatabase.open(db_path) as db:
        return read_normalized(db)
