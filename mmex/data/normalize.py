"""
Column-name cleaning and the analysis conventions applied on top of the
joined transaction table.
"""
from __future__ import annotations

import re
import unicodedata

import numpy as np
import pandas as pd

from mmex.config import (
    DEPOSIT_CODE,
    FULL_CATEGORY_COL, CATEGORY_COL, SUBCATEGORY_COL,
)
from mmex.data.categories import split_category_column


# ---------------------------------------------------------------------------
# Column names
# ---------------------------------------------------------------------------

_CAMEL_RE = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")
_NON_ALNUM_RE = re.compile(r"[^0-9a-zA-Z]+")


def clean_column_name(name) -> str:
    """snake_case a raw column name: 'TRANSAMOUNT' -> 'transamount',
    'TransDate' -> 'trans_date', 'Initial Bal.' -> 'initial_bal'.
    """
    s = unicodedata.normalize("NFKD", str(name)).encode("ascii", "ignore").decode("ascii")
    s = _CAMEL_RE.sub("_", s)
    s = _NON_ALNUM_RE.sub("_", s).strip("_").lower()
    if not s:
        return "x"
    if s[0].isdigit():
        s = "x" + s
    return s


def normalize_columns(df: pd.DataFrame) -> pd.DataFrame:
    """Rename every column with clean_column_name; clashes get _2, _3, ..."""
    seen: dict[str, int] = {}
    names = []
    for col in df.columns:
        base = clean_column_name(col)
        seen[base] = seen.get(base, 0) + 1
        names.append(base if seen[base] == 1 else f"{base}_{seen[base]}")
    out = df.copy()
    out.columns = names
    return out


# ---------------------------------------------------------------------------
# Analysis conventions
# ---------------------------------------------------------------------------

def apply_sign_convention(df: pd.DataFrame) -> pd.DataFrame:
    """Deposits stay positive; withdrawals and transfers become negative."""
    df = df.copy()
    amount = pd.to_numeric(df["transamount"])
    df["transamount"] = np.where(df["transcode"] == DEPOSIT_CODE, amount, -amount)
    return df


def truncate_dates(df: pd.DataFrame, col: str = "transdate") -> pd.DataFrame:
    """Parse an ISO-8601 timestamp column and keep only the calendar date."""
    df = df.copy()
    df[col] = pd.to_datetime(df[col], format="ISO8601").dt.date
    return df


def normalize_transactions(joined: pd.DataFrame) -> pd.DataFrame:
    """Apply sign, date and category conventions to the joined table.

    The full category name moves to ``cat_name``; ``categname`` and
    ``subcategname`` hold its two parts. Raises InvalidCategoryFormat if any
    row has more than two levels.
    """
    parts = split_category_column(joined[CATEGORY_COL])

    df = apply_sign_convention(joined)
    df = truncate_dates(df)
    df = df.rename(columns={CATEGORY_COL: FULL_CATEGORY_COL})
    df[CATEGORY_COL] = parts["category"]
    df[SUBCATEGORY_COL] = parts["subcategory"]
    return df
