"""
TransactionStore — the normalized MMEX table held in memory for reporting.

Loaded once from the database, then queried by period/account.
"""
from __future__ import annotations

import datetime as dt
from pathlib import Path
from typing import Optional

import pandas as pd

from mmex.config import DEFAULT_DB_PATH
from mmex.data.categories import resolve_categories, unresolved_categories
from mmex.data.db import MmexDatabase
from mmex.data.normalize import normalize_transactions
from mmex.data.pipeline import build_joined, read_raw_categories
from mmex.data.schemas import PeriodFilter, RawCategoryRow


class TransactionStore:
    """Normalized transactions with period-filtered accessors."""

    def __init__(self) -> None:
        self.df: pd.DataFrame = pd.DataFrame()
        self.categories_df: pd.DataFrame = pd.DataFrame(columns=["categid", "categname"])
        self.dropped_categories: list[RawCategoryRow] = []
        self.db_path: Optional[Path] = None
        self._loaded = False

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def load(self, db_path: str | Path = DEFAULT_DB_PATH) -> "TransactionStore":
        """Read, join and normalize the database in one session."""
        print(f"Loading MMEX data from {db_path}...")
        with MmexDatabase.open(db_path) as db:
            raw = read_raw_categories(db)
            self.categories_df = resolve_categories(raw)
            self.dropped_categories = RawCategoryRow.from_frame(
                unresolved_categories(raw, self.categories_df)
            )
            joined = build_joined(db, self.categories_df)

        print(f"  Categories: {len(self.categories_df):,} resolved")
        for row in self.dropped_categories:
            print(f"  Warning: category '{row.categname}' (id {row.categid}) dropped, "
                  f"parent {row.parentid} does not resolve to a root")

        self.df = normalize_transactions(joined)
        self.db_path = Path(db_path)
        self._loaded = True
        print(f"  Transactions: {len(self.df):,} rows, {self.date_range()}")
        return self

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    # ------------------------------------------------------------------
    # Filtering
    # ------------------------------------------------------------------

    def _apply_period(self, df: pd.DataFrame, period: PeriodFilter) -> pd.DataFrame:
        start, end = period.resolve()
        if start is not None or end is not None:
            in_range = df["transdate"].map(
                lambda d: pd.notna(d)
                and (start is None or d >= start)
                and (end is None or d <= end)
            )
            df = df[in_range.astype(bool)]
        if period.account:
            df = df[df["accountname"] == period.account]
        return df

    def get_transactions(self, period: PeriodFilter | None = None) -> pd.DataFrame:
        df = self.df
        if period and not df.empty:
            df = self._apply_period(df, period)
        return df.copy()

    # ------------------------------------------------------------------
    # Metadata queries
    # ------------------------------------------------------------------

    def accounts(self) -> list[str]:
        if self.df.empty:
            return []
        return sorted(self.df["accountname"].dropna().unique().tolist())

    def categories(self) -> list[str]:
        return self.categories_df["categname"].tolist()

    def date_range(self, period: PeriodFilter | None = None) -> str:
        df = self.get_transactions(period)
        if df.empty:
            return "N/A"
        dates = df["transdate"].dropna()
        if dates.empty:
            return "N/A"
        return f"{dates.min()} to {dates.max()}"

    def periods_available(self) -> list[dict]:
        """Months with data as {year, month, label}, oldest first."""
        if self.df.empty:
            return []
        months = sorted({(d.year, d.month) for d in self.df["transdate"].dropna()})
        return [
            {"year": y, "month": m, "label": f"{dt.date(y, m, 1):%B %Y}"}
            for y, m in months
        ]

    def row_count(self) -> int:
        return len(self.df)
