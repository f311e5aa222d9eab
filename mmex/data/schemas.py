"""
Record types for category rows, and period filters for time-based queries.
"""
from __future__ import annotations

import calendar
import datetime as dt
from dataclasses import dataclass
from enum import Enum
from typing import Optional

import pandas as pd


def _na_to_none(value):
    return None if pd.isna(value) else value


# ---------------------------------------------------------------------------
# Category records
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class RawCategoryRow:
    categid: Optional[int]
    categname: Optional[str]
    parentid: Optional[int]

    @classmethod
    def from_frame(cls, df: pd.DataFrame) -> list["RawCategoryRow"]:
        return [
            cls(_na_to_none(r.categid), _na_to_none(r.categname), _na_to_none(r.parentid))
            for r in df[["categid", "categname", "parentid"]].itertuples(index=False)
        ]


@dataclass(frozen=True)
class ResolvedCategory:
    """A category id with its fully-qualified ``"Parent:Child"`` name."""
    categid: int
    categname: str

    @classmethod
    def from_frame(cls, df: pd.DataFrame) -> list["ResolvedCategory"]:
        return [
            cls(int(r.categid), r.categname)
            for r in df[["categid", "categname"]].itertuples(index=False)
        ]


@dataclass(frozen=True)
class CategoryNamePair:
    category: str
    subcategory: Optional[str] = None


# ---------------------------------------------------------------------------
# Periods
# ---------------------------------------------------------------------------

class PeriodType(str, Enum):
    MONTH = "month"
    QUARTER = "quarter"
    YEAR = "year"
    CUSTOM = "custom"
    ALL = "all"


def _month_end(year: int, month: int) -> dt.date:
    return dt.date(year, month, calendar.monthrange(year, month)[1])


@dataclass
class PeriodFilter:
    """Date range (and optional account) for filtering normalized transactions."""
    period_type: PeriodType = PeriodType.ALL
    year: Optional[int] = None
    month: Optional[int] = None          # 1-12
    quarter: Optional[int] = None        # 1-4
    start_date: Optional[dt.date] = None
    end_date: Optional[dt.date] = None
    account: Optional[str] = None        # source account name

    def resolve(self) -> tuple[Optional[dt.date], Optional[dt.date]]:
        """Return inclusive (start_date, end_date); None means unbounded."""
        if self.period_type == PeriodType.ALL:
            return None, None
        if self.period_type == PeriodType.CUSTOM:
            return self.start_date, self.end_date
        if self.year is None:
            return None, None

        if self.period_type == PeriodType.MONTH:
            if self.month is None:
                return None, None
            return dt.date(self.year, self.month, 1), _month_end(self.year, self.month)

        if self.period_type == PeriodType.QUARTER:
            if self.quarter is None:
                return None, None
            first = (self.quarter - 1) * 3 + 1
            return dt.date(self.year, first, 1), _month_end(self.year, first + 2)

        if self.period_type == PeriodType.YEAR:
            return dt.date(self.year, 1, 1), dt.date(self.year, 12, 31)

        return None, None

    @property
    def label(self) -> str:
        if self.period_type == PeriodType.MONTH and self.year and self.month:
            text = f"{dt.date(self.year, self.month, 1):%B %Y}"
        elif self.period_type == PeriodType.QUARTER and self.year and self.quarter:
            text = f"Q{self.quarter} {self.year}"
        elif self.period_type == PeriodType.YEAR and self.year:
            text = str(self.year)
        elif self.period_type == PeriodType.CUSTOM:
            s = self.start_date.isoformat() if self.start_date else "?"
            e = self.end_date.isoformat() if self.end_date else "?"
            text = f"{s} to {e}"
        else:
            text = "All Time"
        if self.account:
            text += f" ({self.account})"
        return text
