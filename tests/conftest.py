"""Fixtures that build small MMEX-shaped SQLite files.

Table and column names are upper-case, as MMEX writes them, so the tests also
exercise case-insensitive table lookup and column-name cleaning.
"""
from __future__ import annotations

import sqlite3
from pathlib import Path

import pytest

SCHEMA = """
CREATE TABLE ACCOUNTLIST_V1 (
    ACCOUNTID INTEGER PRIMARY KEY, ACCOUNTNAME TEXT, ACCOUNTTYPE TEXT,
    STATUS TEXT, INITIALBAL NUMERIC, CURRENCYID INTEGER
);
CREATE TABLE PAYEE_V1 (
    PAYEEID INTEGER PRIMARY KEY, PAYEENAME TEXT, CATEGID INTEGER
);
CREATE TABLE CATEGORY_V1 (
    CATEGID INTEGER PRIMARY KEY, CATEGNAME TEXT, ACTIVE INTEGER, PARENTID INTEGER
);
CREATE TABLE CHECKINGACCOUNT_V1 (
    TRANSID INTEGER PRIMARY KEY, ACCOUNTID INTEGER, TOACCOUNTID INTEGER,
    PAYEEID INTEGER, TRANSCODE TEXT, TRANSAMOUNT NUMERIC, STATUS TEXT,
    NOTES TEXT, CATEGID INTEGER, TRANSDATE TEXT
);
"""


def make_db(
    path: Path,
    accounts=(),
    payees=(),
    categories=(),
    transactions=(),
) -> Path:
    """Write an MMEX-like database. Rows are tuples in column order."""
    con = sqlite3.connect(path)
    try:
        con.executescript(SCHEMA)
        con.executemany("INSERT INTO ACCOUNTLIST_V1 VALUES (?, ?, ?, ?, ?, ?)", accounts)
        con.executemany("INSERT INTO PAYEE_V1 VALUES (?, ?, ?)", payees)
        con.executemany("INSERT INTO CATEGORY_V1 VALUES (?, ?, ?, ?)", categories)
        con.executemany(
            "INSERT INTO CHECKINGACCOUNT_V1 VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)", transactions
        )
        con.commit()
    finally:
        con.close()
    return path


@pytest.fixture
def groceries_db(tmp_path: Path) -> Path:
    """One root 'Food', one child 'Groceries', one withdrawal of 42.50."""
    return make_db(
        tmp_path / "groceries.mmb",
        accounts=[(1, "Checking", "Checking", "Open", 1000, 1)],
        payees=[(1, "SuperMart", 2)],
        categories=[(1, "Food", 1, -1), (2, "Groceries", 1, 1)],
        transactions=[(1, 1, -1, 1, "Withdrawal", 42.50, "R", "weekly shop", 2, "2024-03-05T18:30:00")],
    )


@pytest.fixture
def household_db(tmp_path: Path) -> Path:
    """A couple of accounts, a transfer, an uncategorized row and a dangling category."""
    return make_db(
        tmp_path / "household.mmb",
        accounts=[
            (1, "Checking", "Checking", "Open", 1000, 1),
            (2, "Savings", "Savings", "Open", 5000, 1),
            (3, "Visa", "Credit Card", "Open", 0, 1),
        ],
        payees=[(1, "Employer", 5), (2, "SuperMart", 2), (3, "Landlord", 4)],
        categories=[
            (1, "Food", 1, -1),
            (2, "Groceries", 1, 1),
            (3, "Dining", 1, 1),
            (4, "Housing", 1, -1),
            (5, "Income", 1, -1),
            (6, "Salary", 1, 5),
            (7, "Orphan", 1, 99),
        ],
        transactions=[
            (1, 1, -1, 1, "Deposit", 3000, "R", "March pay", 6, "2024-03-01T09:00:00"),
            (2, 1, -1, 2, "Withdrawal", 120.25, "R", None, 2, "2024-03-03T10:15:00"),
            (3, 3, -1, 2, "Withdrawal", 35, "R", "pizza", 3, "2024-03-09"),
            (4, 1, -1, 3, "Withdrawal", 1500, "R", "rent", 4, "2024-04-01T00:00:00"),
            (5, 1, 2, -1, "Transfer", 500, "R", "to savings", None, "2024-04-02T12:00:00"),
            (6, 3, -1, 7, "Withdrawal", 10, "R", "unknown payee", None, "2024-04-20T08:00:00"),
        ],
    )


@pytest.fixture
def mmex_db_factory(tmp_path: Path):
    """Build a custom database: ``mmex_db_factory(categories=[...], ...)``."""
    def _make(name: str = "custom.mmb", **tables) -> Path:
        return make_db(tmp_path / name, **tables)
    return _make
