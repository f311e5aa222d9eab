"""
Table discovery and reading: SQLite query results as column-cleaned DataFrames.
"""
from __future__ import annotations

import re
import sqlite3
from pathlib import Path
from typing import Sequence

import pandas as pd
from pandas.errors import DatabaseError as PandasDatabaseError

from mmex.data.db import MmexDatabase
from mmex.data.errors import QueryError, TableNotFound
from mmex.data.normalize import normalize_columns

_NO_SUCH_TABLE_RE = re.compile(r"no such table: ([\w.]+)")


def _quote_identifier(name: str) -> str:
    return '"' + name.replace('"', '""') + '"'


# ---------------------------------------------------------------------------
# Session-level reads
# ---------------------------------------------------------------------------

def list_tables(db: MmexDatabase) -> list[str]:
    """Names of all tables and views, sorted."""
    try:
        cur = db.con.execute(
            "select name from sqlite_master "
            "where type in ('table', 'view') and name not like 'sqlite_%' order by name"
        )
        return [r[0] for r in cur.fetchall()]
    except sqlite3.Error as exc:
        raise QueryError("select name from sqlite_master", db.path, str(exc)) from exc


def require_tables(db: MmexDatabase, names: Sequence[str]) -> None:
    """Raise TableNotFound for the first of ``names`` missing from the schema."""
    present = {t.lower() for t in list_tables(db)}
    for name in names:
        if name.lower() not in present:
            raise TableNotFound(name, db.path)


def query(db: MmexDatabase, sql: str, params: Sequence | None = None) -> pd.DataFrame:
    """Run ``sql`` (with ``?`` placeholders bound from ``params``)."""
    try:
        df = pd.read_sql_query(sql, db.con, params=params)
    except (sqlite3.Error, PandasDatabaseError) as exc:
        detail = str(exc)
        m = _NO_SUCH_TABLE_RE.search(detail)
        if m:
            raise TableNotFound(m.group(1), db.path) from exc
        raise QueryError(sql, db.path, detail) from exc
    return normalize_columns(df)


def read_table(db: MmexDatabase, name: str) -> pd.DataFrame:
    """``select *`` from one table. Table names match case-insensitively."""
    require_tables(db, [name])
    return query(db, f"select * from {_quote_identifier(name)}")


# ---------------------------------------------------------------------------
# Path-level wrappers: one scoped connection per call
# ---------------------------------------------------------------------------

def list_tables_in(db_path: str | Path) -> list[str]:
    with MmexDatabase.open(db_path) as db:
        return list_tables(db)


def read_table_by_name(table_name: str, db_path: str | Path) -> pd.DataFrame:
    with MmexDatabase.open(db_path) as db:
        return read_table(db, table_name)


def query_db(sql: str, db_path: str | Path, params: Sequence | None = None) -> pd.DataFrame:
    with MmexDatabase.open(db_path) as db:
        return query(db, sql, params)
