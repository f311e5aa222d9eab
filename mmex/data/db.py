"""
Scoped, read-only access to an MMEX SQLite file.

Every read goes through ``MmexDatabase.open(path)``: the file is checked
before anything is queried, and the connection is closed on every exit path.
"""
from __future__ import annotations

import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from mmex.data.errors import DatabaseUnavailable


def require_database(path: str | Path) -> Path:
    """Return ``path`` as a Path, or raise if it is not an existing file."""
    p = Path(path).expanduser()
    if not p.is_file():
        raise DatabaseUnavailable(p)
    return p


@contextmanager
def connect_readonly(path: str | Path) -> Iterator[sqlite3.Connection]:
    p = require_database(path)
    uri = f"{p.resolve().as_uri()}?mode=ro"
    try:
        con = sqlite3.connect(uri, uri=True)
    except sqlite3.Error as exc:
        raise DatabaseUnavailable(p, "Cannot open database") from exc
    try:
        try:
            con.execute("PRAGMA query_only=ON;")
            # Forces SQLite to read the header; garbage files fail here
            con.execute("select count(*) from sqlite_master").fetchone()
        except sqlite3.DatabaseError as exc:
            raise DatabaseUnavailable(p, "Not a readable SQLite database") from exc
        yield con
    finally:
        con.close()


class MmexDatabase:
    """An open read-only session: the connection plus the path it came from."""

    def __init__(self, con: sqlite3.Connection, path: str | Path) -> None:
        self.con = con
        self.path = Path(path)

    @classmethod
    @contextmanager
    def open(cls, path: str | Path) -> Iterator["MmexDatabase"]:
        with connect_readonly(path) as con:
            yield cls(con, path)

    def __repr__(self) -> str:
        return f"MmexDatabase({str(self.path)!r})"
