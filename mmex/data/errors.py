"""
Error taxonomy for reading the MMEX database.
"""
from __future__ import annotations

from pathlib import Path


class MmexError(Exception):
    """Base class for every failure raised by the reader."""


class DatabaseUnavailable(MmexError):
    def __init__(self, path: str | Path, reason: str = "Specified database does not exist") -> None:
        self.path = str(path)
        super().__init__(f"{reason}: {self.path}")


class TableNotFound(MmexError):
    def __init__(self, table: str, path: str | Path | None = None) -> None:
        self.table = table
        self.path = str(path) if path is not None else None
        where = f" in {self.path}" if self.path else ""
        super().__init__(f"Table '{table}' not found{where}")


class QueryError(MmexError):
    def __init__(self, sql: str, path: str | Path | None = None, detail: str = "") -> None:
        self.sql = sql
        self.path = str(path) if path is not None else None
        where = f" against {self.path}" if self.path else ""
        msg = f"Query failed{where}: {sql.strip()}"
        if detail:
            msg += f" ({detail})"
        super().__init__(msg)


class InvalidCategoryFormat(MmexError, ValueError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Category should have at most 2 levels: '{name}'")


class CycleDetected(MmexError):
    def __init__(self, category_ids: list) -> None:
        self.category_ids = list(category_ids)
        shown = ", ".join(str(c) for c in self.category_ids[:10])
        super().__init__(f"Category hierarchy did not converge; still expanding ids: {shown}")
