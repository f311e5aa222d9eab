import sqlite3
from pathlib import Path

import pytest

from mmex.data.db import MmexDatabase
from mmex.data.errors import DatabaseUnavailable, QueryError, TableNotFound
from mmex.data.pipeline import build_joined_table, read_normalized_table, read_resolved_categories
from mmex.data.reader import list_tables_in, query, query_db, read_table, read_table_by_name


def test_list_tables(household_db: Path) -> None:
    assert list_tables_in(household_db) == [
        "ACCOUNTLIST_V1", "CATEGORY_V1", "CHECKINGACCOUNT_V1", "PAYEE_V1",
    ]


def test_read_table_cleans_column_names(household_db: Path) -> None:
    df = read_table_by_name("payee_v1", household_db)
    assert list(df.columns) == ["payeeid", "payeename", "categid"]
    assert df["payeename"].tolist() == ["Employer", "SuperMart", "Landlord"]


def test_unknown_table_raises_table_not_found(household_db: Path) -> None:
    with pytest.raises(TableNotFound, match="budgettable_v1"):
        read_table_by_name("budgettable_v1", household_db)


def test_query_with_params(household_db: Path) -> None:
    df = query_db(
        "select TRANSID, TRANSAMOUNT from CHECKINGACCOUNT_V1 where TRANSCODE = ? order by TRANSID",
        household_db,
        params=("Withdrawal",),
    )
    assert list(df.columns) == ["transid", "transamount"]
    assert df["transid"].tolist() == [2, 3, 4, 6]


def test_malformed_sql_raises_query_error(household_db: Path) -> None:
    with pytest.raises(QueryError, match="selec"):
        query_db("selec * frm payee_v1", household_db)


def test_missing_table_in_free_query_raises_table_not_found(household_db: Path) -> None:
    with pytest.raises(TableNotFound, match="nope_v1"):
        query_db("select * from nope_v1", household_db)


@pytest.mark.parametrize("operation", [
    list_tables_in,
    read_resolved_categories,
    build_joined_table,
    read_normalized_table,
    lambda p: read_table_by_name("payee_v1", p),
])
def test_missing_file_raises_before_any_query(tmp_path: Path, operation) -> None:
    missing = tmp_path / "missing.mmb"
    with pytest.raises(DatabaseUnavailable, match="missing.mmb"):
        operation(missing)
    assert not missing.exists()


def test_non_sqlite_file_is_unavailable(tmp_path: Path) -> None:
    junk = tmp_path / "junk.mmb"
    junk.write_bytes(b"this is not a database file at all" * 10)
    with pytest.raises(DatabaseUnavailable):
        list_tables_in(junk)


def test_session_is_closed_after_error(household_db: Path) -> None:
    with pytest.raises(TableNotFound):
        with MmexDatabase.open(household_db) as db:
            con = db.con
            read_table(db, "nope_v1")
    with pytest.raises(sqlite3.ProgrammingError):
        con.execute("select 1")


def test_session_is_read_only(household_db: Path) -> None:
    with MmexDatabase.open(household_db) as db:
        with pytest.raises(QueryError):
            query(db, "delete from payee_v1")
    assert len(read_table_by_name("payee_v1", household_db)) == 3
