from datetime import date

import pandas as pd
import pytest

from mmex.data.errors import InvalidCategoryFormat
from mmex.data.normalize import (
    apply_sign_convention,
    clean_column_name,
    normalize_columns,
    normalize_transactions,
    truncate_dates,
)


@pytest.mark.parametrize("raw, expected", [
    ("TRANSAMOUNT", "transamount"),
    ("CATEGID", "categid"),
    ("TransDate", "trans_date"),
    ("Initial Bal.", "initial_bal"),
    ("HTTPStatus", "http_status"),
    ("2nd Account", "x2nd_account"),
    ("Café", "cafe"),
    ("???", "x"),
])
def test_clean_column_name(raw: str, expected: str) -> None:
    assert clean_column_name(raw) == expected


def test_normalize_columns_deduplicates_clashes() -> None:
    df = pd.DataFrame([[1, 2, 3]], columns=["NOTES", "Notes", "notes "])
    out = normalize_columns(df)
    assert list(out.columns) == ["notes", "notes_2", "notes_3"]
    assert list(df.columns) == ["NOTES", "Notes", "notes "]


def test_sign_convention() -> None:
    df = pd.DataFrame({
        "transcode": ["Deposit", "Withdrawal", "Transfer"],
        "transamount": [100, 50, 25],
    })
    out = apply_sign_convention(df)
    assert out["transamount"].tolist() == [100, -50, -25]
    assert df["transamount"].tolist() == [100, 50, 25]


def test_truncate_dates_accepts_timestamps_and_plain_dates() -> None:
    df = pd.DataFrame({"transdate": ["2024-03-05T18:30:00", "2024-03-09", "2024-04-01 23:59:59"]})
    out = truncate_dates(df)
    assert out["transdate"].tolist() == [date(2024, 3, 5), date(2024, 3, 9), date(2024, 4, 1)]


def _joined(categories) -> pd.DataFrame:
    n = len(categories)
    return pd.DataFrame({
        "transid": range(1, n + 1),
        "transcode": ["Withdrawal"] * n,
        "transamount": [10.0] * n,
        "transdate": ["2024-01-01T08:00:00"] * n,
        "categname": categories,
    })


def test_normalize_transactions_splits_and_renames() -> None:
    out = normalize_transactions(_joined(["Food:Groceries", "Housing", None]))

    assert out["cat_name"].tolist()[:2] == ["Food:Groceries", "Housing"]
    assert out["categname"].tolist() == ["Food", "Housing", None]
    assert out["subcategname"].tolist() == ["Groceries", None, None]
    assert out["transamount"].tolist() == [-10.0, -10.0, -10.0]
    assert out["transdate"].iloc[0] == date(2024, 1, 1)


def test_normalize_transactions_fails_on_three_levels() -> None:
    with pytest.raises(InvalidCategoryFormat, match="Food:Groceries:Organic"):
        normalize_transactions(_joined(["Food", "Food:Groceries:Organic"]))
