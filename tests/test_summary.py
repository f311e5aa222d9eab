from pathlib import Path

import pandas as pd
import pytest

from mmex.analytics.common import pct_of_total, sanitize_for_json
from mmex.analytics.summary import by_account, by_category, by_month, totals
from mmex.data.pipeline import read_normalized_table


@pytest.fixture
def normalized(household_db: Path) -> pd.DataFrame:
    return read_normalized_table(household_db)


def test_totals_exclude_transfers(normalized: pd.DataFrame) -> None:
    t = totals(normalized)
    assert t["income"] == pytest.approx(3000)
    assert t["expense"] == pytest.approx(120.25 + 35 + 1500 + 10)
    assert t["net"] == pytest.approx(3000 - 1665.25)
    assert t["transactions"] == 6
    assert t["transfers"] == 1


def test_totals_empty() -> None:
    assert totals(pd.DataFrame())["income"] == 0


def test_by_category(normalized: pd.DataFrame) -> None:
    g = by_category(normalized).set_index("name")

    assert g.loc["Housing", "amount"] == pytest.approx(-1500)
    assert g.loc["Food:Groceries", "amount"] == pytest.approx(-120.25)
    assert g.loc["Income:Salary", "amount"] == pytest.approx(3000)
    assert g.loc["(Uncategorized)", "amount"] == pytest.approx(-10)
    assert g.loc["Income:Salary", "pct_of_expense"] == 0.0
    # biggest spend first
    assert by_category(normalized)["name"].iloc[0] == "Housing"


def test_by_account_counts_transfers(normalized: pd.DataFrame) -> None:
    g = by_account(normalized).set_index("name")

    assert g.loc["Checking", "inflow"] == pytest.approx(3000)
    assert g.loc["Checking", "outflow"] == pytest.approx(120.25 + 1500 + 500)
    assert g.loc["Visa", "transactions"] == 2
    assert g.loc["Visa", "accounttype"] == "Credit Card"


def test_by_month(normalized: pd.DataFrame) -> None:
    g = by_month(normalized)
    assert g["name"].tolist() == ["2024-03", "2024-04"]
    assert g["income"].tolist() == pytest.approx([3000, 0])
    assert g["expense"].tolist() == pytest.approx([155.25, 1510])


def test_helpers() -> None:
    assert pct_of_total(25, 200) == 12.5
    assert pct_of_total(5, 0) == 0.0
    clean = sanitize_for_json({"a": float("nan"), "b": [pd.NA, 1], None: 3})
    assert clean == {"a": 0.0, "b": [None, 1]}
