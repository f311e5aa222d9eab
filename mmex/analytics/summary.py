"""
Income/expense summaries over the normalized transaction table.

Amounts are already signed (deposits positive, everything else negative).
Transfers move money between the user's own accounts, so they are left out
of income and expense but still count per account.
"""
from __future__ import annotations

import pandas as pd

from mmex.config import TRANSFER_CODE, CATEGORY_SEPARATOR
from mmex.analytics.common import safe_divide, pct_of_total

UNCATEGORIZED = "(Uncategorized)"
UNKNOWN_ACCOUNT = "(Unknown account)"

_TOTAL_KEYS = ["income", "expense", "net", "savings_rate", "transactions", "transfers"]


def _flows(df: pd.DataFrame) -> pd.DataFrame:
    return df[df["transcode"] != TRANSFER_CODE]


def _with_in_out(df: pd.DataFrame) -> pd.DataFrame:
    amount = pd.to_numeric(df["transamount"]).fillna(0)
    return df.assign(inflow=amount.clip(lower=0), outflow=(-amount).clip(lower=0))


def totals(df: pd.DataFrame) -> dict:
    """Headline KPIs for a set of normalized transactions."""
    if df.empty:
        return {k: 0 for k in _TOTAL_KEYS}

    flows = _with_in_out(_flows(df))
    income = float(flows["inflow"].sum())
    expense = float(flows["outflow"].sum())
    return {
        "income": income,
        "expense": expense,
        "net": income - expense,
        "savings_rate": round(safe_divide(income - expense, income) * 100, 1),
        "transactions": int(len(df)),
        "transfers": int((df["transcode"] == TRANSFER_CODE).sum()),
    }


def by_category(df: pd.DataFrame) -> pd.DataFrame:
    """Net amount per (category, subcategory), biggest spend first."""
    flows = _flows(df)
    if flows.empty:
        return pd.DataFrame(columns=["name", "category", "subcategory", "amount",
                                     "transactions", "pct_of_expense"])

    g = (
        flows.assign(
            category=flows["categname"].fillna(UNCATEGORIZED),
            subcategory=flows["subcategname"].fillna(""),
        )
        .groupby(["category", "subcategory"])
        .agg(amount=("transamount", "sum"), transactions=("transamount", "size"))
        .reset_index()
    )
    total_expense = -g.loc[g["amount"] < 0, "amount"].sum()
    g["pct_of_expense"] = [
        round(pct_of_total(-a, total_expense), 1) if a < 0 else 0.0 for a in g["amount"]
    ]
    g["name"] = [
        f"{c}{CATEGORY_SEPARATOR}{s}" if s else c
        for c, s in zip(g["category"], g["subcategory"])
    ]
    g = g.sort_values(["amount", "name"], kind="stable").reset_index(drop=True)
    return g[["name", "category", "subcategory", "amount", "transactions", "pct_of_expense"]]


def by_account(df: pd.DataFrame) -> pd.DataFrame:
    """Inflow/outflow per source account, transfers included."""
    if df.empty:
        return pd.DataFrame(columns=["name", "accounttype", "initialbal", "inflow",
                                     "outflow", "net", "transactions"])

    g = (
        _with_in_out(df)
        .assign(name=df["accountname"].fillna(UNKNOWN_ACCOUNT))
        .groupby("name")
        .agg(
            accounttype=("accounttype", "first"),
            initialbal=("initialbal", "first"),
            inflow=("inflow", "sum"),
            outflow=("outflow", "sum"),
            transactions=("transamount", "size"),
        )
        .reset_index()
    )
    g["net"] = g["inflow"] - g["outflow"]
    return g[["name", "accounttype", "initialbal", "inflow", "outflow", "net", "transactions"]]


def by_month(df: pd.DataFrame) -> pd.DataFrame:
    """Income, expense and net per calendar month, oldest first."""
    flows = _flows(df)
    flows = flows[flows["transdate"].notna()]
    if flows.empty:
        return pd.DataFrame(columns=["name", "income", "expense", "net", "transactions"])

    month = pd.to_datetime(flows["transdate"]).dt.to_period("M").astype(str)
    g = (
        _with_in_out(flows)
        .assign(name=month.values)
        .groupby("name")
        .agg(income=("inflow", "sum"), expense=("outflow", "sum"),
             transactions=("transamount", "size"))
        .reset_index()
    )
    g["net"] = g["income"] - g["expense"]
    return g[["name", "income", "expense", "net", "transactions"]]
