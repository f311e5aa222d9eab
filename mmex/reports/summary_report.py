"""
Finance Summary Report — income/expense KPIs, spending by category,
account activity, monthly trend and the full transaction list.
"""
from __future__ import annotations

from pathlib import Path

import pandas as pd

from mmex.config import FULL_CATEGORY_COL
from mmex.data.store import TransactionStore
from mmex.data.schemas import PeriodFilter
from mmex.analytics.common import sanitize_for_json, fillna_numeric
from mmex.analytics.summary import totals, by_category, by_account, by_month
from mmex.excel.writer import ExcelWriter


CATEGORY_COLS = [
    ("name", "text", "Category"),
    ("amount", "currency", "Amount"),
    ("transactions", "number", "Transactions"),
    ("pct_of_expense", "percent", "% of Expense"),
]

ACCOUNT_SUMMARY_COLS = [
    ("name", "text", "Account"),
    ("accounttype", "text", "Type"),
    ("initialbal", "currency", "Initial Balance"),
    ("inflow", "currency", "Inflow"),
    ("outflow", "currency", "Outflow"),
    ("net", "currency", "Net"),
    ("transactions", "number", "Transactions"),
]

MONTH_COLS = [
    ("name", "text", "Month"),
    ("income", "currency", "Income"),
    ("expense", "currency", "Expense"),
    ("net", "currency", "Net"),
    ("transactions", "number", "Transactions"),
]

TRANSACTION_COLS = [
    ("transdate", "date", "Date"),
    ("accountname", "text", "Account"),
    ("transcode", "text", "Type"),
    ("payeename", "text", "Payee"),
    ("toaccountname", "text", "To Account"),
    (FULL_CATEGORY_COL, "text", "Category"),
    ("transamount", "currency", "Amount"),
    ("notes", "text", "Notes"),
]


def generate_json(store: TransactionStore, period: PeriodFilter | None = None) -> dict:
    df = store.get_transactions(period)
    return sanitize_for_json({
        "period": period.label if period else "All Time",
        "date_range": store.date_range(period),
        "totals": totals(df),
        "by_category": fillna_numeric(by_category(df)).to_dict("records"),
        "by_account": fillna_numeric(by_account(df)).to_dict("records"),
        "by_month": fillna_numeric(by_month(df)).to_dict("records"),
    })


def generate_excel(
    store: TransactionStore,
    output_path: str | Path,
    period: PeriodFilter | None = None,
) -> Path:
    data = generate_json(store, period)
    t = data["totals"]
    ew = ExcelWriter()

    ws = ew.add_sheet("Executive Summary")
    ew.write_title(ws, "FINANCE SUMMARY",
                   f"{data['period']}  |  {data['date_range']}  |  Generated {pd.Timestamp.now():%B %d, %Y}")

    row = ew.write_section(ws, 5, "CASH FLOW")
    row = ew.write_kpi_row(ws, row, [
        (t["income"], "INCOME", "currency"),
        (t["expense"], "EXPENSE", "currency"),
        (t["net"], "NET", "currency"),
        (t["savings_rate"], "SAVINGS RATE", "percent"),
    ])
    row = ew.write_section(ws, row, "ACTIVITY")
    ew.write_kpi_row(ws, row, [
        (t["transactions"], "TRANSACTIONS", "number"),
        (t["transfers"], "TRANSFERS", "number"),
    ])

    for sheet_name, key, cols in [("By Category", "by_category", CATEGORY_COLS),
                                  ("By Account", "by_account", ACCOUNT_SUMMARY_COLS),
                                  ("By Month", "by_month", MONTH_COLS)]:
        ws_d = ew.add_sheet(sheet_name)
        ew.write_table(ws_d, 1, cols, data[key], show_total=True)

    ws_t = ew.add_sheet("Transactions")
    transactions = store.get_transactions(period).sort_values("transdate", kind="stable")
    ew.write_table(ws_t, 1, TRANSACTION_COLS, transactions)

    return ew.save(output_path)
