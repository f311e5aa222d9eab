#!/usr/bin/env python3
"""
MMEX Report CLI — inspect an MMEX database and export the analysis table.

USAGE:
  python -m mmex.cli tables                                  # List tables
  python -m mmex.cli table payee_v1                          # Dump one table
  python -m mmex.cli table checkingaccount_v1 --head 20
  python -m mmex.cli categories                              # Resolved "Parent:Child" names
  python -m mmex.cli export --output transactions.csv        # Normalized table (.csv or .xlsx)
  python -m mmex.cli export --joined --output joined.csv     # Joined table, no conventions
  python -m mmex.cli report                                  # Excel summary report
  python -m mmex.cli report --period month --year 2025 --month 3

The database defaults to $MMEX_DB_PATH; override with --db.
"""
from __future__ import annotations

import argparse
import sys
from datetime import datetime
from pathlib import Path

import pandas as pd

from mmex.config import DEFAULT_DB_PATH, REPORTS_FOLDER
from mmex.data.errors import MmexError
from mmex.data.reader import list_tables_in, read_table_by_name
from mmex.data.pipeline import build_joined_table, read_normalized_table, read_resolved_categories
from mmex.data.schemas import PeriodFilter, PeriodType, ResolvedCategory
from mmex.data.store import TransactionStore


def _build_period(args) -> PeriodFilter | None:
    pt = getattr(args, "period", None)
    account = getattr(args, "account", None)
    if pt is None:
        return PeriodFilter(account=account) if account else None
    return PeriodFilter(
        period_type=PeriodType(pt),
        year=getattr(args, "year", None),
        month=getattr(args, "month", None),
        quarter=getattr(args, "quarter", None),
        account=account,
    )


def cmd_tables(args):
    for name in list_tables_in(args.db):
        print(name)


def cmd_table(args):
    df = read_table_by_name(args.name, args.db)
    if args.head:
        df = df.head(args.head)
    with pd.option_context("display.max_columns", None, "display.width", 200):
        print(df.to_string(index=False))


def cmd_categories(args):
    for cat in ResolvedCategory.from_frame(read_resolved_categories(args.db)):
        print(f"{cat.categid:>6}  {cat.categname}")


def cmd_export(args):
    df = build_joined_table(args.db) if args.joined else read_normalized_table(args.db)
    out = Path(args.output)
    out.parent.mkdir(parents=True, exist_ok=True)
    if out.suffix.lower() == ".xlsx":
        df.to_excel(out, index=False, sheet_name="Transactions")
    else:
        df.to_csv(out, index=False)
    print(f"  {len(df):,} rows written to {out}")


def cmd_report(args):
    print("\n" + "=" * 70)
    print("  MMEX REPORT — FINANCE SUMMARY")
    print("=" * 70)
    print(f"  Started: {datetime.now():%Y-%m-%d %H:%M:%S}")

    store = TransactionStore().load(args.db)
    period = _build_period(args)

    output = Path(args.output) if args.output else (
        REPORTS_FOLDER / f"Finance_Summary_{datetime.now():%Y%m%d_%H%M%S}.xlsx"
    )
    from mmex.reports.summary_report import generate_excel
    path = generate_excel(store, output, period)

    print(f"\n  Period: {store.date_range(period)}")
    print(f"  Report saved to: {path}")
    print("=" * 70 + "\n")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="MMEX Report — flatten a Money Manager Ex database for analysis",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--db", default=str(DEFAULT_DB_PATH), help="Path to the .mmb database")
    subparsers = parser.add_subparsers(dest="command", help="Command")

    tables_parser = subparsers.add_parser("tables", help="List tables in the database")
    tables_parser.set_defaults(func=cmd_tables)

    table_parser = subparsers.add_parser("table", help="Print one table")
    table_parser.add_argument("name", help="Table name, e.g. payee_v1")
    table_parser.add_argument("--head", type=int, help="Only the first N rows")
    table_parser.set_defaults(func=cmd_table)

    cat_parser = subparsers.add_parser("categories", help="List resolved category names")
    cat_parser.set_defaults(func=cmd_categories)

    export_parser = subparsers.add_parser("export", help="Write the analysis table to CSV/XLSX")
    export_parser.add_argument("--output", required=True, help="Output file (.csv or .xlsx)")
    export_parser.add_argument("--joined", action="store_true", help="Export the joined table without sign/category conventions")
    export_parser.set_defaults(func=cmd_export)

    report_parser = subparsers.add_parser("report", help="Generate the Excel summary report")
    report_parser.add_argument("--output", help="Output .xlsx (default: timestamped file in reports folder)")
    report_parser.add_argument("--period", choices=["month", "quarter", "year"], help="Period type")
    report_parser.add_argument("--year", type=int, help="Year")
    report_parser.add_argument("--month", type=int, help="Month (1-12)")
    report_parser.add_argument("--quarter", type=int, help="Quarter (1-4)")
    report_parser.add_argument("--account", help="Only transactions from this account")
    report_parser.set_defaults(func=cmd_report)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.command:
        parser.print_help()
        return 0

    try:
        args.func(args)
    except MmexError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
