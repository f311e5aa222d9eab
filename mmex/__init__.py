"""MMEX Report — flatten a Money Manager Ex database into one analysis table."""
from mmex.data import (
    MmexError, DatabaseUnavailable, TableNotFound, QueryError,
    InvalidCategoryFormat, CycleDetected,
    list_tables_in, read_table_by_name, query_db,
    read_resolved_categories, build_joined_table, read_normalized_table,
    is_category_valid, split_category,
    TransactionStore, PeriodFilter, PeriodType,
)

__version__ = "0.3.0"
