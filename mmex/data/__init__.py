"""Reading, joining and normalizing the MMEX database."""
from .errors import (
    MmexError, DatabaseUnavailable, TableNotFound, QueryError,
    InvalidCategoryFormat, CycleDetected,
)
from .db import MmexDatabase, connect_readonly, require_database
from .reader import list_tables, read_table, query, list_tables_in, read_table_by_name, query_db
from .categories import (
    resolve_categories, unresolved_categories,
    is_category_valid, split_category, split_category_column, get_category, get_subcategory,
)
from .normalize import clean_column_name, normalize_columns, normalize_transactions
from .pipeline import (
    join_transactions, read_resolved_categories, build_joined_table, read_normalized_table,
)
from .schemas import RawCategoryRow, ResolvedCategory, CategoryNamePair, PeriodFilter, PeriodType
from .store import TransactionStore
