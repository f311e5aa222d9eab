"""
Safe math and serialization helpers shared by the summaries and reports.
"""
from __future__ import annotations

import datetime as dt
import math

import numpy as np
import pandas as pd


def safe_divide(numerator: float, denominator: float, default: float = 0.0) -> float:
    if denominator == 0 or pd.isna(denominator):
        return default
    result = numerator / denominator
    return default if pd.isna(result) else result


def pct_of_total(part: float, total: float) -> float:
    return safe_divide(part, total) * 100


def fillna_numeric(df: pd.DataFrame, value=0) -> pd.DataFrame:
    """Fill NaN in numeric columns only; text columns keep their None."""
    num_cols = df.select_dtypes(include="number").columns
    if len(num_cols):
        df = df.copy()
        df[num_cols] = df[num_cols].fillna(value)
    return df


def sanitize_for_json(obj):
    """Recursively convert numpy/pandas values to plain Python for json.dump."""
    if isinstance(obj, dict):
        return {str(k): sanitize_for_json(v) for k, v in obj.items() if k is not None}
    if isinstance(obj, (list, tuple)):
        return [sanitize_for_json(v) for v in obj]
    if isinstance(obj, np.integer):
        return int(obj)
    if isinstance(obj, (np.floating, float)):
        v = float(obj)
        return 0.0 if (math.isnan(v) or math.isinf(v)) else v
    if isinstance(obj, np.bool_):
        return bool(obj)
    if pd.api.types.is_scalar(obj) and pd.isna(obj):
        return None
    if isinstance(obj, (dt.date, pd.Period)):
        return str(obj)
    return obj
