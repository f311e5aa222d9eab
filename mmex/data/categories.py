"""
Category hierarchy: resolving parent/child rows into "Parent:Child" names,
and validating/splitting those names back into (category, subcategory).
"""
from __future__ import annotations

import pandas as pd

from mmex.config import CATEGORY_SEPARATOR, MAX_CATEGORY_LEVELS, ROOT_PARENT_ID
from mmex.data.errors import CycleDetected, InvalidCategoryFormat
from mmex.data.schemas import CategoryNamePair


def _as_id(s: pd.Series) -> pd.Series:
    return pd.to_numeric(s, errors="coerce").astype("Int64")


# ---------------------------------------------------------------------------
# Resolver
# ---------------------------------------------------------------------------

def resolve_categories(raw: pd.DataFrame) -> pd.DataFrame:
    """Expand category_v1 rows into fully-qualified names.

    Starts from the roots (parentid == -1) and repeatedly attaches the
    children of the last resolved level until a pass adds nothing. Rows whose
    parent never resolves are left out. The number of passes is bounded by the
    number of rows; a frontier that is still growing after that is a cycle.

    Returns columns ``categid, categname`` sorted by ``categname``.
    """
    rows = raw[["categid", "categname", "parentid"]].copy()
    rows["categid"] = _as_id(rows["categid"])
    rows["parentid"] = _as_id(rows["parentid"])
    rows = rows.dropna(subset=["categid"])

    frontier = rows.loc[rows["parentid"].isin([ROOT_PARENT_ID]), ["categid", "categname"]]
    children = rows.rename(columns={"categid": "child_id", "categname": "child_name"})

    levels = [frontier]
    for _ in range(len(rows)):
        step = frontier.merge(children, left_on="categid", right_on="parentid", how="inner")
        if step.empty:
            break
        frontier = pd.DataFrame({
            "categid": step["child_id"],
            "categname": step["categname"] + CATEGORY_SEPARATOR + step["child_name"],
        })
        levels.append(frontier)
    else:
        if not frontier.empty:
            raise CycleDetected(frontier["categid"].tolist())

    resolved = pd.concat(levels, ignore_index=True)
    resolved["categid"] = resolved["categid"].astype("Int64")
    return resolved.sort_values("categname", kind="stable").reset_index(drop=True)


def unresolved_categories(raw: pd.DataFrame, resolved: pd.DataFrame) -> pd.DataFrame:
    """Rows of ``raw`` that did not make it into ``resolved``."""
    ids = _as_id(raw["categid"])
    return raw[~ids.isin(resolved["categid"].dropna())]


# ---------------------------------------------------------------------------
# Splitter
# ---------------------------------------------------------------------------

def is_category_valid(name: str) -> bool:
    """True for 'category' or 'category:subcategory'."""
    return str(name).count(CATEGORY_SEPARATOR) < MAX_CATEGORY_LEVELS


def split_category(name: str) -> CategoryNamePair:
    if not is_category_valid(name):
        raise InvalidCategoryFormat(name)
    category, sep, subcategory = name.partition(CATEGORY_SEPARATOR)
    return CategoryNamePair(category, subcategory if sep else None)


def _check_column(names: pd.Series) -> pd.Series:
    present = names.dropna().astype(str)
    bad = present[present.str.count(CATEGORY_SEPARATOR) >= MAX_CATEGORY_LEVELS]
    if not bad.empty:
        raise InvalidCategoryFormat(bad.iloc[0])
    return names.astype("object").where(names.notna(), None)


def split_category_column(names: pd.Series) -> pd.DataFrame:
    """Vectorized split of a full-name column into category / subcategory.

    The whole column is validated before anything is split, so a single
    three-level name fails the batch. Missing names stay missing.
    """
    names = _check_column(names)
    parts = names.str.split(CATEGORY_SEPARATOR, n=1, expand=True)
    parts = parts.reindex(columns=[0, 1])
    parts.columns = ["category", "subcategory"]
    return parts.astype("object").where(parts.notna(), None)


def get_category(names: pd.Series) -> pd.Series:
    return split_category_column(names)["category"]


def get_subcategory(names: pd.Series) -> pd.Series:
    return split_category_column(names)["subcategory"]
