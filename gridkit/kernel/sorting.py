"""
gridkit Kernel — Sort Engine

Single-column sorting with a three-state cycle per column:

    None → asc → desc → None

Clicking a different column restarts at asc. Sorting is stable, so rows
that compare equal keep their input order.

Ordering of values that Python cannot compare directly:
  - None (missing) sorts after every present value ascending, before them descending
  - mutually incomparable types fall back to ordering by type name
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from functools import cmp_to_key
from typing import Any, TypeVar

from gridkit.kernel.resolver import resolve
from gridkit.kernel.types import Column, SortState

R = TypeVar("R")


def next_sort_state(current: SortState | None, key: str) -> SortState | None:
    """Advance the sort cycle for a header click on `key`."""
    if current is None or current.key != key:
        return SortState(key=key, direction="asc")
    if current.direction == "asc":
        return SortState(key=key, direction="desc")
    return None


def click_header(
    current: SortState | None,
    column: Column,
) -> SortState | None:
    """Header click. Non-sortable columns leave the sort untouched."""
    if not column.sortable:
        return current
    return next_sort_state(current, column.key)


def compare_values(a: Any, b: Any) -> int:
    """
    Three-way compare of two resolved cell values (ascending).
    Never raises.
    """
    if a is None and b is None:
        return 0
    if a is None:
        return 1
    if b is None:
        return -1

    try:
        if a == b:
            return 0
        return 1 if a > b else -1
    except TypeError:
        ta, tb = type(a).__name__, type(b).__name__
        if ta == tb:
            return 0
        return 1 if ta > tb else -1


def apply_sort(rows: Iterable[R], sort_state: SortState | None) -> list[R]:
    """
    Return a new list ordered by `sort_state`. With no active sort the input
    order is returned unchanged.
    """
    result = list(rows)
    if sort_state is None:
        return result

    key = sort_state.key
    sign = -1 if sort_state.direction == "desc" else 1

    def _cmp(x: R, y: R) -> int:
        return sign * compare_values(resolve(x, key), resolve(y, key))

    result.sort(key=cmp_to_key(_cmp))
    return result


def find_column(columns: Sequence[Column], key: str) -> Column | None:
    for column in columns:
        if column.key == key:
            return column
    return None
