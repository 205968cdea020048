"""
gridkit Kernel — Value Resolver

Reads a possibly-nested field from a row given a dotted path.

    resolve({"a": {"b": "v"}}, "a.b")  → "v"
    resolve({"a": {}}, "a.b")          → None
    resolve({"tags": ["x", "y"]}, "tags.1") → "y"

Absence is a legitimate, common case (optional nested fields), so nothing
here raises for a missing path. Pure function. No IO.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from functools import lru_cache
from typing import Any

_MISSING = object()


@lru_cache(maxsize=256)
def split_path(path: str) -> tuple[str, ...]:
    """Split a dot-path into its segments. Cached; column keys repeat per row."""
    return tuple(path.split("."))


def resolve(row: Any, path: str) -> Any:
    """
    Walk `row` along `path`. Returns None the moment any segment is
    None or absent.
    """
    current = row
    for segment in split_path(path):
        if current is None:
            return None
        current = _step(current, segment)
        if current is _MISSING:
            return None
    return current


def _step(node: Any, segment: str) -> Any:
    """Descend one level: mapping key, sequence index, then attribute."""
    if isinstance(node, Mapping):
        return node.get(segment, _MISSING)

    if isinstance(node, Sequence) and not isinstance(node, (str, bytes)):
        # Non-negative indexes only; "-1" is a miss, not the last element
        if not segment.isdigit():
            return _MISSING
        try:
            return node[int(segment)]
        except (ValueError, IndexError):
            return _MISSING

    # Dataclasses, pydantic models, plain objects
    if segment.startswith("_"):
        return _MISSING
    try:
        return getattr(node, segment, _MISSING)
    except Exception:
        # Raising properties read as absent
        return _MISSING
