"""
gridkit Kernel — Cell Formatter

Converts a resolved raw value into its display string. One branch per kind:

    bool            → "Yes" / "No"
    None            → ""
    str             → unchanged
    anything else   → str(value), numbers included

No locale-aware number or date formatting is performed.
"""

from __future__ import annotations

from typing import Any


def format_cell(value: Any) -> str:
    # bool first: bool is a subclass of int
    if isinstance(value, bool):
        return "Yes" if value else "No"
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return str(value)
