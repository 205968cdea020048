"""
gridkit Kernel — the pure data view engine.

Components:
  resolver    — dot-path field access on arbitrary rows
  formatter   — raw value → display string
  sorting     — single-column sort cycle + stable comparator
  pagination  — local slicing, remote page conversion, navigation bar
  renderer    — (rows, columns, options) → TableView → HTML / text
  view        — DataView: owns sort + local page state, handles click events
"""

from gridkit.kernel.formatter import format_cell
from gridkit.kernel.pagination import paginate, total_pages
from gridkit.kernel.renderer import build_view, render, render_card, render_html, render_text
from gridkit.kernel.resolver import resolve
from gridkit.kernel.sorting import apply_sort, next_sort_state
from gridkit.kernel.types import Column, FetchState, SortState, TableView, ViewOptions
from gridkit.kernel.view import DataView

__all__ = [
    "resolve",
    "format_cell",
    "next_sort_state",
    "apply_sort",
    "paginate",
    "total_pages",
    "build_view",
    "render",
    "render_html",
    "render_text",
    "render_card",
    "DataView",
    "Column",
    "SortState",
    "ViewOptions",
    "TableView",
    "FetchState",
]
