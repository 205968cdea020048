"""
gridkit Kernel — Shared Types

Data classes used across resolver, sorting, pagination, renderer and view.
These are the contracts that bind the kernel together.

- `Column` describes how to extract, label and optionally sort one field
- `SortState` is the single active sort (or None)
- `ViewOptions` configures one table (local or remote pagination)
- `TableView` is the channel-independent render model produced by build_view()
- `FetchState` is the snapshot published by the async data controller
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Generic, Literal, TypeVar

T = TypeVar("T")

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

SORT_DIRECTIONS: set[str] = {"asc", "desc"}

SORT_INDICATORS: dict[str, str] = {
    "asc": "▲",
    "desc": "▼",
}

CHANNELS: set[str] = {"html", "text"}

DEFAULT_ITEMS_PER_PAGE = 10
DEFAULT_EMPTY_MESSAGE = "No data available"
UNKNOWN_ERROR = "Unknown error"

Direction = Literal["asc", "desc"]


# ---------------------------------------------------------------------------
# Column / sort
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Column:
    """
    One column of a table. Identity is `key`, a dot-path into the row.
    `filterable` is declared for callers building on top; the kernel ignores it.
    """

    key: str
    label: str
    sortable: bool = False
    filterable: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "key": self.key,
            "label": self.label,
            "sortable": self.sortable,
            "filterable": self.filterable,
        }

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> Column:
        return cls(
            key=str(d["key"]),
            label=d.get("label", str(d["key"])),
            sortable=bool(d.get("sortable", False)),
            filterable=bool(d.get("filterable", False)),
        )


@dataclass(frozen=True)
class SortState:
    """The active sort. At most one exists per view."""

    key: str
    direction: Direction = "asc"

    @property
    def indicator(self) -> str:
        return SORT_INDICATORS[self.direction]


# ---------------------------------------------------------------------------
# Options
# ---------------------------------------------------------------------------


@dataclass
class ViewOptions:
    """
    Options controlling how a table is built and rendered.

    Remote pagination is switched on by supplying `on_page_change`. In that
    mode `current_page` is zero-based and owned by the caller, and the kernel
    neither sorts nor slices the rows it is given.
    """

    show_filters: bool = False  # reserved, no behavioral effect
    items_per_page: int = DEFAULT_ITEMS_PER_PAGE
    show_pagination: bool = True
    title: str | None = None
    current_page: int | None = None
    total_pages: int | None = None
    on_page_change: Callable[[int], Any] | None = None
    channel: str = "html"  # "html" or "text"
    empty_message: str = DEFAULT_EMPTY_MESSAGE

    def __post_init__(self) -> None:
        if self.items_per_page < 1:
            raise ValueError(f"items_per_page must be >= 1, got {self.items_per_page}")
        if self.channel not in CHANNELS:
            raise ValueError(f"Unknown channel: {self.channel!r}")

    @property
    def is_remote(self) -> bool:
        return self.on_page_change is not None


# ---------------------------------------------------------------------------
# Render model
# ---------------------------------------------------------------------------


@dataclass
class HeaderCell:
    key: str
    label: str
    sortable: bool
    indicator: str = ""  # "▲", "▼" or ""


@dataclass
class PageLink:
    number: int  # one-based
    active: bool


@dataclass
class PaginationBar:
    """Navigation controls. Only built when there is more than one page."""

    current_page: int  # one-based
    total_pages: int
    previous_disabled: bool
    next_disabled: bool
    pages: list[PageLink] = field(default_factory=list)


@dataclass
class TableView:
    """
    Everything a channel needs to draw one table.
    Produced by renderer.build_view(); consumed by render_html/render_text.
    """

    headers: list[HeaderCell]
    rows: list[list[str]]
    title: str | None = None
    empty: bool = False
    empty_message: str = DEFAULT_EMPTY_MESSAGE
    pagination: PaginationBar | None = None
    results_line: str | None = None

    @property
    def column_count(self) -> int:
        return len(self.headers)


# ---------------------------------------------------------------------------
# Fetch state
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class FetchState(Generic[T]):
    """Snapshot of a data controller. Replaced, never mutated."""

    data: T | None = None
    loading: bool = False
    error: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "data": self.data,
            "loading": self.loading,
            "error": self.error,
        }
