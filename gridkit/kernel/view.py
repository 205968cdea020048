"""
gridkit Kernel — DataView

The stateful half of the data view engine. A DataView owns the sort state
and, in local mode, the current page; the renderer stays pure.

Event surface (what a layout collaborator wires its clicks to):
  click_header(key)   — advance the sort cycle of a sortable column
  click_previous()    — one page back, clamped at page 1
  click_next()        — one page forward, clamped at the last page
  click_page(n)       — jump to one-based page n

In remote mode (options.on_page_change set) page events are forwarded to the
owner as zero-based page requests, clamped into [1, total_pages] and dropped
when they name the page already shown. They never mutate local state; header
clicks are ignored because rows arrive ordered from the server.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from gridkit.kernel.pagination import clamp_page, remote_display_page, total_pages
from gridkit.kernel.renderer import build_view, render_html, render_text
from gridkit.kernel.sorting import click_header, find_column
from gridkit.kernel.types import Column, SortState, TableView, ViewOptions


class DataView:
    def __init__(self, columns: Sequence[Column], options: ViewOptions | None = None) -> None:
        self.columns: tuple[Column, ...] = tuple(columns)
        self.options = options or ViewOptions()
        self.sort_state: SortState | None = None
        self.current_page = 1
        self._row_count = 0

    # -- rendering ---------------------------------------------------------

    def build(self, rows: Sequence[Any]) -> TableView:
        self._row_count = len(rows)
        return build_view(rows, self.columns, self.options, self.sort_state, self.current_page)

    def render(self, rows: Sequence[Any]) -> str:
        view = self.build(rows)
        if self.options.channel == "text":
            return render_text(view)
        return render_html(view)

    # -- events --------------------------------------------------------------

    def click_header(self, key: str) -> SortState | None:
        if self.options.is_remote:
            return self.sort_state
        column = find_column(self.columns, key)
        if column is not None:
            self.sort_state = click_header(self.sort_state, column)
        return self.sort_state

    def click_previous(self) -> None:
        self._go_to(self.page - 1)

    def click_next(self) -> None:
        self._go_to(self.page + 1)

    def click_page(self, page: int) -> None:
        self._go_to(page)

    # -- state ---------------------------------------------------------------

    @property
    def page(self) -> int:
        """One-based page currently displayed."""
        if self.options.is_remote:
            return remote_display_page(self.options.current_page)
        return self.current_page

    @property
    def total_pages(self) -> int:
        if self.options.is_remote:
            return self.options.total_pages or 1
        return total_pages(self._row_count, self.options.items_per_page)

    def set_remote_page(self, current_page: int, pages: int) -> None:
        """Owner-side update of the remote page triple after a fetch."""
        self.options.current_page = current_page
        self.options.total_pages = pages

    def _go_to(self, page: int) -> None:
        target = clamp_page(page, self.total_pages)
        if self.options.is_remote:
            # Disabled controls at the bounds must not request the shown page
            if target != self.page:
                self.options.on_page_change(target - 1)
            return
        self.current_page = target
