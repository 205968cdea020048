"""
gridkit Kernel — Paginator

Local mode: the kernel slices the ordered rows into one-based pages.
Remote mode: the caller already truncated rows to one page; the kernel only
converts the caller's zero-based page index to one-based for display.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import TypeVar

from gridkit.kernel.types import PageLink, PaginationBar

R = TypeVar("R")


def total_pages(count: int, items_per_page: int) -> int:
    return math.ceil(count / items_per_page)


def paginate(rows: Sequence[R], page: int, items_per_page: int) -> list[R]:
    """Rows on one-based `page`. Out-of-range pages yield an empty list."""
    start = (page - 1) * items_per_page
    if start < 0:
        return []
    return list(rows[start : start + items_per_page])


def clamp_page(page: int, pages: int) -> int:
    return max(1, min(page, max(pages, 1)))


def build_pagination_bar(current_page: int, pages: int) -> PaginationBar | None:
    """Navigation controls, or None when there is at most one page."""
    if pages <= 1:
        return None
    return PaginationBar(
        current_page=current_page,
        total_pages=pages,
        previous_disabled=current_page == 1,
        next_disabled=current_page == pages,
        pages=[PageLink(number=n, active=n == current_page) for n in range(1, pages + 1)],
    )


def results_line(shown: int, total: int) -> str:
    return f"Showing {shown} of {total} results"


def remote_display_page(current_page: int | None) -> int:
    """Caller's zero-based page → one-based display page."""
    return (current_page or 0) + 1
