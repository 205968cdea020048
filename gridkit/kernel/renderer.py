"""
gridkit Kernel — Renderer

Pure functions: (rows, columns, options, sort_state?, current_page?) → TableView → str
No IO. Deterministic: same input → same output, always.

Two stages:
- build_view() composes sort + paginate + resolve + format into a TableView
- render_html() / render_text() draw a TableView for one channel

render() runs both stages. render_card() wraps any rendered body in the
loading / error / content panel used by consuming views.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from html import escape as _html_escape
from typing import Any

import chevron

from gridkit.kernel.formatter import format_cell
from gridkit.kernel.pagination import (
    build_pagination_bar,
    paginate,
    remote_display_page,
    results_line,
    total_pages,
)
from gridkit.kernel.resolver import resolve
from gridkit.kernel.sorting import apply_sort
from gridkit.kernel.types import (
    Column,
    HeaderCell,
    SortState,
    TableView,
    ViewOptions,
)

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def render(
    rows: Sequence[Any],
    columns: Sequence[Column],
    options: ViewOptions | None = None,
    sort_state: SortState | None = None,
    current_page: int = 1,
) -> str:
    """
    Render a table for the channel named in options.
    Pure function. No side effects. No IO.
    """
    opts = options or ViewOptions()
    view = build_view(rows, columns, opts, sort_state, current_page)

    if opts.channel == "text":
        return render_text(view)

    return render_html(view)


def build_view(
    rows: Sequence[Any],
    columns: Sequence[Column],
    options: ViewOptions | None = None,
    sort_state: SortState | None = None,
    current_page: int = 1,
) -> TableView:
    """
    Build the channel-independent model of one table.

    Local mode sorts the full row set, then slices page `current_page`
    (one-based). Remote mode uses rows verbatim: no sort, no slice, and the
    page number comes from options.current_page (zero-based).
    """
    opts = options or ViewOptions()

    if opts.is_remote:
        # Rows are already ordered server-side
        sort_state = None
        ordered = list(rows)
        visible = ordered
        page = remote_display_page(opts.current_page)
        pages = opts.total_pages or 1
    else:
        ordered = apply_sort(rows, sort_state)
        page = current_page
        pages = total_pages(len(ordered), opts.items_per_page)
        visible = paginate(ordered, page, opts.items_per_page) if opts.show_pagination else ordered

    headers = [
        HeaderCell(
            key=col.key,
            label=col.label,
            sortable=col.sortable,
            indicator=sort_state.indicator if sort_state is not None and sort_state.key == col.key else "",
        )
        for col in columns
    ]

    body = [[_cell_text(row, col.key) for col in columns] for row in visible]

    return TableView(
        headers=headers,
        rows=body,
        title=opts.title,
        empty=not body,
        empty_message=opts.empty_message,
        pagination=build_pagination_bar(page, pages) if opts.show_pagination else None,
        results_line=results_line(len(visible), len(ordered)) if opts.show_pagination else None,
    )


def render_html(view: TableView) -> str:
    """Draw a TableView as an HTML fragment."""
    return chevron.render(TABLE_TEMPLATE, _html_context(view))


def render_text(view: TableView) -> str:
    """Draw a TableView as plain text (terminal, logs, Slack)."""
    parts: list[str] = []

    if view.title:
        parts.append(view.title)
        parts.append("=" * len(view.title))
        parts.append("")

    labels = [f"{h.label} {h.indicator}" if h.indicator else h.label for h in view.headers]
    widths = [len(label) for label in labels]
    for row in view.rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(cell))

    parts.append(_text_row(labels, widths))
    parts.append("-+-".join("-" * w for w in widths))

    if view.empty:
        parts.append(view.empty_message)
    else:
        parts.extend(_text_row(row, widths) for row in view.rows)

    bar = view.pagination
    if bar is not None:
        links = " ".join(f"[{p.number}]" if p.active else str(p.number) for p in bar.pages)
        prev = "<" if not bar.previous_disabled else " "
        nxt = ">" if not bar.next_disabled else " "
        parts.append("")
        parts.append(f"{prev} {links} {nxt}")

    if view.results_line:
        parts.append(view.results_line)

    return "\n".join(parts).rstrip()


def render_card(
    body: str,
    title: str | None = None,
    loading: bool = False,
    error: str | None = None,
    channel: str = "html",
    col_size: str = "col-md-6",
) -> str:
    """
    Wrap a rendered body in a card. Loading wins over error; error wins
    over content. Loading and error are states, not interrupts.
    """
    if channel == "text":
        lines = [title, "=" * len(title)] if title else []
        if loading:
            lines.append("Loading...")
        elif error:
            lines.append(f"Error: {error}")
        else:
            lines.append(body)
        return "\n".join(lines)

    inner = []
    if title:
        inner.append(f'<h5 class="card-title">{escape(title)}</h5>')
    if loading:
        inner.append(LOADING_HTML)
    elif error:
        inner.append(f'<div class="alert alert-danger" role="alert">{escape(error)}</div>')
    else:
        inner.append(body)

    content = "\n".join(inner)
    return (
        f'<div class="{escape(col_size)} mb-3">'
        f'<div class="card h-100">'
        f'<div class="card-body">\n{content}\n</div>'
        f"</div>"
        f"</div>"
    )


# ---------------------------------------------------------------------------
# Templates
# ---------------------------------------------------------------------------

TABLE_TEMPLATE = """<div class="gridkit-table">
<div class="table-responsive">
{{#has_title}}<h5 class="card-title">{{title}}</h5>
{{/has_title}}<table class="table table-striped table-hover table-bordered">
<thead>
<tr>
{{#headers}}<th data-key="{{key}}" style="cursor: {{cursor}}; user-select: none">{{label}}{{#has_indicator}}<span class="ms-1">{{indicator}}</span>{{/has_indicator}}</th>
{{/headers}}</tr>
</thead>
<tbody>
{{#empty}}<tr><td colspan="{{column_count}}" class="text-center">{{empty_message}}</td></tr>
{{/empty}}{{#rows}}<tr>{{#cells}}<td>{{value}}</td>{{/cells}}</tr>
{{/rows}}</tbody>
</table>
</div>
{{#pagination}}<nav aria-label="Table pagination">
<ul class="pagination justify-content-center">
<li class="page-item{{#previous_disabled}} disabled{{/previous_disabled}}"><button class="page-link" data-action="previous"{{#previous_disabled}} disabled{{/previous_disabled}}>Previous</button></li>
{{#pages}}<li class="page-item{{#active}} active{{/active}}"><button class="page-link" data-page="{{number}}">{{number}}</button></li>
{{/pages}}<li class="page-item{{#next_disabled}} disabled{{/next_disabled}}"><button class="page-link" data-action="next"{{#next_disabled}} disabled{{/next_disabled}}>Next</button></li>
</ul>
</nav>
{{/pagination}}{{#has_results_line}}<div class="text-center text-muted small">{{results_line}}</div>
{{/has_results_line}}</div>"""

LOADING_HTML = (
    '<div class="text-center py-3">'
    '<div class="spinner-border spinner-border-sm text-primary" role="status">'
    '<span class="visually-hidden">Loading...</span>'
    "</div>"
    "</div>"
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _cell_text(row: Any, key: str) -> str:
    """Resolve + format one cell. A value that cannot be stringified renders empty."""
    value = resolve(row, key)
    try:
        return format_cell(value)
    except Exception:
        logger.debug("renderer: could not format value at %r", key, exc_info=True)
        return ""


def _html_context(view: TableView) -> dict[str, Any]:
    bar = view.pagination
    pagination = None
    if bar is not None:
        pagination = {
            "previous_disabled": bar.previous_disabled,
            "next_disabled": bar.next_disabled,
            "pages": [{"number": p.number, "active": p.active} for p in bar.pages],
        }

    return {
        "has_title": bool(view.title),
        "title": view.title or "",
        "headers": [
            {
                "key": h.key,
                "label": h.label,
                "cursor": "pointer" if h.sortable else "default",
                "has_indicator": bool(h.indicator),
                "indicator": h.indicator,
            }
            for h in view.headers
        ],
        "empty": view.empty,
        "empty_message": view.empty_message,
        "column_count": view.column_count,
        "rows": [{"cells": [{"value": cell} for cell in row]} for row in view.rows],
        "pagination": pagination,
        "has_results_line": bool(view.results_line),
        "results_line": view.results_line or "",
    }


def _text_row(cells: Sequence[str], widths: Sequence[int]) -> str:
    return " | ".join(cell.ljust(w) for cell, w in zip(cells, widths)).rstrip()


def escape(text: str) -> str:
    """HTML-escape user content."""
    return _html_escape(str(text), quote=True)
