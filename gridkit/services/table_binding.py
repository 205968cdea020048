"""
Table binding — connects a DataController to a DataView.

Every controller state change re-renders the card (spinner, error alert or
table) and pushes it to a sink. View events (header and page clicks) re-render
too. When the controller's data is a PagedResponse, the binding switches the
view to remote pagination: page changes update the request's page parameter
and refetch.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Sequence
from typing import Any

from gridkit import config
from gridkit.kernel.renderer import render_card
from gridkit.kernel.types import Column, FetchState, ViewOptions
from gridkit.kernel.view import DataView
from gridkit.models.paging import PagedResponse
from gridkit.services.data_controller import DataController

logger = logging.getLogger(__name__)

Sink = Callable[[str], None]


def make_view(columns: Sequence[Column], **options: Any) -> DataView:
    """DataView with the configured page size unless one is given."""
    options.setdefault("items_per_page", config.settings.ITEMS_PER_PAGE)
    return DataView(columns, ViewOptions(**options))


def extract_rows(data: Any) -> list[Any]:
    """Rows out of whatever a fetcher returned: a list, a PagedResponse, or nothing."""
    if data is None:
        return []
    if isinstance(data, PagedResponse):
        return list(data.content)
    if isinstance(data, (list, tuple)):
        return list(data)
    return [data]


class TableBinding:
    """Owns the rendered output of one controller-backed table."""

    def __init__(
        self,
        controller: DataController[Any],
        view: DataView,
        sink: Sink,
        title: str | None = None,
        page_params: dict[str, Any] | None = None,
    ) -> None:
        self.controller = controller
        self.view = view
        self.sink = sink
        self.title = title
        # Request params shared with a paged_fetcher; "page" is zero-based
        self.page_params = page_params
        self.output = ""
        self._pending: set[asyncio.Task[None]] = set()
        self._unsubscribe = controller.subscribe(self._on_state)

        if page_params is not None:
            self.view.options.on_page_change = self.request_page
            self.view.options.current_page = int(page_params.get("page", 0))

    def attach(self) -> asyncio.Task[None] | None:
        """Render the current state, then initialize the controller."""
        self.refresh()
        return self.controller.initialize()

    def detach(self) -> None:
        self._unsubscribe()
        self.controller.dispose()

    # -- view events ---------------------------------------------------------

    def click_header(self, key: str) -> None:
        self.view.click_header(key)
        self.refresh()

    def click_previous(self) -> None:
        self.view.click_previous()
        self.refresh()

    def click_next(self) -> None:
        self.view.click_next()
        self.refresh()

    def click_page(self, page: int) -> None:
        self.view.click_page(page)
        self.refresh()

    def request_page(self, page: int) -> None:
        """Remote page change (zero-based): update params and refetch."""
        if self.page_params is None:
            return
        logger.debug("table_binding: requesting page %d", page)
        self.page_params["page"] = page
        self.view.options.current_page = page
        task = asyncio.get_running_loop().create_task(self.controller.refetch())
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    # -- rendering -----------------------------------------------------------

    def refresh(self) -> str:
        return self._push(self.controller.state)

    def _on_state(self, state: FetchState[Any]) -> None:
        ready = not state.loading and state.error is None
        # Pending and failed states still carry the previous page
        if ready and isinstance(state.data, PagedResponse) and self.view.options.is_remote:
            self.view.set_remote_page(state.data.pageable.page_number, state.data.total_pages)
        self._push(state)

    def _push(self, state: FetchState[Any]) -> str:
        body = self.view.render(extract_rows(state.data))
        self.output = render_card(
            body,
            title=self.title,
            loading=state.loading,
            error=state.error,
            channel=self.view.options.channel,
        )
        self.sink(self.output)
        return self.output
