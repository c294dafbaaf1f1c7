"""Report controller: filter state, pagination and the visible page."""

import logging
from enum import Enum
from typing import Any, Callable, Optional

from deposit_report.errors import ExportInProgressError, FetchError, ReportError
from deposit_report.models import ExportResult, ReportedDeposit, ReportFilter
from .export_service import ExportService
from .page_fetcher import PageFetcher

logger = logging.getLogger(__name__)

Listener = Callable[["ReportController"], None]
AlertHandler = Callable[[str], None]


class LoadState(str, Enum):
    """Lifecycle of the visible page."""
    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    ERRORED = "errored"


def _log_alert(message: str) -> None:
    logger.warning(f"Alert: {message}")


class ReportController:
    """
    Coordinates the browsable deposit report.

    Owns the live filter, the current page and the visible records. Any
    change to the (filter, current page) pair refetches the visible page.
    Each fetch is tagged with a generation number and only the latest one
    may update the visible state.
    """

    def __init__(
        self,
        fetcher: PageFetcher,
        exporter: Optional[ExportService] = None,
        alert: Optional[AlertHandler] = None,
    ):
        self.fetcher = fetcher
        self.exporter = exporter
        self._alert = alert or _log_alert

        self.filter = ReportFilter()
        self.current_page = 1
        self.total_pages = 1
        self.deposits: list[ReportedDeposit] = []
        self.state = LoadState.IDLE
        self.exporting = False
        self.last_alert: Optional[str] = None

        self._generation = 0
        self._listeners: list[Listener] = []

    @property
    def page_size(self) -> int:
        return self.fetcher.page_size

    @property
    def loading(self) -> bool:
        return self.state == LoadState.LOADING or self.exporting

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a callback invoked after every state transition.

        Returns:
            A function that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    async def set_filter(self, field: str, value: Any) -> None:
        """
        Update one filter dimension.

        A real change resets pagination to page 1 and refetches. Setting a
        field to its current value does nothing.

        Raises:
            ValueError: Unknown field or invalid value
        """
        updated = self.filter.with_field(field, value)
        if updated == self.filter:
            return

        self.filter = updated
        self.current_page = 1
        await self.refresh()

    async def set_start_date(self, value: Any) -> None:
        await self.set_filter("start_date", value)

    async def set_end_date(self, value: Any) -> None:
        await self.set_filter("end_date", value)

    async def set_status(self, value: Any) -> None:
        await self.set_filter("status", value)

    async def set_search_query(self, value: Optional[str]) -> None:
        await self.set_filter("search_query", value)

    async def go_to_page(self, page: int) -> bool:
        """
        Move to another page if it exists.

        Out-of-range requests are ignored, like a disabled pager button.

        Returns:
            True if the page is within range
        """
        if page < 1 or page > self.total_pages:
            return False
        if page != self.current_page:
            self.current_page = page
            await self.refresh()
        return True

    async def refresh(self) -> None:
        """Fetch the visible page for the current filter and page."""
        self._generation += 1
        generation = self._generation
        report_filter, page = self.filter, self.current_page

        self.state = LoadState.LOADING
        self._notify()

        try:
            result = await self.fetcher.fetch_page(report_filter, page)
        except FetchError as e:
            if self._is_stale(generation, page):
                return
            self._apply_error(e)
            return
        except Exception:
            if not self._is_stale(generation, page):
                self.state = LoadState.ERRORED
                self._notify()
            raise

        if self._is_stale(generation, page):
            return

        self.deposits = list(result.data)
        self.total_pages = result.total_pages
        self.state = LoadState.LOADED
        self._notify()

    async def export(self) -> Optional[ExportResult]:
        """
        Export every deposit matching the current filter.

        Failures are reported through the alert handler.

        Returns:
            ExportResult, or None if the export did not complete
        """
        if self.exporter is None:
            raise RuntimeError("ReportController has no export service configured")

        if self.exporting:
            self._raise_alert(ExportInProgressError().message)
            return None

        report_filter = self.filter
        self.exporting = True
        self._notify()
        try:
            return await self.exporter.export_all(report_filter)
        except ReportError as e:
            self._raise_alert(e.message or e.code)
            return None
        finally:
            self.exporting = False
            self._notify()

    def _is_stale(self, generation: int, page: int) -> bool:
        if generation == self._generation:
            return False
        logger.debug(
            f"Discarding response for page {page} "
            f"(request {generation}, latest {self._generation})"
        )
        return True

    def _apply_error(self, error: FetchError) -> None:
        if error.is_not_found:
            # Empty result set, not a failure
            self.deposits = []
            self.state = LoadState.LOADED
        else:
            logger.warning(f"Failed to fetch deposits: {error.code}")
            self.state = LoadState.ERRORED
            self._raise_alert(error.display_message)
        self._notify()

    def _raise_alert(self, message: str) -> None:
        self.last_alert = message
        self._alert(message)

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)
