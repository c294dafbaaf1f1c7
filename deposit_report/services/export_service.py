"""Export service aggregating every report page into one artifact."""

import asyncio
import logging
from typing import Mapping

from deposit_report.errors import (
    EXPORT_LIMIT_EXCEEDED,
    ExportError,
    ExportInProgressError,
    ExportValidationError,
    FetchError,
)
from deposit_report.export import DEPOSIT_COLUMNS, ArtifactWriter
from deposit_report.export.columns import ColumnAccessor
from deposit_report.models import ExportResult, ReportedDeposit, ReportFilter
from .page_fetcher import PageFetcher

logger = logging.getLogger(__name__)

DEFAULT_MAX_PAGES = 1000


class ExportService:
    """
    Service producing a full export of the deposit report.
    
    Pages are fetched one after another in ascending order, so the exported
    rows follow page order and then in-page order. Only one export may run
    at a time per service instance.
    """

    def __init__(
        self,
        fetcher: PageFetcher,
        writer: ArtifactWriter,
        max_pages: int = DEFAULT_MAX_PAGES,
        columns: Mapping[str, ColumnAccessor] = DEPOSIT_COLUMNS,
    ):
        self.fetcher = fetcher
        self.writer = writer
        self.max_pages = max_pages
        self.columns = columns
        self._running = False

    @property
    def is_running(self) -> bool:
        return self._running

    async def export_all(self, report_filter: ReportFilter) -> ExportResult:
        """
        Fetch every page for the filter and write the artifact.
        
        Args:
            report_filter: Filter snapshot; later changes to the caller's
                filter do not affect a running export
            
        Returns:
            ExportResult with the artifact path and counts
            
        Raises:
            ExportValidationError: Start date is after end date (nothing fetched)
            ExportInProgressError: Another export is running
            ExportError: A page failed or the page ceiling was hit (nothing written)
        """
        if report_filter.has_inverted_range:
            raise ExportValidationError("End date must be after start date.")
        if self._running:
            raise ExportInProgressError()
        
        self._running = True
        try:
            deposits, page_count = await self._collect(report_filter)
            # Spreadsheet serialization is blocking
            path = await asyncio.to_thread(self.writer.write, deposits, self.columns)
        finally:
            self._running = False

        logger.info(f"Exported {len(deposits)} deposits from {page_count} pages to {path}")
        
        return ExportResult(
            path=str(path),
            recordCount=len(deposits),
            pageCount=page_count,
        )

    async def _collect(
        self, report_filter: ReportFilter
    ) -> tuple[list[ReportedDeposit], int]:
        """Fetch pages sequentially until the last one reported by the source."""
        all_deposits: list[ReportedDeposit] = []
        page = 1
        has_more = True
        
        while has_more:
            if page > self.max_pages:
                logger.warning(
                    f"Export aborted: source still reports more pages after {self.max_pages}"
                )
                raise ExportError(
                    EXPORT_LIMIT_EXCEEDED,
                    f"Error exporting deposits: more than {self.max_pages} pages",
                    page=page,
                )
            
            try:
                result = await self.fetcher.fetch_page(report_filter, page)
            except FetchError as e:
                logger.warning(f"Export aborted at page {page}: {e.code}")
                raise ExportError(
                    e.code,
                    f"Error exporting deposits: page {page} failed ({e.code})",
                    page=page,
                    cause=e,
                ) from e
            
            all_deposits.extend(result.data)
            has_more = page < result.total_pages
            page += 1
        
        return all_deposits, page - 1
