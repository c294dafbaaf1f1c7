"""Page fetcher wrapping the report data source."""

import logging

from deposit_report.config import PAGE_SIZE
from deposit_report.datasources import DataSource
from deposit_report.models import DepositPage, ReportFilter

logger = logging.getLogger(__name__)


class PageFetcher:
    """Fetches single pages of the deposit report for a filter snapshot."""

    def __init__(self, datasource: DataSource, page_size: int = PAGE_SIZE):
        self.datasource = datasource
        self.page_size = page_size

    async def fetch_page(self, report_filter: ReportFilter, page: int) -> DepositPage:
        """
        Fetch one page of deposits.
        
        Args:
            report_filter: Filter snapshot to query with
            page: 1-based page index
            
        Returns:
            DepositPage with the records of that page and the total page count
            
        Raises:
            ValueError: If page is below 1
            FetchError: If the data source fails
        """
        if page < 1:
            raise ValueError(f"page must be >= 1, got {page}")
        
        params = report_filter.to_query_params(page=page, page_size=self.page_size)
        logger.debug(f"Fetching deposits page with params {params}")
        return await self.datasource.get_deposits_page(params)
