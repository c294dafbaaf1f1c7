"""Abstract base class for report data sources."""

from abc import ABC, abstractmethod
from typing import Any

from deposit_report.models import DepositPage


class DataSource(ABC):
    """
    Abstract interface for the remote deposit report.
    
    This abstraction keeps the coordination logic independent of how the
    report is served (HTTP API, in-memory fixtures, etc.).
    """

    @abstractmethod
    async def get_deposits_page(self, params: dict[str, Any]) -> DepositPage:
        """
        Retrieve one page of reported deposits.
        
        Args:
            params: Query parameters (page, pageSize, status, startAt,
                endAt, search). Absent filters are not present as keys.
            
        Returns:
            DepositPage with the page records and the total page count
            
        Raises:
            FetchError: The source reported an error or could not be reached.
                NOT_FOUND signals an empty result set.
        """
        pass

    async def close(self) -> None:
        """
        Clean up resources (e.g., close HTTP sessions).
        
        Override this if the data source holds resources that need cleanup.
        """
        pass
