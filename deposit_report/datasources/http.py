"""HTTP report API data source implementation."""

import logging
from typing import Any, Optional

import httpx
from pydantic import ValidationError

from deposit_report.errors import INVALID_RESPONSE, NOT_FOUND, TRANSPORT_ERROR, FetchError
from deposit_report.models import DepositPage
from .base import DataSource

logger = logging.getLogger(__name__)

# API constants
DEFAULT_API_URL = "http://localhost:3000"
DEPOSITS_PAGINATED_ENDPOINT = "/report/deposit/paginated"
REQUEST_TIMEOUT = 30.0


class HttpReportDataSource(DataSource):
    """
    Data source backed by the report HTTP API.
    
    Requests are not retried; every failure is reported to the caller as a
    FetchError.
    """

    def __init__(
        self,
        api_url: str = DEFAULT_API_URL,
        timeout: float = REQUEST_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the report API data source.
        
        Args:
            api_url: Base URL for the report API
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used to stub the API)
        """
        self.api_url = api_url
        self.timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.api_url,
                headers={"Accept": "application/json"},
                timeout=self.timeout,
                transport=self._transport,
            )
        return self._client

    async def _make_request(self, endpoint: str, params: dict[str, Any]) -> Any:
        """
        Make a GET request and return the decoded JSON body.
        
        Raises:
            FetchError: On transport failure or a non-success response
        """
        client = await self._get_client()
        
        try:
            response = await client.get(endpoint, params=params)
        except httpx.TransportError as e:
            logger.error(f"Request to {endpoint} failed: {e}")
            raise FetchError(TRANSPORT_ERROR, str(e) or None) from e
        
        if response.is_error:
            raise _error_from_response(response)
        
        try:
            return response.json()
        except ValueError as e:
            logger.error(f"Response from {endpoint} is not valid JSON: {e}")
            raise FetchError(INVALID_RESPONSE, "Invalid response from report API") from e

    async def get_deposits_page(self, params: dict[str, Any]) -> DepositPage:
        """Retrieve one page from the paginated deposits report."""
        data = await self._make_request(DEPOSITS_PAGINATED_ENDPOINT, params)
        try:
            return DepositPage.model_validate(data or {})
        except ValidationError as e:
            logger.error(f"Unexpected deposits page shape: {e}")
            raise FetchError(INVALID_RESPONSE, "Invalid response from report API") from e

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None


def _error_from_response(response: httpx.Response) -> FetchError:
    """
    Convert an error response into a FetchError.
    
    The API answers with {"code": ..., "message": ...}; when the body is
    missing or malformed the code is derived from the HTTP status.
    """
    code = NOT_FOUND if response.status_code == 404 else f"HTTP_{response.status_code}"
    message = None
    try:
        body = response.json()
    except ValueError:
        body = None
    
    if isinstance(body, dict):
        code = body.get("code") or code
        message = body.get("message") or None
    
    logger.warning(f"Report API returned {response.status_code} ({code}) for {response.request.url}")
    return FetchError(code, message)
