"""Exceptions raised while fetching and exporting deposit reports."""

from typing import Optional

NOT_FOUND = "NOT_FOUND"
TRANSPORT_ERROR = "TRANSPORT_ERROR"
INVALID_RESPONSE = "INVALID_RESPONSE"
EXPORT_LIMIT_EXCEEDED = "EXPORT_LIMIT_EXCEEDED"

DEFAULT_FETCH_MESSAGE = "Error fetching deposits"


class ReportError(Exception):
    """Base class for every recoverable report failure."""

    def __init__(self, code: str, message: Optional[str] = None):
        self.code = code
        self.message = message
        super().__init__(message or code)


class FetchError(ReportError):
    """
    The data source rejected or failed a page request.
    
    Mirrors the error body returned by the report API: a code and an
    optional human readable message.
    """

    @property
    def is_not_found(self) -> bool:
        """NOT_FOUND means an empty result set rather than a failure."""
        return self.code == NOT_FOUND

    @property
    def display_message(self) -> str:
        """Message shown to the user, falling back to a generic one."""
        return self.message or DEFAULT_FETCH_MESSAGE


class ExportValidationError(ReportError):
    """Export preconditions failed before any page was requested."""

    def __init__(self, message: str):
        super().__init__("VALIDATION_ERROR", message)


class ExportInProgressError(ReportError):
    """Another export is still running."""

    def __init__(self):
        super().__init__("EXPORT_IN_PROGRESS", "An export is already in progress.")


class ExportError(ReportError):
    """An export was aborted; no artifact was produced."""

    def __init__(
        self,
        code: str,
        message: str,
        page: Optional[int] = None,
        cause: Optional[ReportError] = None,
    ):
        super().__init__(code, message)
        self.page = page
        self.cause = cause
