from .page_fetcher import PageFetcher
from .export_service import ExportService
from .report_service import LoadState, ReportController

__all__ = [
    "PageFetcher",
    "ExportService",
    "LoadState",
    "ReportController",
]
