"""FastAPI dependencies for dependency injection."""

from deposit_report.datasources import DataSource
from deposit_report.services import ExportService

# Global instances - initialized at app startup
_datasource: DataSource | None = None
_export_service: ExportService | None = None


def set_datasource(datasource: DataSource) -> None:
    """Set the global datasource instance."""
    global _datasource
    _datasource = datasource


def get_datasource() -> DataSource:
    """Get the global datasource instance for dependency injection."""
    if _datasource is None:
        raise RuntimeError("DataSource not initialized. Call set_datasource() first.")
    return _datasource


def set_export_service(service: ExportService) -> None:
    """
    Set the global export service.
    
    A single instance is shared so its guard rejects overlapping exports.
    """
    global _export_service
    _export_service = service


def get_export_service() -> ExportService:
    """Get the global export service for dependency injection."""
    if _export_service is None:
        raise RuntimeError("ExportService not initialized. Call set_export_service() first.")
    return _export_service
