from .base import DataSource
from .http import HttpReportDataSource

__all__ = ["DataSource", "HttpReportDataSource"]
