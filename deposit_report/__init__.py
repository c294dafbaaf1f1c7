"""Paginated deposit report browsing and bulk export."""

__version__ = "1.0.0"
