"""Report filter snapshot."""

from datetime import date
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from .deposit import DepositStatus

# Filter dimensions that reset pagination when they change
FILTER_FIELDS = ("start_date", "end_date", "status", "search_query")


class ReportFilter(BaseModel):
    """
    Immutable query parameters for the deposit report.
    
    Every fetch and every export works against one of these snapshots, so
    changing the live filter never alters an operation already in flight.
    """
    model_config = ConfigDict(populate_by_name=True, frozen=True)
    
    start_date: Optional[date] = Field(default=None, alias="startDate")
    end_date: Optional[date] = Field(default=None, alias="endDate")
    status: Optional[DepositStatus] = None
    search_query: str = Field(default="", alias="searchQuery")

    def with_field(self, field: str, value: Any) -> "ReportFilter":
        """Return a validated copy with one filter dimension replaced."""
        name = self._resolve_field(field)
        data = self.model_dump()
        data[name] = "" if name == "search_query" and value is None else value
        return ReportFilter.model_validate(data)

    @property
    def has_inverted_range(self) -> bool:
        """True when both dates are set and the start is after the end."""
        return (
            self.start_date is not None
            and self.end_date is not None
            and self.start_date > self.end_date
        )

    def to_query_params(self, page: int, page_size: int) -> dict[str, Any]:
        """
        Build the data source query for one page.
        
        Absent values are omitted; an empty search string means no search.
        """
        params: dict[str, Any] = {"page": page, "pageSize": page_size}
        if self.status is not None:
            params["status"] = self.status.value
        if self.start_date is not None:
            params["startAt"] = self.start_date.isoformat()
        if self.end_date is not None:
            params["endAt"] = self.end_date.isoformat()
        if self.search_query:
            params["search"] = self.search_query
        return params

    @classmethod
    def _resolve_field(cls, field: str) -> str:
        if field in FILTER_FIELDS:
            return field
        for name in FILTER_FIELDS:
            alias = cls.model_fields[name].alias
            if alias == field:
                return name
        raise ValueError(f"Unknown filter field: {field!r}")
