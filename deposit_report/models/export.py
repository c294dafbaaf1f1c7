"""Export result model."""

from pydantic import BaseModel, Field


class ExportResult(BaseModel):
    """Outcome of a completed export."""
    
    path: str = Field(description="Location of the written artifact")
    recordCount: int = Field(description="Number of exported deposits")
    pageCount: int = Field(description="Number of pages fetched")
