"""Single page of deposits returned by the data source."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .deposit import ReportedDeposit


class DepositPage(BaseModel):
    """
    One page of the filtered result set.
    
    Created per fetch and folded into either the visible page or an
    export buffer; never retained on its own.
    """
    model_config = ConfigDict(populate_by_name=True, frozen=True)
    
    data: list[ReportedDeposit] = Field(default_factory=list)
    total_pages: int = Field(default=1, alias="totalPages", description="Total page count, at least 1")

    @field_validator("total_pages", mode="before")
    @classmethod
    def default_to_one_page(cls, value):
        # Missing or zero page counts collapse to a single page
        if value is None:
            return 1
        return max(int(value), 1)

    @classmethod
    def empty(cls) -> "DepositPage":
        return cls(data=[], total_pages=1)
