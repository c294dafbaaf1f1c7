"""API routes for the deposit report service."""

from datetime import date
from pathlib import Path
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import Response

from deposit_report.datasources import DataSource
from deposit_report.errors import (
    ExportError,
    ExportInProgressError,
    ExportValidationError,
    FetchError,
)
from deposit_report.models import DepositPage, DepositStatus, ReportFilter
from deposit_report.services import ExportService, PageFetcher
from .dependencies import get_datasource, get_export_service

router = APIRouter(prefix="/v1")

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def get_report_filter(
    startAt: Optional[date] = Query(
        None,
        description="Start date (inclusive)",
        examples=["2024-01-01"]
    ),
    endAt: Optional[date] = Query(
        None,
        description="End date (inclusive)",
        examples=["2024-01-31"]
    ),
    status: Optional[DepositStatus] = Query(
        None,
        description="Deposit status filter",
        examples=["paid"]
    ),
    search: str = Query(
        "",
        description="Free-text search, empty for no search"
    ),
) -> ReportFilter:
    """Build a filter snapshot from the query string."""
    return ReportFilter(
        start_date=startAt,
        end_date=endAt,
        status=status,
        search_query=search,
    )


def _error_detail(error: FetchError | ExportError) -> dict:
    return {"code": error.code, "message": error.message}


@router.get("/reports/deposits", response_model=DepositPage)
async def get_deposits_page(
    page: int = Query(
        1,
        ge=1,
        description="1-based page index"
    ),
    report_filter: ReportFilter = Depends(get_report_filter),
    datasource: DataSource = Depends(get_datasource),
) -> DepositPage:
    """
    Get one page of reported deposits.
    
    A NOT_FOUND from the report API yields an empty page.
    """
    fetcher = PageFetcher(datasource)
    try:
        return await fetcher.fetch_page(report_filter, page)
    except FetchError as e:
        if e.is_not_found:
            return DepositPage.empty()
        raise HTTPException(status_code=502, detail=_error_detail(e))


@router.get("/reports/deposits/export")
async def export_deposits(
    report_filter: ReportFilter = Depends(get_report_filter),
    service: ExportService = Depends(get_export_service),
) -> Response:
    """
    Export every deposit matching the filter as an Excel workbook.
    
    Returns: deposits.xlsx
    """
    try:
        result = await service.export_all(report_filter)
    except ExportValidationError as e:
        raise HTTPException(status_code=422, detail=e.message)
    except ExportInProgressError as e:
        raise HTTPException(status_code=409, detail=e.message)
    except ExportError as e:
        raise HTTPException(status_code=502, detail=_error_detail(e))
    
    # The next export reuses the same file name
    path = Path(result.path)
    return Response(
        content=path.read_bytes(),
        media_type=XLSX_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{path.name}"'},
    )
