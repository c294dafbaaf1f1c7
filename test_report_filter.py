"""Tests for filter snapshots and the query they produce."""

from datetime import date

import pytest

from deposit_report.models import DepositStatus, ReportFilter


def test_empty_filter_sends_only_paging():
    params = ReportFilter().to_query_params(page=1, page_size=10)
    assert params == {"page": 1, "pageSize": 10}


def test_full_filter_query_params():
    report_filter = ReportFilter(
        start_date=date(2024, 1, 1),
        end_date=date(2024, 1, 31),
        status=DepositStatus.PAID,
        search_query="pix",
    )
    assert report_filter.to_query_params(page=3, page_size=10) == {
        "page": 3,
        "pageSize": 10,
        "status": "paid",
        "startAt": "2024-01-01",
        "endAt": "2024-01-31",
        "search": "pix",
    }


def test_with_field_coerces_values_and_accepts_aliases():
    report_filter = ReportFilter().with_field("startDate", "2024-05-02").with_field("status", "expired")
    assert report_filter.start_date == date(2024, 5, 2)
    assert report_filter.status is DepositStatus.EXPIRED


def test_with_field_returns_new_snapshot():
    original = ReportFilter()
    updated = original.with_field("search_query", "abc")
    assert original.search_query == ""
    assert updated.search_query == "abc"


def test_with_field_none_search_means_empty():
    assert ReportFilter(search_query="abc").with_field("search_query", None).search_query == ""


def test_with_field_rejects_unknown_field():
    with pytest.raises(ValueError):
        ReportFilter().with_field("pageSize", 50)


def test_with_field_rejects_unknown_status():
    with pytest.raises(ValueError):
        ReportFilter().with_field("status", "refunded")


@pytest.mark.parametrize(
    "start,end,inverted",
    [
        (date(2024, 2, 1), date(2024, 1, 1), True),
        (date(2024, 1, 1), date(2024, 2, 1), False),
        (date(2024, 1, 1), date(2024, 1, 1), False),
        (date(2024, 2, 1), None, False),
        (None, date(2024, 1, 1), False),
    ],
)
def test_inverted_range(start, end, inverted):
    assert ReportFilter(start_date=start, end_date=end).has_inverted_range is inverted
