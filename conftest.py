"""Shared fixtures: an in-memory report source and a recording writer."""

import asyncio
from pathlib import Path
from typing import Any, Mapping, Optional, Sequence

import pytest

from deposit_report.datasources import DataSource
from deposit_report.errors import FetchError
from deposit_report.export import ArtifactWriter
from deposit_report.models import DepositPage, ReportedDeposit


class FakeDataSource(DataSource):
    """
    Serves canned pages and records every query it receives.
    
    A call can be held back by registering an asyncio.Event under its call
    index in `gates`; the response is decided before waiting on the gate.
    """

    def __init__(
        self,
        pages: Optional[dict[int, list[ReportedDeposit]]] = None,
        total_pages: Optional[int] = None,
        errors: Optional[dict[int, FetchError]] = None,
    ):
        self.pages = pages or {}
        self.total_pages = total_pages if total_pages is not None else max(len(self.pages), 1)
        self.errors = errors or {}
        self.calls: list[dict[str, Any]] = []
        self.gates: dict[int, asyncio.Event] = {}

    async def get_deposits_page(self, params: dict[str, Any]) -> DepositPage:
        index = len(self.calls)
        self.calls.append(dict(params))
        
        page = params["page"]
        error = self.errors.get(page)
        response = DepositPage(data=list(self.pages.get(page, [])), total_pages=self.total_pages)
        
        gate = self.gates.get(index)
        if gate is not None:
            await gate.wait()
        
        if error is not None:
            raise error
        return response

    @property
    def requested_pages(self) -> list[int]:
        return [call["page"] for call in self.calls]


class RecordingWriter(ArtifactWriter):
    """Keeps what it was asked to write instead of producing a file."""

    def __init__(self):
        self.records: Optional[list[ReportedDeposit]] = None
        self.columns: Optional[Mapping] = None
        self.writes = 0

    def write(self, records: Sequence[ReportedDeposit], columns: Mapping) -> Path:
        self.records = list(records)
        self.columns = columns
        self.writes += 1
        return Path("memory") / "deposits.xlsx"


def build_deposit(transaction_id: str = "tx-1", **overrides) -> ReportedDeposit:
    data = {
        "transactionId": transaction_id,
        "phone": "+5511999990000",
        "coldWallet": "bc1qexamplewallet",
        "network": "bitcoin",
        "paymentMethod": "pix",
        "documentId": "123.456.789-00",
        "transactionDate": "2024-01-15T10:30:00Z",
        "coupon": None,
        "valueBTC": 0.0015,
        "valueBRL": 500.0,
        "status": "paid",
        "discountValue": 10,
        "valueCollected": 450.0,
    }
    data.update(overrides)
    return ReportedDeposit.model_validate(data)


@pytest.fixture
def make_deposit():
    return build_deposit


@pytest.fixture
def make_page():
    """Build a list of `count` deposits with ids like 'p2-0', 'p2-1'."""
    def _make(page: int, count: int) -> list[ReportedDeposit]:
        return [build_deposit(f"p{page}-{i}") for i in range(count)]
    return _make


@pytest.fixture
def make_source():
    return FakeDataSource


@pytest.fixture
def recording_writer():
    return RecordingWriter()
