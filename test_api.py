"""Tests for the HTTP API surface."""

import io

import pandas as pd
import pytest
from fastapi.testclient import TestClient

from deposit_report.app import create_app
from deposit_report.config import Config
from deposit_report.errors import FetchError


@pytest.fixture
def client_for(tmp_path):
    def _client(source) -> TestClient:
        config = Config(export_dir=str(tmp_path))
        return TestClient(create_app(config=config, datasource=source))
    return _client


def test_health(client_for, make_source):
    with client_for(make_source()) as client:
        assert client.get("/health").json() == {"status": "healthy"}


def test_get_deposits_page(client_for, make_source, make_page):
    source = make_source(pages={2: make_page(2, 4)}, total_pages=2)
    
    with client_for(source) as client:
        response = client.get(
            "/v1/reports/deposits",
            params={"page": 2, "status": "paid", "startAt": "2024-01-01"},
        )
    
    assert response.status_code == 200
    body = response.json()
    assert body["totalPages"] == 2
    assert [d["transactionId"] for d in body["data"]] == [f"p2-{i}" for i in range(4)]
    assert source.calls == [{"page": 2, "pageSize": 10, "status": "paid", "startAt": "2024-01-01"}]


def test_get_deposits_page_not_found_is_empty(client_for, make_source):
    source = make_source(errors={1: FetchError("NOT_FOUND")})
    
    with client_for(source) as client:
        response = client.get("/v1/reports/deposits")
    
    assert response.status_code == 200
    assert response.json() == {"data": [], "totalPages": 1}


def test_get_deposits_page_error(client_for, make_source):
    source = make_source(errors={1: FetchError("INTERNAL", "boom")})
    
    with client_for(source) as client:
        response = client.get("/v1/reports/deposits")
    
    assert response.status_code == 502
    assert response.json()["detail"] == {"code": "INTERNAL", "message": "boom"}


def test_get_deposits_page_rejects_page_zero(client_for, make_source):
    with client_for(make_source()) as client:
        assert client.get("/v1/reports/deposits", params={"page": 0}).status_code == 422


def test_export_returns_workbook(client_for, make_source, make_page, tmp_path):
    source = make_source(pages={1: make_page(1, 10), 2: make_page(2, 2)}, total_pages=2)
    
    with client_for(source) as client:
        response = client.get("/v1/reports/deposits/export", params={"search": "pix"})
    
    assert response.status_code == 200
    assert "deposits.xlsx" in response.headers["content-disposition"]
    assert response.content == (tmp_path / "deposits.xlsx").read_bytes()
    df = pd.read_excel(io.BytesIO(response.content), sheet_name="Deposits")
    assert len(df) == 12
    assert all(call["search"] == "pix" for call in source.calls)


def test_export_invalid_range(client_for, make_source):
    source = make_source()
    
    with client_for(source) as client:
        response = client.get(
            "/v1/reports/deposits/export",
            params={"startAt": "2024-02-01", "endAt": "2024-01-01"},
        )
    
    assert response.status_code == 422
    assert source.calls == []


def test_export_failure(client_for, make_source, make_page, tmp_path):
    source = make_source(pages={1: make_page(1, 10)}, total_pages=2, errors={2: FetchError("INTERNAL")})
    
    with client_for(source) as client:
        response = client.get("/v1/reports/deposits/export")
    
    assert response.status_code == 502
    assert response.json()["detail"]["code"] == "INTERNAL"
    assert not (tmp_path / "deposits.xlsx").exists()
