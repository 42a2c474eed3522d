"""Shared fixtures: a transport pointed at a fake backend and envelope helpers."""

import pytest
import respx

from sec_dashboard.client import ApiClient

ROOT_URL = "http://dashboard.test"
API_URL = f"{ROOT_URL}/api"


def envelope(data=None, message="", success=True):
    """Wrap ``data`` the way the backend wraps every JSON response."""
    return {"success": success, "message": message, "data": data, "timestamp": "2024-05-01T12:00:00Z"}


def page_of(content, page=0, size=20, total_elements=None, total_pages=None):
    total_elements = len(content) if total_elements is None else total_elements
    if total_pages is None:
        total_pages = -(-total_elements // size) if size else 0
    return {
        "content": content,
        "page": page,
        "size": size,
        "totalElements": total_elements,
        "totalPages": total_pages,
    }


def filing_json(n=1, form_type="10-K"):
    return {
        "id": f"f-{n}",
        "companyName": "Apple Inc.",
        "cik": "320193",
        "formType": form_type,
        "filingDate": "2023-11-03",
        "accessionNumber": f"0000320193-23-{n:06d}",
        "isXBRL": True,
        "isInlineXBRL": True,
    }


def job_json(job_id="job-1", status="IN_PROGRESS", progress=40):
    return {
        "id": job_id,
        "type": "TICKERS_ALL",
        "description": "Download all company tickers",
        "status": status,
        "progress": progress,
        "startedAt": "2024-05-01T12:00:00Z",
        "filesDownloaded": 1,
        "totalFiles": 3,
    }


@pytest.fixture
def backend():
    """respx router that intercepts every request to the fake backend."""
    with respx.mock(base_url=API_URL, assert_all_called=False) as router:
        yield router


@pytest.fixture
def api_client(backend):
    """ApiClient bound to the fake backend."""
    client = ApiClient(ROOT_URL, timeout=5.0)
    yield client
    client.close()
