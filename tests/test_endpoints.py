"""Tests for the endpoint modules: paths, query strings and response parsing."""

import json

import pytest

from sec_dashboard.api.base import query, segment
from sec_dashboard.api.companies import CompaniesApi
from sec_dashboard.api.dashboard import DashboardApi
from sec_dashboard.api.downloads import DownloadsApi
from sec_dashboard.api.export import ExportApi
from sec_dashboard.api.filings import FilingsApi
from sec_dashboard.api.form13dg import Form13DGApi
from sec_dashboard.api.form13f import Form13FApi
from sec_dashboard.api.forms import Form3Api, Form8KApi, Form20FApi
from sec_dashboard.api.remote_edgar import RemoteEdgarApi
from sec_dashboard.api.settings import SettingsApi
from sec_dashboard.api.xbrl import XbrlApi
from sec_dashboard.client import ApiError
from sec_dashboard.forms import Form8K, ScheduleType
from sec_dashboard.models import (
    CompanyListItem,
    CompanySearchRequest,
    DownloadRequest,
    DownloadType,
    ExportFormat,
    ExportRequest,
    FilingSearchRequest,
    JobStatus,
    SettingsRequest,
    TickerSource,
)

from conftest import envelope, filing_json, job_json, page_of


def company_json(n):
    return {"id": f"c-{n}", "name": f"Apple {n}", "cik": "320193", "ticker": "AAPL", "filingCount": 10}


class TestQueryHelpers:
    """Tests for query string and path helpers."""

    def test_query_drops_undefined(self):
        """Test that None and empty strings are dropped but 0 and False kept."""
        assert query(a=None, b="", c=0, d=False, e="x") == {"c": 0, "d": "false", "e": "x"}

    def test_query_keeps_order(self):
        """Test that parameters keep their keyword order."""
        assert list(query(page=1, size=5, search="Apple")) == ["page", "size", "search"]

    def test_query_enum_value(self):
        """Test that enums are sent by value."""
        assert query(type=DownloadType.TICKERS_MF) == {"type": "TICKERS_MF"}

    def test_segment_encodes(self):
        """Test that path segments are percent-encoded."""
        assert segment("BRK/A B") == "BRK%2FA%20B"

    @pytest.mark.parametrize("value", ["", "   ", None])
    def test_segment_rejects_blank(self, value):
        """Test that blank identifiers raise ValueError."""
        with pytest.raises(ValueError, match="CIK cannot be empty"):
            segment(value, "CIK")


class TestResponseShape:
    """Tests that payloads of the wrong shape surface as ApiError."""

    def test_list_endpoint_scalar(self, api_client, backend):
        """Test that a scalar where a list is expected raises ApiError."""
        backend.get("/downloads/jobs/active").respond(json=envelope(42))

        with pytest.raises(ApiError, match="expected a list of DownloadJob, got int"):
            DownloadsApi(api_client).get_active_jobs()

    def test_list_endpoint_null_is_empty(self, api_client, backend):
        """Test that a null list payload reads as no items."""
        backend.get("/downloads/jobs/active").respond(json=envelope(None))

        assert DownloadsApi(api_client).get_active_jobs() == []

    def test_invalid_item(self, api_client, backend):
        """Test that an object missing required fields raises ApiError."""
        backend.get("/companies/c-1").respond(json=envelope({"id": "c-1"}))

        with pytest.raises(ApiError, match="not a valid Company"):
            CompaniesApi(api_client).get_company_by_id("c-1")

    def test_invalid_page(self, api_client, backend):
        """Test that a page whose content is not a list raises ApiError."""
        backend.get("/companies").respond(json=envelope({"content": "nope"}))

        with pytest.raises(ApiError, match="not a valid page of CompanyListItem"):
            CompaniesApi(api_client).get_companies()


class TestCompaniesApi:
    """Tests for company endpoints."""

    def test_get_companies_query(self, api_client, backend):
        """Test that only the given parameters are sent, in order."""
        route = backend.get("/companies").respond(json=envelope(page_of([company_json(i) for i in range(5)], page=1, size=5, total_elements=12)))

        page = CompaniesApi(api_client).get_companies(CompanySearchRequest(search_term="Apple", page=1, size=5))

        request = route.calls.last.request
        assert request.url.path == "/api/companies"
        assert request.url.query == b"search=Apple&page=1&size=5"
        assert len(page.content) <= 5
        assert isinstance(page.content[0], CompanyListItem)
        assert page.total_pages == 3
        assert page.has_previous is True

    def test_get_companies_defaults(self, api_client, backend):
        """Test that an empty request sends no query string."""
        route = backend.get("/companies").respond(json=envelope(page_of([])))

        CompaniesApi(api_client).get_companies()

        assert route.calls.last.request.url.query == b""

    def test_company_by_cik(self, api_client, backend):
        """Test lookup by CIK."""
        backend.get("/companies/cik/320193").respond(json=envelope({**company_json(1), "tickers": ["AAPL"]}))

        company = CompaniesApi(api_client).get_company_by_cik("320193")

        assert company.tickers == ["AAPL"]

    def test_company_by_ticker_encoded(self, api_client, backend):
        """Test that ticker path segments are encoded."""
        route = backend.route().respond(json=envelope(company_json(1)))

        CompaniesApi(api_client).get_company_by_ticker("BRK/A")

        assert route.calls.last.request.url.raw_path == b"/api/companies/ticker/BRK%2FA"

    def test_company_filings_by_cik(self, api_client, backend):
        """Test that company filings default to page 0, size 10."""
        route = backend.get("/companies/cik/320193/filings").respond(json=envelope(page_of([filing_json()], size=10)))

        page = CompaniesApi(api_client).get_company_filings_by_cik("320193")

        assert route.calls.last.request.url.query == b"page=0&size=10"
        assert page.content[0].form_type == "10-K"

    def test_empty_id_rejected(self, api_client):
        """Test that a blank id never reaches the network."""
        with pytest.raises(ValueError):
            CompaniesApi(api_client).get_company_by_id("  ")


class TestFilingsApi:
    """Tests for filing endpoints."""

    def test_get_filings_only_defined_params(self, api_client, backend):
        """Test that get_filings(cik=...) omits the other filters entirely."""
        route = backend.get("/filings").respond(json=envelope(page_of([filing_json()])))

        FilingsApi(api_client).get_filings(cik="320193")

        url = str(route.calls.last.request.url)
        assert "cik=320193" in url
        for absent in ("formType", "dateFrom", "dateTo", "undefined", "None"):
            assert absent not in url

    def test_search_filings_body(self, api_client, backend):
        """Test that the search request is posted in camelCase without nulls."""
        route = backend.post("/filings/search").respond(json=envelope(page_of([filing_json()])))

        FilingsApi(api_client).search_filings(FilingSearchRequest(form_types=["10-K", "10-Q"], page=0, size=10))

        assert json.loads(route.calls.last.request.content) == {"formTypes": ["10-K", "10-Q"], "page": 0, "size": 10}

    def test_recent_filings(self, api_client, backend):
        """Test the recent filings list and its default limit."""
        route = backend.get("/filings/recent").respond(json=envelope([filing_json(1), filing_json(2)]))

        filings = FilingsApi(api_client).get_recent_filings()

        assert route.calls.last.request.url.params["limit"] == "10"
        assert [f.id for f in filings] == ["f-1", "f-2"]

    def test_filing_by_accession(self, api_client, backend):
        """Test lookup by accession number."""
        backend.get("/filings/accession/0000320193-23-000106").respond(
            json=envelope({**filing_json(106), "contentPreview": "Annual report"})
        )

        detail = FilingsApi(api_client).get_filing_by_accession_number("0000320193-23-000106")

        assert detail.content_preview == "Annual report"

    def test_null_list_is_empty(self, api_client, backend):
        """Test that a list endpoint returning null data yields an empty list."""
        backend.get("/filings/recent").respond(json=envelope(None))

        assert FilingsApi(api_client).get_recent_filings() == []


class TestDashboardApi:
    """Tests for dashboard endpoints."""

    def test_stats(self, api_client, backend):
        """Test stats parsing."""
        backend.get("/dashboard/stats").respond(json=envelope({"totalFilings": 1000, "companiesTracked": 50}))

        stats = DashboardApi(api_client).get_stats()

        assert stats.total_filings == 1000
        assert stats.companies_tracked == 50

    def test_recent_searches_limit(self, api_client, backend):
        """Test that the limit is passed through."""
        route = backend.get("/dashboard/recent-searches").respond(
            json=envelope([{"id": "s1", "query": "AAPL", "type": "ticker", "resultCount": 3}])
        )

        searches = DashboardApi(api_client).get_recent_searches(5)

        assert route.calls.last.request.url.params["limit"] == "5"
        assert searches[0].result_count == 3


class TestDownloadsApi:
    """Tests for download job endpoints."""

    def test_download_tickers_type(self, api_client, backend):
        """Test that the ticker type travels as a query parameter."""
        route = backend.post("/downloads/tickers").respond(json=envelope(job_json(status="PENDING")))

        job = DownloadsApi(api_client).download_tickers(DownloadType.TICKERS_NYSE)

        assert route.calls.last.request.url.params["type"] == "TICKERS_NYSE"
        assert job.status is JobStatus.PENDING

    def test_download_submissions_body(self, api_client, backend):
        """Test the submissions request body."""
        route = backend.post("/downloads/submissions").respond(json=envelope(job_json()))

        DownloadsApi(api_client).download_submissions(" 320193 ", user_agent="Me me@example.com")

        assert json.loads(route.calls.last.request.content) == {
            "type": "SUBMISSIONS",
            "cik": "320193",
            "userAgent": "Me me@example.com",
        }

    def test_download_submissions_requires_cik(self, api_client):
        """Test that an empty CIK is rejected locally."""
        with pytest.raises(ValueError, match="CIK cannot be empty"):
            DownloadsApi(api_client).download_submissions("")

    def test_download_bulk(self, api_client, backend):
        """Test bulk download requests."""
        route = backend.post("/downloads/bulk").respond(json=envelope(job_json()))

        DownloadsApi(api_client).download_bulk(DownloadRequest(type=DownloadType.BULK_COMPANY_FACTS))

        assert json.loads(route.calls.last.request.content) == {"type": "BULK_COMPANY_FACTS"}

    def test_active_jobs(self, api_client, backend):
        """Test the active jobs path."""
        backend.get("/downloads/jobs/active").respond(json=envelope([job_json()]))

        jobs = DownloadsApi(api_client).get_active_jobs()

        assert jobs[0].is_active

    def test_cancel_job(self, api_client, backend):
        """Test that cancelling issues a DELETE on the job."""
        route = backend.delete("/downloads/jobs/job-1").respond(json=envelope(None, message="Job cancelled"))

        assert DownloadsApi(api_client).cancel_job("job-1") is None
        assert route.call_count == 1


class TestSettingsApi:
    """Tests for settings endpoints."""

    def test_update_settings_put(self, api_client, backend):
        """Test that settings are saved with PUT."""
        body = {"userAgent": "ua", "autoRefresh": False, "refreshInterval": 60, "darkMode": True, "emailNotifications": False}
        route = backend.put("/settings").respond(json=envelope(body))

        saved = SettingsApi(api_client).update_settings(SettingsRequest.model_validate(body))

        assert json.loads(route.calls.last.request.content) == body
        assert saved.dark_mode is True

    def test_health_checks(self, api_client, backend):
        """Test both connection health checks."""
        backend.get("/settings/health/mongodb").respond(json=envelope({"connected": True, "latencyMs": 2}))
        backend.get("/settings/health/elasticsearch").respond(json=envelope({"connected": False, "message": "refused"}))

        api = SettingsApi(api_client)

        assert api.check_mongodb_health().connected is True
        assert api.check_elasticsearch_health().message == "refused"


class TestExportApi:
    """Tests for exports written to disk."""

    def test_export_csv_by_criteria(self, api_client, backend, tmp_path):
        """Test the exact request body and the saved file name."""
        route = backend.post("/export/csv").respond(200, content=b"accessionNumber,formType\n1,10-K\n")
        request = ExportRequest(
            search_criteria=FilingSearchRequest.model_validate({"formType": "10-K"}),
            format=ExportFormat.CSV,
        )

        path = ExportApi(api_client, tmp_path).export_to_csv(request)

        assert json.loads(route.calls.last.request.content) == {"searchCriteria": {"formType": "10-K"}, "format": "CSV"}
        assert path == tmp_path / "filings-export.csv"
        assert path.read_bytes() == b"accessionNumber,formType\n1,10-K\n"

    def test_export_json_directory_override(self, api_client, backend, tmp_path):
        """Test that a per-call directory wins over the default."""
        backend.post("/export/json").respond(200, content=b"[]")

        path = ExportApi(api_client, tmp_path / "default").export_to_json(
            ExportRequest(filing_ids=["f-1"], format=ExportFormat.JSON), directory=tmp_path / "other"
        )

        assert path == tmp_path / "other" / "filings-export.json"
        assert path.read_text() == "[]"


class TestXbrlApi:
    """Tests for XBRL endpoints."""

    def test_parse_from_url(self, api_client, backend):
        """Test that the document URL is sent as a query parameter."""
        url = "https://www.sec.gov/Archives/edgar/data/320193/000032019323000106/aapl-20230930_htm.xml"
        route = backend.get("/xbrl/parse").respond(json=envelope({"totalFacts": 1200, "format": "INLINE_XBRL"}))

        summary = XbrlApi(api_client).parse_from_url(url)

        assert route.calls.last.request.url.params["url"] == url
        assert summary.total_facts == 1200

    def test_empty_url_rejected(self, api_client):
        """Test that a blank URL is rejected before any request."""
        with pytest.raises(ValueError, match="URL cannot be empty"):
            XbrlApi(api_client).get_statements(" ")

    def test_search_facts(self, api_client, backend):
        """Test the fact search query."""
        route = backend.get("/xbrl/facts/search").respond(json=envelope([{"concept": "Revenues", "value": 383285000000}]))

        facts = XbrlApi(api_client).search_facts("https://example.test/x.xml", "Revenue")

        assert route.calls.last.request.url.params["query"] == "Revenue"
        assert facts[0].concept == "Revenues"

    def test_financials_dict(self, api_client, backend):
        """Test that key financials come back as a plain mapping."""
        backend.get("/xbrl/financials").respond(json=envelope({"NetIncomeLoss": 96995000000}))

        assert XbrlApi(api_client).get_financials_from_url("https://example.test/x.xml") == {"NetIncomeLoss": 96995000000}


class TestForm13FApi:
    """Tests for 13F endpoints."""

    def test_compare_holdings(self, api_client, backend):
        """Test the comparison path and both periods."""
        route = backend.get("/form13f/cik/1067983/compare").respond(json=envelope({"cik": "1067983"}))

        Form13FApi(api_client).compare_holdings("1067983", "2024-03-31", "2024-06-30")

        assert route.calls.last.request.url.query == b"period1=2024-03-31&period2=2024-06-30"

    def test_by_cik_default_page_size(self, api_client, backend):
        """Test that form lists default to 20 per page."""
        route = backend.get("/form13f/cik/1067983").respond(json=envelope(page_of([])))

        Form13FApi(api_client).get_by_cik("1067983")

        assert route.calls.last.request.url.query == b"page=0&size=20"

    def test_holdings(self, api_client, backend):
        """Test holdings of one report."""
        backend.get("/form13f/accession/0000950123-24-008740/holdings").respond(
            json=envelope([{"nameOfIssuer": "APPLE INC", "cusip": "037833100", "value": 1000, "otherManager": 4}])
        )

        holdings = Form13FApi(api_client).get_holdings("0000950123-24-008740")

        assert holdings[0].cusip == "037833100"
        assert holdings[0].other_manager == 4


class TestForm13DGApi:
    """Tests for 13D/13G endpoints."""

    def test_schedule_type_path(self, api_client, backend):
        """Test that the schedule type is part of the path."""
        route = backend.get("/form13dg/schedule/13D").respond(json=envelope(page_of([])))

        Form13DGApi(api_client).get_by_schedule_type(ScheduleType.SCHEDULE_13D)

        assert route.called

    def test_invalid_schedule_type(self, api_client):
        """Test that only 13D and 13G are accepted."""
        with pytest.raises(ValueError):
            Form13DGApi(api_client).get_by_schedule_type("13F")

    def test_threshold_path(self, api_client, backend):
        """Test that whole-number thresholds print without a decimal point."""
        route = backend.get("/form13dg/threshold/5").respond(json=envelope(page_of([])))

        Form13DGApi(api_client).get_above_threshold(5.0)

        assert route.called

    def test_ownership_history(self, api_client, backend):
        """Test the nested history path."""
        route = backend.get("/form13dg/cusip/037833100/filer/1067983/history").respond(
            json=envelope([{"accessionNumber": "a", "percentOfClass": 5.8}])
        )

        history = Form13DGApi(api_client).get_ownership_history("037833100", "1067983")

        assert route.called
        assert history[0].percent_of_class == 5.8

    def test_filer_name_search(self, api_client, backend):
        """Test name search parameters."""
        route = backend.get("/form13dg/filer/search").respond(json=envelope(page_of([])))

        Form13DGApi(api_client).search_by_filer_name("Icahn")

        assert route.calls.last.request.url.query == b"name=Icahn&page=0&size=20"


class TestFormApis:
    """Tests for the shared 8-K/3/5/6-K/20-F endpoints."""

    def test_8k_download_and_parse(self, api_client, backend):
        """Test the download request with 8-K specific fields."""
        route = backend.post("/form8k/download").respond(json=envelope({"accessionNumber": "0000320193-24-000069", "items": "2.02,9.01"}))

        form = Form8KApi(api_client).download_and_parse(
            "320193", "0000320193-24-000069", "aapl-20240502.htm", company_name="Apple Inc.", items="2.02,9.01"
        )

        params = route.calls.last.request.url.params
        assert params["cik"] == "320193"
        assert params["accessionNumber"] == "0000320193-24-000069"
        assert params["primaryDocument"] == "aapl-20240502.htm"
        assert params["companyName"] == "Apple Inc."
        assert params["items"] == "2.02,9.01"
        assert "reportDate" not in params
        assert isinstance(form, Form8K)
        assert form.item_numbers() == ["2.02", "9.01"]

    def test_form3_rejects_foreign_fields(self, api_client):
        """Test that fields another form type accepts are refused."""
        with pytest.raises(TypeError):
            Form3Api(api_client).download_and_parse("1", "a", "doc.xml", items="2.02")

    def test_symbol_upper_cased(self, api_client, backend):
        """Test lookups by trading symbol."""
        route = backend.get("/form20f/symbol/TSM").respond(json=envelope(page_of([{"accessionNumber": "x", "fiscalYear": 2023}])))

        page = Form20FApi(api_client).get_by_symbol("tsm")

        assert route.called
        assert page.content[0].fiscal_year == 2023

    def test_date_range(self, api_client, backend):
        """Test date range parameters."""
        route = backend.get("/form8k/date-range").respond(json=envelope(page_of([])))

        Form8KApi(api_client).get_by_date_range("2024-01-01", "2024-03-31", page=2)

        assert route.calls.last.request.url.query == b"startDate=2024-01-01&endDate=2024-03-31&page=2&size=20"


class TestRemoteEdgarApi:
    """Tests for live EDGAR lookups."""

    def test_tickers_only_given_params(self, api_client, backend):
        """Test that unset filters are left off."""
        route = backend.get("/remote-edgar/tickers").respond(json=envelope([{"cik": 320193, "ticker": "AAPL"}]))

        tickers = RemoteEdgarApi(api_client).get_tickers(source=TickerSource.EXCHANGES, search="apple")

        assert route.calls.last.request.url.query == b"source=exchanges&search=apple"
        assert tickers[0].cik == "320193"

    def test_submission_by_cik(self, api_client, backend):
        """Test the submissions path and filings limit."""
        route = backend.get("/remote-edgar/submissions/0000320193").respond(
            json=envelope({"cik": "0000320193", "companyName": "Apple Inc.", "recentFilings": [{"accessionNumber": "a", "formType": "10-K"}]})
        )

        submission = RemoteEdgarApi(api_client).get_submission_by_cik("0000320193")

        assert route.calls.last.request.url.params["filingsLimit"] == "50"
        assert submission.recent_filings[0].form_type == "10-K"
