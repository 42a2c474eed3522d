"""Tests for wire models."""

import pytest
from pydantic import ValidationError

from sec_dashboard.forms import Form13DG, Form8K, ScheduleType
from sec_dashboard.models import (
    DashboardStats,
    DownloadJob,
    ExportFormat,
    ExportRequest,
    Filing,
    FilingSearchRequest,
    JobStatus,
    Page,
    RemoteTicker,
    Settings,
)

from conftest import filing_json, job_json


class TestPage:
    """Tests for Page navigation flags."""

    def test_flags_derived_when_missing(self):
        """Test that first/last/hasNext/hasPrevious follow page and totalPages."""
        page = Page[Filing].model_validate({"content": [], "page": 1, "size": 10, "totalElements": 35, "totalPages": 4})

        assert page.first is False
        assert page.last is False
        assert page.has_next is True
        assert page.has_previous is True

    def test_last_page(self):
        """Test flags on the final page."""
        page = Page[Filing].model_validate({"page": 3, "size": 10, "totalElements": 35, "totalPages": 4})

        assert page.last is True
        assert page.has_next is False
        assert page.has_previous is True

    def test_backend_flags_win(self):
        """Test that flags the backend sends are not overwritten."""
        page = Page[Filing].model_validate(
            {"page": 0, "size": 10, "totalElements": 0, "totalPages": 0, "first": True, "last": False, "hasNext": True}
        )

        assert page.last is False
        assert page.has_next is True

    def test_of_is_consistent(self):
        """Test that Page.of computes totals and flags that agree."""
        page = Page.of(["a", "b"], page=0, size=2, total_elements=5)

        assert page.total_pages == 3
        assert page.first and not page.last
        assert page.has_next and not page.has_previous
        assert len(page.content) <= page.size

    def test_of_single_page(self):
        """Test that a single page is both first and last."""
        page = Page.of(["a"], page=0, size=20, total_elements=1)

        assert page.total_pages == 1
        assert page.first and page.last

    def test_content_validated(self):
        """Test that page content is parsed into the item model."""
        page = Page[Filing].model_validate({"content": [filing_json()], "page": 0, "size": 20, "totalElements": 1, "totalPages": 1})

        assert isinstance(page.content[0], Filing)
        assert page.content[0].accession_number == "0000320193-23-000001"


class TestWireFormat:
    """Tests for camelCase aliases and serialization."""

    def test_filing_aliases(self):
        """Test that XBRL flags use the backend's upper-case aliases."""
        filing = Filing.model_validate(filing_json())

        assert filing.is_xbrl is True
        assert filing.is_inline_xbrl is True
        assert filing.form_type == "10-K"

    def test_unknown_fields_preserved(self):
        """Test that backend fields the client doesn't declare are kept."""
        filing = Filing.model_validate({**filing_json(), "fiscalYearFocus": 2023})

        assert filing.model_extra == {"fiscalYearFocus": 2023}

    def test_to_wire_drops_none(self):
        """Test that unset optionals never reach the request body."""
        request = FilingSearchRequest(cik="320193", form_types=["10-K"], page=0)

        assert request.to_wire() == {"cik": "320193", "formTypes": ["10-K"], "page": 0}

    def test_export_request_body(self):
        """Test that an export by criteria serializes without filingIds."""
        request = ExportRequest(
            search_criteria=FilingSearchRequest.model_validate({"formType": "10-K"}),
            format=ExportFormat.CSV,
        )

        assert request.to_wire() == {"searchCriteria": {"formType": "10-K"}, "format": "CSV"}

    def test_dashboard_stats_form_counts(self):
        """Test the form count aliases that camelCase can't derive."""
        stats = DashboardStats.model_validate({"totalFilings": 10, "form10KCount": 3, "form10QCount": 4})

        assert stats.form10_k_count == 3
        assert stats.form10_q_count == 4

    def test_settings_nested_status(self):
        """Test that connection statuses parse into models."""
        settings = Settings.model_validate({
            "userAgent": "ua",
            "autoRefresh": True,
            "refreshInterval": 60,
            "darkMode": False,
            "emailNotifications": False,
            "mongoDbStatus": {"connected": True, "message": "ok", "latencyMs": 3},
        })

        assert settings.mongo_db_status.connected is True
        assert settings.mongo_db_status.latency_ms == 3

    def test_remote_ticker_numeric_cik(self):
        """Test that a numeric CIK is kept as a string."""
        assert RemoteTicker.model_validate({"cik": 320193, "ticker": "AAPL"}).cik == "320193"

    def test_filing_requires_accession(self):
        """Test that a filing without an accession number is rejected."""
        data = filing_json()
        del data["accessionNumber"]

        with pytest.raises(ValidationError):
            Filing.model_validate(data)


class TestJobs:
    """Tests for download job status helpers."""

    @pytest.mark.parametrize("status", ["COMPLETED", "FAILED", "CANCELLED"])
    def test_terminal_statuses(self, status):
        """Test that finished jobs are not active."""
        job = DownloadJob.model_validate(job_json(status=status))

        assert job.status.is_terminal
        assert not job.is_active

    @pytest.mark.parametrize("status", ["PENDING", "IN_PROGRESS"])
    def test_active_statuses(self, status):
        """Test that pending and running jobs are active."""
        assert DownloadJob.model_validate(job_json(status=status)).is_active

    def test_unknown_status_rejected(self):
        """Test that statuses outside the enum fail validation."""
        with pytest.raises(ValidationError):
            DownloadJob.model_validate(job_json(status="PAUSED"))

    def test_status_values(self):
        """Test the enum's wire values."""
        assert [s.value for s in JobStatus] == ["PENDING", "IN_PROGRESS", "COMPLETED", "FAILED", "CANCELLED"]


class TestForms:
    """Tests for form-specific helpers."""

    def test_8k_item_numbers(self):
        """Test that the items field splits on commas and semicolons."""
        form = Form8K.model_validate({"accessionNumber": "0000320193-24-000001", "items": "2.02, 9.01;5.02 ,"})

        assert form.item_numbers() == ["2.02", "9.01", "5.02"]

    def test_8k_without_items(self):
        """Test that a filing without items has none."""
        assert Form8K.model_validate({"accessionNumber": "x"}).item_numbers() == []

    def test_13d_is_activist(self):
        """Test that only Schedule 13D filings count as activist."""
        assert Form13DG.model_validate({"accessionNumber": "a", "scheduleType": "13D"}).is_activist
        assert not Form13DG.model_validate({"accessionNumber": "b", "scheduleType": "13G"}).is_activist
        assert ScheduleType("13G") is ScheduleType.SCHEDULE_13G
