"""Data models for the dashboard backend's REST contract."""

from enum import Enum
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class ApiModel(BaseModel):
    """Base for wire DTOs: camelCase on the wire, unknown fields kept."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    def to_wire(self) -> dict[str, Any]:
        """Serialize for a request body, dropping unset optionals."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class ApiResponse(ApiModel, Generic[T]):
    """Envelope wrapping every JSON response."""

    success: bool
    message: str = ""
    data: T | None = None
    timestamp: str | None = None
    path: str | None = None


class Page(ApiModel, Generic[T]):
    """One page of a paginated result. Page numbers are 0-based."""

    content: list[T] = Field(default_factory=list)
    page: int = 0
    size: int = 0
    total_elements: int = 0
    total_pages: int = 0
    first: bool = True
    last: bool = True
    has_next: bool = False
    has_previous: bool = False

    @model_validator(mode="before")
    @classmethod
    def derive_flags(cls, data: Any) -> Any:
        """Fill in navigation flags the backend left out."""
        if not isinstance(data, dict):
            return data
        data = dict(data)
        page = data.get("page", 0) or 0
        total_pages = data.get("totalPages", data.get("total_pages", 0)) or 0
        first = page == 0
        last = page >= total_pages - 1
        data.setdefault("first", first)
        data.setdefault("last", last)
        if "hasNext" not in data and "has_next" not in data:
            data["hasNext"] = not data["last"]
        if "hasPrevious" not in data and "has_previous" not in data:
            data["hasPrevious"] = not data["first"]
        return data

    @classmethod
    def of(cls, content: list[T], page: int, size: int, total_elements: int) -> "Page[T]":
        """Build a page whose counts and flags agree with each other."""
        total_pages = -(-total_elements // size) if size > 0 else 0
        return cls(
            content=content,
            page=page,
            size=size,
            total_elements=total_elements,
            total_pages=total_pages,
        )


# Dashboard

class DashboardStats(ApiModel):
    total_filings: int = 0
    companies_tracked: int = 0
    last_sync: str | None = None
    filings_today_count: int = 0
    form4_count: int = 0
    form10_k_count: int = Field(0, alias="form10KCount")
    form10_q_count: int = Field(0, alias="form10QCount")


class RecentSearch(ApiModel):
    id: str
    query: str
    type: str
    timestamp: str | None = None
    result_count: int = 0


# Companies

class Address(ApiModel):
    street1: str | None = None
    street2: str | None = None
    city: str | None = None
    state_or_country: str | None = None
    zip_code: str | None = None


class CompanyListItem(ApiModel):
    """Row of the company list. ``ticker`` is one of possibly several tickers."""

    id: str
    name: str
    cik: str
    ticker: str | None = None
    sic: str | None = None
    sic_description: str | None = None
    state_of_incorporation: str | None = None
    filing_count: int = 0


class Company(CompanyListItem):
    entity_type: str | None = None
    state_of_incorporation_description: str | None = None
    fiscal_year_end: int | None = None
    ein: str | None = None
    description: str | None = None
    website: str | None = None
    investor_website: str | None = None
    category: str | None = None
    tickers: list[str] = Field(default_factory=list)
    exchanges: list[str] = Field(default_factory=list)
    business_address: Address | None = None
    mailing_address: Address | None = None
    has_insider_transactions: bool = False


class CompanySearchRequest(ApiModel):
    search_term: str | None = None
    ticker: str | None = None
    cik: str | None = None
    sic: str | None = None
    state_of_incorporation: str | None = None
    page: int | None = None
    size: int | None = None
    sort_by: str | None = None
    sort_dir: str | None = None


# Filings

class Filing(ApiModel):
    """A filing, identified by ``accession_number`` (NNNNNNNNNN-YY-NNNNNN)."""

    id: str
    company_name: str = ""
    cik: str
    form_type: str
    filing_date: str | None = None
    accession_number: str
    ticker: str | None = None
    form_type_description: str | None = None
    report_date: str | None = None
    primary_document: str | None = None
    primary_doc_description: str | None = None
    url: str | None = None
    is_xbrl: bool = Field(False, alias="isXBRL")
    is_inline_xbrl: bool = Field(False, alias="isInlineXBRL")
    word_hits: int | None = None


class FilingDetail(Filing):
    file_number: str | None = None
    film_number: str | None = None
    items: str | None = None
    content_preview: str | None = None
    document_tags: list[str] = Field(default_factory=list)


class FilingSearchRequest(ApiModel):
    company_name: str | None = None
    ticker: str | None = None
    cik: str | None = None
    form_types: list[str] | None = None
    date_from: str | None = None
    date_to: str | None = None
    keywords: list[str] | None = None
    page: int | None = None
    size: int | None = None
    sort_by: str | None = None
    sort_dir: str | None = None


# Downloads

class DownloadType(str, Enum):
    TICKERS_ALL = "TICKERS_ALL"
    TICKERS_NYSE = "TICKERS_NYSE"
    TICKERS_NASDAQ = "TICKERS_NASDAQ"
    TICKERS_MF = "TICKERS_MF"
    SUBMISSIONS = "SUBMISSIONS"
    BULK_SUBMISSIONS = "BULK_SUBMISSIONS"
    BULK_COMPANY_FACTS = "BULK_COMPANY_FACTS"


class JobStatus(str, Enum):
    PENDING = "PENDING"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"
    CANCELLED = "CANCELLED"

    @property
    def is_terminal(self) -> bool:
        return self not in (JobStatus.PENDING, JobStatus.IN_PROGRESS)


class DownloadRequest(ApiModel):
    type: DownloadType
    cik: str | None = None
    user_agent: str | None = None


class DownloadJob(ApiModel):
    """Server-side download job. The client only observes its status."""

    id: str
    type: str
    description: str = ""
    status: JobStatus
    progress: float = 0
    error: str | None = None
    started_at: str | None = None
    completed_at: str | None = None
    files_downloaded: int = 0
    total_files: int = 0
    estimated_size: str | None = None

    @property
    def is_active(self) -> bool:
        return not self.status.is_terminal


# Settings

class ApiEndpointsInfo(ApiModel):
    base_sec_url: str | None = None
    submissions_url: str | None = None
    edgar_archives_url: str | None = None
    company_tickers_url: str | None = None


class ConnectionStatus(ApiModel):
    connected: bool
    message: str = ""
    latency_ms: int = 0


class SettingsRequest(ApiModel):
    user_agent: str
    auto_refresh: bool
    refresh_interval: int
    dark_mode: bool
    email_notifications: bool


class Settings(SettingsRequest):
    api_endpoints: ApiEndpointsInfo | None = None
    mongo_db_status: ConnectionStatus | None = None
    elasticsearch_status: ConnectionStatus | None = None


# Export

class ExportFormat(str, Enum):
    CSV = "CSV"
    JSON = "JSON"


class ExportRequest(ApiModel):
    filing_ids: list[str] | None = None
    search_criteria: FilingSearchRequest | None = None
    format: ExportFormat


# Remote EDGAR

class TickerSource(str, Enum):
    ALL = "all"
    EXCHANGES = "exchanges"
    MF = "mf"


class RemoteTicker(ApiModel):
    cik: str
    ticker: str | None = None
    name: str | None = None
    exchange: str | None = None

    @field_validator("cik", mode="before")
    @classmethod
    def cik_as_string(cls, v: Any) -> str:
        """Backends may send the CIK as a number."""
        return str(v)


class RemoteSubmissionFiling(ApiModel):
    accession_number: str
    form_type: str | None = None
    filing_date: str | None = None
    report_date: str | None = None
    primary_document: str | None = None
    primary_doc_description: str | None = None


class RemoteSubmission(ApiModel):
    """Live submissions summary fetched from SEC through the backend."""

    cik: str
    company_name: str | None = None
    sic: str | None = None
    sic_description: str | None = None
    tickers: list[str] = Field(default_factory=list)
    exchanges: list[str] = Field(default_factory=list)
    recent_filings_count: int = 0
    recent_filings: list[RemoteSubmissionFiling] = Field(default_factory=list)
