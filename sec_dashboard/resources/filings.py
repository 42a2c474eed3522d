"""Filing search and filing detail resources."""

from sec_dashboard.api.filings import FilingsApi
from sec_dashboard.models import Filing, FilingDetail, FilingSearchRequest
from sec_dashboard.resources.base import Resource, SearchResource

DEFAULT_FILING_QUERY = {"page": 0, "size": 10, "sort_by": "filingDate", "sort_dir": "desc"}


class FilingSearch(SearchResource[Filing]):
    """
    Full-text filing search.

    The request is edited with ``update_request`` and friends; nothing is
    sent until ``search`` runs it. Changing any criterion other than the page
    moves back to the first page.
    """

    def __init__(self, api: FilingsApi, request: FilingSearchRequest | None = None):
        super().__init__()
        self._api = api
        initial = request.model_dump(exclude_none=True) if request is not None else {}
        self.request = FilingSearchRequest(**{**DEFAULT_FILING_QUERY, **initial})

    @property
    def filings(self) -> list[Filing]:
        return self.items

    def update_request(self, **updates) -> FilingSearchRequest:
        if "page" not in updates and updates:
            updates["page"] = 0
        self.request = self.request.model_copy(update=updates)
        return self.request

    def set_page(self, page: int) -> FilingSearchRequest:
        self.request = self.request.model_copy(update={"page": page})
        return self.request

    def set_page_size(self, size: int) -> FilingSearchRequest:
        self.request = self.request.model_copy(update={"size": size, "page": 0})
        return self.request

    def set_sort(self, sort_by: str, sort_dir: str) -> FilingSearchRequest:
        self.request = self.request.model_copy(update={"sort_by": sort_by, "sort_dir": sort_dir})
        return self.request

    def search(self):
        request = self.request
        return self._search(lambda: self._api.search_filings(request), "Failed to search filings")


def filing(api: FilingsApi, filing_id: str | None) -> Resource[FilingDetail]:
    fetch = (lambda: api.get_filing_by_id(filing_id)) if filing_id else None
    return Resource(fetch, fallback="Failed to load filing")


def filing_by_accession(api: FilingsApi, accession_number: str | None) -> Resource[FilingDetail]:
    fetch = (lambda: api.get_filing_by_accession_number(accession_number)) if accession_number else None
    return Resource(fetch, fallback="Failed to load filing")


def recent_filings(api: FilingsApi, limit: int = 10) -> Resource[list[Filing]]:
    return Resource(lambda: api.get_recent_filings(limit), default=[], fallback="Failed to load recent filings")
