"""Company list, company detail and company filings resources."""

from sec_dashboard.api.companies import CompaniesApi
from sec_dashboard.config import DEFAULT_PAGE_SIZE
from sec_dashboard.models import Company, CompanyListItem, CompanySearchRequest, Filing
from sec_dashboard.resources.base import Resource, SearchResource

DEFAULT_COMPANY_QUERY = {"page": 0, "size": DEFAULT_PAGE_SIZE, "sort_by": "name", "sort_dir": "asc"}


class CompanyBrowser(SearchResource[CompanyListItem]):
    """
    Paged, sortable company list.

    ``params`` is the request that produced the current page; every mutator
    updates it and reloads. A failed load empties the list.
    """

    def __init__(self, api: CompaniesApi, params: CompanySearchRequest | None = None):
        super().__init__(reset_on_error=True)
        self._api = api
        initial = params.model_dump(exclude_none=True) if params is not None else {}
        self.params = CompanySearchRequest(**{**DEFAULT_COMPANY_QUERY, **initial})

    @property
    def companies(self) -> list[CompanyListItem]:
        return self.items

    def load(self) -> "CompanyBrowser":
        params = self.params
        return self._search(lambda: self._api.get_companies(params), "Failed to load companies")

    refresh = load

    def search(self, search_term: str | None = None, name: str | None = None, page: int | None = None, **changes):
        """
        Search by name. ``name`` is accepted as an alias of ``search_term``;
        when neither is given the previous term is kept. Jumps to ``page``
        (first page by default).
        """
        term = search_term if search_term is not None else name
        if term is None:
            term = self.params.search_term
        self.params = self.params.model_copy(
            update={**changes, "search_term": term, "page": page if page is not None else 0}
        )
        return self.load()

    def set_page(self, page: int):
        self.params = self.params.model_copy(update={"page": page})
        return self.load()

    def set_page_size(self, size: int):
        self.params = self.params.model_copy(update={"size": size, "page": 0})
        return self.load()

    def set_sort(self, sort_by: str, sort_dir: str):
        self.params = self.params.model_copy(update={"sort_by": sort_by, "sort_dir": sort_dir})
        return self.load()


def company(api: CompaniesApi, company_id: str | None) -> Resource[Company]:
    fetch = (lambda: api.get_company_by_id(company_id)) if company_id else None
    return Resource(fetch, fallback="Failed to load company")


def company_by_cik(api: CompaniesApi, cik: str | None) -> Resource[Company]:
    fetch = (lambda: api.get_company_by_cik(cik)) if cik else None
    return Resource(fetch, fallback="Failed to load company")


class CompanyFilings(SearchResource[Filing]):
    """Filings of one company, fetched on demand by CIK."""

    def __init__(self, api: CompaniesApi):
        super().__init__(reset_on_error=True)
        self._api = api

    @property
    def filings(self) -> list[Filing]:
        return self.items

    def fetch_by_company(self, cik: str | None, page: int = 0, size: int = 10):
        if not cik:
            with self._lock:
                self._ticket += 1
                self._reset()
                self.loading = False
            return self
        return self._search(
            lambda: self._api.get_company_filings_by_cik(cik, page, size), "Failed to load company filings"
        )
