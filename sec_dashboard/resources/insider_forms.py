"""Resources shared by the 8-K, 3, 5, 6-K and 20-F form families."""

from sec_dashboard.api.forms import FormApi
from sec_dashboard.forms import FormFiling
from sec_dashboard.models import Page
from sec_dashboard.resources.base import Resource, SearchResource


class FormLoaders:
    """Keyed loaders for one form family. A missing key yields an idle resource."""

    def __init__(self, api: FormApi):
        self._api = api

    def by_id(self, form_id: str | None) -> Resource[FormFiling]:
        return Resource((lambda: self._api.get_by_id(form_id)) if form_id else None)

    def by_accession(self, accession_number: str | None) -> Resource[FormFiling]:
        fetch = (lambda: self._api.get_by_accession_number(accession_number)) if accession_number else None
        return Resource(fetch)

    def by_cik(self, cik: str | None, page: int = 0, size: int = 20) -> Resource[Page[FormFiling]]:
        return Resource((lambda: self._api.get_by_cik(cik, page, size)) if cik else None)

    def by_symbol(self, symbol: str | None, page: int = 0, size: int = 20) -> Resource[Page[FormFiling]]:
        return Resource((lambda: self._api.get_by_symbol(symbol, page, size)) if symbol else None)

    def recent(self, limit: int = 10) -> Resource[list[FormFiling]]:
        return Resource(lambda: self._api.get_recent_filings(limit), default=[])


class FormSearch(SearchResource[FormFiling]):
    def __init__(self, api: FormApi):
        super().__init__()
        self._api = api

    @property
    def filings(self) -> list[FormFiling]:
        return self.items

    def search_by_cik(self, cik: str, page: int = 0, size: int = 20):
        return self._search(lambda: self._api.get_by_cik(cik, page, size))

    def search_by_symbol(self, symbol: str, page: int = 0, size: int = 20):
        return self._search(lambda: self._api.get_by_symbol(symbol, page, size))

    def search_by_date_range(self, start_date: str, end_date: str, page: int = 0, size: int = 20):
        return self._search(lambda: self._api.get_by_date_range(start_date, end_date, page, size))
