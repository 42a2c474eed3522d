"""Beneficial ownership (13D/13G) loaders and searches."""

from sec_dashboard.api.form13dg import Form13DGApi
from sec_dashboard.forms import (
    BeneficialOwnerSummary,
    BeneficialOwnershipSnapshot,
    Form13DG,
    OwnerPortfolioEntry,
    OwnershipHistoryEntry,
    ScheduleType,
)
from sec_dashboard.resources.base import Resource, SearchResource


def form13dg(api: Form13DGApi, form_id: str | None) -> Resource[Form13DG]:
    return Resource((lambda: api.get_by_id(form_id)) if form_id else None)


def form13dg_by_accession(api: Form13DGApi, accession_number: str | None) -> Resource[Form13DG]:
    fetch = (lambda: api.get_by_accession_number(accession_number)) if accession_number else None
    return Resource(fetch)


def recent_form13dg(api: Form13DGApi, limit: int = 10) -> Resource[list[Form13DG]]:
    return Resource(lambda: api.get_recent_filings(limit), default=[])


def beneficial_owners(api: Form13DGApi, cusip: str | None) -> Resource[list[BeneficialOwnerSummary]]:
    return Resource((lambda: api.get_beneficial_owners(cusip)) if cusip else None, default=[])


def ownership_history(
    api: Form13DGApi, cusip: str | None, filer_cik: str | None
) -> Resource[list[OwnershipHistoryEntry]]:
    fetch = (lambda: api.get_ownership_history(cusip, filer_cik)) if cusip and filer_cik else None
    return Resource(fetch, default=[])


def filer_portfolio(api: Form13DGApi, filer_cik: str | None) -> Resource[list[OwnerPortfolioEntry]]:
    return Resource((lambda: api.get_filer_portfolio(filer_cik)) if filer_cik else None, default=[])


def ownership_snapshot(api: Form13DGApi, cusip: str | None) -> Resource[BeneficialOwnershipSnapshot]:
    return Resource((lambda: api.get_ownership_snapshot(cusip)) if cusip else None)


def top_activist_investors(api: Form13DGApi, limit: int = 10) -> Resource[list[BeneficialOwnerSummary]]:
    return Resource(lambda: api.get_top_activist_investors(limit), default=[])


class Form13DGSearch(SearchResource[Form13DG]):
    """Beneficial ownership search, including activist (13D) and stake-size screens."""

    def __init__(self, api: Form13DGApi):
        super().__init__()
        self._api = api

    @property
    def filings(self) -> list[Form13DG]:
        return self.items

    def search_by_filer_name(self, name: str, page: int = 0, size: int = 20):
        return self._search(lambda: self._api.search_by_filer_name(name, page, size))

    def search_by_issuer_name(self, name: str, page: int = 0, size: int = 20):
        return self._search(lambda: self._api.search_by_issuer_name(name, page, size))

    def search_by_cusip(self, cusip: str, page: int = 0, size: int = 20):
        return self._search(lambda: self._api.get_by_cusip(cusip, page, size))

    def search_by_schedule_type(self, schedule_type: ScheduleType | str, page: int = 0, size: int = 20):
        return self._search(lambda: self._api.get_by_schedule_type(schedule_type, page, size))

    def get_activist_filings(self, page: int = 0, size: int = 20):
        return self._search(lambda: self._api.get_activist_filings(page, size), "Failed to get activist filings")

    def get_above_threshold(self, threshold: float, page: int = 0, size: int = 20):
        return self._search(
            lambda: self._api.get_above_threshold(threshold, page, size), "Failed to get filings above threshold"
        )
