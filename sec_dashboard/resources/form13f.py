"""Institutional holdings (13F) loaders and searches."""

from sec_dashboard.api.form13f import Form13FApi
from sec_dashboard.forms import (
    FilerSummary,
    Form13F,
    Form13FHolding,
    HoldingsComparison,
    HoldingSummary,
    InstitutionalOwnershipStats,
    PortfolioSnapshot,
)
from sec_dashboard.models import Page
from sec_dashboard.resources.base import Resource, SearchResource


def form13f(api: Form13FApi, form_id: str | None) -> Resource[Form13F]:
    return Resource((lambda: api.get_by_id(form_id)) if form_id else None)


def form13f_by_accession(api: Form13FApi, accession_number: str | None) -> Resource[Form13F]:
    fetch = (lambda: api.get_by_accession_number(accession_number)) if accession_number else None
    return Resource(fetch)


def form13f_by_cik(api: Form13FApi, cik: str | None, page: int = 0, size: int = 20) -> Resource[Page[Form13F]]:
    return Resource((lambda: api.get_by_cik(cik, page, size)) if cik else None)


def recent_form13f(api: Form13FApi, limit: int = 10) -> Resource[list[Form13F]]:
    return Resource(lambda: api.get_recent_filings(limit), default=[])


def form13f_holdings(api: Form13FApi, accession_number: str | None) -> Resource[list[Form13FHolding]]:
    fetch = (lambda: api.get_holdings(accession_number)) if accession_number else None
    return Resource(fetch, default=[])


def top_filers(api: Form13FApi, period: str | None, limit: int = 10) -> Resource[list[FilerSummary]]:
    return Resource((lambda: api.get_top_filers(period, limit)) if period else None, default=[])


def top_holdings(api: Form13FApi, period: str | None, limit: int = 10) -> Resource[list[HoldingSummary]]:
    return Resource((lambda: api.get_top_holdings(period, limit)) if period else None, default=[])


def portfolio_history(api: Form13FApi, cik: str | None) -> Resource[list[PortfolioSnapshot]]:
    return Resource((lambda: api.get_portfolio_history(cik)) if cik else None, default=[])


def institutional_ownership(
    api: Form13FApi, cusip: str | None, period: str | None
) -> Resource[InstitutionalOwnershipStats]:
    fetch = (lambda: api.get_institutional_ownership(cusip, period)) if cusip and period else None
    return Resource(fetch)


def holdings_comparison(
    api: Form13FApi, cik: str | None, period1: str | None, period2: str | None
) -> Resource[HoldingsComparison]:
    fetch = (lambda: api.compare_holdings(cik, period1, period2)) if cik and period1 and period2 else None
    return Resource(fetch)


class Form13FSearch(SearchResource[Form13F]):
    def __init__(self, api: Form13FApi):
        super().__init__()
        self._api = api

    @property
    def filings(self) -> list[Form13F]:
        return self.items

    def search_by_filer_name(self, name: str, page: int = 0, size: int = 20):
        return self._search(lambda: self._api.search_by_filer_name(name, page, size))

    def search_by_issuer_name(self, name: str, page: int = 0, size: int = 20):
        return self._search(lambda: self._api.get_by_issuer_name(name, page, size))

    def search_by_cusip(self, cusip: str, page: int = 0, size: int = 20):
        return self._search(lambda: self._api.get_by_cusip(cusip, page, size))

    def search_by_quarter(self, period: str, page: int = 0, size: int = 20):
        return self._search(lambda: self._api.get_by_quarter(period, page, size))
