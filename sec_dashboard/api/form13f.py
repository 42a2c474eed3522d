"""Form 13F institutional holdings filings."""

from sec_dashboard.api.base import Endpoint, query, segment
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


class Form13FApi(Endpoint):
    """Institutional holdings reports (13F-HR) and quarter-level aggregates."""

    resource = "form13f"

    def get_by_id(self, form_id: str) -> Form13F:
        return self._one(Form13F, self._client.get(self._path(segment(form_id))))

    def get_by_accession_number(self, accession_number: str) -> Form13F:
        """
        Get one 13F report by accession number.

        Raises:
            ValueError: If accession_number is empty
            ApiError: If the report does not exist or the call fails
        """
        path = self._path("accession", segment(accession_number, "Accession number"))
        return self._one(Form13F, self._client.get(path))

    def get_by_cik(self, cik: str, page: int = 0, size: int = 20) -> Page[Form13F]:
        """
        List a filer's 13F reports.

        Args:
            cik: Filer CIK
            page: 0-based page number
            size: Page size

        Returns:
            One page of reports, newest first

        Raises:
            ValueError: If cik is empty
        """
        path = self._path("cik", segment(cik, "CIK"))
        return self._page(Form13F, self._client.get(path, params=query(page=page, size=size)))

    def search_by_filer_name(self, name: str, page: int = 0, size: int = 20) -> Page[Form13F]:
        params = query(name=name, page=page, size=size)
        return self._page(Form13F, self._client.get(self._path("filer"), params=params))

    def get_by_quarter(self, period: str, page: int = 0, size: int = 20) -> Page[Form13F]:
        """``period`` is a report period end date, e.g. ``2024-09-30``."""
        params = query(period=period, page=page, size=size)
        return self._page(Form13F, self._client.get(self._path("quarter"), params=params))

    def get_by_date_range(self, start_date: str, end_date: str, page: int = 0, size: int = 20) -> Page[Form13F]:
        params = query(startDate=start_date, endDate=end_date, page=page, size=size)
        return self._page(Form13F, self._client.get(self._path("date-range"), params=params))

    def get_recent_filings(self, limit: int = 10) -> list[Form13F]:
        return self._many(Form13F, self._client.get(self._path("recent"), params=query(limit=limit)))

    def get_holdings(self, accession_number: str) -> list[Form13FHolding]:
        path = self._path("accession", segment(accession_number, "Accession number"), "holdings")
        return self._many(Form13FHolding, self._client.get(path))

    def get_by_cusip(self, cusip: str, page: int = 0, size: int = 20) -> Page[Form13F]:
        path = self._path("cusip", segment(cusip, "CUSIP"))
        return self._page(Form13F, self._client.get(path, params=query(page=page, size=size)))

    def get_by_issuer_name(self, name: str, page: int = 0, size: int = 20) -> Page[Form13F]:
        params = query(name=name, page=page, size=size)
        return self._page(Form13F, self._client.get(self._path("issuer"), params=params))

    def get_top_filers(self, period: str, limit: int = 10) -> list[FilerSummary]:
        params = query(period=period, limit=limit)
        return self._many(FilerSummary, self._client.get(self._path("top-filers"), params=params))

    def get_top_holdings(self, period: str, limit: int = 10) -> list[HoldingSummary]:
        params = query(period=period, limit=limit)
        return self._many(HoldingSummary, self._client.get(self._path("top-holdings"), params=params))

    def get_portfolio_history(self, cik: str) -> list[PortfolioSnapshot]:
        path = self._path("cik", segment(cik, "CIK"), "history")
        return self._many(PortfolioSnapshot, self._client.get(path))

    def get_institutional_ownership(self, cusip: str, period: str) -> InstitutionalOwnershipStats:
        """
        Aggregate institutional ownership of one security in a quarter.

        Args:
            cusip: Security CUSIP
            period: Report period end date

        Raises:
            ValueError: If cusip is empty
        """
        path = self._path("cusip", segment(cusip, "CUSIP"), "ownership")
        return self._one(InstitutionalOwnershipStats, self._client.get(path, params=query(period=period)))

    def compare_holdings(self, cik: str, period1: str, period2: str) -> HoldingsComparison:
        """
        Compare a filer's holdings between two quarters.

        Args:
            cik: Filer CIK
            period1: Earlier report period
            period2: Later report period

        Returns:
            New, closed, increased and decreased positions

        Raises:
            ValueError: If cik is empty
            ApiError: If the backend call fails
        """
        path = self._path("cik", segment(cik, "CIK"), "compare")
        params = query(period1=period1, period2=period2)
        return self._one(HoldingsComparison, self._client.get(path, params=params))
