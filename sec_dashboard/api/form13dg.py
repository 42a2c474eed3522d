"""Schedule 13D/13G beneficial ownership filings."""

from sec_dashboard.api.base import Endpoint, query, segment
from sec_dashboard.forms import (
    BeneficialOwnerSummary,
    BeneficialOwnershipSnapshot,
    Form13DG,
    OwnerPortfolioEntry,
    OwnershipHistoryEntry,
    ScheduleType,
)
from sec_dashboard.models import Page


class Form13DGApi(Endpoint):
    """Beneficial ownership reports (Schedules 13D and 13G)."""

    resource = "form13dg"

    def get_by_id(self, form_id: str) -> Form13DG:
        return self._one(Form13DG, self._client.get(self._path(segment(form_id))))

    def get_by_accession_number(self, accession_number: str) -> Form13DG:
        """
        Get one 13D or 13G filing by accession number.

        Raises:
            ValueError: If accession_number is empty
            ApiError: If the filing does not exist or the call fails
        """
        path = self._path("accession", segment(accession_number, "Accession number"))
        return self._one(Form13DG, self._client.get(path))

    def get_by_cusip(self, cusip: str, page: int = 0, size: int = 20) -> Page[Form13DG]:
        return self._paged(self._path("cusip", segment(cusip, "CUSIP")), page, size)

    def get_by_issuer_cik(self, cik: str, page: int = 0, size: int = 20) -> Page[Form13DG]:
        return self._paged(self._path("issuer", segment(cik, "CIK")), page, size)

    def search_by_issuer_name(self, name: str, page: int = 0, size: int = 20) -> Page[Form13DG]:
        return self._paged(self._path("issuer", "search"), page, size, name=name)

    def get_by_filer_cik(self, cik: str, page: int = 0, size: int = 20) -> Page[Form13DG]:
        return self._paged(self._path("filer", segment(cik, "CIK")), page, size)

    def search_by_filer_name(self, name: str, page: int = 0, size: int = 20) -> Page[Form13DG]:
        return self._paged(self._path("filer", "search"), page, size, name=name)

    def get_by_schedule_type(
        self, schedule_type: ScheduleType | str, page: int = 0, size: int = 20
    ) -> Page[Form13DG]:
        """
        List filings of one schedule type.

        Args:
            schedule_type: ``13D`` or ``13G``
            page: 0-based page number
            size: Page size

        Raises:
            ValueError: If schedule_type is not a known schedule
        """
        schedule = ScheduleType(schedule_type)
        return self._paged(self._path("schedule", schedule.value), page, size)

    def get_by_date_range(self, start_date: str, end_date: str, page: int = 0, size: int = 20) -> Page[Form13DG]:
        return self._paged(self._path("date-range"), page, size, startDate=start_date, endDate=end_date)

    def get_recent_filings(self, limit: int = 10) -> list[Form13DG]:
        return self._many(Form13DG, self._client.get(self._path("recent"), params=query(limit=limit)))

    def get_above_threshold(self, threshold: float, page: int = 0, size: int = 20) -> Page[Form13DG]:
        """Filings reporting at least ``threshold`` percent of a class (e.g. 5 or 10)."""
        return self._paged(self._path("threshold", _number(threshold)), page, size)

    def get_beneficial_owners(self, cusip: str) -> list[BeneficialOwnerSummary]:
        path = self._path("cusip", segment(cusip, "CUSIP"), "owners")
        return self._many(BeneficialOwnerSummary, self._client.get(path))

    def get_ownership_history(self, cusip: str, filer_cik: str) -> list[OwnershipHistoryEntry]:
        """
        Track one filer's stake in a security over time.

        Raises:
            ValueError: If cusip or filer_cik is empty
        """
        path = self._path("cusip", segment(cusip, "CUSIP"), "filer", segment(filer_cik, "Filer CIK"), "history")
        return self._many(OwnershipHistoryEntry, self._client.get(path))

    def get_filer_portfolio(self, filer_cik: str) -> list[OwnerPortfolioEntry]:
        path = self._path("filer", segment(filer_cik, "Filer CIK"), "portfolio")
        return self._many(OwnerPortfolioEntry, self._client.get(path))

    def get_ownership_snapshot(self, cusip: str) -> BeneficialOwnershipSnapshot:
        path = self._path("cusip", segment(cusip, "CUSIP"), "snapshot")
        return self._one(BeneficialOwnershipSnapshot, self._client.get(path))

    def get_activist_filings(self, page: int = 0, size: int = 20) -> Page[Form13DG]:
        return self._paged(self._path("activist"), page, size)

    def get_top_activist_investors(self, limit: int = 10) -> list[BeneficialOwnerSummary]:
        data = self._client.get(self._path("top-activists"), params=query(limit=limit))
        return self._many(BeneficialOwnerSummary, data)

    def _paged(self, path: str, page: int, size: int, **params) -> Page[Form13DG]:
        return self._page(Form13DG, self._client.get(path, params=query(**params, page=page, size=size)))


def _number(value: float) -> str:
    """Render 5.0 as "5" so thresholds read the way users type them."""
    return str(int(value)) if float(value).is_integer() else str(value)
