"""Filing listing, full-text search and detail lookups."""

from sec_dashboard.api.base import Endpoint, query, segment
from sec_dashboard.models import Filing, FilingDetail, FilingSearchRequest, Page


class FilingsApi(Endpoint):
    """Endpoints under ``/filings``."""

    resource = "filings"

    def get_filings(
        self,
        cik: str | None = None,
        form_type: str | None = None,
        date_from: str | None = None,
        date_to: str | None = None,
        page: int | None = None,
        size: int | None = None,
        sort_by: str | None = None,
        sort_dir: str | None = None,
    ) -> Page[Filing]:
        """
        List filings with optional filters.

        Filters left as ``None`` are omitted from the query string, e.g.
        ``get_filings(cik="320193")`` requests ``/filings?cik=320193``.

        Args:
            cik: Company CIK
            form_type: Form type such as ``10-K``
            date_from: Earliest filing date (YYYY-MM-DD)
            date_to: Latest filing date (YYYY-MM-DD)
            page: 0-based page number
            size: Page size
            sort_by: Sort field
            sort_dir: ``asc`` or ``desc``

        Returns:
            One page of filings

        Raises:
            ApiError: If the backend call fails
        """
        params = query(
            cik=cik,
            formType=form_type,
            dateFrom=date_from,
            dateTo=date_to,
            page=page,
            size=size,
            sortBy=sort_by,
            sortDir=sort_dir,
        )
        return self._page(Filing, self._client.get(self._path(), params=params))

    def search_filings(self, request: FilingSearchRequest) -> Page[Filing]:
        """
        Run a filing search.

        Args:
            request: Search criteria; unset fields are left out of the body

        Returns:
            One page of matching filings

        Raises:
            ApiError: If the backend call fails
        """
        data = self._client.post(self._path("search"), json=request.to_wire())
        return self._page(Filing, data)

    def get_filing_by_id(self, filing_id: str) -> FilingDetail:
        """
        Get one filing by backend id.

        Raises:
            ValueError: If filing_id is empty
            ApiError: If the filing does not exist or the call fails
        """
        return self._one(FilingDetail, self._client.get(self._path(segment(filing_id, "Filing id"))))

    def get_filing_by_accession_number(self, accession_number: str) -> FilingDetail:
        """
        Get one filing by SEC accession number.

        Args:
            accession_number: Accession number, e.g. ``0000320193-23-000106``

        Returns:
            Filing detail including the content preview

        Raises:
            ValueError: If accession_number is empty
            ApiError: If the filing does not exist or the call fails
        """
        path = self._path("accession", segment(accession_number, "Accession number"))
        return self._one(FilingDetail, self._client.get(path))

    def get_recent_filings(self, limit: int = 10) -> list[Filing]:
        return self._many(Filing, self._client.get(self._path("recent"), params=query(limit=limit)))
