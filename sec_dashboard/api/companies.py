"""Company lookup and per-company filing lists."""

from sec_dashboard.api.base import Endpoint, query, segment
from sec_dashboard.models import Company, CompanyListItem, CompanySearchRequest, Filing, Page


class CompaniesApi(Endpoint):
    """Endpoints under ``/companies``."""

    resource = "companies"

    def get_companies(self, request: CompanySearchRequest | None = None) -> Page[CompanyListItem]:
        """
        List companies, optionally filtered by name and sorted.

        Args:
            request: Search term, page, size and sort; only the fields set
                     are sent

        Returns:
            One page of companies

        Raises:
            ApiError: If the backend call fails
        """
        request = request or CompanySearchRequest()
        params = query(
            search=request.search_term,
            page=request.page,
            size=request.size,
            sortBy=request.sort_by,
            sortDir=request.sort_dir,
        )
        return self._page(CompanyListItem, self._client.get(self._path(), params=params))

    def get_company_by_id(self, company_id: str) -> Company:
        """
        Get one company by its backend id.

        Raises:
            ValueError: If company_id is empty
            ApiError: If the company does not exist or the call fails
        """
        return self._one(Company, self._client.get(self._path(segment(company_id, "Company id"))))

    def get_company_by_cik(self, cik: str) -> Company:
        """
        Get one company by CIK.

        Args:
            cik: Central Index Key, with or without zero padding

        Returns:
            Company with addresses, tickers and exchanges

        Raises:
            ValueError: If cik is empty
            ApiError: If the company does not exist or the call fails
        """
        return self._one(Company, self._client.get(self._path("cik", segment(cik, "CIK"))))

    def get_company_by_ticker(self, ticker: str) -> Company:
        """
        Get one company by ticker symbol. Symbols such as ``BRK/A`` are percent-encoded.

        Raises:
            ValueError: If ticker is empty
            ApiError: If the company does not exist or the call fails
        """
        return self._one(Company, self._client.get(self._path("ticker", segment(ticker, "Ticker"))))

    def get_company_filings(self, company_id: str, page: int = 0, size: int = 10) -> Page[Filing]:
        """
        List a company's filings by backend id.

        Raises:
            ValueError: If company_id is empty
        """
        path = self._path(segment(company_id, "Company id"), "filings")
        return self._page(Filing, self._client.get(path, params=query(page=page, size=size)))

    def get_company_filings_by_cik(self, cik: str, page: int = 0, size: int = 10) -> Page[Filing]:
        """
        List a company's filings by CIK.

        Args:
            cik: Central Index Key
            page: 0-based page number
            size: Page size

        Returns:
            One page of filings

        Raises:
            ValueError: If cik is empty
            ApiError: If the backend call fails
        """
        path = self._path("cik", segment(cik, "CIK"), "filings")
        return self._page(Filing, self._client.get(path, params=query(page=page, size=size)))
