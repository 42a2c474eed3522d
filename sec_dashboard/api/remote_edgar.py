"""Remote EDGAR endpoints."""

from sec_dashboard.api.base import Endpoint, query, segment
from sec_dashboard.models import RemoteSubmission, RemoteTicker, TickerSource


class RemoteEdgarApi(Endpoint):
    """Live lookups against SEC EDGAR, proxied through the backend without storing anything."""

    resource = "remote-edgar"

    def get_tickers(
        self,
        source: TickerSource | None = None,
        search: str | None = None,
        limit: int | None = None,
    ) -> list[RemoteTicker]:
        """
        List tickers from the SEC company ticker files.

        Args:
            source: Which ticker file to read; the backend default when omitted
            search: Filter by ticker or company name
            limit: Maximum number of tickers

        Returns:
            Matching tickers
        """
        params = query(source=source, search=search, limit=limit)
        return self._many(RemoteTicker, self._client.get(self._path("tickers"), params=params))

    def get_submission_by_cik(self, cik: str, filings_limit: int = 50) -> RemoteSubmission:
        """
        Fetch a company's submissions straight from EDGAR.

        Args:
            cik: Company CIK
            filings_limit: Maximum number of recent filings to include

        Returns:
            Company details with its recent filings

        Raises:
            ValueError: If cik is empty
            ApiError: If EDGAR or the backend call fails
        """
        path = self._path("submissions", segment(cik, "CIK"))
        return self._one(RemoteSubmission, self._client.get(path, params=query(filingsLimit=filings_limit)))
