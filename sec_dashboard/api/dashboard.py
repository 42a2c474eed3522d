"""Landing page counters and recent activity."""

from sec_dashboard.api.base import Endpoint, query
from sec_dashboard.models import DashboardStats, Filing, RecentSearch


class DashboardApi(Endpoint):
    """Endpoints under ``/dashboard``."""

    resource = "dashboard"

    def get_stats(self) -> DashboardStats:
        """
        Get totals for filings and tracked companies.

        Raises:
            ApiError: If the backend call fails
        """
        return self._one(DashboardStats, self._client.get(self._path("stats")))

    def get_recent_searches(self, limit: int = 10) -> list[RecentSearch]:
        """
        Get the searches most recently run against the backend.

        Args:
            limit: Maximum number of searches

        Returns:
            Recent searches, newest first
        """
        data = self._client.get(self._path("recent-searches"), params=query(limit=limit))
        return self._many(RecentSearch, data)

    def get_recent_filings(self, limit: int = 10) -> list[Filing]:
        data = self._client.get(self._path("recent-filings"), params=query(limit=limit))
        return self._many(Filing, data)
