"""Dashboard resources."""

from concurrent.futures import ThreadPoolExecutor

from sec_dashboard.api.dashboard import DashboardApi
from sec_dashboard.models import DashboardStats, Filing, RecentSearch
from sec_dashboard.resources.base import Resource, TicketedState

DASHBOARD_LIST_LIMIT = 5


class Dashboard(TicketedState):
    """
    Landing page data: counters, recent searches and recent filings.

    The three requests run concurrently. If any of them fails the previous
    values are kept and ``error`` is set.
    """

    def __init__(self, api: DashboardApi, limit: int = DASHBOARD_LIST_LIMIT):
        super().__init__()
        self._api = api
        self.limit = limit
        self.stats: DashboardStats | None = None
        self.recent_searches: list[RecentSearch] = []
        self.recent_filings: list[Filing] = []

    def load(self) -> "Dashboard":
        self._execute(self._fetch_all, "Failed to load dashboard data", self._apply)
        return self

    refresh = load

    def _fetch_all(self):
        with ThreadPoolExecutor(max_workers=3) as executor:
            stats = executor.submit(self._api.get_stats)
            searches = executor.submit(self._api.get_recent_searches, self.limit)
            filings = executor.submit(self._api.get_recent_filings, self.limit)
            return stats.result(), searches.result(), filings.result()

    def _apply(self, result) -> None:
        self.stats, self.recent_searches, self.recent_filings = result


def dashboard_stats(api: DashboardApi) -> Resource[DashboardStats]:
    return Resource(api.get_stats, fallback="Failed to load dashboard stats")


def recent_searches(api: DashboardApi, limit: int = 10) -> Resource[list[RecentSearch]]:
    return Resource(lambda: api.get_recent_searches(limit), default=[], fallback="Failed to load recent searches")


def dashboard_recent_filings(api: DashboardApi, limit: int = 10) -> Resource[list[Filing]]:
    return Resource(lambda: api.get_recent_filings(limit), default=[], fallback="Failed to load recent filings")
