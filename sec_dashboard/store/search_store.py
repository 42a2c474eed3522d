"""Recent search history and the last filing search, persisted across sessions."""

from datetime import datetime, timezone

from pydantic import Field

from sec_dashboard.models import FilingSearchRequest
from sec_dashboard.store.storage import Storage, StoredState, load_state, save_state

SEARCH_STORE_KEY = "search-store"
MAX_HISTORY = 20


class SearchHistoryItem(StoredState):
    query: str
    type: str
    timestamp: str


class SearchState(StoredState):
    search_history: list[SearchHistoryItem] = Field(default_factory=list)
    last_search_request: FilingSearchRequest | None = None


class SearchHistoryStore:
    """
    Recent searches, newest first, persisted under ``search-store``.

    Searching again for the same text moves it to the front instead of
    adding a duplicate. Only the latest 20 are kept.
    """

    def __init__(self, storage: Storage):
        self._storage = storage
        self._state = load_state(storage, SEARCH_STORE_KEY, SearchState)

    @property
    def history(self) -> list[SearchHistoryItem]:
        return list(self._state.search_history)

    @property
    def last_search_request(self) -> FilingSearchRequest | None:
        return self._state.last_search_request

    def add(self, query: str, type: str) -> SearchHistoryItem:
        item = SearchHistoryItem(query=query, type=type, timestamp=_now_iso())
        others = [entry for entry in self._state.search_history if entry.query != query]
        self._state.search_history = [item, *others][:MAX_HISTORY]
        self._save()
        return item

    def clear(self) -> None:
        self._state.search_history = []
        self._save()

    def set_last_search_request(self, request: FilingSearchRequest) -> None:
        self._state.last_search_request = request
        self._save()

    def _save(self) -> None:
        save_state(self._storage, SEARCH_STORE_KEY, self._state)


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
