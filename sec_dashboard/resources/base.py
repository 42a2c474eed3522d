"""
Stateful wrappers around endpoint calls.

A resource holds the last result of a fetch together with ``loading`` and
``error`` so callers (the CLI, a TUI, a notebook) can render state without
handling exceptions themselves. Loads never raise; actions record the error
and re-raise so the caller can react.

Every load takes a ticket from a per-instance counter. Only the newest ticket
may write state, so a slow response that arrives after a newer request is
dropped instead of overwriting fresher data.
"""

import logging
import threading
from collections.abc import Callable
from typing import Any, Generic, TypeVar

from sec_dashboard.client import ApiError
from sec_dashboard.models import Page

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Expected load failures. Anything else is still turned into ``error`` but
# logged with its traceback.
LOAD_ERRORS = (ApiError, ValueError)


class TicketedState:
    def __init__(self):
        self._lock = threading.RLock()
        self._ticket = 0
        self.loading = False
        self.error: str | None = None

    def _begin(self) -> int:
        with self._lock:
            self._ticket += 1
            self.loading = True
            self.error = None
            return self._ticket

    def _execute(
        self,
        call: Callable[[], Any],
        fallback: str,
        apply: Callable[[Any], None],
        on_error: Callable[[], None] | None = None,
    ) -> bool:
        """Run ``call`` under a fresh ticket; returns False if the outcome was discarded."""
        ticket = self._begin()
        try:
            result = call()
        except Exception as exc:
            if not isinstance(exc, LOAD_ERRORS):
                logger.exception("Unexpected error in %s", type(self).__name__)
            with self._lock:
                if ticket != self._ticket:
                    logger.debug("Discarding stale failure for %s: %s", type(self).__name__, exc)
                    return False
                self.error = str(exc) or fallback
                if on_error is not None:
                    on_error()
                self.loading = False
            return True

        with self._lock:
            if ticket != self._ticket:
                logger.debug("Discarding stale result for %s", type(self).__name__)
                return False
            apply(result)
            self.loading = False
        return True


class Resource(TicketedState, Generic[T]):
    """
    Result of one fetch plus its loading/error state.

    Args:
        fetch: Zero-argument callable returning the data, or None when the
               identifier it needs is missing. A None fetch makes ``load`` a
               no-op that never touches the network.
        default: Value of ``data`` before the first successful load.
        fallback: Error text used when the exception carries no message.
        reset_on_error: Restore ``default`` when a load fails instead of
                        keeping the previous data.
    """

    def __init__(
        self,
        fetch: Callable[[], T] | None,
        default: T | None = None,
        fallback: str = "Failed to load data",
        reset_on_error: bool = False,
    ):
        super().__init__()
        self._fetch = fetch
        self._default = default
        self.fallback = fallback
        self.reset_on_error = reset_on_error
        self.data: T | None = _fresh(default)

    @property
    def enabled(self) -> bool:
        return self._fetch is not None

    def load(self) -> "Resource[T]":
        if self._fetch is None:
            with self._lock:
                self._ticket += 1
                self.data = _fresh(self._default)
                self.loading = False
                self.error = None
            return self

        self._execute(self._fetch, self.fallback, self._set_data, self._reset if self.reset_on_error else None)
        return self

    refresh = load

    def _set_data(self, value: T) -> None:
        self.data = value

    def _reset(self) -> None:
        self.data = _fresh(self._default)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(loading={self.loading}, error={self.error!r}, data={self.data!r})"


class SearchResource(TicketedState, Generic[T]):
    """
    Result set driven by several named searches.

    Each search overwrites ``items``, ``total_elements`` and ``total_pages``
    with the page it returns. ``page`` keeps the whole last ``Page``.
    """

    def __init__(self, reset_on_error: bool = False):
        super().__init__()
        self.reset_on_error = reset_on_error
        self.items: list[T] = []
        self.total_elements = 0
        self.total_pages = 0
        self.page: Page[T] | None = None

    def _search(self, call: Callable[[], Page[T]], fallback: str = "Failed to search filings") -> "SearchResource[T]":
        self._execute(call, fallback, self._set_page, self._reset if self.reset_on_error else None)
        return self

    def _set_page(self, page: Page[T] | None) -> None:
        self.page = page
        self.items = list(page.content) if page is not None else []
        self.total_elements = page.total_elements if page is not None else 0
        self.total_pages = page.total_pages if page is not None else 0

    def _reset(self) -> None:
        self._set_page(None)


class ActionState(Generic[T]):
    """
    Loading/error state for imperative operations (start a download, save settings).

    Unlike a resource, a failed action re-raises after recording its message.
    ``data`` holds the result of the last successful run.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self.loading = False
        self.error: str | None = None
        self.data: T | None = None

    def run(self, call: Callable[[], T], fallback: str) -> T:
        with self._lock:
            self.loading = True
            self.error = None
        try:
            result = call()
        except Exception as exc:
            with self._lock:
                self.error = str(exc) or fallback
            raise
        finally:
            with self._lock:
                self.loading = False
        with self._lock:
            self.data = result
        return result


class Poller:
    """
    Run ``task`` every ``interval`` seconds on a timer thread.

    ``while_`` is checked before each tick; once it returns False the poller
    stops itself. An interval of zero or less disables polling. Use as a
    context manager to stop the timer when the block exits.
    """

    def __init__(self, interval: float, task: Callable[[], Any], while_: Callable[[], bool] | None = None):
        self.interval = interval
        self._task = task
        self._while = while_
        self._lock = threading.Lock()
        self._timer: threading.Timer | None = None
        self._running = False
        self._stopped = threading.Event()
        self._stopped.set()

    @property
    def running(self) -> bool:
        return self._running

    def start(self) -> "Poller":
        with self._lock:
            if self._running or self.interval <= 0:
                return self
            self._running = True
            self._stopped.clear()
            self._schedule()
        logger.debug("Polling every %.1fs", self.interval)
        return self

    def stop(self) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None
            was_running = self._running
            self._running = False
            self._stopped.set()
        if was_running:
            logger.debug("Polling stopped")

    def wait(self, timeout: float | None = None) -> bool:
        """Block until the poller stops; returns False on timeout."""
        return self._stopped.wait(timeout)

    def _schedule(self) -> None:
        self._timer = threading.Timer(self.interval, self._tick)
        self._timer.daemon = True
        self._timer.start()

    def _tick(self) -> None:
        if not self._running:
            return
        if self._while is not None and not self._while():
            self.stop()
            return
        try:
            self._task()
        except Exception:
            logger.exception("Polling task failed")
        finally:
            with self._lock:
                if self._running:
                    self._schedule()

    def __enter__(self) -> "Poller":
        return self.start()

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.stop()


def _fresh(default):
    # Mutable defaults are copied so resources never share a list.
    if isinstance(default, list):
        return list(default)
    if isinstance(default, dict):
        return dict(default)
    return default
