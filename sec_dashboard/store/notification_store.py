"""Transient toast notifications. Not persisted."""

import itertools
import threading
import time
from collections.abc import Callable
from typing import Literal

from pydantic import BaseModel

NotificationType = Literal["success", "error", "info", "warning"]

DEFAULT_DURATION_S = 5.0


class Notification(BaseModel):
    id: str
    type: NotificationType
    title: str
    message: str | None = None
    duration: float = DEFAULT_DURATION_S
    created_at: float

    def expired(self, now: float) -> bool:
        return self.duration > 0 and now - self.created_at >= self.duration


class NotificationStore:
    """
    Queue of notifications in the order they were added.

    Entries with a positive ``duration`` (seconds) expire; ``active`` drops
    the expired ones. A duration of zero keeps the entry until it is removed.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._ids = itertools.count(1)
        self._lock = threading.Lock()
        self._notifications: list[Notification] = []

    @property
    def notifications(self) -> list[Notification]:
        with self._lock:
            return list(self._notifications)

    def add(
        self,
        type: NotificationType,
        title: str,
        message: str | None = None,
        duration: float | None = None,
    ) -> Notification:
        with self._lock:
            notification = Notification(
                id=f"notification-{next(self._ids)}",
                type=type,
                title=title,
                message=message,
                duration=DEFAULT_DURATION_S if duration is None else duration,
                created_at=self._clock(),
            )
            self._notifications.append(notification)
        return notification

    def remove(self, notification_id: str) -> None:
        with self._lock:
            self._notifications = [n for n in self._notifications if n.id != notification_id]

    def clear(self) -> None:
        with self._lock:
            self._notifications = []

    def active(self) -> list[Notification]:
        now = self._clock()
        with self._lock:
            self._notifications = [n for n in self._notifications if not n.expired(now)]
            return list(self._notifications)

    def success(self, title: str, message: str | None = None) -> Notification:
        return self.add("success", title, message)

    def error(self, title: str, message: str | None = None) -> Notification:
        return self.add("error", title, message)

    def info(self, title: str, message: str | None = None) -> Notification:
        return self.add("info", title, message)

    def warning(self, title: str, message: str | None = None) -> Notification:
        return self.add("warning", title, message)
