"""Key/value persistence for client-side stores."""

import json
import logging
import os
import threading
from pathlib import Path
from typing import Any, Protocol, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

logger = logging.getLogger(__name__)

S = TypeVar("S", bound="StoredState")

STATE_VERSION = 0


class Storage(Protocol):
    def get(self, key: str) -> dict[str, Any] | None: ...

    def set(self, key: str, value: dict[str, Any]) -> None: ...

    def remove(self, key: str) -> None: ...


class StoredState(BaseModel):
    """Base for persisted store state; saved with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def load_state(storage: Storage, key: str, model: type[S]) -> S:
    """
    Read the state saved under ``key``.

    Saved entries look like ``{"state": {...}, "version": 0}``. A missing
    entry, or one that does not match ``model``, gives the model's defaults;
    the mismatch is logged.
    """
    saved = storage.get(key)
    if not isinstance(saved, dict) or "state" not in saved:
        return model()
    try:
        return model.model_validate(saved["state"])
    except ValidationError as e:
        logger.warning("Ignoring saved %s: %s", key, e)
        return model()


def save_state(storage: Storage, key: str, state: StoredState) -> None:
    state_json = state.model_dump(mode="json", by_alias=True, exclude_none=True)
    storage.set(key, {"state": state_json, "version": STATE_VERSION})


class MemoryStorage:
    """Storage that lives as long as the process. Used in tests and for throwaway sessions."""

    def __init__(self, initial: dict[str, dict[str, Any]] | None = None):
        self._items: dict[str, dict[str, Any]] = {k: json.loads(json.dumps(v)) for k, v in (initial or {}).items()}

    def get(self, key: str) -> dict[str, Any] | None:
        value = self._items.get(key)
        return json.loads(json.dumps(value)) if value is not None else None

    def set(self, key: str, value: dict[str, Any]) -> None:
        # Round-trip through JSON so callers can't mutate what was stored
        # and non-serializable values fail here like they would on disk.
        self._items[key] = json.loads(json.dumps(value))

    def remove(self, key: str) -> None:
        self._items.pop(key, None)


class JsonFileStorage:
    """
    All keys in one JSON file, rewritten atomically on every change.

    A missing file reads as empty. An unreadable or corrupt file is logged
    and also treated as empty; it is replaced on the next write.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path).expanduser()
        self._lock = threading.Lock()

    def get(self, key: str) -> dict[str, Any] | None:
        with self._lock:
            return self._read().get(key)

    def set(self, key: str, value: dict[str, Any]) -> None:
        with self._lock:
            items = self._read()
            items[key] = value
            self._write(items)

    def remove(self, key: str) -> None:
        with self._lock:
            items = self._read()
            if items.pop(key, None) is not None:
                self._write(items)

    def _read(self) -> dict[str, Any]:
        try:
            with open(self.path, encoding="utf-8") as f:
                items = json.load(f)
        except FileNotFoundError:
            return {}
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable state file %s: %s", self.path, e)
            return {}
        if not isinstance(items, dict):
            logger.warning("Ignoring state file %s: expected a JSON object", self.path)
            return {}
        return items

    def _write(self, items: dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_name(self.path.name + ".tmp")
        with open(tmp, "w", encoding="utf-8") as f:
            json.dump(items, f, indent=2)
        os.replace(tmp, self.path)
