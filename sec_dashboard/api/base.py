"""Shared plumbing for the endpoint modules."""

from enum import Enum
from typing import Any, TypeVar
from urllib.parse import quote

from pydantic import BaseModel, ValidationError

from sec_dashboard.client import ApiClient, ApiError
from sec_dashboard.models import Page

M = TypeVar("M", bound=BaseModel)


def query(**params: Any) -> dict[str, Any]:
    """
    Build query parameters from keyword arguments.

    ``None`` and empty strings are dropped entirely (never sent as
    ``key=``); zero and ``False`` are kept. Keyword order is preserved, so
    the resulting query string is stable.
    """
    built: dict[str, Any] = {}
    for key, value in params.items():
        if value is None or value == "":
            continue
        if isinstance(value, Enum):
            value = value.value
        elif isinstance(value, bool):
            value = "true" if value else "false"
        built[key] = value
    return built


def required(value: Any, name: str = "identifier") -> str:
    """Return ``value`` stripped, raising ValueError when it is blank."""
    if value is None or not str(value).strip():
        raise ValueError(f"{name} cannot be empty")
    return str(value).strip()


def segment(value: Any, name: str = "identifier") -> str:
    """Percent-encode one path segment, rejecting blanks."""
    return quote(required(value, name), safe="")


class Endpoint:
    """Base for endpoint groups; subclasses set ``resource`` to their path prefix."""

    resource = ""

    def __init__(self, client: ApiClient):
        self._client = client

    def _path(self, *parts: str) -> str:
        return "/" + "/".join((self.resource,) + parts)

    def _one(self, model: type[M], data: Any) -> M:
        try:
            return model.model_validate(data)
        except ValidationError as e:
            raise _unexpected(model.__name__, e) from e

    def _many(self, model: type[M], data: Any) -> list[M]:
        if data is None:
            return []
        if not isinstance(data, list):
            raise ApiError(f"Unexpected response: expected a list of {model.__name__}, got {type(data).__name__}")
        try:
            return [model.model_validate(item) for item in data]
        except ValidationError as e:
            raise _unexpected(model.__name__, e) from e

    def _page(self, model: type[M], data: Any) -> Page[M]:
        try:
            return Page[model].model_validate(data if data is not None else {})
        except ValidationError as e:
            raise _unexpected(f"page of {model.__name__}", e) from e


def _unexpected(what: str, error: ValidationError) -> ApiError:
    return ApiError(f"Unexpected response: not a valid {what} ({error.error_count()} validation errors)")
