"""HTTP transport for the dashboard backend.

Every JSON response arrives wrapped in an envelope
(``{success, message, data, timestamp}``); callers only ever see ``data``.
Every failure (network, timeout, non-2xx, malformed body) surfaces as a
single ``ApiError`` carrying a readable message. Nothing is retried.
"""

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from sec_dashboard.config import DEFAULT_API_URL, DEFAULT_TIMEOUT_S
from sec_dashboard.models import ApiResponse

logger = logging.getLogger(__name__)

DEFAULT_HEADERS = {"Content-Type": "application/json"}
FALLBACK_ERROR_MESSAGE = "An error occurred"


class ApiError(Exception):
    """Raised for any failed backend call."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def _log_request(request: httpx.Request) -> None:
    logger.debug("[API] %s %s", request.method, request.url)


class ApiClient:
    """Client bound to ``<root>/api`` with a fixed timeout and default headers."""

    def __init__(
        self,
        root_url: str = DEFAULT_API_URL,
        timeout: float = DEFAULT_TIMEOUT_S,
        http: httpx.Client | None = None,
    ):
        """
        Initialize the transport.

        Args:
            root_url: Backend root URL; ``/api`` is appended
            timeout: Request timeout in seconds, applied to every call
            http: Optional pre-built ``httpx.Client``; when given, the caller
                  owns it and is responsible for closing it
        """
        self._root_url = root_url.rstrip("/")
        self._base_url = f"{self._root_url}/api"
        self._owns_http = http is None
        self._http = http or httpx.Client(
            base_url=self._base_url,
            timeout=timeout,
            headers=DEFAULT_HEADERS,
            event_hooks={"request": [_log_request]},
        )

    @property
    def root_url(self) -> str:
        return self._root_url

    @property
    def base_url(self) -> str:
        return self._base_url

    def close(self) -> None:
        if self._owns_http:
            self._http.close()

    def __enter__(self) -> "ApiClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        return self._request("GET", path, params=params)

    def post(self, path: str, json: Any = None, params: dict[str, Any] | None = None) -> Any:
        return self._request("POST", path, params=params, json=json)

    def put(self, path: str, json: Any = None, params: dict[str, Any] | None = None) -> Any:
        return self._request("PUT", path, params=params, json=json)

    def delete(self, path: str, params: dict[str, Any] | None = None) -> Any:
        return self._request("DELETE", path, params=params)

    def download_file(self, path: str, json: Any = None) -> bytes:
        """POST and return the raw response body. Binary bodies carry no envelope."""
        response = self._send("POST", path, json=json)
        return response.content

    def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        response = self._send(method, path, **kwargs)
        if not response.content:
            return None
        try:
            envelope = ApiResponse[Any].model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise self._fail(f"Malformed response from {method} {path}", response.status_code) from e
        return envelope.data

    def _send(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        url = self._url(path)
        try:
            response = self._http.request(method, url, **kwargs)
            response.raise_for_status()
            return response
        except httpx.HTTPStatusError as e:
            message = _envelope_message(e.response) or str(e) or FALLBACK_ERROR_MESSAGE
            raise self._fail(message, e.response.status_code) from e
        except httpx.RequestError as e:
            raise self._fail(str(e) or FALLBACK_ERROR_MESSAGE) from e

    def _url(self, path: str) -> str:
        # An injected client may not carry our base_url.
        if self._owns_http:
            return path
        return f"{self._base_url}/{path.lstrip('/')}"

    @staticmethod
    def _fail(message: str, status_code: int | None = None) -> ApiError:
        logger.error("[API] Response error: %s", message)
        return ApiError(message, status_code)


def _envelope_message(response: httpx.Response) -> str | None:
    """Pull ``message`` out of an error envelope, if the body is one."""
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict) and isinstance(body.get("message"), str) and body["message"]:
        return body["message"]
    return None
