"""Settings for the SEC dashboard client.

Values are read from environment variables prefixed with ``SEC_DASHBOARD_``
(for example ``SEC_DASHBOARD_API_URL``).
"""

import logging
from pathlib import Path
from typing import Literal
from urllib.parse import urlparse

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "http://localhost:8080"
DEFAULT_TIMEOUT_S = 30.0

# The backend caps page size at 100.
DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100


class DashboardSettings(BaseSettings):
    """Runtime configuration for the dashboard client."""

    api_url: str | None = Field(
        None,
        description="Backend root URL; '/api' is appended by the client.",
    )
    environment: Literal["development", "production"] = Field(
        "development",
        description="Deployment environment; affects how a missing api_url is reported.",
    )
    timeout_s: float = Field(DEFAULT_TIMEOUT_S, description="Request timeout in seconds.")
    log_level: str = Field("INFO", description="Root log level.")
    state_dir: Path = Field(
        Path.home() / ".sec_dashboard",
        description="Directory holding the persisted client stores.",
    )
    export_dir: Path = Field(Path("."), description="Where exported files are written.")
    download_job_poll_s: float = Field(2.0, description="Poll interval for a single download job.")
    active_jobs_poll_s: float = Field(5.0, description="Poll interval for the active jobs list.")

    model_config = SettingsConfigDict(
        env_prefix="SEC_DASHBOARD_",
        extra="ignore",
    )

    @property
    def is_production(self) -> bool:
        return self.environment == "production"


def resolve_api_base_url(settings: DashboardSettings) -> str:
    """
    Return the backend root URL to use.

    A missing or malformed URL never stops the client from starting: it falls
    back to the local default, logging an error where that is unexpected.
    """
    url = settings.api_url
    if not url:
        if settings.is_production:
            logger.error("SEC_DASHBOARD_API_URL environment variable is required for production")
        return DEFAULT_API_URL

    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        logger.error("Invalid SEC_DASHBOARD_API_URL: %s", url)
        return DEFAULT_API_URL

    return url.rstrip("/")
