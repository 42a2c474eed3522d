"""Server settings resource."""

import logging
from concurrent.futures import ThreadPoolExecutor

from sec_dashboard.api.settings import SettingsApi
from sec_dashboard.client import ApiError
from sec_dashboard.models import Settings, SettingsRequest
from sec_dashboard.resources.base import Resource

logger = logging.getLogger(__name__)


class SettingsResource(Resource[Settings]):
    """Server-side settings with save and connection checks."""

    def __init__(self, api: SettingsApi):
        super().__init__(api.get_settings, fallback="Failed to load settings")
        self._api = api
        self.saving = False

    @property
    def settings(self) -> Settings | None:
        return self.data

    def update_settings(self, request: SettingsRequest) -> Settings:
        """Save settings; on failure ``error`` is set and the exception propagates."""
        with self._lock:
            self.saving = True
            self.error = None
        try:
            saved = self._api.update_settings(request)
        except Exception as exc:
            with self._lock:
                self.error = str(exc) or "Failed to save settings"
            raise
        finally:
            with self._lock:
                self.saving = False
        with self._lock:
            self._ticket += 1
            self.data = saved
        return saved

    def check_connections(self) -> Settings | None:
        """
        Check MongoDB and Elasticsearch together and attach both statuses
        to the loaded settings. Failures are logged, never raised.
        """
        try:
            with ThreadPoolExecutor(max_workers=2) as executor:
                mongo = executor.submit(self._api.check_mongodb_health)
                elastic = executor.submit(self._api.check_elasticsearch_health)
                mongo_status, elastic_status = mongo.result(), elastic.result()
        except (ApiError, ValueError) as e:
            logger.error("Failed to check connections: %s", e)
            return self.data

        with self._lock:
            if self.data is not None:
                self.data = self.data.model_copy(
                    update={"mongo_db_status": mongo_status, "elasticsearch_status": elastic_status}
                )
        return self.data
