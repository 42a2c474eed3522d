"""Server-side settings and backing service health checks."""

from sec_dashboard.api.base import Endpoint
from sec_dashboard.models import ConnectionStatus, Settings, SettingsRequest


class SettingsApi(Endpoint):
    """Endpoints under ``/settings``."""

    resource = "settings"

    def get_settings(self) -> Settings:
        return self._one(Settings, self._client.get(self._path()))

    def update_settings(self, request: SettingsRequest) -> Settings:
        """
        Replace the server settings.

        Args:
            request: Complete set of editable settings

        Returns:
            Settings as saved by the backend

        Raises:
            ApiError: If the backend rejects the settings or the call fails
        """
        return self._one(Settings, self._client.put(self._path(), json=request.to_wire()))

    def check_mongodb_health(self) -> ConnectionStatus:
        """Check the backend's MongoDB connection."""
        return self._one(ConnectionStatus, self._client.get(self._path("health", "mongodb")))

    def check_elasticsearch_health(self) -> ConnectionStatus:
        """Check the backend's Elasticsearch connection."""
        return self._one(ConnectionStatus, self._client.get(self._path("health", "elasticsearch")))
