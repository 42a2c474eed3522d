"""Application wiring: one transport, one endpoint object per resource, one instance of each store."""

import logging

import httpx

from sec_dashboard.api.companies import CompaniesApi
from sec_dashboard.api.dashboard import DashboardApi
from sec_dashboard.api.downloads import DownloadsApi
from sec_dashboard.api.export import ExportApi
from sec_dashboard.api.filings import FilingsApi
from sec_dashboard.api.form13dg import Form13DGApi
from sec_dashboard.api.form13f import Form13FApi
from sec_dashboard.api.forms import Form3Api, Form5Api, Form6KApi, Form8KApi, Form20FApi
from sec_dashboard.api.remote_edgar import RemoteEdgarApi
from sec_dashboard.api.settings import SettingsApi
from sec_dashboard.api.xbrl import XbrlApi
from sec_dashboard.client import ApiClient
from sec_dashboard.config import DashboardSettings, resolve_api_base_url
from sec_dashboard.store.notification_store import NotificationStore
from sec_dashboard.store.search_store import SearchHistoryStore
from sec_dashboard.store.settings_store import UiSettingsStore
from sec_dashboard.store.storage import JsonFileStorage, Storage

logger = logging.getLogger(__name__)

STATE_FILE = "state.json"


class App:
    def __init__(self, settings: DashboardSettings, client: ApiClient, storage: Storage):
        self.settings = settings
        self.client = client

        self.companies = CompaniesApi(client)
        self.filings = FilingsApi(client)
        self.dashboard = DashboardApi(client)
        self.downloads = DownloadsApi(client)
        self.server_settings = SettingsApi(client)
        self.export = ExportApi(client, settings.export_dir)
        self.xbrl = XbrlApi(client)
        self.form13f = Form13FApi(client)
        self.form13dg = Form13DGApi(client)
        self.form8k = Form8KApi(client)
        self.form3 = Form3Api(client)
        self.form5 = Form5Api(client)
        self.form6k = Form6KApi(client)
        self.form20f = Form20FApi(client)
        self.remote_edgar = RemoteEdgarApi(client)

        self.search_history = SearchHistoryStore(storage)
        self.ui_settings = UiSettingsStore(storage)
        self.notifications = NotificationStore()

    def close(self) -> None:
        self.client.close()

    def __enter__(self) -> "App":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


def build_app(
    settings: DashboardSettings | None = None,
    storage: Storage | None = None,
    http: httpx.Client | None = None,
) -> App:
    """
    Build the application objects once at startup.

    Args:
        settings: Configuration; read from the environment when omitted
        storage: Backend for the persisted stores; defaults to a JSON file
                 in ``settings.state_dir``
        http: Optional ``httpx.Client`` handed to the transport (tests)
    """
    settings = settings or DashboardSettings()
    root_url = resolve_api_base_url(settings)
    if storage is None:
        storage = JsonFileStorage(settings.state_dir / STATE_FILE)
    client = ApiClient(root_url, timeout=settings.timeout_s, http=http)
    logger.debug("Using backend %s", client.base_url)
    return App(settings, client, storage)
