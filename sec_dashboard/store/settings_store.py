"""Local UI preferences, saved on every change."""

from sec_dashboard.store.storage import Storage, StoredState, load_state, save_state

SETTINGS_STORE_KEY = "settings-store"
DEFAULT_USER_AGENT = "SecDashboard/1.0 (contact@example.com)"


class UiSettings(StoredState):
    user_agent: str = DEFAULT_USER_AGENT
    auto_refresh: bool = True
    refresh_interval: int = 300
    dark_mode: bool = False
    email_notifications: bool = False


class UiSettingsStore:
    """Local preferences, persisted under ``settings-store``. Every change is saved immediately."""

    def __init__(self, storage: Storage):
        self._storage = storage
        self._settings = load_state(storage, SETTINGS_STORE_KEY, UiSettings)

    @property
    def settings(self) -> UiSettings:
        return self._settings.model_copy()

    @property
    def user_agent(self) -> str:
        return self._settings.user_agent

    @property
    def auto_refresh(self) -> bool:
        return self._settings.auto_refresh

    @property
    def refresh_interval(self) -> int:
        return self._settings.refresh_interval

    @property
    def dark_mode(self) -> bool:
        return self._settings.dark_mode

    @property
    def email_notifications(self) -> bool:
        return self._settings.email_notifications

    def set_user_agent(self, user_agent: str) -> None:
        self.update_all(user_agent=user_agent)

    def set_auto_refresh(self, auto_refresh: bool) -> None:
        self.update_all(auto_refresh=auto_refresh)

    def set_refresh_interval(self, refresh_interval: int) -> None:
        self.update_all(refresh_interval=refresh_interval)

    def set_dark_mode(self, dark_mode: bool) -> None:
        self.update_all(dark_mode=dark_mode)

    def set_email_notifications(self, email_notifications: bool) -> None:
        self.update_all(email_notifications=email_notifications)

    def update_all(self, **changes) -> UiSettings:
        """Apply several changes at once; unknown names raise ValueError."""
        unknown = set(changes) - set(UiSettings.model_fields)
        if unknown:
            raise ValueError(f"Unknown settings: {', '.join(sorted(unknown))}")
        self._settings = UiSettings.model_validate({**self._settings.model_dump(), **changes})
        self._save()
        return self.settings

    def clear(self) -> None:
        """Forget saved preferences and go back to the defaults."""
        self._settings = UiSettings()
        self._storage.remove(SETTINGS_STORE_KEY)

    def _save(self) -> None:
        save_state(self._storage, SETTINGS_STORE_KEY, self._settings)
