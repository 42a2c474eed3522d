"""Export actions."""

from pathlib import Path

from sec_dashboard.api.export import ExportApi
from sec_dashboard.models import ExportFormat, ExportRequest, FilingSearchRequest
from sec_dashboard.resources.base import ActionState


class ExportActions:
    """Export filings selected by id or by search criteria to a local file."""

    def __init__(self, api: ExportApi):
        self._api = api
        self._state: ActionState[Path] = ActionState()

    @property
    def loading(self) -> bool:
        return self._state.loading

    @property
    def error(self) -> str | None:
        return self._state.error

    @property
    def last_export(self) -> Path | None:
        return self._state.data

    def export_to_csv(
        self,
        filing_ids: list[str] | None = None,
        search_criteria: FilingSearchRequest | None = None,
        directory: Path | str | None = None,
    ) -> Path:
        request = ExportRequest(filing_ids=filing_ids, search_criteria=search_criteria, format=ExportFormat.CSV)
        return self._state.run(lambda: self._api.export_to_csv(request, directory), "Failed to export to CSV")

    def export_to_json(
        self,
        filing_ids: list[str] | None = None,
        search_criteria: FilingSearchRequest | None = None,
        directory: Path | str | None = None,
    ) -> Path:
        request = ExportRequest(filing_ids=filing_ids, search_criteria=search_criteria, format=ExportFormat.JSON)
        return self._state.run(lambda: self._api.export_to_json(request, directory), "Failed to export to JSON")
