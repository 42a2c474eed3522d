"""Filing export to CSV or JSON files."""

import logging
from pathlib import Path

from sec_dashboard.api.base import Endpoint
from sec_dashboard.models import ExportRequest

logger = logging.getLogger(__name__)

CSV_FILENAME = "filings-export.csv"
JSON_FILENAME = "filings-export.json"


class ExportApi(Endpoint):
    """Export filings; the backend returns the file body, which is saved locally."""

    resource = "export"

    def __init__(self, client, directory: Path | str = "."):
        super().__init__(client)
        self._directory = Path(directory)

    def export_to_csv(self, request: ExportRequest, directory: Path | str | None = None) -> Path:
        """
        Export matching filings as CSV and save the file.

        Args:
            request: Filing filters, or explicit filing ids
            directory: Where to write the file; the configured export directory
                       when omitted

        Returns:
            Path of the written file

        Raises:
            ApiError: If the export request fails
        """
        content = self._client.download_file(self._path("csv"), json=request.to_wire())
        return self._save(content, CSV_FILENAME, directory)

    def export_to_json(self, request: ExportRequest, directory: Path | str | None = None) -> Path:
        """Same as ``export_to_csv`` but writes a JSON array."""
        content = self._client.download_file(self._path("json"), json=request.to_wire())
        return self._save(content, JSON_FILENAME, directory)

    def _save(self, content: bytes, filename: str, directory: Path | str | None) -> Path:
        target_dir = Path(directory) if directory is not None else self._directory
        target_dir.mkdir(parents=True, exist_ok=True)
        target = target_dir / filename
        target.write_bytes(content)
        logger.info("Exported %d bytes to %s", len(content), target)
        return target
