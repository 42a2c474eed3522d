"""XBRL analysis endpoints. Each takes the URL of an XBRL instance or package."""

from sec_dashboard.api.base import Endpoint, query
from sec_dashboard.xbrl import (
    CalculationValidation,
    ComprehensiveAnalysis,
    FinancialStatements,
    SecFilingMetadata,
    XbrlFact,
    XbrlPackageSummary,
    XbrlSummary,
)


class XbrlApi(Endpoint):
    """Parse and analyse XBRL documents on the backend."""

    resource = "xbrl"

    def _by_url(self, *path: str, url: str, **extra):
        if not url or not url.strip():
            raise ValueError("URL cannot be empty")
        return self._client.get(self._path(*path), params=query(url=url.strip(), **extra))

    def parse_from_url(self, url: str) -> XbrlSummary:
        """
        Parse an XBRL instance document.

        Args:
            url: URL of the instance document

        Returns:
            Summary of the parsed document

        Raises:
            ValueError: If url is empty
            ApiError: If the backend cannot fetch or parse the document
        """
        return self._one(XbrlSummary, self._by_url("parse", url=url))

    def parse_package_from_url(self, url: str) -> XbrlPackageSummary:
        return self._one(XbrlPackageSummary, self._by_url("parse-package", url=url))

    def get_financials_from_url(self, url: str) -> dict[str, float]:
        """Key financial values keyed by concept name (e.g. ``NetIncomeLoss``)."""
        return dict(self._by_url("financials", url=url) or {})

    def validate_from_url(self, url: str) -> CalculationValidation:
        return self._one(CalculationValidation, self._by_url("validate", url=url))

    def get_cache_stats(self) -> dict[str, float]:
        return dict(self._client.get(self._path("cache", "stats")) or {})

    def clear_cache(self) -> None:
        self._client.post(self._path("cache", "clear"))

    def get_comprehensive_analysis(self, url: str) -> ComprehensiveAnalysis:
        return self._one(ComprehensiveAnalysis, self._by_url("analysis", url=url))

    def get_statements(self, url: str) -> FinancialStatements:
        return self._one(FinancialStatements, self._by_url("statements", url=url))

    def get_sec_metadata(self, url: str) -> SecFilingMetadata:
        return self._one(SecFilingMetadata, self._by_url("sec-metadata", url=url))

    def export_facts(self, url: str) -> list[XbrlFact]:
        return self._many(XbrlFact, self._by_url("facts", url=url))

    def search_facts(self, url: str, query_text: str) -> list[XbrlFact]:
        """
        Search facts by concept name or label.

        Args:
            url: URL of the instance document
            query_text: Text to match

        Raises:
            ValueError: If url is empty
        """
        return self._many(XbrlFact, self._by_url("facts", "search", url=url, query=query_text))
