"""XBRL analysis actions."""

from sec_dashboard.api.xbrl import XbrlApi
from sec_dashboard.resources.base import ActionState
from sec_dashboard.xbrl import (
    CalculationValidation,
    ComprehensiveAnalysis,
    FinancialStatements,
    SecFilingMetadata,
    XbrlFact,
    XbrlPackageSummary,
    XbrlSummary,
)


class XbrlActions:
    """
    On-demand XBRL analysis of a filing URL.

    Each kind of result has its own ``ActionState`` so the summary, the
    statements and the facts can be loaded side by side. Every action stores
    its result in the matching state's ``data`` and re-raises on failure.
    """

    def __init__(self, api: XbrlApi):
        self._api = api
        self.summary: ActionState[XbrlSummary] = ActionState()
        self.package: ActionState[XbrlPackageSummary] = ActionState()
        self.analysis: ActionState[ComprehensiveAnalysis] = ActionState()
        self.statements: ActionState[FinancialStatements] = ActionState()
        self.metadata: ActionState[SecFilingMetadata] = ActionState()
        self.financials: ActionState[dict[str, float]] = ActionState()
        self.validation: ActionState[CalculationValidation] = ActionState()
        self.facts: ActionState[list[XbrlFact]] = ActionState()

    def parse(self, url: str) -> XbrlSummary:
        return self.summary.run(lambda: self._api.parse_from_url(url), "Failed to parse XBRL")

    def parse_package(self, url: str) -> XbrlPackageSummary:
        return self.package.run(lambda: self._api.parse_package_from_url(url), "Failed to parse XBRL package")

    def analyze(self, url: str) -> ComprehensiveAnalysis:
        return self.analysis.run(lambda: self._api.get_comprehensive_analysis(url), "Failed to analyze XBRL")

    def load_statements(self, url: str) -> FinancialStatements:
        return self.statements.run(lambda: self._api.get_statements(url), "Failed to load statements")

    def load_metadata(self, url: str) -> SecFilingMetadata:
        return self.metadata.run(lambda: self._api.get_sec_metadata(url), "Failed to load SEC metadata")

    def load_financials(self, url: str) -> dict[str, float]:
        return self.financials.run(lambda: self._api.get_financials_from_url(url), "Failed to load financials")

    def validate(self, url: str) -> CalculationValidation:
        return self.validation.run(lambda: self._api.validate_from_url(url), "Failed to validate")

    def load_facts(self, url: str) -> list[XbrlFact]:
        return self.facts.run(lambda: self._api.export_facts(url), "Failed to load facts")

    def search_facts(self, url: str, query: str) -> list[XbrlFact]:
        return self.facts.run(lambda: self._api.search_facts(url, query), "Failed to search facts")
