"""Models for XBRL parse results served by the backend."""

from enum import Enum

from pydantic import Field

from sec_dashboard.models import ApiModel


class XbrlFormat(str, Enum):
    XBRL = "XBRL"
    INLINE_XBRL = "INLINE_XBRL"
    UNKNOWN = "UNKNOWN"


class StatementType(str, Enum):
    BALANCE_SHEET = "BALANCE_SHEET"
    INCOME_STATEMENT = "INCOME_STATEMENT"
    CASH_FLOW = "CASH_FLOW"
    STOCKHOLDERS_EQUITY = "STOCKHOLDERS_EQUITY"


class XbrlSummary(ApiModel):
    document_uri: str | None = None
    format: XbrlFormat = XbrlFormat.UNKNOWN
    parse_time: str | None = None
    entity_identifier: str | None = None
    total_facts: int = 0
    total_contexts: int = 0
    total_units: int = 0
    facts_by_type: dict[str, int] = Field(default_factory=dict)
    facts_by_namespace: dict[str, int] = Field(default_factory=dict)
    parse_time_ms: int = 0
    success_rate: float = 0
    nested_facts_extracted: int = 0
    warnings: int = 0
    errors: int = 0


class XbrlPackageSummary(ApiModel):
    package_uri: str | None = None
    total_files: int = 0
    instance_files: list[str] = Field(default_factory=list)
    total_facts: int = 0
    instances: int = 0
    errors: dict[str, str] = Field(default_factory=dict)


class SecFilingMetadata(ApiModel):
    entity_name: str | None = None
    cik: str | None = None
    trading_symbol: str | None = None
    security_exchange: str | None = None
    form_type: str | None = None
    is_amendment: bool = False
    document_period_end_date: str | None = None
    fiscal_year: int | None = None
    fiscal_period: str | None = None
    fiscal_year_end_date: str | None = None
    shares_outstanding: int | None = None
    filing_category: str | None = None
    dei_data: dict[str, str] = Field(default_factory=dict)


class ReportingPeriod(ApiModel):
    context_id: str
    start_date: str | None = None
    end_date: str | None = None
    is_instant: bool = False
    duration_days: int = 0
    label: str = ""


class LineItem(ApiModel):
    concept: str
    label: str = ""
    indent_level: int = 0
    is_total: bool = False
    is_subtotal: bool = False
    unit: str | None = None
    is_monetary: bool = False
    values_by_period: dict[str, float] = Field(default_factory=dict)


class FinancialStatement(ApiModel):
    type: StatementType
    title: str = ""
    line_items: list[LineItem] = Field(default_factory=list)
    periods: list[ReportingPeriod] = Field(default_factory=list)


class FinancialStatements(ApiModel):
    entity_name: str | None = None
    cik: str | None = None
    fiscal_year_end: str | None = None
    periods: list[ReportingPeriod] = Field(default_factory=list)
    balance_sheet: FinancialStatement | None = None
    income_statement: FinancialStatement | None = None
    cash_flow_statement: FinancialStatement | None = None
    equity_statement: FinancialStatement | None = None


class CalculationValidation(ApiModel):
    total_checks: int = 0
    valid_calculations: int = 0
    errors: int = 0
    is_valid: bool = False


class ComprehensiveAnalysis(ApiModel):
    summary: XbrlSummary
    sec_metadata: SecFilingMetadata | None = None
    key_financials: dict[str, float] = Field(default_factory=dict)
    standardized_values: dict[str, float] = Field(default_factory=dict)
    unmapped_concepts: int = 0
    calculation_validation: CalculationValidation | None = None


class XbrlFact(ApiModel):
    concept: str
    namespace: str | None = None
    full_namespace: str | None = None
    value: float | str | None = None
    raw_value: str | None = None
    fact_type: str | None = None
    is_nil: bool = False
    context_ref: str | None = None
    context_description: str | None = None
    period_end: str | None = None
    unit_ref: str | None = None
    unit_display: str | None = None
    decimals: int | None = None
    scale: int | None = None
