"""Models for form-specific filings (13F, 13D/G, 8-K, 3, 5, 6-K, 20-F).

These mirror backend documents without interpreting them. Only the fields the
client reads are declared; anything else the backend sends is kept as an
extra attribute.
"""

import re
from enum import Enum

from pydantic import Field

from sec_dashboard.models import Address, ApiModel


class FormFiling(ApiModel):
    """Fields shared by every form-specific filing."""

    id: str | None = None
    accession_number: str
    cik: str | None = None
    form_type: str | None = None
    filed_date: str | None = None


class Exhibit(ApiModel):
    exhibit_number: str | None = None
    description: str | None = None
    document: str | None = None


# 13F

class Form13FHolding(ApiModel):
    name_of_issuer: str | None = None
    title_of_class: str | None = None
    cusip: str | None = None
    figi: str | None = None
    value: float | None = None
    shares_or_principal_amount: int | None = None
    shares_or_principal_amount_type: str | None = None
    put_call: str | None = None
    investment_discretion: str | None = None
    other_manager: str | int | None = None
    voting_authority_sole: int | None = None
    voting_authority_shared: int | None = None
    voting_authority_none: int | None = None


class Form13F(FormFiling):
    filer_name: str | None = None
    report_period: str | None = None
    holdings_count: int | None = None
    total_value: float | None = None
    holdings: list[Form13FHolding] = Field(default_factory=list)


class FilerSummary(ApiModel):
    cik: str | None = None
    filer_name: str | None = None
    total_value: float | None = None
    holdings_count: int | None = None


class HoldingSummary(ApiModel):
    cusip: str | None = None
    name_of_issuer: str | None = None
    total_value: float | None = None
    total_shares: int | None = None
    holder_count: int | None = None


class PortfolioSnapshot(ApiModel):
    report_period: str | None = None
    total_value: float | None = None
    holdings_count: int | None = None


class InstitutionalOwnershipStats(ApiModel):
    cusip: str | None = None
    report_period: str | None = None
    total_value: float | None = None
    total_shares: int | None = None
    holder_count: int | None = None


class HoldingsComparison(ApiModel):
    cik: str | None = None
    period1: str | None = None
    period2: str | None = None


# 13D / 13G

class ScheduleType(str, Enum):
    SCHEDULE_13D = "13D"
    SCHEDULE_13G = "13G"


class Form13DG(FormFiling):
    schedule_type: str | None = None
    event_date: str | None = None
    amendment_number: int | None = None
    cusip: str | None = None
    issuer_name: str | None = None
    issuer_cik: str | None = None
    security_title: str | None = None
    filing_person_name: str | None = None
    filing_person_cik: str | None = None
    filing_person_address: Address | None = None
    percent_of_class: float | None = None
    shares_beneficially_owned: int | None = None
    purpose_of_transaction: str | None = None

    @property
    def is_activist(self) -> bool:
        return self.schedule_type == ScheduleType.SCHEDULE_13D.value


class BeneficialOwnerSummary(ApiModel):
    filer_cik: str | None = None
    filer_name: str | None = None
    percent_of_class: float | None = None
    shares_owned: int | None = None
    schedule_type: str | None = None


class OwnershipHistoryEntry(ApiModel):
    accession_number: str | None = None
    filed_date: str | None = None
    event_date: str | None = None
    percent_of_class: float | None = None
    shares_owned: int | None = None


class OwnerPortfolioEntry(ApiModel):
    cusip: str | None = None
    issuer_name: str | None = None
    percent_of_class: float | None = None
    shares_owned: int | None = None


class BeneficialOwnershipSnapshot(ApiModel):
    cusip: str | None = None
    issuer_name: str | None = None
    owners: list[BeneficialOwnerSummary] = Field(default_factory=list)


# Current and foreign issuer reports

_ITEM_SEPARATOR = re.compile(r"[,;]")


class ItemSection(ApiModel):
    item_number: str | None = None
    title: str | None = None
    content: str | None = None


class Form8K(FormFiling):
    company_name: str | None = None
    trading_symbol: str | None = None
    report_date: str | None = None
    primary_document: str | None = None
    items: str | None = None
    item_sections: list[ItemSection] = Field(default_factory=list)
    exhibits: list[Exhibit] = Field(default_factory=list)

    def item_numbers(self) -> list[str]:
        """Split the ``items`` field ("2.02, 9.01") into item numbers."""
        if not self.items:
            return []
        return [part.strip() for part in _ITEM_SEPARATOR.split(self.items) if part.strip()]


class Form6K(FormFiling):
    company_name: str | None = None
    trading_symbol: str | None = None
    report_date: str | None = None
    primary_document: str | None = None
    report_text: str | None = None
    exhibits: list[Exhibit] = Field(default_factory=list)


class Form20F(FormFiling):
    company_name: str | None = None
    trading_symbol: str | None = None
    security_exchange: str | None = None
    report_date: str | None = None
    document_period_end_date: str | None = None
    fiscal_year: int | None = None
    fiscal_period: str | None = None
    shares_outstanding: int | None = None
    is_amendment: bool | None = None
    primary_document: str | None = None


# Insider ownership

class OwnershipForm(FormFiling):
    """Forms 3 and 5 share the ownership document layout."""

    document_type: str | None = None
    period_of_report: str | None = None
    issuer_name: str | None = None
    trading_symbol: str | None = None
    rpt_owner_cik: str | None = None
    rpt_owner_name: str | None = None
    officer_title: str | None = None
    owner_type: str | None = None


class Form3(OwnershipForm):
    pass


class Form5(OwnershipForm):
    pass
