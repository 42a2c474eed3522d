"""Static reference data and display helpers. All tables are read-only."""

from types import MappingProxyType

FORM_TYPES = (
    MappingProxyType({"value": "10-K", "label": "10-K (Annual Report)"}),
    MappingProxyType({"value": "10-Q", "label": "10-Q (Quarterly Report)"}),
    MappingProxyType({"value": "8-K", "label": "8-K (Current Report)"}),
    MappingProxyType({"value": "DEF 14A", "label": "DEF 14A (Proxy Statement)"}),
    MappingProxyType({"value": "4", "label": "Form 4 (Insider Trading)"}),
    MappingProxyType({"value": "S-1", "label": "S-1 (IPO Registration)"}),
    MappingProxyType({"value": "13F", "label": "13F (Holdings Report)"}),
    MappingProxyType({"value": "SC 13D", "label": "SC 13D (Beneficial Ownership)"}),
    MappingProxyType({"value": "SC 13G", "label": "SC 13G (Passive Ownership)"}),
)

SEC_FORM_TYPES = MappingProxyType({
    "FORM_10K": "10-K",
    "FORM_10Q": "10-Q",
    "FORM_8K": "8-K",
    "FORM_4": "4",
    "FORM_3": "3",
    "FORM_5": "5",
    "FORM_13F": "13F-HR",
    "FORM_13D": "SC 13D",
    "FORM_13G": "SC 13G",
    "FORM_6K": "6-K",
    "FORM_20F": "20-F",
})

DEFAULT_COLOR = "gray"

FORM_TYPE_COLORS = MappingProxyType({
    "10-K": "blue",
    "10-Q": "indigo",
    "8-K": "orange",
    "DEF 14A": "purple",
    "4": "pink",
    "S-1": "green",
    "13F": "yellow",
    "SC 13D": "red",
    "SC 13G": "gray",
})

FORM_8K_ITEMS = MappingProxyType({
    "1.01": "Entry into a Material Definitive Agreement",
    "1.02": "Termination of a Material Definitive Agreement",
    "1.03": "Bankruptcy or Receivership",
    "1.04": "Mine Safety - Reporting of Shutdowns and Patterns of Violations",
    "1.05": "Material Cybersecurity Incidents",
    "2.01": "Completion of Acquisition or Disposition of Assets",
    "2.02": "Results of Operations and Financial Condition",
    "2.03": "Creation of a Direct Financial Obligation",
    "2.04": "Triggering Events That Accelerate or Increase a Direct Financial Obligation",
    "2.05": "Costs Associated with Exit or Disposal Activities",
    "2.06": "Material Impairments",
    "3.01": "Notice of Delisting or Failure to Satisfy a Continued Listing Rule",
    "3.02": "Unregistered Sales of Equity Securities",
    "3.03": "Material Modification to Rights of Security Holders",
    "4.01": "Changes in Registrant's Certifying Accountant",
    "4.02": "Non-Reliance on Previously Issued Financial Statements",
    "5.01": "Changes in Control of Registrant",
    "5.02": "Departure or Appointment of Directors or Officers",
    "5.03": "Amendments to Articles of Incorporation or Bylaws",
    "5.04": "Temporary Suspension of Trading Under Employee Benefit Plans",
    "5.05": "Amendments to the Code of Ethics",
    "5.06": "Change in Shell Company Status",
    "5.07": "Submission of Matters to a Vote of Security Holders",
    "5.08": "Shareholder Director Nominations",
    "6.01": "ABS Informational and Computational Material",
    "6.02": "Change of Servicer or Trustee",
    "6.03": "Change in Credit Enhancement or Other External Support",
    "6.04": "Failure to Make a Required Distribution",
    "6.05": "Securities Act Updating Disclosure",
    "7.01": "Regulation FD Disclosure",
    "8.01": "Other Events",
    "9.01": "Financial Statements and Exhibits",
})

ITEM_CATEGORY_COLORS = MappingProxyType({
    "1": "red",
    "2": "orange",
    "3": "yellow",
    "4": "green",
    "5": "blue",
    "6": "purple",
    "7": "pink",
    "8": "gray",
    "9": "indigo",
})

CONCEPT_LABELS = MappingProxyType({
    "Assets": "Total Assets",
    "AssetsCurrent": "Current Assets",
    "Liabilities": "Total Liabilities",
    "LiabilitiesCurrent": "Current Liabilities",
    "StockholdersEquity": "Shareholders Equity",
    "LiabilitiesAndStockholdersEquity": "Total Liabilities & Equity",
    "CashAndCashEquivalentsAtCarryingValue": "Cash & Equivalents",
    "Revenues": "Revenue",
    "RevenueFromContractWithCustomerExcludingAssessedTax": "Revenue",
    "CostOfGoodsAndServicesSold": "Cost of Revenue",
    "GrossProfit": "Gross Profit",
    "OperatingIncomeLoss": "Operating Income",
    "NetIncomeLoss": "Net Income",
    "EarningsPerShareBasic": "EPS (Basic)",
    "EarningsPerShareDiluted": "EPS (Diluted)",
    "NetCashProvidedByUsedInOperatingActivities": "Operating Cash Flow",
    "NetCashProvidedByUsedInInvestingActivities": "Investing Cash Flow",
    "NetCashProvidedByUsedInFinancingActivities": "Financing Cash Flow",
})

CONCEPT_CATEGORIES = MappingProxyType({
    "Income Statement": (
        "Revenues",
        "RevenueFromContractWithCustomerExcludingAssessedTax",
        "CostOfGoodsAndServicesSold",
        "GrossProfit",
        "OperatingIncomeLoss",
        "NetIncomeLoss",
        "EarningsPerShareBasic",
        "EarningsPerShareDiluted",
    ),
    "Balance Sheet": (
        "Assets",
        "AssetsCurrent",
        "CashAndCashEquivalentsAtCarryingValue",
        "Liabilities",
        "LiabilitiesCurrent",
        "StockholdersEquity",
        "LiabilitiesAndStockholdersEquity",
    ),
    "Cash Flow": (
        "NetCashProvidedByUsedInOperatingActivities",
        "NetCashProvidedByUsedInInvestingActivities",
        "NetCashProvidedByUsedInFinancingActivities",
    ),
})

GAP = "..."


def form_type_color(form_type: str) -> str:
    return FORM_TYPE_COLORS.get(form_type, DEFAULT_COLOR)


def item_description(item_number: str) -> str:
    """Description of an 8-K item such as ``2.02``; unknown items come back unchanged."""
    return FORM_8K_ITEMS.get(item_number, item_number)


def item_category_color(item_number: str) -> str:
    return ITEM_CATEGORY_COLORS.get(item_number.split(".")[0], DEFAULT_COLOR)


def concept_label(concept: str) -> str:
    return CONCEPT_LABELS.get(concept, concept)


def format_financial_value(value: float, concept: str) -> str:
    """
    Format a key financial for display.

    Per-share values print with cents (``$6.13``). Everything else is scaled
    to B, M or K with two decimals, or whole dollars below a thousand.
    Negative amounts are wrapped in parentheses.
    """
    if "EarningsPerShare" in concept:
        return f"${value:.2f}"

    amount = abs(value)
    if amount >= 1_000_000_000:
        formatted = f"${amount / 1_000_000_000:.2f}B"
    elif amount >= 1_000_000:
        formatted = f"${amount / 1_000_000:.2f}M"
    elif amount >= 1_000:
        formatted = f"${amount / 1_000:.2f}K"
    else:
        formatted = f"${amount:.0f}"
    return f"({formatted})" if value < 0 else formatted


def page_window(page: int, total_pages: int, show: int = 5) -> list[int | str]:
    """
    Page numbers to offer around ``page`` (0-based).

    At most ``show`` consecutive pages are listed, plus the first and last
    page when they fall outside that window, with ``"..."`` marking skipped
    ranges.
    """
    half = show // 2
    start = max(0, page - half)
    end = min(total_pages - 1, page + half)
    if page - half < 0:
        end = min(total_pages - 1, show - 1)
    if page + half >= total_pages:
        start = max(0, total_pages - show)

    pages: list[int | str] = []
    if start > 0:
        pages.append(0)
        if start > 1:
            pages.append(GAP)
    pages.extend(range(start, end + 1))
    if end < total_pages - 1:
        if end < total_pages - 2:
            pages.append(GAP)
        pages.append(total_pages - 1)
    return pages


def item_range(page: int, size: int, total: int) -> tuple[int, int]:
    """1-based first and last item shown on ``page``, as in "Showing 21 to 40 of 95"."""
    return page * size + 1, min((page + 1) * size, total)
