"""Tests for reference tables and display helpers."""

import pytest

from sec_dashboard.lookups import (
    CONCEPT_CATEGORIES,
    DEFAULT_COLOR,
    FORM_8K_ITEMS,
    FORM_TYPE_COLORS,
    FORM_TYPES,
    GAP,
    SEC_FORM_TYPES,
    concept_label,
    form_type_color,
    format_financial_value,
    item_category_color,
    item_description,
    item_range,
    page_window,
)


class TestTables:
    """Tests for the static tables."""

    def test_form_types_order(self):
        """Test the option list starts with annual and quarterly reports."""
        assert [option["value"] for option in FORM_TYPES[:3]] == ["10-K", "10-Q", "8-K"]

    def test_tables_are_read_only(self):
        """Test that lookups cannot be changed at runtime."""
        with pytest.raises(TypeError):
            FORM_TYPE_COLORS["10-K"] = "red"
        with pytest.raises(TypeError):
            SEC_FORM_TYPES["FORM_4"] = "4/A"
        with pytest.raises(TypeError):
            FORM_TYPES[0]["label"] = "Annual"
        with pytest.raises(AttributeError):
            CONCEPT_CATEGORIES["Balance Sheet"].append("Goodwill")

    def test_sec_form_types(self):
        """Test a few form code mappings."""
        assert SEC_FORM_TYPES["FORM_13F"] == "13F-HR"
        assert SEC_FORM_TYPES["FORM_20F"] == "20-F"


class TestColors:
    """Tests for badge colors."""

    def test_known_form_type(self):
        """Test a mapped form type."""
        assert form_type_color("8-K") == "orange"

    def test_unknown_form_type(self):
        """Test the default color."""
        assert form_type_color("N-CSR") == DEFAULT_COLOR

    def test_item_category(self):
        """Test that the color depends on the item's section."""
        assert item_category_color("2.02") == "orange"
        assert item_category_color("9.01") == "indigo"
        assert item_category_color("X") == DEFAULT_COLOR


class TestDescriptions:
    """Tests for 8-K items and XBRL concept labels."""

    def test_item_description(self):
        """Test a known item."""
        assert item_description("2.02") == FORM_8K_ITEMS["2.02"]
        assert item_description("2.02") == "Results of Operations and Financial Condition"

    def test_unknown_item(self):
        """Test that unknown items come back unchanged."""
        assert item_description("10.01") == "10.01"

    def test_concept_label(self):
        """Test concept labels and the pass-through for unknown concepts."""
        assert concept_label("NetIncomeLoss") == "Net Income"
        assert concept_label("Goodwill") == "Goodwill"


class TestFormatFinancialValue:
    """Tests for compact money formatting."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (394_328_000_000, "$394.33B"),
            (2_500_000, "$2.50M"),
            (1_500, "$1.50K"),
            (999, "$999"),
            (-2_500_000, "($2.50M)"),
        ],
    )
    def test_scaling(self, value, expected):
        """Test the B/M/K suffixes and negative amounts."""
        assert format_financial_value(value, "Revenues") == expected

    def test_per_share(self):
        """Test that EPS keeps cents and is not scaled."""
        assert format_financial_value(6.13, "EarningsPerShareDiluted") == "$6.13"


class TestPagination:
    """Tests for page number windows."""

    def test_start(self):
        """Test the window at the first page."""
        assert page_window(0, 10) == [0, 1, 2, 3, 4, GAP, 9]

    def test_middle(self):
        """Test gaps on both sides."""
        assert page_window(5, 10) == [0, GAP, 3, 4, 5, 6, 7, GAP, 9]

    def test_end(self):
        """Test the window at the last page."""
        assert page_window(9, 10) == [0, GAP, 5, 6, 7, 8, 9]

    def test_few_pages(self):
        """Test that short results list every page."""
        assert page_window(1, 3) == [0, 1, 2]

    def test_no_pages(self):
        """Test an empty result."""
        assert page_window(0, 0) == []

    def test_item_range(self):
        """Test the shown item numbers, including a short last page."""
        assert item_range(1, 20, 95) == (21, 40)
        assert item_range(4, 20, 95) == (81, 95)
