"""
Per-form endpoints for 8-K, 3, 5, 6-K and 20-F filings.

The five form types share one route layout, so each endpoint class only
names its path prefix, its model and the extra fields it accepts when
asking the backend to download and parse a filing.
"""

from typing import ClassVar

from sec_dashboard.api.base import Endpoint, query, required, segment
from sec_dashboard.forms import Form3, Form5, Form6K, Form8K, Form20F, FormFiling
from sec_dashboard.models import Page


class FormApi(Endpoint):
    """Shared routes of the per-form endpoints. Subclasses set ``resource`` and ``model``."""

    model: ClassVar[type[FormFiling]] = FormFiling
    download_fields: ClassVar[tuple[str, ...]] = ()

    def get_by_id(self, form_id: str):
        return self._one(self.model, self._client.get(self._path(segment(form_id))))

    def get_by_accession_number(self, accession_number: str):
        path = self._path("accession", segment(accession_number, "Accession number"))
        return self._one(self.model, self._client.get(path))

    def get_by_cik(self, cik: str, page: int = 0, size: int = 20) -> Page:
        """
        List filings of this form type for a company.

        Args:
            cik: Company CIK
            page: 0-based page number
            size: Page size

        Returns:
            One page of filings

        Raises:
            ValueError: If cik is empty
        """
        path = self._path("cik", segment(cik, "CIK"))
        return self._page(self.model, self._client.get(path, params=query(page=page, size=size)))

    def get_by_symbol(self, symbol: str, page: int = 0, size: int = 20) -> Page:
        """Like ``get_by_cik`` but by trading symbol, which is upper-cased."""
        path = self._path("symbol", segment(symbol, "Symbol").upper())
        return self._page(self.model, self._client.get(path, params=query(page=page, size=size)))

    def get_by_date_range(self, start_date: str, end_date: str, page: int = 0, size: int = 20) -> Page:
        params = query(startDate=start_date, endDate=end_date, page=page, size=size)
        return self._page(self.model, self._client.get(self._path("date-range"), params=params))

    def get_recent_filings(self, limit: int = 10) -> list:
        return self._many(self.model, self._client.get(self._path("recent"), params=query(limit=limit)))

    def download_and_parse(self, cik: str, accession_number: str, primary_document: str, **extra):
        """
        Ask the backend to fetch a filing from EDGAR, parse it and store it.

        Optional keyword arguments are limited to ``download_fields`` for the
        form type, e.g. ``company_name`` or ``filed_date``.

        Raises:
            ValueError: If cik, accession_number or primary_document is empty
            TypeError: If an extra field is not accepted for this form type
        """
        unknown = set(extra) - set(self.download_fields)
        if unknown:
            raise TypeError(f"Unexpected download fields for {self.resource}: {', '.join(sorted(unknown))}")
        params = query(
            cik=required(cik, "CIK"),
            accessionNumber=required(accession_number, "Accession number"),
            primaryDocument=required(primary_document, "Primary document"),
            **{_camel(name): extra.get(name) for name in self.download_fields},
        )
        return self._one(self.model, self._client.post(self._path("download"), params=params))


class Form8KApi(FormApi):
    resource = "form8k"
    model = Form8K
    download_fields = ("company_name", "filed_date", "report_date", "items")


class Form3Api(FormApi):
    resource = "form3"
    model = Form3
    download_fields = ("company_name", "filed_date")


class Form5Api(FormApi):
    resource = "form5"
    model = Form5
    download_fields = ("company_name", "filed_date")


class Form6KApi(FormApi):
    resource = "form6k"
    model = Form6K
    download_fields = ("company_name", "filed_date", "report_date")


class Form20FApi(FormApi):
    resource = "form20f"
    model = Form20F
    download_fields = ("company_name", "filed_date", "report_date")


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)
