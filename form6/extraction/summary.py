"""
Financial summary extraction.

Builds the flat per-filing summary: revenue and expense components, carrier
property, total assets, net income and the derived aggregates.
"""

from dataclasses import asdict, dataclass
from typing import Any, Optional

from ..core.base_types import ContextPredicate
from ..parsers.xbrl_parser import FilingDocument, ValueResolver
from ..utils.logger import get_logger
from .taxonomy import NET_INCOME_FALLBACK_TAG, NET_INCOME_TAG, SUMMARY_TAGS

logger = get_logger("form6.extraction.summary")


@dataclass
class FinancialSummary:
    """
    Flat financial summary of one filing.

    Components default to zero when the filing does not report them, so the
    aggregates are always plain numbers.
    """
    company_name: str
    file_name: str

    # Operating revenues
    trunk_revenues: float = 0.0
    gathering_revenues: float = 0.0
    delivery_revenues: float = 0.0

    # Operating expenses
    operation_expenses: float = 0.0
    maintenance_expenses: float = 0.0

    # Assets
    carrier_property: float = 0.0
    total_assets: float = 0.0

    net_income: float = 0.0

    @property
    def operating_revenue(self) -> float:
        return self.trunk_revenues + self.gathering_revenues + self.delivery_revenues

    @property
    def operating_expenses(self) -> float:
        return self.operation_expenses + self.maintenance_expenses

    @property
    def ebitda(self) -> float:
        return self.operating_revenue - self.operating_expenses

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain dict including the aggregates."""
        data = asdict(self)
        data["operating_revenue"] = self.operating_revenue
        data["operating_expenses"] = self.operating_expenses
        data["ebitda"] = self.ebitda
        return data

    def to_overview(self, report_year: int) -> dict[str, Any]:
        """Financial overview record served to the web layer."""
        return {
            "company_name": self.company_name,
            "report_year": report_year,
            "operating_revenue": self.operating_revenue,
            "operating_expenses": self.operating_expenses,
            "net_income": self.net_income,
            "ebitda": self.ebitda,
            "total_assets": self.total_assets,
            "carrier_property": self.carrier_property,
            "detailed_property": self.carrier_property,
        }


class SummaryExtractor:
    """Extracts a FinancialSummary from a parsed filing."""

    def __init__(self, is_current_context: Optional[ContextPredicate] = None) -> None:
        self.is_current_context = is_current_context

    def extract(
        self,
        document: FilingDocument,
        company_name: str,
    ) -> FinancialSummary:
        resolver = ValueResolver(document, self.is_current_context)

        components = {
            field_name: resolver.value_or_zero(tag)
            for field_name, tag in SUMMARY_TAGS.items()
        }

        # A zero net income is treated like a missing one
        net_income = resolver.value(NET_INCOME_TAG)
        if not net_income:
            net_income = resolver.value_or_zero(NET_INCOME_FALLBACK_TAG)

        summary = FinancialSummary(
            company_name=company_name,
            file_name=document.source_name,
            net_income=net_income,
            **components,
        )
        logger.debug(
            f"Summary for {document.source_name}: revenue={summary.operating_revenue:,.0f} "
            f"expenses={summary.operating_expenses:,.0f} ebitda={summary.ebitda:,.0f}"
        )
        return summary
