"""Tests for financial summary extraction."""

import pytest

from form6.extraction.summary import FinancialSummary, SummaryExtractor
from form6.parsers.contexts import CurrentContextPolicy
from form6.parsers.xbrl_parser import XBRLParser


@pytest.fixture
def extractor():
    return SummaryExtractor(CurrentContextPolicy())


class TestFinancialSummary:
    """Tests for the FinancialSummary aggregates."""

    def test_zero_defaults(self):
        summary = FinancialSummary(company_name="Empty", file_name="empty.xbrl")

        assert summary.operating_revenue == 0.0
        assert summary.operating_expenses == 0.0
        assert summary.ebitda == 0.0
        assert summary.net_income == 0.0

    def test_aggregates(self):
        summary = FinancialSummary(
            company_name="Acme",
            file_name="acme.xbrl",
            trunk_revenues=100.0,
            gathering_revenues=20.0,
            delivery_revenues=5.0,
            operation_expenses=40.0,
            maintenance_expenses=10.0,
        )

        assert summary.operating_revenue == 125.0
        assert summary.operating_expenses == 50.0
        assert summary.ebitda == 75.0

    def test_to_dict_includes_aggregates(self):
        data = FinancialSummary("Acme", "acme.xbrl", trunk_revenues=10.0).to_dict()
        assert data["operating_revenue"] == 10.0
        assert data["ebitda"] == 10.0
        assert data["company_name"] == "Acme"

    def test_overview_record(self):
        summary = FinancialSummary("Acme", "acme.xbrl", trunk_revenues=10.0, carrier_property=7.0)
        overview = summary.to_overview(2024)

        assert overview["report_year"] == 2024
        assert overview["operating_revenue"] == 10.0
        assert overview["carrier_property"] == 7.0
        assert overview["detailed_property"] == 7.0


class TestSummaryExtractor:
    """Tests for SummaryExtractor."""

    def test_extract_sample(self, extractor, sample_document):
        summary = extractor.extract(sample_document, "Example Pipeline Co")

        assert summary.company_name == "Example Pipeline Co"
        assert summary.file_name == sample_document.source_name
        # current context wins over the earlier prior-year fact
        assert summary.trunk_revenues == 1_000_000
        assert summary.operating_revenue == 1_300_000
        assert summary.operating_expenses == 500_000
        assert summary.ebitda == 800_000
        assert summary.carrier_property == 5_000_000
        assert summary.total_assets == 6_000_000
        assert summary.net_income == 300_000

    def test_net_income_fallback(self, extractor, fallback_document):
        summary = extractor.extract(fallback_document, "Other Pipeline LLC")

        assert summary.net_income == 750_000
        assert summary.trunk_revenues == 2_000_000
        assert summary.gathering_revenues == 0.0
        assert summary.ebitda == 2_000_000

    def test_missing_fields_are_zero(self, extractor):
        document = XBRLParser().parse_bytes(
            b'<xbrl xmlns:ferc="http://ferc.gov/form/2024-01-01/ferc">'
            b'<ferc:Unrelated contextRef="C1">1</ferc:Unrelated></xbrl>'
        )
        summary = extractor.extract(document, "Bare")

        assert summary.to_dict() == {
            "company_name": "Bare",
            "file_name": "<memory>",
            "trunk_revenues": 0.0,
            "gathering_revenues": 0.0,
            "delivery_revenues": 0.0,
            "operation_expenses": 0.0,
            "maintenance_expenses": 0.0,
            "carrier_property": 0.0,
            "total_assets": 0.0,
            "net_income": 0.0,
            "operating_revenue": 0.0,
            "operating_expenses": 0.0,
            "ebitda": 0.0,
        }

    def test_custom_context_predicate(self, sample_document):
        summary = SummaryExtractor(lambda ref: ref == "C_prior").extract(sample_document, "X")
        assert summary.trunk_revenues == 900_000
