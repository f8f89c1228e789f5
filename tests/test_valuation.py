"""Tests for the valuation calculator."""

import pytest

from form6.business.valuation import (
    ApproachWeights,
    CostInputs,
    IncomeInputs,
    MarketInputs,
    ValuationAssumptions,
    cost_approach,
    income_approach,
    market_approach,
    value_pipeline,
)
from form6.core.exceptions import ValuationError
from form6.extraction.summary import FinancialSummary
from form6.utils.config import ValuationConfig


@pytest.fixture
def summary():
    return FinancialSummary(
        company_name="Example Pipeline Co",
        file_name="example.xbrl",
        trunk_revenues=1_000_000,
        gathering_revenues=250_000,
        delivery_revenues=50_000,
        operation_expenses=400_000,
        maintenance_expenses=100_000,
        carrier_property=5_000_000,
        total_assets=6_000_000,
        net_income=300_000,
    )


class TestApproaches:
    """Tests for the three valuation approaches."""

    def test_cost_approach(self):
        result = cost_approach(CostInputs(1_000_000, 25, 5, 3))

        assert result.physical_depreciation == 250_000
        assert result.total_depreciation == pytest.approx(330_000)
        assert result.value == pytest.approx(670_000)

    def test_income_approach(self):
        result = income_approach(IncomeInputs(
            revenue=300,
            expenses=200,
            growth_rate_pct=0,
            discount_rate_pct=10,
            projection_years=1,
            terminal_growth_pct=0,
        ))

        assert result.base_cash_flow == 100
        assert result.pv_cash_flows == pytest.approx(100 / 1.1)
        assert result.terminal_value == pytest.approx(1000)
        assert result.value == pytest.approx(1000)

    def test_income_discount_equals_terminal_growth(self):
        with pytest.raises(ValuationError):
            income_approach(IncomeInputs(300, 200, discount_rate_pct=2, terminal_growth_pct=2))

    def test_income_invalid_projection(self):
        with pytest.raises(ValuationError):
            income_approach(IncomeInputs(300, 200, projection_years=0))

    def test_market_approach(self):
        result = market_approach(MarketInputs(1_000_000, 10, -5, 2))

        assert result.base_value == 10_000_000
        assert result.size_adjustment == pytest.approx(-500_000)
        assert result.geographic_adjustment == pytest.approx(200_000)
        assert result.value == pytest.approx(9_700_000)

    def test_weights_normalized(self):
        assert ApproachWeights(1, 1, 2).normalized() == (0.25, 0.25, 0.5)

    def test_zero_weights(self):
        with pytest.raises(ValuationError):
            ApproachWeights(0, 0, 0).normalized()


class TestAssumptions:
    """Tests for assumptions derived from a financial summary."""

    def test_from_summary(self, summary):
        a = ValuationAssumptions.from_summary(
            summary, report_year=2024, as_of_year=2026, config=ValuationConfig()
        )

        assert a.asset_age_years == 2
        assert a.cost.replacement_cost_new == 5_000_000
        assert a.cost.physical_depreciation_pct == 28
        assert a.cost.functional_obsolescence_pct == 6
        assert a.cost.economic_obsolescence_pct == 3
        assert a.profit_margin_pct == pytest.approx(800 / 1300 * 100)
        assert a.income.growth_rate_pct == 5
        assert a.income.discount_rate_pct == 7.5
        assert a.market.ebitda == 800_000
        assert a.market.ev_ebitda_multiple == 10.0
        assert a.market.size_adjustment_pct == -5

    def test_depreciation_caps(self, summary):
        a = ValuationAssumptions.from_summary(
            summary, report_year=2000, as_of_year=2060, config=ValuationConfig()
        )
        assert a.cost.physical_depreciation_pct == 60
        assert a.cost.functional_obsolescence_pct == 15

    def test_fallbacks_for_empty_summary(self):
        a = ValuationAssumptions.from_summary(
            FinancialSummary("Empty", "empty.xbrl"),
            report_year=2024,
            as_of_year=2024,
            config=ValuationConfig(),
        )

        assert a.cost.replacement_cost_new == 80_000_000
        assert a.income.revenue == 15_000_000
        assert a.income.expenses == 8_000_000
        assert a.market.ebitda == 9_000_000
        # asset size falls back to replacement cost (80M)
        assert a.market.ev_ebitda_multiple == 11.5
        assert a.market.size_adjustment_pct == -2

    def test_low_margin_discount(self):
        summary = FinancialSummary(
            "Thin", "thin.xbrl", trunk_revenues=1_000_000, operation_expenses=990_000
        )
        a = ValuationAssumptions.from_summary(
            summary, report_year=2024, as_of_year=2024, config=ValuationConfig()
        )
        assert a.income.discount_rate_pct == 10.0
        assert a.income.growth_rate_pct == 1.5


class TestValuePipeline:
    """Tests for the weighted valuation."""

    def test_weighted_final_value(self, summary):
        assumptions = ValuationAssumptions.from_summary(
            summary, report_year=2024, as_of_year=2024, config=ValuationConfig()
        )
        result = value_pipeline(assumptions)

        expected = result.cost.value * 0.3 + result.income.value * 0.5 + result.market.value * 0.2
        assert result.final_value == pytest.approx(expected)
        assert result.normalized_weights == pytest.approx((0.3, 0.5, 0.2))

    def test_notes(self, summary):
        assumptions = ValuationAssumptions.from_summary(
            summary, report_year=2024, as_of_year=2024, config=ValuationConfig()
        )
        notes = value_pipeline(assumptions).to_notes()

        assert "COST APPROACH" in notes
        assert "Replacement Cost New: $5,000,000" in notes
        assert "FINAL VALUATION" in notes
        assert "Weighting: Cost 30%, Income 50%, Market 20%" in notes
