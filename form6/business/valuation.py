"""
Valuation calculator for pipeline assets.

Three approaches, each a plain formula over a small set of inputs:

- Cost: replacement cost new less physical, functional and economic
  depreciation.
- Income: discounted cash flow over a projection period plus a
  perpetuity-growth terminal value.
- Market: EBITDA times an EV/EBITDA multiple, adjusted for size and
  geography.

The weighted summary blends the three with weights normalised to their sum.
``ValuationAssumptions.from_summary`` derives starting inputs from a
filing's financial summary.
"""

from dataclasses import asdict, dataclass, field
from datetime import date
from typing import Any, Optional

from ..core.exceptions import ValuationError
from ..extraction.summary import FinancialSummary
from ..utils.config import ValuationConfig, get_settings
from ..utils.logger import get_logger

logger = get_logger("form6.business.valuation")


@dataclass
class CostInputs:
    """Inputs for the cost approach (percentages as 0-100)."""
    replacement_cost_new: float
    physical_depreciation_pct: float = 25.0
    functional_obsolescence_pct: float = 5.0
    economic_obsolescence_pct: float = 3.0


@dataclass
class IncomeInputs:
    """Inputs for the income approach (rates as percentages)."""
    revenue: float
    expenses: float
    growth_rate_pct: float = 2.5
    discount_rate_pct: float = 8.5
    projection_years: int = 20
    terminal_growth_pct: float = 2.0


@dataclass
class MarketInputs:
    """Inputs for the market approach (adjustments as percentages)."""
    ebitda: float
    ev_ebitda_multiple: float = 10.5
    size_adjustment_pct: float = -5.0
    geographic_adjustment_pct: float = 2.0


@dataclass
class ApproachWeights:
    """Relative weights, normalised by their sum when blended."""
    cost: float = 30.0
    income: float = 50.0
    market: float = 20.0

    @property
    def total(self) -> float:
        return self.cost + self.income + self.market

    def normalized(self) -> tuple[float, float, float]:
        total = self.total
        if total <= 0:
            raise ValuationError("Approach weights must sum to a positive number", asdict(self))
        return self.cost / total, self.income / total, self.market / total


@dataclass
class CostResult:
    replacement_cost_new: float
    physical_depreciation: float
    functional_obsolescence: float
    economic_obsolescence: float
    value: float

    @property
    def total_depreciation(self) -> float:
        return self.physical_depreciation + self.functional_obsolescence + self.economic_obsolescence


@dataclass
class IncomeResult:
    base_cash_flow: float
    pv_cash_flows: float
    terminal_value: float
    pv_terminal_value: float
    value: float


@dataclass
class MarketResult:
    base_value: float
    size_adjustment: float
    geographic_adjustment: float
    value: float


def cost_approach(inputs: CostInputs) -> CostResult:
    rcn = inputs.replacement_cost_new
    physical = rcn * inputs.physical_depreciation_pct / 100
    functional = rcn * inputs.functional_obsolescence_pct / 100
    economic = rcn * inputs.economic_obsolescence_pct / 100
    return CostResult(
        replacement_cost_new=rcn,
        physical_depreciation=physical,
        functional_obsolescence=functional,
        economic_obsolescence=economic,
        value=rcn - (physical + functional + economic),
    )


def income_approach(inputs: IncomeInputs) -> IncomeResult:
    """
    Discounted cash flow value.

    Raises:
        ValuationError: Non-positive projection period, or a discount rate
            equal to the terminal growth rate.
    """
    if inputs.projection_years < 1:
        raise ValuationError(
            "Projection period must be at least one year",
            {"projection_years": inputs.projection_years},
        )

    growth = inputs.growth_rate_pct / 100
    discount = inputs.discount_rate_pct / 100
    terminal_growth = inputs.terminal_growth_pct / 100
    if discount == terminal_growth:
        raise ValuationError(
            "Discount rate must differ from terminal growth rate",
            {"discount_rate_pct": inputs.discount_rate_pct},
        )

    base_cash_flow = inputs.revenue - inputs.expenses
    periods = inputs.projection_years

    pv_cash_flows = sum(
        base_cash_flow * (1 + growth) ** year / (1 + discount) ** year
        for year in range(1, periods + 1)
    )

    terminal_cash_flow = base_cash_flow * (1 + growth) ** (periods + 1)
    terminal_value = terminal_cash_flow / (discount - terminal_growth)
    pv_terminal = terminal_value / (1 + discount) ** periods

    return IncomeResult(
        base_cash_flow=base_cash_flow,
        pv_cash_flows=pv_cash_flows,
        terminal_value=terminal_value,
        pv_terminal_value=pv_terminal,
        value=pv_cash_flows + pv_terminal,
    )


def market_approach(inputs: MarketInputs) -> MarketResult:
    base_value = inputs.ebitda * inputs.ev_ebitda_multiple
    size_adjustment = base_value * inputs.size_adjustment_pct / 100
    geographic_adjustment = base_value * inputs.geographic_adjustment_pct / 100
    return MarketResult(
        base_value=base_value,
        size_adjustment=size_adjustment,
        geographic_adjustment=geographic_adjustment,
        value=base_value + size_adjustment + geographic_adjustment,
    )


@dataclass
class ValuationAssumptions:
    """Complete calculator input set."""
    cost: CostInputs
    income: IncomeInputs
    market: MarketInputs
    weights: ApproachWeights = field(default_factory=ApproachWeights)
    profit_margin_pct: float = 0.0
    asset_age_years: int = 0

    @classmethod
    def from_summary(
        cls,
        summary: FinancialSummary,
        report_year: Optional[int] = None,
        as_of_year: Optional[int] = None,
        config: Optional[ValuationConfig] = None,
    ) -> "ValuationAssumptions":
        """
        Derive starting assumptions from a filing's financial summary.

        Zero-valued summary figures are replaced by the configured fallbacks.
        """
        settings = get_settings()
        config = config or settings.valuation
        report_year = report_year or settings.filings.report_year
        as_of_year = as_of_year or date.today().year

        rcn = summary.carrier_property or config.fallback_replacement_cost
        revenue = summary.operating_revenue or config.fallback_revenue
        expenses = summary.operating_expenses or config.fallback_expenses
        ebitda = summary.ebitda or config.fallback_ebitda

        age = as_of_year - report_year
        physical = min(25 + age * 1.5, 60)
        functional = min(5 + age * 0.5, 15)

        margin = (revenue - expenses) / revenue * 100 if revenue > 0 else 0.0
        growth = max(1.5, min(margin * 0.5, 5))
        if margin > 15:
            discount = 7.5
        elif margin > 10:
            discount = 8.5
        else:
            discount = 10.0

        asset_size = summary.total_assets or rcn
        if asset_size > 50_000_000:
            multiple = 11.0
        elif asset_size > 20_000_000:
            multiple = 10.5
        else:
            multiple = 9.5
        if margin > 20:
            multiple += 0.5
        elif margin > 15:
            multiple += 0.25

        if asset_size > 100_000_000:
            size_adjustment = 0.0
        elif asset_size > 50_000_000:
            size_adjustment = -2.0
        else:
            size_adjustment = -5.0

        return cls(
            cost=CostInputs(
                replacement_cost_new=rcn,
                physical_depreciation_pct=physical,
                functional_obsolescence_pct=functional,
                economic_obsolescence_pct=config.economic_obsolescence_pct,
            ),
            income=IncomeInputs(
                revenue=revenue,
                expenses=expenses,
                growth_rate_pct=growth,
                discount_rate_pct=discount,
                projection_years=config.projection_years,
                terminal_growth_pct=config.terminal_growth_pct,
            ),
            market=MarketInputs(
                ebitda=ebitda,
                ev_ebitda_multiple=multiple,
                size_adjustment_pct=size_adjustment,
                geographic_adjustment_pct=config.geographic_adjustment_pct,
            ),
            weights=ApproachWeights(**config.weights.model_dump()),
            profit_margin_pct=margin,
            asset_age_years=age,
        )


@dataclass
class ValuationResult:
    """Results of all three approaches and their weighted blend."""
    assumptions: ValuationAssumptions
    cost: CostResult
    income: IncomeResult
    market: MarketResult
    normalized_weights: tuple[float, float, float]
    final_value: float

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    def to_notes(self) -> str:
        """Plain-text record of every input and result, for saving an evaluation."""
        a = self.assumptions
        w = a.weights
        lines = [
            f"COST APPROACH: ${self.cost.value:,.0f}",
            f"- Replacement Cost New: ${a.cost.replacement_cost_new:,.0f}",
            f"- Physical Depreciation: {a.cost.physical_depreciation_pct:g}%",
            f"- Functional Obsolescence: {a.cost.functional_obsolescence_pct:g}%",
            f"- Economic Obsolescence: {a.cost.economic_obsolescence_pct:g}%",
            "",
            f"INCOME APPROACH: ${self.income.value:,.0f}",
            f"- Operating Revenue: ${a.income.revenue:,.0f}",
            f"- Operating Expenses: ${a.income.expenses:,.0f}",
            f"- Growth Rate: {a.income.growth_rate_pct:g}%",
            f"- Discount Rate (WACC): {a.income.discount_rate_pct:g}%",
            f"- Projection Period: {a.income.projection_years} years",
            f"- Terminal Growth Rate: {a.income.terminal_growth_pct:g}%",
            "",
            f"MARKET APPROACH: ${self.market.value:,.0f}",
            f"- EBITDA: ${a.market.ebitda:,.0f}",
            f"- EV/EBITDA Multiple: {a.market.ev_ebitda_multiple:g}x",
            f"- Size Adjustment: {a.market.size_adjustment_pct:g}%",
            f"- Geographic Adjustment: {a.market.geographic_adjustment_pct:g}%",
            "",
            f"FINAL VALUATION: ${self.final_value:,.0f}",
            f"Weighting: Cost {w.cost:g}%, Income {w.income:g}%, Market {w.market:g}%",
        ]
        return "\n".join(lines)


def value_pipeline(assumptions: ValuationAssumptions) -> ValuationResult:
    """Run all three approaches and blend them."""
    cost = cost_approach(assumptions.cost)
    income = income_approach(assumptions.income)
    market = market_approach(assumptions.market)

    cost_w, income_w, market_w = assumptions.weights.normalized()
    final_value = cost.value * cost_w + income.value * income_w + market.value * market_w

    logger.debug(
        f"Valuation: cost={cost.value:,.0f} income={income.value:,.0f} "
        f"market={market.value:,.0f} final={final_value:,.0f}"
    )
    return ValuationResult(
        assumptions=assumptions,
        cost=cost,
        income=income,
        market=market,
        normalized_weights=(cost_w, income_w, market_w),
        final_value=final_value,
    )
