"""Business logic: asset valuation."""

from .valuation import (
    ApproachWeights,
    CostInputs,
    IncomeInputs,
    MarketInputs,
    ValuationAssumptions,
    ValuationResult,
    cost_approach,
    income_approach,
    market_approach,
    value_pipeline,
)

__all__ = [
    "ApproachWeights",
    "CostInputs",
    "IncomeInputs",
    "MarketInputs",
    "ValuationAssumptions",
    "ValuationResult",
    "cost_approach",
    "income_approach",
    "market_approach",
    "value_pipeline",
]
