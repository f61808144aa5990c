from __future__ import annotations

from decimal import Decimal
from typing import Sequence

from govprice.core.rules import HUNDRED, ZERO, calculate_project
from govprice.core.schema import (
    CalculationInput,
    CalculationResult,
    PricingSettings,
    ProjectTotals,
    ScenarioComparison,
    ScenarioInput,
    ScenarioVariance,
    ValidationContext,
    VarianceRow,
    VarianceSummary,
)

MAX_OVERHEAD_RATE = Decimal("2.0")
MAX_GA_RATE = Decimal("2.0")
MAX_FEE_RATE = Decimal("1.0")


class ScenarioComparisonError(ValueError):
    """Raised when a comparison is requested with fewer than two scenarios."""


def _percent_of(delta: Decimal, base: Decimal) -> Decimal:
    return delta / base * HUNDRED if base > 0 else ZERO


def _variance(name: str, result: CalculationResult, baseline: ProjectTotals) -> ScenarioVariance:
    totals = result.totals
    labor_variance = totals.total_labor_cost - baseline.total_labor_cost
    odc_variance = totals.total_odc_cost - baseline.total_odc_cost
    total_variance = totals.total_project_cost - baseline.total_project_cost
    return ScenarioVariance(
        scenario_name=name,
        labor_variance=labor_variance,
        labor_variance_percent=_percent_of(labor_variance, baseline.total_labor_cost),
        odc_variance=odc_variance,
        odc_variance_percent=_percent_of(odc_variance, baseline.total_odc_cost),
        total_variance=total_variance,
        total_variance_percent=_percent_of(total_variance, baseline.total_project_cost),
        settings=result.settings,
        result=result,
    )


def compare_scenarios(
    scenarios: Sequence[ScenarioInput],
    context: ValidationContext | None = None,
) -> ScenarioComparison:
    """Price every scenario and measure each against the first one."""

    if len(scenarios) < 2:
        raise ScenarioComparisonError("At least 2 scenarios required for comparison")

    priced = [(scenario.name, calculate_project(scenario, context)) for scenario in scenarios]
    baseline_name, baseline = priced[0]
    return ScenarioComparison(
        baseline_name=baseline_name,
        baseline=baseline,
        comparisons=[_variance(name, result, baseline.totals) for name, result in priced[1:]],
    )


def as_scenario(calculation: CalculationInput, name: str) -> ScenarioInput:
    return ScenarioInput(
        name=name,
        settings=calculation.settings,
        labor_categories=calculation.labor_categories,
        other_direct_costs=calculation.other_direct_costs,
    )


def _with_rates(settings: PricingSettings, **rates: Decimal) -> PricingSettings:
    return settings.model_copy(update=rates)


def generate_common_scenarios(calculation: CalculationInput) -> list[ScenarioInput]:
    """Standard what-if variants of ``calculation``'s burden settings."""

    settings = calculation.settings
    variants = [
        (
            "Conservative (Lower Rates)",
            _with_rates(
                settings,
                overhead_rate=max(ZERO, settings.overhead_rate - Decimal("0.05")),
                ga_rate=max(ZERO, settings.ga_rate - Decimal("0.02")),
                fee_rate=max(ZERO, settings.fee_rate - Decimal("0.01")),
            ),
        ),
        (
            "Aggressive (Higher Rates)",
            _with_rates(
                settings,
                overhead_rate=min(MAX_OVERHEAD_RATE, settings.overhead_rate + Decimal("0.05")),
                ga_rate=min(MAX_GA_RATE, settings.ga_rate + Decimal("0.02")),
                fee_rate=min(MAX_FEE_RATE, settings.fee_rate + Decimal("0.01")),
            ),
        ),
        ("No Fee", _with_rates(settings, fee_rate=ZERO)),
        ("Minimal Overhead", _with_rates(settings, overhead_rate=Decimal("0.15"), ga_rate=Decimal("0.10"))),
    ]
    return [
        ScenarioInput(
            name=name,
            settings=variant,
            labor_categories=calculation.labor_categories,
            other_direct_costs=calculation.other_direct_costs,
        )
        for name, variant in variants
    ]


def analyze_variance(comparison: ScenarioComparison) -> VarianceSummary:
    """Spread of project cost across the baseline and every compared scenario."""

    rows = [
        VarianceRow(
            name=comparison.baseline_name,
            cost=comparison.baseline.totals.total_project_cost,
            variance=ZERO,
            variance_percent=ZERO,
        )
    ]
    rows.extend(
        VarianceRow(
            name=item.scenario_name,
            cost=item.result.totals.total_project_cost,
            variance=item.total_variance,
            variance_percent=item.total_variance_percent,
        )
        for item in comparison.comparisons
    )

    costs = [row.cost for row in rows]
    min_cost = min(costs)
    max_cost = max(costs)
    return VarianceSummary(
        min_cost=min_cost,
        max_cost=max_cost,
        avg_cost=sum(costs, ZERO) / len(costs),
        range=max_cost - min_cost,
        range_percent=_percent_of(max_cost - min_cost, min_cost),
        scenarios=rows,
    )
