"""Pricing calculation engine."""

from .rules import (
    CLEARANCE_PREMIUMS,
    aggregate_totals,
    calculate_burden_rate,
    calculate_clearance_premium,
    calculate_effective_hours,
    calculate_labor_category,
    calculate_other_direct_cost,
    calculate_project,
    quantize_hours,
    quantize_money,
    quantize_rate,
)
from .salary import STANDARD_HOURS_PER_YEAR, annual_to_hourly, hourly_to_annual
from .scenarios import (
    ScenarioComparisonError,
    analyze_variance,
    as_scenario,
    compare_scenarios,
    generate_common_scenarios,
)
from .summary import summarize_labor_categories
from .validation import (
    CalculationBlocked,
    validate_calculation_input,
    validate_project_strict,
    validate_with_overrides,
)

__all__ = [
    "CLEARANCE_PREMIUMS",
    "CalculationBlocked",
    "STANDARD_HOURS_PER_YEAR",
    "ScenarioComparisonError",
    "aggregate_totals",
    "analyze_variance",
    "annual_to_hourly",
    "as_scenario",
    "calculate_burden_rate",
    "calculate_clearance_premium",
    "calculate_effective_hours",
    "calculate_labor_category",
    "calculate_other_direct_cost",
    "calculate_project",
    "compare_scenarios",
    "generate_common_scenarios",
    "hourly_to_annual",
    "quantize_hours",
    "quantize_money",
    "quantize_rate",
    "summarize_labor_categories",
    "validate_calculation_input",
    "validate_project_strict",
    "validate_with_overrides",
]
