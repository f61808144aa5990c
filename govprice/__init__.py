"""Labor-rate pricing engine for government contract estimates."""

from .core import (
    CalculationBlocked,
    ScenarioComparisonError,
    annual_to_hourly,
    calculate_burden_rate,
    calculate_clearance_premium,
    calculate_effective_hours,
    calculate_labor_category,
    calculate_other_direct_cost,
    calculate_project,
    compare_scenarios,
    hourly_to_annual,
    summarize_labor_categories,
    validate_calculation_input,
    validate_with_overrides,
)

__version__ = "0.1.0"

__all__ = [
    "CalculationBlocked",
    "ScenarioComparisonError",
    "annual_to_hourly",
    "calculate_burden_rate",
    "calculate_clearance_premium",
    "calculate_effective_hours",
    "calculate_labor_category",
    "calculate_other_direct_cost",
    "calculate_project",
    "compare_scenarios",
    "hourly_to_annual",
    "summarize_labor_categories",
    "validate_calculation_input",
    "validate_with_overrides",
]
