from __future__ import annotations

from datetime import date, datetime, timezone
from decimal import Decimal
from typing import Any, Literal, get_args

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

ContractType = Literal["FFP", "T&M", "CPFF"]
ClearanceLevel = Literal["None", "Public Trust", "Secret", "Top Secret"]
LocationType = Literal["Remote", "On-site", "Hybrid"]
OdcCategory = Literal["Travel", "Equipment", "Software", "Other"]
Severity = Literal["error", "warning", "info"]

CONTRACT_TYPES: tuple[str, ...] = get_args(ContractType)
CLEARANCE_LEVELS: tuple[str, ...] = get_args(ClearanceLevel)
LOCATIONS: tuple[str, ...] = get_args(LocationType)
ODC_CATEGORIES: tuple[str, ...] = get_args(OdcCategory)

# Applied when an ODC line does not carry its own tax rate.
DEFAULT_TAX_RATE = Decimal("0.0875")


class PricingRecord(BaseModel):
    """Immutable record whose JSON shape uses camelCase field names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class InputRecord(PricingRecord):
    model_config = ConfigDict(extra="forbid")


# ----------------------------------------------------------------------
# inputs
# ----------------------------------------------------------------------
class PeriodOfPerformance(InputRecord):
    start_date: date | None = None
    end_date: date | None = None


class PricingSettings(InputRecord):
    project_id: str | None = None
    overhead_rate: Decimal
    ga_rate: Decimal
    fee_rate: Decimal
    # Plain strings so that unknown values surface as validation findings.
    contract_type: str
    period_of_performance: PeriodOfPerformance | None = None


class LaborCategoryInput(InputRecord):
    id: str | None = None
    title: str
    base_rate: Decimal
    hours: Decimal
    fte_percentage: Decimal
    clearance_level: str
    location: str


class OtherDirectCostInput(InputRecord):
    id: str | None = None
    description: str
    amount: Decimal
    category: str
    taxable: bool = False
    tax_rate: Decimal = DEFAULT_TAX_RATE


class CalculationInput(InputRecord):
    settings: PricingSettings
    labor_categories: list[LaborCategoryInput] = Field(default_factory=list)
    other_direct_costs: list[OtherDirectCostInput] = Field(default_factory=list)


class ScenarioInput(CalculationInput):
    name: str


class OverridePermissions(InputRecord):
    can_override_rates: bool = False
    can_override_contract_limits: bool = False
    can_override_validation: bool = False
    user_role: str = "analyst"
    reason: str | None = None


class ValidationContext(InputRecord):
    contract_vehicle: str | None = None
    permissions: OverridePermissions | None = None


class ContractVehicleLimits(InputRecord):
    max_overhead_rate: Decimal
    max_ga_rate: Decimal
    max_fee_rate: Decimal


# ----------------------------------------------------------------------
# validation findings
# ----------------------------------------------------------------------
class ValidationError(PricingRecord):
    """A single validation finding. Findings are returned, never raised."""

    field: str
    message: str
    value: Any = None
    severity: Severity = "error"
    can_override: bool = False
    override_reason: str | None = None


class ValidationOutcome(PricingRecord):
    errors: list[ValidationError] = Field(default_factory=list)
    warnings: list[ValidationError] = Field(default_factory=list)
    can_proceed: bool = True


# ----------------------------------------------------------------------
# results
# ----------------------------------------------------------------------
class LaborCategoryResult(PricingRecord):
    id: str = ""
    title: str
    base_rate: Decimal
    hours: Decimal
    fte_percentage: Decimal
    effective_hours: Decimal
    clearance_level: str
    location: str
    clearance_premium: Decimal
    clearance_adjusted_rate: Decimal
    overhead_amount: Decimal
    overhead_rate: Decimal
    ga_amount: Decimal
    ga_rate: Decimal
    fee_amount: Decimal
    fee_rate: Decimal
    burdened_rate: Decimal
    total_cost: Decimal


class OtherDirectCostResult(PricingRecord):
    id: str = ""
    description: str
    amount: Decimal
    category: str
    taxable: bool
    tax_rate: Decimal
    tax_amount: Decimal
    total_amount: Decimal


class ProjectTotals(PricingRecord):
    total_labor_cost: Decimal = Decimal("0")
    total_odc_cost: Decimal = Field(default=Decimal("0"), alias="totalODCCost")
    total_project_cost: Decimal = Decimal("0")
    total_effective_hours: Decimal = Decimal("0")
    average_burdened_rate: Decimal = Decimal("0")


class CalculationResult(PricingRecord):
    project_id: str = ""
    settings: PricingSettings
    labor_categories: list[LaborCategoryResult] = Field(default_factory=list)
    other_direct_costs: list[OtherDirectCostResult] = Field(default_factory=list)
    totals: ProjectTotals = Field(default_factory=ProjectTotals)
    calculated_at: datetime = Field(default_factory=lambda: datetime.now(tz=timezone.utc))
    validation_warnings: list[ValidationError] = Field(default_factory=list)


# ----------------------------------------------------------------------
# scenario comparison
# ----------------------------------------------------------------------
class ScenarioVariance(PricingRecord):
    scenario_name: str
    labor_variance: Decimal
    labor_variance_percent: Decimal
    odc_variance: Decimal
    odc_variance_percent: Decimal
    total_variance: Decimal
    total_variance_percent: Decimal
    settings: PricingSettings
    result: CalculationResult


class ScenarioComparison(PricingRecord):
    baseline_name: str
    baseline: CalculationResult
    comparisons: list[ScenarioVariance] = Field(default_factory=list)
    compared_at: datetime = Field(default_factory=lambda: datetime.now(tz=timezone.utc))


class VarianceRow(PricingRecord):
    name: str
    cost: Decimal
    variance: Decimal
    variance_percent: Decimal


class VarianceSummary(PricingRecord):
    min_cost: Decimal
    max_cost: Decimal
    avg_cost: Decimal
    range: Decimal
    range_percent: Decimal
    scenarios: list[VarianceRow] = Field(default_factory=list)


# ----------------------------------------------------------------------
# labor summary
# ----------------------------------------------------------------------
class LaborSummary(PricingRecord):
    total_categories: int = 0
    total_effective_hours: Decimal = Decimal("0")
    total_base_cost: Decimal = Decimal("0")
    total_burdened_cost: Decimal = Decimal("0")
    average_burdened_rate: Decimal = Decimal("0")
    clearance_distribution: dict[str, int] = Field(default_factory=dict)
    location_distribution: dict[str, int] = Field(default_factory=dict)
