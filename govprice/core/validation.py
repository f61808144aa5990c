from __future__ import annotations

from decimal import Decimal
from typing import Iterable, Mapping

from govprice.core.contract_vehicles import get_contract_vehicle_limits
from govprice.core.schema import (
    CLEARANCE_LEVELS,
    CONTRACT_TYPES,
    LOCATIONS,
    ODC_CATEGORIES,
    CalculationInput,
    ContractVehicleLimits,
    LaborCategoryInput,
    OtherDirectCostInput,
    PricingSettings,
    ValidationContext,
    ValidationError,
    ValidationOutcome,
)

BASE_RATE_RANGE = (Decimal("1"), Decimal("1000"))
HOURS_RANGE = (Decimal("1"), Decimal("10000"))
FTE_RANGE = (Decimal("0.01"), Decimal("100"))

# (attribute, json field, label, vehicle ceiling attribute, domain maximum, generic ceiling)
RATE_RULES = (
    ("overhead_rate", "overheadRate", "Overhead rate", "max_overhead_rate", Decimal("2.0"), Decimal("1.00")),
    ("ga_rate", "gaRate", "G&A rate", "max_ga_rate", Decimal("2.0"), Decimal("0.50")),
    ("fee_rate", "feeRate", "Fee rate", "max_fee_rate", Decimal("1.0"), Decimal("0.20")),
)


class CalculationBlocked(Exception):
    """Raised when a gated calculation is refused by validation."""

    def __init__(self, errors: Iterable[ValidationError]) -> None:
        self.errors = list(errors)
        super().__init__("Validation failed: " + ", ".join(error.message for error in self.errors))


def _hard(field: str, message: str, value: object) -> ValidationError:
    return ValidationError(field=field, message=message, value=value, severity="error", can_override=False)


def _overridable(field: str, message: str, value: object, allowed: bool, reason: str) -> ValidationError:
    return ValidationError(
        field=field,
        message=message,
        value=value,
        severity="warning" if allowed else "error",
        can_override=allowed,
        override_reason=reason if allowed else None,
    )


def _percent(value: Decimal) -> str:
    return f"{value * 100:.1f}%"


def _is_blank(text: str | None) -> bool:
    return not text or not text.strip()


def validate_settings(
    settings: PricingSettings,
    context: ValidationContext | None = None,
    *,
    limits: Mapping[str, ContractVehicleLimits] | None = None,
) -> list[ValidationError]:
    errors: list[ValidationError] = []
    permissions = context.permissions if context else None
    vehicle = context.contract_vehicle if context else None

    for attr, field, label, _, maximum, _ in RATE_RULES:
        rate = getattr(settings, attr)
        if rate < 0:
            errors.append(_hard(field, f"{label} cannot be negative", rate))
        elif rate > maximum:
            errors.append(_hard(field, f"{label} cannot exceed {_percent(maximum)}", rate))

    if vehicle:
        ceilings = get_contract_vehicle_limits(vehicle, limits)
        if ceilings is None:
            errors.append(
                ValidationError(
                    field="contractVehicle",
                    message=f"Unknown contract vehicle {vehicle}; no vehicle rate limits applied",
                    value=vehicle,
                    severity="info",
                )
            )
        else:
            allowed = bool(permissions and permissions.can_override_contract_limits)
            for attr, field, label, ceiling_attr, _, _ in RATE_RULES:
                rate = getattr(settings, attr)
                ceiling = getattr(ceilings, ceiling_attr)
                if rate > ceiling:
                    errors.append(
                        _overridable(
                            field,
                            f"{label} ({_percent(rate)}) exceeds {vehicle} limit ({_percent(ceiling)})",
                            rate,
                            allowed,
                            "Contract vehicle limit exceeded",
                        )
                    )
    else:
        for attr, field, label, _, _, ceiling in RATE_RULES:
            rate = getattr(settings, attr)
            if rate > ceiling:
                errors.append(
                    ValidationError(
                        field=field,
                        message=(
                            f"{label} exceeds {_percent(ceiling)} - "
                            "consider selecting a contract vehicle for specific limits"
                        ),
                        value=rate,
                        severity="warning",
                        can_override=True,
                        override_reason="General rate limit exceeded",
                    )
                )

    if settings.contract_type not in CONTRACT_TYPES:
        errors.append(_hard("contractType", "Contract type must be FFP, T&M, or CPFF", settings.contract_type))

    period = settings.period_of_performance
    period_value = period.model_dump(by_alias=True, mode="json") if period else None
    if period is None or period.start_date is None or period.end_date is None:
        errors.append(_hard("periodOfPerformance", "Period of performance dates are required", period_value))
    elif period.start_date >= period.end_date:
        errors.append(_hard("periodOfPerformance", "Start date must be before end date", period_value))

    return errors


def validate_labor_category(
    category: LaborCategoryInput,
    index: int,
    context: ValidationContext | None = None,
) -> list[ValidationError]:
    errors: list[ValidationError] = []
    prefix = f"laborCategories[{index}]"
    allowed = bool(context and context.permissions and context.permissions.can_override_validation)

    if _is_blank(category.title):
        errors.append(_hard(f"{prefix}.title", "Labor category title is required", category.title))

    low, high = BASE_RATE_RANGE
    if category.base_rate < low or category.base_rate > high:
        errors.append(
            _overridable(
                f"{prefix}.baseRate",
                "Base rate must be between $1 and $1000",
                category.base_rate,
                allowed,
                "Rate limit exceeded",
            )
        )

    low, high = HOURS_RANGE
    if category.hours < low or category.hours > high:
        errors.append(
            _overridable(
                f"{prefix}.hours",
                "Hours must be between 1 and 10000",
                category.hours,
                allowed,
                "Hours limit exceeded",
            )
        )

    low, high = FTE_RANGE
    if category.fte_percentage < low or category.fte_percentage > high:
        errors.append(
            _hard(f"{prefix}.ftePercentage", "FTE percentage must be between 0.01% and 100%", category.fte_percentage)
        )

    if category.clearance_level not in CLEARANCE_LEVELS:
        errors.append(_hard(f"{prefix}.clearanceLevel", "Invalid clearance level", category.clearance_level))

    if category.location not in LOCATIONS:
        errors.append(_hard(f"{prefix}.location", "Invalid location type", category.location))

    return errors


def validate_other_direct_cost(odc: OtherDirectCostInput, index: int) -> list[ValidationError]:
    errors: list[ValidationError] = []
    prefix = f"otherDirectCosts[{index}]"

    if _is_blank(odc.description):
        errors.append(_hard(f"{prefix}.description", "Description is required", odc.description))
    if odc.amount < 0:
        errors.append(_hard(f"{prefix}.amount", "Amount must be non-negative", odc.amount))
    if odc.tax_rate < 0 or odc.tax_rate > 1:
        errors.append(_hard(f"{prefix}.taxRate", "Tax rate must be between 0% and 100%", odc.tax_rate))
    if odc.category not in ODC_CATEGORIES:
        errors.append(_hard(f"{prefix}.category", "Invalid category", odc.category))

    return errors


def validate_calculation_input(
    calculation: CalculationInput,
    context: ValidationContext | None = None,
    *,
    limits: Mapping[str, ContractVehicleLimits] | None = None,
) -> list[ValidationError]:
    """Every finding for settings, labor lines and ODC lines, in that order."""

    errors = validate_settings(calculation.settings, context, limits=limits)
    for index, category in enumerate(calculation.labor_categories):
        errors.extend(validate_labor_category(category, index, context))
    for index, odc in enumerate(calculation.other_direct_costs):
        errors.extend(validate_other_direct_cost(odc, index))
    return errors


def validate_with_overrides(
    calculation: CalculationInput,
    context: ValidationContext | None = None,
    *,
    limits: Mapping[str, ContractVehicleLimits] | None = None,
) -> ValidationOutcome:
    """Partition findings and decide whether a calculation may proceed.

    A calculation proceeds when nothing is blocking, or when the caller may
    override validation and every blocking finding is overridable.
    """

    findings = validate_calculation_input(calculation, context, limits=limits)
    errors = [finding for finding in findings if finding.severity == "error"]
    warnings = [finding for finding in findings if finding.severity in ("warning", "info")]

    permissions = context.permissions if context else None
    can_proceed = not errors or (
        bool(permissions and permissions.can_override_validation) and all(error.can_override for error in errors)
    )
    return ValidationOutcome(errors=errors, warnings=warnings, can_proceed=can_proceed)


def validate_project_strict(calculation: CalculationInput) -> tuple[bool, list[str]]:
    """Context-free check that reports blocking problems as plain messages."""

    messages = [error.message for error in validate_settings(calculation.settings) if error.severity == "error"]
    if not calculation.labor_categories:
        messages.append("At least one labor category is required")
    for index, category in enumerate(calculation.labor_categories):
        messages.extend(
            f"Labor category {index + 1}: {error.message}"
            for error in validate_labor_category(category, index)
            if error.severity == "error"
        )
    for index, odc in enumerate(calculation.other_direct_costs):
        messages.extend(f"Other direct cost {index + 1}: {error.message}" for error in validate_other_direct_cost(odc, index))
    return not messages, messages
