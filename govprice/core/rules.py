from __future__ import annotations

import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable

from govprice.core.schema import (
    CalculationInput,
    CalculationResult,
    LaborCategoryInput,
    LaborCategoryResult,
    OtherDirectCostInput,
    OtherDirectCostResult,
    PricingSettings,
    ProjectTotals,
    ValidationContext,
)
from govprice.core.validation import CalculationBlocked, validate_with_overrides

logger = logging.getLogger(__name__)

ZERO = Decimal("0")
ONE = Decimal("1")
HUNDRED = Decimal("100")

CLEARANCE_PREMIUMS: dict[str, Decimal] = {
    "None": Decimal("0.00"),
    "Public Trust": Decimal("0.05"),
    "Secret": Decimal("0.10"),
    "Top Secret": Decimal("0.20"),
}


def _decimal(value: Decimal | int | float | str) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def quantize_money(value: Decimal) -> Decimal:
    return value.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)


def quantize_rate(value: Decimal) -> Decimal:
    return value.quantize(Decimal("0.0001"), rounding=ROUND_HALF_UP)


def quantize_hours(value: Decimal) -> Decimal:
    return value.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)


def calculate_effective_hours(hours: Decimal | int | float, fte_percentage: Decimal | int | float) -> Decimal:
    return _decimal(hours) * (_decimal(fte_percentage) / HUNDRED)


def calculate_clearance_premium(clearance_level: str) -> Decimal:
    try:
        return CLEARANCE_PREMIUMS[clearance_level]
    except KeyError:
        raise ValueError(f"Unknown clearance level: {clearance_level!r}") from None


def calculate_burden_rate(
    base_rate: Decimal | int | float,
    clearance_level: str,
    settings: PricingSettings,
) -> Decimal:
    """Fully burdened hourly rate; each burden compounds on the previous subtotal."""

    adjusted = _decimal(base_rate) * (ONE + calculate_clearance_premium(clearance_level))
    after_overhead = adjusted * (ONE + settings.overhead_rate)
    after_ga = after_overhead * (ONE + settings.ga_rate)
    return after_ga * (ONE + settings.fee_rate)


def calculate_labor_category(category: LaborCategoryInput, settings: PricingSettings) -> LaborCategoryResult:
    """Itemize one labor line.

    Burden amounts are measured against the subtotal they compound on, so
    ``clearance_adjusted_rate * effective_hours`` plus the three amounts equals
    ``total_cost``. Nothing here is rounded; see :func:`quantize_money`.
    """

    effective_hours = calculate_effective_hours(category.hours, category.fte_percentage)
    premium = calculate_clearance_premium(category.clearance_level)
    adjusted = category.base_rate * (ONE + premium)

    after_overhead = adjusted * (ONE + settings.overhead_rate)
    after_ga = after_overhead * (ONE + settings.ga_rate)
    burdened = after_ga * (ONE + settings.fee_rate)

    return LaborCategoryResult(
        id=category.id or "",
        title=category.title,
        base_rate=category.base_rate,
        hours=category.hours,
        fte_percentage=category.fte_percentage,
        effective_hours=effective_hours,
        clearance_level=category.clearance_level,
        location=category.location,
        clearance_premium=premium,
        clearance_adjusted_rate=adjusted,
        overhead_amount=adjusted * settings.overhead_rate * effective_hours,
        overhead_rate=settings.overhead_rate,
        ga_amount=after_overhead * settings.ga_rate * effective_hours,
        ga_rate=settings.ga_rate,
        fee_amount=after_ga * settings.fee_rate * effective_hours,
        fee_rate=settings.fee_rate,
        burdened_rate=burdened,
        total_cost=burdened * effective_hours,
    )


def calculate_other_direct_cost(odc: OtherDirectCostInput) -> OtherDirectCostResult:
    tax_amount = odc.amount * odc.tax_rate if odc.taxable else ZERO
    return OtherDirectCostResult(
        id=odc.id or "",
        description=odc.description,
        amount=odc.amount,
        category=odc.category,
        taxable=odc.taxable,
        tax_rate=odc.tax_rate,
        tax_amount=tax_amount,
        total_amount=odc.amount + tax_amount,
    )


def aggregate_totals(
    labor_results: Iterable[LaborCategoryResult],
    odc_results: Iterable[OtherDirectCostResult],
) -> ProjectTotals:
    labor_results = list(labor_results)
    total_labor = sum((result.total_cost for result in labor_results), ZERO)
    total_odc = sum((result.total_amount for result in odc_results), ZERO)
    total_hours = sum((result.effective_hours for result in labor_results), ZERO)
    average = total_labor / total_hours if total_hours > 0 else ZERO
    return ProjectTotals(
        total_labor_cost=total_labor,
        total_odc_cost=total_odc,
        total_project_cost=total_labor + total_odc,
        total_effective_hours=total_hours,
        average_burdened_rate=average,
    )


def calculate_project(
    calculation: CalculationInput,
    context: ValidationContext | None = None,
    *,
    validate: bool = True,
) -> CalculationResult:
    """Price a whole project.

    With ``validate`` enabled the override gate runs first and
    :class:`CalculationBlocked` is raised when it refuses. Non-blocking
    findings travel with the result as ``validation_warnings``.
    """

    settings = calculation.settings
    log_extra = {"project_id": settings.project_id or ""}

    warnings = []
    if validate:
        outcome = validate_with_overrides(calculation, context)
        if not outcome.can_proceed:
            logger.info(
                "calculation blocked by %d validation error(s)", len(outcome.errors), extra=log_extra
            )
            raise CalculationBlocked(outcome.errors)
        warnings = outcome.warnings
        if warnings:
            logger.warning(
                "proceeding with validation warnings: %s", [w.message for w in warnings], extra=log_extra
            )

    labor_results = [calculate_labor_category(category, settings) for category in calculation.labor_categories]
    odc_results = [calculate_other_direct_cost(odc) for odc in calculation.other_direct_costs]
    totals = aggregate_totals(labor_results, odc_results)
    logger.debug(
        "priced %d labor categories and %d ODCs: total %s",
        len(labor_results),
        len(odc_results),
        totals.total_project_cost,
        extra=log_extra,
    )

    return CalculationResult(
        project_id=settings.project_id or "",
        settings=settings,
        labor_categories=labor_results,
        other_direct_costs=odc_results,
        totals=totals,
        validation_warnings=warnings,
    )
