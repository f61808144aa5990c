"""Shape calculation results into export-ready rows."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from govprice.core.rules import quantize_hours, quantize_money, quantize_rate
from govprice.core.schema import CalculationResult, LaborCategoryResult, OtherDirectCostResult
from govprice.core.summary import summarize_labor_categories

CSV_HEADERS = ["Type", "Description", "Hours", "Rate", "Amount", "Category", "Clearance", "Location"]


def _labor_summary_row(category: LaborCategoryResult) -> dict[str, Any]:
    return {
        "title": category.title,
        "effectiveHours": quantize_hours(category.effective_hours),
        "baseRate": quantize_money(category.base_rate),
        "burdenedRate": quantize_money(category.burdened_rate),
        "totalCost": quantize_money(category.total_cost),
        "clearanceLevel": category.clearance_level,
    }


def _labor_detail_row(category: LaborCategoryResult) -> dict[str, Any]:
    return {
        "title": category.title,
        "baseRate": quantize_money(category.base_rate),
        "hours": quantize_hours(category.hours),
        "ftePercentage": quantize_money(category.fte_percentage),
        "effectiveHours": quantize_hours(category.effective_hours),
        "clearanceLevel": category.clearance_level,
        "location": category.location,
        "clearancePremium": quantize_rate(category.clearance_premium),
        "clearanceAdjustedRate": quantize_money(category.clearance_adjusted_rate),
        "overheadRate": quantize_rate(category.overhead_rate),
        "overheadAmount": quantize_money(category.overhead_amount),
        "gaRate": quantize_rate(category.ga_rate),
        "gaAmount": quantize_money(category.ga_amount),
        "feeRate": quantize_rate(category.fee_rate),
        "feeAmount": quantize_money(category.fee_amount),
        "burdenedRate": quantize_money(category.burdened_rate),
        "totalCost": quantize_money(category.total_cost),
    }


def _odc_row(odc: OtherDirectCostResult) -> dict[str, Any]:
    return {
        "description": odc.description,
        "category": odc.category,
        "amount": quantize_money(odc.amount),
        "taxable": odc.taxable,
        "taxRate": quantize_rate(odc.tax_rate),
        "taxAmount": quantize_money(odc.tax_amount),
        "totalAmount": quantize_money(odc.total_amount),
    }


def _project_summary(result: CalculationResult) -> dict[str, Any]:
    totals = result.totals
    settings = result.settings
    period = settings.period_of_performance
    return {
        "projectId": result.project_id,
        "calculatedAt": result.calculated_at.isoformat(),
        "contractType": settings.contract_type,
        "periodStart": period.start_date.isoformat() if period and period.start_date else "",
        "periodEnd": period.end_date.isoformat() if period and period.end_date else "",
        "overheadRate": quantize_rate(settings.overhead_rate),
        "gaRate": quantize_rate(settings.ga_rate),
        "feeRate": quantize_rate(settings.fee_rate),
        "totalLaborCost": quantize_money(totals.total_labor_cost),
        "totalODCCost": quantize_money(totals.total_odc_cost),
        "totalProjectCost": quantize_money(totals.total_project_cost),
        "totalEffectiveHours": quantize_hours(totals.total_effective_hours),
        "averageBurdenedRate": quantize_money(totals.average_burdened_rate),
    }


def _labor_breakdown(result: CalculationResult) -> dict[str, Any]:
    summary = summarize_labor_categories(result.labor_categories)
    return {
        "totalCategories": summary.total_categories,
        "totalEffectiveHours": quantize_hours(summary.total_effective_hours),
        "totalBaseCost": quantize_money(summary.total_base_cost),
        "totalBurdenedCost": quantize_money(summary.total_burdened_cost),
        "averageBurdenedRate": quantize_money(summary.average_burdened_rate),
        "clearanceDistribution": summary.clearance_distribution,
        "locationDistribution": summary.location_distribution,
    }


def format_for_excel(result: CalculationResult) -> dict[str, Any]:
    return {
        "projectSummary": _project_summary(result),
        "laborSummary": [_labor_summary_row(category) for category in result.labor_categories],
        "laborBreakdown": _labor_breakdown(result),
        "laborDetail": [_labor_detail_row(category) for category in result.labor_categories],
        "odcDetail": [_odc_row(odc) for odc in result.other_direct_costs],
    }


def format_for_csv(result: CalculationResult) -> dict[str, Any]:
    rows: list[list[Any]] = []
    for category in result.labor_categories:
        rows.append(
            [
                "Labor",
                category.title,
                quantize_hours(category.effective_hours),
                quantize_money(category.burdened_rate),
                quantize_money(category.total_cost),
                "Labor",
                category.clearance_level,
                category.location,
            ]
        )
    for odc in result.other_direct_costs:
        rows.append(["ODC", odc.description, "", "", quantize_money(odc.total_amount), odc.category, "", ""])
    return {"headers": list(CSV_HEADERS), "rows": rows}


def format_for_pdf(result: CalculationResult, generated_at: datetime | None = None) -> dict[str, Any]:
    generated_at = generated_at or datetime.now(tz=timezone.utc)
    summary = _project_summary(result)
    return {
        "metadata": {
            "title": "Pricing Calculator Results",
            "generatedAt": generated_at.isoformat(),
            "contractType": result.settings.contract_type,
        },
        "summary": {
            key: summary[key]
            for key in (
                "totalLaborCost",
                "totalODCCost",
                "totalProjectCost",
                "totalEffectiveHours",
                "averageBurdenedRate",
            )
        },
        "laborBreakdown": _labor_breakdown(result),
        "laborCategories": [_labor_summary_row(category) for category in result.labor_categories],
        "otherDirectCosts": [_odc_row(odc) for odc in result.other_direct_costs],
    }
