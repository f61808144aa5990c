from decimal import Decimal

import pytest

from govprice.core.rules import (
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


@pytest.mark.parametrize(
    ("level", "premium"),
    [
        ("None", Decimal("0")),
        ("Public Trust", Decimal("0.05")),
        ("Secret", Decimal("0.10")),
        ("Top Secret", Decimal("0.20")),
    ],
)
def test_clearance_premium_table(level, premium):
    assert calculate_clearance_premium(level) == premium


def test_unknown_clearance_level_is_rejected():
    with pytest.raises(ValueError, match="Confidential"):
        calculate_clearance_premium("Confidential")


def test_effective_hours_scale_by_fte_percentage():
    assert calculate_effective_hours(2080, 50) == 1040
    assert calculate_effective_hours(Decimal("2080"), Decimal("0.01")) == Decimal("0.208")
    assert calculate_effective_hours(1000, 12.5) == 125


def test_burden_compounds_on_previous_subtotal(settings):
    rate = calculate_burden_rate(100, "None", settings)

    assert rate == Decimal("164.45")
    # additive burden would give 155.00
    assert rate != Decimal("100") * (1 + settings.overhead_rate + settings.ga_rate + settings.fee_rate)


def test_burden_rate_includes_clearance_premium(settings):
    assert calculate_burden_rate(100, "Secret", settings) == Decimal("180.895")


def test_engineer_breakdown(settings, make_labor):
    result = calculate_labor_category(make_labor(), settings)

    assert result.effective_hours == 2080
    assert result.clearance_premium == Decimal("0.10")
    assert result.clearance_adjusted_rate == 110
    assert result.burdened_rate == Decimal("180.895")
    assert result.overhead_amount == Decimal("68640")
    assert result.ga_amount == Decimal("44616")
    assert result.fee_amount == Decimal("34205.6")
    assert result.total_cost == Decimal("376261.6")
    assert quantize_money(result.total_cost) == Decimal("376261.60")
    assert result.overhead_rate == settings.overhead_rate
    assert result.ga_rate == settings.ga_rate
    assert result.fee_rate == settings.fee_rate
    assert result.id == "lc-1"
    assert result.location == "On-site"


@pytest.mark.parametrize(
    ("base_rate", "hours", "fte", "clearance", "rates"),
    [
        ("100", "2080", "100", "Secret", ("0.30", "0.15", "0.10")),
        ("57.33", "1733", "37.5", "Top Secret", ("0.4512", "0.1275", "0.0825")),
        ("999.99", "10000", "0.01", "Public Trust", ("2.0", "2.0", "1.0")),
        ("12.10", "1", "100", "None", ("0", "0", "0")),
    ],
)
def test_burden_amounts_reconcile_to_total_cost(settings, make_labor, base_rate, hours, fte, clearance, rates):
    overhead, ga, fee = (Decimal(rate) for rate in rates)
    project_settings = settings.model_copy(update={"overhead_rate": overhead, "ga_rate": ga, "fee_rate": fee})
    category = make_labor(
        base_rate=Decimal(base_rate),
        hours=Decimal(hours),
        fte_percentage=Decimal(fte),
        clearance_level=clearance,
    )

    result = calculate_labor_category(category, project_settings)

    reconciled = (
        result.clearance_adjusted_rate * result.effective_hours
        + result.overhead_amount
        + result.ga_amount
        + result.fee_amount
    )
    assert abs(reconciled - result.total_cost) < Decimal("1e-12")
    assert result.total_cost == result.burdened_rate * result.effective_hours


def test_taxable_odc_adds_tax(make_odc):
    result = calculate_other_direct_cost(make_odc(amount=Decimal("1000"), taxable=True, tax_rate=Decimal("0.0875")))

    assert result.tax_amount == Decimal("87.5")
    assert result.total_amount == Decimal("1087.5")


def test_non_taxable_odc_ignores_tax_rate(make_odc):
    result = calculate_other_direct_cost(make_odc(amount=Decimal("2500"), taxable=False, tax_rate=Decimal("0.5")))

    assert result.tax_amount == 0
    assert result.total_amount == Decimal("2500")
    assert result.tax_rate == Decimal("0.5")


def test_project_totals(make_input, make_labor, make_odc):
    calculation = make_input(
        labor=[
            make_labor(),
            make_labor(id="lc-2", title="Analyst", base_rate=Decimal("85"), fte_percentage=Decimal("50"), clearance_level="None"),
        ],
        odcs=[
            make_odc(amount=Decimal("12000")),
            make_odc(id="odc-2", amount=Decimal("1000"), category="Equipment", taxable=True, tax_rate=Decimal("0.10")),
        ],
    )

    result = calculate_project(calculation)

    analyst_total = Decimal("85") * Decimal("1.30") * Decimal("1.15") * Decimal("1.10") * 1040
    assert result.totals.total_labor_cost == Decimal("376261.6") + analyst_total
    assert result.totals.total_odc_cost == Decimal("13100")
    assert result.totals.total_project_cost == result.totals.total_labor_cost + Decimal("13100")
    assert result.totals.total_effective_hours == 3120
    assert result.totals.average_burdened_rate == result.totals.total_labor_cost / 3120
    assert result.project_id == "proj-001"
    assert result.calculated_at.tzinfo is not None
    assert result.validation_warnings == []


def test_end_to_end_single_engineer(make_input):
    result = calculate_project(make_input())

    (line,) = result.labor_categories
    assert line.clearance_adjusted_rate == 110
    assert line.burdened_rate == Decimal("180.895")
    assert quantize_money(result.totals.total_project_cost) == Decimal("376261.60")
    assert result.other_direct_costs == []


def test_zero_effective_hours_yield_zero_average(make_input, make_labor):
    calculation = make_input(labor=[make_labor(hours=Decimal("0"))])

    result = calculate_project(calculation, validate=False)

    assert result.totals.total_effective_hours == 0
    assert result.totals.average_burdened_rate == 0


def test_empty_project_has_zero_totals():
    totals = aggregate_totals([], [])

    assert totals.total_project_cost == 0
    assert totals.average_burdened_rate == 0


def test_quantize_helpers_round_half_up():
    assert quantize_money(Decimal("180.895")) == Decimal("180.90")
    assert quantize_rate(Decimal("0.123450")) == Decimal("0.1235")
    assert quantize_hours(Decimal("0.208")) == Decimal("0.21")
