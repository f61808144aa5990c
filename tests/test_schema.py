from decimal import Decimal

import pytest
from pydantic import ValidationError as ModelValidationError

from govprice.core.rules import calculate_project
from govprice.core.schema import (
    DEFAULT_TAX_RATE,
    CalculationInput,
    LaborCategoryInput,
    OtherDirectCostInput,
    ProjectTotals,
)

PAYLOAD = {
    "settings": {
        "projectId": "proj-json",
        "overheadRate": "0.30",
        "gaRate": "0.15",
        "feeRate": "0.10",
        "contractType": "T&M",
        "periodOfPerformance": {"startDate": "2025-01-01", "endDate": "2025-12-31"},
    },
    "laborCategories": [
        {
            "id": "lc-1",
            "title": "Engineer",
            "baseRate": 100,
            "hours": 2080,
            "ftePercentage": 100,
            "clearanceLevel": "Secret",
            "location": "On-site",
        }
    ],
    "otherDirectCosts": [
        {"id": "odc-1", "description": "Licenses", "amount": "250.00", "category": "Software", "taxable": True}
    ],
}


def test_camel_case_payload_is_accepted():
    calculation = CalculationInput.model_validate(PAYLOAD)

    assert calculation.settings.project_id == "proj-json"
    assert calculation.settings.fee_rate == Decimal("0.1")
    assert calculation.settings.period_of_performance.end_date.isoformat() == "2025-12-31"
    assert calculation.labor_categories[0].base_rate == Decimal("100")
    assert calculation.other_direct_costs[0].tax_rate == DEFAULT_TAX_RATE


def test_result_dumps_with_camel_case_keys():
    result = calculate_project(CalculationInput.model_validate(PAYLOAD))

    dumped = result.model_dump(by_alias=True, mode="json")

    assert set(dumped["totals"]) == {
        "totalLaborCost",
        "totalODCCost",
        "totalProjectCost",
        "totalEffectiveHours",
        "averageBurdenedRate",
    }
    assert Decimal(dumped["laborCategories"][0]["clearanceAdjustedRate"]) == 110
    assert Decimal(dumped["otherDirectCosts"][0]["taxAmount"]) == Decimal("21.875")
    assert dumped["projectId"] == "proj-json"


def test_totals_accept_field_names_and_alias():
    by_name = ProjectTotals(total_odc_cost=Decimal("5"))
    by_alias = ProjectTotals.model_validate({"totalODCCost": "5"})

    assert by_name.total_odc_cost == by_alias.total_odc_cost == Decimal("5")


def test_records_are_frozen(make_labor):
    category = make_labor()

    with pytest.raises(ModelValidationError):
        category.base_rate = Decimal("1")


def test_unknown_fields_are_rejected():
    with pytest.raises(ModelValidationError):
        OtherDirectCostInput(description="x", amount=Decimal("1"), category="Other", vendor="ACME")


def test_enum_violations_reach_the_validator():
    category = LaborCategoryInput(
        title="Analyst",
        base_rate=Decimal("50"),
        hours=Decimal("100"),
        fte_percentage=Decimal("100"),
        clearance_level="Confidential",
        location="Mars",
    )

    assert category.clearance_level == "Confidential"
    assert category.id is None


def test_missing_required_field_fails_construction():
    with pytest.raises(ModelValidationError):
        LaborCategoryInput(title="Analyst", base_rate=Decimal("50"))
