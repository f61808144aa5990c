import logging
import sys
from datetime import date
from decimal import Decimal
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from govprice.core.schema import (
    CalculationInput,
    LaborCategoryInput,
    OtherDirectCostInput,
    PeriodOfPerformance,
    PricingSettings,
)


@pytest.fixture()
def settings() -> PricingSettings:
    return PricingSettings(
        project_id="proj-001",
        overhead_rate=Decimal("0.30"),
        ga_rate=Decimal("0.15"),
        fee_rate=Decimal("0.10"),
        contract_type="FFP",
        period_of_performance=PeriodOfPerformance(start_date=date(2025, 1, 1), end_date=date(2025, 12, 31)),
    )


@pytest.fixture()
def make_labor():
    def _make(**overrides) -> LaborCategoryInput:
        data = {
            "id": "lc-1",
            "title": "Engineer",
            "base_rate": Decimal("100"),
            "hours": Decimal("2080"),
            "fte_percentage": Decimal("100"),
            "clearance_level": "Secret",
            "location": "On-site",
        }
        data.update(overrides)
        return LaborCategoryInput(**data)

    return _make


@pytest.fixture()
def make_odc():
    def _make(**overrides) -> OtherDirectCostInput:
        data = {
            "id": "odc-1",
            "description": "Site visits",
            "amount": Decimal("1000"),
            "category": "Travel",
            "taxable": False,
            "tax_rate": Decimal("0"),
        }
        data.update(overrides)
        return OtherDirectCostInput(**data)

    return _make


@pytest.fixture()
def make_input(settings, make_labor):
    def _make(settings_update: dict | None = None, labor=None, odcs=None) -> CalculationInput:
        project_settings = settings.model_copy(update=settings_update) if settings_update else settings
        return CalculationInput(
            settings=project_settings,
            labor_categories=[make_labor()] if labor is None else labor,
            other_direct_costs=odcs or [],
        )

    return _make


@pytest.fixture()
def restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    root.handlers = handlers
    root.setLevel(level)
