"""Portfolio-level statistics over priced labor categories."""

from __future__ import annotations

from collections import Counter
from typing import Iterable

from govprice.core.rules import ZERO
from govprice.core.schema import LaborCategoryResult, LaborSummary


def summarize_labor_categories(results: Iterable[LaborCategoryResult]) -> LaborSummary:
    results = list(results)
    total_hours = sum((result.effective_hours for result in results), ZERO)
    total_burdened = sum((result.total_cost for result in results), ZERO)
    return LaborSummary(
        total_categories=len(results),
        total_effective_hours=total_hours,
        total_base_cost=sum((result.base_rate * result.effective_hours for result in results), ZERO),
        total_burdened_cost=total_burdened,
        average_burdened_rate=total_burdened / total_hours if total_hours > 0 else ZERO,
        clearance_distribution=dict(Counter(result.clearance_level for result in results)),
        location_distribution=dict(Counter(result.location for result in results)),
    )
