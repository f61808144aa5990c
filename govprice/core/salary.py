from __future__ import annotations

from decimal import Decimal

# 40 hours/week x 52 weeks.
STANDARD_HOURS_PER_YEAR = Decimal("2080")


def annual_to_hourly(annual_salary: Decimal | int) -> Decimal:
    return Decimal(annual_salary) / STANDARD_HOURS_PER_YEAR


def hourly_to_annual(hourly_rate: Decimal | int) -> Decimal:
    return Decimal(hourly_rate) * STANDARD_HOURS_PER_YEAR
