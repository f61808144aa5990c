#!/usr/bin/env python
from __future__ import annotations

import argparse
import json
from decimal import Decimal
from pathlib import Path

from govprice.core.salary import annual_to_hourly


def build_sample(title: str, base_rate: float | Decimal, hours: float, start: str, end: str) -> dict:
    return {
        "settings": {
            "projectId": "sample-project",
            "overheadRate": "0.30",
            "gaRate": "0.15",
            "feeRate": "0.10",
            "contractType": "FFP",
            "periodOfPerformance": {"startDate": start, "endDate": end},
        },
        "laborCategories": [
            {
                "id": "lc-1",
                "title": title,
                "baseRate": f"{base_rate:.2f}",
                "hours": f"{hours:g}",
                "ftePercentage": "100",
                "clearanceLevel": "Secret",
                "location": "On-site",
            },
            {
                "id": "lc-2",
                "title": "Business Analyst",
                "baseRate": "85.00",
                "hours": "2080",
                "ftePercentage": "50",
                "clearanceLevel": "Public Trust",
                "location": "Remote",
            },
        ],
        "otherDirectCosts": [
            {
                "id": "odc-1",
                "description": "Site visits",
                "amount": "12000.00",
                "category": "Travel",
                "taxable": False,
                "taxRate": "0",
            },
            {
                "id": "odc-2",
                "description": "Developer laptops",
                "amount": "6000.00",
                "category": "Equipment",
                "taxable": True,
                "taxRate": "0.0875",
            },
        ],
    }


def main() -> None:
    parser = argparse.ArgumentParser(description="Generate a sample pricing input JSON")
    parser.add_argument("--output", required=True, help="Output file path (.json)")
    parser.add_argument("--title", default="Software Engineer", help="Title of the first labor category")
    parser.add_argument("--base", type=float, default=100, help="Base hourly rate of the first labor category")
    parser.add_argument("--salary", type=Decimal, default=None, help="Annual salary; overrides --base at 2080 hours/year")
    parser.add_argument("--hours", type=float, default=2080, help="Hours of the first labor category")
    parser.add_argument("--start", default="2025-01-01", help="Period of performance start (YYYY-MM-DD)")
    parser.add_argument("--end", default="2025-12-31", help="Period of performance end (YYYY-MM-DD)")
    args = parser.parse_args()

    output = Path(args.output)
    output.parent.mkdir(parents=True, exist_ok=True)
    base_rate = annual_to_hourly(args.salary) if args.salary is not None else args.base
    payload = build_sample(args.title, base_rate, args.hours, args.start, args.end)
    output.write_text(json.dumps(payload, indent=2), encoding="utf-8")

    print(f"Sample pricing input written: {output}")


if __name__ == "__main__":
    main()
