#!/usr/bin/env python
from __future__ import annotations

import argparse
import logging
from pathlib import Path

from govprice.core import CalculationBlocked, calculate_project
from govprice.core.rules import quantize_money
from govprice.core.schema import CalculationInput, OverridePermissions, ValidationContext
from govprice.exporters import export_csv, export_workbook
from govprice.logging_config import setup_logging

logger = logging.getLogger("govprice.scripts.price_project")


def build_context(args: argparse.Namespace) -> ValidationContext | None:
    if not (args.contract_vehicle or args.override_validation or args.override_limits):
        return None
    return ValidationContext(
        contract_vehicle=args.contract_vehicle,
        permissions=OverridePermissions(
            can_override_validation=args.override_validation,
            can_override_contract_limits=args.override_limits,
            user_role=args.role,
            reason=args.reason,
        ),
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Price a project input JSON and export the estimate")
    parser.add_argument("--input", required=True, help="Calculation input JSON file")
    parser.add_argument("--output-dir", required=True, help="Directory for estimate.xlsx and estimate.csv")
    parser.add_argument("--contract-vehicle", default=None, help="Contract vehicle whose rate ceilings apply")
    parser.add_argument("--override-validation", action="store_true", help="Allow overriding soft limits")
    parser.add_argument("--override-limits", action="store_true", help="Allow exceeding contract vehicle ceilings")
    parser.add_argument("--role", default="analyst", help="Role recorded with override permissions")
    parser.add_argument("--reason", default=None, help="Justification recorded with override permissions")
    parser.add_argument("--log-level", default=None, help="Logging level (defaults to GOVPRICE_LOG_LEVEL)")
    args = parser.parse_args(argv)

    setup_logging(args.log_level)

    calculation = CalculationInput.model_validate_json(Path(args.input).read_text(encoding="utf-8"))
    try:
        result = calculate_project(calculation, build_context(args))
    except CalculationBlocked as exc:
        for error in exc.errors:
            print(f"{error.field}: {error.message}")
        return 1

    output_dir = Path(args.output_dir)
    workbook = export_workbook(output_dir / "estimate.xlsx", result)
    listing = export_csv(output_dir / "estimate.csv", result)
    for warning in result.validation_warnings:
        print(f"warning {warning.field}: {warning.message}")
    logger.info("estimate written to %s and %s", workbook, listing)
    print(f"Total project cost: ${quantize_money(result.totals.total_project_cost):,.2f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
