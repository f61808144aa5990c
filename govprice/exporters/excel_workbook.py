from __future__ import annotations

from decimal import Decimal
from pathlib import Path
from typing import Any, Iterable

import pandas as pd

from govprice.core.schema import CalculationResult
from govprice.exporters.export_format import format_for_excel

LABOR_SUMMARY_COLUMNS = ["title", "effectiveHours", "baseRate", "burdenedRate", "totalCost", "clearanceLevel"]
LABOR_DETAIL_COLUMNS = [
    "title",
    "baseRate",
    "hours",
    "ftePercentage",
    "effectiveHours",
    "clearanceLevel",
    "location",
    "clearancePremium",
    "clearanceAdjustedRate",
    "overheadRate",
    "overheadAmount",
    "gaRate",
    "gaAmount",
    "feeRate",
    "feeAmount",
    "burdenedRate",
    "totalCost",
]
ODC_COLUMNS = ["description", "category", "amount", "taxable", "taxRate", "taxAmount", "totalAmount"]


def _cell(value: Any) -> Any:
    return float(value) if isinstance(value, Decimal) else value


def _frame(rows: Iterable[dict[str, Any]], columns: list[str]) -> pd.DataFrame:
    records = [{key: _cell(value) for key, value in row.items()} for row in rows]
    return pd.DataFrame(records, columns=columns)


def export_workbook(path: Path, result: CalculationResult) -> Path:
    """Write the calculation as a four-sheet workbook."""

    payload = format_for_excel(result)
    summary = pd.DataFrame(
        [(key, _cell(value)) for key, value in payload["projectSummary"].items()],
        columns=["Metric", "Value"],
    )

    path.parent.mkdir(parents=True, exist_ok=True)
    with pd.ExcelWriter(path, engine="openpyxl") as writer:
        summary.to_excel(writer, sheet_name="Summary", index=False)
        _frame(payload["laborSummary"], LABOR_SUMMARY_COLUMNS).to_excel(writer, sheet_name="Labor Summary", index=False)
        _frame(payload["laborDetail"], LABOR_DETAIL_COLUMNS).to_excel(writer, sheet_name="Labor Detail", index=False)
        _frame(payload["odcDetail"], ODC_COLUMNS).to_excel(writer, sheet_name="ODC Detail", index=False)
    return path
