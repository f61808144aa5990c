from __future__ import annotations

from pathlib import Path

import pandas as pd

from govprice.core.schema import CalculationResult
from govprice.exporters.export_format import format_for_csv


def export_csv(path: Path, result: CalculationResult) -> Path:
    payload = format_for_csv(result)
    df = pd.DataFrame(payload["rows"], columns=payload["headers"])
    path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(path, index=False)
    return path
