"""Export writers for calculation results."""

from .csv_lines import export_csv
from .excel_workbook import export_workbook
from .export_format import format_for_csv, format_for_excel, format_for_pdf

__all__ = [
    "export_csv",
    "export_workbook",
    "format_for_csv",
    "format_for_excel",
    "format_for_pdf",
]
