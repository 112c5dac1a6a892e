"""Reporting — форматирование сумм и дат, CSV-экспорт с защитой от инъекций."""

from .csv_export import (
    HolidayCSVRowError,
    HolidayImportResult,
    export_holidays_csv,
    parse_holidays_csv,
    sanitize_csv_cell,
)
from .formatting import format_currency, format_date, format_percentage, format_working_days

__all__ = [
    "format_currency",
    "format_percentage",
    "format_date",
    "format_working_days",
    "sanitize_csv_cell",
    "export_holidays_csv",
    "parse_holidays_csv",
    "HolidayCSVRowError",
    "HolidayImportResult",
]
