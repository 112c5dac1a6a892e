"""
CSV Export — Защита от CSV-инъекций, экспорт и импорт праздников

Строки, начинающиеся с "=", "+", "-" или "@", электронные таблицы
интерпретируют как формулы. Перед записью в CSV такие ячейки получают
префикс "'" (проверяется только первый символ).
"""

import csv
import io
import logging
import re
from dataclasses import dataclass, field
from typing import Final, Iterable

from pydantic import ValidationError

from src.core.domain.holiday import Holiday

logger = logging.getLogger(__name__)

# Символы, с которых начинаются формулы в электронных таблицах
FORMULA_PREFIXES: Final[tuple[str, ...]] = ("=", "+", "-", "@")

HOLIDAY_CSV_COLUMNS: Final[tuple[str, ...]] = ("date", "name", "type")

ISO_DATE_PATTERN: Final[re.Pattern[str]] = re.compile(r"^\d{4}-\d{2}-\d{2}$")


# =============================================================================
# SANITIZATION
# =============================================================================


def sanitize_csv_cell(cell: str) -> str:
    """
    Защита ячейки CSV от интерпретации как формулы.

    Examples:
        >>> sanitize_csv_cell("=SUM(A1:A10)")
        "'=SUM(A1:A10)"
        >>> sanitize_csv_cell("normal text")
        'normal text'
    """
    if cell.startswith(FORMULA_PREFIXES):
        return f"'{cell}"
    return cell


# =============================================================================
# EXPORT
# =============================================================================


def export_holidays_csv(holidays: Iterable[Holiday]) -> str:
    """
    Экспорт праздников в CSV (date,name,type).

    type: "public" для системных праздников, "company" для добавленных
    вручную. Текстовые ячейки проходят sanitize_csv_cell.
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(HOLIDAY_CSV_COLUMNS)

    for holiday in sorted(holidays, key=lambda h: h.date):
        writer.writerow(
            (
                holiday.date.isoformat(),
                sanitize_csv_cell(holiday.name),
                "company" if holiday.is_custom else "public",
            )
        )

    return buffer.getvalue()


# =============================================================================
# IMPORT
# =============================================================================


@dataclass(frozen=True)
class HolidayCSVRowError:
    """Ошибка в строке импортируемого CSV."""

    line_number: int
    message: str


@dataclass(frozen=True)
class HolidayImportResult:
    """Результат импорта праздников из CSV."""

    holidays: tuple[Holiday, ...] = field(default=())
    errors: tuple[HolidayCSVRowError, ...] = field(default=())

    @property
    def is_valid(self) -> bool:
        return not self.errors


def parse_holidays_csv(text: str, project_id: int | str | None = None) -> HolidayImportResult:
    """
    Импорт праздников из CSV с колонками date,name.

    Дата строго в формате YYYY-MM-DD. Ошибочные строки не прерывают импорт,
    а собираются в errors с номером строки файла.

    Args:
        text: Содержимое CSV (с заголовком)
        project_id: Проект для импортируемых праздников (None → глобальные)

    Returns:
        HolidayImportResult
    """
    reader = csv.DictReader(io.StringIO(text))
    missing = {"date", "name"} - set(reader.fieldnames or ())
    if missing:
        return HolidayImportResult(
            errors=(HolidayCSVRowError(1, f"Missing columns: {', '.join(sorted(missing))}"),)
        )

    holidays: list[Holiday] = []
    errors: list[HolidayCSVRowError] = []

    # Строка 1 — заголовок
    for line_number, row in enumerate(reader, start=2):
        raw_date = (row.get("date") or "").strip()
        name = (row.get("name") or "").strip()

        if not ISO_DATE_PATTERN.match(raw_date):
            errors.append(HolidayCSVRowError(line_number, "Date must be in YYYY-MM-DD format"))
            continue
        if not name:
            errors.append(HolidayCSVRowError(line_number, "Holiday name is required"))
            continue

        try:
            holiday = Holiday(date=raw_date, name=name, project_id=project_id, is_custom=True)
        except ValidationError as e:
            errors.append(HolidayCSVRowError(line_number, str(e.errors()[0]["msg"])))
            continue

        holidays.append(holiday)

    if errors:
        logger.warning("Holiday CSV import: %d rows rejected", len(errors))

    return HolidayImportResult(holidays=tuple(holidays), errors=tuple(errors))
