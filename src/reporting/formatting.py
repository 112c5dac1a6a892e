"""
Formatting — Отображение сумм, процентов, дат и рабочей недели

Чистое строковое форматирование без локалей: разделитель тысяч — запятая,
дробная часть — ровно 2 знака (ROUND_HALF_UP).
"""

import datetime as dt
from decimal import Decimal
from typing import Final, Iterable

from src.core.domain.currency import DEFAULT_CURRENCY_SYMBOL
from src.core.domain.project import WorkingWeek
from src.core.math.decimal_safeguards import quantize_money, to_decimal
from src.scheduling.business_days import to_calendar_date

DAY_NAMES: Final[dict[str, str]] = {
    "MON": "Monday",
    "TUE": "Tuesday",
    "WED": "Wednesday",
    "THU": "Thursday",
    "FRI": "Friday",
    "SAT": "Saturday",
    "SUN": "Sunday",
}


def format_currency(amount: Decimal | int | float | str, symbol: str = DEFAULT_CURRENCY_SYMBOL) -> str:
    """
    Сумма с символом валюты, 2 знаками и разделителем тысяч.

    Examples:
        >>> format_currency(Decimal(15000))
        '฿15,000.00'
        >>> format_currency(Decimal(1500000), "$")
        '$1,500,000.00'
        >>> format_currency(Decimal("-1234.5"))
        '฿-1,234.50'
    """
    value = quantize_money(to_decimal(amount))
    return f"{symbol}{value:,.2f}"


def format_percentage(value: Decimal | int | float | str) -> str:
    """
    Процент с 2 знаками, знак сохраняется.

    Examples:
        >>> format_percentage(Decimal("15.5"))
        '15.50%'
        >>> format_percentage(Decimal("-5.25"))
        '-5.25%'
    """
    quantized = quantize_money(to_decimal(value))
    return f"{quantized:.2f}%"


def format_date(value: dt.date | dt.datetime | str | None) -> str:
    """
    Дата в формате "DD Mon YYYY" (например, "11 Sep 2025").

    None → "Not set", нераспознанная строка → "Invalid date".
    """
    if value is None or value == "":
        return "Not set"

    if isinstance(value, str):
        try:
            value = to_calendar_date(value)
        except ValueError:
            return "Invalid date"

    return value.strftime("%d %b %Y")


def format_working_days(
    working_week: WorkingWeek | str,
    custom_working_days: Iterable[str] | None = None,
) -> str:
    """Описание рабочей недели для UI."""
    week = WorkingWeek(working_week)

    if week == WorkingWeek.MON_TO_SAT:
        return "Monday - Saturday"
    if week == WorkingWeek.CUSTOM:
        return ", ".join(DAY_NAMES.get(code.upper(), code) for code in custom_working_days or ())
    return "Monday - Friday"
