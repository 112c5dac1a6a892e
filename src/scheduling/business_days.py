"""
Business Days — Подсчёт рабочих дней с учётом праздников

Обход диапазона [start, end] по одному календарному дню (обе границы
включены). День считается рабочим, если его день недели входит в рабочую
неделю (по умолчанию понедельник-пятница) и он не является праздником.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. end < start → 0 (цикл не выполняется, отрицательных значений нет)
2. Праздники сравниваются по календарной дате, время суток игнорируется
3. datetime, date, ISO-строки и Holiday нормализуются к datetime.date
4. Пустая рабочая неделя при поиске даты окончания → ValueError
   (иначе бесконечный цикл)
"""

import datetime as dt
from typing import Final, Iterable, Iterator

from src.core.domain.holiday import Holiday
from src.core.domain.project import WorkingWeek

# =============================================================================
# CONSTANTS
# =============================================================================

# Коды дней недели → номер дня (Monday = 0, как в datetime.date.weekday())
DAY_CODES: Final[dict[str, int]] = {
    "MON": 0,
    "TUE": 1,
    "WED": 2,
    "THU": 3,
    "FRI": 4,
    "SAT": 5,
    "SUN": 6,
}

MON_TO_FRI_DAYS: Final[frozenset[int]] = frozenset({0, 1, 2, 3, 4})
MON_TO_SAT_DAYS: Final[frozenset[int]] = frozenset({0, 1, 2, 3, 4, 5})

ONE_DAY: Final[dt.timedelta] = dt.timedelta(days=1)

DateLike = dt.date | dt.datetime | str | Holiday


# =============================================================================
# НОРМАЛИЗАЦИЯ
# =============================================================================


def to_calendar_date(value: DateLike) -> dt.date:
    """
    Нормализация значения к календарной дате (ключ YYYY-MM-DD).

    Args:
        value: date, datetime, ISO-строка ("2025-04-14" или
            "2025-04-14T00:00:00Z") или Holiday

    Returns:
        datetime.date

    Raises:
        ValueError: Если строка не является ISO-датой или ISO-datetime целиком
            (хвост вроде "2025-04-14garbage" не допускается)
        TypeError: Если тип не поддерживается
    """
    if isinstance(value, Holiday):
        return value.date
    # datetime — подкласс date, поэтому проверяется первым
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, dt.date):
        return value
    if isinstance(value, str):
        text = value.strip()
        if len(text) == 10:
            return dt.date.fromisoformat(text)
        # fromisoformat до Python 3.11 не принимает суффикс "Z"
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        return dt.datetime.fromisoformat(text).date()
    raise TypeError(f"Unsupported date value {type(value).__name__}: {value!r}")


def get_working_days(
    working_week: WorkingWeek | str = WorkingWeek.MON_TO_FRI,
    custom_working_days: Iterable[str] | None = None,
) -> frozenset[int]:
    """
    Рабочие дни недели для типа рабочей недели проекта.

    Args:
        working_week: MON_TO_FRI, MON_TO_SAT или CUSTOM
        custom_working_days: коды дней ("MON", "TUE", ...) для CUSTOM

    Returns:
        Множество номеров дней недели (Monday = 0)

    Raises:
        ValueError: Если код дня неизвестен
    """
    week = WorkingWeek(working_week)

    if week == WorkingWeek.MON_TO_SAT:
        return MON_TO_SAT_DAYS
    if week == WorkingWeek.CUSTOM:
        days = set()
        for code in custom_working_days or ():
            day = DAY_CODES.get(code.upper())
            if day is None:
                raise ValueError(f"Unknown working day code: {code!r}")
            days.add(day)
        return frozenset(days)
    return MON_TO_FRI_DAYS


def _iter_dates(start: dt.date, end: dt.date) -> Iterator[dt.date]:
    current = start
    while current <= end:
        yield current
        current += ONE_DAY


# =============================================================================
# ПОДСЧЁТ РАБОЧИХ ДНЕЙ
# =============================================================================


def calculate_business_days(
    start_date: DateLike,
    end_date: DateLike,
    *,
    working_days: Iterable[int] | None = None,
) -> int:
    """
    Количество рабочих дней в диапазоне [start_date, end_date].

    Args:
        start_date: Первый день диапазона (включительно)
        end_date: Последний день диапазона (включительно)
        working_days: Номера рабочих дней недели (default: пн-пт)

    Returns:
        Количество рабочих дней (0 если end_date < start_date)

    Examples:
        >>> calculate_business_days(dt.date(2025, 9, 1), dt.date(2025, 9, 5))
        5
    """
    return calculate_business_days_excluding_holidays(
        start_date, end_date, (), working_days=working_days
    )


def calculate_business_days_excluding_holidays(
    start_date: DateLike,
    end_date: DateLike,
    holidays: Iterable[DateLike],
    *,
    working_days: Iterable[int] | None = None,
) -> int:
    """
    Количество рабочих дней в диапазоне за вычетом праздников.

    Args:
        start_date: Первый день диапазона (включительно)
        end_date: Последний день диапазона (включительно)
        holidays: Праздничные даты (date, datetime, ISO-строки или Holiday)
        working_days: Номера рабочих дней недели (default: пн-пт)

    Returns:
        Количество рабочих дней, не являющихся праздниками
    """
    start = to_calendar_date(start_date)
    end = to_calendar_date(end_date)
    week = MON_TO_FRI_DAYS if working_days is None else frozenset(working_days)
    holiday_set = {to_calendar_date(h) for h in holidays}

    return sum(
        1
        for day in _iter_dates(start, end)
        if day.weekday() in week and day not in holiday_set
    )


# =============================================================================
# ДАТА ОКОНЧАНИЯ
# =============================================================================


def calculate_end_date(
    start_date: DateLike,
    business_days: int,
    holidays: Iterable[DateLike] = (),
    *,
    working_days: Iterable[int] | None = None,
) -> dt.date:
    """
    Дата, на которую приходится N-й рабочий день начиная со start_date.

    start_date учитывается, если он рабочий. Используется для размещения
    назначения на диаграмме Ганта по количеству дней исполнения.

    Args:
        start_date: Дата начала
        business_days: Количество рабочих дней (N <= 0 → start_date)
        holidays: Праздничные даты
        working_days: Номера рабочих дней недели (default: пн-пт)

    Returns:
        Дата последнего рабочего дня

    Raises:
        ValueError: Если рабочая неделя пустая

    Examples:
        >>> calculate_end_date(dt.date(2025, 9, 1), 5)
        datetime.date(2025, 9, 5)
        >>> calculate_end_date(dt.date(2025, 9, 5), 2)
        datetime.date(2025, 9, 8)
    """
    start = to_calendar_date(start_date)
    if business_days <= 0:
        return start

    week = MON_TO_FRI_DAYS if working_days is None else frozenset(working_days)
    if not week:
        raise ValueError("Working week has no working days")

    holiday_set = {to_calendar_date(h) for h in holidays}

    current = start
    remaining = business_days
    while True:
        if current.weekday() in week and current not in holiday_set:
            remaining -= 1
            if remaining == 0:
                return current
        current += ONE_DAY
