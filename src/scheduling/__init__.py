"""Scheduling — календарная арифметика для размещения назначений.

Независимые чистые функции: буфер / дни исполнения, рабочие дни с учётом
праздников и рабочей недели, дата окончания по количеству рабочих дней.
"""

from .business_days import (
    DAY_CODES,
    MON_TO_FRI_DAYS,
    MON_TO_SAT_DAYS,
    calculate_business_days,
    calculate_business_days_excluding_holidays,
    calculate_end_date,
    get_working_days,
    to_calendar_date,
)
from .day_arithmetic import calculate_buffer_days, calculate_execution_days

__all__ = [
    "DAY_CODES",
    "MON_TO_FRI_DAYS",
    "MON_TO_SAT_DAYS",
    "calculate_buffer_days",
    "calculate_execution_days",
    "calculate_business_days",
    "calculate_business_days_excluding_holidays",
    "calculate_end_date",
    "get_working_days",
    "to_calendar_date",
]
