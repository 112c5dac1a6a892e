"""
Domain models and value objects.

Contains fundamental domain entities like ProjectAssignment, ProjectConfig,
Holiday and Currency.
"""

from src.core.domain.assignment import ProjectAssignment
from src.core.domain.currency import (
    BASE_CURRENCY_CODE,
    CURRENCY_SYMBOLS,
    DEFAULT_CURRENCY_SYMBOL,
    FALLBACK_CURRENCIES,
    Currency,
    find_base_currency,
    find_currency,
    get_currency_symbol,
)
from src.core.domain.holiday import Holiday, HolidayScope, holidays_for_project
from src.core.domain.project import ProjectConfig, ProjectStatus, WorkingWeek

__all__ = [
    # Assignment model
    "ProjectAssignment",
    # Project model
    "ProjectConfig",
    "ProjectStatus",
    "WorkingWeek",
    # Holiday model
    "Holiday",
    "HolidayScope",
    "holidays_for_project",
    # Currency model
    "BASE_CURRENCY_CODE",
    "CURRENCY_SYMBOLS",
    "DEFAULT_CURRENCY_SYMBOL",
    "FALLBACK_CURRENCIES",
    "Currency",
    "find_base_currency",
    "find_currency",
    "get_currency_symbol",
]
