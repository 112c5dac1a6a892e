"""Costing — расчёт стоимости назначений, итогов проекта и пересчёт валют.

- calculate_assignment_cost: стоимость одной строки (ставка × человеко-дни)
- ProjectSummaryCalculator: subtotal, налог, себестоимость, ROI, маржа
- Currency conversion: пересчёт сумм через базовую валюту
"""

from .assignment_cost import (
    AssignmentCost,
    CostingConfig,
    MissingDailyRateError,
    calculate_assignment_cost,
)
from .currency_conversion import (
    BaseCurrencyNotFoundError,
    CurrencyConversionError,
    CurrencyInactiveError,
    InvalidExchangeRateError,
    CurrencyNotFoundError,
    convert_amount,
    get_exchange_rate,
)
from .project_summary import ProjectSummary, ProjectSummaryCalculator, calculate_project_summary

__all__ = [
    "AssignmentCost",
    "CostingConfig",
    "MissingDailyRateError",
    "calculate_assignment_cost",
    "ProjectSummary",
    "ProjectSummaryCalculator",
    "calculate_project_summary",
    "CurrencyConversionError",
    "CurrencyNotFoundError",
    "CurrencyInactiveError",
    "BaseCurrencyNotFoundError",
    "InvalidExchangeRateError",
    "convert_amount",
    "get_exchange_rate",
]
