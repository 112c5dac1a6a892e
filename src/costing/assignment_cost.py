"""
Assignment Cost — Стоимость одной строки назначения

Формулы (точные, без промежуточного округления):
    total_mandays = days_allocated + buffer_days
    row_cost      = daily_rate × total_mandays

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Вся арифметика в Decimal (28 значащих цифр, ROUND_HALF_UP)
2. Отсутствующие days_allocated / buffer_days → 0
3. Отсутствующий daily_rate → MissingDailyRateError (не подставляется 0)
4. Кэшированные total_mandays / allocated_budget никогда не читаются
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Final

from src.core.domain.assignment import ProjectAssignment
from src.core.math.decimal_safeguards import (
    DECIMAL_PRECISION,
    DECIMAL_ROUNDING,
    money_arithmetic,
)

logger = logging.getLogger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class MissingDailyRateError(ValueError):
    """
    У назначения нет ставки за день.

    Расчёт стоимости без ставки не имеет смысла, поэтому это ошибка
    вызывающей стороны, а не повод подставить 0.
    """
    pass


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class CostingConfig:
    """Конфигурация decimal-контекста для расчётов стоимости."""

    precision: int = DECIMAL_PRECISION
    rounding: str = DECIMAL_ROUNDING


DEFAULT_COSTING_CONFIG: Final[CostingConfig] = CostingConfig()


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class AssignmentCost:
    """Результат расчёта стоимости строки назначения."""

    assignment_id: int | str | None
    daily_rate: Decimal
    days_allocated: Decimal
    buffer_days: Decimal
    total_mandays: Decimal
    row_cost: Decimal


# =============================================================================
# INPUT COERCION
# =============================================================================


AssignmentInput = ProjectAssignment | Mapping[str, Any]


def coerce_assignment(assignment: AssignmentInput) -> ProjectAssignment:
    """
    Приведение входной записи к ProjectAssignment.

    Принимает готовую модель или plain dict (строку из БД/API).

    Raises:
        MissingDailyRateError: Если daily_rate отсутствует или None
        pydantic.ValidationError: Если значения невалидны
    """
    if isinstance(assignment, ProjectAssignment):
        return assignment

    if assignment.get("daily_rate") is None:
        raise MissingDailyRateError(
            f"Assignment {assignment.get('id')!r} has no daily_rate"
        )
    return ProjectAssignment.model_validate(dict(assignment))


# =============================================================================
# CALCULATOR
# =============================================================================


def calculate_assignment_cost(
    assignment: AssignmentInput,
    config: CostingConfig = DEFAULT_COSTING_CONFIG,
) -> AssignmentCost:
    """
    Расчёт стоимости одной строки назначения.

    Args:
        assignment: ProjectAssignment или dict с полями назначения
        config: Параметры decimal-контекста

    Returns:
        AssignmentCost с пересчитанными total_mandays и row_cost

    Raises:
        MissingDailyRateError: Если у назначения нет daily_rate

    Examples:
        >>> cost = calculate_assignment_cost(
        ...     {"id": 1, "daily_rate": 15000, "days_allocated": 10}
        ... )
        >>> cost.row_cost
        Decimal('150000')
    """
    record = coerce_assignment(assignment)

    with money_arithmetic(config.precision, config.rounding):
        total_mandays = record.days_allocated + record.buffer_days
        row_cost = record.daily_rate * total_mandays

    if record.total_mandays is not None and record.total_mandays != total_mandays:
        logger.debug(
            "Assignment %r: stored total_mandays=%s differs from recomputed %s",
            record.id,
            record.total_mandays,
            total_mandays,
        )

    return AssignmentCost(
        assignment_id=record.id,
        daily_rate=record.daily_rate,
        days_allocated=record.days_allocated,
        buffer_days=record.buffer_days,
        total_mandays=total_mandays,
        row_cost=row_cost,
    )
