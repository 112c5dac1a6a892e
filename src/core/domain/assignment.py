"""
ProjectAssignment — Модель назначения участника команды на проект

Immutable Pydantic модель одной строки бюджета: ставка участника и
выделенные ему дни исполнения и буфера.

Поля total_mandays и allocated_budget хранятся в БД как кэш и движком
расчётов не используются: трудозатраты и стоимость всегда пересчитываются
из daily_rate, days_allocated и buffer_days.
"""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, Field, field_validator

from src.core.math.decimal_safeguards import ZERO, to_decimal, to_non_negative_decimal


# =============================================================================
# ASSIGNMENT MODEL
# =============================================================================


class ProjectAssignment(BaseModel):
    """
    Назначение участника команды на проект.

    Immutable модель (frozen=True): любое изменение ставки или дней
    создаёт новый экземпляр.
    """

    # Идентификация
    id: int | str | None = Field(default=None, description="Идентификатор назначения в рамках проекта")
    project_id: int | str | None = Field(default=None, description="Проект-владелец")
    team_member_id: int | str | None = Field(default=None, description="Участник команды")

    # Ставка и дни
    daily_rate: Decimal = Field(..., description="Ставка за день (>= 0)")
    days_allocated: Decimal = Field(default=ZERO, description="Дни исполнения (>= 0)")
    buffer_days: Decimal = Field(default=ZERO, description="Буферные дни (>= 0)")

    # Денормализованные значения из БД (не используются в расчётах)
    total_mandays: Decimal | None = Field(default=None, description="Кэш: days_allocated + buffer_days")
    allocated_budget: Decimal | None = Field(default=None, description="Кэш: стоимость строки")

    # Прочее
    is_required: bool = Field(default=True)
    sort_order: int = Field(default=0)
    notes: str | None = Field(default=None)
    start_date: date | None = Field(default=None)
    end_date: date | None = Field(default=None)

    model_config = {"frozen": True}  # Immutable

    @field_validator("daily_rate", mode="before")
    @classmethod
    def validate_daily_rate(cls, v: object) -> Decimal:
        """Ставка обязательна и неотрицательна."""
        if v is None:
            raise ValueError("daily_rate is required")
        return to_non_negative_decimal(v)

    @field_validator("days_allocated", "buffer_days", mode="before")
    @classmethod
    def default_missing_days(cls, v: object) -> Decimal:
        """
        Отсутствующие дни трактуются как 0.

        Поля дней в UI опциональны, поэтому None не является ошибкой.
        """
        return to_non_negative_decimal(v, default=ZERO)

    @field_validator("total_mandays", "allocated_budget", mode="before")
    @classmethod
    def coerce_cached(cls, v: object) -> Decimal | None:
        if v is None:
            return None
        return to_decimal(v)
