"""
ProjectConfig — Финансовая конфигурация проекта

Immutable Pydantic модель: подмножество полей проекта, влияющих на расчёт
бюджета (налог, предлагаемая цена, рабочая неделя).

tax_percentage намеренно не ограничен диапазоном 0-100 на уровне модели:
диапазон проверяется контрактом project_config (src.core.contracts) на
входе API, а движок расчётов применяет значение как есть.
"""

from datetime import date
from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, Field, field_validator

from src.core.math.decimal_safeguards import HUNDRED, ZERO, to_decimal, to_non_negative_decimal


# =============================================================================
# ENUMS
# =============================================================================


class WorkingWeek(str, Enum):
    """Тип рабочей недели проекта"""

    MON_TO_FRI = "MON_TO_FRI"
    MON_TO_SAT = "MON_TO_SAT"
    CUSTOM = "CUSTOM"


class ProjectStatus(str, Enum):
    """Статус проекта"""

    ACTIVE = "ACTIVE"
    DRAFT = "DRAFT"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


# =============================================================================
# PROJECT CONFIG MODEL
# =============================================================================


class ProjectConfig(BaseModel):
    """
    Конфигурация проекта для расчёта бюджета.

    Налог применяется только при tax_enabled=True; иначе эффективная ставка
    равна 0 независимо от сохранённого tax_percentage.
    """

    id: int | str | None = Field(default=None)
    name: str | None = Field(default=None, max_length=255)
    client: str | None = Field(default=None, max_length=255)

    # Валюта
    currency_code: str = Field(default="THB", min_length=3, max_length=3)
    hours_per_day: int = Field(default=7, ge=1, le=24)

    # Налог и цена
    tax_enabled: bool = Field(default=False, description="Применять ли налог")
    tax_percentage: Decimal = Field(default=ZERO, description="Ставка налога в процентах")
    proposed_price: Decimal | None = Field(default=None, description="Предлагаемая цена (None → 0)")

    # Сроки
    execution_days: int = Field(default=0, ge=0)
    buffer_days: int = Field(default=0, ge=0)
    guarantee_days: int = Field(default=0, ge=0)
    start_date: date | None = Field(default=None)
    end_date: date | None = Field(default=None)

    # Рабочая неделя
    working_week: WorkingWeek = Field(default=WorkingWeek.MON_TO_FRI)
    custom_working_days: list[str] | None = Field(default=None)

    status: ProjectStatus = Field(default=ProjectStatus.DRAFT)

    model_config = {"frozen": True}  # Immutable

    @field_validator("tax_percentage", mode="before")
    @classmethod
    def coerce_tax_percentage(cls, v: object) -> Decimal:
        return to_decimal(v, default=ZERO)

    @field_validator("proposed_price", mode="before")
    @classmethod
    def coerce_proposed_price(cls, v: object) -> Decimal | None:
        if v is None:
            return None
        return to_non_negative_decimal(v)

    @field_validator("currency_code")
    @classmethod
    def normalize_currency_code(cls, v: str) -> str:
        return v.upper()

    @property
    def effective_tax_rate(self) -> Decimal:
        """
        Эффективная ставка налога (доля, не проценты).

        Returns:
            tax_percentage / 100 если tax_enabled, иначе ровно 0
        """
        if not self.tax_enabled:
            return ZERO
        return self.tax_percentage / HUNDRED

    @property
    def effective_proposed_price(self) -> Decimal:
        """Предлагаемая цена, None трактуется как 0."""
        if self.proposed_price is None:
            return ZERO
        return self.proposed_price
