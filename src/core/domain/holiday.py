"""
Holiday — Модель праздничного дня

Праздник бывает глобальным (project_id is None, например государственные
праздники Таиланда) или привязанным к конкретному проекту.
Используется только календарной арифметикой как множество исключаемых дат.
"""

import datetime as dt
from enum import Enum
from typing import Iterable

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# ENUMS
# =============================================================================


class HolidayScope(str, Enum):
    """Область действия праздника"""

    GLOBAL = "global"
    PROJECT = "project"


# =============================================================================
# HOLIDAY MODEL
# =============================================================================


class Holiday(BaseModel):
    """Праздничный день (только календарная дата, без времени)."""

    id: int | str | None = Field(default=None)
    project_id: int | str | None = Field(default=None, description="None → глобальный праздник")
    date: dt.date = Field(..., description="Календарная дата праздника")
    name: str = Field(..., min_length=1, max_length=255)
    is_custom: bool = Field(default=False, description="Добавлен вручную (company holiday)")

    model_config = {"frozen": True}  # Immutable

    @field_validator("date", mode="before")
    @classmethod
    def strip_time(cls, v: object) -> object:
        """datetime нормализуется до даты: время суток не учитывается."""
        if isinstance(v, dt.datetime):
            return v.date()
        return v

    @property
    def scope(self) -> HolidayScope:
        if self.project_id is None:
            return HolidayScope.GLOBAL
        return HolidayScope.PROJECT

    def applies_to(self, project_id: int | str | None) -> bool:
        """
        Применим ли праздник к проекту.

        Глобальные праздники применимы ко всем проектам, проектные — только
        к своему.
        """
        return self.project_id is None or self.project_id == project_id


def holidays_for_project(
    holidays: Iterable[Holiday],
    project_id: int | str | None,
) -> list[Holiday]:
    """
    Отбор праздников, действующих для проекта (глобальные + проектные).

    Args:
        holidays: Все известные праздники
        project_id: Идентификатор проекта (None → только глобальные)

    Returns:
        Новый список, отсортированный по дате
    """
    return sorted(
        (h for h in holidays if h.applies_to(project_id)),
        key=lambda h: h.date,
    )
