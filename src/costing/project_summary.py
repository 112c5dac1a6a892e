"""
Project Summary — Итоги бюджета проекта

Агрегирует стоимость всех назначений проекта, применяет налог и считает
ROI и маржу относительно предлагаемой цены.

ФОРМУЛЫ:
    subtotal = Σ row_cost
    tax      = subtotal × (tax_percentage / 100, если tax_enabled, иначе 0)
    cost     = subtotal + tax
    roi      = (proposed_price − cost) / cost × 100
    margin   = (proposed_price − cost) / proposed_price × 100

ROI считается относительно себестоимости, маржа относительно цены:
знаменатели разные.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. roi и margin считаются только при cost > 0 и proposed_price > 0,
   иначе оба ровно 0 (не NaN, не Infinity)
2. tax == 0 при tax_enabled=False для любого tax_percentage
3. Отрицательный tax_percentage не ограничивается (валидируется на входе API)
4. Каждый вызов создаёт новый ProjectSummary
"""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any

from src.core.domain.project import ProjectConfig
from src.core.math.decimal_safeguards import HUNDRED, ZERO, money_arithmetic, safe_divide
from src.costing.assignment_cost import (
    DEFAULT_COSTING_CONFIG,
    AssignmentCost,
    AssignmentInput,
    CostingConfig,
    calculate_assignment_cost,
)

logger = logging.getLogger(__name__)


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class ProjectSummary:
    """Итоги бюджета проекта."""

    subtotal: Decimal
    tax: Decimal
    cost: Decimal
    proposed_price: Decimal
    roi: Decimal
    margin: Decimal

    # Детализация по строкам
    assignment_costs: tuple[AssignmentCost, ...] = field(default=())

    @property
    def has_financial_metrics(self) -> bool:
        """
        Посчитаны ли roi и margin.

        False означает "не определено" (нулевая себестоимость или цена),
        а не "0 %".
        """
        return self.cost > ZERO and self.proposed_price > ZERO

    def to_dict(self) -> dict[str, str]:
        """Сериализация итогов (Decimal → str) для ответа API."""
        return {
            "subtotal": str(self.subtotal),
            "tax": str(self.tax),
            "cost": str(self.cost),
            "proposed_price": str(self.proposed_price),
            "roi": str(self.roi),
            "margin": str(self.margin),
        }


# =============================================================================
# CALCULATOR
# =============================================================================


ProjectInput = ProjectConfig | Mapping[str, Any]


class ProjectSummaryCalculator:
    """
    Калькулятор итогов проекта.

    Stateless: конфигурация задаёт только decimal-контекст, поэтому один
    экземпляр можно использовать из нескольких потоков.
    """

    def __init__(self, config: CostingConfig | None = None):
        """
        Args:
            config: параметры decimal-контекста (опционально, используется default)
        """
        self.config = config or DEFAULT_COSTING_CONFIG

    def calculate(
        self,
        assignments: Iterable[AssignmentInput],
        project: ProjectInput,
    ) -> ProjectSummary:
        """
        Расчёт итогов проекта.

        Args:
            assignments: назначения проекта (модели или dict)
            project: финансовая конфигурация проекта (модель или dict)

        Returns:
            ProjectSummary

        Raises:
            MissingDailyRateError: если у какого-либо назначения нет ставки
        """
        project_config = self._coerce_project(project)
        costs = tuple(calculate_assignment_cost(a, self.config) for a in assignments)

        with money_arithmetic(self.config.precision, self.config.rounding):
            subtotal = sum((c.row_cost for c in costs), ZERO)
            tax = subtotal * project_config.effective_tax_rate
            cost = subtotal + tax
            proposed_price = project_config.effective_proposed_price

            roi = ZERO
            margin = ZERO
            if cost > ZERO and proposed_price > ZERO:
                profit = proposed_price - cost
                roi = safe_divide(profit, cost) * HUNDRED
                margin = safe_divide(profit, proposed_price) * HUNDRED

        logger.debug(
            "Project %r summary: rows=%d subtotal=%s tax=%s cost=%s roi=%s margin=%s",
            project_config.id,
            len(costs),
            subtotal,
            tax,
            cost,
            roi,
            margin,
        )

        return ProjectSummary(
            subtotal=subtotal,
            tax=tax,
            cost=cost,
            proposed_price=proposed_price,
            roi=roi,
            margin=margin,
            assignment_costs=costs,
        )

    def _coerce_project(self, project: ProjectInput) -> ProjectConfig:
        if isinstance(project, ProjectConfig):
            return project
        return ProjectConfig.model_validate(dict(project))


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def calculate_project_summary(
    assignments: Iterable[AssignmentInput],
    project: ProjectInput,
) -> ProjectSummary:
    """
    Расчёт итогов проекта с конфигурацией по умолчанию.

    Examples:
        >>> summary = calculate_project_summary(
        ...     [{"daily_rate": 15000, "days_allocated": 10}],
        ...     {"tax_enabled": False, "proposed_price": 300000},
        ... )
        >>> summary.roi
        Decimal('100')
    """
    return ProjectSummaryCalculator().calculate(assignments, project)
