"""
Contract Validation Module

Модуль для валидации JSON контрактов на границе с API-слоем.
"""

from .validators import (
    AssignmentValidator,
    ContractValidator,
    HolidayValidator,
    ProjectConfigValidator,
    ProjectSummaryValidator,
    SchemaLoader,
    validate_assignment,
    validate_holiday,
    validate_project_config,
    validate_project_summary,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "AssignmentValidator",
    "ProjectConfigValidator",
    "HolidayValidator",
    "ProjectSummaryValidator",
    # Functions
    "validate_assignment",
    "validate_project_config",
    "validate_holiday",
    "validate_project_summary",
]
