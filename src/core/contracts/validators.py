"""
JSON Schema Contract Validators

Модуль для валидации JSON данных на границе с API-слоем согласно
формальным JSON Schema контрактам (библиотека jsonschema).

Схемы (src/core/contracts/schema/):
- assignment.json       — строка назначения
- project_config.json   — финансовая конфигурация проекта (tax 0-100)
- holiday.json          — праздник
- project_summary.json  — итоги проекта (Decimal сериализован в строку)
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы лежат в каталоге schema/ рядом с этим модулем и устанавливаются
    вместе с пакетом.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'assignment')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если схема не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Meta-validation самой схемы
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            jsonschema.ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """
        Итератор по всем ошибкам валидации.

        Yields:
            ValidationError объекты для каждой найденной ошибки
        """
        return self.validator.iter_errors(data)

    def error_messages(self, data: Dict[str, Any]) -> list[str]:
        """
        Все ошибки валидации в виде "path: message" для ответа API.

        Ошибки отсортированы по пути поля.
        """
        messages = []
        for error in sorted(self.iter_errors(data), key=lambda e: list(map(str, e.absolute_path))):
            path = ".".join(str(p) for p in error.absolute_path) or "<root>"
            messages.append(f"{path}: {error.message}")
        return messages


class AssignmentValidator(ContractValidator):
    """Валидатор для assignment контракта."""

    def __init__(self):
        super().__init__("assignment")


class ProjectConfigValidator(ContractValidator):
    """Валидатор для project_config контракта."""

    def __init__(self):
        super().__init__("project_config")


class HolidayValidator(ContractValidator):
    """Валидатор для holiday контракта."""

    def __init__(self):
        super().__init__("holiday")


class ProjectSummaryValidator(ContractValidator):
    """Валидатор для project_summary контракта."""

    def __init__(self):
        super().__init__("project_summary")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_assignment(data: Dict[str, Any]) -> None:
    """
    Валидация строки назначения.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    AssignmentValidator().validate(data)


def validate_project_config(data: Dict[str, Any]) -> None:
    """
    Валидация конфигурации проекта.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    ProjectConfigValidator().validate(data)


def validate_holiday(data: Dict[str, Any]) -> None:
    """
    Валидация праздника.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    HolidayValidator().validate(data)


def validate_project_summary(data: Dict[str, Any]) -> None:
    """
    Валидация сериализованных итогов проекта (ProjectSummary.to_dict()).

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    ProjectSummaryValidator().validate(data)
