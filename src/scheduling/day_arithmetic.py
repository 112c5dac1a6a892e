"""
Day Arithmetic — Буферные дни и дни исполнения

Итоговый срок проекта делится на гарантированные дни исполнения и буфер:
    buffer_days    = max(0, final_days − execution_days)
    execution_days = max(0, final_days − buffer_days)

Результат никогда не бывает отрицательным: если исполнение уже занимает
весь срок (или больше), буфер равен 0, и наоборот.
"""

from src.core.math.decimal_safeguards import clamp_non_negative


def calculate_buffer_days(final_days: int, execution_days: int) -> int:
    """
    Сколько буферных дней остаётся после гарантированного исполнения.

    Examples:
        >>> calculate_buffer_days(50, 45)
        5
        >>> calculate_buffer_days(30, 35)
        0
    """
    return clamp_non_negative(final_days - execution_days)


def calculate_execution_days(final_days: int, buffer_days: int) -> int:
    """
    Сколько дней исполнения остаётся за вычетом буфера.

    Examples:
        >>> calculate_execution_days(50, 5)
        45
        >>> calculate_execution_days(30, 35)
        0
    """
    return clamp_non_negative(final_days - buffer_days)
