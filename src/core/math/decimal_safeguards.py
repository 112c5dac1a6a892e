"""
Decimal Safeguards — Safe Money Primitives

Модуль обеспечивает точность всех денежных операций:
- Единый decimal-контекст (28 значащих цифр, ROUND_HALF_UP)
- Безопасное приведение входных значений к Decimal (float → через str)
- Защита от NaN/Infinity
- Безопасное деление с fallback вместо ZeroDivisionError
- Квантование денежных сумм и процентов

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Денежная арифметика никогда не выполняется в binary float
2. NaN/Infinity никогда не пропагируют (ValueError на входе)
3. Деление на ноль никогда не происходит (возвращается fallback)
4. Контекст локален для потока (decimal.localcontext), глобальный не меняется
"""

from contextlib import contextmanager
from decimal import ROUND_HALF_UP, Context, Decimal, InvalidOperation, localcontext
from typing import Final, Iterator

# =============================================================================
# ПАРАМЕТРЫ DECIMAL-КОНТЕКСТА
# =============================================================================

# Количество значащих цифр для финансовых расчётов
DECIMAL_PRECISION: Final[int] = 28

# Режим округления (half up, как в исходных расчётах бюджета)
DECIMAL_ROUNDING: Final[str] = ROUND_HALF_UP

ZERO: Final[Decimal] = Decimal("0")
HUNDRED: Final[Decimal] = Decimal("100")


# =============================================================================
# КОНТЕКСТ
# =============================================================================


def money_context(
    precision: int = DECIMAL_PRECISION,
    rounding: str = DECIMAL_ROUNDING,
) -> Context:
    """
    Создание decimal-контекста для денежных расчётов.

    Args:
        precision: Количество значащих цифр (default: 28)
        rounding: Режим округления (default: ROUND_HALF_UP)

    Returns:
        Новый decimal.Context

    Raises:
        ValueError: Если precision < 1
    """
    if precision < 1:
        raise ValueError(f"precision must be positive, got {precision}")
    return Context(prec=precision, rounding=rounding)


@contextmanager
def money_arithmetic(
    precision: int = DECIMAL_PRECISION,
    rounding: str = DECIMAL_ROUNDING,
) -> Iterator[Context]:
    """
    Контекстный менеджер для блока денежной арифметики.

    Использует decimal.localcontext, поэтому безопасен при одновременных
    вызовах из разных потоков.
    """
    with localcontext(money_context(precision, rounding)) as ctx:
        yield ctx


# =============================================================================
# ПРИВЕДЕНИЕ К DECIMAL
# =============================================================================


def is_valid_decimal(value: Decimal) -> bool:
    """
    Проверка, является ли Decimal конечным числом (не NaN, не Infinity).
    """
    return value.is_finite()


def to_decimal(value: object, default: Decimal | None = None) -> Decimal:
    """
    Приведение значения к Decimal без потери точности.

    Правила:
    - None → default (если default не задан → ValueError)
    - bool → ValueError (True/False не являются суммами)
    - int, Decimal → как есть
    - float → через str(value), чтобы 0.1 стало Decimal("0.1")
    - str → Decimal(str) после strip()

    Args:
        value: Исходное значение
        default: Значение для None (optional)

    Returns:
        Конечный Decimal

    Raises:
        ValueError: Если значение не приводится к Decimal или не конечно

    Examples:
        >>> to_decimal(0.1)
        Decimal('0.1')
        >>> to_decimal(None, default=Decimal("0"))
        Decimal('0')
        >>> to_decimal("15000.50")
        Decimal('15000.50')
    """
    if value is None:
        if default is None:
            raise ValueError("Decimal value is required, got None")
        return default

    if isinstance(value, bool):
        raise ValueError(f"Boolean is not a numeric amount: {value!r}")

    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, float):
        result = Decimal(str(value))
    elif isinstance(value, str):
        try:
            result = Decimal(value.strip())
        except InvalidOperation:
            raise ValueError(f"Cannot convert {value!r} to Decimal") from None
    else:
        raise ValueError(f"Unsupported numeric type {type(value).__name__}: {value!r}")

    if not is_valid_decimal(result):
        raise ValueError(f"Decimal value must be finite, got {value!r}")

    return result


def to_non_negative_decimal(value: object, default: Decimal | None = None) -> Decimal:
    """
    Приведение к Decimal с проверкой value >= 0.

    Raises:
        ValueError: Если значение отрицательное
    """
    result = to_decimal(value, default=default)
    if result < ZERO:
        raise ValueError(f"Value cannot be negative: {result}")
    return result


# =============================================================================
# БЕЗОПАСНОЕ ДЕЛЕНИЕ
# =============================================================================


def safe_divide(
    numerator: Decimal,
    denominator: Decimal,
    fallback: Decimal = ZERO,
) -> Decimal:
    """
    Безопасное деление Decimal.

    Если знаменатель равен нулю, возвращается fallback. Деление выполняется
    в текущем decimal-контексте.

    Args:
        numerator: Числитель
        denominator: Знаменатель
        fallback: Значение при нулевом знаменателе (default: 0)

    Returns:
        numerator / denominator или fallback

    Examples:
        >>> safe_divide(Decimal("10"), Decimal("4"))
        Decimal('2.5')
        >>> safe_divide(Decimal("10"), Decimal("0"))
        Decimal('0')
    """
    if denominator == ZERO:
        return fallback
    return numerator / denominator


# =============================================================================
# КВАНТОВАНИЕ И ОГРАНИЧЕНИЯ
# =============================================================================


def quantize_money(value: Decimal, places: int = 2) -> Decimal:
    """
    Округление суммы до заданного количества знаков (ROUND_HALF_UP).

    Результат не зависит от точности текущего контекста: суммы любого
    порядка квантуются без InvalidOperation.

    Args:
        value: Сумма
        places: Количество знаков после запятой (default: 2)

    Returns:
        Округлённая сумма

    Raises:
        ValueError: Если places < 0

    Examples:
        >>> quantize_money(Decimal("12.345"))
        Decimal('12.35')
        >>> quantize_money(Decimal("1.5"), places=0)
        Decimal('2')
    """
    if places < 0:
        raise ValueError(f"places cannot be negative, got {places}")
    quantum = Decimal(1).scaleb(-places)
    # Точность должна вместить все цифры результата (+1 на перенос при округлении)
    digits = max(value.adjusted() + 1, 1) + places + 1
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, digits)
        return value.quantize(quantum, rounding=ROUND_HALF_UP)


def clamp_non_negative(value: int) -> int:
    """max(0, value)"""
    return max(0, value)
