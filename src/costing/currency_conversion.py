"""
Currency Conversion — Пересчёт сумм через базовую валюту

Все курсы хранятся относительно базовой валюты (THB). Пересчёт A → B идёт
через базовую валюту:
    amount_base = amount × rate_A        (если A не базовая)
    amount_B    = amount_base / rate_B   (если B не базовая)

Таблицу валют с актуальными курсами передаёт вызывающая сторона (БД):
модуль не выполняет I/O. FALLBACK_CURRENCIES содержит только символы и
для пересчёта не используется.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Нулевой курс участвующей небазовой валюты → InvalidExchangeRateError
   (никогда не возвращается 0 вместо суммы)
"""

import logging
from decimal import Decimal
from typing import Final, Iterable

from src.core.domain.currency import Currency, find_base_currency, find_currency
from src.core.math.decimal_safeguards import (
    ZERO,
    money_arithmetic,
    quantize_money,
    to_decimal,
)

logger = logging.getLogger(__name__)

RATE_DECIMAL_PLACES: Final[int] = 8


# =============================================================================
# EXCEPTIONS
# =============================================================================


class CurrencyConversionError(ValueError):
    """Базовая ошибка пересчёта валют."""
    pass


class CurrencyNotFoundError(CurrencyConversionError):
    pass


class CurrencyInactiveError(CurrencyConversionError):
    pass


class BaseCurrencyNotFoundError(CurrencyConversionError):
    pass


class InvalidExchangeRateError(CurrencyConversionError):
    """Курс валюты не задан (равен 0)."""
    pass


# =============================================================================
# HELPERS
# =============================================================================


def _resolve_pair(
    from_code: str,
    to_code: str,
    currencies: Iterable[Currency],
) -> tuple[Currency, Currency, Currency]:
    """
    Поиск пары валют и базовой валюты с проверкой активности и курсов.

    Returns:
        (from_currency, to_currency, base_currency)
    """
    table = tuple(currencies)

    from_currency = find_currency(from_code, table)
    to_currency = find_currency(to_code, table)
    if from_currency is None or to_currency is None:
        missing = from_code if from_currency is None else to_code
        raise CurrencyNotFoundError(f"Currency not found: {missing}")

    if not from_currency.is_active or not to_currency.is_active:
        raise CurrencyInactiveError(f"Currency is not active: {from_code} -> {to_code}")

    base_currency = find_base_currency(table)
    if base_currency is None:
        raise BaseCurrencyNotFoundError("Base currency not found")

    for currency in (from_currency, to_currency):
        if currency.code != base_currency.code and currency.exchange_rate == ZERO:
            raise InvalidExchangeRateError(f"Exchange rate is not set for {currency.code}")

    return from_currency, to_currency, base_currency


# =============================================================================
# CONVERSION
# =============================================================================


def get_exchange_rate(
    from_code: str,
    to_code: str,
    currencies: Iterable[Currency],
) -> Decimal:
    """
    Курс пересчёта from_code → to_code, округлённый до 8 знаков.

    Args:
        from_code: Код исходной валюты
        to_code: Код целевой валюты
        currencies: Таблица валют с курсами к базовой валюте

    Returns:
        Курс (1 для одинаковых кодов)

    Raises:
        CurrencyNotFoundError, CurrencyInactiveError, BaseCurrencyNotFoundError,
        InvalidExchangeRateError
    """
    if from_code.upper() == to_code.upper():
        return Decimal(1)

    from_currency, to_currency, base_currency = _resolve_pair(from_code, to_code, currencies)

    with money_arithmetic():
        rate = Decimal(1)
        if from_currency.code != base_currency.code:
            rate = from_currency.exchange_rate
        if to_currency.code != base_currency.code:
            rate = rate / to_currency.exchange_rate

    return quantize_money(rate, places=RATE_DECIMAL_PLACES)


def convert_amount(
    amount: object,
    from_code: str,
    to_code: str,
    currencies: Iterable[Currency],
) -> Decimal:
    """
    Пересчёт суммы между валютами.

    Результат округляется до decimal_places целевой валюты.

    Raises:
        ValueError: Если сумма отрицательная или не число
        CurrencyNotFoundError, CurrencyInactiveError, BaseCurrencyNotFoundError,
        InvalidExchangeRateError
    """
    value = to_decimal(amount)
    if value < ZERO:
        raise ValueError(f"Amount must be a positive number, got {value}")

    if from_code.upper() == to_code.upper():
        return value

    from_currency, to_currency, base_currency = _resolve_pair(from_code, to_code, currencies)

    with money_arithmetic():
        converted = value
        if from_currency.code != base_currency.code:
            converted = converted * from_currency.exchange_rate
        if to_currency.code != base_currency.code:
            converted = converted / to_currency.exchange_rate

    result = quantize_money(converted, places=to_currency.decimal_places)
    logger.debug("Converted %s %s -> %s %s", value, from_currency.code, result, to_currency.code)
    return result
