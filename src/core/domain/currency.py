"""
Currency — Модель валюты и резервная таблица валют

Курс exchange_rate выражен относительно базовой валюты (THB):
1 единица валюты = exchange_rate единиц базовой валюты.
"""

import logging
from decimal import Decimal
from typing import Final, Iterable

from pydantic import BaseModel, Field, field_validator

from src.core.math.decimal_safeguards import to_non_negative_decimal

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

BASE_CURRENCY_CODE: Final[str] = "THB"

DEFAULT_CURRENCY_SYMBOL: Final[str] = "฿"

# Символы валют для отображения сумм
CURRENCY_SYMBOLS: Final[dict[str, str]] = {
    "THB": "฿",
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
    "SGD": "S$",
    "AUD": "A$",
    "CAD": "C$",
    "CHF": "CHF",
    "CNY": "¥",
    "KRW": "₩",
    "INR": "₹",
    "MYR": "RM",
    "IDR": "Rp",
    "PHP": "₱",
    "VND": "₫",
}


# =============================================================================
# CURRENCY MODEL
# =============================================================================


class Currency(BaseModel):
    """Валюта с курсом относительно базовой валюты."""

    id: int | None = Field(default=None)
    code: str = Field(..., pattern=r"^[A-Z]{3}$", description="ISO 4217 код")
    name: str = Field(..., min_length=1, max_length=100)
    symbol: str = Field(..., min_length=1, max_length=10)
    decimal_places: int = Field(default=2, ge=0, le=4)
    is_base_currency: bool = Field(default=False)
    is_active: bool = Field(default=True)
    exchange_rate: Decimal = Field(default=Decimal(1), description="Курс к базовой валюте")

    model_config = {"frozen": True}  # Immutable

    @field_validator("exchange_rate", mode="before")
    @classmethod
    def coerce_exchange_rate(cls, v: object) -> Decimal:
        return to_non_negative_decimal(v)


# Справочник кодов и символов, когда таблица валют из БД недоступна.
# Курсы не заданы (1): для пересчёта не используется.
FALLBACK_CURRENCIES: Final[tuple[Currency, ...]] = (
    Currency(code="THB", symbol="฿", name="Thai Baht", is_base_currency=True),
    Currency(code="USD", symbol="$", name="US Dollar"),
    Currency(code="EUR", symbol="€", name="Euro"),
    Currency(code="GBP", symbol="£", name="British Pound"),
    Currency(code="JPY", symbol="¥", name="Japanese Yen"),
    Currency(code="SGD", symbol="S$", name="Singapore Dollar"),
    Currency(code="AUD", symbol="A$", name="Australian Dollar"),
    Currency(code="CAD", symbol="C$", name="Canadian Dollar"),
    Currency(code="CHF", symbol="Fr", name="Swiss Franc"),
    Currency(code="CNY", symbol="¥", name="Chinese Yuan"),
    Currency(code="INR", symbol="₹", name="Indian Rupee"),
    Currency(code="KRW", symbol="₩", name="South Korean Won"),
)


# =============================================================================
# LOOKUP
# =============================================================================


def get_currency_symbol(code: str) -> str:
    """
    Символ валюты по коду.

    Неизвестный код возвращается как есть (например, "XYZ" → "XYZ").
    """
    symbol = CURRENCY_SYMBOLS.get(code.upper())
    if symbol is None:
        logger.warning("Unknown currency code %r, using code as symbol", code)
        return code
    return symbol


def find_currency(code: str, currencies: Iterable[Currency] = FALLBACK_CURRENCIES) -> Currency | None:
    """Поиск валюты по коду (регистр не важен)."""
    code_upper = code.upper()
    for currency in currencies:
        if currency.code == code_upper:
            return currency
    return None


def find_base_currency(currencies: Iterable[Currency] = FALLBACK_CURRENCIES) -> Currency | None:
    """Базовая валюта таблицы (первая с is_base_currency=True)."""
    for currency in currencies:
        if currency.is_base_currency:
            return currency
    return None
