"""
Core math modules

Денежные примитивы на Decimal с гарантией точности.
"""

from src.core.math.decimal_safeguards import (
    # Context constants
    DECIMAL_PRECISION,
    DECIMAL_ROUNDING,
    HUNDRED,
    ZERO,
    # Context
    money_arithmetic,
    money_context,
    # Coercion
    is_valid_decimal,
    to_decimal,
    to_non_negative_decimal,
    # Safe division
    safe_divide,
    # Utilities
    clamp_non_negative,
    quantize_money,
)

__all__ = [
    # Decimal Safeguards — Context constants
    "DECIMAL_PRECISION",
    "DECIMAL_ROUNDING",
    "HUNDRED",
    "ZERO",
    # Decimal Safeguards — Context
    "money_arithmetic",
    "money_context",
    # Decimal Safeguards — Coercion
    "is_valid_decimal",
    "to_decimal",
    "to_non_negative_decimal",
    # Decimal Safeguards — Safe division
    "safe_divide",
    # Decimal Safeguards — Utilities
    "clamp_non_negative",
    "quantize_money",
]
