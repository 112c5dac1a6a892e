"""
Тесты для модуля Decimal Safeguards

Проверяет:
1. Decimal-контекст (точность, округление, локальность)
2. Приведение к Decimal (float через str, None, bool, NaN/Infinity)
3. Безопасное деление
4. Квантование денежных сумм
5. Граничные случаи
"""

import threading
from decimal import ROUND_HALF_EVEN, ROUND_HALF_UP, Decimal, getcontext

import pytest

from src.core.math.decimal_safeguards import (
    DECIMAL_PRECISION,
    DECIMAL_ROUNDING,
    ZERO,
    clamp_non_negative,
    is_valid_decimal,
    money_arithmetic,
    money_context,
    quantize_money,
    safe_divide,
    to_decimal,
    to_non_negative_decimal,
)


# =============================================================================
# ТЕСТЫ КОНТЕКСТА
# =============================================================================


class TestMoneyContext:
    """Тесты для money_context / money_arithmetic"""

    def test_defaults(self) -> None:
        """28 значащих цифр, ROUND_HALF_UP"""
        ctx = money_context()
        assert ctx.prec == DECIMAL_PRECISION == 28
        assert ctx.rounding == DECIMAL_ROUNDING == ROUND_HALF_UP

    def test_invalid_precision_rejected(self) -> None:
        """precision < 1 → ValueError"""
        with pytest.raises(ValueError, match="precision must be positive"):
            money_context(precision=0)

    def test_precision_applied_inside_block(self) -> None:
        """Деление внутри блока использует 28 знаков"""
        with money_arithmetic():
            result = Decimal(1) / Decimal(3)
        assert len(result.as_tuple().digits) == 28

    def test_custom_rounding_inside_block(self) -> None:
        """Контекст с другим округлением применяется только внутри блока"""
        with money_arithmetic(precision=2, rounding=ROUND_HALF_EVEN):
            assert Decimal("2.5") * Decimal(1) == Decimal("2.5")
            assert +Decimal("0.125") == Decimal("0.12")
        with money_arithmetic(precision=2, rounding=ROUND_HALF_UP):
            assert +Decimal("0.125") == Decimal("0.13")

    def test_global_context_untouched(self) -> None:
        """Глобальный контекст не меняется после выхода из блока"""
        before = (getcontext().prec, getcontext().rounding)
        with money_arithmetic(precision=5):
            pass
        assert (getcontext().prec, getcontext().rounding) == before

    def test_context_is_thread_local(self) -> None:
        """Контекст одного потока не влияет на другой"""
        results: dict[str, int] = {}
        barrier = threading.Barrier(2)

        def worker(name: str, precision: int) -> None:
            with money_arithmetic(precision=precision):
                barrier.wait()
                results[name] = len((Decimal(1) / Decimal(7)).as_tuple().digits)

        threads = [
            threading.Thread(target=worker, args=("low", 5)),
            threading.Thread(target=worker, args=("high", 28)),
        ]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert results == {"low": 5, "high": 28}


# =============================================================================
# ТЕСТЫ ПРИВЕДЕНИЯ К DECIMAL
# =============================================================================


class TestToDecimal:
    """Тесты для to_decimal"""

    def test_float_converted_via_string(self) -> None:
        """0.1 становится ровно Decimal('0.1'), без binary артефактов"""
        assert to_decimal(0.1) == Decimal("0.1")
        assert to_decimal(0.1) + to_decimal(0.2) == Decimal("0.3")

    def test_int_and_decimal(self) -> None:
        assert to_decimal(15000) == Decimal("15000")
        assert to_decimal(Decimal("1.50")) == Decimal("1.50")

    def test_string_with_whitespace(self) -> None:
        assert to_decimal("  20000.25 ") == Decimal("20000.25")

    def test_none_uses_default(self) -> None:
        """None → default"""
        assert to_decimal(None, default=ZERO) == ZERO

    def test_none_without_default_rejected(self) -> None:
        """None без default → ValueError"""
        with pytest.raises(ValueError, match="required"):
            to_decimal(None)

    def test_bool_rejected(self) -> None:
        """True/False не являются суммами"""
        with pytest.raises(ValueError, match="Boolean"):
            to_decimal(True)

    @pytest.mark.parametrize("value", ["NaN", "Infinity", "-Infinity", float("nan"), float("inf")])
    def test_non_finite_rejected(self, value) -> None:
        """NaN/Infinity никогда не попадают в расчёты"""
        with pytest.raises(ValueError, match="finite"):
            to_decimal(value)

    def test_garbage_string_rejected(self) -> None:
        with pytest.raises(ValueError, match="Cannot convert"):
            to_decimal("fifteen thousand")

    def test_unsupported_type_rejected(self) -> None:
        with pytest.raises(ValueError, match="Unsupported numeric type"):
            to_decimal([1, 2])

    def test_non_negative(self) -> None:
        """to_non_negative_decimal отклоняет отрицательные значения"""
        assert to_non_negative_decimal(0) == ZERO
        assert to_non_negative_decimal(None, default=ZERO) == ZERO
        with pytest.raises(ValueError, match="cannot be negative"):
            to_non_negative_decimal(-0.01)

    def test_is_valid_decimal(self) -> None:
        assert is_valid_decimal(Decimal("1"))
        assert not is_valid_decimal(Decimal("NaN"))
        assert not is_valid_decimal(Decimal("-Infinity"))


# =============================================================================
# ТЕСТЫ БЕЗОПАСНОГО ДЕЛЕНИЯ
# =============================================================================


class TestSafeDivide:
    """Тесты для safe_divide"""

    def test_normal_division(self) -> None:
        assert safe_divide(Decimal("10"), Decimal("4")) == Decimal("2.5")

    def test_zero_denominator_returns_fallback(self) -> None:
        """Деление на ноль → fallback, без исключения"""
        assert safe_divide(Decimal("10"), ZERO) == ZERO
        assert safe_divide(Decimal("10"), Decimal("0.00"), fallback=Decimal("-1")) == Decimal("-1")

    def test_negative_values(self) -> None:
        assert safe_divide(Decimal("-9"), Decimal("3")) == Decimal("-3")


# =============================================================================
# ТЕСТЫ КВАНТОВАНИЯ
# =============================================================================


class TestQuantizeMoney:
    """Тесты для quantize_money"""

    def test_round_half_up(self) -> None:
        """Половина округляется вверх (не банковское округление)"""
        assert quantize_money(Decimal("12.345")) == Decimal("12.35")
        assert quantize_money(Decimal("12.125")) == Decimal("12.13")
        assert quantize_money(Decimal("-12.125")) == Decimal("-12.13")

    def test_places(self) -> None:
        assert quantize_money(Decimal("1.5"), places=0) == Decimal("2")
        assert str(quantize_money(Decimal("1"), places=4)) == "1.0000"

    @pytest.mark.parametrize(
        "value, expected",
        [
            (Decimal("1e27"), Decimal("1000000000000000000000000000.00")),
            (Decimal("99999999999999999999999999.995"), Decimal("100000000000000000000000000.00")),
            (Decimal("-1E+40"), Decimal("-10000000000000000000000000000000000000000.00")),
        ],
    )
    def test_large_amounts_exceed_context_precision(self, value, expected) -> None:
        """Суммы длиннее 28 цифр квантуются без InvalidOperation"""
        result = quantize_money(value)

        assert result == expected
        assert result.as_tuple().exponent == -2

    def test_large_amount_inside_low_precision_block(self) -> None:
        with money_arithmetic(precision=3):
            assert quantize_money(Decimal("12345.678")) == Decimal("12345.68")
            assert getcontext().prec == 3

    def test_negative_places_rejected(self) -> None:
        with pytest.raises(ValueError, match="places cannot be negative"):
            quantize_money(Decimal("1"), places=-1)


class TestClampNonNegative:
    """Тесты для clamp_non_negative"""

    def test_values(self) -> None:
        assert clamp_non_negative(5) == 5
        assert clamp_non_negative(0) == 0
        assert clamp_non_negative(-5) == 0
