"""Тесты для BigFloatChain.

Coverage:
- Арифметика в decimal-контексте из ChainConfig
- Деление на точный ноль
- pow через native double (ограничения и переполнение)
- Отсутствие mod
- Группы begin()/end()
"""

from decimal import Decimal

import pytest

from bignums.chain import BigFloatChain, native_power
from bignums.core.config import ChainConfig
from bignums.core.errors import ChainErrorKind, NonIntegerExponentError
from bignums.core.types import ChainDomain


def _kind(chain: BigFloatChain):
    _, error = chain.value()
    return None if error is None else error.kind


class TestBigFloatChainArithmetic:
    """Базовые операции."""

    def test_basic_operations(self):
        val, err = BigFloatChain(10.5).add(20.5).subtract(10).multiply(2).divide(2).value()
        assert err is None
        assert val == Decimal(21)

    def test_add(self):
        assert BigFloatChain(10.5).add(20.5).unwrap() == Decimal(31)

    def test_subtract(self):
        assert BigFloatChain(30.5).subtract(20.5).unwrap() == Decimal(10)

    def test_multiply(self):
        assert BigFloatChain(5.5).multiply(4).unwrap() == Decimal(22)

    def test_divide(self):
        assert BigFloatChain(22).divide(4).unwrap() == Decimal("5.5")

    def test_divide_uses_working_precision(self):
        result = BigFloatChain(1).divide(3).unwrap()
        assert result == Decimal("0.3333333333333333333333333333")

    def test_precision_from_config(self):
        config = ChainConfig(float_precision=5)
        assert BigFloatChain(1, config=config).divide(3).unwrap() == Decimal("0.33333")

    def test_rounding_from_config(self):
        down = ChainConfig(float_precision=3, float_rounding="ROUND_DOWN")
        half_even = ChainConfig(float_precision=3)
        assert BigFloatChain(2, config=down).divide(3).unwrap() == Decimal("0.666")
        assert BigFloatChain(2, config=half_even).divide(3).unwrap() == Decimal("0.667")

    def test_decimal_string_operands(self):
        result = BigFloatChain("0.1").add("0.2").unwrap()
        assert result == Decimal("0.3")

    def test_hex_operand(self):
        assert BigFloatChain(1).add("0x10").unwrap() == Decimal(17)

    def test_initial_value_exact(self):
        assert BigFloatChain(0.1).accumulator == Decimal(0.1)

    def test_abs(self):
        assert BigFloatChain(-2.5).abs().unwrap() == Decimal("2.5")

    def test_abs_does_not_round(self):
        config = ChainConfig(float_precision=2)
        assert BigFloatChain("-123.456", config=config).abs().unwrap() == Decimal("123.456")

    def test_no_mod_operation(self):
        assert not hasattr(BigFloatChain(1), "mod")

    def test_domain(self):
        assert BigFloatChain(1).domain == ChainDomain.FLOAT


class TestBigFloatChainDivision:
    """Деление на ноль."""

    @pytest.mark.parametrize("zero", [0, 0.0, "0", "0.000", Decimal("-0"), "-0.0"])
    def test_divide_by_exact_zero(self, zero):
        assert _kind(BigFloatChain(20).divide(zero)) == ChainErrorKind.DIVISION_BY_ZERO

    def test_tiny_divisor_is_not_zero(self):
        """Сравнение с нулём точное, без epsilon."""
        assert BigFloatChain(1).divide("1e-30").unwrap() == Decimal("1e30")

    def test_accumulator_unchanged_on_failure(self):
        chain = BigFloatChain("2.5").divide(0)
        assert chain.accumulator == Decimal("2.5")


class TestBigFloatChainPow:
    """pow через native double."""

    def test_integer_exponents(self):
        assert BigFloatChain(2).pow(10).unwrap() == Decimal(1024)
        assert BigFloatChain(1.5).pow(2).unwrap() == Decimal("2.25")
        assert BigFloatChain(7).pow(0).unwrap() == Decimal(1)
        assert BigFloatChain(2).pow("3.0").unwrap() == Decimal(8)

    def test_negative_exponent(self):
        assert _kind(BigFloatChain(2).pow(-1)) == ChainErrorKind.NEGATIVE_EXPONENT

    @pytest.mark.parametrize("exponent", [0.5, "2.25", "1e400"])
    def test_non_integer_exponent(self, exponent):
        assert _kind(BigFloatChain(2).pow(exponent)) == ChainErrorKind.NON_INTEGER_EXPONENT

    def test_precision_limited_to_double(self):
        """База понижается до float: хвост за пределами double теряется."""
        result = BigFloatChain("1.00000000000000000001").pow(1).unwrap()
        assert result == Decimal(1)

    def test_overflow_gives_infinity(self):
        assert BigFloatChain(10).pow(400).unwrap() == Decimal("Infinity")
        assert BigFloatChain(-10).pow(401).unwrap() == Decimal("-Infinity")
        assert BigFloatChain(-10).pow(400).unwrap() == Decimal("Infinity")

    def test_native_power_direct(self):
        assert native_power(Decimal(3), Decimal(4)) == Decimal(81)
        with pytest.raises(NonIntegerExponentError):
            native_power(Decimal(3), Decimal("0.5"))

    def test_invalid_operation_on_infinities(self):
        chain = BigFloatChain(10).pow(400).subtract(Decimal("Infinity"))
        assert _kind(chain) == ChainErrorKind.NON_FINITE_VALUE


class TestBigFloatChainGrouping:
    """begin()/end()."""

    def test_brackets(self):
        val, err = BigFloatChain(10).begin().add(10).end().multiply(2).value()
        assert err is None
        assert val == Decimal(40)

    def test_mismatched_brackets(self):
        assert _kind(BigFloatChain(10).begin().add(10)) == ChainErrorKind.MISMATCHED_BRACKETS

    def test_group_of_add_equals_add(self):
        grouped = BigFloatChain("1.25").begin().add("2.5").end().unwrap()
        assert grouped == Decimal("3.75")

    def test_group_recomposition_uses_context(self):
        config = ChainConfig(float_precision=3)
        result = BigFloatChain("1000", config=config).begin().add("0.5").end().unwrap()
        assert result == Decimal("1.00E+3")

    def test_sticky_error(self):
        chain = BigFloatChain(1).divide(0).add(1).pow(-3)
        assert _kind(chain) == ChainErrorKind.DIVISION_BY_ZERO
