"""
BigFloatChain — цепочка над Decimal произвольной точности

Вся арифметика (включая сложение при end()) выполняется в decimal-контексте
из ChainConfig (float_precision, float_rounding). Конверсия операндов точная.

Доменные правила:
- divide: делитель, точно равный нулю (без epsilon) → DivisionByZeroError
- pow: показатель берётся как float; < 0 → NegativeExponentError,
  дробный или бесконечный → NonIntegerExponentError. База понижается до float,
  степень считается через math.pow, результат расширяется обратно в Decimal.
  Точность pow ограничена double; переполнение даёт ±Infinity.
- mod не определён
- inf - inf и подобные операции → NonFiniteValueError
"""

import decimal
import math
from decimal import Decimal
from typing import Any, Callable

from bignums.chain.base import BaseChain
from bignums.core.coercion import Operand, to_big_float
from bignums.core.config import ChainConfig
from bignums.core.errors import (
    DivisionByZeroError,
    NegativeExponentError,
    NonFiniteValueError,
    NonIntegerExponentError,
)
from bignums.core.types import ChainDomain


def _divide(dividend: Decimal, divisor: Decimal) -> Decimal:
    if divisor == 0:
        raise DivisionByZeroError(
            "division by zero", context={"dividend": str(dividend)}
        )
    return dividend / divisor


def native_power(base: Decimal, exponent: Decimal) -> Decimal:
    """
    Степень через native double.

    Raises:
        NegativeExponentError: exponent < 0
        NonIntegerExponentError: exponent не целое (или бесконечен)

    Examples:
        >>> native_power(Decimal(2), Decimal(10))
        Decimal('1024')
    """
    native_exponent = float(exponent)

    if native_exponent < 0:
        raise NegativeExponentError(
            "negative exponent", context={"exponent": str(exponent)}
        )
    if not native_exponent.is_integer():
        raise NonIntegerExponentError(
            "non-integer exponent", context={"exponent": str(exponent)}
        )

    native_base = float(base)
    try:
        result = math.pow(native_base, native_exponent)
    except OverflowError:
        odd = native_exponent % 2 == 1
        result = math.copysign(math.inf, native_base) if odd else math.inf

    return Decimal(result)


class BigFloatChain(BaseChain[Decimal]):
    """
    Fluent-цепочка над Decimal.

    Example:
        >>> BigFloatChain(10.5).add(20.5).subtract(10).multiply(2).divide(2).unwrap()
        Decimal('21.0')
    """

    domain = ChainDomain.FLOAT

    def __init__(self, initial_value: Any, config: ChainConfig | None = None) -> None:
        super().__init__(initial_value, config)
        self._context = self.config.decimal_context()

    def _coerce(self, operand: Any) -> Decimal:
        return to_big_float(operand)

    def _zero(self) -> Decimal:
        return Decimal(0)

    def _absolute(self, value: Decimal) -> Decimal:
        return value.copy_abs()

    def _compute(
        self,
        operation: Callable[[Decimal, Decimal], Decimal],
        lhs: Decimal,
        rhs: Decimal,
    ) -> Decimal:
        try:
            with decimal.localcontext(self._context):
                return operation(lhs, rhs)
        except decimal.InvalidOperation as exc:
            raise NonFiniteValueError(
                f"invalid decimal operation on {lhs} and {rhs}",
                context={"lhs": str(lhs), "rhs": str(rhs)},
            ) from exc

    def divide(self, operand: Operand) -> "BigFloatChain":
        return self._operate(operand, "divide", _divide)

    def pow(self, operand: Operand) -> "BigFloatChain":
        """Возведение в неотрицательную целую степень (точность double)."""
        return self._operate(operand, "pow", native_power)
