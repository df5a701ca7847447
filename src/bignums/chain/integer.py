"""
BigIntChain — цепочка над целыми произвольной точности (int)

Доменные правила:
- divide: деление с усечением к нулю (-7 / 2 = -3)
- mod: остаток, согласованный с усечённым делением (a == b*q + r,
  знак r совпадает со знаком a: -7 mod 2 = -1)
- pow: точное возведение в степень; показатель < 0 → NegativeExponentError,
  показатель > config.max_int_exponent → ExponentTooLargeError
"""

from typing import Any

from bignums.chain.base import BaseChain
from bignums.core.coercion import Operand, to_big_int
from bignums.core.errors import (
    DivisionByZeroError,
    ExponentTooLargeError,
    ModuloByZeroError,
    NegativeExponentError,
)
from bignums.core.types import ChainDomain


def truncating_divide(dividend: int, divisor: int) -> int:
    """
    Целочисленное деление с усечением к нулю.

    Raises:
        DivisionByZeroError: divisor == 0

    Examples:
        >>> truncating_divide(7, 2)
        3
        >>> truncating_divide(-7, 2)
        -3
    """
    if divisor == 0:
        raise DivisionByZeroError("division by zero", context={"dividend": dividend})
    quotient = abs(dividend) // abs(divisor)
    if (dividend < 0) != (divisor < 0):
        return -quotient
    return quotient


def truncating_remainder(dividend: int, divisor: int) -> int:
    """
    Остаток усечённого деления (знак как у dividend).

    Raises:
        ModuloByZeroError: divisor == 0

    Examples:
        >>> truncating_remainder(7, 3)
        1
        >>> truncating_remainder(-7, 3)
        -1
        >>> truncating_remainder(7, -3)
        1
    """
    if divisor == 0:
        raise ModuloByZeroError("modulo by zero", context={"dividend": dividend})
    remainder = abs(dividend) % abs(divisor)
    return -remainder if dividend < 0 else remainder


class BigIntChain(BaseChain[int]):
    """
    Fluent-цепочка над int.

    Example:
        >>> BigIntChain(10).begin().add(10).end().multiply(2).value()
        (40, None)
    """

    domain = ChainDomain.INTEGER

    def _coerce(self, operand: Any) -> int:
        return to_big_int(operand)

    def _zero(self) -> int:
        return 0

    def _absolute(self, value: int) -> int:
        return abs(value)

    def _power(self, base: int, exponent: int) -> int:
        if exponent < 0:
            raise NegativeExponentError(
                "negative exponent", context={"exponent": exponent}
            )
        if exponent > self.config.max_int_exponent:
            raise ExponentTooLargeError(
                "exponent too large",
                context={"exponent": exponent, "limit": self.config.max_int_exponent},
            )
        return base**exponent

    def divide(self, operand: Operand) -> "BigIntChain":
        return self._operate(operand, "divide", truncating_divide)

    def mod(self, operand: Operand) -> "BigIntChain":
        return self._operate(operand, "mod", truncating_remainder)

    def pow(self, operand: Operand) -> "BigIntChain":
        """Возведение accumulator в степень operand (operand — показатель)."""
        return self._operate(operand, "pow", self._power)
