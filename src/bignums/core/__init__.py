"""
Core: конверсия операндов, ошибки, конфигурация и модель результата.

Модули не зависят от цепочек и могут использоваться отдельно.
"""

from bignums.core.coercion import (
    HEX_PREFIXES,
    Operand,
    parse_float_string,
    parse_int_string,
    to_big_float,
    to_big_int,
)
from bignums.core.config import (
    DEFAULT_CONFIG,
    DEFAULT_FLOAT_PRECISION,
    DEFAULT_MAX_INT_EXPONENT,
    ChainConfig,
)
from bignums.core.errors import (
    ChainError,
    ChainErrorKind,
    DivisionByZeroError,
    ExponentTooLargeError,
    InvalidNumericStringError,
    MismatchedBracketsError,
    ModuloByZeroError,
    NegativeExponentError,
    NonFiniteValueError,
    NonIntegerExponentError,
    UnsupportedTypeError,
    error_for_kind,
)
from bignums.core.outcome import ChainOutcome, format_big_int
from bignums.core.types import ChainDomain, ChainState

__all__ = [
    # Coercion
    "HEX_PREFIXES",
    "Operand",
    "parse_float_string",
    "parse_int_string",
    "to_big_float",
    "to_big_int",
    # Config
    "DEFAULT_CONFIG",
    "DEFAULT_FLOAT_PRECISION",
    "DEFAULT_MAX_INT_EXPONENT",
    "ChainConfig",
    # Errors
    "ChainError",
    "ChainErrorKind",
    "DivisionByZeroError",
    "ExponentTooLargeError",
    "InvalidNumericStringError",
    "MismatchedBracketsError",
    "ModuloByZeroError",
    "NegativeExponentError",
    "NonFiniteValueError",
    "NonIntegerExponentError",
    "UnsupportedTypeError",
    "error_for_kind",
    # Outcome
    "ChainOutcome",
    "format_big_int",
    # Types
    "ChainDomain",
    "ChainState",
]
