"""
bignums — fluent-цепочки арифметики произвольной точности

    >>> from bignums import BigIntChain
    >>> BigIntChain(10).begin().add(10).end().multiply(2).value()
    (40, None)

Ошибки не выбрасываются посреди цепочки: первая ошибка запоминается
(sticky error), остальные операции становятся no-op, результат или ошибка
возвращаются из value().
"""

from bignums.chain import (
    BaseChain,
    BigFloatChain,
    BigIntChain,
    new_chain,
)
from bignums.contracts import validate_chain_outcome, validate_chain_program
from bignums.core import (
    ChainConfig,
    ChainDomain,
    ChainError,
    ChainErrorKind,
    ChainOutcome,
    ChainState,
    DivisionByZeroError,
    ExponentTooLargeError,
    InvalidNumericStringError,
    MismatchedBracketsError,
    ModuloByZeroError,
    NegativeExponentError,
    NonFiniteValueError,
    NonIntegerExponentError,
    Operand,
    UnsupportedTypeError,
    to_big_float,
    to_big_int,
)
from bignums.logging_config import get_logger, setup_logging
from bignums.program import run_program, run_program_file

__version__ = "0.3.0"

__all__ = [
    # Chains
    "BaseChain",
    "BigIntChain",
    "BigFloatChain",
    "new_chain",
    # Coercion
    "Operand",
    "to_big_int",
    "to_big_float",
    # Config / types
    "ChainConfig",
    "ChainDomain",
    "ChainState",
    "ChainOutcome",
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
    # Contracts / programs
    "validate_chain_program",
    "validate_chain_outcome",
    "run_program",
    "run_program_file",
    # Logging
    "get_logger",
    "setup_logging",
]
