"""
Fluent-цепочки вычислений над int и Decimal.
"""

from .base import BaseChain
from .factory import CHAIN_TYPES, new_chain
from .floating import BigFloatChain, native_power
from .integer import BigIntChain, truncating_divide, truncating_remainder

__all__ = [
    "BaseChain",
    "BigIntChain",
    "BigFloatChain",
    "CHAIN_TYPES",
    "new_chain",
    "native_power",
    "truncating_divide",
    "truncating_remainder",
]
