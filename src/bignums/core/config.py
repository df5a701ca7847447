"""
ChainConfig — Конфигурация цепочек вычислений

Immutable Pydantic модель. Передаётся в конструкторы цепочек и в new_chain();
при отсутствии используются значения по умолчанию.
"""

import decimal
from typing import Final, Literal

from pydantic import BaseModel, Field

# =============================================================================
# ЗНАЧЕНИЯ ПО УМОЛЧАНИЮ
# =============================================================================

# Значащие цифры для Decimal-арифметики (совпадает с default context decimal)
DEFAULT_FLOAT_PRECISION: Final[int] = 28

# Максимальный показатель степени для целочисленного pow
DEFAULT_MAX_INT_EXPONENT: Final[int] = 64

RoundingMode = Literal[
    "ROUND_CEILING",
    "ROUND_DOWN",
    "ROUND_FLOOR",
    "ROUND_HALF_DOWN",
    "ROUND_HALF_EVEN",
    "ROUND_HALF_UP",
    "ROUND_UP",
    "ROUND_05UP",
]


class ChainConfig(BaseModel):
    """
    Параметры вычислений цепочек.

    float_precision и float_rounding задают рабочий контекст Decimal для
    BigFloatChain; max_int_exponent ограничивает показатель в BigIntChain.pow.
    """

    float_precision: int = Field(
        DEFAULT_FLOAT_PRECISION, ge=1, description="Значащие цифры Decimal"
    )
    float_rounding: RoundingMode = Field(
        "ROUND_HALF_EVEN", description="Режим округления Decimal"
    )
    max_int_exponent: int = Field(
        DEFAULT_MAX_INT_EXPONENT, ge=0, description="Макс. показатель int pow"
    )

    model_config = {"frozen": True}

    def decimal_context(self) -> decimal.Context:
        """
        Новый decimal.Context с точностью и округлением из конфигурации.

        Ловится только InvalidOperation (inf - inf и т.п.); переполнение
        даёт Infinity, деление на ноль цепочки проверяют сами.
        """
        return decimal.Context(
            prec=self.float_precision,
            rounding=getattr(decimal, self.float_rounding),
            traps=[decimal.InvalidOperation],
        )


DEFAULT_CONFIG: Final[ChainConfig] = ChainConfig()
