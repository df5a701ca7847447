"""
ChainOutcome — снапшот терминального извлечения цепочки

Immutable Pydantic модель. Совместима с JSON Schema
(contracts/schema/chain_outcome.json).

value хранится строкой:
- int → десятичная запись; если она длиннее лимита интерпретатора
  (sys.get_int_max_str_digits), используется hex "0x..."
- Decimal → str(Decimal), экспоненциальная форма допустима
"""

from decimal import Decimal
from typing import Optional, Union

from pydantic import BaseModel, Field, field_validator

from bignums.core.coercion import parse_float_string, parse_int_string, to_big_float
from bignums.core.errors import ChainError, ChainErrorKind, error_for_kind
from bignums.core.types import ChainDomain


def format_big_int(value: int) -> str:
    """
    Каноническая строка int.

    Examples:
        >>> format_big_int(-42)
        '-42'
    """
    try:
        return str(value)
    except ValueError:
        sign = "-" if value < 0 else ""
        return f"{sign}0x{abs(value):x}"


class ChainOutcome(BaseModel):
    """
    Результат value() цепочки в сериализуемом виде.

    Ровно одно из двух: value (успех) или error_kind + error_message.
    """

    domain: ChainDomain = Field(..., description="Числовой домен цепочки")
    value: Optional[str] = Field(None, description="Результат (строка)")
    error_kind: Optional[ChainErrorKind] = Field(None, description="Вид ошибки")
    error_message: Optional[str] = Field(
        None, validate_default=True, description="Сообщение ошибки"
    )

    model_config = {"frozen": True}

    @field_validator("error_message")
    @classmethod
    def validate_error_consistency(cls, v: Optional[str], info) -> Optional[str]:
        """Проверка, что value и ошибка взаимоисключающие"""
        error_kind = info.data.get("error_kind")
        value = info.data.get("value")
        if error_kind is not None and v is None:
            raise ValueError("error_message is required when error_kind is set")
        if error_kind is None and v is not None:
            raise ValueError("error_message requires error_kind")
        if error_kind is not None and value is not None:
            raise ValueError("value must be None when error_kind is set")
        return v

    @classmethod
    def from_result(
        cls,
        domain: ChainDomain,
        value: Union[int, Decimal, None],
        error: Optional[ChainError],
    ) -> "ChainOutcome":
        """
        Построение из пары (value, error), возвращённой value().

        Args:
            domain: Домен цепочки
            value: Результат или None
            error: Ошибка или None
        """
        if error is not None:
            return cls(
                domain=domain,
                value=None,
                error_kind=error.kind,
                error_message=error.message,
            )

        if value is None:
            text = None
        elif domain == ChainDomain.INTEGER:
            text = format_big_int(int(value))
        else:
            text = str(to_big_float(value))
        return cls(domain=domain, value=text, error_kind=None, error_message=None)

    @property
    def ok(self) -> bool:
        return self.error_kind is None

    def numeric_value(self) -> Union[int, Decimal, None]:
        """Разбор value обратно в int/Decimal (None при ошибке)."""
        if self.value is None:
            return None
        if self.domain == ChainDomain.INTEGER:
            if self.value.startswith("-0x"):
                return -parse_int_string(self.value[1:])
            return parse_int_string(self.value)
        if self.value.lstrip("+-") == "Infinity":
            return Decimal(self.value)
        return parse_float_string(self.value)

    def to_error(self) -> Optional[ChainError]:
        """Восстановление ChainError нужного подкласса (None при успехе)."""
        if self.error_kind is None:
            return None
        return error_for_kind(self.error_kind, self.error_message or "")
