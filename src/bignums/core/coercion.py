"""
Operand Coercion — Нормализация операндов в числовой домен цепочки

Принимаемые представления (закрытое множество, см. Operand):
- int и любые numbers.Integral (включая numpy int*/uint*, в т.ч. полный uint64)
- float и прочие numbers.Real, не являющиеся Rational (numpy float32/float64)
- decimal.Decimal — arbitrary-precision float
- str: "0x"/"0X" + hex-цифры → base 16, иначе base 10

Всё остальное (bool, Fraction, complex, None, ...) → UnsupportedTypeError.

Правила:
- В целочисленный домен дробная часть отбрасывается (truncation toward zero)
- В домен Decimal конверсия точная, без округления контекстом
- Hex-строка в домене Decimal сначала парсится как int, затем расширяется
- NaN/Inf не могут стать int; NaN не может стать Decimal → NonFiniteValueError

Модуль чистый: без состояния и побочных эффектов.
"""

import math
import numbers
import re
from decimal import Decimal
from typing import Any, Final, Pattern, Union

from bignums.core.errors import (
    InvalidNumericStringError,
    NonFiniteValueError,
    UnsupportedTypeError,
)

Operand = Union[int, float, Decimal, str]

# =============================================================================
# СИНТАКСИС СТРОК
# =============================================================================

HEX_PREFIXES: Final[tuple[str, ...]] = ("0x", "0X")

_INT_STRING_RE: Final[Pattern[str]] = re.compile(r"[+-]?[0-9]+")
_HEX_DIGITS_RE: Final[Pattern[str]] = re.compile(r"[0-9a-fA-F]+")
_FLOAT_STRING_RE: Final[Pattern[str]] = re.compile(
    r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
)


def _type_name(value: Any) -> str:
    cls = type(value)
    if cls.__module__ == "builtins":
        return cls.__qualname__
    return f"{cls.__module__}.{cls.__qualname__}"


def _is_native_float(value: Any) -> bool:
    if isinstance(value, float):
        return True
    return isinstance(value, numbers.Real) and not isinstance(value, numbers.Rational)


def _unsupported(value: Any) -> UnsupportedTypeError:
    type_name = _type_name(value)
    return UnsupportedTypeError(
        f"unsupported type: {type_name}", context={"type": type_name}
    )


def _hex_digits(text: str) -> str | None:
    """Hex-цифры после префикса 0x/0X или None, если префикса нет."""
    if text.startswith(HEX_PREFIXES):
        return text[len(HEX_PREFIXES[0]):]
    return None


# =============================================================================
# ЦЕЛОЧИСЛЕННЫЙ ДОМЕН
# =============================================================================


def parse_int_string(text: str) -> int:
    """
    Парсинг строки в int.

    Args:
        text: "123", "-42", "0x1F", "0XfF"

    Returns:
        Целое значение

    Raises:
        InvalidNumericStringError: Если строка не соответствует выбранной base

    Examples:
        >>> parse_int_string("0x10")
        16
        >>> parse_int_string("-250")
        -250
    """
    digits = _hex_digits(text)
    if digits is not None:
        if not _HEX_DIGITS_RE.fullmatch(digits):
            raise InvalidNumericStringError(
                f"could not convert hex string to big int: {text!r}",
                context={"input": text, "base": 16},
            )
        return int(digits, 16)

    if not _INT_STRING_RE.fullmatch(text):
        raise InvalidNumericStringError(
            f"could not convert string to big int: {text!r}",
            context={"input": text, "base": 10},
        )
    try:
        return int(text, 10)
    except ValueError as exc:
        # Лимит длины десятичной строки интерпретатора (sys.get_int_max_str_digits)
        raise InvalidNumericStringError(
            f"could not convert string to big int: {exc}",
            context={"input_length": len(text), "base": 10},
        ) from exc


def to_big_int(value: Any) -> int:
    """
    Конверсия операнда в целочисленный домен.

    Args:
        value: Любое принимаемое представление (см. Operand)

    Returns:
        int (Decimal и float усекаются к нулю)

    Raises:
        UnsupportedTypeError: Тип вне закрытого множества
        InvalidNumericStringError: Строка не парсится
        NonFiniteValueError: NaN или бесконечность

    Examples:
        >>> to_big_int("0x10")
        16
        >>> to_big_int(-7.9)
        -7
        >>> to_big_int(Decimal("12.75"))
        12
    """
    if isinstance(value, bool):
        raise _unsupported(value)

    if isinstance(value, numbers.Integral):
        return int(value)

    if isinstance(value, Decimal):
        if not value.is_finite():
            raise NonFiniteValueError(
                f"cannot convert {value} to big int", context={"input": str(value)}
            )
        return int(value)

    if _is_native_float(value):
        native = float(value)
        if not math.isfinite(native):
            raise NonFiniteValueError(
                f"cannot convert {native} to big int", context={"input": native}
            )
        return int(native)

    if isinstance(value, str):
        return parse_int_string(value)

    raise _unsupported(value)


# =============================================================================
# ДОМЕН DECIMAL (BIG FLOAT)
# =============================================================================


def parse_float_string(text: str) -> Decimal:
    """
    Парсинг строки в Decimal.

    Hex-строки допускаются только как целые: "0x10" → Decimal(16).
    Литералы "inf"/"nan" не принимаются.

    Raises:
        InvalidNumericStringError: Если строка не парсится
    """
    digits = _hex_digits(text)
    if digits is not None:
        if not _HEX_DIGITS_RE.fullmatch(digits):
            raise InvalidNumericStringError(
                f"could not convert hex string to big float: {text!r}",
                context={"input": text, "base": 16},
            )
        return Decimal(int(digits, 16))

    if not _FLOAT_STRING_RE.fullmatch(text):
        raise InvalidNumericStringError(
            f"could not convert string to big float: {text!r}",
            context={"input": text, "base": 10},
        )
    return Decimal(text)


def to_big_float(value: Any) -> Decimal:
    """
    Конверсия операнда в домен Decimal.

    Конверсия точная: Decimal(0.1) сохраняет все двоичные цифры float,
    округление происходит только в арифметике цепочки.

    Raises:
        UnsupportedTypeError: Тип вне закрытого множества
        InvalidNumericStringError: Строка не парсится
        NonFiniteValueError: NaN

    Examples:
        >>> to_big_float("10.5")
        Decimal('10.5')
        >>> to_big_float(10)
        Decimal('10')
        >>> to_big_float("0xff")
        Decimal('255')
    """
    if isinstance(value, bool):
        raise _unsupported(value)

    if isinstance(value, Decimal):
        if value.is_nan():
            raise NonFiniteValueError(
                "cannot convert NaN to big float", context={"input": str(value)}
            )
        return value

    if isinstance(value, numbers.Integral):
        return Decimal(int(value))

    if _is_native_float(value):
        native = float(value)
        if math.isnan(native):
            raise NonFiniteValueError(
                "cannot convert NaN to big float", context={"input": native}
            )
        return Decimal(native)

    if isinstance(value, str):
        return parse_float_string(value)

    raise _unsupported(value)
