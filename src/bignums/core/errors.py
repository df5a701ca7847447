"""
Chain Errors — Дискриминированные ошибки цепочек вычислений

Каждая ошибка несёт:
- kind: ChainErrorKind (по нему ветвится вызывающий код, не по тексту)
- message: человекочитаемое описание
- context: dict с диагностикой (операция, операнд, тип и т.п.)

Иерархия:
    ChainError (база)
    ├── UnsupportedTypeError        (TypeError)
    ├── InvalidNumericStringError   (ValueError)
    ├── NonFiniteValueError         (ValueError)
    ├── DivisionByZeroError         (ZeroDivisionError)
    ├── ModuloByZeroError           (ZeroDivisionError)
    ├── ExponentTooLargeError       (OverflowError)
    ├── NegativeExponentError       (ValueError)
    ├── NonIntegerExponentError     (ValueError)
    └── MismatchedBracketsError

Конвертеры операндов выбрасывают эти исключения. Цепочки их не выбрасывают:
ошибка записывается как sticky error и отдаётся только через value().
"""

from enum import Enum
from typing import Any, Dict, Optional


class ChainErrorKind(str, Enum):
    """Вид ошибки цепочки."""

    UNSUPPORTED_TYPE = "UNSUPPORTED_TYPE"
    INVALID_NUMERIC_STRING = "INVALID_NUMERIC_STRING"
    NON_FINITE_VALUE = "NON_FINITE_VALUE"
    DIVISION_BY_ZERO = "DIVISION_BY_ZERO"
    MODULO_BY_ZERO = "MODULO_BY_ZERO"
    EXPONENT_TOO_LARGE = "EXPONENT_TOO_LARGE"
    NEGATIVE_EXPONENT = "NEGATIVE_EXPONENT"
    NON_INTEGER_EXPONENT = "NON_INTEGER_EXPONENT"
    MISMATCHED_BRACKETS = "MISMATCHED_BRACKETS"


class ChainError(Exception):
    """
    Базовая ошибка цепочки.

    Подклассы фиксируют kind на уровне класса, поэтому обычно создаются
    только с сообщением и контекстом:

        raise DivisionByZeroError("division by zero", context={"op": "divide"})
    """

    kind: ChainErrorKind

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.context: Dict[str, Any] = context or {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind.value}, message={self.message!r})"


class UnsupportedTypeError(ChainError, TypeError):
    kind = ChainErrorKind.UNSUPPORTED_TYPE


class InvalidNumericStringError(ChainError, ValueError):
    kind = ChainErrorKind.INVALID_NUMERIC_STRING


class NonFiniteValueError(ChainError, ValueError):
    kind = ChainErrorKind.NON_FINITE_VALUE


class DivisionByZeroError(ChainError, ZeroDivisionError):
    kind = ChainErrorKind.DIVISION_BY_ZERO


class ModuloByZeroError(ChainError, ZeroDivisionError):
    kind = ChainErrorKind.MODULO_BY_ZERO


class ExponentTooLargeError(ChainError, OverflowError):
    kind = ChainErrorKind.EXPONENT_TOO_LARGE


class NegativeExponentError(ChainError, ValueError):
    kind = ChainErrorKind.NEGATIVE_EXPONENT


class NonIntegerExponentError(ChainError, ValueError):
    kind = ChainErrorKind.NON_INTEGER_EXPONENT


class MismatchedBracketsError(ChainError):
    kind = ChainErrorKind.MISMATCHED_BRACKETS


_ERROR_CLASSES: Dict[ChainErrorKind, type] = {
    cls.kind: cls
    for cls in (
        UnsupportedTypeError,
        InvalidNumericStringError,
        NonFiniteValueError,
        DivisionByZeroError,
        ModuloByZeroError,
        ExponentTooLargeError,
        NegativeExponentError,
        NonIntegerExponentError,
        MismatchedBracketsError,
    )
}


def error_for_kind(
    kind: ChainErrorKind,
    message: str,
    context: Optional[Dict[str, Any]] = None,
) -> ChainError:
    """
    Создание ошибки нужного подкласса по kind.

    Args:
        kind: Вид ошибки (enum или его строковое значение)
        message: Сообщение
        context: Диагностический контекст

    Returns:
        Экземпляр подкласса ChainError, соответствующего kind
    """
    return _ERROR_CLASSES[ChainErrorKind(kind)](message, context=context)
