"""
BaseChain — общий механизм fluent-цепочек

Цепочка владеет:
- accumulator (_value): текущее значение; заменяется, а не мутируется
- group stack (_stack): сохранённые accumulator'ы для begin()/end()
- sticky error (_error): первая записанная ошибка

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Sticky error монотонна: None → ChainError ровно один раз, никогда обратно
2. После ошибки каждая арифметическая операция — no-op, возвращающий self
3. Неудачная операция не портит accumulator (присваивание только при успехе)
4. Незакрытые группы в value() → MismatchedBracketsError, независимо от
   sticky error и с приоритетом над ней
5. Ошибки не выбрасываются посреди цепочки, только через value()/unwrap()

begin()/end()/abs() не блокируются sticky error: учёт скобок продолжается,
чтобы баланс проверялся в value() даже после ошибки.
end() складывает сохранённое значение с подытогом: группа композируется
только сложением, независимо от следующей операции.
"""

import operator
from typing import Any, Callable, ClassVar, Generic, List, Optional, Tuple, TypeVar

from bignums.core.coercion import Operand
from bignums.core.config import DEFAULT_CONFIG, ChainConfig
from bignums.core.errors import ChainError, MismatchedBracketsError
from bignums.core.outcome import ChainOutcome
from bignums.core.types import ChainDomain, ChainState
from bignums.logging_config import get_logger

logger = get_logger(__name__)

N = TypeVar("N")
C = TypeVar("C", bound="BaseChain")


class BaseChain(Generic[N]):
    """
    Цепочка вычислений над числовым доменом N.

    Подклассы задают домен через _coerce/_zero/_absolute и, при
    необходимости, переопределяют _compute (например, чтобы считать в
    собственном decimal-контексте).
    """

    domain: ClassVar[ChainDomain]

    def __init__(self, initial_value: Any, config: Optional[ChainConfig] = None) -> None:
        """
        Args:
            initial_value: Начальное значение (любое представление Operand)
            config: Параметры вычислений (default: ChainConfig())

        Ошибка конверсии initial_value не выбрасывается, а становится
        sticky error цепочки.
        """
        self.config = config or DEFAULT_CONFIG
        self._stack: List[N] = []
        self._error: Optional[ChainError] = None
        self._value: N = self._zero()

        try:
            self._value = self._coerce(initial_value)
        except ChainError as exc:
            self._record(exc, "new")

    # =========================================================================
    # ДОМЕННЫЕ HOOKS
    # =========================================================================

    def _coerce(self, operand: Any) -> N:
        raise NotImplementedError

    def _zero(self) -> N:
        raise NotImplementedError

    def _absolute(self, value: N) -> N:
        raise NotImplementedError

    def _compute(self, operation: Callable[[N, N], N], lhs: N, rhs: N) -> N:
        return operation(lhs, rhs)

    # =========================================================================
    # СОСТОЯНИЕ
    # =========================================================================

    @property
    def accumulator(self) -> N:
        """Текущий accumulator без проверок ошибок и скобок."""
        return self._value

    @property
    def error(self) -> Optional[ChainError]:
        """Записанная sticky error (без учёта незакрытых групп)."""
        return self._error

    @property
    def state(self) -> ChainState:
        return ChainState.OK if self._error is None else ChainState.ERRORED

    @property
    def is_errored(self) -> bool:
        return self._error is not None

    @property
    def depth(self) -> int:
        """Текущая глубина вложенности групп."""
        return len(self._stack)

    def _record(self, exc: ChainError, operation: str) -> None:
        if self._error is not None:
            return
        exc.context.setdefault("operation", operation)
        self._error = exc
        logger.debug(
            "chain error recorded",
            extra={
                "chain": type(self).__name__,
                "operation": operation,
                "kind": exc.kind.value,
                "error": exc.message,
            },
        )

    # =========================================================================
    # ОПЕРАЦИИ
    # =========================================================================

    def _operate(
        self: C,
        operand: Any,
        name: str,
        operation: Callable[[N, N], N],
    ) -> C:
        if self._error is not None:
            return self
        try:
            rhs = self._coerce(operand)
            self._value = self._compute(operation, self._value, rhs)
        except ChainError as exc:
            self._record(exc, name)
        return self

    def add(self: C, operand: Operand) -> C:
        return self._operate(operand, "add", operator.add)

    def subtract(self: C, operand: Operand) -> C:
        return self._operate(operand, "subtract", operator.sub)

    def multiply(self: C, operand: Operand) -> C:
        return self._operate(operand, "multiply", operator.mul)

    def abs(self: C) -> C:
        """Замена accumulator на его модуль. Никогда не завершается ошибкой."""
        self._value = self._absolute(self._value)
        return self

    def begin(self: C) -> C:
        """Открытие группы: accumulator сохраняется в стек и сбрасывается в 0."""
        self._stack.append(self._value)
        self._value = self._zero()
        return self

    def end(self: C) -> C:
        """
        Закрытие группы: accumulator = сохранённое значение + подытог.

        Пустой стек → MismatchedBracketsError (sticky, если ошибки ещё нет).
        """
        if not self._stack:
            self._record(MismatchedBracketsError("mismatched brackets"), "end")
            return self

        saved = self._stack.pop()
        try:
            self._value = self._compute(operator.add, saved, self._value)
        except ChainError as exc:
            self._record(exc, "end")
        return self

    # =========================================================================
    # ИЗВЛЕЧЕНИЕ
    # =========================================================================

    def value(self) -> Tuple[Optional[N], Optional[ChainError]]:
        """
        Терминальное извлечение результата.

        Returns:
            (value, None) при успехе;
            (None, MismatchedBracketsError) если остались открытые группы;
            (None, sticky_error) если ошибка была записана

        Цепочка после извлечения считается использованной.
        """
        if self._stack:
            return None, MismatchedBracketsError(
                "mismatched brackets",
                context={"operation": "value", "open_groups": len(self._stack)},
            )
        if self._error is not None:
            return None, self._error
        return self._value, None

    def unwrap(self) -> N:
        """
        Значение цепочки или исключение.

        Raises:
            ChainError: Ошибка, которую вернул бы value()
        """
        result, error = self.value()
        if error is not None:
            raise error
        return result  # type: ignore[return-value]

    def outcome(self) -> ChainOutcome:
        """Снапшот value() в виде ChainOutcome (для JSON/логов)."""
        result, error = self.value()
        return ChainOutcome.from_result(self.domain, result, error)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(value={self._value!r}, "
            f"depth={self.depth}, state={self.state.value})"
        )
