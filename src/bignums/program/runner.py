"""Program Runner — воспроизведение JSON-программы на цепочке.

Программа (contracts/schema/chain_program.json):
    {
        "domain": "integer",
        "initial": "0x10",
        "operations": [
            {"op": "begin"},
            {"op": "add", "operand": 10},
            {"op": "end"},
            {"op": "multiply", "operand": "2"}
        ]
    }

Операции применяются строго в порядке следования, без приоритетов.
Нарушение схемы — ошибка документа (jsonschema.ValidationError), а не
ошибка цепочки; ошибки вычислений возвращаются в ChainOutcome.
"""

import json
from pathlib import Path
from typing import Any, Dict, Final, FrozenSet, Optional, Union

from bignums.chain.base import BaseChain
from bignums.chain.factory import new_chain
from bignums.contracts import validate_chain_program
from bignums.core.config import ChainConfig
from bignums.core.outcome import ChainOutcome
from bignums.logging_config import get_logger

logger = get_logger(__name__)

OPERAND_OPERATIONS: Final[FrozenSet[str]] = frozenset(
    {"add", "subtract", "multiply", "divide", "mod", "pow"}
)
BARE_OPERATIONS: Final[FrozenSet[str]] = frozenset({"abs", "begin", "end"})


def apply_operation(chain: BaseChain, op: str, operand: Any = None) -> BaseChain:
    """
    Применение одной операции по имени.

    Args:
        chain: Цепочка
        op: Имя операции ("add", "begin", ...)
        operand: Операнд (игнорируется для abs/begin/end)

    Returns:
        Та же цепочка

    Raises:
        ValueError: Неизвестная операция или операция, не определённая
            для домена цепочки (mod для float)
    """
    if op in BARE_OPERATIONS:
        return getattr(chain, op)()

    if op not in OPERAND_OPERATIONS:
        raise ValueError(f"unknown chain operation {op!r}")

    method = getattr(chain, op, None)
    if method is None:
        raise ValueError(
            f"operation {op!r} is not defined for {chain.domain.value} chains"
        )
    return method(operand)


def run_program(
    document: Dict[str, Any],
    config: Optional[ChainConfig] = None,
) -> ChainOutcome:
    """
    Валидация и выполнение программы цепочки.

    Args:
        document: Программа (dict по схеме chain_program)
        config: Параметры вычислений

    Returns:
        ChainOutcome с результатом или ошибкой цепочки

    Raises:
        jsonschema.ValidationError: Документ не соответствует схеме
    """
    validate_chain_program(document)

    operations = document["operations"]
    logger.debug(
        "START: run_program",
        extra={"domain": document["domain"], "operations": len(operations)},
    )

    chain = new_chain(document["domain"], document["initial"], config=config)
    for step in operations:
        apply_operation(chain, step["op"], step.get("operand"))

    outcome = chain.outcome()
    logger.debug(
        "END: run_program",
        extra={
            "ok": outcome.ok,
            "error_kind": outcome.error_kind.value if outcome.error_kind else None,
        },
    )
    return outcome


def run_program_file(
    path: Union[str, Path],
    config: Optional[ChainConfig] = None,
) -> ChainOutcome:
    """Загрузка программы из JSON-файла (UTF-8) и выполнение."""
    with open(path, "r", encoding="utf-8") as f:
        document = json.load(f)
    return run_program(document, config=config)
