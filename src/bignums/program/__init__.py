"""Выполнение JSON-программ цепочек."""

from .runner import (
    BARE_OPERATIONS,
    OPERAND_OPERATIONS,
    apply_operation,
    run_program,
    run_program_file,
)

__all__ = [
    "BARE_OPERATIONS",
    "OPERAND_OPERATIONS",
    "apply_operation",
    "run_program",
    "run_program_file",
]
