"""
Contract Validation Module

JSON Schema контракты программ цепочек и их результатов.
"""

from .validators import (
    ChainOutcomeValidator,
    ChainProgramValidator,
    ContractValidator,
    SchemaLoader,
    validate_chain_outcome,
    validate_chain_program,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ChainProgramValidator",
    "ChainOutcomeValidator",
    # Functions
    "validate_chain_program",
    "validate_chain_outcome",
]
