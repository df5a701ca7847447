"""
Enums доменов и состояний цепочек.
"""

from enum import Enum


class ChainDomain(str, Enum):
    """Числовой домен цепочки."""

    INTEGER = "integer"
    FLOAT = "float"


class ChainState(str, Enum):
    """
    Состояние цепочки.

    OK → ERRORED ровно один раз; ERRORED поглощающее до извлечения value().
    """

    OK = "OK"
    ERRORED = "ERRORED"
