"""
Фабрика цепочек по домену.
"""

from typing import Any, Dict, Optional, Type, Union

from bignums.chain.base import BaseChain
from bignums.chain.floating import BigFloatChain
from bignums.chain.integer import BigIntChain
from bignums.core.config import ChainConfig
from bignums.core.types import ChainDomain

CHAIN_TYPES: Dict[ChainDomain, Type[BaseChain]] = {
    ChainDomain.INTEGER: BigIntChain,
    ChainDomain.FLOAT: BigFloatChain,
}


def new_chain(
    domain: Union[ChainDomain, str],
    initial_value: Any,
    config: Optional[ChainConfig] = None,
) -> Union[BigIntChain, BigFloatChain]:
    """
    Создание цепочки для домена.

    Args:
        domain: ChainDomain или его значение ("integer" / "float")
        initial_value: Начальное значение (ошибка конверсии → sticky error)
        config: Параметры вычислений

    Returns:
        BigIntChain или BigFloatChain

    Raises:
        ValueError: Неизвестный домен

    Examples:
        >>> new_chain("integer", "0x10").add(4).unwrap()
        20
    """
    try:
        resolved = ChainDomain(domain)
    except ValueError:
        raise ValueError(
            f"unknown chain domain {domain!r}, expected one of "
            f"{[d.value for d in ChainDomain]}"
        ) from None

    chain_type = CHAIN_TYPES[resolved]
    return chain_type(initial_value, config=config)  # type: ignore[return-value]
