"""Тесты фабрики new_chain и общих свойств цепочек обоих доменов.

Coverage:
- new_chain: выбор типа, строковые домены, config, ошибки initial_value
- Sticky error: идемпотентность для любой последовательности операций
- Баланс скобок: value() успешен только для сбалансированной последовательности
- Алгебра групп: begin().add(k).end() == add(k)
"""

from decimal import Decimal

import pytest

from bignums.chain import BigFloatChain, BigIntChain, new_chain
from bignums.core.config import ChainConfig
from bignums.core.errors import ChainErrorKind
from bignums.core.types import ChainDomain, ChainState

DOMAINS = [ChainDomain.INTEGER, ChainDomain.FLOAT]


def _is_balanced(sequence: str) -> bool:
    depth = 0
    for ch in sequence:
        depth += 1 if ch == "(" else -1
        if depth < 0:
            return False
    return depth == 0


class TestNewChain:
    """Фабрика цепочек."""

    def test_integer_domain(self):
        assert isinstance(new_chain(ChainDomain.INTEGER, 10), BigIntChain)

    def test_float_domain(self):
        assert isinstance(new_chain(ChainDomain.FLOAT, 10), BigFloatChain)

    def test_string_domain(self):
        assert isinstance(new_chain("integer", 1), BigIntChain)
        assert isinstance(new_chain("float", 1), BigFloatChain)

    def test_unknown_domain(self):
        with pytest.raises(ValueError, match="unknown chain domain"):
            new_chain("complex", 1)

    def test_config_passed_through(self):
        config = ChainConfig(float_precision=7)
        assert new_chain("float", 1, config=config).config is config

    def test_default_config(self):
        assert new_chain("integer", 1).config == ChainConfig()

    @pytest.mark.parametrize("domain", DOMAINS)
    def test_initial_coercion_error_becomes_sticky(self, domain):
        chain = new_chain(domain, object())
        assert chain.state == ChainState.ERRORED

        chain.add(1).subtract(2).multiply(3)
        _, err = chain.value()
        assert err.kind == ChainErrorKind.UNSUPPORTED_TYPE
        assert err.context["operation"] == "new"

    def test_hex_initial_value(self):
        assert new_chain("integer", "0x10").add(4).unwrap() == 20
        assert new_chain("float", "0x10").divide(32).unwrap() == Decimal("0.5")


class TestStickyErrorIdempotence:
    """После первой ошибки состояние ошибки не меняется."""

    FOLLOW_UPS = [
        ("add", (1,)),
        ("subtract", ("invalid",)),
        ("multiply", (None,)),
        ("divide", (0,)),
        ("pow", (-1,)),
        ("abs", ()),
        ("begin", ()),
        ("end", ()),
        ("end", ()),
    ]

    @pytest.mark.parametrize("domain", DOMAINS)
    def test_error_unchanged_by_any_follow_up(self, domain):
        chain = new_chain(domain, 5).divide(0)
        first_error = chain.error

        for name, args in self.FOLLOW_UPS:
            getattr(chain, name)(*args)
            assert chain.error is first_error
            assert chain.state == ChainState.ERRORED

        _, err = chain.value()
        assert err is first_error
        assert err.kind == ChainErrorKind.DIVISION_BY_ZERO


class TestBracketBalance:
    """Баланс begin()/end() на каждом префиксе."""

    SEQUENCES = ["", "()", "(())", "()()", "(()())", ")(", "(", ")", "(()", "())", "())(", "((()))"]

    @pytest.mark.parametrize("domain", DOMAINS)
    @pytest.mark.parametrize("sequence", SEQUENCES)
    def test_value_succeeds_only_when_balanced(self, domain, sequence):
        chain = new_chain(domain, 3)
        for ch in sequence:
            if ch == "(":
                chain.begin().add(1)
            else:
                chain.end()

        val, err = chain.value()
        if _is_balanced(sequence):
            assert err is None
            assert val is not None
        else:
            assert val is None
            assert err.kind == ChainErrorKind.MISMATCHED_BRACKETS


class TestGroupingAlgebra:
    """begin().add(k).end() на v даёт v + k."""

    @pytest.mark.parametrize("domain", DOMAINS)
    @pytest.mark.parametrize("v", [0, 7, -12, "0x20"])
    @pytest.mark.parametrize("k", [0, 3, -100, "15"])
    def test_group_add(self, domain, v, k):
        grouped = new_chain(domain, v).begin().add(k).end().unwrap()
        plain = new_chain(domain, v).add(k).unwrap()
        assert grouped == plain
