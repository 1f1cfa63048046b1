"""
Pytest fixtures for namegen tests.
"""

import random

import pytest
import structlog

from ..engine_core import NameGenerator
from ..grammar import Grammar, PoolKind


SIMPLE_SOURCE = """
name "t" { syllablesStart = "ka,ta" rules = "$s" }
"""

ELVES_SOURCE = """
// Two small grammars used across tests.
name "Elves" {
    syllablesStart = "Ael, Gal, Lor"
    syllablesMiddle = "a, e, i"
    syllablesEnd = "dor, wen, ion"
    phonemesVocals = "a, e"
    phonemesConsonants = "l, n"
    illegal = "aa"
    rules = "$s$e, $s$m$e"
}

name "Dwarves" {
    syllablesStart = "Dur, Thor, Bal"
    syllablesEnd = "in, ak, ur"
    rules = "$s$e"
}
"""


@pytest.fixture(autouse=True)
def _reset_structlog():
    """Undo any structlog configuration a test made (e.g. via the CLI)."""
    yield
    structlog.reset_defaults()


class FixedDrawRandom(random.Random):
    """
    Random source whose inclusion/acceptance draws are fixed.

    randint() always returns ``draw``; element picks (randrange) and coin
    flips (random) still come from the seeded generator.
    """

    def __init__(self, draw: int, seed: int = 0):
        super().__init__(seed)
        self.draw = draw

    def randint(self, a, b):
        return self.draw


@pytest.fixture
def always_accept() -> FixedDrawRandom:
    """Every chance draw passes (draw 0)."""
    return FixedDrawRandom(0)


@pytest.fixture
def always_reject() -> FixedDrawRandom:
    """Every chance below 100 fails (draw 100)."""
    return FixedDrawRandom(100)


@pytest.fixture
def generator() -> NameGenerator:
    """Seeded generator with the Elves and Dwarves grammars loaded."""
    gen = NameGenerator(seed=1)
    gen.load_grammars(ELVES_SOURCE)
    return gen


@pytest.fixture
def ab_grammar() -> Grammar:
    """Grammar with one start and one middle syllable."""
    return Grammar.from_pools("ab", {
        PoolKind.START: ["a"],
        PoolKind.MIDDLE: ["b"],
        PoolKind.RULE: ["$50s$m"],
    })
