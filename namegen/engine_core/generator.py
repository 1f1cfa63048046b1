"""
Name Generator - Public entry point of the engine.

Flow for generate(name):
1. Look up the grammar in the store
2. Select a rule (weighted by its acceptance prefix)
3. Expand the rule into a candidate word
4. Reject and re-expand the same rule until the candidate is legal

generate_custom(name, rule) skips step 2 and expands the given rule as is.

Both rejection loops (rule selection and word validation) are unbounded
unless max_attempts is set. With realistic grammars they terminate
almost surely.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
import random

import structlog

from ..grammar.errors import EmptyOrMalformedRule, RetryLimitExceeded
from ..grammar.loader import read_source
from ..grammar.model import Grammar
from ..grammar.parser import GrammarParser
from .builder import expand, tokenize
from .selector import select_rule
from .store import GrammarStore

logger = structlog.get_logger(__name__)


def is_legal(grammar: Grammar, word: str) -> bool:
    """A word is legal if non-empty and free of every illegal substring."""
    if not word:
        return False
    return not any(illegal in word for illegal in grammar.illegal)


def check_rule(rule: str | None) -> str:
    """Reject rules that can never produce a word."""
    if rule is None or not rule.strip():
        raise EmptyOrMalformedRule(rule or "")
    if not tokenize(rule):
        raise EmptyOrMalformedRule(rule, "rule contains no tokens")
    return rule


def build_word(
    grammar: Grammar,
    rule: str,
    rng: random.Random,
    max_attempts: int | None = None,
) -> str:
    """
    Expand a rule until it yields a legal word.

    Raises:
        RetryLimitExceeded: max_attempts candidates were all rejected
    """
    attempts = 0
    while max_attempts is None or attempts < max_attempts:
        attempts += 1
        word = expand(grammar, rule, rng)
        if is_legal(grammar, word):
            return word

    logger.warning(
        "word_validation_exhausted",
        grammar=grammar.name,
        rule=rule,
        attempts=attempts,
    )
    raise RetryLimitExceeded("word validation", attempts, grammar.name)


@dataclass
class NameGenerator:
    """
    Loads grammars and generates names from them.

    Usage:
        generator = NameGenerator(seed=42)
        generator.load_file("fantasy")
        generator.generate("Fantasy male")
        generator.generate_custom("Fantasy male", "$s$v$e")

    Every generation method accepts an explicit ``rng`` to use instead of
    the generator's own random source.
    """
    store: GrammarStore = field(default_factory=GrammarStore)
    rng: random.Random | None = None
    seed: int | None = None
    max_attempts: int | None = None
    parser: GrammarParser = field(default_factory=GrammarParser)

    def __post_init__(self):
        if self.rng is None:
            self.rng = random.Random(self.seed)
        if self.max_attempts is not None and self.max_attempts < 1:
            raise ValueError("max_attempts must be >= 1")

    # =========================================================================
    # Loading
    # =========================================================================

    def load_grammars(self, source_text: str) -> list[str]:
        """
        Parse grammar text and register every grammar it defines.

        The load is atomic: on any ParseError no grammar from this text
        is registered.

        Returns:
            Names of the loaded grammars, in source order
        """
        grammars = self.parser.parse(source_text)
        names = self.store.register_all(grammars)
        logger.info("grammars_loaded", count=len(names), grammars=names)
        return names

    def load_file(self, source: str | Path) -> list[str]:
        """
        Load grammars from a file path or bundled grammar name.

        Raises:
            SourceUnreadable: the file is missing or unreadable
        """
        return self.load_grammars(read_source(source))

    # =========================================================================
    # Queries
    # =========================================================================

    def list_grammars(self) -> set[str]:
        return self.store.names()

    def get_grammar(self, name: str) -> Grammar:
        return self.store.get(name)

    # =========================================================================
    # Generation
    # =========================================================================

    def generate(self, name: str, rng: random.Random | None = None) -> str:
        """Generate a name from a grammar's own rules."""
        grammar = self.store.get(name)
        rng = rng or self.rng
        rule = select_rule(grammar, rng, self.max_attempts)
        return build_word(grammar, check_rule(rule), rng, self.max_attempts)

    def generate_custom(
        self,
        name: str,
        rule: str,
        rng: random.Random | None = None,
    ) -> str:
        """Generate a name from a grammar's pools using a caller-supplied rule."""
        grammar = self.store.get(name)
        rule = check_rule(rule)
        return build_word(grammar, rule, rng or self.rng, self.max_attempts)

    def generate_many(
        self,
        name: str,
        count: int,
        rule: str | None = None,
        rng: random.Random | None = None,
    ) -> list[str]:
        """Generate several names, with the grammar's rules or a custom rule."""
        if rule is None:
            return [self.generate(name, rng) for _ in range(count)]
        return [self.generate_custom(name, rule, rng) for _ in range(count)]
