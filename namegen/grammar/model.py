"""
Grammar Model - Named bundles of fragment pools and generation rules.

A grammar holds nine pools:
- Syllables: pre, start, middle, end, post
- Phonemes: vocals, consonants
- Illegal substrings that disqualify a generated word
- Rules: templates expanded into words

Grammars are immutable once built. The parser accumulates pool values
block by block and only then constructs the Grammar.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum

from .errors import UnrecognizedPoolKey


class PoolKind(Enum):
    """Pool kinds, valued by their key in the grammar file dialect."""
    PRE = "syllablesPre"
    START = "syllablesStart"
    MIDDLE = "syllablesMiddle"
    END = "syllablesEnd"
    POST = "syllablesPost"
    VOCAL = "phonemesVocals"
    CONSONANT = "phonemesConsonants"
    ILLEGAL = "illegal"
    RULE = "rules"

    @property
    def key(self) -> str:
        return self.value

    @property
    def field_name(self) -> str:
        return _FIELD_NAMES[self]

    @classmethod
    def from_key(cls, key: str, grammar_name: str | None = None) -> PoolKind:
        """
        Map a pool key from a grammar file to its kind.

        Keys are case-sensitive. Anything outside the nine known keys
        raises UnrecognizedPoolKey.
        """
        try:
            return _KEY_TO_KIND[key]
        except KeyError:
            raise UnrecognizedPoolKey(key, grammar_name) from None


_KEY_TO_KIND: dict[str, PoolKind] = {kind.value: kind for kind in PoolKind}

_FIELD_NAMES: dict[PoolKind, str] = {
    PoolKind.PRE: "pre",
    PoolKind.START: "start",
    PoolKind.MIDDLE: "middle",
    PoolKind.END: "end",
    PoolKind.POST: "post",
    PoolKind.VOCAL: "vocals",
    PoolKind.CONSONANT: "consonants",
    PoolKind.ILLEGAL: "illegal",
    PoolKind.RULE: "rules",
}


@dataclass(frozen=True)
class Grammar:
    """
    A named grammar.

    Usage:
        grammar = Grammar.from_pools("elves", {
            PoolKind.START: ["ka", "ta"],
            PoolKind.RULE: ["$s"],
        })
        grammar.pool(PoolKind.START)  # ("ka", "ta")
    """
    name: str
    pre: tuple[str, ...] = ()
    start: tuple[str, ...] = ()
    middle: tuple[str, ...] = ()
    end: tuple[str, ...] = ()
    post: tuple[str, ...] = ()
    vocals: tuple[str, ...] = ()
    consonants: tuple[str, ...] = ()
    illegal: tuple[str, ...] = ()
    rules: tuple[str, ...] = ()

    @classmethod
    def from_pools(cls, name: str, pools: dict[PoolKind, list[str]]) -> Grammar:
        """Build a grammar from accumulated pool values."""
        return cls(
            name=name,
            **{kind.field_name: tuple(values) for kind, values in pools.items()},
        )

    def pool(self, kind: PoolKind) -> tuple[str, ...]:
        """Get the pool for a kind."""
        return getattr(self, kind.field_name)

    def pool_sizes(self) -> dict[str, int]:
        """Element count per pool, keyed by grammar file key."""
        return {kind.key: len(self.pool(kind)) for kind in PoolKind}
