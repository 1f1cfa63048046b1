"""
Word Builder - Expands a rule into a candidate word.

Rule syntax:
- ``$s``   a token: ``$``, then a kind letter
- ``$50s`` a token with a 50% inclusion chance (default 100)
- ``$s_``  a token followed by placeholders, each emitting a space

Kind letters:
- P: pre syllable      s: start syllable    m: middle syllable
- e: end syllable      p: post syllable
- v: vocal phoneme     c: consonant phoneme
- ?: vocal or consonant, decided by a coin flip per occurrence

Anything in a rule that is not part of a token is dropped.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
import random
import re

from ..grammar.model import Grammar, PoolKind

PLACEHOLDER = "_"

_TOKEN_PATTERN = re.compile(
    r"\$(?P<chance>[0-9]*)(?P<kind>[Psmepvc?])(?P<blanks>_+)?"
)
_PLACEHOLDER_RUN = re.compile(r"_{2,}")


class TokenKind(Enum):
    """Token kind letters."""
    PRE = "P"
    START = "s"
    MIDDLE = "m"
    END = "e"
    POST = "p"
    VOCAL = "v"
    CONSONANT = "c"
    EITHER = "?"  # vocal or consonant


_KIND_POOLS: dict[TokenKind, PoolKind] = {
    TokenKind.PRE: PoolKind.PRE,
    TokenKind.START: PoolKind.START,
    TokenKind.MIDDLE: PoolKind.MIDDLE,
    TokenKind.END: PoolKind.END,
    TokenKind.POST: PoolKind.POST,
    TokenKind.VOCAL: PoolKind.VOCAL,
    TokenKind.CONSONANT: PoolKind.CONSONANT,
}


@dataclass(frozen=True)
class Token:
    """A single substitution in a rule."""
    kind: TokenKind
    chance: int = 100
    blanks: str = ""


@lru_cache(maxsize=1024)
def tokenize(rule: str) -> tuple[Token, ...]:
    """Scan a rule for tokens, left to right."""
    return tuple(
        Token(
            kind=TokenKind(match.group("kind")),
            chance=int(match.group("chance")) if match.group("chance") else 100,
            blanks=match.group("blanks") or "",
        )
        for match in _TOKEN_PATTERN.finditer(rule)
    )


def pick(pool: tuple[str, ...], rng: random.Random) -> str:
    """Uniformly random element of a pool, or "" for an empty pool."""
    if not pool:
        return ""
    return pool[rng.randrange(len(pool))]


def resolve_pool(grammar: Grammar, kind: TokenKind, rng: random.Random) -> tuple[str, ...]:
    """Pool a token kind draws from."""
    if kind is TokenKind.EITHER:
        if rng.random() < 0.5:
            return grammar.vocals
        return grammar.consonants
    return grammar.pool(_KIND_POOLS[kind])


def expand(grammar: Grammar, rule: str, rng: random.Random) -> str:
    """
    Expand a rule into a finished candidate word.

    Each token draws its inclusion independently. Placeholders after a
    token are kept even when the token itself emits nothing.
    """
    parts: list[str] = []
    for token in tokenize(rule):
        if rng.randint(0, 100) <= token.chance:
            parts.append(pick(resolve_pool(grammar, token.kind, rng), rng))
        if token.blanks:
            parts.append(token.blanks)
    return finalize("".join(parts))


def finalize(raw: str) -> str:
    """Collapse placeholder runs, turn placeholders into spaces, trim spaces."""
    collapsed = _PLACEHOLDER_RUN.sub(PLACEHOLDER, raw)
    return collapsed.replace(PLACEHOLDER, " ").strip(" ")
