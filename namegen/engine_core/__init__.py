"""Engine core - grammar store, rule selection, word building and generation."""

from .store import GrammarStore
from .selector import select_rule, rule_acceptance
from .builder import Token, TokenKind, tokenize, expand, finalize
from .generator import NameGenerator, build_word, is_legal

__all__ = [
    "GrammarStore",
    "select_rule",
    "rule_acceptance",
    "Token",
    "TokenKind",
    "tokenize",
    "expand",
    "finalize",
    "NameGenerator",
    "build_word",
    "is_legal",
]
