"""Grammar definitions - data model, errors, parser and file loading."""

from .errors import (
    NamegenError,
    SourceUnreadable,
    ParseError,
    MalformedGrammarBlock,
    UnrecognizedPoolKey,
    DuplicateGrammarName,
    GenerationError,
    UnknownGrammar,
    EmptyRuleSet,
    EmptyOrMalformedRule,
    RetryLimitExceeded,
)
from .model import Grammar, PoolKind
from .parser import GrammarParser, parse_grammars
from .loader import read_source, resolve_source

__all__ = [
    "NamegenError",
    "SourceUnreadable",
    "ParseError",
    "MalformedGrammarBlock",
    "UnrecognizedPoolKey",
    "DuplicateGrammarName",
    "GenerationError",
    "UnknownGrammar",
    "EmptyRuleSet",
    "EmptyOrMalformedRule",
    "RetryLimitExceeded",
    "Grammar",
    "PoolKind",
    "GrammarParser",
    "parse_grammars",
    "read_source",
    "resolve_source",
]
