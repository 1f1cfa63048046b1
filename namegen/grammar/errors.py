"""
Namegen errors.

Every failure the engine reports is a distinct exception type carrying a
stable ``code`` string, so callers (CLI, HTTP API) can inspect it without
parsing messages.

Hierarchy:
- SourceUnreadable: grammar text could not be obtained
- ParseError: grammar text was obtained but is invalid
- GenerationError: a name could not be produced
"""

from __future__ import annotations


class NamegenError(Exception):
    """Base class for all namegen errors."""

    code = "NAMEGEN_ERROR"


class SourceUnreadable(NamegenError):
    """Raised when a grammar source cannot be read."""

    code = "SOURCE_UNREADABLE"

    def __init__(self, source: str, reason: str = "does not exist"):
        self.source = source
        self.reason = reason
        super().__init__(f"Grammar source '{source}' {reason}")


class ParseError(NamegenError):
    """Raised when grammar source text is invalid."""

    code = "PARSE_ERROR"


class MalformedGrammarBlock(ParseError):
    """Brace, name or value syntax violation."""

    code = "MALFORMED_GRAMMAR_BLOCK"

    def __init__(self, message: str, line: int | None = None):
        self.line = line
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)


class UnrecognizedPoolKey(ParseError):
    """A body assignment used a key outside the fixed pool vocabulary."""

    code = "UNRECOGNIZED_POOL_KEY"

    def __init__(self, key: str, grammar_name: str | None = None):
        self.key = key
        self.grammar_name = grammar_name
        where = f" in grammar '{grammar_name}'" if grammar_name else ""
        super().__init__(f"Pool key not recognized{where}: '{key}'")


class DuplicateGrammarName(ParseError):
    """A grammar name is already defined."""

    code = "DUPLICATE_GRAMMAR_NAME"

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Grammar '{name}' is already defined")


class GenerationError(NamegenError):
    """Raised when a name cannot be generated."""

    code = "GENERATION_ERROR"


class UnknownGrammar(GenerationError):
    code = "UNKNOWN_GRAMMAR"

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Grammar '{name}' doesn't exist")


class EmptyRuleSet(GenerationError):
    code = "EMPTY_RULE_SET"

    def __init__(self, grammar_name: str):
        self.grammar_name = grammar_name
        super().__init__(f"Grammar '{grammar_name}' has no rules")


class EmptyOrMalformedRule(GenerationError):
    code = "EMPTY_OR_MALFORMED_RULE"

    def __init__(self, rule: str, reason: str = "rule cannot be empty"):
        self.rule = rule
        self.reason = reason
        super().__init__(f"{reason}: {rule!r}")


class RetryLimitExceeded(GenerationError):
    """A rejection-sampling loop hit its configured attempt cap."""

    code = "RETRY_LIMIT_EXCEEDED"

    def __init__(self, stage: str, attempts: int, grammar_name: str):
        self.stage = stage
        self.attempts = attempts
        self.grammar_name = grammar_name
        super().__init__(
            f"Grammar '{grammar_name}': {stage} gave up after {attempts} attempt(s)"
        )
