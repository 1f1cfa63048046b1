"""
Grammar Parser - Turns grammar definition text into Grammars.

Text format (libtcod namegen dialect):

    name "Mingos dwarf" {
        syllablesStart = "Dur, Thor, Bal"
        syllablesEnd   = "in, ak, ur"
        illegal        = "rr"
        rules          = "$s$e, %50$s$m$e"
    }

- The ``name`` keyword is case-insensitive; the grammar name is a
  double-quoted literal.
- The body runs to the first closing brace.
- Each assignment is ``<pool-key> = ... "<comma-separated-values>"``;
  several may share a line.
  Text between ``=`` and the first quote is ignored.
- ``//`` line comments and ``/* */`` block comments are ignored.

Parsing is all-or-nothing: a source either yields every grammar it
defines or raises a ParseError. Nothing is registered anywhere by the
parser itself; see GrammarStore.register_all for the commit step.
"""

from __future__ import annotations
import re

from .errors import DuplicateGrammarName, MalformedGrammarBlock
from .model import Grammar, PoolKind


# Quoted strings are matched (and kept) so comment markers inside them survive.
_COMMENT_PATTERN = re.compile(
    r'(?P<quoted>"[^"]*")|(?P<line>//[^\n]*)|(?P<block>/\*.*?\*/)',
    re.DOTALL,
)

_BLOCK_PATTERN = re.compile(
    r'name\s*"(?P<name>[^"\n]*)"\s*\{(?P<body>[^}]*)\}',
    re.IGNORECASE,
)

_ASSIGNMENT_PATTERN = re.compile(
    r'(?P<key>[^\s="]+)\s*=[^"\n]*"(?P<values>[^"]*)"'
)


def strip_comments(text: str) -> str:
    """
    Remove comments from grammar text.

    Block comments are replaced by their newlines so line numbers in
    error messages still refer to the original text.
    """
    def _replace(match: re.Match) -> str:
        if match.group("quoted") is not None:
            return match.group("quoted")
        if match.group("block") is not None:
            return "\n" * match.group("block").count("\n")
        return ""

    return _COMMENT_PATTERN.sub(_replace, text)


def split_values(raw: str) -> list[str]:
    """Split a quoted value list on commas, trimming each element."""
    return [value.strip() for value in raw.split(",")]


class GrammarParser:
    """
    Parses grammar definition text.

    Usage:
        parser = GrammarParser()
        grammars = parser.parse(text)
    """

    def parse(self, text: str) -> list[Grammar]:
        """
        Parse every grammar block in the text.

        Raises:
            MalformedGrammarBlock: text outside blocks, unterminated block,
                empty grammar name, or non-assignment text inside a body
            UnrecognizedPoolKey: a body assignment uses an unknown key
            DuplicateGrammarName: two blocks share a name
        """
        text = strip_comments(text)
        grammars: list[Grammar] = []
        seen: set[str] = set()

        position = 0
        for match in _BLOCK_PATTERN.finditer(text):
            self._check_gap(text, position, match.start())
            position = match.end()

            name = match.group("name")
            if not name.strip():
                raise MalformedGrammarBlock(
                    "grammar name cannot be empty",
                    line=_line_of(text, match.start()),
                )
            if name in seen:
                raise DuplicateGrammarName(name)
            seen.add(name)

            body_line = _line_of(text, match.start("body"))
            grammars.append(self._parse_body(name, match.group("body"), body_line))

        self._check_gap(text, position, len(text))
        return grammars

    def _parse_body(self, name: str, body: str, first_line: int) -> Grammar:
        """Parse the assignments of one block into a Grammar."""
        pools: dict[PoolKind, list[str]] = {}

        position = 0
        for match in _ASSIGNMENT_PATTERN.finditer(body):
            leftover = body[position:match.start()]
            if leftover.strip():
                raise MalformedGrammarBlock(
                    f"unexpected text in grammar '{name}': {leftover.strip()!r}",
                    line=first_line + body.count("\n", 0, position),
                )
            position = match.end()

            kind = PoolKind.from_key(match.group("key"), grammar_name=name)
            values = split_values(match.group("values"))
            if kind is PoolKind.ILLEGAL:
                # An empty illegal string would match every word.
                values = [value for value in values if value]
            pools.setdefault(kind, []).extend(values)

        leftover = body[position:]
        if leftover.strip():
            raise MalformedGrammarBlock(
                f"unexpected text in grammar '{name}': {leftover.strip()!r}",
                line=first_line + body.count("\n", 0, position),
            )

        return Grammar.from_pools(name, pools)

    def _check_gap(self, text: str, start: int, end: int):
        """Text between blocks must be whitespace."""
        gap = text[start:end]
        if gap.strip():
            offset = start + (len(gap) - len(gap.lstrip()))
            snippet = gap.strip().splitlines()[0][:40]
            raise MalformedGrammarBlock(
                f"expected 'name \"...\" {{ ... }}', found {snippet!r}",
                line=_line_of(text, offset),
            )


def _line_of(text: str, offset: int) -> int:
    return text.count("\n", 0, offset) + 1


def parse_grammars(text: str) -> list[Grammar]:
    """
    Convenience function to parse grammar text.
    """
    return GrammarParser().parse(text)
