"""
Grammar Store - In-memory registry of parsed grammars.

The store:
- Maps grammar name to Grammar (case-sensitive)
- Never overwrites: a duplicate name is an error
- Commits a whole load at once (register_all) or not at all
- Remembers registration order for first() access

Once populated the store is only read, so concurrent readers need no
locking. Concurrent population is not supported.
"""

from __future__ import annotations
from typing import Iterable, Iterator

from ..grammar.errors import DuplicateGrammarName, UnknownGrammar
from ..grammar.model import Grammar


class GrammarStore:
    """
    Registry of grammars by name.

    Usage:
        store = GrammarStore()
        store.register_all(parse_grammars(text))
        grammar = store.get("Mingos dwarf")
    """

    def __init__(self, grammars: Iterable[Grammar] = ()):
        self._grammars: dict[str, Grammar] = {}
        self.register_all(grammars)

    def register_all(self, grammars: Iterable[Grammar]) -> list[str]:
        """
        Register grammars atomically.

        Every name is checked before anything is inserted, so a duplicate
        leaves the store unchanged.

        Returns:
            Names registered, in order
        """
        grammars = list(grammars)
        incoming: set[str] = set()
        for grammar in grammars:
            if grammar.name in self._grammars or grammar.name in incoming:
                raise DuplicateGrammarName(grammar.name)
            incoming.add(grammar.name)

        for grammar in grammars:
            self._grammars[grammar.name] = grammar
        return [grammar.name for grammar in grammars]

    def get(self, name: str) -> Grammar:
        """Get a grammar by name, raising UnknownGrammar if absent."""
        grammar = self._grammars.get(name)
        if grammar is None:
            raise UnknownGrammar(name)
        return grammar

    def names(self) -> set[str]:
        """All registered grammar names."""
        return set(self._grammars)

    def first(self) -> Grammar:
        """The first registered grammar."""
        for grammar in self._grammars.values():
            return grammar
        raise UnknownGrammar("<any>")

    def __contains__(self, name: object) -> bool:
        return name in self._grammars

    def __len__(self) -> int:
        return len(self._grammars)

    def __iter__(self) -> Iterator[Grammar]:
        return iter(self._grammars.values())
