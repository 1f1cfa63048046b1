"""
Tests for the grammar store.
"""

import pytest

from ..engine_core import GrammarStore
from ..grammar import Grammar, DuplicateGrammarName, UnknownGrammar


def _grammar(name: str) -> Grammar:
    return Grammar(name=name, rules=("$s",))


class TestGrammarStore:
    """Tests for GrammarStore."""

    def test_get(self):
        store = GrammarStore([_grammar("a"), _grammar("b")])
        assert store.get("a").name == "a"

    def test_get_unknown(self):
        store = GrammarStore()
        with pytest.raises(UnknownGrammar) as exc_info:
            store.get("missing")
        assert exc_info.value.name == "missing"

    def test_names_are_case_sensitive(self):
        store = GrammarStore([_grammar("Elves")])
        assert "Elves" in store
        assert "elves" not in store
        with pytest.raises(UnknownGrammar):
            store.get("elves")

    def test_names(self):
        store = GrammarStore([_grammar("a"), _grammar("b")])
        assert store.names() == {"a", "b"}

    def test_first_follows_registration_order(self):
        store = GrammarStore()
        store.register_all([_grammar("z")])
        store.register_all([_grammar("a")])
        assert store.first().name == "z"
        assert [g.name for g in store] == ["z", "a"]

    def test_first_on_empty_store(self):
        with pytest.raises(UnknownGrammar):
            GrammarStore().first()

    def test_register_returns_names(self):
        store = GrammarStore()
        assert store.register_all([_grammar("a"), _grammar("b")]) == ["a", "b"]
        assert len(store) == 2


class TestAtomicRegistration:
    """A failed registration leaves the store untouched."""

    def test_duplicate_of_existing(self):
        store = GrammarStore([_grammar("a")])
        original = store.get("a")

        with pytest.raises(DuplicateGrammarName):
            store.register_all([_grammar("b"), Grammar(name="a")])

        assert store.names() == {"a"}
        assert store.get("a") is original

    def test_duplicate_within_batch(self):
        store = GrammarStore()
        with pytest.raises(DuplicateGrammarName):
            store.register_all([_grammar("x"), _grammar("x")])
        assert len(store) == 0
