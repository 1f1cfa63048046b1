"""
Tests for the word builder.

Tests:
- Token scanning
- Inclusion chances
- Pool resolution (including the ? token and empty pools)
- Placeholder handling and trimming
"""

import random

from ..engine_core import Token, TokenKind, tokenize, expand, finalize
from ..grammar import Grammar, PoolKind
from .conftest import FixedDrawRandom


class TestTokenize:
    """Tests for token scanning."""

    def test_simple_tokens(self):
        assert tokenize("$s$e") == (
            Token(kind=TokenKind.START),
            Token(kind=TokenKind.END),
        )

    def test_chance_and_blanks(self):
        assert tokenize("$35m__") == (
            Token(kind=TokenKind.MIDDLE, chance=35, blanks="__"),
        )

    def test_all_kinds(self):
        kinds = [token.kind for token in tokenize("$P$s$m$e$p$v$c$?")]
        assert kinds == list(TokenKind)

    def test_literal_text_is_not_a_token(self):
        assert tokenize("abc s e") == ()
        assert tokenize("x$sy") == (Token(kind=TokenKind.START),)

    def test_unknown_kind_letter_is_skipped(self):
        assert tokenize("$x$s") == (Token(kind=TokenKind.START),)

    def test_rule_prefix_dollar_starts_a_token(self):
        """In %50$s the prefix digits are dropped and $s is a token."""
        assert tokenize("%50$s") == (Token(kind=TokenKind.START),)


class TestFinalize:
    """Tests for placeholder post-processing."""

    def test_placeholder_becomes_space(self):
        assert finalize("Old_Town") == "Old Town"

    def test_runs_collapse_to_one_space(self):
        assert finalize("a____b") == "a b"

    def test_outer_spaces_trimmed(self):
        assert finalize("__a_b__") == "a b"

    def test_only_placeholders(self):
        assert finalize("___") == ""


class TestExpand:
    """Tests for expand."""

    def test_chance_accepted(self, ab_grammar, always_accept):
        assert expand(ab_grammar, "$50s$m", always_accept) == "ab"

    def test_chance_rejected(self, ab_grammar, always_reject):
        assert expand(ab_grammar, "$50s$m", always_reject) == "b"

    def test_zero_chance_token_passes_on_zero_draw(self, ab_grammar, always_accept):
        assert expand(ab_grammar, "$0s", always_accept) == "a"

    def test_empty_pool_emits_nothing(self, ab_grammar, always_accept):
        assert expand(ab_grammar, "$e$s$p", always_accept) == "a"

    def test_blanks_emitted_even_when_token_skipped(self, ab_grammar, always_reject):
        assert expand(ab_grammar, "$m$10s_$m", always_reject) == "b b"

    def test_blanks_between_tokens(self, ab_grammar, always_accept):
        assert expand(ab_grammar, "$s__$m", always_accept) == "a b"

    def test_literal_text_dropped(self, ab_grammar, always_accept):
        assert expand(ab_grammar, "x$s-y$m z", always_accept) == "ab"

    def test_either_token_uses_both_pools(self):
        grammar = Grammar.from_pools("vc", {
            PoolKind.VOCAL: ["a"],
            PoolKind.CONSONANT: ["k"],
        })
        rng = random.Random(5)
        results = {expand(grammar, "$?", rng) for _ in range(100)}
        assert results == {"a", "k"}

    def test_either_token_with_one_empty_pool(self):
        grammar = Grammar.from_pools("v", {PoolKind.VOCAL: ["a"]})
        rng = FixedDrawRandom(0, seed=2)
        results = {expand(grammar, "$?", rng) for _ in range(50)}
        assert results == {"a", ""}

    def test_pool_elements_uniform(self):
        grammar = Grammar.from_pools("g", {PoolKind.START: ["a", "b", "c"]})
        rng = random.Random(9)
        results = [expand(grammar, "$s", rng) for _ in range(300)]
        assert {"a", "b", "c"} == set(results)
        assert all(results.count(x) > 50 for x in "abc")

    def test_seeded_expansion_is_deterministic(self, ab_grammar):
        rule = "$50s$50m$s_$m"
        first = [expand(ab_grammar, rule, random.Random(4)) for _ in range(3)]
        second = [expand(ab_grammar, rule, random.Random(4)) for _ in range(3)]
        assert first == second
