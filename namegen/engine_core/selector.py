"""
Rule Selector - Picks a generation rule from a grammar.

A rule may carry an acceptance chance as a prefix: ``%25$s$e`` is picked
25% of the time it is drawn. Rules without a prefix always pass.

Selection is rejection sampling:
1. Draw a rule uniformly from the grammar's rules pool
2. Draw an integer in [0, 100]
3. Accept if the draw is <= the rule's chance, else start over

The loop is unbounded unless max_attempts is given.
"""

from __future__ import annotations
import random
import re

import structlog

from ..grammar.errors import EmptyOrMalformedRule, EmptyRuleSet, RetryLimitExceeded
from ..grammar.model import Grammar

logger = structlog.get_logger(__name__)

_PREFIX_PATTERN = re.compile(r"%(?P<chance>[0-9]+)\$")


def rule_acceptance(rule: str) -> int:
    """
    Acceptance chance of a rule, in percent.

    ``%NN$...`` gives NN; anything not starting with ``%`` gives 100.
    A ``%`` prefix without digits or without a closing ``$`` is malformed.
    """
    if not rule.startswith("%"):
        return 100

    match = _PREFIX_PATTERN.match(rule)
    if not match:
        raise EmptyOrMalformedRule(rule, "malformed acceptance prefix")
    return int(match.group("chance"))


def select_rule(
    grammar: Grammar,
    rng: random.Random,
    max_attempts: int | None = None,
) -> str:
    """
    Select a rule from a grammar.

    Args:
        grammar: Grammar to pick from
        rng: Random source
        max_attempts: Give up after this many draws (None = never)

    Returns:
        The rule text, prefix included
    """
    if not grammar.rules:
        raise EmptyRuleSet(grammar.name)

    attempts = 0
    while max_attempts is None or attempts < max_attempts:
        attempts += 1
        rule = grammar.rules[rng.randrange(len(grammar.rules))]
        chance = rule_acceptance(rule)
        if rng.randint(0, 100) <= chance:
            return rule

    logger.warning(
        "rule_selection_exhausted",
        grammar=grammar.name,
        attempts=attempts,
    )
    raise RetryLimitExceeded("rule selection", attempts, grammar.name)
