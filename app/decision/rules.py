"""
Ordered rule tables.

A cascade of "first matching condition wins" checks is declared as a
tuple of :class:`Rule` objects instead of a chain of ``if`` statements,
so the precedence order is data that can be inspected and tested.

Each rule's ``outcome`` is an enum member (a tagged result); the caller
maps outcomes to concrete payloads through an exhaustive lookup table.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Generic, Iterable, Optional, TypeVar

logger = logging.getLogger(__name__)

C = TypeVar("C")
O = TypeVar("O")


@dataclass(frozen=True)
class Rule(Generic[C, O]):
    """A named ``(predicate, outcome)`` pair."""

    name: str
    predicate: Callable[[C], bool]
    outcome: O

    def matches(self, context: C) -> bool:
        return bool(self.predicate(context))


def always(_context: object) -> bool:
    """Predicate for a catch-all final rule."""
    return True


def first_match(rules: Iterable[Rule[C, O]], context: C) -> Optional[Rule[C, O]]:
    """Return the first rule whose predicate holds for *context*.

    Returns ``None`` when nothing matches; tables that end with an
    :func:`always` rule never do.
    """
    for rule in rules:
        if rule.matches(context):
            logger.debug("Rule %r matched", rule.name)
            return rule
    return None
