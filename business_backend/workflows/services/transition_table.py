# workflows/services/transition_table.py

"""
TRANSITION TABLES

A transition table maps a status to the set of statuses it may move to.

RULES:
- Tables are immutable once built
- A status with no entry (or an empty entry) is terminal
- Looking up an unknown status is never an error
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Mapping

TransitionTable = Mapping[str, frozenset]

_NO_TARGETS: frozenset = frozenset()


def build_table(edges: Mapping[str, Iterable[str]]) -> TransitionTable:
    return MappingProxyType(
        {source: frozenset(targets) for source, targets in edges.items()}
    )


def allowed_targets(table: TransitionTable, status: str) -> frozenset:
    return table.get(status, _NO_TARGETS)


def all_states(table: TransitionTable) -> frozenset:
    states = set(table.keys())
    for targets in table.values():
        states.update(targets)
    return frozenset(states)


def terminal_states(table: TransitionTable) -> frozenset:
    return frozenset(s for s in all_states(table) if not allowed_targets(table, s))


def has_cycle(table: TransitionTable) -> bool:
    """
    Depth-first search for a back edge.

    Most tables only move records forward; a few (subscriptions,
    legal cases) deliberately allow a status to be re-entered.
    """
    visiting: set[str] = set()
    done: set[str] = set()

    def visit(state: str) -> bool:
        if state in done:
            return False
        if state in visiting:
            return True
        visiting.add(state)
        for target in allowed_targets(table, state):
            if visit(target):
                return True
        visiting.discard(state)
        done.add(state)
        return False

    return any(visit(state) for state in sorted(table.keys()))
