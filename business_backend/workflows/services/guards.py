# workflows/services/guards.py

"""
TRANSITION GUARDS

Legality depends ONLY on (from_status, to_status) and the table.

DESIGN PRINCIPLES:
- No database access
- No inspection of other record fields
- Same-status requests are not transitions; callers skip the guard
"""

from workflows.services.exceptions import IllegalTransitionError
from workflows.services.transition_table import TransitionTable, allowed_targets


def can_transition(
    table: TransitionTable, *, from_status: str, to_status: str
) -> bool:
    return to_status in allowed_targets(table, from_status)


def validate_transition(
    table: TransitionTable, *, from_status: str, to_status: str
) -> None:
    if not can_transition(table, from_status=from_status, to_status=to_status):
        raise IllegalTransitionError(from_status, to_status)
