# workflows/tests/test_guards.py

from django.test import SimpleTestCase

from workflows.resource_types import DEAL, RESOURCE_TYPES
from workflows.services.exceptions import IllegalTransitionError
from workflows.services.guards import can_transition, validate_transition
from workflows.services.transition_table import terminal_states


class GuardTests(SimpleTestCase):
    def test_allowed_deal_edges(self):
        self.assertTrue(can_transition(DEAL.transitions, from_status="lead", to_status="viewing"))
        self.assertTrue(can_transition(DEAL.transitions, from_status="lead", to_status="lost"))
        self.assertTrue(can_transition(DEAL.transitions, from_status="contract", to_status="closed"))

    def test_skipping_ahead_is_rejected(self):
        self.assertFalse(can_transition(DEAL.transitions, from_status="lead", to_status="contract"))

    def test_rejection_message_names_both_states(self):
        with self.assertRaises(IllegalTransitionError) as ctx:
            validate_transition(DEAL.transitions, from_status="lead", to_status="contract")

        self.assertEqual(str(ctx.exception), "Cannot transition from lead to contract")
        self.assertEqual(ctx.exception.from_status, "lead")
        self.assertEqual(ctx.exception.to_status, "contract")

    def test_unknown_source_status_is_rejected(self):
        self.assertFalse(can_transition(DEAL.transitions, from_status="archived", to_status="lead"))

    def test_terminal_states_reject_everything(self):
        for resource_type in RESOURCE_TYPES.values():
            for terminal in terminal_states(resource_type.transitions):
                for target in resource_type.states:
                    with self.subTest(resource_type=resource_type.tag, source=terminal, target=target):
                        self.assertFalse(
                            can_transition(
                                resource_type.transitions,
                                from_status=terminal,
                                to_status=target,
                            )
                        )

    def test_guard_matches_table_for_all_pairs(self):
        for resource_type in RESOURCE_TYPES.values():
            table = resource_type.transitions
            for source in resource_type.states:
                for target in resource_type.states:
                    expected = target in table.get(source, frozenset())
                    with self.subTest(resource_type=resource_type.tag, source=source, target=target):
                        self.assertEqual(
                            can_transition(table, from_status=source, to_status=target),
                            expected,
                        )
