# workflows/tests/test_transition_table.py

from django.test import SimpleTestCase

from workflows.resource_types import (
    ADMISSION,
    COMPLAINT,
    DEAL,
    LAB_ORDER,
    LEGAL_CASE,
    RESERVATION,
    RESOURCE_TYPES,
    SUBSCRIPTION,
    get_resource_type,
)
from workflows.services.transition_table import (
    allowed_targets,
    all_states,
    build_table,
    has_cycle,
    terminal_states,
)


class TransitionTableTests(SimpleTestCase):
    """
    GUARANTEES:
    - Unknown statuses behave as terminal (empty allowed-set, no error)
    - Every reachable status is either a key or terminal
    - Tables cannot be mutated after construction
    """

    def test_unknown_status_has_no_targets(self):
        self.assertEqual(allowed_targets(DEAL.transitions, "does_not_exist"), frozenset())

    def test_deal_terminal_states(self):
        self.assertEqual(
            terminal_states(DEAL.transitions),
            frozenset({"closed", "lost", "withdrawn"}),
        )

    def test_deal_states_cover_full_lifecycle(self):
        self.assertEqual(
            DEAL.states,
            frozenset({"lead", "viewing", "offer", "contract", "closed", "withdrawn", "lost"}),
        )

    def test_every_reachable_status_is_key_or_terminal(self):
        for resource_type in RESOURCE_TYPES.values():
            table = resource_type.transitions
            terminals = terminal_states(table)
            for state in all_states(table):
                with self.subTest(resource_type=resource_type.tag, state=state):
                    self.assertTrue(state in table or state in terminals)

    def test_every_table_has_terminal_states(self):
        for resource_type in RESOURCE_TYPES.values():
            with self.subTest(resource_type=resource_type.tag):
                self.assertTrue(terminal_states(resource_type.transitions))

    def test_initial_status_is_not_terminal(self):
        for resource_type in RESOURCE_TYPES.values():
            with self.subTest(resource_type=resource_type.tag):
                self.assertTrue(
                    allowed_targets(resource_type.transitions, resource_type.initial_status)
                )

    def test_forward_only_tables_have_no_cycles(self):
        for resource_type in (DEAL, ADMISSION, LAB_ORDER, COMPLAINT, RESERVATION):
            with self.subTest(resource_type=resource_type.tag):
                self.assertFalse(has_cycle(resource_type.transitions))

    def test_reentrant_tables_are_detected(self):
        self.assertTrue(has_cycle(SUBSCRIPTION.transitions))
        self.assertTrue(has_cycle(LEGAL_CASE.transitions))

    def test_tables_are_read_only(self):
        with self.assertRaises(TypeError):
            DEAL.transitions["lead"] = frozenset({"closed"})

    def test_build_table_freezes_targets(self):
        table = build_table({"a": ["b", "b", "c"]})
        self.assertEqual(table["a"], frozenset({"b", "c"}))

    def test_lookup_by_tag(self):
        self.assertIs(get_resource_type("deal"), DEAL)
        with self.assertRaises(LookupError):
            get_resource_type("spaceship")

    def test_stamp_and_closing_states_exist_in_table(self):
        for resource_type in RESOURCE_TYPES.values():
            states = resource_type.states
            named = (
                set(resource_type.first_entry_stamps)
                | set(resource_type.entry_stamps)
                | set(resource_type.closing_states)
                | set(resource_type.deletable_states or ())
            )
            with self.subTest(resource_type=resource_type.tag):
                self.assertTrue(named <= states)
