# workflows/resource_types.py

"""
RESOURCE TYPE DESCRIPTORS

One descriptor per kind of store-scoped record. The transition engine
is generic; everything resource-specific lives here:

- transitions:         status -> allowed next statuses
- initial_status:      status assigned at creation
- first_entry_stamps:  status -> timestamp field (first write wins)
- caller_sets_first_entry: a value supplied in the same request is kept
                       instead of the first-entry stamp
- entry_stamps:        status -> timestamp field (always "now")
- closing_states:      statuses that trigger commission splitting
- commission_policy:   rate defaults + price resolution order
- deletable_states:    statuses in which the record may be deleted
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from workflows.services.commission import CommissionPolicy
from workflows.services.transition_table import (
    TransitionTable,
    all_states,
    build_table,
)


@dataclass(frozen=True)
class ResourceType:
    tag: str
    label: str
    transitions: TransitionTable
    initial_status: str
    first_entry_stamps: Mapping[str, str] = field(
        default_factory=lambda: MappingProxyType({})
    )
    entry_stamps: Mapping[str, str] = field(
        default_factory=lambda: MappingProxyType({})
    )
    caller_sets_first_entry: bool = False
    closing_states: frozenset = frozenset()
    commission_policy: CommissionPolicy | None = None
    deletable_states: frozenset | None = None

    @property
    def states(self) -> frozenset:
        return all_states(self.transitions) | {self.initial_status}

    def status_choices(self) -> list[tuple[str, str]]:
        return [(s, s.replace("_", " ").title()) for s in sorted(self.states)]

    def is_closing(self, status: str) -> bool:
        return status in self.closing_states

    def can_delete(self, status: str) -> bool:
        if self.deletable_states is None:
            return True
        return status in self.deletable_states


# ============================================================
# REAL ESTATE
# ============================================================

DEAL = ResourceType(
    tag="deal",
    label="Deal",
    initial_status="lead",
    transitions=build_table(
        {
            "lead": ["viewing", "lost"],
            "viewing": ["offer", "lost"],
            "offer": ["contract", "lost"],
            "contract": ["closed", "withdrawn"],
        }
    ),
    first_entry_stamps=MappingProxyType(
        {
            "viewing": "viewing_date",
            "offer": "offer_date",
            "contract": "contract_date",
        }
    ),
    entry_stamps=MappingProxyType(
        {
            "closed": "closed_date",
            "withdrawn": "withdrawn_date",
        }
    ),
    closing_states=frozenset({"closed"}),
    commission_policy=CommissionPolicy(),
    deletable_states=frozenset({"lead", "lost"}),
)


# ============================================================
# CLINICS
# ============================================================

ADMISSION = ResourceType(
    tag="admission",
    label="Admission",
    initial_status="admitted",
    transitions=build_table(
        {
            "admitted": ["discharged", "transferred"],
        }
    ),
    first_entry_stamps=MappingProxyType({"discharged": "discharge_at"}),
    caller_sets_first_entry=True,
)

LAB_ORDER = ResourceType(
    tag="lab_order",
    label="Lab order",
    initial_status="ordered",
    transitions=build_table(
        {
            "ordered": ["collected", "cancelled"],
            "collected": ["processing", "cancelled"],
            "processing": ["completed", "cancelled"],
        }
    ),
    first_entry_stamps=MappingProxyType(
        {
            "collected": "collection_time",
            "completed": "completed_at",
        }
    ),
    caller_sets_first_entry=True,
    deletable_states=frozenset({"ordered", "cancelled"}),
)

COMPLAINT = ResourceType(
    tag="complaint",
    label="Complaint",
    initial_status="open",
    transitions=build_table(
        {
            "open": ["assigned", "closed"],
            "assigned": ["reviewed", "closed"],
            "reviewed": ["resolved", "closed"],
            "resolved": ["closed"],
        }
    ),
    first_entry_stamps=MappingProxyType({"resolved": "resolved_at"}),
    entry_stamps=MappingProxyType({"closed": "closed_at"}),
)


# ============================================================
# SUBSCRIPTIONS
# ============================================================

SUBSCRIPTION = ResourceType(
    tag="subscription",
    label="Subscription",
    initial_status="active",
    transitions=build_table(
        {
            "active": ["paused", "cancelled", "expired"],
            "paused": ["active", "cancelled"],
        }
    ),
    entry_stamps=MappingProxyType({"cancelled": "cancelled_at"}),
    deletable_states=frozenset({"cancelled", "expired"}),
)


# ============================================================
# HOSPITALITY
# ============================================================

RESERVATION = ResourceType(
    tag="reservation",
    label="Reservation",
    initial_status="confirmed",
    transitions=build_table(
        {
            "confirmed": ["checked_in", "cancelled", "no_show"],
            "checked_in": ["checked_out"],
        }
    ),
    first_entry_stamps=MappingProxyType(
        {
            "checked_in": "actual_check_in",
            "checked_out": "actual_check_out",
        }
    ),
    caller_sets_first_entry=True,
    entry_stamps=MappingProxyType({"cancelled": "cancelled_at"}),
    deletable_states=frozenset({"cancelled", "no_show"}),
)


# ============================================================
# LEGAL PRACTICES
# ============================================================

LEGAL_CASE = ResourceType(
    tag="legal_case",
    label="Legal case",
    initial_status="open",
    transitions=build_table(
        {
            "open": ["in_progress", "closed"],
            "in_progress": ["pending_hearing", "settled", "closed"],
            "pending_hearing": ["in_progress", "settled", "closed"],
            "settled": ["closed", "archived"],
            "closed": ["archived"],
        }
    ),
    first_entry_stamps=MappingProxyType({"closed": "closed_at"}),
    entry_stamps=MappingProxyType({"archived": "archived_at"}),
)


RESOURCE_TYPES: Mapping[str, ResourceType] = MappingProxyType(
    {
        rt.tag: rt
        for rt in (
            DEAL,
            ADMISSION,
            LAB_ORDER,
            COMPLAINT,
            SUBSCRIPTION,
            RESERVATION,
            LEGAL_CASE,
        )
    }
)


def get_resource_type(tag: str) -> ResourceType:
    try:
        return RESOURCE_TYPES[tag]
    except KeyError as exc:
        raise LookupError(f"Unknown resource type: {tag}") from exc
