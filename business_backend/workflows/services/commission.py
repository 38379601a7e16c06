# workflows/services/commission.py

"""
COMMISSION SPLITTING (DERIVED COMPUTATION)

Runs when a record is moved into a closing status.

Resolution order (first value that is not None wins):
- final price:       request.final_price -> record.final_price
                     -> record.offer_price -> record.asking_price
- commission rate:   request -> record -> policy default
- agent share rate:  request -> record -> policy default

Arithmetic (rounded half-up to the storage scale, 6 places):
    commission_amount    = final_price * (commission_rate / 100)
    agent_share_amount   = commission_amount * (agent_share_rate / 100)
    company_share_amount = commission_amount - agent_share_amount

The company share is the remainder of the rounded agent share, so the
stored shares add back to the stored commission exactly.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Mapping

HUNDRED = Decimal("100")

# Matches the scale of the stored amount columns.
AMOUNT_PLACES = Decimal("0.000001")

DEFAULT_COMMISSION_RATE = Decimal("5")
DEFAULT_AGENT_SHARE_RATE = Decimal("50")


@dataclass(frozen=True)
class CommissionPolicy:
    default_commission_rate: Decimal = DEFAULT_COMMISSION_RATE
    default_agent_share_rate: Decimal = DEFAULT_AGENT_SHARE_RATE
    price_fields: tuple[str, ...] = ("final_price", "offer_price", "asking_price")
    final_price_field: str = "final_price"
    commission_rate_field: str = "commission_rate"
    agent_share_rate_field: str = "agent_share_rate"
    amount_places: Decimal = AMOUNT_PLACES


@dataclass(frozen=True)
class CommissionSplit:
    final_price: Decimal
    commission_amount: Decimal
    agent_share_amount: Decimal
    company_share_amount: Decimal

    def as_fields(self) -> dict[str, Decimal]:
        return {
            "final_price": self.final_price,
            "commission_amount": self.commission_amount,
            "agent_share_amount": self.agent_share_amount,
            "company_share_amount": self.company_share_amount,
        }


def _to_decimal(value) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def _first_defined(*values):
    for value in values:
        if value is not None:
            return value
    return None


def resolve_final_price(
    policy: CommissionPolicy, record: Any, fields: Mapping[str, Any]
) -> Decimal | None:
    requested = fields.get(policy.final_price_field)
    stored = [getattr(record, name, None) for name in policy.price_fields]
    price = _first_defined(requested, *stored)
    return None if price is None else _to_decimal(price)


def resolve_rate(
    field_name: str, default: Decimal, record: Any, fields: Mapping[str, Any]
) -> Decimal:
    return _to_decimal(
        _first_defined(fields.get(field_name), getattr(record, field_name, None), default)
    )


def _q(value: Decimal, places: Decimal) -> Decimal:
    return value.quantize(places, rounding=ROUND_HALF_UP)


def split_commission(
    *, final_price, commission_rate, agent_share_rate, places: Decimal = AMOUNT_PLACES
) -> CommissionSplit:
    final_price = _to_decimal(final_price)
    commission_amount = _q(final_price * (_to_decimal(commission_rate) / HUNDRED), places)
    agent_share_amount = _q(
        commission_amount * (_to_decimal(agent_share_rate) / HUNDRED), places
    )
    company_share_amount = commission_amount - agent_share_amount

    return CommissionSplit(
        final_price=final_price,
        commission_amount=commission_amount,
        agent_share_amount=agent_share_amount,
        company_share_amount=company_share_amount,
    )


def commission_fields_for(
    policy: CommissionPolicy, record: Any, fields: Mapping[str, Any]
) -> dict[str, Decimal]:
    """
    Returns the monetary fields to write, or {} when the price is
    unknown or not strictly positive (a close with an unknown price
    is valid and can be corrected later).
    """
    final_price = resolve_final_price(policy, record, fields)
    if final_price is None or final_price <= 0:
        return {}

    split = split_commission(
        final_price=final_price,
        commission_rate=resolve_rate(
            policy.commission_rate_field,
            policy.default_commission_rate,
            record,
            fields,
        ),
        agent_share_rate=resolve_rate(
            policy.agent_share_rate_field,
            policy.default_agent_share_rate,
            record,
            fields,
        ),
        places=policy.amount_places,
    )
    return split.as_fields()
