"""Carbon offset conversion and credit quoting.

Quotes and purchases here are simulations: nothing is charged and credit
availability is never decremented.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Final, Literal

from prompttax.reference_data import (
    CarbonCredit,
    ReferenceDataProvider,
    get_reference_data,
)

LOGGER = logging.getLogger(__name__)

__all__ = [
    "GRAMS_PER_TON",
    "OffsetPurchase",
    "OffsetQuote",
    "list_credits",
    "lookup_credit",
    "quote_credit",
    "quote_offset_cost",
    "simulate_purchase",
    "to_offset_tons",
]

GRAMS_PER_TON: Final[float] = 1_000_000.0

PurchaseStatus = Literal["simulated", "pending", "completed"]


def to_offset_tons(co2_grams: float) -> float:
    """Convert grams of CO₂ to metric tons."""

    return co2_grams / GRAMS_PER_TON


def quote_offset_cost(tons: float, price_per_ton_usd: float) -> float:
    """Return the USD cost of offsetting ``tons`` at ``price_per_ton_usd``."""

    return tons * price_per_ton_usd


@dataclass(frozen=True, slots=True)
class OffsetQuote:
    """Price quote for offsetting an emission amount with one credit."""

    credit_id: str
    tons: float
    price_per_ton_usd: float
    total_cost_usd: float
    within_availability: bool


@dataclass(frozen=True, slots=True)
class OffsetPurchase:
    """Record of a simulated credit purchase."""

    id: str
    credit_id: str
    tons_purchased: float
    total_cost_usd: float
    purchase_date: str
    status: PurchaseStatus
    period_covered: str


def list_credits(
    provider: ReferenceDataProvider | None = None,
) -> tuple[CarbonCredit, ...]:
    return tuple((provider or get_reference_data()).list_credits())


def lookup_credit(
    credit_id: str, provider: ReferenceDataProvider | None = None
) -> CarbonCredit | None:
    return (provider or get_reference_data()).lookup_credit(credit_id)


def quote_credit(credit: CarbonCredit, co2_grams: float) -> OffsetQuote:
    """Quote the cost of offsetting ``co2_grams`` with ``credit``."""

    tons = to_offset_tons(co2_grams)
    return OffsetQuote(
        credit_id=credit.id,
        tons=tons,
        price_per_ton_usd=credit.price_per_ton_usd,
        total_cost_usd=quote_offset_cost(tons, credit.price_per_ton_usd),
        within_availability=tons <= credit.available_tons,
    )


def simulate_purchase(
    quote: OffsetQuote,
    period_covered: str,
    *,
    purchased_at: datetime | None = None,
) -> OffsetPurchase:
    """Record a purchase for ``quote`` without processing any payment."""

    timestamp = purchased_at or datetime.now(timezone.utc)
    purchase = OffsetPurchase(
        id=str(uuid.uuid4()),
        credit_id=quote.credit_id,
        tons_purchased=quote.tons,
        total_cost_usd=quote.total_cost_usd,
        purchase_date=timestamp.isoformat(),
        status="simulated",
        period_covered=period_covered,
    )
    LOGGER.info(
        "Simulated offset purchase recorded",
        extra={
            "credit_id": quote.credit_id,
            "tons": quote.tons,
            "total_cost_usd": quote.total_cost_usd,
        },
    )
    return purchase
