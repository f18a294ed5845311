"""Tests for offset conversion and credit quoting."""

from datetime import datetime, timezone

import pytest
from hypothesis import given, strategies as st

from prompttax.offsets import (
    list_credits,
    lookup_credit,
    quote_credit,
    quote_offset_cost,
    simulate_purchase,
    to_offset_tons,
)
from prompttax.reference_data import CarbonCredit


def test_to_offset_tons():
    assert to_offset_tons(1_000_000) == 1.0
    assert to_offset_tons(0) == 0.0
    assert to_offset_tons(250_000) == 0.25


def test_quote_offset_cost_passes_through_arithmetic():
    assert quote_offset_cost(2.0, 14.5) == 29.0
    assert quote_offset_cost(0.0, 22.0) == 0.0
    assert quote_offset_cost(-1.0, 10.0) == -10.0


@given(
    co2_grams=st.floats(min_value=0.0, max_value=1e12, allow_nan=False),
    price=st.floats(min_value=0.0, max_value=1000.0, allow_nan=False),
)
def test_offset_round_trip(co2_grams, price):
    assert quote_offset_cost(to_offset_tons(co2_grams), price) == (
        co2_grams / 1_000_000
    ) * price


def test_catalogue_lookup():
    credits = list_credits()
    assert [credit.id for credit in credits] == [
        "cc-001",
        "cc-002",
        "cc-003",
        "cc-004",
        "cc-005",
        "cc-006",
    ]
    peat = lookup_credit("cc-004")
    assert peat is not None
    assert peat.price_per_ton_usd == 22.0
    assert lookup_credit("cc-999") is None


def test_quote_credit():
    credit = CarbonCredit(
        id="cc-test",
        project_name="Test",
        project_type="Renewable Energy",
        verification_standard="Gold Standard",
        vintage=2024,
        region="Testland",
        price_per_ton_usd=10.0,
        available_tons=1.0,
    )
    quote = quote_credit(credit, 500_000)
    assert quote.credit_id == "cc-test"
    assert quote.tons == 0.5
    assert quote.total_cost_usd == pytest.approx(5.0)
    assert quote.within_availability is True

    too_much = quote_credit(credit, 2_000_000)
    assert too_much.within_availability is False


def test_simulate_purchase_does_not_touch_availability():
    credit = lookup_credit("cc-001")
    assert credit is not None
    quote = quote_credit(credit, 46.41 * 30)
    when = datetime(2026, 1, 15, 12, 0, tzinfo=timezone.utc)

    purchase = simulate_purchase(quote, "monthly", purchased_at=when)

    assert purchase.status == "simulated"
    assert purchase.credit_id == "cc-001"
    assert purchase.tons_purchased == quote.tons
    assert purchase.total_cost_usd == quote.total_cost_usd
    assert purchase.purchase_date == "2026-01-15T12:00:00+00:00"
    assert purchase.period_covered == "monthly"
    assert lookup_credit("cc-001").available_tons == 50_000
