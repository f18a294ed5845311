"""Tests for the synthetic trend generator."""

import random
from datetime import date, timedelta

import pytest

from prompttax.calculator import UnknownRegionError, calculate_impact
from prompttax.models import UsageEntry
from prompttax.reference_data import (
    CategoryCoefficient,
    RegionCoefficient,
    StaticReferenceData,
)
from prompttax.trends import RandomSource, generate_series


class FixedSource:
    """Deterministic random source returning a scripted sequence."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = []

    def uniform(self, a, b):
        self.calls.append((a, b))
        return self.values[len(self.calls) - 1]


def test_series_shape_and_dates(demo_entries):
    today = date(2026, 3, 1)
    series = generate_series(demo_entries, "US", 30, today=today, rng=random.Random(7))

    assert len(series) == 30
    assert series[-1]["date"] == "2026-03-01"
    assert series[0]["date"] == (today - timedelta(days=29)).isoformat()
    dates = [date.fromisoformat(point["date"]) for point in series]
    for earlier, later in zip(dates, dates[1:]):
        assert later - earlier == timedelta(days=1)


def test_values_stay_inside_variance_envelope(demo_entries):
    baseline = calculate_impact(demo_entries, "US", "daily")
    series = generate_series(demo_entries, "US", 30)

    for point in series:
        assert baseline.co2_grams * 0.8 - 0.01 <= point["co2"] <= baseline.co2_grams * 1.2 + 0.01
        assert (
            baseline.electricity_kwh * 0.8 - 0.0001
            <= point["kwh"]
            <= baseline.electricity_kwh * 1.2 + 0.0001
        )
        assert (
            baseline.water_liters * 0.8 - 0.01
            <= point["water"]
            <= baseline.water_liters * 1.2 + 0.01
        )


def test_stub_source_gives_exact_rounded_values(demo_entries):
    source = FixedSource([1.0, 0.8, 1.2])
    series = generate_series(
        demo_entries, "US", 3, rng=source, today=date(2026, 1, 3)
    )

    assert source.calls == [(0.8, 1.2)] * 3
    # Demo profile in the US: 0.119 kWh, 46.41 g, 0.2618 L per day.
    assert series[0] == {"date": "2026-01-01", "co2": 46.41, "kwh": 0.119, "water": 0.26}
    assert series[1]["co2"] == round(46.41 * 0.8, 2)
    assert series[2]["kwh"] == round(0.119 * 1.2, 4)


def test_seeded_sources_are_reproducible(demo_entries):
    today = date(2026, 6, 30)
    first = generate_series(demo_entries, "GB", 10, rng=random.Random(42), today=today)
    second = generate_series(demo_entries, "GB", 10, rng=random.Random(42), today=today)
    assert first == second


def test_seed_from_settings(monkeypatch, demo_entries):
    monkeypatch.setenv("PROMPTTAX_TREND_SEED", "11")
    today = date(2026, 6, 30)
    assert generate_series(demo_entries, "FR", 5, today=today) == generate_series(
        demo_entries, "FR", 5, today=today
    )


def test_default_length_from_settings(monkeypatch, demo_entries):
    monkeypatch.setenv("PROMPTTAX_TREND_DAYS", "7")
    assert len(generate_series(demo_entries, "US")) == 7


def test_zero_days_is_empty(demo_entries):
    assert generate_series(demo_entries, "US", 0) == []


def test_unknown_region_propagates(demo_entries):
    with pytest.raises(UnknownRegionError):
        generate_series(demo_entries, "ZZ", 5)


def test_random_random_satisfies_protocol():
    assert isinstance(random.Random(), RandomSource)
    assert isinstance(FixedSource([1.0]), RandomSource)


def test_exact_halves_round_up():
    provider = StaticReferenceData(
        categories=[CategoryCoefficient("tie", "Tie", 60.0)],
        regions=[RegionCoefficient("H1", "Halfway", "Testland", 0.125, 0.125, 0, 0, 0, 1.0)],
    )
    series = generate_series(
        [UsageEntry("tie", 1)],
        "H1",
        1,
        rng=FixedSource([1.0]),
        today=date(2026, 1, 1),
        provider=provider,
    )

    # One minute at 60 W-min and PUE 1.0 is exactly 1 kWh, so 0.125 g and 0.125 L.
    assert series == [{"date": "2026-01-01", "co2": 0.13, "kwh": 1.0, "water": 0.13}]
