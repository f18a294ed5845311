"""Synthetic daily trend generation for demonstration charts.

The series is produced by perturbing the usage profile once per day and
re-running the daily calculation. It is not historical data.

SECURITY NOTICE
---------------
Variance is drawn from Python's pseudo-random generators. It must not be used
for security-sensitive purposes.
"""

from __future__ import annotations

import logging
import math
import random
from collections.abc import Sequence
from datetime import date, timedelta
from typing import Final, Protocol, runtime_checkable

from prompttax.calculator import calculate_impact, resolve_region
from prompttax.models import UsageEntry
from prompttax.reference_data import ReferenceDataProvider
from prompttax.settings import get_settings
from prompttax.types import TrendPoint

LOGGER = logging.getLogger(__name__)

__all__ = ["RandomSource", "VARIANCE_BAND", "generate_series"]

VARIANCE_BAND: Final[tuple[float, float]] = (0.8, 1.2)


@runtime_checkable
class RandomSource(Protocol):
    """Anything that can draw a uniform float, e.g. :class:`random.Random`."""

    def uniform(self, a: float, b: float) -> float:
        """Return a float in ``[a, b]``."""


def _round_half_up(value: float, digits: int) -> float:
    """Round to ``digits`` places with exact halves going up."""

    scale = 10**digits
    return math.floor(value * scale + 0.5) / scale


def _default_source() -> random.Random:
    seed = get_settings().trend_seed
    return random.Random() if seed is None else random.Random(seed)  # nosec B311


def generate_series(
    entries: Sequence[UsageEntry],
    region_code: str,
    days: int | None = None,
    *,
    rng: RandomSource | None = None,
    today: date | None = None,
    provider: ReferenceDataProvider | None = None,
) -> list[TrendPoint]:
    """Generate a synthetic daily series ending at ``today``.

    Args:
        entries: Baseline usage profile.
        region_code: Region used for every day of the series.
        days: Series length; defaults to ``PROMPTTAX_TREND_DAYS``.
        rng: Random source; a fresh private stream is created when omitted so
            concurrent callers never share variance.
        today: Last date of the series; defaults to the local current date.
        provider: Reference data provider passed through to the calculator.

    Returns:
        Points ordered oldest to newest, exactly ``days`` long. CO₂ and water
        are rounded half-up to 2 decimals, kWh to 4.

    Raises:
        UnknownRegionError: If ``region_code`` does not resolve.
    """

    resolve_region(region_code, provider)
    length = get_settings().trend_days if days is None else days
    source = rng if rng is not None else _default_source()
    end = today or date.today()
    low, high = VARIANCE_BAND

    series: list[TrendPoint] = []
    for offset in range(length - 1, -1, -1):
        day = end - timedelta(days=offset)
        variance = source.uniform(low, high)
        varied = [
            UsageEntry(entry.category, entry.minutes_per_day * variance)
            for entry in entries
        ]
        result = calculate_impact(varied, region_code, "daily", provider=provider)
        series.append(
            {
                "date": day.isoformat(),
                "co2": _round_half_up(result.co2_grams, 2),
                "kwh": _round_half_up(result.electricity_kwh, 4),
                "water": _round_half_up(result.water_liters, 2),
            }
        )

    LOGGER.debug(
        "Synthetic trend generated",
        extra={"region": region_code, "days": len(series)},
    )
    return series
