"""Deterministic impact calculation.

No estimation here is model-driven: every number is a product of the usage
minutes and the static coefficients served by the reference data provider.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from prompttax.models import (
    UNCERTAINTY_PCT,
    CategoryImpact,
    ImpactResult,
    UsageEntry,
    period_multiplier,
)
from prompttax.reference_data import (
    ReferenceDataProvider,
    RegionCoefficient,
    get_reference_data,
)
from prompttax.settings import get_settings

LOGGER = logging.getLogger(__name__)

__all__ = [
    "UnknownRegionError",
    "calculate_impact",
    "resolve_region",
    "uncertainty_range",
]

# Coefficients are watts per user-minute scaled so that dividing by 60 lands
# directly on kWh. Do not re-derive from first principles.
_MINUTES_PER_HOUR = 60.0


class UnknownRegionError(LookupError):
    """Raised when a region code has no coefficient row."""

    def __init__(self, region_code: str) -> None:
        super().__init__(f"Unknown region: {region_code}")
        self.region_code = region_code


def resolve_region(
    region_code: str, provider: ReferenceDataProvider | None = None
) -> RegionCoefficient:
    """Return the coefficients for ``region_code``.

    Raises:
        UnknownRegionError: If the provider has no row for the code.
    """

    reference = provider or get_reference_data()
    region = reference.lookup_region(region_code)
    if region is None:
        raise UnknownRegionError(region_code)
    return region


def calculate_impact(
    entries: Iterable[UsageEntry],
    region_code: str | None = None,
    period: str | None = None,
    *,
    provider: ReferenceDataProvider | None = None,
) -> ImpactResult:
    """Calculate the environmental impact of a usage profile.

    Args:
        entries: Usage entries (category plus minutes per day). Entries whose
            category the provider does not know are skipped.
        region_code: Region used for grid, water and pollutant factors.
            Defaults to ``PROMPTTAX_DEFAULT_REGION``.
        period: Aggregation period; defaults to ``PROMPTTAX_DEFAULT_PERIOD``.
        provider: Reference data provider; defaults to the packaged tables.

    Returns:
        The period-scaled impact with a per-category breakdown in
        first-appearance order.

    Raises:
        UnknownRegionError: If ``region_code`` does not resolve.
        ValueError: If ``period`` is not a supported period.
    """

    if region_code is None or period is None:
        settings = get_settings()
        if region_code is None:
            region_code = settings.default_region
        if period is None:
            period = settings.default_period

    reference = provider or get_reference_data()
    region = resolve_region(region_code, reference)
    multiplier = period_multiplier(period)

    slices: dict[str, list[float]] = {}
    total_kwh = 0.0
    total_co2 = 0.0
    total_water = 0.0

    for entry in entries:
        coefficient = reference.lookup_category(entry.category)
        if coefficient is None:
            LOGGER.debug(
                "Skipping unrecognised usage category",
                extra={"category": entry.category, "region": region_code},
            )
            continue

        daily_kwh = (
            coefficient.avg_watts_per_minute
            * entry.minutes_per_day
            * region.pue_multiplier
        ) / _MINUTES_PER_HOUR
        period_kwh = daily_kwh * multiplier
        period_co2 = period_kwh * region.grid_intensity_gco2_per_kwh
        period_water = period_kwh * region.water_liters_per_kwh
        minutes_used = entry.minutes_per_day * multiplier

        bucket = slices.get(entry.category)
        if bucket is None:
            slices[entry.category] = [minutes_used, period_kwh, period_co2, period_water]
        else:
            bucket[0] += minutes_used
            bucket[1] += period_kwh
            bucket[2] += period_co2
            bucket[3] += period_water

        total_kwh += period_kwh
        total_co2 += period_co2
        total_water += period_water

    breakdown = tuple(
        CategoryImpact(
            category=category,
            minutes_used=values[0],
            electricity_kwh=values[1],
            co2_grams=values[2],
            water_liters=values[3],
        )
        for category, values in slices.items()
    )

    LOGGER.debug(
        "Impact calculated",
        extra={
            "region": region_code,
            "period": period,
            "categories": len(breakdown),
            "co2_grams": total_co2,
        },
    )

    return ImpactResult(
        electricity_kwh=total_kwh,
        co2_grams=total_co2,
        water_liters=total_water,
        pm25_mg=total_kwh * region.pm25_factor_mg_per_kwh,
        so2_mg=total_kwh * region.so2_factor_mg_per_kwh,
        nox_mg=total_kwh * region.nox_factor_mg_per_kwh,
        period=period,
        region=region_code,
        breakdown=breakdown,
        uncertainty_pct=UNCERTAINTY_PCT,
    )


def uncertainty_range(
    value: float, uncertainty_pct: float = UNCERTAINTY_PCT
) -> tuple[float, float]:
    """Return the symmetric ``(low, high)`` band around ``value``.

    The lower bound is clamped at zero.
    """

    spread = abs(value) * (uncertainty_pct / 100.0)
    return (max(value - spread, 0.0), value + spread)
