"""What-if simulation and region comparison over impact results."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass

from prompttax.calculator import calculate_impact
from prompttax.models import ImpactResult, UsageEntry
from prompttax.reference_data import ReferenceDataProvider

__all__ = [
    "RegionComparison",
    "ScenarioResult",
    "apply_adjustments",
    "compare_regions",
    "simulate_what_if",
]


@dataclass(frozen=True, slots=True)
class ScenarioResult:
    """Baseline and adjusted impact for the same region and period."""

    baseline: ImpactResult
    simulated: ImpactResult
    delta_co2_grams: float
    delta_pct: float


@dataclass(frozen=True, slots=True)
class RegionComparison:
    """Impact of one profile in one region, relative to a reference region."""

    region: str
    result: ImpactResult
    delta_co2_grams: float


def apply_adjustments(
    entries: Iterable[UsageEntry], adjustments_pct: Mapping[str, float]
) -> list[UsageEntry]:
    """Scale each entry by its category's percentage adjustment.

    ``-100`` removes a category entirely, ``+100`` doubles it. Categories
    without an adjustment keep their minutes. Results never go below zero.
    """

    return [
        UsageEntry(
            entry.category,
            max(
                0.0,
                entry.minutes_per_day
                * (1 + adjustments_pct.get(entry.category, 0.0) / 100.0),
            ),
        )
        for entry in entries
    ]


def simulate_what_if(
    entries: Sequence[UsageEntry],
    region_code: str,
    period: str,
    adjustments_pct: Mapping[str, float],
    *,
    provider: ReferenceDataProvider | None = None,
) -> ScenarioResult:
    """Compare a usage profile against an adjusted copy of itself."""

    baseline = calculate_impact(entries, region_code, period, provider=provider)
    simulated = calculate_impact(
        apply_adjustments(entries, adjustments_pct),
        region_code,
        period,
        provider=provider,
    )
    delta = simulated.co2_grams - baseline.co2_grams
    delta_pct = (delta / baseline.co2_grams) * 100.0 if baseline.co2_grams > 0 else 0.0
    return ScenarioResult(
        baseline=baseline,
        simulated=simulated,
        delta_co2_grams=delta,
        delta_pct=delta_pct,
    )


def compare_regions(
    entries: Sequence[UsageEntry],
    region_codes: Sequence[str],
    period: str,
    *,
    provider: ReferenceDataProvider | None = None,
) -> list[RegionComparison]:
    """Calculate the same profile in several regions.

    Deltas are relative to the first region in ``region_codes``.

    Raises:
        UnknownRegionError: If any region code does not resolve.
    """

    results = [
        calculate_impact(entries, code, period, provider=provider)
        for code in region_codes
    ]
    if not results:
        return []
    reference_co2 = results[0].co2_grams
    return [
        RegionComparison(
            region=result.region,
            result=result,
            delta_co2_grams=result.co2_grams - reference_co2,
        )
        for result in results
    ]
