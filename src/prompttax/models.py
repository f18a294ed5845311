"""Impact value objects for the prompttax engine.

Every object here is created fresh per calculation and never mutated; the
calculator owns construction and callers only read the fields.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Literal

from prompttax.types import CategoryImpactDict, ImpactResultDict

__all__ = [
    "AICategory",
    "CATEGORY_ORDER",
    "CategoryImpact",
    "ImpactResult",
    "PERIOD_MULTIPLIERS",
    "Period",
    "UNCERTAINTY_PCT",
    "UsageEntry",
    "period_multiplier",
]

AICategory = Literal[
    "chatbots",
    "ai_search",
    "ai_image_gen",
    "ai_video_gen",
    "ai_writing",
]

CATEGORY_ORDER: Final[tuple[AICategory, ...]] = (
    "chatbots",
    "ai_search",
    "ai_image_gen",
    "ai_video_gen",
    "ai_writing",
)

Period = Literal["daily", "weekly", "monthly", "annual"]

PERIOD_MULTIPLIERS: Final[dict[str, int]] = {
    "daily": 1,
    "weekly": 7,
    "monthly": 30,
    "annual": 365,
}

UNCERTAINTY_PCT: Final[float] = 35.0


def period_multiplier(period: str) -> int:
    """Return the flat day-count multiplier for ``period``.

    Raises:
        ValueError: If ``period`` is not one of the supported periods.
    """

    try:
        return PERIOD_MULTIPLIERS[period]
    except KeyError:
        supported = ", ".join(PERIOD_MULTIPLIERS)
        raise ValueError(
            f"Unsupported period {period!r}; expected one of: {supported}"
        ) from None


@dataclass(frozen=True, slots=True)
class UsageEntry:
    """Minutes per day spent in one AI tool category.

    ``category`` is a plain string so profiles can carry categories the
    reference tables do not know yet; the calculator skips those.
    """

    category: str
    minutes_per_day: float


@dataclass(frozen=True, slots=True)
class CategoryImpact:
    """Per-category slice of an :class:`ImpactResult`."""

    category: str
    minutes_used: float
    electricity_kwh: float
    co2_grams: float
    water_liters: float

    def to_dict(self) -> CategoryImpactDict:
        return {
            "category": self.category,
            "minutes_used": float(self.minutes_used),
            "electricity_kwh": float(self.electricity_kwh),
            "co2_grams": float(self.co2_grams),
            "water_liters": float(self.water_liters),
        }


@dataclass(frozen=True, slots=True)
class ImpactResult:
    """Environmental footprint of a usage profile over one period.

    Totals are accumulated from the breakdown slices rather than recomputed,
    so ``electricity_kwh`` equals the sum of the slices' kWh exactly when no
    category repeats. Pollutant masses are linear in the total energy.
    """

    electricity_kwh: float
    co2_grams: float
    water_liters: float
    pm25_mg: float
    so2_mg: float
    nox_mg: float
    period: str
    region: str
    breakdown: tuple[CategoryImpact, ...]
    uncertainty_pct: float = UNCERTAINTY_PCT

    def to_dict(self) -> ImpactResultDict:
        """Return a plain-dict view suitable for JSON serialisation."""

        return {
            "electricity_kwh": float(self.electricity_kwh),
            "co2_grams": float(self.co2_grams),
            "water_liters": float(self.water_liters),
            "pm25_mg": float(self.pm25_mg),
            "so2_mg": float(self.so2_mg),
            "nox_mg": float(self.nox_mg),
            "period": self.period,
            "region": self.region,
            "breakdown": [item.to_dict() for item in self.breakdown],
            "uncertainty_pct": float(self.uncertainty_pct),
        }
