"""Human-scaled display of impact magnitudes."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Final, Literal, NamedTuple

__all__ = ["FormattedValue", "UnitFamily", "format_impact_value"]

UnitFamily = Literal["g", "mg", "L", "kWh"]


class FormattedValue(NamedTuple):
    """Display string and unit label for a magnitude."""

    value: str
    unit: str


@dataclass(frozen=True, slots=True)
class _Rung:
    threshold: float
    divisor: float
    unit: str
    decimals: int


# Rungs are checked top-down; the last rung of each ladder always matches.
_LADDERS: Final[dict[str, tuple[_Rung, ...]]] = {
    "g": (
        _Rung(1_000_000, 1_000_000, "t", 2),
        _Rung(1_000, 1_000, "kg", 1),
        _Rung(-math.inf, 1, "g", 1),
    ),
    "mg": (
        _Rung(1_000_000, 1_000_000, "kg", 2),
        _Rung(1_000, 1_000, "g", 1),
        _Rung(-math.inf, 1, "mg", 1),
    ),
    "L": (
        _Rung(1_000, 1_000, "kL", 1),
        _Rung(-math.inf, 1, "L", 1),
    ),
    "kWh": (
        _Rung(1_000, 1_000, "MWh", 2),
        _Rung(-math.inf, 1, "kWh", 3),
    ),
}

_FALLBACK_DECIMALS: Final[int] = 2


def format_impact_value(value: float, unit: str) -> FormattedValue:
    """Scale ``value`` to the largest sensible unit within its family.

    Thresholds are inclusive, so ``1000`` grams renders as ``1.0 kg``. Units
    outside the known families are echoed back with two decimals.

    Raises:
        TypeError: If ``value`` is not a real number.
    """

    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"value must be a real number, got {type(value).__name__}")

    ladder = _LADDERS.get(unit)
    if ladder is None:
        return FormattedValue(f"{value:.{_FALLBACK_DECIMALS}f}", unit)

    for rung in ladder:
        if value >= rung.threshold:
            return FormattedValue(f"{value / rung.divisor:.{rung.decimals}f}", rung.unit)
    # NaN compares false against every rung.
    base = ladder[-1]
    return FormattedValue(f"{value:.{base.decimals}f}", base.unit)
