"""Report export and summary helpers built on impact results."""

from __future__ import annotations

import csv
import io
import math
from dataclasses import dataclass
from decimal import Decimal

from prompttax.models import ImpactResult, period_multiplier
from prompttax.reference_data import ReferenceDataProvider, get_reference_data

__all__ = [
    "BudgetStatus",
    "CSV_HEADER",
    "category_shares",
    "check_daily_budget",
    "export_breakdown_csv",
]

CSV_HEADER: tuple[str, ...] = (
    "Category",
    "Minutes Per Day",
    "Monthly CO2 (g)",
    "Monthly kWh",
    "Monthly Water (L)",
)

# The export always divides by the monthly day count, whatever the period.
_EXPORT_DAYS = 30

_EXPONENT_LOW = 1e-6
_EXPONENT_HIGH = 1e21


def _plain_number(value: float) -> str:
    """Render a number the way the dashboard's CSV export prints it.

    Integral values drop the trailing ``.0``; magnitudes in ``[1e-6, 1e21)``
    are positional and the rest use a compact exponent such as ``1e-7``.
    """

    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    magnitude = abs(value)
    if magnitude < _EXPONENT_HIGH and value.is_integer():
        return str(int(value))
    text = repr(value)
    if _EXPONENT_LOW <= magnitude < _EXPONENT_HIGH:
        return format(Decimal(text), "f")
    mantissa, _, exponent = text.partition("e")
    power = int(exponent)
    return f"{mantissa}e{'+' if power > 0 else '-'}{abs(power)}"


def export_breakdown_csv(
    result: ImpactResult, *, provider: ReferenceDataProvider | None = None
) -> str:
    """Serialise the breakdown of ``result`` as CSV text.

    One row per breakdown slice; the category column uses the display label
    when the provider knows the category. Rows are separated by ``\\n`` and
    the text has no trailing newline.
    """

    reference = provider or get_reference_data()
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for item in result.breakdown:
        coefficient = reference.lookup_category(item.category)
        label = coefficient.label if coefficient is not None else item.category
        writer.writerow(
            (
                label,
                _plain_number(item.minutes_used / _EXPORT_DAYS),
                f"{item.co2_grams:.2f}",
                f"{item.electricity_kwh:.4f}",
                f"{item.water_liters:.2f}",
            )
        )
    return buffer.getvalue().rstrip("\n")


def category_shares(result: ImpactResult) -> dict[str, float]:
    """Return each category's share of total CO₂ in percent."""

    total = result.co2_grams
    return {
        item.category: (item.co2_grams / total) * 100.0 if total > 0 else 0.0
        for item in result.breakdown
    }


@dataclass(frozen=True, slots=True)
class BudgetStatus:
    """Comparison of a result against a daily CO₂ budget."""

    budget_co2_grams: float
    used_co2_grams: float
    remaining_co2_grams: float
    used_pct: float
    exceeded: bool


def check_daily_budget(
    result: ImpactResult, budget_co2_grams_per_day: float
) -> BudgetStatus:
    """Compare ``result`` with a per-day budget scaled to its period."""

    budget = budget_co2_grams_per_day * period_multiplier(result.period)
    used = result.co2_grams
    return BudgetStatus(
        budget_co2_grams=budget,
        used_co2_grams=used,
        remaining_co2_grams=budget - used,
        used_pct=(used / budget) * 100.0 if budget > 0 else 0.0,
        exceeded=used > budget,
    )
