"""Walk through the impact engine using the demo usage profile.

Run from the repository root after installing the package:

    python examples/impact_report_demo.py --region GB

The script prints the monthly footprint, a what-if scenario, a region
comparison, offset quotes for every catalogue credit and the CSV export.
"""

from __future__ import annotations

import argparse
import logging

from prompttax.calculator import calculate_impact, uncertainty_range
from prompttax.formatting import format_impact_value
from prompttax.offsets import list_credits, quote_credit
from prompttax.profiles import DEMO_USAGE_PROFILE
from prompttax.reporting import export_breakdown_csv
from prompttax.scenarios import compare_regions, simulate_what_if
from prompttax.trends import generate_series


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="PromptTax impact walkthrough.")
    parser.add_argument("--region", default="US", help="Region code (default: US).")
    parser.add_argument(
        "--period",
        default="monthly",
        choices=("daily", "weekly", "monthly", "annual"),
    )
    parser.add_argument("--verbose", "-v", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    entries = list(DEMO_USAGE_PROFILE)
    impact = calculate_impact(entries, args.region, args.period)

    co2 = format_impact_value(impact.co2_grams, "g")
    low, high = uncertainty_range(impact.co2_grams, impact.uncertainty_pct)
    print(f"{args.period.title()} footprint in {impact.region}")
    print(f"  CO2:         {co2.value} {co2.unit} (±{impact.uncertainty_pct:.0f}%: {low:.1f}-{high:.1f} g)")
    for label, value, unit in (
        ("Electricity", impact.electricity_kwh, "kWh"),
        ("Water", impact.water_liters, "L"),
        ("PM2.5", impact.pm25_mg, "mg"),
    ):
        formatted = format_impact_value(value, unit)
        print(f"  {label + ':':<12} {formatted.value} {formatted.unit}")

    scenario = simulate_what_if(entries, args.region, args.period, {"ai_video_gen": -50})
    print(f"\nHalving video generation changes CO2 by {scenario.delta_pct:+.1f}%")

    print("\nRegion comparison:")
    for item in compare_regions(entries, [args.region, "FR", "IN"], args.period):
        print(f"  {item.region:<6} {item.result.co2_grams:10.1f} g ({item.delta_co2_grams:+.1f})")

    print("\nOffset quotes:")
    for credit in list_credits():
        quote = quote_credit(credit, impact.co2_grams)
        print(f"  {credit.project_name:<45} ${quote.total_cost_usd:.2f}")

    week = generate_series(entries, args.region, 7)
    print("\nLast 7 days (synthetic):")
    for point in week:
        print(f"  {point['date']}  {point['co2']:8.2f} g")

    print("\nCSV export:")
    print(export_breakdown_csv(impact))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
