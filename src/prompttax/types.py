"""Type definitions for impact payloads."""

from __future__ import annotations

from typing import List, TypedDict


class CategoryImpactDict(TypedDict):
    """Per-category slice of an impact result."""

    category: str
    minutes_used: float
    electricity_kwh: float
    co2_grams: float
    water_liters: float


class ImpactResultDict(TypedDict):
    """Dictionary view of an impact result."""

    electricity_kwh: float
    co2_grams: float
    water_liters: float
    pm25_mg: float
    so2_mg: float
    nox_mg: float
    period: str
    region: str
    breakdown: List[CategoryImpactDict]
    uncertainty_pct: float


class TrendPoint(TypedDict):
    """One day of a synthetic trend series."""

    date: str
    co2: float
    kwh: float
    water: float
