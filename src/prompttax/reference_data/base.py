"""Coefficient records and the abstract reference data provider."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CategoryCoefficient:
    """Server-side power draw per active user-minute for one category."""

    category: str
    label: str
    avg_watts_per_minute: float
    description: str = ""

    def __post_init__(self) -> None:
        if self.avg_watts_per_minute <= 0:
            raise ValueError("avg_watts_per_minute must be positive")


@dataclass(frozen=True, slots=True)
class RegionCoefficient:
    """Grid, water and pollutant factors for one supported region."""

    region_code: str
    region_name: str
    country: str
    grid_intensity_gco2_per_kwh: float
    water_liters_per_kwh: float
    pm25_factor_mg_per_kwh: float
    so2_factor_mg_per_kwh: float
    nox_factor_mg_per_kwh: float
    pue_multiplier: float

    def __post_init__(self) -> None:
        if self.pue_multiplier < 1.0:
            raise ValueError("pue_multiplier must be >= 1")


@dataclass(frozen=True, slots=True)
class CarbonCredit:
    """A carbon credit listing offered for offsetting."""

    id: str
    project_name: str
    project_type: str
    verification_standard: str
    vintage: int
    region: str
    price_per_ton_usd: float
    available_tons: float
    description: str = ""


class ReferenceDataProvider(ABC):
    """Read-only lookup surface over the static coefficient tables."""

    @abstractmethod
    def lookup_category(self, category: str) -> CategoryCoefficient | None:
        """Return the coefficient for ``category`` or ``None`` when unknown."""

    @abstractmethod
    def lookup_region(self, region_code: str) -> RegionCoefficient | None:
        """Return the coefficients for an exact ``region_code`` match."""

    @abstractmethod
    def list_regions(self) -> Sequence[RegionCoefficient]:
        """Return every supported region in table order."""

    @abstractmethod
    def list_categories(self) -> Sequence[CategoryCoefficient]:
        """Return every known category in display order."""

    def list_credits(self) -> Sequence[CarbonCredit]:
        """Return the carbon credit catalogue. Empty unless overridden."""

        return ()

    def lookup_credit(self, credit_id: str) -> CarbonCredit | None:
        for credit in self.list_credits():
            if credit.id == credit_id:
                return credit
        return None

    def regions_by_country(self) -> dict[str, list[RegionCoefficient]]:
        """Group regions under their country, preserving table order."""

        grouped: dict[str, list[RegionCoefficient]] = {}
        for region in self.list_regions():
            grouped.setdefault(region.country, []).append(region)
        return grouped
