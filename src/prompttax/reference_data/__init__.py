"""Reference data: category power coefficients, region factors, credits."""

from __future__ import annotations

from prompttax.reference_data.base import (
    CarbonCredit,
    CategoryCoefficient,
    ReferenceDataProvider,
    RegionCoefficient,
)
from prompttax.reference_data.loader import get_reference_data, load_reference_data
from prompttax.reference_data.static import StaticReferenceData

__all__ = [
    "CarbonCredit",
    "CategoryCoefficient",
    "ReferenceDataProvider",
    "RegionCoefficient",
    "StaticReferenceData",
    "get_reference_data",
    "load_reference_data",
]
