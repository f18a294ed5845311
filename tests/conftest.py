"""Pytest configuration and fixtures."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterator

import pytest

# Ensure src/ is on sys.path for tests so the src layout is used during test runs
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
SRC = os.path.join(ROOT, "src")
if SRC not in sys.path:
    sys.path.insert(0, SRC)

from prompttax.models import UsageEntry  # noqa: E402
from prompttax.profiles import DEMO_USAGE_PROFILE  # noqa: E402
from prompttax.reference_data import (  # noqa: E402
    CategoryCoefficient,
    RegionCoefficient,
    StaticReferenceData,
    get_reference_data,
)


@pytest.fixture(autouse=True)
def _clear_cached_reference_data() -> Iterator[None]:
    """Ensure cached reference tables do not leak between tests."""

    get_reference_data.cache_clear()
    yield
    get_reference_data.cache_clear()


@pytest.fixture
def demo_entries() -> list[UsageEntry]:
    """The five-category demo profile used across the dashboard views."""

    return list(DEMO_USAGE_PROFILE)


@pytest.fixture
def tiny_provider() -> StaticReferenceData:
    """A provider with round-number coefficients for exact arithmetic."""

    return StaticReferenceData(
        categories=[
            CategoryCoefficient("alpha", "Alpha", 0.6),
            CategoryCoefficient("beta", "Beta", 1.2),
        ],
        regions=[
            RegionCoefficient("T1", "Test One", "Testland", 100, 2, 10, 20, 30, 1.0),
            RegionCoefficient("T2", "Test Two", "Testland", 500, 1, 1, 1, 1, 2.0),
        ],
    )
