"""In-memory reference data provider."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from prompttax.reference_data.base import (
    CarbonCredit,
    CategoryCoefficient,
    ReferenceDataProvider,
    RegionCoefficient,
)


class StaticReferenceData(ReferenceDataProvider):
    """Serve coefficient lookups from immutable in-memory tables."""

    def __init__(
        self,
        categories: Iterable[CategoryCoefficient],
        regions: Iterable[RegionCoefficient],
        credits: Iterable[CarbonCredit] = (),
        *,
        version: str = "static-v1",
    ) -> None:
        self._categories = tuple(categories)
        self._regions = tuple(regions)
        self._credits = tuple(credits)
        self._category_index = {item.category: item for item in self._categories}
        # First row wins when a code repeats, matching a linear scan.
        self._region_index: dict[str, RegionCoefficient] = {}
        for region in self._regions:
            self._region_index.setdefault(region.region_code, region)
        self.version = version

    def lookup_category(self, category: str) -> CategoryCoefficient | None:
        return self._category_index.get(category)

    def lookup_region(self, region_code: str) -> RegionCoefficient | None:
        return self._region_index.get(region_code)

    def list_regions(self) -> Sequence[RegionCoefficient]:
        return self._regions

    def list_categories(self) -> Sequence[CategoryCoefficient]:
        return self._categories

    def list_credits(self) -> Sequence[CarbonCredit]:
        return self._credits
