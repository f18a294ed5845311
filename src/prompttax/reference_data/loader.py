"""Process-wide reference data loading.

The packaged tables are used unless ``PROMPTTAX_REFERENCE_DATA_FILE`` points
at a JSON document of the form::

    {"categories": [...], "regions": [...], "credits": [...]}

where each row carries the field names of the corresponding record. Sections
missing from the document keep their packaged values.
"""

from __future__ import annotations

import json
import logging
import pathlib
from collections.abc import Callable, Sequence
from functools import lru_cache
from typing import TypeVar

from prompttax.reference_data.base import (
    CarbonCredit,
    CategoryCoefficient,
    RegionCoefficient,
)
from prompttax.reference_data.static import StaticReferenceData
from prompttax.reference_data.tables import (
    CARBON_CREDITS,
    CATEGORY_COEFFICIENTS,
    REGION_COEFFICIENTS,
)
from prompttax.settings import PromptTaxSettings, get_settings

LOGGER = logging.getLogger(__name__)

_RecordT = TypeVar("_RecordT")

__all__ = ["get_reference_data", "load_reference_data"]


def _parse_rows(
    section: str,
    raw_rows: object,
    factory: Callable[..., _RecordT],
    packaged: Sequence[_RecordT],
) -> tuple[_RecordT, ...]:
    if raw_rows is None:
        return tuple(packaged)
    if not isinstance(raw_rows, list):
        raise RuntimeError(f"Reference data section '{section}' must be a list")

    parsed: list[_RecordT] = []
    for index, row in enumerate(raw_rows):
        if not isinstance(row, dict):
            LOGGER.warning("Skipping non-object %s row %s", section, index)
            continue
        try:
            parsed.append(factory(**row))
        except (TypeError, ValueError) as exc:
            LOGGER.warning("Skipping invalid %s row %s: %s", section, index, exc)
    return tuple(parsed)


def load_reference_data(
    settings: PromptTaxSettings | None = None,
) -> StaticReferenceData:
    """Build a reference data provider from packaged tables or an override.

    Args:
        settings: Optional settings instance; defaults to the environment.

    Returns:
        Provider serving the resolved tables.

    Raises:
        FileNotFoundError: When the configured override file does not exist.
        RuntimeError: When the override file is not valid JSON or has an
            unexpected shape.
    """

    settings_obj = settings or get_settings()
    override_path = settings_obj.reference_data_file
    if not override_path:
        return StaticReferenceData(
            CATEGORY_COEFFICIENTS, REGION_COEFFICIENTS, CARBON_CREDITS
        )

    path = pathlib.Path(override_path)
    if not path.exists():
        raise FileNotFoundError(f"PROMPTTAX_REFERENCE_DATA_FILE not found: {path}")
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise RuntimeError("Failed to parse reference data override JSON") from exc
    if not isinstance(payload, dict):
        raise RuntimeError("Reference data override must be a JSON object")

    LOGGER.info("Loading reference data override", extra={"path": str(path)})
    return StaticReferenceData(
        _parse_rows(
            "categories",
            payload.get("categories"),
            CategoryCoefficient,
            CATEGORY_COEFFICIENTS,
        ),
        _parse_rows(
            "regions", payload.get("regions"), RegionCoefficient, REGION_COEFFICIENTS
        ),
        _parse_rows("credits", payload.get("credits"), CarbonCredit, CARBON_CREDITS),
        version=f"override:{path.name}",
    )


@lru_cache(maxsize=1)
def get_reference_data() -> StaticReferenceData:
    """Return the cached process-wide reference data provider."""

    return load_reference_data()
