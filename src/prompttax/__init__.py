"""PromptTax - Environmental footprint estimation for AI tool usage."""

from __future__ import annotations

from importlib import import_module
from typing import Any, TYPE_CHECKING

__all__ = [
    "ImpactRequest",
    "ImpactResult",
    "UnknownRegionError",
    "UsageEntry",
    "calculate_impact",
    "format_impact_value",
    "generate_series",
    "quote_offset_cost",
    "to_offset_tons",
]

if TYPE_CHECKING:
    from .calculator import UnknownRegionError, calculate_impact
    from .formatting import format_impact_value
    from .models import ImpactResult, UsageEntry
    from .offsets import quote_offset_cost, to_offset_tons
    from .schemas import ImpactRequest
    from .trends import generate_series


def __getattr__(name: str) -> Any:
    """Lazily import submodules so importing the package stays cheap."""

    module_map = {
        "ImpactRequest": "schemas",
        "ImpactResult": "models",
        "UnknownRegionError": "calculator",
        "UsageEntry": "models",
        "calculate_impact": "calculator",
        "format_impact_value": "formatting",
        "generate_series": "trends",
        "quote_offset_cost": "offsets",
        "to_offset_tons": "offsets",
    }

    if name not in module_map:
        raise AttributeError(name)

    module = import_module(f".{module_map[name]}", __name__)
    return getattr(module, name)
