"""Default and demonstration usage profiles."""

from __future__ import annotations

from typing import Final

from prompttax.models import CATEGORY_ORDER, UsageEntry

__all__ = [
    "DEMO_USAGE_PROFILE",
    "IMPORT_DEMO_USAGE_PROFILE",
    "default_usage_profile",
]

# Shown before a user has entered any usage.
DEMO_USAGE_PROFILE: Final[tuple[UsageEntry, ...]] = (
    UsageEntry("chatbots", 45),
    UsageEntry("ai_search", 20),
    UsageEntry("ai_image_gen", 10),
    UsageEntry("ai_video_gen", 5),
    UsageEntry("ai_writing", 15),
)

# Returned by the simulated screen-time import flows.
IMPORT_DEMO_USAGE_PROFILE: Final[tuple[UsageEntry, ...]] = (
    UsageEntry("chatbots", 35),
    UsageEntry("ai_search", 18),
    UsageEntry("ai_image_gen", 8),
    UsageEntry("ai_video_gen", 3),
    UsageEntry("ai_writing", 12),
)


def default_usage_profile() -> list[UsageEntry]:
    """Return one zero-minute entry per known category."""

    return [UsageEntry(category, 0.0) for category in CATEGORY_ORDER]
