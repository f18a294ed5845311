"""Packaged coefficient tables.

Category wattages are per-user-minute server-side estimates derived from
published datacenter power data. Region factors come from IEA, EPA and EU
emission factors and utility disclosures; all values are approximate.
"""

from __future__ import annotations

from typing import Final

from prompttax.reference_data.base import (
    CarbonCredit,
    CategoryCoefficient,
    RegionCoefficient,
)

CATEGORY_COEFFICIENTS: Final[tuple[CategoryCoefficient, ...]] = (
    CategoryCoefficient(
        "chatbots",
        "AI Chatbots",
        0.05,  # ~3 W per query, ~1 query/min
        "ChatGPT, Claude, Gemini, and similar conversational AI tools",
    ),
    CategoryCoefficient(
        "ai_search",
        "AI Search",
        0.04,
        "AI powered search engines like Perplexity, Google AI Overview, Bing Copilot",
    ),
    CategoryCoefficient(
        "ai_image_gen",
        "Image Generation",
        0.12,
        "DALL·E, Midjourney, Stable Diffusion, and other image generators",
    ),
    CategoryCoefficient(
        "ai_video_gen",
        "Video Generation",
        0.25,
        "Sora, Runway, Pika, and other AI video tools",
    ),
    CategoryCoefficient(
        "ai_writing",
        "AI Writing Assistants",
        0.03,
        "Grammarly AI, Jasper, Notion AI, and other writing tools",
    ),
)

# Columns: code, name, country, gCO2/kWh, L/kWh, PM2.5, SO2, NOx (mg/kWh), PUE
REGION_COEFFICIENTS: Final[tuple[RegionCoefficient, ...]] = (
    RegionCoefficient("US", "United States (Average)", "United States", 390, 2.2, 18, 420, 320, 1.2),
    RegionCoefficient("US-CA", "California", "United States", 210, 1.8, 10, 180, 200, 1.15),
    RegionCoefficient("US-TX", "Texas", "United States", 420, 2.5, 22, 500, 380, 1.25),
    RegionCoefficient("GB", "United Kingdom", "United Kingdom", 230, 1.5, 8, 200, 220, 1.18),
    RegionCoefficient("DE", "Germany", "Germany", 350, 1.8, 14, 300, 280, 1.2),
    RegionCoefficient("FR", "France", "France", 55, 3.0, 3, 80, 90, 1.15),
    RegionCoefficient("IN", "India", "India", 710, 3.5, 45, 900, 650, 1.35),
    RegionCoefficient("CN", "China", "China", 580, 2.8, 38, 750, 520, 1.3),
    RegionCoefficient("JP", "Japan", "Japan", 470, 2.0, 15, 350, 300, 1.2),
    RegionCoefficient("BR", "Brazil", "Brazil", 75, 4.0, 5, 100, 120, 1.25),
    RegionCoefficient("AU", "Australia", "Australia", 620, 2.6, 28, 600, 450, 1.22),
    RegionCoefficient("SE", "Sweden", "Sweden", 12, 1.2, 1, 15, 25, 1.1),
    RegionCoefficient("NO", "Norway", "Norway", 8, 1.0, 0.5, 10, 18, 1.08),
)

CARBON_CREDITS: Final[tuple[CarbonCredit, ...]] = (
    CarbonCredit(
        "cc-001",
        "Amazon Rainforest Protection Initiative",
        "REDD+ Forest Conservation",
        "Verra VCS",
        2024,
        "Brazil",
        14.50,
        50_000,
        "Protects over 200,000 hectares of native Amazon rainforest from deforestation.",
    ),
    CarbonCredit(
        "cc-002",
        "Gujarat Solar Farm Expansion",
        "Renewable Energy",
        "Gold Standard",
        2024,
        "India",
        8.75,
        120_000,
        "Expands solar photovoltaic capacity in Gujarat, displacing coal generation.",
    ),
    CarbonCredit(
        "cc-003",
        "Kenyan Cookstove Distribution Program",
        "Clean Cooking",
        "Gold Standard",
        2023,
        "Kenya",
        12.00,
        30_000,
        "Distributes fuel efficient cookstoves to rural households.",
    ),
    CarbonCredit(
        "cc-004",
        "Scottish Peatland Restoration",
        "Wetland Restoration",
        "Peatland Code",
        2024,
        "United Kingdom",
        22.00,
        8_000,
        "Re-wets and revegetates degraded peatlands in the Scottish Highlands.",
    ),
    CarbonCredit(
        "cc-005",
        "Texas Wind Power Collective",
        "Renewable Energy",
        "American Carbon Registry",
        2024,
        "United States",
        10.25,
        75_000,
        "Wind farms across West Texas displacing fossil generation on the ERCOT grid.",
    ),
    CarbonCredit(
        "cc-006",
        "Indonesian Mangrove Reforestation",
        "Blue Carbon",
        "Verra VCS",
        2023,
        "Indonesia",
        18.50,
        15_000,
        "Plants and restores mangrove forests along the coast of Sumatra.",
    ),
)
