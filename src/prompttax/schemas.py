"""Pydantic models describing the public prompttax boundary schemas."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from prompttax.calculator import calculate_impact
from prompttax.models import ImpactResult, UsageEntry
from prompttax.reference_data import ReferenceDataProvider

SchemaVersionLiteral = Literal["0.1.0"]
CURRENT_IMPACT_SCHEMA_VERSION: SchemaVersionLiteral = "0.1.0"

PeriodLiteral = Literal["daily", "weekly", "monthly", "annual"]


class UsageEntryModel(BaseModel):
    """Caller-supplied minutes for one AI tool category."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    category: str = Field(
        ...,
        min_length=1,
        description="Category identifier (for example, 'chatbots').",
    )
    minutes_per_day: float = Field(
        ...,
        ge=0.0,
        allow_inf_nan=False,
        description="Average active minutes per day.",
    )


class ImpactRequest(BaseModel):
    """Validated calculation request.

    This is where an out-of-range period or a negative minute count is
    rejected; the calculator itself assumes well-formed input.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    entries: tuple[UsageEntryModel, ...] = Field(
        default=(),
        description="Usage profile, one entry per category.",
    )
    region: str = Field(
        ...,
        min_length=1,
        description="Region code with a coefficient row (for example, 'US').",
    )
    period: PeriodLiteral = Field(
        default="daily",
        description="Aggregation period for the result.",
    )

    def to_entries(self) -> list[UsageEntry]:
        return [
            UsageEntry(item.category, item.minutes_per_day) for item in self.entries
        ]

    def calculate(self, *, provider: ReferenceDataProvider | None = None) -> ImpactResult:
        """Run the calculator on the validated request."""

        return calculate_impact(
            self.to_entries(), self.region, self.period, provider=provider
        )


class CategoryImpactRecord(BaseModel):
    """Serialised per-category slice."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    category: str
    minutes_used: float = Field(..., ge=0.0)
    electricity_kwh: float = Field(..., ge=0.0)
    co2_grams: float = Field(..., ge=0.0)
    water_liters: float = Field(..., ge=0.0)


class ImpactRecord(BaseModel):
    """Immutable, versioned schema for an exported impact result."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: Literal["prompttax"] = Field(
        default="prompttax",
        description="Canonical namespace for prompttax records.",
    )
    schema_version: SchemaVersionLiteral = Field(
        default=CURRENT_IMPACT_SCHEMA_VERSION,
        description="Semantic version of the impact record schema.",
    )
    region: str = Field(..., min_length=1, description="Region code used.")
    period: PeriodLiteral = Field(..., description="Aggregation period.")
    electricity_kwh: float = Field(..., ge=0.0, description="Energy in kWh.")
    co2_grams: float = Field(..., ge=0.0, description="CO₂ emissions in grams.")
    water_liters: float = Field(..., ge=0.0, description="Water use in litres.")
    pm25_mg: float = Field(..., ge=0.0, description="PM2.5 in milligrams.")
    so2_mg: float = Field(..., ge=0.0, description="SO₂ in milligrams.")
    nox_mg: float = Field(..., ge=0.0, description="NOx in milligrams.")
    uncertainty_pct: float = Field(
        ...,
        ge=0.0,
        description="Symmetric uncertainty band as a percentage.",
    )
    breakdown: tuple[CategoryImpactRecord, ...] = Field(default=())
    generated_at: datetime | None = Field(
        default=None,
        description="Timestamp at which the record was produced (UTC).",
    )

    @classmethod
    def from_result(
        cls, result: ImpactResult, *, generated_at: datetime | None = None
    ) -> ImpactRecord:
        payload = dict(result.to_dict())
        payload["breakdown"] = tuple(
            CategoryImpactRecord(**item) for item in result.to_dict()["breakdown"]
        )
        return cls(generated_at=generated_at, **payload)

    def model_dump_json_ready(self) -> dict[str, object]:
        """Return a JSON-serialisable payload with ``None`` values removed."""

        return self.model_dump(mode="json", exclude_none=True)
