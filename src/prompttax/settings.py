"""Environment-backed settings primitives for :mod:`prompttax`."""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = ["PromptTaxSettings", "get_settings"]

_DEFAULT_TREND_DAYS = 30


def _coerce_int(value: object) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


class PromptTaxSettings(BaseSettings):
    """Expose environment-derived configuration knobs for the impact engine.

    All environment lookups go through this class so callers never read
    ``os.environ`` directly.

    Attributes:
        default_region: Region code used when a caller passes ``None``.
        default_period: Aggregation period used when a caller passes ``None``.
        reference_data_file: Optional path to a JSON file replacing the
            packaged category, region and credit tables.
        trend_days: Default length of the synthetic trend series.
        trend_seed: Optional seed for the trend generator's random stream.
    """

    default_region: str = Field(default="US", alias="PROMPTTAX_DEFAULT_REGION")
    default_period: str = Field(default="daily", alias="PROMPTTAX_DEFAULT_PERIOD")
    reference_data_file: str | None = Field(
        default=None, alias="PROMPTTAX_REFERENCE_DATA_FILE"
    )
    trend_days: int = Field(default=_DEFAULT_TREND_DAYS, alias="PROMPTTAX_TREND_DAYS")
    trend_seed: int | None = Field(default=None, alias="PROMPTTAX_TREND_SEED")

    model_config = SettingsConfigDict(env_file=None, extra="ignore")

    @field_validator("trend_seed", mode="before")
    @classmethod
    def _parse_optional_int(cls, value: object) -> int | None:
        """Parse optional integer fields while tolerating malformed input.

        Args:
            value: Raw environment value.

        Returns:
            Parsed integer when conversion succeeds, otherwise ``None``.
        """

        return _coerce_int(value)

    @field_validator("trend_days", mode="before")
    @classmethod
    def _parse_trend_days(cls, value: object) -> int:
        """Fall back to the default series length on malformed input."""

        parsed = _coerce_int(value)
        if parsed is None or parsed < 0:
            return _DEFAULT_TREND_DAYS
        return parsed

    @field_validator("reference_data_file", mode="before")
    @classmethod
    def _blank_as_none(cls, value: object) -> str | None:
        if value in (None, ""):
            return None
        return str(value)


def get_settings() -> PromptTaxSettings:
    """Return a :class:`PromptTaxSettings` instance.

    Returns:
        Settings parsed from environment variables.
    """

    return PromptTaxSettings()
