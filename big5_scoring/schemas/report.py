from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class PercentileBand(str, Enum):
    EXCEPTIONALLY_LOW = "exceptionally_low"
    VERY_LOW = "very_low"
    LOW = "low"
    MODERATELY_LOW = "moderately_low"
    TYPICAL = "typical"
    MODERATELY_HIGH = "moderately_high"
    HIGH = "high"
    VERY_HIGH = "very_high"
    EXCEPTIONALLY_HIGH = "exceptionally_high"


class DimensionDescription(BaseModel):
    """Table-driven description of one trait or aspect at one band."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True
    )

    name: str
    percentile: float
    level: PercentileBand
    level_label: str
    description: str
    characteristics: list[str]
    advantages: list[str]
    challenges: list[str]
    relationship_style: str
    career_implications: str


class TraitAnalysis(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True
    )

    name: str
    percentile: float
    level: PercentileBand
    level_label: str
    overview: str
    aspects: list[DimensionDescription]
