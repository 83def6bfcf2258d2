from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from big5_scoring.schemas.questionnaire import Aspect, Trait
from big5_scoring.schemas.report import TraitAnalysis

# Persisted blobs use camelCase keys; Python callers may use either form.
_CAMEL = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    frozen=True,
    protected_namespaces=(),
)


class Big5Metadata(BaseModel):
    model_config = _CAMEL

    model_version: str
    computed_at: datetime
    total_responses: int


class Big5Result(BaseModel):
    model_config = _CAMEL

    aspect_percentiles: dict[Aspect, float]
    trait_percentiles: dict[Trait, float]
    metadata: Big5Metadata

    def to_json(self, indent: Optional[int] = None) -> str:
        """Serialise in the layout persisted alongside the user record."""
        return self.model_dump_json(by_alias=True, indent=indent)


class NarrativeSummary(BaseModel):
    model_config = _CAMEL

    summary: str
    traits: dict[Trait, str]
    strengths: list[str] = Field(default_factory=list)
    growth_areas: list[str] = Field(default_factory=list)


class Big5Profile(Big5Result):
    narrative: NarrativeSummary
    analysis: list[TraitAnalysis] = Field(default_factory=list)


class ValidationIssue(BaseModel):
    code: str  # wrong_response_count | invalid_response_level
    message: str
    index: Optional[int] = None
    value: Any = None


class ValidationResult(BaseModel):
    valid: bool
    errors: list[str] = Field(default_factory=list)
    issues: list[ValidationIssue] = Field(default_factory=list)
