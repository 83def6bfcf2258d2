"""
Big Five — questionnaire vocabulary and static model records.

Closed enumerations for answers, aspects and traits, the fixed
aspect-to-trait mapping, and the pydantic records the model loader
validates the JSON data files against.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ResponseLevel(str, Enum):
    STRONGLY_DISAGREE = "StronglyDisagree"
    DISAGREE = "Disagree"
    NEUTRAL = "Neutral"
    AGREE = "Agree"
    STRONGLY_AGREE = "StronglyAgree"


class Trait(str, Enum):
    AGREEABLENESS = "Agreeableness"
    CONSCIENTIOUSNESS = "Conscientiousness"
    EXTRAVERSION = "Extraversion"
    NEUROTICISM = "Neuroticism"
    OPENNESS = "Openness"


class Aspect(str, Enum):
    COMPASSION = "Compassion"
    POLITENESS = "Politeness"
    INDUSTRIOUSNESS = "Industriousness"
    ORDERLINESS = "Orderliness"
    ENTHUSIASM = "Enthusiasm"
    ASSERTIVENESS = "Assertiveness"
    WITHDRAWAL = "Withdrawal"
    VOLATILITY = "Volatility"
    INTELLECT = "Intellect"
    AESTHETICS = "Aesthetics"

    @property
    def trait(self) -> Trait:
        return ASPECT_TO_TRAIT[self]


# Symmetric five-point scale.
LEVEL_ENCODING: dict[ResponseLevel, float] = {
    ResponseLevel.STRONGLY_DISAGREE: -2.0,
    ResponseLevel.DISAGREE: -1.0,
    ResponseLevel.NEUTRAL: 0.0,
    ResponseLevel.AGREE: 1.0,
    ResponseLevel.STRONGLY_AGREE: 2.0,
}

TRAIT_ASPECTS: dict[Trait, tuple[Aspect, Aspect]] = {
    Trait.AGREEABLENESS: (Aspect.COMPASSION, Aspect.POLITENESS),
    Trait.CONSCIENTIOUSNESS: (Aspect.INDUSTRIOUSNESS, Aspect.ORDERLINESS),
    Trait.EXTRAVERSION: (Aspect.ENTHUSIASM, Aspect.ASSERTIVENESS),
    Trait.NEUROTICISM: (Aspect.WITHDRAWAL, Aspect.VOLATILITY),
    Trait.OPENNESS: (Aspect.INTELLECT, Aspect.AESTHETICS),
}

# Inverse of TRAIT_ASPECTS.
ASPECT_TO_TRAIT: dict[Aspect, Trait] = {
    aspect: trait for trait, pair in TRAIT_ASPECTS.items() for aspect in pair
}

RESPONSE_OPTIONS: list[str] = [level.value for level in ResponseLevel]


class QuestionnaireItem(BaseModel):
    """One statement of the fixed 100-item questionnaire."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    index: int = Field(ge=0)
    text: str = Field(min_length=1)
    aspect: Aspect
    reverse: bool = False


class AspectLinearModel(BaseModel):
    """``percentile = clamp(a * mean_level + b, 0, 100)``"""

    model_config = ConfigDict(frozen=True)

    a: float = Field(allow_inf_nan=False)
    b: float = Field(allow_inf_nan=False)

    def predict(self, mean_level: float) -> float:
        return max(0.0, min(100.0, self.a * mean_level + self.b))


class ItemMappingFile(BaseModel):
    """Layout of ``item_mapping.json``."""

    model_config = ConfigDict(extra="ignore")

    items: list[QuestionnaireItem]


class AspectModelsFile(BaseModel):
    """Layout of ``aspect_models.json``."""

    model_config = ConfigDict(extra="ignore", protected_namespaces=())

    model_version: Optional[str] = None
    level_encoding: Optional[dict[str, float]] = None
    aspects: Optional[list[Aspect]] = None
    linear_models: dict[Aspect, AspectLinearModel]


class ScoringModel(BaseModel):
    """Immutable bundle of everything the scorer needs.

    Built once by :func:`big5_scoring.services.model_loader.load_scoring_model`
    and shared read-only by every scoring call.
    """

    model_config = ConfigDict(frozen=True, protected_namespaces=())

    items: tuple[QuestionnaireItem, ...]
    linear_models: dict[Aspect, AspectLinearModel]
    model_version: str

    @property
    def item_count(self) -> int:
        return len(self.items)


class NextQuestion(BaseModel):
    index: int
    statement: str
    options: list[str] = Field(default_factory=lambda: list(RESPONSE_OPTIONS))


class QuestionnaireProgress(BaseModel):
    answered: int
    total_questions: int
    completed: bool
    next_question: Optional[NextQuestion] = None
