"""
Big Five — schema registry.

Re-exports the public pydantic models and enumerations so callers can
import them from one place::

    from big5_scoring.schemas import Big5Result, ResponseLevel
"""

from big5_scoring.schemas.questionnaire import (
    ASPECT_TO_TRAIT,
    LEVEL_ENCODING,
    RESPONSE_OPTIONS,
    TRAIT_ASPECTS,
    Aspect,
    AspectLinearModel,
    NextQuestion,
    QuestionnaireItem,
    QuestionnaireProgress,
    ResponseLevel,
    ScoringModel,
    Trait,
)
from big5_scoring.schemas.report import (
    DimensionDescription,
    PercentileBand,
    TraitAnalysis,
)
from big5_scoring.schemas.profile import (
    Big5Metadata,
    Big5Profile,
    Big5Result,
    NarrativeSummary,
    ValidationIssue,
    ValidationResult,
)

__all__ = [
    "ASPECT_TO_TRAIT",
    "LEVEL_ENCODING",
    "RESPONSE_OPTIONS",
    "TRAIT_ASPECTS",
    "Aspect",
    "AspectLinearModel",
    "NextQuestion",
    "QuestionnaireItem",
    "QuestionnaireProgress",
    "ResponseLevel",
    "ScoringModel",
    "Trait",
    "DimensionDescription",
    "PercentileBand",
    "TraitAnalysis",
    "Big5Metadata",
    "Big5Profile",
    "Big5Result",
    "NarrativeSummary",
    "ValidationIssue",
    "ValidationResult",
]
