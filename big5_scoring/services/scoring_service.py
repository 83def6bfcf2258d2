"""
Big Five — Aspect Scoring Pipeline

Implements the deterministic scoring pipeline for the 100-item aspect
questionnaire:
  1. Validate the response set (count gate, then per-label checks)
  2. Encode each answer on the -2 … +2 scale and apply reverse-keying
  3. Average the scored items per aspect
  4. Map each aspect mean to a percentile with its linear model
  5. Average aspect pairs into the five trait percentiles
  6. (profile only) Attach the narrative summary and detailed analysis

The service is stateless apart from the immutable ``ScoringModel`` it is
constructed with, so one instance can serve concurrent requests.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime, timezone
from functools import lru_cache
from typing import Any, Optional

import structlog

from big5_scoring.exceptions import InvalidResponseLevel, WrongResponseCount
from big5_scoring.schemas.profile import (
    Big5Metadata,
    Big5Profile,
    Big5Result,
    ValidationIssue,
    ValidationResult,
)
from big5_scoring.schemas.questionnaire import (
    LEVEL_ENCODING,
    TRAIT_ASPECTS,
    Aspect,
    NextQuestion,
    QuestionnaireItem,
    QuestionnaireProgress,
    ResponseLevel,
    ScoringModel,
    Trait,
)
from big5_scoring.services.descriptions_service import DescriptionsService
from big5_scoring.services.model_loader import load_scoring_model

logger = structlog.get_logger("big5.scoring_service")

_LEVELS_BY_LABEL: dict[str, ResponseLevel] = {level.value: level for level in ResponseLevel}


class Big5ScoringService:
    """Turns 100 categorical answers into aspect and trait percentiles.

    Parameters
    ----------
    model:
        Static item table and linear models from ``load_scoring_model``.
    descriptions:
        Narrative generator used by ``generate_profile``; a default
        ``DescriptionsService`` is created when omitted.
    """

    def __init__(
        self,
        model: ScoringModel,
        descriptions: Optional[DescriptionsService] = None,
    ) -> None:
        self.model = model
        self.descriptions = descriptions or DescriptionsService()

    @property
    def expected_count(self) -> int:
        return self.model.item_count

    # ══════════════════════════════════════════════════════════════════════
    # 1. validate_responses: exhaustive, returned as data
    # ══════════════════════════════════════════════════════════════════════

    def validate_responses(self, responses: Any) -> ValidationResult:
        """Check a candidate response set without raising.

        The count gate runs first: a set of the wrong length yields exactly
        one ``wrong_response_count`` issue and no per-label checks.  Otherwise
        every unrecognised label is reported with its index.
        """
        issues: list[ValidationIssue] = []

        if not _is_response_sequence(responses):
            issues.append(
                ValidationIssue(
                    code="wrong_response_count",
                    message=f"Responses must be a list of {self.expected_count} answers",
                )
            )
        elif len(responses) != self.expected_count:
            issues.append(
                ValidationIssue(
                    code="wrong_response_count",
                    message=f"Expected {self.expected_count} responses, got {len(responses)}",
                    value=len(responses),
                )
            )
        else:
            for i, raw in enumerate(responses):
                if _coerce_level(raw) is None:
                    issues.append(
                        ValidationIssue(
                            code="invalid_response_level",
                            message=f"Invalid response level at index {i}: {raw!r}",
                            index=i,
                            value=raw if isinstance(raw, (str, int, float, bool)) else repr(raw),
                        )
                    )

        if issues:
            logger.info(
                "validation_failed",
                n_issues=len(issues),
                codes=sorted({issue.code for issue in issues}),
            )
        return ValidationResult(
            valid=not issues,
            errors=[issue.message for issue in issues],
            issues=issues,
        )

    # ══════════════════════════════════════════════════════════════════════
    # 2. predict_from_responses: fail-fast scoring
    # ══════════════════════════════════════════════════════════════════════

    def predict_from_responses(self, responses: Sequence[Any]) -> Big5Result:
        """Score a full response set.

        Raises
        ------
        WrongResponseCount
            If the set does not hold exactly one answer per item.
        InvalidResponseLevel
            On the first unrecognised answer label.
        """
        if not _is_response_sequence(responses) or len(responses) != self.expected_count:
            actual = len(responses) if _is_response_sequence(responses) else 0
            raise WrongResponseCount(expected=self.expected_count, actual=actual)

        scored: list[tuple[Aspect, float]] = []
        for item, raw in zip(self.model.items, responses):
            level = _coerce_level(raw)
            if level is None:
                raise InvalidResponseLevel([item.index], [raw])
            scored.append((item.aspect, self._score_item(self._encode_level(level), item.reverse)))

        aspect_means = self._aggregate_aspects(scored)
        aspect_percentiles = self._predict_percentiles(aspect_means)
        trait_percentiles = self._aggregate_traits(aspect_percentiles)

        result = Big5Result(
            aspect_percentiles=aspect_percentiles,
            trait_percentiles=trait_percentiles,
            metadata=Big5Metadata(
                model_version=self.model.model_version,
                computed_at=datetime.now(timezone.utc),
                total_responses=len(responses),
            ),
        )
        logger.info(
            "profile_computed",
            model_version=self.model.model_version,
            traits={t.value: round(p, 1) for t, p in trait_percentiles.items()},
        )
        return result

    # ══════════════════════════════════════════════════════════════════════
    # 3. generate_profile: scores plus narrative
    # ══════════════════════════════════════════════════════════════════════

    def generate_profile(self, responses: Sequence[Any]) -> Big5Profile:
        result = self.predict_from_responses(responses)
        return Big5Profile(
            aspect_percentiles=result.aspect_percentiles,
            trait_percentiles=result.trait_percentiles,
            metadata=result.metadata,
            narrative=self.descriptions.summarize(result.trait_percentiles),
            analysis=self.descriptions.generate_detailed_analysis(result.aspect_percentiles),
        )

    # ══════════════════════════════════════════════════════════════════════
    # 4. Questionnaire accessors
    # ══════════════════════════════════════════════════════════════════════

    def get_questionnaire_items(self) -> tuple[QuestionnaireItem, ...]:
        return self.model.items

    def get_statements(self) -> list[str]:
        return [item.text for item in self.model.items]

    def get_progress(self, partial_responses: Optional[Sequence[Any]]) -> QuestionnaireProgress:
        """Summarise a partially answered questionnaire.

        ``partial_responses`` is positional; missing, ``None`` or
        unrecognised entries are unanswered.  The next question is the first
        unanswered index.
        """
        partial = list(partial_responses or [])[: self.expected_count]
        is_answered = [_coerce_level(r) is not None for r in partial]
        answered = sum(is_answered)
        next_index = next(
            (i for i in range(self.expected_count) if i >= len(partial) or not is_answered[i]),
            None,
        )
        next_question = None
        if next_index is not None:
            next_question = NextQuestion(
                index=next_index,
                statement=self.model.items[next_index].text,
            )
        return QuestionnaireProgress(
            answered=answered,
            total_questions=self.expected_count,
            completed=next_index is None,
            next_question=next_question,
        )

    # ══════════════════════════════════════════════════════════════════════
    # Private helpers
    # ══════════════════════════════════════════════════════════════════════

    @staticmethod
    def _encode_level(level: ResponseLevel) -> float:
        return LEVEL_ENCODING[level]

    @staticmethod
    def _score_item(level_value: float, reverse: bool) -> float:
        return -level_value if reverse else level_value

    @staticmethod
    def _aggregate_aspects(scored: Sequence[tuple[Aspect, float]]) -> dict[Aspect, float]:
        """Mean scored value per aspect; an aspect with no items averages 0."""
        buckets: dict[Aspect, list[float]] = {aspect: [] for aspect in Aspect}
        for aspect, value in scored:
            buckets[aspect].append(value)
        return {
            aspect: (sum(values) / len(values) if values else 0.0)
            for aspect, values in buckets.items()
        }

    def _predict_percentiles(self, aspect_means: dict[Aspect, float]) -> dict[Aspect, float]:
        return {
            aspect: self.model.linear_models[aspect].predict(mean)
            for aspect, mean in aspect_means.items()
        }

    @staticmethod
    def _aggregate_traits(aspect_percentiles: dict[Aspect, float]) -> dict[Trait, float]:
        return {
            trait: (aspect_percentiles[first] + aspect_percentiles[second]) / 2
            for trait, (first, second) in TRAIT_ASPECTS.items()
        }


# ──────────────────────────────────────────────────────────────────────────────
# Module-level helpers
# ──────────────────────────────────────────────────────────────────────────────

def _is_response_sequence(responses: Any) -> bool:
    return isinstance(responses, Sequence) and not isinstance(responses, (str, bytes))


def _coerce_level(raw: Any) -> Optional[ResponseLevel]:
    """Return the ResponseLevel for an enum member or exact label, else None."""
    if isinstance(raw, ResponseLevel):
        return raw
    if isinstance(raw, str):
        return _LEVELS_BY_LABEL.get(raw)
    return None


@lru_cache(maxsize=1)
def get_scoring_service() -> Big5ScoringService:
    """Build the process-wide scorer once from ``get_settings()``.

    Raises ``ModelDataUnavailable`` when the static tables cannot be loaded;
    the failure is not cached, so a later call retries the load.
    """
    return Big5ScoringService(load_scoring_model())
