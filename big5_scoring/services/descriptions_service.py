"""
Big Five — Descriptive Report Generator

Maps percentiles to one of nine bands and renders the authored content
for any trait or aspect at that band.  Also builds the short narrative
summary attached to a full profile.

Banding is upper-inclusive: a cut point belongs to the band below it,
so 4 is "exceptionally_low" and 4.01 is "very_low".
"""

from __future__ import annotations

import math
from typing import Union

import structlog

from big5_scoring.schemas.profile import NarrativeSummary
from big5_scoring.schemas.questionnaire import TRAIT_ASPECTS, Aspect, Trait
from big5_scoring.schemas.report import DimensionDescription, PercentileBand, TraitAnalysis
from big5_scoring.services.description_content import (
    ASPECT_CONTENT,
    BALANCED_SUMMARY,
    DOMINANT_SUMMARY,
    TRAIT_CONTENT,
    TRAIT_GROWTH_AREAS,
    TRAIT_STRENGTHS,
    TRAIT_TIER_SENTENCES,
)

logger = structlog.get_logger("big5.descriptions_service")

Dimension = Union[Aspect, Trait, str]

# (inclusive upper bound, band); anything above the last cut is exceptionally high
BAND_CUTS: tuple[tuple[float, PercentileBand], ...] = (
    (4.0, PercentileBand.EXCEPTIONALLY_LOW),
    (15.0, PercentileBand.VERY_LOW),
    (25.0, PercentileBand.LOW),
    (40.0, PercentileBand.MODERATELY_LOW),
    (60.0, PercentileBand.TYPICAL),
    (75.0, PercentileBand.MODERATELY_HIGH),
    (85.0, PercentileBand.HIGH),
    (95.0, PercentileBand.VERY_HIGH),
)

LEVEL_LABELS: dict[PercentileBand, str] = {
    PercentileBand.EXCEPTIONALLY_LOW: "Exceptionally Low",
    PercentileBand.VERY_LOW: "Very Low",
    PercentileBand.LOW: "Low",
    PercentileBand.MODERATELY_LOW: "Moderately Low",
    PercentileBand.TYPICAL: "Typical or Average",
    PercentileBand.MODERATELY_HIGH: "Moderately High",
    PercentileBand.HIGH: "High",
    PercentileBand.VERY_HIGH: "Very High",
    PercentileBand.EXCEPTIONALLY_HIGH: "Exceptionally High",
}

_LOW_POLE_BANDS = frozenset(
    {
        PercentileBand.EXCEPTIONALLY_LOW,
        PercentileBand.VERY_LOW,
        PercentileBand.LOW,
        PercentileBand.MODERATELY_LOW,
    }
)

# Order of the detailed analysis section.
ANALYSIS_ORDER: tuple[Trait, ...] = (
    Trait.OPENNESS,
    Trait.AGREEABLENESS,
    Trait.CONSCIENTIOUSNESS,
    Trait.EXTRAVERSION,
    Trait.NEUROTICISM,
)

# Summary thresholds
HIGH_TIER = 70.0
LOW_TIER = 30.0
GROWTH_LOW = 25.0
GROWTH_HIGH = 75.0
DOMINANT = 60.0
MAX_STRENGTHS = 4
MAX_GROWTH_AREAS = 3
MAX_DOMINANT_TRAITS = 2


def get_percentile_band(percentile: float) -> PercentileBand:
    """Return the band a percentile in [0, 100] falls into.

    Raises
    ------
    ValueError
        If the percentile is NaN or outside [0, 100].
    """
    p = float(percentile)
    if math.isnan(p) or p < 0.0 or p > 100.0:
        raise ValueError(f"Percentile must be within [0, 100], got {percentile!r}")
    for upper, band in BAND_CUTS:
        if p <= upper:
            return band
    return PercentileBand.EXCEPTIONALLY_HIGH


def get_level_label(band: PercentileBand) -> str:
    return LEVEL_LABELS[band]


def resolve_dimension(dimension: Dimension) -> Union[Aspect, Trait]:
    """Accept an enum member or the exact name of a trait or aspect."""
    if isinstance(dimension, (Aspect, Trait)):
        return dimension
    for enum_cls in (Aspect, Trait):
        try:
            return enum_cls(dimension)
        except ValueError:
            continue
    raise ValueError(f"Unknown trait or aspect: {dimension!r}")


class DescriptionsService:
    """Renders band descriptions, trait analyses and the profile summary."""

    # ══════════════════════════════════════════════════════════════════════
    # 1. Single-dimension descriptions
    # ══════════════════════════════════════════════════════════════════════

    def describe(self, dimension: Dimension, percentile: float) -> DimensionDescription:
        """Describe one trait or aspect at the given percentile.

        Parameters
        ----------
        dimension:
            ``Aspect`` or ``Trait`` member, or its exact name
            (e.g. ``"Compassion"``).
        percentile:
            Value in [0, 100].

        Returns
        -------
        DimensionDescription
            Band-specific description plus the pole-level lists and
            relationship and career sentences.
        """
        resolved = resolve_dimension(dimension)
        band = get_percentile_band(percentile)
        content = _content_for(resolved)
        pole = content["low"] if band in _LOW_POLE_BANDS else content["high"]
        return DimensionDescription(
            name=resolved.value,
            percentile=float(percentile),
            level=band,
            level_label=get_level_label(band),
            description=content["descriptions"][band.value],
            characteristics=list(pole["characteristics"]),
            advantages=list(pole["advantages"]),
            challenges=list(pole["challenges"]),
            relationship_style=pole["relationship_style"],
            career_implications=pole["career_implications"],
        )

    def describe_trait(
        self, trait: Trait, aspect_percentiles: dict[Aspect, float]
    ) -> TraitAnalysis:
        """Trait overview from the mean of its two aspects, with both aspect descriptions."""
        first, second = TRAIT_ASPECTS[trait]
        p_first = aspect_percentiles.get(first, 0.0)
        p_second = aspect_percentiles.get(second, 0.0)
        trait_percentile = (p_first + p_second) / 2
        band = get_percentile_band(trait_percentile)
        return TraitAnalysis(
            name=trait.value,
            percentile=trait_percentile,
            level=band,
            level_label=get_level_label(band),
            overview=TRAIT_CONTENT[trait]["descriptions"][band.value],
            aspects=[
                self.describe(first, p_first),
                self.describe(second, p_second),
            ],
        )

    def generate_detailed_analysis(
        self, aspect_percentiles: dict[Aspect, float]
    ) -> list[TraitAnalysis]:
        missing = [a.value for a in Aspect if a not in aspect_percentiles]
        if missing:
            logger.warning("aspect_percentiles_missing", aspects=missing)
        return [self.describe_trait(trait, aspect_percentiles) for trait in ANALYSIS_ORDER]

    # ══════════════════════════════════════════════════════════════════════
    # 2. Profile summary
    # ══════════════════════════════════════════════════════════════════════

    def summarize(self, trait_percentiles: dict[Trait, float]) -> NarrativeSummary:
        """Short narrative: one sentence per trait, strengths, growth areas.

        Neuroticism is read inversely: a low score is a strength and a
        high score a growth area.
        """
        traits: dict[Trait, str] = {}
        strengths: list[str] = []
        growth_areas: list[str] = []

        for trait in Trait:
            p = trait_percentiles.get(trait, 0.0)
            traits[trait] = f"You are {TRAIT_TIER_SENTENCES[trait][_tier(p)]}."

            if trait is Trait.NEUROTICISM:
                is_strength, needs_growth = p <= LOW_TIER, p >= GROWTH_HIGH
            else:
                is_strength, needs_growth = p >= HIGH_TIER, p <= GROWTH_LOW
            if is_strength:
                strengths.append(TRAIT_STRENGTHS[trait])
            if needs_growth:
                growth_areas.append(TRAIT_GROWTH_AREAS[trait])

        dominant = [
            trait.value.lower()
            for trait in Trait
            if trait_percentiles.get(trait, 0.0) >= DOMINANT
        ][:MAX_DOMINANT_TRAITS]
        if dominant:
            summary = DOMINANT_SUMMARY.format(traits=" and ".join(dominant))
        else:
            summary = BALANCED_SUMMARY

        return NarrativeSummary(
            summary=summary,
            traits=traits,
            strengths=strengths[:MAX_STRENGTHS],
            growth_areas=growth_areas[:MAX_GROWTH_AREAS],
        )


def _tier(percentile: float) -> str:
    if percentile >= HIGH_TIER:
        return "high"
    if percentile <= LOW_TIER:
        return "low"
    return "moderate"


def _content_for(dimension: Union[Aspect, Trait]) -> dict:
    if isinstance(dimension, Aspect):
        return ASPECT_CONTENT[dimension]
    return TRAIT_CONTENT[dimension]
