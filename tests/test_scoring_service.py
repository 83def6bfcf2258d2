"""Unit tests for Big5ScoringService — encoding, aggregation and prediction."""
import json

import pytest

from big5_scoring.exceptions import InvalidResponseLevel, WrongResponseCount
from big5_scoring.schemas.questionnaire import (
    ASPECT_TO_TRAIT,
    LEVEL_ENCODING,
    RESPONSE_OPTIONS,
    TRAIT_ASPECTS,
    Aspect,
    ResponseLevel,
    Trait,
)
from big5_scoring.services.scoring_service import Big5ScoringService


class TestResponseEncoding:
    """Tests for the five-point encoder and reverse keying."""

    def test_level_encoding_is_symmetric(self, scoring_service):
        """StronglyDisagree..StronglyAgree map to -2..+2."""
        values = [scoring_service._encode_level(level) for level in ResponseLevel]
        assert values == [-2.0, -1.0, 0.0, 1.0, 2.0]

    def test_reverse_negates(self, scoring_service):
        """A reversed item contributes the negated value."""
        for level in ResponseLevel:
            v = LEVEL_ENCODING[level]
            assert scoring_service._score_item(v, True) == -v
            assert scoring_service._score_item(v, False) == v

    def test_reverse_cancels_opposite_answers(self, scoring_service):
        """Agree on a reversed item scores the same as Disagree on a forward one."""
        agree = scoring_service._encode_level(ResponseLevel.AGREE)
        disagree = scoring_service._encode_level(ResponseLevel.DISAGREE)
        assert scoring_service._score_item(agree, True) == scoring_service._score_item(disagree, False)


class TestAggregation:
    """Tests for per-aspect means and trait averaging."""

    def test_aspect_mean(self, scoring_service):
        """Mean is taken per aspect, independent of order."""
        scored = [(Aspect.COMPASSION, 2.0), (Aspect.INTELLECT, -1.0), (Aspect.COMPASSION, 0.0)]
        forward = scoring_service._aggregate_aspects(scored)
        backward = scoring_service._aggregate_aspects(list(reversed(scored)))
        assert forward[Aspect.COMPASSION] == pytest.approx(1.0)
        assert forward[Aspect.INTELLECT] == pytest.approx(-1.0)
        assert forward == backward

    def test_empty_aspect_is_zero(self, scoring_service):
        """Aspects with no items average to 0 and are still present."""
        means = scoring_service._aggregate_aspects([(Aspect.COMPASSION, 1.0)])
        assert set(means) == set(Aspect)
        assert means[Aspect.AESTHETICS] == 0.0

    def test_aspect_trait_maps_agree(self):
        """Aspect.trait and TRAIT_ASPECTS describe the same pairing."""
        assert set(ASPECT_TO_TRAIT) == set(Aspect)
        for trait, pair in TRAIT_ASPECTS.items():
            assert [aspect.trait for aspect in pair] == [trait, trait]
        for aspect in Aspect:
            assert aspect in TRAIT_ASPECTS[aspect.trait]

    def test_trait_is_mean_of_aspects(self, scoring_service):
        """Each trait percentile is the mean of its two aspects."""
        aspects = {aspect: float(i * 10) for i, aspect in enumerate(Aspect)}
        traits = scoring_service._aggregate_traits(aspects)
        for trait, (first, second) in TRAIT_ASPECTS.items():
            assert traits[trait] == pytest.approx((aspects[first] + aspects[second]) / 2)


class TestPrediction:
    """Tests for predict_from_responses on full response sets."""

    def test_neutral_baseline_is_intercept(self, scoring_service, scoring_model, neutral_responses):
        """All-Neutral answers give clamp(b) for every aspect."""
        result = scoring_service.predict_from_responses(neutral_responses)
        for aspect, model in scoring_model.linear_models.items():
            assert result.aspect_percentiles[aspect] == pytest.approx(max(0.0, min(100.0, model.b)))

    def test_strongly_agree_applies_reverse_keying(
        self, scoring_service, scoring_model, strongly_agree_responses
    ):
        """All-StronglyAgree answers net out reversed items per aspect."""
        result = scoring_service.predict_from_responses(strongly_agree_responses)
        for aspect in Aspect:
            items = [item for item in scoring_model.items if item.aspect is aspect]
            mean = sum(-2.0 if item.reverse else 2.0 for item in items) / len(items)
            model = scoring_model.linear_models[aspect]
            expected = max(0.0, min(100.0, model.a * mean + model.b))
            assert result.aspect_percentiles[aspect] == pytest.approx(expected)

    def test_withdrawal_strongly_agree_value(self, scoring_service, strongly_agree_responses):
        """Withdrawal has 6 forward and 4 reversed items: mean 0.4."""
        result = scoring_service.predict_from_responses(strongly_agree_responses)
        assert result.aspect_percentiles[Aspect.WITHDRAWAL] == pytest.approx(24.7 * 0.4 + 50.4)

    def test_extremes_saturate(self, scoring_service, keyed_responses):
        """Out-of-range predictions clamp to 0 and 100."""
        high = scoring_service.predict_from_responses(keyed_responses(True))
        low = scoring_service.predict_from_responses(keyed_responses(False))
        assert high.aspect_percentiles[Aspect.COMPASSION] == 100.0
        assert low.aspect_percentiles[Aspect.ASSERTIVENESS] == 0.0
        for result in (high, low):
            for value in list(result.aspect_percentiles.values()) + list(result.trait_percentiles.values()):
                assert 0.0 <= value <= 100.0

    def test_deterministic(self, scoring_service, strongly_agree_responses):
        """Identical input gives identical percentiles."""
        first = scoring_service.predict_from_responses(strongly_agree_responses)
        second = scoring_service.predict_from_responses(strongly_agree_responses)
        assert first.aspect_percentiles == second.aspect_percentiles
        assert first.trait_percentiles == second.trait_percentiles

    def test_accepts_enum_members(self, scoring_service):
        """ResponseLevel members score the same as their labels."""
        by_enum = scoring_service.predict_from_responses([ResponseLevel.AGREE] * 100)
        by_label = scoring_service.predict_from_responses(["Agree"] * 100)
        assert by_enum.aspect_percentiles == by_label.aspect_percentiles

    def test_metadata(self, scoring_service, neutral_responses):
        """Metadata records model version and response count."""
        result = scoring_service.predict_from_responses(neutral_responses)
        assert result.metadata.model_version == "1.0"
        assert result.metadata.total_responses == 100
        assert result.metadata.computed_at.tzinfo is not None

    def test_json_layout_uses_camel_case(self, scoring_service, neutral_responses):
        """Persisted JSON uses camelCase keys and enum labels."""
        blob = json.loads(scoring_service.predict_from_responses(neutral_responses).to_json())
        assert set(blob) == {"aspectPercentiles", "traitPercentiles", "metadata"}
        assert set(blob["metadata"]) == {"modelVersion", "computedAt", "totalResponses"}
        assert set(blob["traitPercentiles"]) == {t.value for t in Trait}
        assert len(blob["aspectPercentiles"]) == 10


class TestPredictionErrors:
    """Tests for fail-fast errors."""

    @pytest.mark.parametrize("count", [0, 99, 101])
    def test_wrong_count(self, scoring_service, count):
        """Wrong length raises WrongResponseCount with both counts."""
        with pytest.raises(WrongResponseCount) as exc_info:
            scoring_service.predict_from_responses(["Neutral"] * count)
        assert exc_info.value.expected == 100
        assert exc_info.value.actual == count
        assert exc_info.value.status_code == 400

    def test_wrong_count_beats_bad_labels(self, scoring_service):
        """Count is checked before labels."""
        with pytest.raises(WrongResponseCount):
            scoring_service.predict_from_responses(["bogus"] * 99)

    def test_non_list_input(self, scoring_service):
        """A string is not a response set."""
        with pytest.raises(WrongResponseCount) as exc_info:
            scoring_service.predict_from_responses("Neutral")
        assert exc_info.value.actual == 0

    def test_first_invalid_level_reported(self, scoring_service, neutral_responses):
        """The first unrecognised label is raised with its index."""
        responses = list(neutral_responses)
        responses[7] = "Sometimes"
        responses[42] = None
        with pytest.raises(InvalidResponseLevel) as exc_info:
            scoring_service.predict_from_responses(responses)
        assert exc_info.value.indices == [7]
        assert exc_info.value.values == ["Sometimes"]
        assert isinstance(exc_info.value, ValueError)

    def test_labels_are_case_sensitive(self, scoring_service, neutral_responses):
        """Only exact labels are accepted."""
        responses = list(neutral_responses)
        responses[0] = "neutral"
        with pytest.raises(InvalidResponseLevel):
            scoring_service.predict_from_responses(responses)


class TestProfile:
    """Tests for generate_profile."""

    def test_profile_carries_scores_and_narrative(self, scoring_service, strongly_agree_responses):
        """Profile repeats the scores and adds narrative and analysis."""
        result = scoring_service.predict_from_responses(strongly_agree_responses)
        profile = scoring_service.generate_profile(strongly_agree_responses)
        assert profile.aspect_percentiles == result.aspect_percentiles
        assert profile.trait_percentiles == result.trait_percentiles
        assert profile.narrative.summary
        assert [a.name for a in profile.analysis] == [
            "Openness", "Agreeableness", "Conscientiousness", "Extraversion", "Neuroticism",
        ]

    def test_profile_json_keys(self, scoring_service, neutral_responses):
        """Profile JSON adds narrative and analysis blocks."""
        blob = json.loads(scoring_service.generate_profile(neutral_responses).to_json())
        assert {"narrative", "analysis"} <= set(blob)
        assert "growthAreas" in blob["narrative"]
        assert "levelLabel" in blob["analysis"][0]

    def test_profile_rejects_invalid(self, scoring_service):
        """Invalid input raises before any narrative is built."""
        with pytest.raises(WrongResponseCount):
            scoring_service.generate_profile([])


class TestQuestionnaire:
    """Tests for the questionnaire accessors and progress helper."""

    def test_items_ordered_by_index(self, scoring_service):
        """Items come back in index order 0..99."""
        items = scoring_service.get_questionnaire_items()
        assert [item.index for item in items] == list(range(100))

    def test_ten_items_per_aspect(self, scoring_service):
        """Every aspect has ten statements."""
        items = scoring_service.get_questionnaire_items()
        for aspect in Aspect:
            assert sum(1 for item in items if item.aspect is aspect) == 10

    def test_known_items(self, scoring_service):
        """Spot-check a few statements and their keying."""
        items = scoring_service.get_questionnaire_items()
        assert items[0].aspect is Aspect.WITHDRAWAL and not items[0].reverse
        assert items[11].aspect is Aspect.COMPASSION and items[11].reverse
        assert items[99].aspect is Aspect.AESTHETICS

    def test_statements(self, scoring_service):
        """Statements match item texts in order."""
        statements = scoring_service.get_statements()
        assert len(statements) == 100
        assert statements[0] == "Am filled with doubts about things."

    def test_progress_empty(self, scoring_service):
        """No answers: next question is index 0."""
        progress = scoring_service.get_progress([])
        assert progress.answered == 0
        assert progress.total_questions == 100
        assert not progress.completed
        assert progress.next_question.index == 0
        assert progress.next_question.options == RESPONSE_OPTIONS

    def test_progress_gap(self, scoring_service):
        """The first unanswered slot is next, even with later answers."""
        partial = ["Agree"] * 5 + [None] + ["Agree"] * 3
        progress = scoring_service.get_progress(partial)
        assert progress.answered == 8
        assert progress.next_question.index == 5
        assert progress.next_question.statement == scoring_service.get_statements()[5]

    def test_progress_ignores_invalid_labels(self, scoring_service):
        """Unrecognised labels do not count as answered."""
        partial = ["Agree", "bogus", "Neutral", 3]
        progress = scoring_service.get_progress(partial)
        assert progress.answered == 2
        assert progress.next_question.index == 1

    def test_progress_complete(self, scoring_service, neutral_responses):
        """A full set is complete with no next question."""
        progress = scoring_service.get_progress(neutral_responses)
        assert progress.completed
        assert progress.answered == 100
        assert progress.next_question is None

    def test_progress_none(self, scoring_service):
        """None is treated as no answers."""
        assert scoring_service.get_progress(None).answered == 0


class TestServiceFactory:
    """Tests for the cached get_scoring_service factory."""

    def test_factory_is_cached(self, monkeypatch):
        """The factory builds one service per process."""
        from big5_scoring.services.scoring_service import get_scoring_service

        monkeypatch.delenv("BIG5_DATA_DIR", raising=False)
        first = get_scoring_service()
        assert first is get_scoring_service()
        assert isinstance(first, Big5ScoringService)
        assert first.expected_count == 100
