"""Unit tests for validate_responses — exhaustive validation returned as data."""
import pytest


class TestCountGate:
    """Tests for the response-count check."""

    @pytest.mark.parametrize("count", [0, 99, 101])
    def test_single_count_issue(self, scoring_service, count):
        """A wrong length yields exactly one count issue."""
        result = scoring_service.validate_responses(["bogus"] * count)
        assert not result.valid
        assert len(result.issues) == 1
        assert result.issues[0].code == "wrong_response_count"
        assert result.issues[0].value == count
        assert result.errors == [f"Expected 100 responses, got {count}"]

    @pytest.mark.parametrize("payload", [None, "Neutral", {"responses": []}, 42])
    def test_non_list_rejected(self, scoring_service, payload):
        """Non-list input is reported as a count issue."""
        result = scoring_service.validate_responses(payload)
        assert not result.valid
        assert [issue.code for issue in result.issues] == ["wrong_response_count"]


class TestLabelChecks:
    """Tests for per-entry label validation."""

    def test_valid_set(self, scoring_service, neutral_responses):
        """A full set of known labels is valid."""
        result = scoring_service.validate_responses(neutral_responses)
        assert result.valid
        assert result.errors == []
        assert result.issues == []

    def test_every_bad_index_reported(self, scoring_service, neutral_responses):
        """Bad labels at 2, 50 and 99 give exactly three issues."""
        responses = list(neutral_responses)
        responses[2] = "Maybe"
        responses[50] = None
        responses[99] = 3
        result = scoring_service.validate_responses(responses)
        assert not result.valid
        assert len(result.issues) == 3
        assert [issue.index for issue in result.issues] == [2, 50, 99]
        assert {issue.code for issue in result.issues} == {"invalid_response_level"}
        assert all(str(issue.index) in message for issue, message in zip(result.issues, result.errors))

    def test_offending_values_recorded(self, scoring_service, neutral_responses):
        """Each issue records the value that was rejected."""
        responses = list(neutral_responses)
        responses[10] = "agree"
        result = scoring_service.validate_responses(responses)
        assert result.issues[0].value == "agree"

    def test_validate_never_raises(self, scoring_service):
        """Garbage input is reported, not raised."""
        result = scoring_service.validate_responses([object()] * 100)
        assert len(result.issues) == 100
