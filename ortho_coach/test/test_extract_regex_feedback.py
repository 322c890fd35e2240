"""
Test feedback extraction from completion text.

Author: @kcaparas1630
"""

import pytest
from ortho_coach.helper.extract_regex_feedback import clamp_score, extract_regex_feedback, feedback_from_dict


class TestClampScore:

    @pytest.mark.parametrize("value, expected", [
        (50, 50),
        ("72", 72),
        (72.6, 73),
        (-3, 0),
        (140, 100),
    ])
    def test_clamp_score(self, value, expected):
        assert clamp_score(value) == expected

    @pytest.mark.parametrize("value", [None, "high", "", True, float("nan"), float("inf"), [70]])
    def test_non_numeric_scores_are_rejected(self, value):
        with pytest.raises(ValueError):
            clamp_score(value)


class TestFeedbackFromDict:

    def test_optional_fields_get_defaults(self):
        result = feedback_from_dict({"contentScore": 55, "presentationScore": 40})

        assert result.feedback == ""
        assert result.contentScore == 55
        assert result.presentationScore == 40
        assert result.strengths == []
        assert result.improvements == []

    @pytest.mark.parametrize("data", [
        {},
        {"feedback": "Nice"},
        {"contentScore": 55},
        {"presentationScore": 40},
        {"contentScore": "high", "presentationScore": "good"},
        {"contentScore": None, "presentationScore": 40},
    ])
    def test_missing_or_invalid_scores_give_none(self, data):
        assert feedback_from_dict(data) is None

    def test_non_list_strengths_are_dropped(self):
        result = feedback_from_dict({
            "contentScore": 55,
            "presentationScore": 40,
            "strengths": "Clear",
            "improvements": ["", "Add detail"],
        })

        assert result.strengths == []
        assert result.improvements == ["Add detail"]


class TestExtractRegexFeedback:

    def test_valid_json(self):
        content = (
            '{"feedback": "Good", "contentScore": 80, "presentationScore": 65, '
            '"strengths": ["Named Schatzker types"], "improvements": ["Mention CT"]}'
        )

        result = extract_regex_feedback(content)

        assert result.feedback == "Good"
        assert result.contentScore == 80
        assert result.presentationScore == 65
        assert result.strengths == ["Named Schatzker types"]
        assert result.improvements == ["Mention CT"]

    def test_json_that_is_not_an_object(self):
        assert extract_regex_feedback('["contentScore", 80]') is None

    @pytest.mark.parametrize("content", ['{}', '{"feedback": "Nice"}', '{"contentScore": "high", "presentationScore": "good"}'])
    def test_json_without_usable_scores(self, content):
        assert extract_regex_feedback(content) is None

    def test_single_quoted_pseudo_json(self):
        content = "{'feedback': 'Well organised', 'contentScore': 70, 'presentationScore': 90, 'strengths': ['Clear']}"

        result = extract_regex_feedback(content)

        assert result.feedback == "Well organised"
        assert result.contentScore == 70
        assert result.presentationScore == 90
        assert result.strengths == ["Clear"]

    def test_only_one_score_found(self):
        assert extract_regex_feedback('{"presentationScore": 35, "feedback": "Rambling"') is None

    def test_missing_feedback_text_gets_placeholder(self):
        result = extract_regex_feedback('{"contentScore": 35, "presentationScore": 20,')

        assert result.feedback == "No specific feedback provided."
        assert (result.contentScore, result.presentationScore) == (35, 20)

    def test_no_scores_returns_none(self):
        assert extract_regex_feedback("The answer was good overall.") is None
