"""
Test Response Validation Module

This module tests clean_ai_response and validate_ai_response to ensure completion
text is reduced to its JSON payload and that system prompt leakage is blocked.

Dependencies:
- pytest: For testing framework
- ortho_coach.helper.ai_response_utils: The module being tested

Author: @kcaparas1630
"""

import pytest
from ortho_coach.helper.ai_response_utils import FOLLOW_UP_SUSPICIOUS_PATTERNS, clean_ai_response, validate_ai_response


class TestCleanAIResponse:
    """Test the clean_ai_response function."""

    def test_plain_json_is_unchanged(self):
        content = '{"contentScore": 70, "presentationScore": 60}'
        assert clean_ai_response(content) == content

    def test_think_tags_are_removed(self):
        content = '<think>The candidate named two types...</think>\n{"contentScore": 40}'
        assert clean_ai_response(content) == '{"contentScore": 40}'

    def test_unclosed_think_tag_is_removed(self):
        content = '<think>{"contentScore": 40}'
        assert clean_ai_response(content) == '{"contentScore": 40}'

    def test_surrounding_prose_is_removed(self):
        content = 'Here is my evaluation: {"feedback": "Good", "contentScore": 80} Hope this helps!'
        assert clean_ai_response(content) == '{"feedback": "Good", "contentScore": 80}'

    def test_nested_objects_are_kept_whole(self):
        content = '{"feedback": "Good", "detail": {"a": 1}} trailing'
        assert clean_ai_response(content) == '{"feedback": "Good", "detail": {"a": 1}}'

    def test_unbalanced_json_keeps_tail(self):
        content = 'Result: {"feedback": "Cut off", "contentScore": 72'
        assert clean_ai_response(content) == '{"feedback": "Cut off", "contentScore": 72'

    def test_text_without_json_is_stripped(self):
        assert clean_ai_response("  What would you do next?  ") == "What would you do next?"

    @pytest.mark.parametrize("content", [None, ""])
    def test_empty_input_is_returned_as_is(self, content):
        assert clean_ai_response(content) == content


class TestValidateAIResponse:
    """Test the validate_ai_response function for various scenarios."""

    def test_valid_json_response(self):
        """Test that valid JSON responses pass validation."""
        valid_responses = [
            '{"contentScore": 70, "presentationScore": 60, "feedback": "Good response"}',
            '{"contentScore": 40, "feedback": "Average response", "improvements": ["Mention Type IIIB"]}',
            '{"contentScore": 95, "feedback": "Excellent response", "strengths": ["Covered Schatzker types"]}'
        ]

        for response in valid_responses:
            assert validate_ai_response(response) is True

    def test_system_prompt_leakage_detection(self):
        """Test that system prompt leakage is detected and blocked."""
        leak_responses = [
            '<coach_identity>You are an expert medical residency interview coach</coach_identity>',
            '<interviewer_identity>You are an interviewer</interviewer_identity>',
            '<evaluation_criteria>Content: accuracy</evaluation_criteria>',
            '<output_format>Return ONLY valid JSON</output_format>',
            '<follow_up_rules>1. Probe deeper</follow_up_rules>',
            'Return ONLY valid JSON with this exact structure',
            'Return only the follow-up question with no additional text',
        ]

        for response in leak_responses:
            assert validate_ai_response(response) is False

    def test_leak_detection_is_case_insensitive(self):
        assert validate_ai_response('<COACH_IDENTITY>hello</COACH_IDENTITY>') is False
        assert validate_ai_response('coach_identity') is False

    def test_suspicious_content_detection(self):
        """Test that suspicious content indicating instruction leakage is detected."""
        suspicious_responses = [
            'I am an AI assistant and my instructions are to...',
            'According to my prompt, I should...',
            'As per the system instructions...',
            'Based on my system instructions, I need to...',
        ]

        for response in suspicious_responses:
            assert validate_ai_response(response) is False

    def test_excessive_length_detection(self):
        """Test that responses exceeding the default length are blocked."""
        long_response = '{"contentScore": 70, "feedback": "' + 'x' * 5000 + '"}'
        assert validate_ai_response(long_response) is False

    def test_custom_length_limit(self):
        question = "What would you do if the " + "compartment " * 100 + "was tight?"

        assert validate_ai_response(question) is True
        assert validate_ai_response(question, max_length=100) is False

    def test_invalid_input_handling(self):
        """Test that invalid inputs are properly handled."""
        for invalid_input in [None, "", "   ", 123, [], {}, True]:
            assert validate_ai_response(invalid_input) is False

    def test_mixed_content_validation(self):
        """Valid JSON that carries leaked or suspicious text is still rejected."""
        mixed_responses = [
            '{"contentScore": 70, "feedback": "I am an AI assistant analyzing this"}',
            '{"contentScore": 80, "feedback": "Good", "strengths": ["<coach_identity>"]}',
            '{"contentScore": 60, "feedback": "According to my prompt, this is good"}'
        ]

        for response in mixed_responses:
            assert validate_ai_response(response) is False


class TestValidateFollowUpQuestion:
    """Follow-up questions are checked with the narrower suspicious pattern set."""

    @pytest.mark.parametrize("question", [
        "According to the Gustilo system, how would you manage a Type IIIB injury?",
        "As per the Schatzker system, which type involves the medial plateau?",
        "Based on the Garden system and its instructions for reduction, what would you do?",
    ])
    def test_classification_system_questions_pass(self, question):
        assert validate_ai_response(question) is False
        assert validate_ai_response(question, suspicious_patterns=FOLLOW_UP_SUSPICIOUS_PATTERNS) is True

    @pytest.mark.parametrize("question", [
        "I am an AI assistant. What would you do next?",
        "My instructions say to ask: what antibiotics would you start?",
        "According to my system prompt, how would you classify this?",
        "<follow_up_rules> What next?",
    ])
    def test_off_script_questions_are_rejected(self, question):
        assert validate_ai_response(question, suspicious_patterns=FOLLOW_UP_SUSPICIOUS_PATTERNS) is False
