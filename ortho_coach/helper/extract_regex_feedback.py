"""
Description:
Extract feedback from content using regex patterns
This module provides a function to extract structured feedback from completion text that
is not valid JSON, using predefined regex patterns.

Arguments:
- content: The text content from which to extract feedback.

Returns:
- An instance of FeedbackResult containing structured feedback data, or None when
  either score is missing or not numeric.

Dependencies:
- ortho_coach.constants.regex_patterns: For accessing precompiled regex patterns.
- ortho_coach.schemas.feedback.feedback_result: For defining the response schema.
- json: For parsing content that is valid JSON after all.

Author: @kcaparas1630

"""
import math
from typing import List, Optional
from ortho_coach.constants.regex_patterns import REGEX_PATTERNS
from ortho_coach.schemas.feedback.feedback_result import FeedbackResult
import json
from loguru import logger

SCORE_FIELDS = ("contentScore", "presentationScore")


def clamp_score(value) -> int:
    """
    Round a score and clamp it to 0-100.

    Raises:
        ValueError: If the value is not a finite number
    """
    if isinstance(value, bool):
        raise ValueError(f"Score is not numeric: {value!r}")
    try:
        score = float(value)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Score is not numeric: {value!r}") from e
    if not math.isfinite(score):
        raise ValueError(f"Score is not finite: {value!r}")
    return max(0, min(100, int(round(score))))


def _string_list(value) -> List[str]:
    if not isinstance(value, list):
        return []
    return [str(item) for item in value if str(item).strip()]


def feedback_from_dict(data: dict) -> Optional[FeedbackResult]:
    """Build a FeedbackResult from a parsed payload, or None if either score is missing or invalid."""
    try:
        content_score, presentation_score = (clamp_score(data[field]) for field in SCORE_FIELDS)
    except KeyError as e:
        logger.warning(f"Feedback payload is missing {e}")
        return None
    except ValueError as e:
        logger.warning(f"Feedback payload has an invalid score: {e}")
        return None

    return FeedbackResult(
        feedback=str(data.get("feedback") or ""),
        contentScore=content_score,
        presentationScore=presentation_score,
        strengths=_string_list(data.get("strengths", [])),
        improvements=_string_list(data.get("improvements", [])),
    )


# Extract feedback from the content using regex patterns
def extract_regex_feedback(content: str) -> Optional[FeedbackResult]:
    try:
        json_data = json.loads(content)
        if isinstance(json_data, dict):
            return feedback_from_dict(json_data)
        logger.warning(f"Feedback payload is not a JSON object: {type(json_data).__name__}")
        return None

    except json.JSONDecodeError:
        def extract_list(pattern, text):
            match = REGEX_PATTERNS[pattern].search(text)
            if match:
                # Split by comma, strip whitespace and quotes
                return [item.strip().strip('"\'') for item in match.group(1).split(',') if item.strip()]
            return []
        def extract_int(pattern, text):
            match = REGEX_PATTERNS[pattern].search(text)
            if match:
                return clamp_score(match.group(1))
            return None
        def extract_str(pattern, text):
            match = REGEX_PATTERNS[pattern].search(text)
            if match:
                return match.group(1)
            return "No specific feedback provided."

        content_score = extract_int('contentScore', content)
        presentation_score = extract_int('presentationScore', content)
        if content_score is None or presentation_score is None:
            logger.warning("Scores missing from malformed feedback payload")
            return None

        return FeedbackResult(
            feedback=extract_str('feedback', content),
            contentScore=content_score,
            presentationScore=presentation_score,
            strengths=extract_list('strengths', content),
            improvements=extract_list('improvements', content),
        )
