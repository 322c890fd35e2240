"""
AI Response Utilities Module

This module cleans and validates raw completion text before it is parsed into
feedback. Some models wrap their JSON in reasoning text or <think> tags despite
instructions not to; others echo parts of the system prompt back.

Dependencies:
- re: For pattern-based cleaning and leak detection.
- logging: For debug and warning logs.

Author: @kcaparas1630
"""

import logging
import re
from typing import Sequence

logger = logging.getLogger(__name__)

MAX_RESPONSE_LENGTH = 5000

LEAK_PATTERNS = [
    r"<coach_identity>",
    r"coach_identity",  # partial match
    r"<interviewer_identity>",
    r"interviewer_identity",  # partial match
    r"<evaluation_criteria>",
    r"<output_format>",
    r"<follow_up_rules>",
    r"Return ONLY valid JSON",
    r"expert medical residency interview",
    r"Return only the follow-up question",
]

SUSPICIOUS_PATTERNS = [
    r"I am.*AI.*assistant",
    r"my instructions.*are",
    r"according to.*(?:prompt|system|instructions)",
    r"as per.*system",
    r"based on.*(?:system|prompt).*instructions",
]

# Follow-up questions legitimately cite classification "systems"
FOLLOW_UP_SUSPICIOUS_PATTERNS = [
    r"I am.*AI.*assistant",
    r"my instructions",
    r"(?:system|my) prompt",
]


def clean_ai_response(content: str) -> str:
    """
    Clean AI response by removing thinking content and extracting only JSON.

    Args:
        content (str): The raw AI response content

    Returns:
        str: Cleaned content with only the first JSON object, or the stripped
            content when no JSON object is present

    Example:
        >>> clean_ai_response('<think>reasoning...</think>{"contentScore": 70}')
        '{"contentScore": 70}'
    """
    if not content or not isinstance(content, str):
        return content

    original_length = len(content)

    content = re.sub(r'<think>.*?</think>', '', content, flags=re.DOTALL | re.IGNORECASE)
    content = re.sub(r'</?think[^>]*>', '', content, flags=re.IGNORECASE)
    content = content.strip()

    # Keep only the first balanced JSON object
    json_start = content.find('{')
    if json_start != -1:
        brace_count = 0
        json_end = -1
        for i in range(json_start, len(content)):
            if content[i] == '{':
                brace_count += 1
            elif content[i] == '}':
                brace_count -= 1
                if brace_count == 0:
                    json_end = i + 1
                    break

        if json_end != -1:
            content = content[json_start:json_end]
        else:
            content = content[json_start:]

    if len(content) != original_length:
        logger.debug(f"AI response cleaned: {original_length} -> {len(content)} chars")

    return content


def validate_ai_response(content: str, max_length: int = MAX_RESPONSE_LENGTH, suspicious_patterns: Sequence[str] = SUSPICIOUS_PATTERNS) -> bool:
    """
    Validate AI response to prevent system prompt leakage.

    Args:
        content (str): The AI response content to validate
        max_length (int): Longest acceptable response
        suspicious_patterns (Sequence[str]): Patterns that mark a reply as off-script

    Returns:
        bool: True if the response is safe to use, False otherwise

    Example:
        >>> validate_ai_response('{"contentScore": 70, "feedback": "Good response"}')
        True
        >>> validate_ai_response('<coach_identity>You are an expert...</coach_identity>')
        False
    """
    if not content or not isinstance(content, str):
        return False

    if not content.strip():
        return False

    for pattern in LEAK_PATTERNS:
        if re.search(pattern, content, re.IGNORECASE | re.DOTALL):
            logger.warning(f"Potential system prompt leakage detected: {pattern}")
            return False

    if len(content) > max_length:
        logger.warning("AI response exceeds reasonable length limit")
        return False

    for pattern in suspicious_patterns:
        if re.search(pattern, content, re.IGNORECASE):
            logger.warning(f"Suspicious content detected: {pattern}")
            return False

    return True
