"""
Secure Prompt Manager Module

This module provides a secure way to manage AI prompts by isolating them from user data
to prevent injection attacks. It implements a template-based system with explicit
placeholders and comprehensive sanitization.

The module contains:
- PromptTemplate: A dataclass for secure prompt templates with placeholders
- SecurePromptManager: Main class for managing the feedback and follow-up prompts
- sanitize_text: Utility function for text sanitization

Dependencies:
- dataclasses: For template data structures
- typing: For type hints
- re: For regex-based sanitization
- html: For HTML entity encoding

Author: @kcaparas1630
"""

from typing import Dict
from dataclasses import dataclass
import re
import html
import logging

logger = logging.getLogger(__name__)

# Candidate answers are long-form; questions are one or two sentences.
ANSWER_MAX_LENGTH = 6000
QUESTION_MAX_LENGTH = 1000


def sanitize_text(text: str, max_length: int = 1000, escape_html: bool = True) -> str:
    """
    Sanitize text input to prevent injection attacks and ensure data safety.

    This function performs multiple sanitization steps:
    1. Optional HTML entity encoding to prevent XSS
    2. Strips leading/trailing whitespace
    3. Removes null bytes and other control characters
    4. Configurable length limiting to prevent DoS attacks
    5. Normalizes unicode characters

    Args:
        text (str): The text to sanitize
        max_length (int): Maximum allowed length (default: 1000)
        escape_html (bool): Whether to HTML escape the text (default: True)

    Returns:
        str: The sanitized text

    Raises:
        ValueError: If text is None or empty after sanitization
    """
    if text is None:
        raise ValueError("Text cannot be None")

    text = str(text)

    if escape_html:
        text = html.escape(text)

    text = text.strip()

    # Remove null bytes and other control characters (except newlines and tabs)
    text = re.sub(r'[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]', '', text)

    if len(text) > max_length:
        text = text[:max_length]
        logger.warning(f"Text truncated to {max_length} characters for security")

    text = text.encode('utf-8', errors='ignore').decode('utf-8')

    if not text:
        raise ValueError("Text cannot be empty after sanitization")

    return text


@dataclass
class PromptTemplate:
    """Secure prompt template with placeholders for safe data injection."""
    template: str
    placeholders: Dict[str, str]
    sanitization_config: Dict[str, Dict] = None  # Per-placeholder sanitization config

    def render(self, **kwargs) -> str:
        """
        Safely render the template with provided data.

        Args:
            **kwargs: Data to inject into placeholders

        Returns:
            str: Rendered prompt with sanitized data

        Raises:
            ValueError: If required placeholders are missing or data is invalid
        """
        missing_placeholders = set(self.placeholders.keys()) - set(kwargs.keys())
        if missing_placeholders:
            raise ValueError(f"Missing required placeholders: {missing_placeholders}")

        sanitized_data = {}
        for key, value in kwargs.items():
            if key in self.placeholders:
                config = self.sanitization_config.get(key, {}) if self.sanitization_config else {}
                max_length = config.get('max_length', 1000)
                escape_html = config.get('escape_html', True)

                sanitized_data[key] = sanitize_text(str(value), max_length=max_length, escape_html=escape_html)
            else:
                # Skip unknown keys to prevent injection
                logger.warning(f"Unknown placeholder key: {key}")
                continue

        try:
            return self.template.format(**sanitized_data)
        except KeyError as e:
            raise ValueError(f"Template rendering error: {e}") from e


class SecurePromptManager:
    """
    Secure prompt manager that isolates prompts from user data to prevent injection attacks.

    System prompts carry no user data at all. User data only ever enters through
    the user-message templates, where every placeholder is sanitized.
    """

    def __init__(self):
        self._templates = self._initialize_templates()

    def _initialize_templates(self) -> Dict[str, PromptTemplate]:
        """Initialize secure prompt templates with explicit placeholders."""
        user_text_config = {
            "question": {"max_length": QUESTION_MAX_LENGTH},
            "answer": {"max_length": ANSWER_MAX_LENGTH},
        }
        return {
            "feedback_system": PromptTemplate(
                template="""<coach_identity>
You are an expert medical residency interview coach specializing in orthopedic surgery.
Evaluate the candidate's response to an interview question and provide detailed feedback.
</coach_identity>

<evaluation_criteria>
- Content: accuracy, relevance and completeness of the orthopedic knowledge or personal narrative
- Presentation: structure, clarity and conciseness
</evaluation_criteria>

<output_format>
Return ONLY valid JSON with this exact structure - NO thought process, explanations, or additional text:
{{
  "feedback": "Brief overall assessment of the response",
  "contentScore": 0-100,
  "presentationScore": 0-100,
  "strengths": ["Strength 1", "Strength 2", "Strength 3"],
  "improvements": ["Improvement 1", "Improvement 2", "Improvement 3"]
}}
</output_format>

Keep feedback specific, actionable, and tailored to orthopedic surgery residency interviews.""",
                placeholders={}
            ),
            "feedback_user": PromptTemplate(
                template="""Question: {question}

Candidate's Response: {answer}""",
                placeholders={
                    "question": "Interview question to evaluate",
                    "answer": "Candidate's answer to evaluate"
                },
                sanitization_config=user_text_config
            ),
            "follow_up_system": PromptTemplate(
                template="""<interviewer_identity>
You are an expert medical residency interviewer specializing in orthopedic surgery.
Generate one relevant follow-up question based on the candidate's response.
</interviewer_identity>

<follow_up_rules>
1. Probe deeper into the candidate's knowledge or experience
2. Stay related to their response
3. Be challenging but fair
4. Focus on orthopedic surgery concepts, clinical scenarios, or professional development
5. Be concise and clear
</follow_up_rules>

Return only the follow-up question with no additional text or explanation.""",
                placeholders={}
            ),
            "follow_up_user": PromptTemplate(
                template="""Original Question: {question}

Candidate's Response: {answer}

Generate a follow-up question:""",
                placeholders={
                    "question": "Interview question that was asked",
                    "answer": "Candidate's answer to follow up on"
                },
                sanitization_config=user_text_config
            ),
        }

    def get_feedback_system_prompt(self) -> str:
        return self._templates["feedback_system"].render()

    def get_feedback_user_prompt(self, question: str, answer: str) -> str:
        """
        Get the feedback user message with sanitized question and answer.

        Raises:
            ValueError: If the question or answer is empty after sanitization
        """
        return self._templates["feedback_user"].render(question=question, answer=answer)

    def get_follow_up_system_prompt(self) -> str:
        return self._templates["follow_up_system"].render()

    def get_follow_up_user_prompt(self, question: str, answer: str) -> str:
        """
        Get the follow-up user message with sanitized question and answer.

        Raises:
            ValueError: If the question or answer is empty after sanitization
        """
        return self._templates["follow_up_user"].render(question=question, answer=answer)


# Global instance for reuse across the application
secure_prompt_manager = SecurePromptManager()
