"""
Heuristic Feedback Engine Module

This module scores a candidate's answer without any external calls. Content is
scored by matching the answer against the expected keywords of every topic named
in the question; presentation is scored from the structure of the text alone.
Follow-up questions come from a fixed, ordered trigger list.

The engine is deterministic: identical inputs and keyword table always give an
identical FeedbackResult. It is the degraded-mode substitute for the remote
engine.

Dependencies:
- re: For splitting answers into sentences.
- math: For half-up rounding.
- ortho_coach.services.feedback.knowledge_base: For the injected keyword table.
- ortho_coach.constants: For fixed feedback and follow-up text.

Author: @kcaparas1630
"""

import math
import re
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple
from ortho_coach.constants import feedback_messages as messages
from ortho_coach.constants.follow_up_questions import DEFAULT_FOLLOW_UP, FOLLOW_UP_TRIGGERS
from ortho_coach.schemas.feedback.feedback_result import FeedbackResult
from ortho_coach.services.feedback.feedback_engine import FeedbackEngine, is_too_brief, too_brief_result
from ortho_coach.services.feedback.knowledge_base import KnowledgeBase

SENTENCE_TERMINATORS = re.compile(r"[.!?]+")
PARAGRAPH_BREAK = "\n\n"


def round_half_up(value: float) -> int:
    """Round .5 away from zero for non-negative values (Python's round() is banker's)."""
    return int(math.floor(value + 0.5))


def split_sentences(response: str) -> List[str]:
    return [fragment for fragment in SENTENCE_TERMINATORS.split(response) if fragment.strip()]


def cite_keywords(keywords: Sequence[str], limit: int = messages.MAX_CITED_KEYWORDS) -> str:
    """Join up to `limit` keywords with ', ' and mark truncation with '...'."""
    cited = ", ".join(keywords[:limit])
    if len(keywords) > limit:
        cited += "..."
    return cited


def _bracket_message(score: int, options: Sequence[str]) -> str:
    for bound, message in zip(messages.SCORE_BRACKETS, options):
        if score >= bound:
            return message
    return options[-1]


@dataclass(frozen=True)
class TextStructure:
    length: int
    sentence_count: int
    avg_sentence_length: float
    has_paragraph_break: bool

    @classmethod
    def of(cls, response: str) -> "TextStructure":
        length = len(response)
        sentence_count = len(split_sentences(response))
        return cls(
            length=length,
            sentence_count=sentence_count,
            avg_sentence_length=length / max(1, sentence_count),
            has_paragraph_break=PARAGRAPH_BREAK in response,
        )


class HeuristicFeedbackEngine(FeedbackEngine):
    """
    Keyword and structure based feedback engine.

    Attributes:
        knowledge_base (KnowledgeBase): Topic keyword table used for content scoring.
    """

    name = "heuristic"

    def __init__(self, knowledge_base: Optional[KnowledgeBase] = None):
        self.knowledge_base = knowledge_base if knowledge_base is not None else KnowledgeBase.default()

    def score(self, question: Optional[str], response: Optional[str]) -> FeedbackResult:
        """
        Score a candidate's answer.

        Answers shorter than 10 characters after trimming get a fixed zero-score
        result and are not analysed further.

        Args:
            question (Optional[str]): The interview question. None is treated as "".
            response (Optional[str]): The candidate's answer. None is treated as "".

        Returns:
            FeedbackResult: Scores, feedback text, strengths and improvements.

        Example:
            >>> engine = HeuristicFeedbackEngine()
            >>> engine.score("Describe the Gustilo classification.", "Type I: wound <1 cm, minimal contamination").contentScore
            20
        """
        question = question or ""
        response = response or ""

        if is_too_brief(response):
            return too_brief_result()

        structure = TextStructure.of(response)
        relevant_keywords, missing_keywords = self._match_keywords(question, response)
        content_score = self._content_score(relevant_keywords, missing_keywords, structure.length)
        presentation_score = self._presentation_score(structure)

        strengths: List[str] = []
        improvements: List[str] = []

        if relevant_keywords:
            strengths.append(messages.KEYWORDS_STRENGTH.format(keywords=cite_keywords(relevant_keywords)))
        if structure.sentence_count > 3:
            strengths.append(messages.STRUCTURE_STRENGTH)

        if missing_keywords:
            improvements.append(messages.MISSING_KEYWORDS_IMPROVEMENT.format(keywords=cite_keywords(missing_keywords)))
        if structure.sentence_count < 3:
            improvements.append(messages.EXPAND_IMPROVEMENT)
        if structure.avg_sentence_length > 30:
            improvements.append(messages.CONCISE_IMPROVEMENT)

        feedback = " ".join([
            _bracket_message(content_score, messages.CONTENT_MESSAGES),
            _bracket_message(presentation_score, messages.PRESENTATION_MESSAGES),
        ])

        return FeedbackResult(
            feedback=feedback,
            contentScore=content_score,
            presentationScore=presentation_score,
            strengths=strengths,
            improvements=improvements,
        )

    def follow_up(self, question: Optional[str], response: Optional[str] = None) -> str:
        """Return the follow-up for the first trigger found in the question, or the generic one."""
        lowered = (question or "").lower()
        for trigger, follow_up_question in FOLLOW_UP_TRIGGERS:
            if trigger in lowered:
                return follow_up_question
        return DEFAULT_FOLLOW_UP

    async def generate_feedback(self, question: str, response: str) -> FeedbackResult:
        return self.score(question, response)

    async def generate_follow_up(self, question: str, response: str) -> str:
        return self.follow_up(question, response)

    def _match_keywords(self, question: str, response: str) -> Tuple[List[str], List[str]]:
        lowered_response = response.lower()
        relevant: List[str] = []
        missing: List[str] = []
        for topic in self.knowledge_base.matching_topics(question):
            for keyword in topic.keywords:
                if keyword.lower() in lowered_response:
                    relevant.append(keyword)
                else:
                    missing.append(keyword)
        return relevant, missing

    @staticmethod
    def _content_score(relevant: List[str], missing: List[str], response_length: int) -> int:
        total = len(relevant) + len(missing)
        if total > 0:
            return round_half_up(100 * len(relevant) / total)
        # No topic in the question (e.g. behavioral): length stands in for content
        return min(100, round_half_up(response_length / 10))

    @staticmethod
    def _presentation_score(structure: TextStructure) -> int:
        score = 0
        if 5 < structure.avg_sentence_length < 30:
            score += 30
        if structure.sentence_count > 3:
            score += 30
        if structure.has_paragraph_break:
            score += 20
        if 100 < structure.length < 1000:
            score += 20
        return score
