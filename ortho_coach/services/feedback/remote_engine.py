"""
Remote Feedback Engine Module

This module sends the candidate's answer to an OpenAI-compatible chat-completion
endpoint and turns the reply into a FeedbackResult. Any failure (transport,
empty reply, leaked system prompt, unparseable payload) is raised as
RemoteFeedbackError so the caller can fall back to the heuristic engine.

Parsing order:
- Primary: JSON parsing of the cleaned reply
- Fallback: Regex-based extraction when the reply is not valid JSON
- Error: RemoteFeedbackError if neither yields scores

Dependencies:
- openai: For AI client interactions.
- loguru: For logging operations.
- ortho_coach.core.secure_prompt_manager: For sanitized prompt construction.
- ortho_coach.helper: For cleaning, validating and parsing replies.

Author: @kcaparas1630
"""

import time
from typing import List
from openai import AsyncOpenAI
from loguru import logger
from ortho_coach.core.secure_prompt_manager import SecurePromptManager, secure_prompt_manager
from ortho_coach.errors.exceptions import RemoteFeedbackError
from ortho_coach.helper.ai_response_utils import FOLLOW_UP_SUSPICIOUS_PATTERNS, clean_ai_response, validate_ai_response
from ortho_coach.helper.extract_regex_feedback import extract_regex_feedback
from ortho_coach.schemas.feedback.feedback_result import FeedbackResult
from ortho_coach.services.feedback.feedback_engine import FeedbackEngine, is_too_brief, too_brief_result

MAX_FOLLOW_UP_LENGTH = 1000


class RemoteFeedbackEngine(FeedbackEngine):
    """
    Feedback engine backed by a chat-completion API.

    Attributes:
        client (AsyncOpenAI): Client used for feedback scoring.
        follow_up_client (AsyncOpenAI): Client used for follow-up questions.
        model (str): Chat model name.
    """

    name = "remote"

    def __init__(
        self,
        client: AsyncOpenAI,
        model: str = "gpt-3.5-turbo",
        follow_up_client: AsyncOpenAI = None,
        prompt_manager: SecurePromptManager = None,
        temperature: float = 0.3,
        max_tokens: int = 1000,
    ):
        """
        Initialize the engine with OpenAI clients.

        Example:
            >>> from openai import AsyncOpenAI
            >>> client = AsyncOpenAI(api_key="your-api-key")
            >>> engine = RemoteFeedbackEngine(client, model="gpt-4o-mini")
        """
        self.client = client
        self.follow_up_client = follow_up_client or client
        self.model = model
        self.prompt_manager = prompt_manager or secure_prompt_manager
        self.temperature = temperature
        self.max_tokens = max_tokens

    async def generate_feedback(self, question: str, response: str) -> FeedbackResult:
        """
        Score an answer through the completion API.

        Answers under the too-brief floor get the fixed zero-score result without
        an API call.

        Raises:
            RemoteFeedbackError: If the API call fails or the reply cannot be used.
        """
        if is_too_brief(response):
            logger.info("Answer too brief for remote scoring, returning zero scores")
            return too_brief_result()

        messages = self._build_messages(
            self.prompt_manager.get_feedback_system_prompt(),
            self.prompt_manager.get_feedback_user_prompt,
            question,
            response,
        )
        content = await self._complete(self.client, messages)

        content = clean_ai_response(content)
        if not validate_ai_response(content):
            raise RemoteFeedbackError("Feedback reply failed validation")

        result = extract_regex_feedback(content)
        if result is None:
            logger.error(f"Content that failed to parse: {content}")
            raise RemoteFeedbackError("Feedback reply could not be parsed")
        return result

    async def generate_follow_up(self, question: str, response: str) -> str:
        """
        Generate a follow-up question through the completion API.

        Raises:
            RemoteFeedbackError: If the API call fails or the reply is empty or unsafe.
        """
        messages = self._build_messages(
            self.prompt_manager.get_follow_up_system_prompt(),
            self.prompt_manager.get_follow_up_user_prompt,
            question,
            response,
        )
        content = await self._complete(self.follow_up_client, messages)

        follow_up_question = clean_ai_response(content).strip().strip('"')
        if not validate_ai_response(
            follow_up_question,
            max_length=MAX_FOLLOW_UP_LENGTH,
            suspicious_patterns=FOLLOW_UP_SUSPICIOUS_PATTERNS,
        ):
            raise RemoteFeedbackError("Follow-up reply failed validation")
        return follow_up_question

    def _build_messages(self, system_prompt: str, render_user_prompt, question: str, response: str) -> List[dict]:
        try:
            user_prompt = render_user_prompt(question=question or "", answer=response or "")
        except ValueError as e:
            raise RemoteFeedbackError(f"Cannot build prompt: {e}") from e
        return [
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": user_prompt},
        ]

    async def _complete(self, client: AsyncOpenAI, messages: List[dict]) -> str:
        start_time = time.time()
        try:
            completion = await client.chat.completions.create(
                model=self.model,
                max_tokens=self.max_tokens,
                temperature=self.temperature,
                messages=messages,
            )
        except Exception as e:
            logger.error(f"Completion API call failed: {type(e).__name__}: {e}")
            raise RemoteFeedbackError(f"Completion API call failed: {e}") from e

        logger.info(f"LLM call completed in {time.time() - start_time:.3f}s")

        if not completion.choices:
            raise RemoteFeedbackError("Completion API returned no choices")
        content = completion.choices[0].message.content
        if not content or not content.strip():
            raise RemoteFeedbackError("Completion API returned empty content")
        return content
