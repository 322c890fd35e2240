"""
Test Remote Feedback Engine Module

The completion client is replaced by an in-memory fake so no network calls are
made. Every failure mode must surface as RemoteFeedbackError.

Author: @kcaparas1630
"""

import json
import pytest
from ortho_coach.errors.exceptions import RemoteFeedbackError
from ortho_coach.schemas.feedback.feedback_result import FeedbackResult
from ortho_coach.services.feedback.feedback_engine import too_brief_result
from ortho_coach.services.feedback.remote_engine import RemoteFeedbackEngine

QUESTION = "Describe the Gustilo classification for open fractures."
ANSWER = "Type I wounds are under 1 cm and clean. Type II wounds are 1-10 cm."

VALID_PAYLOAD = {
    "feedback": "Solid grasp of the lower grades.",
    "contentScore": 45,
    "presentationScore": 70,
    "strengths": ["Accurate wound sizes"],
    "improvements": ["Cover the Type III subtypes"],
}


class TestRemoteFeedback:

    @pytest.mark.asyncio
    async def test_valid_json_reply(self, fake_client_factory):
        client = fake_client_factory(content=json.dumps(VALID_PAYLOAD))
        engine = RemoteFeedbackEngine(client, model="gpt-4o-mini")

        result = await engine.generate_feedback(QUESTION, ANSWER)

        assert result == FeedbackResult(**VALID_PAYLOAD)

    @pytest.mark.asyncio
    async def test_request_shape(self, fake_client_factory):
        client = fake_client_factory(content=json.dumps(VALID_PAYLOAD))
        engine = RemoteFeedbackEngine(client, model="gpt-4o-mini", temperature=0.1, max_tokens=500)

        await engine.generate_feedback(QUESTION, ANSWER)

        call = client.chat.completions.calls[0]
        assert call["model"] == "gpt-4o-mini"
        assert call["temperature"] == 0.1
        assert call["max_tokens"] == 500
        assert [message["role"] for message in call["messages"]] == ["system", "user"]
        assert "<coach_identity>" in call["messages"][0]["content"]
        assert QUESTION in call["messages"][1]["content"]

    @pytest.mark.asyncio
    async def test_candidate_text_is_sanitized(self, fake_client_factory):
        client = fake_client_factory(content=json.dumps(VALID_PAYLOAD))
        engine = RemoteFeedbackEngine(client)

        await engine.generate_feedback(QUESTION, "<script>alert(1)</script> I would debride the wound.")

        user_message = client.chat.completions.calls[0]["messages"][1]["content"]
        assert "<script>" not in user_message
        assert "&lt;script&gt;" in user_message

    @pytest.mark.asyncio
    async def test_scores_are_clamped(self, fake_client_factory):
        payload = dict(VALID_PAYLOAD, contentScore=150, presentationScore=-5)
        engine = RemoteFeedbackEngine(fake_client_factory(content=json.dumps(payload)))

        result = await engine.generate_feedback(QUESTION, ANSWER)

        assert result.contentScore == 100
        assert result.presentationScore == 0

    @pytest.mark.asyncio
    async def test_reasoning_wrapped_reply(self, fake_client_factory):
        content = "<think>The candidate only covered two types.</think>\n" + json.dumps(VALID_PAYLOAD)
        engine = RemoteFeedbackEngine(fake_client_factory(content=content))

        result = await engine.generate_feedback(QUESTION, ANSWER)

        assert result.contentScore == 45

    @pytest.mark.asyncio
    async def test_truncated_reply_uses_regex_extraction(self, fake_client_factory):
        content = (
            '{"feedback": "Solid answer", "contentScore": 72, "presentationScore": 64, '
            '"strengths": ["clear"], "improvements": ["more depth"'
        )
        engine = RemoteFeedbackEngine(fake_client_factory(content=content))

        result = await engine.generate_feedback(QUESTION, ANSWER)

        assert result.feedback == "Solid answer"
        assert result.contentScore == 72
        assert result.presentationScore == 64
        assert result.strengths == ["clear"]
        assert result.improvements == []


class TestRemoteFeedbackFailures:

    @pytest.mark.asyncio
    @pytest.mark.parametrize("content", [
        "I cannot evaluate this answer.",
        "[1, 2, 3]",
        "",
        "   ",
        None,
        '{"feedback": "<coach_identity> leaked", "contentScore": 50, "presentationScore": 50}',
        '{"feedback": "According to my prompt this is fine", "contentScore": 50}',
        '{}',
        '{"feedback": "Nice"}',
        '{"contentScore": "high", "presentationScore": "good"}',
    ])
    async def test_unusable_reply_raises(self, fake_client_factory, content):
        engine = RemoteFeedbackEngine(fake_client_factory(content=content))

        with pytest.raises(RemoteFeedbackError):
            await engine.generate_feedback(QUESTION, ANSWER)

    @pytest.mark.asyncio
    async def test_transport_error_raises(self, fake_client_factory):
        engine = RemoteFeedbackEngine(fake_client_factory(error=ConnectionError("connection reset")))

        with pytest.raises(RemoteFeedbackError, match="connection reset"):
            await engine.generate_feedback(QUESTION, ANSWER)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("answer", ["", None, "   ", "I dunno"])
    async def test_too_brief_answer_scores_zero_without_calling_api(self, fake_client_factory, answer):
        client = fake_client_factory(content=json.dumps(VALID_PAYLOAD))
        engine = RemoteFeedbackEngine(client)

        result = await engine.generate_feedback(QUESTION, answer)

        assert result == too_brief_result()
        assert result.improvements == ["Provide a more detailed answer"]
        assert client.chat.completions.calls == []


class TestRemoteFollowUp:

    @pytest.mark.asyncio
    async def test_follow_up_uses_dedicated_client(self, fake_client_factory):
        feedback_client = fake_client_factory(content=json.dumps(VALID_PAYLOAD))
        follow_up_client = fake_client_factory(content='"How would you manage a Type IIIB injury?"')
        engine = RemoteFeedbackEngine(feedback_client, follow_up_client=follow_up_client)

        result = await engine.generate_follow_up(QUESTION, ANSWER)

        assert result == "How would you manage a Type IIIB injury?"
        assert feedback_client.chat.completions.calls == []
        assert len(follow_up_client.chat.completions.calls) == 1
        assert "<follow_up_rules>" in follow_up_client.chat.completions.calls[0]["messages"][0]["content"]

    @pytest.mark.asyncio
    async def test_follow_up_defaults_to_feedback_client(self, fake_client_factory):
        client = fake_client_factory(content="What antibiotics would you start?")
        engine = RemoteFeedbackEngine(client)

        assert await engine.generate_follow_up(QUESTION, ANSWER) == "What antibiotics would you start?"

    @pytest.mark.asyncio
    async def test_leaked_follow_up_raises(self, fake_client_factory):
        engine = RemoteFeedbackEngine(fake_client_factory(content="<interviewer_identity> Why?"))

        with pytest.raises(RemoteFeedbackError):
            await engine.generate_follow_up(QUESTION, ANSWER)

    @pytest.mark.asyncio
    async def test_overlong_follow_up_raises(self, fake_client_factory):
        engine = RemoteFeedbackEngine(fake_client_factory(content="Why " * 400))

        with pytest.raises(RemoteFeedbackError):
            await engine.generate_follow_up(QUESTION, ANSWER)

    @pytest.mark.asyncio
    async def test_follow_up_citing_a_classification_system_is_kept(self, fake_client_factory):
        question = "According to the Gustilo system, how would you manage a Type IIIB injury?"
        engine = RemoteFeedbackEngine(fake_client_factory(content=question))

        assert await engine.generate_follow_up(QUESTION, ANSWER) == question

    @pytest.mark.asyncio
    async def test_off_script_follow_up_raises(self, fake_client_factory):
        engine = RemoteFeedbackEngine(fake_client_factory(content="I am an AI assistant, so what would you do next?"))

        with pytest.raises(RemoteFeedbackError):
            await engine.generate_follow_up(QUESTION, ANSWER)
