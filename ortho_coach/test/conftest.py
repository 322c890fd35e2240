"""
Shared pytest fixtures.

The environment is fixed before the application is imported because the rate
limiter and settings are read at import time.
"""

import os

os.environ["ENV"] = "test"
os.environ["FEEDBACK_ENGINE"] = "heuristic"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ.pop("OPENAI_API_KEY", None)
os.environ.pop("KEYWORD_TABLE_PATH", None)

from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from ortho_coach.core.config import get_settings
from ortho_coach.main import app
from ortho_coach.services.feedback.heuristic_engine import HeuristicFeedbackEngine
from ortho_coach.services.feedback.knowledge_base import KnowledgeBase
from ortho_coach.services.question_bank.question_bank_service import QuestionBankService
from ortho_coach.services.interview_session.session_service import SessionService


@pytest.fixture(autouse=True)
def _reset_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def engine() -> HeuristicFeedbackEngine:
    return HeuristicFeedbackEngine(KnowledgeBase.default())


@pytest.fixture
def question_bank() -> QuestionBankService:
    return QuestionBankService.with_seed_questions()


@pytest.fixture
def session_service(question_bank) -> SessionService:
    return SessionService(question_bank)


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


class FakeCompletions:
    """Stands in for client.chat.completions, recording every create() call."""

    def __init__(self, content=None, error=None):
        self.content = content
        self.error = error
        self.calls = []

    async def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def make_fake_client(content=None, error=None):
    completions = FakeCompletions(content=content, error=error)
    return SimpleNamespace(chat=SimpleNamespace(completions=completions))


@pytest.fixture
def fake_client_factory():
    return make_fake_client
