"""
Description:
Selects the feedback engine for the application from its settings.

The heuristic engine is always available. When FEEDBACK_ENGINE=remote and an API
key is configured, the remote engine is tried first with the heuristic engine
as its fallback.

Dependencies:
- loguru: For logging the selected engine.
- ortho_coach.core.ai_client_manager: For the dedicated OpenAI clients.

Author: @kcaparas1630
"""
from typing import Optional
from loguru import logger
from ortho_coach.core.ai_client_manager import AIClientManager
from ortho_coach.core.config import Settings
from ortho_coach.services.feedback.feedback_engine import FallbackFeedbackEngine, FeedbackEngine
from ortho_coach.services.feedback.heuristic_engine import HeuristicFeedbackEngine
from ortho_coach.services.feedback.knowledge_base import KnowledgeBase
from ortho_coach.services.feedback.remote_engine import RemoteFeedbackEngine


def build_feedback_engine(
    settings: Settings,
    knowledge_base: KnowledgeBase,
    client_manager: Optional[AIClientManager] = None,
) -> FeedbackEngine:
    heuristic = HeuristicFeedbackEngine(knowledge_base)

    if not settings.remote_engine_requested:
        logger.info("Using heuristic feedback engine")
        return heuristic

    if not settings.openai_api_key:
        logger.warning("FEEDBACK_ENGINE=remote but OPENAI_API_KEY is not set - using heuristic feedback engine")
        return heuristic

    manager = client_manager or AIClientManager(settings)
    remote = RemoteFeedbackEngine(
        client=manager.get_feedback_client(),
        follow_up_client=manager.get_follow_up_client(),
        model=settings.openai_model,
    )
    logger.info(f"Using remote feedback engine ({settings.openai_model}) with heuristic fallback")
    return FallbackFeedbackEngine(primary=remote, fallback=heuristic)
