from .feedback_engine import FeedbackEngine, FallbackFeedbackEngine
from .heuristic_engine import HeuristicFeedbackEngine
from .knowledge_base import KeywordTopic, KnowledgeBase, load_knowledge_base
from .remote_engine import RemoteFeedbackEngine
from .engine_factory import build_feedback_engine

__all__ = [
    "FeedbackEngine",
    "FallbackFeedbackEngine",
    "HeuristicFeedbackEngine",
    "KeywordTopic",
    "KnowledgeBase",
    "load_knowledge_base",
    "RemoteFeedbackEngine",
    "build_feedback_engine",
]
