"""
AI Client Manager

This module manages the AsyncOpenAI client instances used by the remote feedback
engine. Feedback scoring and follow-up question generation each get their own
dedicated client so a slow scoring call does not hold up follow-up generation.
"""

from openai import AsyncOpenAI
import logging
import threading
from typing import Dict, Optional
from ortho_coach.core.config import Settings, get_settings

logger = logging.getLogger(__name__)

FEEDBACK_CLIENT = "feedback"
FOLLOW_UP_CLIENT = "follow_up"


class AIClientManager:
    """
    Manages dedicated AI client instances for the remote feedback engine.

    Clients are created lazily on first access from the API key and base URL
    found in the application settings.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self._settings = settings
        self._clients: Dict[str, AsyncOpenAI] = {}
        self._initialized = False
        self._lock = threading.Lock()

    @property
    def settings(self) -> Settings:
        return self._settings or get_settings()

    def _initialize_clients(self):
        """Lazy initialization of client instances."""
        if self._initialized:
            return

        with self._lock:
            # Double-check locking for initialization
            if self._initialized:
                return

            settings = self.settings
            if not settings.openai_api_key:
                if settings.is_test:
                    logger.warning("OPENAI_API_KEY not set - remote clients unavailable in test mode")
                    return
                raise RuntimeError(
                    "OPENAI_API_KEY environment variable is not set. "
                    "Please set it in your .env file or environment variables."
                )

            try:
                self._clients = {
                    FEEDBACK_CLIENT: AsyncOpenAI(
                        base_url=settings.openai_base_url,
                        api_key=settings.openai_api_key
                    ),
                    FOLLOW_UP_CLIENT: AsyncOpenAI(
                        base_url=settings.openai_base_url,
                        api_key=settings.openai_api_key
                    ),
                }

                self._initialized = True
                logger.info(f"Initialized {len(self._clients)} dedicated AI client instances")

            except Exception as e:
                logger.error(f"Failed to initialize AI clients: {e}")
                raise RuntimeError(f"Failed to initialize AI clients: {e}") from e

    def get_client(self, service_type: str) -> AsyncOpenAI:
        """
        Get a dedicated client for the specified service type.

        Args:
            service_type (str): Type of service ("feedback", "follow_up")

        Returns:
            AsyncOpenAI: Dedicated client instance for the service

        Raises:
            ValueError: If service_type is not supported
            RuntimeError: If clients failed to initialize
        """
        self._initialize_clients()

        if not self._initialized:
            raise RuntimeError("AI clients failed to initialize properly")

        if service_type not in self._clients:
            available_types = list(self._clients.keys())
            raise ValueError(f"Unsupported service type: {service_type}. Available: {available_types}")

        return self._clients[service_type]

    def get_feedback_client(self) -> AsyncOpenAI:
        """Get dedicated client for feedback scoring."""
        return self.get_client(FEEDBACK_CLIENT)

    def get_follow_up_client(self) -> AsyncOpenAI:
        """Get dedicated client for follow-up question generation."""
        return self.get_client(FOLLOW_UP_CLIENT)
