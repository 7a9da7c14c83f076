# src/quizprep/providers/litellm/__init__.py
"""LiteLLM provider client for quizprep.

Usage:
    from quizprep.providers.litellm import LiteLLMClient, ChatModels

    client = LiteLLMClient(model=ChatModels.GEMINI_FLASH)
"""

from quizprep.providers.litellm.client import LiteLLMClient
from quizprep.providers.litellm.models import ChatModels

__all__ = ["ChatModels", "LiteLLMClient"]
