# src/quizprep/providers/__init__.py
"""LLM provider abstractions for quizprep.

- LLMClient: Abstract base class for LLM completion providers
- LiteLLM implementation (requires: pip install quizprep[litellm])

Usage:
    from quizprep.providers import LLMClient
    from quizprep.providers.litellm import LiteLLMClient, ChatModels
"""

from quizprep.providers.base import LLMClient

try:
    from quizprep.providers.litellm import ChatModels, LiteLLMClient
except ImportError:
    from quizprep._optional import _create_missing_dependency_class

    class ChatModels:  # type: ignore[no-redef]
        """Placeholder - requires litellm package."""

        pass

    LiteLLMClient = _create_missing_dependency_class(  # type: ignore[misc,assignment]
        "LiteLLMClient", "litellm"
    )

__all__ = ["LLMClient", "ChatModels", "LiteLLMClient"]
