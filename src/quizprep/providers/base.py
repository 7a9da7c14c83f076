# src/quizprep/providers/base.py
"""Abstract base class for LLM completion providers."""

from abc import ABC, abstractmethod


class LLMClient(ABC):
    """Abstract base class for LLM completion providers.

    Chunk summarization and JSON repair both reach the model through this
    interface. Only ``complete`` is required; the async methods fall back to
    it.

    Example:
        class MyLLMClient(LLMClient):
            def complete(self, messages, temperature=None):
                return my_api.chat(messages, temp=temperature)
    """

    @abstractmethod
    def complete(
        self,
        messages: list[dict],
        temperature: float | None = None,
    ) -> str:
        """Generate a completion for the given messages.

        Args:
            messages: Chat messages, e.g. [{"role": "user", "content": "Hello"}]
            temperature: Sampling temperature, or None for the provider default.

        Returns:
            The generated text.
        """
        ...

    async def acomplete(
        self,
        messages: list[dict],
        temperature: float | None = None,
    ) -> str:
        """Async variant of :meth:`complete`; runs it inline unless overridden."""
        return self.complete(messages, temperature)

    async def aprompt(self, prompt: str, temperature: float | None = None) -> str:
        """Send a single user prompt and return the stripped reply."""
        reply = await self.acomplete([{"role": "user", "content": prompt}], temperature)
        return reply.strip()
