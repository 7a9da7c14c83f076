# src/quizprep/providers/litellm/client.py
"""LiteLLM client implementation for completion APIs."""

from typing import Any

import litellm

from quizprep.providers.base import LLMClient
from quizprep.providers.litellm.models import ChatModels


class LiteLLMClient(LLMClient):
    """LLM client backed by LiteLLM.

    Works with hosted models (OpenAI, Anthropic, Gemini) and with local
    servers such as Ollama, which suit the ``on_device`` chunking profile.

    Example:
        from quizprep.providers.litellm import LiteLLMClient, ChatModels

        client = LiteLLMClient(model=ChatModels.GEMINI_FLASH)

        # Local Ollama server on a non-default port
        client = LiteLLMClient(
            model=ChatModels.OLLAMA_LLAMA32, api_base="http://localhost:11500"
        )
    """

    def __init__(
        self,
        model: str = ChatModels.GEMINI_FLASH,
        num_retries: int = 3,
        api_base: str | None = None,
        timeout: float | None = None,
    ) -> None:
        """Initialize the LiteLLM client.

        Args:
            model: LiteLLM model identifier, e.g. "ollama/llama3.2".
            num_retries: Retries on rate limit errors; LiteLLM applies the backoff.
            api_base: Override the provider endpoint (local model servers).
            timeout: Request timeout in seconds. None keeps the LiteLLM default.
        """
        self.model = model
        self.num_retries = num_retries
        self.api_base = api_base
        self.timeout = timeout

    def _request(self, messages: list[dict], temperature: float | None) -> dict[str, Any]:
        request: dict[str, Any] = {
            "model": self.model,
            "messages": messages,
            "drop_params": True,
            "num_retries": self.num_retries,
        }
        optional = {"temperature": temperature, "api_base": self.api_base, "timeout": self.timeout}
        request.update({key: value for key, value in optional.items() if value is not None})
        return request

    def _reply_text(self, response: Any) -> str:
        if not response.choices:
            raise ValueError(f"LLM returned no choices for model {self.model}")
        content = response.choices[0].message.content
        if content is None:
            raise ValueError(f"LLM returned None content for model {self.model}")
        return str(content)

    def complete(
        self,
        messages: list[dict],
        temperature: float | None = None,
    ) -> str:
        return self._reply_text(litellm.completion(**self._request(messages, temperature)))

    async def acomplete(
        self,
        messages: list[dict],
        temperature: float | None = None,
    ) -> str:
        response = await litellm.acompletion(**self._request(messages, temperature))
        return self._reply_text(response)
