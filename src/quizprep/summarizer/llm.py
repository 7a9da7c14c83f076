# src/quizprep/summarizer/llm.py
"""LLM-backed summarizer session."""

from __future__ import annotations

from quizprep.providers.base import LLMClient
from quizprep.summarizer.base import QuizContext, SummarizerSession

DEFAULT_PROMPT = """{shared_context}.

Summarize the following text as a list of key points. Keep facts, names,
numbers and definitions that a quiz could ask about. Drop navigation text,
references and boilerplate. Write plain text only, no markdown headings.

Additional guidance: {context}

Text:
{text}"""


class LLMSummarizerSession(SummarizerSession):
    """Summarizer session that calls an LLMClient once per chunk.

    Example:
        from quizprep.providers.litellm import LiteLLMClient
        from quizprep.summarizer import LLMSummarizerSession, QuizContext

        session = LLMSummarizerSession(
            LiteLLMClient(model="ollama/llama3.2"),
            quiz_context=QuizContext(topic="Photosynthesis", subject="Biology"),
        )
    """

    def __init__(
        self,
        llm_client: LLMClient,
        quiz_context: QuizContext | None = None,
        prompt_template: str | None = None,
        temperature: float | None = 0.2,
    ) -> None:
        """Initialize the session.

        Args:
            llm_client: Any LLMClient implementation
            quiz_context: Quiz focus used to build the shared context
            prompt_template: Custom prompt with {shared_context}, {context}, {text}
            temperature: LLM temperature. None to use model default.
        """
        super().__init__()
        self._client = llm_client
        self.quiz_context = quiz_context or QuizContext()
        self.prompt_template = prompt_template or DEFAULT_PROMPT
        self.temperature = temperature

    async def summarize(self, text: str, context: str = "") -> str:
        prompt = self.prompt_template.format(
            shared_context=self.quiz_context.shared_context(),
            context=context or "Extract key educational concepts and facts",
            text=text,
        )
        return await self._client.aprompt(prompt, self.temperature)
