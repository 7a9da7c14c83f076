# src/quizprep/recovery/repair.py
"""Model-assisted JSON repair collaborator."""

from __future__ import annotations

from quizprep.providers.base import LLMClient

DEFAULT_PROMPT = """The following text was supposed to be valid JSON but does not parse.
Fix it so it is valid JSON. Keep every field and value; only repair syntax
(quotes, commas, brackets, escaping).
{schema_hint}
Return ONLY the corrected JSON, no explanation and no code fences.

Broken JSON:
{text}"""

QUIZ_SCHEMA_HINT = (
    'Expected shape: {"questions": [{"type": "MCQ" | "True/False" | "Fill in Blank" | '
    '"Short Answer", "question": str, "options": [{"text": str, "isCorrect": bool}], '
    '"answer": str}]}'
)


class LLMJsonRepairer:
    """Repair function that asks an LLM to fix its own malformed JSON.

    Instances are async callables suitable as ``repair_fn`` for
    ``quizprep.recovery.recover``.

    Example:
        from quizprep.providers.litellm import LiteLLMClient
        from quizprep.recovery import LLMJsonRepairer, recover

        repairer = LLMJsonRepairer(LiteLLMClient(model="ollama/llama3.2"))
        value = await recover(raw_text, repair_fn=repairer)
    """

    def __init__(
        self,
        llm_client: LLMClient,
        schema_hint: str = "",
        prompt_template: str | None = None,
        temperature: float | None = 0.0,
    ) -> None:
        """Initialize the repairer.

        Args:
            llm_client: Any LLMClient implementation
            schema_hint: Optional description of the expected shape
            prompt_template: Custom prompt with {schema_hint} and {text}
            temperature: LLM temperature. None to use model default.
        """
        self._client = llm_client
        self.schema_hint = schema_hint
        self.prompt_template = prompt_template or DEFAULT_PROMPT
        self.temperature = temperature

    async def __call__(self, text: str) -> str:
        prompt = self.prompt_template.format(schema_hint=self.schema_hint, text=text)
        return await self._client.aprompt(prompt, self.temperature)
