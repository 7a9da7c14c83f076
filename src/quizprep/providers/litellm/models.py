# src/quizprep/providers/litellm/models.py
"""Curated chat model constants for the LiteLLM provider.

Any valid LiteLLM model string can be passed directly; these exist for IDE
autocomplete.
"""


class ChatModels:
    """Chat/completion models for summarization and JSON repair."""

    # OpenAI
    GPT_5_MINI = "openai/gpt-5-mini"
    GPT_5_NANO = "openai/gpt-5-nano"

    # Anthropic
    CLAUDE_HAIKU_45 = "anthropic/claude-haiku-4-5-20251001"

    # Google Gemini
    GEMINI_FLASH = "gemini/gemini-2.5-flash"
    GEMINI_FLASH_LITE = "gemini/gemini-2.5-flash-lite"

    # Local (Ollama)
    OLLAMA_LLAMA32 = "ollama/llama3.2"
    OLLAMA_GEMMA3 = "ollama/gemma3"
