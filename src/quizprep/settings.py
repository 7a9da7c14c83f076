# src/quizprep/settings.py
"""Behavioral settings for quizprep.

Settings are passed programmatically - the library itself does not read
environment variables. Applications that want file or env based
configuration can use ``quizprep.config.load_settings`` and pass the result
explicitly.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, model_validator

# Chunking profiles for different model context sizes
# - "on_device": small windows for local models with tight context limits
# - "cloud": larger windows for hosted models
CHUNK_PROFILES: dict[str, dict[str, int]] = {
    "on_device": {
        "max_chars": 12000,
        "min_chars": 4000,
        "overlap": 200,
    },
    "cloud": {
        "max_chars": 40000,
        "min_chars": 10000,
        "overlap": 400,
    },
}


class Settings(BaseModel):
    """Behavioral settings for ingestion, summarization and recovery.

    Example:
        settings = Settings(max_chars=8000, overlap=100)

        # Or start from a profile
        settings = Settings.with_profile("cloud", excerpt_length=300)
    """

    # Chunking
    max_chars: int = 12000
    min_chars: int = 4000
    overlap: int = 200

    # Source records
    excerpt_length: int = 240

    # Summarization
    fallback_summary_chars: int = 2000
    min_summary_words: int = 50
    summary_temperature: float | None = 0.2

    # JSON recovery
    preview_chars: int = 400
    repair_temperature: float | None = 0.0

    @model_validator(mode="after")
    def _check_chunking(self) -> Settings:
        if self.max_chars <= 0:
            raise ValueError(f"max_chars must be positive, got {self.max_chars}")
        if not 0 <= self.min_chars <= self.max_chars:
            raise ValueError(
                f"min_chars ({self.min_chars}) must be between 0 and max_chars ({self.max_chars})"
            )
        if self.overlap < 0:
            raise ValueError(f"overlap must be non-negative, got {self.overlap}")
        return self

    @classmethod
    def with_profile(
        cls,
        profile: Literal["on_device", "cloud"],
        **overrides: Any,
    ) -> Settings:
        """Create Settings from a chunking profile.

        Args:
            profile: The chunking profile to use.
            **overrides: Additional settings to override profile defaults.

        Returns:
            Settings instance with profile values applied.
        """
        if profile not in CHUNK_PROFILES:
            raise ValueError(
                f"Unknown profile '{profile}'. Available profiles: {list(CHUNK_PROFILES.keys())}"
            )

        profile_settings: dict[str, Any] = CHUNK_PROFILES[profile].copy()
        profile_settings.update(overrides)
        return cls(**profile_settings)
