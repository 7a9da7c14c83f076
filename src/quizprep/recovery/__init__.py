# src/quizprep/recovery/__init__.py
"""JSON recovery for unreliable model output."""

from quizprep.recovery.engine import (
    DEFAULT_PREVIEW_CHARS,
    ParseResult,
    RepairFn,
    Validator,
    cleanup_json,
    extract_json_block,
    normalize_quotes,
    recover,
    recover_sync,
    safe_json_parse,
    try_parse,
)
from quizprep.recovery.repair import QUIZ_SCHEMA_HINT, LLMJsonRepairer

__all__ = [
    "DEFAULT_PREVIEW_CHARS",
    "ParseResult",
    "RepairFn",
    "Validator",
    "cleanup_json",
    "extract_json_block",
    "normalize_quotes",
    "recover",
    "recover_sync",
    "safe_json_parse",
    "try_parse",
    "LLMJsonRepairer",
    "QUIZ_SCHEMA_HINT",
]
