# src/quizprep/recovery/engine.py
"""Recover a valid JSON value from unreliable model output.

Strategies run in a fixed order and each one runs only when the previous
one failed to parse or failed validation:

1. Direct parse of the raw text
2. Block extraction (code fence or balanced brackets) with quote
   normalization and cleanup
3. Model-assisted repair through an optional ``repair_fn`` collaborator

When all of them fail, ``JSONRecoveryError`` is raised with the attempt log
and a bounded preview of the raw text.
"""

from __future__ import annotations

import asyncio
import inspect
import json
import logging
import re
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

from quizprep.exceptions import JSONRecoveryError, RecoveryAttempt

logger = logging.getLogger(__name__)

Validator = Callable[[Any], bool]
RepairFn = Callable[[str], Awaitable[str] | str]

DEFAULT_PREVIEW_CHARS = 400

_FENCE_PATTERNS = [
    re.compile(r"```json\s*(.*?)```", re.IGNORECASE | re.DOTALL),
    re.compile(r"```[a-zA-Z]*\s*(.*?)```", re.DOTALL),
]

_CLOSERS = {"{": "}", "[": "]"}

_DOUBLE_QUOTES_RE = re.compile("[\u201c\u201d\u201e\u201f\u2033\u00ab\u00bb]")
_SINGLE_QUOTES_RE = re.compile("[\u2018\u2019\u201a\u201b\u2032]")
_TRAILING_COMMA_RE = re.compile(r",(\s*[}\]])")


@dataclass
class ParseResult:
    """Outcome of a single parse attempt."""

    ok: bool
    value: Any = None
    error: str | None = None


def try_parse(text: Any) -> ParseResult:
    """Parse ``text`` as JSON without raising."""
    if not isinstance(text, str):
        return ParseResult(ok=False, error="Input is not a string")
    try:
        return ParseResult(ok=True, value=json.loads(text))
    except (ValueError, RecursionError) as e:
        return ParseResult(ok=False, error=str(e) or type(e).__name__)


def safe_json_parse(text: Any, default: Any = None) -> Any:
    """Parse JSON, returning ``default`` on failure."""
    result = try_parse(text)
    return result.value if result.ok else default


def _balanced_slice(text: str, start: int) -> str:
    """Slice from ``start`` to its matching closing bracket.

    Brackets inside string literals are ignored; escapes inside strings are
    honored. An unterminated payload runs to the end of the text.
    """
    open_char = text[start]
    close_char = _CLOSERS[open_char]
    depth = 0
    in_string = False
    escaped = False

    for i in range(start, len(text)):
        char = text[i]
        if in_string:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
            continue

        if char == '"':
            in_string = True
        elif char == open_char:
            depth += 1
        elif char == close_char:
            depth -= 1
            if depth == 0:
                return text[start : i + 1]

    return text[start:]


def extract_json_block(text: Any) -> str:
    """Locate the JSON payload inside noisy text.

    A fenced code block wins; otherwise the first ``{`` or ``[`` is matched
    to its closing bracket by depth counting. Returns the stripped text when
    nothing bracket-like is found.
    """
    if not text or not isinstance(text, str):
        return ""
    text = text.strip()

    for pattern in _FENCE_PATTERNS:
        match = pattern.search(text)
        if match and match.group(1).strip():
            return match.group(1).strip()

    starts = [pos for pos in (text.find("{"), text.find("[")) if pos >= 0]
    if not starts:
        return text

    return _balanced_slice(text, min(starts)).strip()


def normalize_quotes(text: Any) -> str:
    """Replace typographic quotation marks with ASCII quotes."""
    if not isinstance(text, str):
        return ""
    return _SINGLE_QUOTES_RE.sub("'", _DOUBLE_QUOTES_RE.sub('"', text))


def cleanup_json(text: Any) -> str:
    """Fix small syntax slips: BOM, trailing commas, escaped single quotes."""
    if not isinstance(text, str):
        return ""
    cleaned = text.lstrip("\ufeff")
    cleaned = _TRAILING_COMMA_RE.sub(r"\1", cleaned)
    return cleaned.replace("\\'", "'")


def _preview(raw: str, limit: int) -> str:
    return raw[:limit] + ("..." if len(raw) > limit else "")


def _check(validate: Validator | None, value: Any) -> tuple[bool, str | None]:
    """Run the caller's predicate; a raising predicate counts as a rejection."""
    if validate is None:
        return True, None
    try:
        if validate(value):
            return True, None
    except Exception as e:
        return False, f"validation raised {type(e).__name__}: {e}"
    return False, "validation failed"


class _Cascade:
    """Bookkeeping for one recovery run."""

    def __init__(self, validate: Validator | None) -> None:
        self.validate = validate
        self.attempts: list[RecoveryAttempt] = []

    def accept(self, method: str, text: str) -> tuple[bool, Any]:
        """Parse and validate ``text``, logging the attempt."""
        result = try_parse(text)
        if not result.ok:
            self.attempts.append(RecoveryAttempt(method, False, result.error))
            return False, None
        passed, error = _check(self.validate, result.value)
        if not passed:
            self.attempts.append(RecoveryAttempt(method, False, error))
            return False, None
        self.attempts.append(RecoveryAttempt(method, True))
        logger.debug("JSON recovered via %s", method)
        return True, result.value

    def extract(self, prefix: str, text: str) -> tuple[bool, Any, str, str]:
        """Block extraction stage; returns (ok, value, block, cleaned)."""
        block = extract_json_block(text)
        cleaned = cleanup_json(normalize_quotes(block))
        ok, value = self.accept(f"{prefix}extract + normalize + clean", cleaned)
        if not ok and block != cleaned:
            ok, value = self.accept(f"{prefix}extract only", block)
        return ok, value, block, cleaned


async def recover(
    raw_text: Any,
    validate: Validator | None = None,
    repair_fn: RepairFn | None = None,
    preview_chars: int = DEFAULT_PREVIEW_CHARS,
) -> Any:
    """Recover a JSON value from raw model output.

    Args:
        raw_text: Model completion text. An already-decoded dict or list is
            validated and returned as-is.
        validate: Optional predicate the value must satisfy.
        repair_fn: Optional collaborator (sync or async) that asks the model
            to fix its own output. Called at most once.
        preview_chars: Size of the raw-text preview in the error.

    Returns:
        The first parsed value that passes ``validate``.

    Raises:
        JSONRecoveryError: When every strategy fails.
    """
    if isinstance(raw_text, dict | list):
        passed, error = _check(validate, raw_text)
        if passed:
            return raw_text
        raise JSONRecoveryError(f"Provided object failed validation: {error}")

    if not isinstance(raw_text, str):
        raise JSONRecoveryError(f"Input must be a string or object, got {type(raw_text).__name__}")

    if not raw_text.strip():
        raise JSONRecoveryError("No data provided to parse")

    cascade = _Cascade(validate)

    ok, value = cascade.accept("direct parse", raw_text)
    if ok:
        return value

    ok, value, block, cleaned = cascade.extract("", raw_text)
    if ok:
        return value

    if repair_fn is not None:
        try:
            repaired = repair_fn(cleaned or block or raw_text)
            if inspect.isawaitable(repaired):
                repaired = await repaired
        except Exception as e:
            logger.warning("JSON repair function failed: %s", e)
            cascade.attempts.append(RecoveryAttempt("model repair", False, str(e)))
        else:
            if isinstance(repaired, str) and repaired.strip():
                ok, value = cascade.accept("model repair direct", repaired)
                if ok:
                    return value
                ok, value, _, _ = cascade.extract("model repair + ", repaired)
                if ok:
                    return value
            else:
                cascade.attempts.append(RecoveryAttempt("model repair", False, "empty response"))

    raise JSONRecoveryError(
        f"Failed to parse and validate JSON after {len(cascade.attempts)} attempts.",
        attempts=cascade.attempts,
        preview=_preview(raw_text, preview_chars),
    )


def recover_sync(
    raw_text: Any,
    validate: Validator | None = None,
    repair_fn: RepairFn | None = None,
    preview_chars: int = DEFAULT_PREVIEW_CHARS,
) -> Any:
    """Blocking wrapper around :func:`recover` for callers without a loop."""
    return asyncio.run(recover(raw_text, validate, repair_fn, preview_chars))
