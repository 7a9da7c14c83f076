# src/quizprep/text/cleaner.py
"""Canonical text cleaning.

``clean`` is the single normalization step every source goes through before
chunking. It is pure and idempotent: ``clean(clean(x)) == clean(x)``.
"""

import re
import unicodedata

# Zero-width characters, soft hyphen, bidi embedding/override marks and BOM
_INVISIBLE_RE = re.compile("[\u00ad\u200b-\u200f\u202a-\u202e\u2060-\u2064\ufeff]")

# Unicode spaces that should read as a plain space
_SPACE_RE = re.compile("[\u00a0\u1680\u2000-\u200a\u202f\u205f\u3000]")

_TRAILING_WS_RE = re.compile(r"[ \t]+\n")
_INLINE_WS_RE = re.compile(r"[ \t]+")
_BLANK_LINES_RE = re.compile(r"\n{3,}")

ELLIPSIS = "\u2026"


def _strip_control_chars(text: str) -> str:
    """Drop control/format characters, keeping newlines and tabs."""
    return "".join(
        ch for ch in text if ch in "\n\t" or unicodedata.category(ch) not in ("Cc", "Cf")
    )


def normalize_whitespace(text: str) -> str:
    """Collapse redundant whitespace while keeping paragraph breaks."""
    if not text:
        return ""
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    text = _SPACE_RE.sub(" ", text)
    text = _INLINE_WS_RE.sub(" ", text)
    text = _TRAILING_WS_RE.sub("\n", text)
    # Lines holding only whitespace become empty before blank-line collapsing
    text = "\n".join(line.strip() if not line.strip() else line for line in text.split("\n"))
    text = _BLANK_LINES_RE.sub("\n\n", text)
    return text.strip()


def dedupe_repeating_lines(text: str) -> str:
    """Remove repeated non-blank lines, keeping the first occurrence.

    Comparison is case-insensitive on the stripped line. Blank lines are kept
    so paragraph structure survives.
    """
    seen: set[str] = set()
    out: list[str] = []
    for line in text.split("\n"):
        key = line.strip().lower()
        if not key:
            out.append(line)
            continue
        if key not in seen:
            seen.add(key)
            out.append(line)
    return "\n".join(out)


def clean(raw_text: str | None) -> str:
    """Normalize raw extracted text into canonical prompt-ready form."""
    if not raw_text:
        return ""
    text = _INVISIBLE_RE.sub("", raw_text)
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    text = _strip_control_chars(text)
    text = normalize_whitespace(text)
    text = dedupe_repeating_lines(text)
    return normalize_whitespace(text)


def excerpt(text: str, max_len: int = 240) -> str:
    """Build a bounded preview of ``text``.

    Prefers cutting at the last space when it falls past half of ``max_len``;
    otherwise cuts hard at ``max_len``. An ellipsis marks truncation.
    """
    if not text:
        return ""
    text = normalize_whitespace(text)
    if len(text) <= max_len:
        return text

    cut = text[:max_len]
    last_space = cut.rfind(" ")
    cut_point = last_space if last_space > max_len * 0.5 else max_len
    return f"{cut[:cut_point].rstrip()}{ELLIPSIS}"


def word_count(text: str) -> int:
    """Count whitespace-separated words."""
    return len(text.split()) if text else 0
