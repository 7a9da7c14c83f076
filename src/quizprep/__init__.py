"""quizprep - content ingestion and structured-output repair for AI quizzes.

Normalizes heterogeneous sources (page HTML, selections, PDF text, typed
topics) into one canonical, chunked record, and recovers schema-valid quiz
data from unreliable model output.

Quick Start:
    from quizprep import extract_from_page, parse_quiz_output, prepare_source

    source = extract_from_page(html, url="https://example.com/article")
    source = await prepare_source(source)

    # ... send source.text to the model ...

    quiz = await parse_quiz_output(completion_text)

With summarization and model-assisted repair:
    from quizprep import LLMJsonRepairer, LLMSummarizerSession
    from quizprep.providers.litellm import LiteLLMClient

    client = LiteLLMClient(model="ollama/llama3.2")
    source = await prepare_source(
        source, session_factory=lambda ctx: LLMSummarizerSession(client, ctx)
    )
    quiz = await parse_quiz_output(completion_text, repair_fn=LLMJsonRepairer(client))
"""

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("quizprep")
except PackageNotFoundError:
    # Development / source-tree fallback (e.g. running tests without installing the wheel).
    try:
        import tomllib
        from pathlib import Path

        def _read_version_from_pyproject() -> str | None:
            for parent in Path(__file__).resolve().parents:
                pyproject = parent / "pyproject.toml"
                if pyproject.exists():
                    data = tomllib.loads(pyproject.read_text(encoding="utf-8"))
                    version = data.get("project", {}).get("version")
                    return str(version) if version is not None else None
            return None

        __version__ = _read_version_from_pyproject() or "unknown"
    except (OSError, ValueError):
        __version__ = "unknown"

# Errors
from quizprep.exceptions import (
    ExtractionError,
    JSONRecoveryError,
    QuizPrepError,
    QuizValidationError,
    SessionInUseError,
)

# Models
from quizprep.models import (
    AssembledSummary,
    Chunk,
    ExtractedSource,
    ProgressEvent,
    QuestionType,
    QuizResponse,
    SourceType,
    SummaryResult,
    parse_quiz,
    validate_quiz,
)

# Pipeline
from quizprep.pipeline import ensure_extracted, parse_quiz_output, prepare_source

# Provider ABC
from quizprep.providers import LLMClient

# Schema repair
from quizprep.quiz import transform_quiz_response

# JSON recovery
from quizprep.recovery import LLMJsonRepairer, extract_json_block, recover

# Configuration
from quizprep.settings import Settings

# Source normalization
from quizprep.sources import (
    extract_from_page,
    extract_from_pdf,
    extract_from_selection,
    extract_from_url,
    finalize_source,
    normalize_manual_topic,
)

# Summarization
from quizprep.summarizer import (
    LLMSummarizerSession,
    QuizContext,
    SummarizerSession,
    assemble_summaries,
    process_chunks,
)

# Text
from quizprep.text import Chunker, chunk_text, clean, excerpt

__all__ = [
    # Version
    "__version__",
    # Errors
    "QuizPrepError",
    "ExtractionError",
    "JSONRecoveryError",
    "QuizValidationError",
    "SessionInUseError",
    # Models
    "AssembledSummary",
    "Chunk",
    "ExtractedSource",
    "ProgressEvent",
    "QuestionType",
    "QuizResponse",
    "SourceType",
    "SummaryResult",
    "parse_quiz",
    "validate_quiz",
    # Config
    "Settings",
    # Text
    "Chunker",
    "chunk_text",
    "clean",
    "excerpt",
    # Sources
    "finalize_source",
    "extract_from_page",
    "extract_from_url",
    "extract_from_selection",
    "extract_from_pdf",
    "normalize_manual_topic",
    # Summarization
    "SummarizerSession",
    "LLMSummarizerSession",
    "QuizContext",
    "process_chunks",
    "assemble_summaries",
    # Recovery and repair
    "recover",
    "extract_json_block",
    "LLMJsonRepairer",
    "transform_quiz_response",
    # Pipeline
    "prepare_source",
    "parse_quiz_output",
    "ensure_extracted",
    # Provider ABC
    "LLMClient",
]
