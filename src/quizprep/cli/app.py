# src/quizprep/cli/app.py
"""Command-line interface for quizprep.

A thin Typer wrapper around the library: each command reads its input,
calls into ``quizprep`` and renders the result with Rich (or plain JSON).
"""

from __future__ import annotations

import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Any

import yaml

try:
    import typer
    from rich.console import Console
    from rich.logging import RichHandler
    from rich.table import Table
except ImportError as e:
    raise SystemExit(
        "CLI requires additional dependencies.\nInstall with: pip install quizprep[cli]"
    ) from e

from quizprep import __version__
from quizprep.config import load_llm_model, load_settings
from quizprep.exceptions import ExtractionError, JSONRecoveryError, QuizValidationError
from quizprep.models import ExtractedSource, ProgressEvent
from quizprep.pipeline import SessionFactory, ensure_extracted, parse_quiz_output, prepare_source
from quizprep.settings import Settings
from quizprep.sources import (
    extract_from_page,
    extract_from_pdf,
    extract_from_selection,
    normalize_manual_topic,
)
from quizprep.summarizer import LLMSummarizerSession, QuizContext
from quizprep.text import Chunker
from quizprep.text import clean as clean_text

app = typer.Typer(
    name="quizprep",
    help="Normalize content sources and repair AI-generated quiz JSON.",
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)

SOURCE_KINDS = ("auto", "page", "selection", "pdf")


def version_callback(value: bool) -> None:
    if value:
        console.print(f"quizprep {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log pipeline details to stderr.",
    ),
) -> None:
    """quizprep - content ingestion and structured-output repair."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )


def _read_input(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    file_path = Path(path)
    if not file_path.exists():
        err_console.print(f"[red]Error: File not found: {path}[/red]")
        raise typer.Exit(1)
    return file_path.read_text(encoding="utf-8")


def _settings(config_file: str | None) -> Settings:
    try:
        return load_settings(config_file)
    except (OSError, ValueError, yaml.YAMLError) as e:
        err_console.print(f"[red]Error: Invalid configuration: {e}[/red]")
        raise typer.Exit(1) from e


def _model(model: str | None, config_file: str | None) -> str | None:
    if model:
        return model
    try:
        return load_llm_model(config_file)
    except (OSError, ValueError, yaml.YAMLError) as e:
        err_console.print(f"[red]Error: Invalid configuration: {e}[/red]")
        raise typer.Exit(1) from e


def _detect_kind(path: str) -> str:
    suffix = Path(path).suffix.lower()
    if suffix == ".pdf":
        return "pdf"
    if suffix in {".html", ".htm"}:
        return "page"
    return "selection"


def _session_factory(model: str | None, settings: Settings) -> SessionFactory | None:
    if not model:
        return None
    from quizprep.providers import LiteLLMClient

    client = LiteLLMClient(model=model)

    def factory(quiz_context: QuizContext) -> LLMSummarizerSession:
        return LLMSummarizerSession(
            client, quiz_context, temperature=settings.summary_temperature
        )

    return factory


def _report_progress(event: ProgressEvent) -> None:
    if event.status == "completed" and event.result is not None:
        marker = " (fallback)" if event.result.fallback else ""
        err_console.print(
            f"[dim]Summarized {event.chunk_id} ({event.current}/{event.total}){marker}[/dim]"
        )


def _print_json(payload: Any) -> None:
    console.print_json(json.dumps(payload, ensure_ascii=False))


def _render_source(source: ExtractedSource, as_json: bool) -> None:
    if as_json:
        _print_json(source.model_dump(mode="json"))
        return

    table = Table(title=source.title or "(untitled)", show_header=False)
    table.add_column("Field", style="bold")
    table.add_column("Value")
    table.add_row("Type", source.source_type.value)
    if source.url:
        table.add_row("URL", source.url)
    table.add_row("Words", str(source.word_count))
    table.add_row("Characters", str(len(source.text)))
    table.add_row("Excerpt", source.excerpt)
    console.print(table)

    chunks = Table(title="Chunks")
    chunks.add_column("ID")
    chunks.add_column("Start", justify="right")
    chunks.add_column("End", justify="right")
    chunks.add_column("~Tokens", justify="right")
    for chunk in source.chunks:
        chunks.add_row(chunk.id, str(chunk.start), str(chunk.end), str(chunk.token_estimate))
    console.print(chunks)


@app.command()
def clean(
    path: str = typer.Argument(..., help="Text file to clean ('-' for stdin)"),
) -> None:
    """Print the canonical cleaned form of a text file."""
    text = clean_text(_read_input(path))
    console.print(text, markup=False, emoji=False, highlight=False, soft_wrap=True)


@app.command()
def chunk(
    path: str = typer.Argument(..., help="Text file to chunk ('-' for stdin)"),
    max_chars: int = typer.Option(None, "--max-chars", help="Maximum characters per chunk"),
    min_chars: int = typer.Option(None, "--min-chars", help="Minimum paragraph cut distance"),
    overlap: int = typer.Option(None, "--overlap", help="Characters shared between chunks"),
    config_file: str = typer.Option(None, "--config", "-c", help="Path to config file"),
) -> None:
    """Clean a text file and print its chunks as JSON."""
    settings = _settings(config_file)
    try:
        chunker = Chunker(
            max_chars=settings.max_chars if max_chars is None else max_chars,
            min_chars=settings.min_chars if min_chars is None else min_chars,
            overlap=settings.overlap if overlap is None else overlap,
        )
    except ValueError as e:
        err_console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(2) from e

    chunks = chunker.split(clean_text(_read_input(path)))
    _print_json([c.model_dump() for c in chunks])


@app.command()
def ingest(
    path: str = typer.Argument(..., help="File to ingest ('-' for stdin)"),
    kind: str = typer.Option(
        "auto",
        "--kind",
        "-k",
        help="Source kind: auto, page, selection or pdf",
    ),
    url: str = typer.Option("", "--url", help="Source URL (page and selection sources)"),
    title: str = typer.Option("", "--title", help="Source title override"),
    model: str = typer.Option(
        None,
        "--model",
        "-m",
        help="LiteLLM model used to summarize large sources (default: llm_model from config)",
    ),
    config_file: str = typer.Option(None, "--config", "-c", help="Path to config file"),
    as_json: bool = typer.Option(False, "--json", help="Print the extracted source as JSON"),
) -> None:
    """Normalize a page, selection or PDF into an extracted source."""
    if kind not in SOURCE_KINDS:
        err_console.print(f"[red]Error: Unknown kind '{kind}'. Use one of {SOURCE_KINDS}[/red]")
        raise typer.Exit(2)

    settings = _settings(config_file)
    resolved = _detect_kind(path) if kind == "auto" else kind

    if resolved == "pdf":
        from quizprep.loaders import PyPDFTextReader

        try:
            pdf = PyPDFTextReader().read(path)
        except (ImportError, FileNotFoundError) as e:
            err_console.print(f"[red]Error: {e}[/red]")
            raise typer.Exit(1) from e
        source = extract_from_pdf(pdf.text, pdf.file_name, pdf.page_count, settings=settings)
    elif resolved == "page":
        source = extract_from_page(_read_input(path), title=title, url=url, settings=settings)
    else:
        source = extract_from_selection(_read_input(path), title=title, url=url, settings=settings)

    try:
        ensure_extracted(source)
    except ExtractionError as e:
        err_console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1) from e

    model = _model(model, config_file)
    if model:
        prepared = prepare_source(
            source,
            session_factory=_session_factory(model, settings),
            settings=settings,
            on_progress=_report_progress,
        )
        source = asyncio.run(prepared)

    _render_source(source, as_json)


@app.command()
def manual(
    topic: str = typer.Argument(..., help="Quiz topic"),
    context: str = typer.Option("", "--context", help="Optional free-text context"),
    config_file: str = typer.Option(None, "--config", "-c", help="Path to config file"),
    as_json: bool = typer.Option(False, "--json", help="Print the extracted source as JSON"),
) -> None:
    """Normalize a typed topic (and optional context) into an extracted source."""
    source = normalize_manual_topic(topic, context, settings=_settings(config_file))
    try:
        ensure_extracted(source)
    except ExtractionError as e:
        err_console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1) from e
    _render_source(source, as_json)


@app.command()
def recover(
    path: str = typer.Argument(..., help="File holding raw model output ('-' for stdin)"),
    model: str = typer.Option(
        None,
        "--model",
        "-m",
        help="LiteLLM model used to repair unparseable output (default: llm_model from config)",
    ),
    config_file: str = typer.Option(None, "--config", "-c", help="Path to config file"),
) -> None:
    """Recover, repair and validate a quiz from raw model output."""
    raw = _read_input(path)
    settings = _settings(config_file)

    repair_fn = None
    model = _model(model, config_file)
    if model:
        from quizprep.providers import LiteLLMClient
        from quizprep.recovery import QUIZ_SCHEMA_HINT, LLMJsonRepairer

        repair_fn = LLMJsonRepairer(
            LiteLLMClient(model=model),
            schema_hint=QUIZ_SCHEMA_HINT,
            temperature=settings.repair_temperature,
        )

    try:
        quiz = asyncio.run(parse_quiz_output(raw, repair_fn=repair_fn, settings=settings))
    except JSONRecoveryError as e:
        err_console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1) from e
    except QuizValidationError as e:
        err_console.print(f"[red]Error: {e}[/red]")
        for error in e.errors:
            location = ".".join(str(part) for part in error.get("loc", ()))
            err_console.print(f"  [dim]{location}[/dim]: {error.get('msg')}")
        raise typer.Exit(1) from e

    _print_json(quiz.to_payload())
