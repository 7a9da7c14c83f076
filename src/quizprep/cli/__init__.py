# src/quizprep/cli/__init__.py
"""CLI package for quizprep.

This package provides the command-line interface using Typer.
"""

from quizprep.cli.app import app, console

__all__ = ["app", "console"]
