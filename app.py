#!/usr/bin/env python3
"""
Main application entry point for the report formatter.
This module provides the command-line interface and orchestrates the components.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import typer

from report_formatter.config import (
    DEFAULT_MAX_RETRIES,
    DEFAULT_MODEL_NAME,
    DEFAULT_OLLAMA_HOST,
    DEFAULT_OUTPUT_PATH,
)
from report_formatter.exceptions import InvalidInputError, ModelError, ReportError
from report_formatter.formatting import split_sections
from report_formatter.generation import ReportGenerator, check_ollama, is_ollama_running
from report_formatter.pipeline import write_report

app = typer.Typer(help="Format generated report text into PDF or Word documents.", no_args_is_help=True)


def setup_logging(verbose: int) -> None:
    """Set up logging based on verbosity level."""
    if verbose == 0:
        level = logging.WARNING
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.DEBUG

    logging.basicConfig(level=level, format="%(levelname)s:%(name)s:%(message)s")


def read_text(source: str) -> str:
    """Read report text from a file, or stdin for '-'."""
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def _write(text: str, output: Path, fmt: Optional[str], used_fallback: bool) -> None:
    try:
        sections = write_report(text, output, fmt=fmt, used_fallback=used_fallback)
    except InvalidInputError as e:
        print(f"Error: {str(e)}")
        raise typer.Exit(code=2)
    except (ReportError, ValueError) as e:
        print(f"Error: {str(e)}")
        raise typer.Exit(code=1)

    pages = len([s for s in sections if not s.is_title])
    print(f"Report written to {output} ({pages} section page(s))")


VerboseOption = typer.Option(0, "--verbose", "-v", count=True, help="Increase verbosity (-v for INFO, -vv for DEBUG)")


@app.command("format")
def format_text(
    source: str = typer.Argument(..., help="Text file with the report, or '-' for stdin"),
    output: Path = typer.Option(DEFAULT_OUTPUT_PATH, "--output", "-o", help="Output file (.pdf or .docx)"),
    fmt: Optional[str] = typer.Option(None, "--format", "-f", help="Output format: pdf or docx"),
    fallback: bool = typer.Option(False, "--fallback", help="Mark the document as fallback content"),
    verbose: int = VerboseOption
):
    """
    Render existing report text into a document.
    """
    setup_logging(verbose)
    try:
        text = read_text(source)
    except OSError as e:
        print(f"Error reading {source}: {str(e)}")
        raise typer.Exit(code=1)
    _write(text, output, fmt, fallback)


@app.command()
def generate(
    topic: str = typer.Argument(..., help="Subject of the report"),
    output: Path = typer.Option(DEFAULT_OUTPUT_PATH, "--output", "-o", help="Output file (.pdf or .docx)"),
    fmt: Optional[str] = typer.Option(None, "--format", "-f", help="Output format: pdf or docx"),
    pages: Optional[int] = typer.Option(None, min=1, help="Approximate number of pages"),
    words: Optional[int] = typer.Option(None, min=1, help="Approximate number of words"),
    model: str = typer.Option(DEFAULT_MODEL_NAME, envvar="REPORT_MODEL", help="Ollama model to use"),
    host: str = typer.Option(DEFAULT_OLLAMA_HOST, envvar="OLLAMA_HOST", help="Ollama server URL"),
    retries: int = typer.Option(DEFAULT_MAX_RETRIES, min=1, help="Attempts per model request"),
    verbose: int = VerboseOption
):
    """
    Generate a report with Ollama and render it.
    """
    setup_logging(verbose)
    if not topic.strip():
        print("Error: No input text provided")
        raise typer.Exit(code=2)

    if not check_ollama(host):
        print("Warning: Ollama is not available, the report will use fallback content.")

    generator = ReportGenerator(model_name=model, host=host, max_retries=retries)
    report = generator.generate(topic, pages=pages, words=words)
    if report.used_fallback:
        print("Warning: model generation failed, using fallback content.")
    _write(report.text, output, fmt, report.used_fallback)


@app.command()
def sections(
    source: str = typer.Argument(..., help="Text file with the report, or '-' for stdin"),
):
    """
    Show the sections detected in report text.
    """
    try:
        text = read_text(source)
    except OSError as e:
        print(f"Error reading {source}: {str(e)}")
        raise typer.Exit(code=1)

    detected = split_sections(text)
    if not detected:
        print("No sections detected.")
        return
    for index, section in enumerate(detected, start=1):
        print(f"{index}. {section.label} ({len(section.content)} chars)")


@app.command()
def health(
    model: str = typer.Option(DEFAULT_MODEL_NAME, envvar="REPORT_MODEL", help="Ollama model to use"),
    host: str = typer.Option(DEFAULT_OLLAMA_HOST, envvar="OLLAMA_HOST", help="Ollama server URL"),
):
    """
    Check that the Ollama server is reachable.
    """
    ok = is_ollama_running(host)
    print(f"ok: {ok}")
    print(f"model: {model}")
    if not ok:
        raise typer.Exit(code=1)


@app.command("test-model")
def test_model(
    prompt: str = typer.Option("Write a 2-line poem about coding.", help="Prompt to send"),
    model: str = typer.Option(DEFAULT_MODEL_NAME, envvar="REPORT_MODEL", help="Ollama model to use"),
    host: str = typer.Option(DEFAULT_OLLAMA_HOST, envvar="OLLAMA_HOST", help="Ollama server URL"),
    verbose: int = VerboseOption
):
    """
    Send a quick prompt to the model and print the answer.
    """
    setup_logging(verbose)
    generator = ReportGenerator(model_name=model, host=host)
    try:
        print(generator.complete(prompt))
    except ModelError as e:
        print(f"Error: {str(e)}")
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
