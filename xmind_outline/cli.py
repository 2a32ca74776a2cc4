"""Command-line front-end: compile an outline file into an ``.xmind`` archive."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import typer

from xmind_outline.core.exceptions import OutlineError, OutlineInputError
from xmind_outline.core.parser import EXAMPLE_OUTLINE
from xmind_outline.core.services import CompilerService
from xmind_outline.logging_config import setup_logging
from xmind_outline.version import get_app_version

app = typer.Typer(add_completion=False, help="Convert tab-indented outlines into XMind mind maps")
logger = logging.getLogger(__name__)

EXIT_FAILURE = 1
EXIT_INPUT_ERROR = 2


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(get_app_version())
        raise typer.Exit()


def _read_source(source: str | None) -> str:
    if source is None or source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


@app.command()
def convert(
    source: str | None = typer.Argument(
        None,
        help="Outline text file (UTF-8). Reads stdin when omitted or '-'.",
        show_default=False,
    ),
    output_dir: Path = typer.Option(Path("."), "--output-dir", "-o", help="Directory for the .xmind file"),
    name: str = typer.Option("", "--name", "-n", help="Base file name (a timestamp is appended)"),
    validate_only: bool = typer.Option(False, "--validate-only", help="Only check the outline structure"),
    example: bool = typer.Option(False, "--example", help="Compile the built-in sample outline"),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show the version and exit"
    ),
) -> None:
    """Compile an outline into an .xmind archive and print its path."""
    setup_logging()
    service = CompilerService()

    if example:
        text = EXAMPLE_OUTLINE
    else:
        try:
            text = _read_source(source)
        except OSError as exc:
            typer.echo(f"Error: cannot read {source}: {exc}", err=True)
            raise typer.Exit(EXIT_FAILURE)

    verdict = service.validate(text)
    for warning in verdict.warnings:
        typer.echo(f"Warning: {warning}", err=True)
    if validate_only:
        typer.echo(verdict.message)
        raise typer.Exit(0 if verdict.ok else EXIT_INPUT_ERROR)

    try:
        artifact = service.compile(text, name)
        path = service.write_artifact(artifact, output_dir)
    except OutlineInputError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(EXIT_INPUT_ERROR)
    except OutlineError as exc:
        logger.error("Compilation failed", exc_info=True)
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(EXIT_FAILURE)

    typer.echo(str(path))


def main() -> None:
    app()


if __name__ == "__main__":
    main()
