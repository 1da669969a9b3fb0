#!/usr/bin/env python3
"""
Parse a resume file with the intake pipeline and show what auto-fill would use.

Usage:
    python scripts/parse_resume.py resume.pdf
    python scripts/parse_resume.py resume.pdf --raw
    python scripts/parse_resume.py file:///cache/resume.docx --json
"""

import json
import os
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from autofill.contexts.intake.byte_source import guess_media_type, is_supported_resume
from autofill.contexts.intake.logger import setup_intake_logger
from autofill.contexts.intake.resume_parser import parse_resume
from autofill.contexts.intake.settings import load_parser_settings
from autofill.utils.timestamp import now

load_dotenv()

app = typer.Typer(help="Parse a resume file for application auto-fill.", add_completion=False)


@app.command()
def main(
    reference: Annotated[str, typer.Argument(help="Resume path or file:// URI")],
    raw: Annotated[bool, typer.Option("--raw", help="Print the recovered text")] = False,
    as_json: Annotated[bool, typer.Option("--json", help="Print the result as JSON")] = False,
    settings_file: Annotated[
        Optional[Path],
        typer.Option(
            "--settings",
            "-s",
            help="Parser settings override YAML",
            exists=True,
            dir_okay=False,
            resolve_path=True,
        ),
    ] = None,
    log_dir: Annotated[
        Optional[Path],
        typer.Option("--log-dir", help="Log directory (defaults to AUTOFILL_LOGS_PATH/parse_<timestamp>)"),
    ] = None,
):
    """Parse one resume and display extracted fields."""
    if log_dir is None:
        log_dir = Path(os.getenv("AUTOFILL_LOGS_PATH", "outs/logs")) / f"parse_{now()}"
    setup_intake_logger(log_dir, source=reference)

    try:
        settings = load_parser_settings(settings_file)
    except ValueError as e:
        raise typer.BadParameter(str(e))

    if not is_supported_resume(reference):
        typer.echo(
            f"Warning: {guess_media_type(reference) or 'unknown type'} is not a resume document type, "
            "parsing anyway",
            err=True,
        )

    parsed = parse_resume(reference, settings=settings)

    if as_json:
        typer.echo(json.dumps(parsed.to_dict(), indent=2))
    else:
        typer.echo("\n=== Extracted Fields ===")
        typer.echo(f"  name: {parsed.name or '(not found)'}")
        typer.echo(f"  email: {parsed.email or '(not found)'}")
        typer.echo(f"  skills ({len(parsed.skills)}): {', '.join(parsed.skills) or '(none)'}")
        line_count = len(parsed.raw_text.splitlines())
        typer.echo(f"  recovered lines: {line_count}")

        if raw:
            typer.echo("\n=== Recovered Text ===")
            typer.echo(parsed.raw_text)

    if parsed.is_empty:
        typer.secho("\nCould not auto-fill; enter details manually", fg=typer.colors.YELLOW, err=True)
        raise typer.Exit(1)

    typer.secho("\nParsing successful", fg=typer.colors.GREEN)


if __name__ == "__main__":
    app()
