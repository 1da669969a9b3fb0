"""
Intake context logger.

Provides session setup for intake runs and logging helpers with an automatic
[intake] prefix. All intake modules log through this module.
"""

import os
import sys
from pathlib import Path

from dotenv import load_dotenv
from loguru import logger

from autofill import __version__
from autofill.contexts.intake.byte_source import guess_media_type
from autofill.utils.text_processing import preview_lines

load_dotenv()

CONTEXT_PREFIX = "[intake]"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | <level>{level: <7}</level> | <level>{message}</level>"


def setup_intake_logger(log_dir: Path, source: str = None) -> Path:
    """
    Setup logger for an intake session.

    Replaces loguru's default sink with a DEBUG file sink (intake.log in log_dir)
    and an INFO console sink, then logs a provenance header for the session.

    Args:
        log_dir: Directory for this intake session
        source: Optional file reference recorded in the provenance header

    Returns:
        Path to log file

    Example:
        from autofill.contexts.intake.logger import setup_intake_logger, _log_info

        log_file = setup_intake_logger(log_dir, source="resume.pdf")
        _log_info("Parsing resume...")
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / "intake.log"

    logger.remove()
    logger.add(log_file, format=FILE_FORMAT, level="DEBUG")
    logger.add(sys.stdout, format=CONSOLE_FORMAT, level="INFO", colorize=True)

    logger.info("=" * 80)
    logger.info(f"autofill {__version__} | Python {sys.version.split()[0]}")
    logger.info(f"Command: {' '.join(sys.argv)}")
    if source:
        logger.info(f"Source: {source} ({guess_media_type(source) or 'unknown type'})")
    logger.info(
        f"Parser settings: {os.getenv('AUTOFILL_PARSER_SETTINGS') or '(packaged defaults)'}"
    )
    logger.info("=" * 80)

    return log_file


# Wrapper functions with automatic [intake] prefix


def _log_info(message: str) -> None:
    """Log info message with [intake] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [intake] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [intake] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [intake] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [intake] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level intake-specific logging helpers


def log_parse_start(reference: str) -> None:
    """Log start of a resume parse."""
    _log_debug(f"Parsing resume: {reference}")


def log_fallback_scan(reference: str, reason: str, runs_kept: int) -> None:
    """Log that UTF-8 decoding failed and printable runs were recovered instead."""
    _log_warning(f"{reference}: not valid UTF-8 ({reason}), scanned bytes for printable text")
    _log_debug(f"  Printable runs kept: {runs_kept}")


def log_parse_result(reference: str, result, lines: list) -> None:
    """
    Log a parse result summary.

    Args:
        reference: File reference that was parsed
        result: ParsedResume from parse_resume()
        lines: Recovered (filtered) lines
    """
    found = [
        label
        for label, value in (("name", result.name), ("email", result.email), ("skills", result.skills))
        if value
    ]
    if found:
        _log_info(f"{reference}: extracted {', '.join(found)} ({len(result.skills)} skills)")
    else:
        _log_warning(f"{reference}: no fields extracted from {len(lines)} lines")
    _log_debug(f"  Preview: {preview_lines(lines)}")


def log_parse_failure(reference: str, error: Exception) -> None:
    """Log a failure caught at the parse boundary."""
    _log_error(f"{reference}: could not parse resume, returning empty result")
    _log_debug(f"  {type(error).__name__}: {error}")
