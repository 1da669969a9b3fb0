"""
Resume parsing pipeline for the Intake context.

Sequences byte acquisition, text recovery and field extraction into a single
ParsedResume. This module is the only error boundary of the pipeline: any
failure is logged and degrades to ParsedResume.empty(). Nothing raises to the
caller, and no partial result is returned.

Each call is independent. No state is shared between calls and nothing is
written, so concurrent parses need no locking and an abandoned parse needs no
cleanup.
"""

import asyncio
from typing import Optional

from autofill.contexts.intake.byte_source import ByteSource, FileByteSource, Reference
from autofill.contexts.intake.field_extractor import extract_email, extract_name, extract_skills
from autofill.contexts.intake.logger import log_parse_failure, log_parse_result, log_parse_start
from autofill.contexts.intake.resume_data_structure import ParsedResume
from autofill.contexts.intake.settings import ParserSettings, default_parser_settings
from autofill.contexts.intake.text_recovery import RecoveredText, recover_text


def extract_resume_fields(recovered: RecoveredText, settings: ParserSettings) -> ParsedResume:
    """
    Run the three field extractors over recovered text.

    Name uses the filtered lines; email and skills use the recovered text.
    """
    return ParsedResume(
        name=extract_name(recovered.lines, settings),
        email=extract_email(recovered.text),
        skills=extract_skills(recovered.text),
        raw_text=recovered.raw_text,
    )


def parse_resume(
    reference: Reference,
    source: Optional[ByteSource] = None,
    settings: Optional[ParserSettings] = None,
) -> ParsedResume:
    """
    Parse an uploaded resume into auto-fill fields.

    Args:
        reference: Path, pathlib.Path or file:// URI of the uploaded file
        source: Byte source used to read the reference (defaults to the local file system)
        settings: Parser settings (defaults to packaged settings)

    Returns:
        ParsedResume; all-empty if the file could not be read or parsed

    Example:
        >>> parsed = parse_resume("file:///cache/resume.pdf")
        >>> parsed.email
        'jane@x.com'
    """
    log_parse_start(str(reference))

    try:
        settings = settings or default_parser_settings()
        recovered = recover_text(source or FileByteSource(), reference, settings)
        result = extract_resume_fields(recovered, settings)
        log_parse_result(str(reference), result, recovered.lines)
    except Exception as e:
        log_parse_failure(str(reference), e)
        return ParsedResume.empty()

    return result


async def parse_resume_async(
    reference: Reference,
    source: Optional[ByteSource] = None,
    settings: Optional[ParserSettings] = None,
) -> ParsedResume:
    """
    Awaitable parse_resume() for event-loop callers.

    The blocking file read and scan run in the default executor. Cancelling the
    await only discards the result.
    """
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, parse_resume, reference, source, settings)
