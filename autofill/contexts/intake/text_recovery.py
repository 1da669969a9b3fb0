"""
Best-effort text recovery from uploaded resume files.

Two tiers:
1. Strict UTF-8 decode of the whole file (plain text, some DOC exports).
2. If that fails, read the file binary-safe and keep the runs of printable bytes.
   Names, emails and skill words often survive as literal ASCII in PDF headers,
   metadata and uncompressed streams, at the cost of layout and some noise.

The decode attempt returns a tagged outcome (DecodedText or DecodeFailure) and
recover_text() branches on the tag to invoke the fallback.
"""

import re
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple, Union

from autofill.contexts.intake.byte_source import ByteSource, Reference
from autofill.contexts.intake.logger import log_fallback_scan
from autofill.contexts.intake.settings import ParserSettings
from autofill.utils.text_processing import trim

LINE_BREAK = re.compile(r"\r?\n")


@dataclass(frozen=True)
class DecodedText:
    """Primary decode succeeded."""

    text: str


@dataclass(frozen=True)
class DecodeFailure:
    """Primary decode failed; reason is the decoder's message."""

    reason: str


DecodeOutcome = Union[DecodedText, DecodeFailure]


@dataclass(frozen=True)
class RecoveredText:
    """
    Text recovered from one file.

    Attributes:
        text: Recovered text before line filtering (decoded file, or joined printable runs)
        lines: Non-blank lines in original order
        used_fallback: True if the printable-run scan produced the text
        decode_failure: Decoder message when the primary path failed
    """

    text: str
    lines: Tuple[str, ...]
    used_fallback: bool = False
    decode_failure: Optional[str] = None

    @property
    def raw_text(self) -> str:
        """Filtered lines rejoined with newlines."""
        return "\n".join(self.lines)


def try_decode_text(source: ByteSource, reference: Reference, encoding: str = "utf-8") -> DecodeOutcome:
    """
    Attempt the primary (text) read.

    Access failures (AcquisitionError) are not a decode outcome and propagate.
    """
    try:
        return DecodedText(source.read_text(reference, encoding=encoding))
    except UnicodeDecodeError as e:
        return DecodeFailure(str(e))


def iter_printable_runs(data: bytes, printable_min: int = 32, printable_max: int = 126) -> Iterator[str]:
    """
    Yield maximal runs of bytes whose values fall in [printable_min, printable_max].

    Any byte outside the range, including newline and carriage return, ends the
    current run. Runs are yielded untrimmed and unfiltered.

    Example:
        >>> list(iter_printable_runs(b"\\x00Jane\\x01\\x02Doe\\n"))
        ['Jane', 'Doe']
    """
    start = None

    for pos, byte in enumerate(data):
        if printable_min <= byte <= printable_max:
            if start is None:
                start = pos
        elif start is not None:
            yield data[start:pos].decode("latin-1")
            start = None

    # Flush the run still open at end of input
    if start is not None:
        yield data[start:].decode("latin-1")


def scan_printable_runs(
    data: bytes,
    min_run_length: int = 3,
    printable_min: int = 32,
    printable_max: int = 126,
) -> List[str]:
    """
    Recover text fragments from opaque bytes.

    Keeps each printable run, trimmed, only if its trimmed length is strictly
    greater than min_run_length.

    Example:
        >>> scan_printable_runs(b"\\x00abc\\x00abcd\\x00")
        ['abcd']
    """
    kept = []
    for run in iter_printable_runs(data, printable_min, printable_max):
        trimmed = trim(run)
        if len(trimmed) > min_run_length:
            kept.append(trimmed)
    return kept


def split_lines(text: str) -> Tuple[str, ...]:
    """Split on LF or CRLF and drop whitespace-only lines."""
    return tuple(line for line in LINE_BREAK.split(text) if trim(line))


def recover_text(source: ByteSource, reference: Reference, settings: ParserSettings) -> RecoveredText:
    """
    Recover best-effort text from a file reference.

    Args:
        source: Byte source used to read the reference
        reference: Path, pathlib.Path or file:// URI of the uploaded file
        settings: Parser settings (encoding, printable range, run threshold)

    Returns:
        RecoveredText with the recovered text and its non-blank lines

    Raises:
        AcquisitionError: If the file cannot be read at all
    """
    outcome = try_decode_text(source, reference, encoding=settings.recovery_encoding)

    if isinstance(outcome, DecodedText):
        return RecoveredText(text=outcome.text, lines=split_lines(outcome.text))

    runs = scan_printable_runs(
        source.read_bytes(reference),
        min_run_length=settings.recovery_min_run_length,
        printable_min=settings.recovery_printable_min,
        printable_max=settings.recovery_printable_max,
    )
    log_fallback_scan(str(reference), outcome.reason, len(runs))

    text = "\n".join(runs)
    return RecoveredText(
        text=text,
        lines=split_lines(text),
        used_fallback=True,
        decode_failure=outcome.reason,
    )
