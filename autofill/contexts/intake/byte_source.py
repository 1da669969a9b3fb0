"""
Byte acquisition for uploaded resumes.

A byte source turns a file reference (path, pathlib.Path or file:// URI) into
content. Two read modes mirror what a mobile file system offers:

- read_text: strict decode of the whole file (raises UnicodeDecodeError on bad bytes)
- read_base64: binary-safe read, returned base64-encoded

Both are read-only. Access failures raise AcquisitionError; decode failures are
left as UnicodeDecodeError so text recovery can fall back to the binary path.
"""

import base64
import binascii
import mimetypes
from abc import ABC, abstractmethod
from pathlib import Path, PurePosixPath
from typing import Mapping, Optional, Union
from urllib.parse import unquote, urlparse

from autofill.contexts.intake.exceptions import AcquisitionError

Reference = Union[str, Path]

# Document types accepted by the application's resume picker
RESUME_MEDIA_TYPES = {
    ".pdf": "application/pdf",
    ".doc": "application/msword",
    ".docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    ".txt": "text/plain",
}

SUPPORTED_MEDIA_TYPES = tuple(RESUME_MEDIA_TYPES.values())


def _reference_path(reference: Reference) -> PurePosixPath:
    """Path component of a reference, with URI scheme and percent-encoding removed."""
    if isinstance(reference, Path):
        return PurePosixPath(reference.as_posix())
    parsed = urlparse(reference)
    if parsed.scheme and "://" in reference:
        return PurePosixPath(unquote(parsed.path))
    return PurePosixPath(reference)


def guess_media_type(reference: Reference) -> Optional[str]:
    """
    Guess the media type of a resume reference from its suffix.

    Example:
        >>> guess_media_type("file:///cache/My%20Resume.pdf")
        'application/pdf'
        >>> guess_media_type("notes.unknownext") is None
        True
    """
    path = _reference_path(reference)
    suffix = path.suffix.lower()
    if suffix in RESUME_MEDIA_TYPES:
        return RESUME_MEDIA_TYPES[suffix]
    media_type, _ = mimetypes.guess_type(path.name)
    return media_type


def is_supported_resume(reference: Reference) -> bool:
    """Check if a reference looks like a document type the resume picker accepts."""
    return guess_media_type(reference) in SUPPORTED_MEDIA_TYPES


class ByteSource(ABC):
    """Read-only access to the content behind a file reference."""

    @abstractmethod
    def read_text(self, reference: Reference, encoding: str = "utf-8") -> str:
        """
        Read the whole file as text with strict decoding.

        Raises:
            AcquisitionError: If the reference cannot be read
            UnicodeDecodeError: If the content is not valid in the given encoding
        """

    @abstractmethod
    def read_base64(self, reference: Reference) -> str:
        """
        Read the whole file binary-safe, base64-encoded.

        Raises:
            AcquisitionError: If the reference cannot be read
        """

    def read_bytes(self, reference: Reference) -> bytes:
        """Raw bytes via the binary-safe read path."""
        payload = self.read_base64(reference)
        try:
            return base64.b64decode(payload, validate=True)
        except (binascii.Error, ValueError) as e:
            raise AcquisitionError(
                "Byte source returned an invalid base64 payload",
                reference=str(reference),
                original_error=e,
            ) from e


class FileByteSource(ByteSource):
    """
    Byte source backed by the local file system.

    Accepts plain paths, pathlib.Path objects and file:// URIs. Any other URI
    scheme (content://, https://, ...) is rejected with AcquisitionError.

    Example:
        >>> source = FileByteSource()
        >>> source.read_text("file:///tmp/resume.txt")
        'Jane Doe\\njane@x.com\\n'
    """

    def resolve(self, reference: Reference) -> Path:
        """Resolve a reference to a local Path without touching the file system."""
        if isinstance(reference, Path):
            return reference

        parsed = urlparse(reference)
        if parsed.scheme and "://" in reference:
            if parsed.scheme != "file":
                raise AcquisitionError(
                    f"Unsupported URI scheme '{parsed.scheme}'", reference=reference
                )
            return Path(unquote(parsed.path))

        return Path(reference)

    def _read_raw(self, reference: Reference) -> bytes:
        path = self.resolve(reference)
        try:
            return path.read_bytes()
        except OSError as e:
            raise AcquisitionError(
                f"Could not read resume file: {path}", reference=str(reference), original_error=e
            ) from e

    def read_text(self, reference: Reference, encoding: str = "utf-8") -> str:
        return self._read_raw(reference).decode(encoding)

    def read_base64(self, reference: Reference) -> str:
        return base64.b64encode(self._read_raw(reference)).decode("ascii")


class InMemoryByteSource(ByteSource):
    """
    Byte source over payloads already held in memory, keyed by reference.

    Useful when an upload arrives as a request body rather than a file on disk.

    Example:
        >>> source = InMemoryByteSource({"upload://1": b"Name: Jane Doe"})
        >>> source.read_text("upload://1")
        'Name: Jane Doe'
    """

    def __init__(self, payloads: Mapping[str, bytes] = None):
        self._payloads = dict(payloads or {})

    def _read_raw(self, reference: Reference) -> bytes:
        try:
            return self._payloads[str(reference)]
        except KeyError as e:
            raise AcquisitionError("No payload for reference", reference=str(reference)) from e

    def read_text(self, reference: Reference, encoding: str = "utf-8") -> str:
        return self._read_raw(reference).decode(encoding)

    def read_base64(self, reference: Reference) -> str:
        return base64.b64encode(self._read_raw(reference)).decode("ascii")
