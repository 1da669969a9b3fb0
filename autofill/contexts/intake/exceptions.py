"""Custom exceptions for the intake context with source references."""

from typing import Optional


class ResumeIntakeError(Exception):
    """
    Base exception for resume intake failures.

    Attributes:
        message: Error description
        reference: The file reference (path or URI) being read
        original_error: The underlying error, if any
    """

    def __init__(
        self,
        message: str,
        reference: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.reference = reference
        self.original_error = original_error

        parts = [message]

        if reference:
            parts.append(f"Reference: {reference}")

        if original_error:
            parts.append(f"Original error: {type(original_error).__name__}: {original_error}")

        super().__init__("\n".join(parts))


class AcquisitionError(ResumeIntakeError):
    """
    Exception raised when a byte source cannot resolve, open or read a reference.

    Covers missing files, unsupported URI schemes, OS-level read errors and
    payloads that are not valid base64.
    """

    pass
