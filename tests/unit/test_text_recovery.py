"""Unit tests for best-effort text recovery."""

import pytest

from autofill.contexts.intake.byte_source import InMemoryByteSource
from autofill.contexts.intake.exceptions import AcquisitionError
from autofill.contexts.intake.settings import ParserSettings
from autofill.contexts.intake.text_recovery import (
    DecodedText,
    DecodeFailure,
    iter_printable_runs,
    recover_text,
    scan_printable_runs,
    split_lines,
    try_decode_text,
)

SETTINGS = ParserSettings()


@pytest.mark.unit
def test_iter_printable_runs_splits_on_control_bytes():
    """Non-printable bytes, newline and carriage return all end a run."""
    data = b"Jane\x00Doe\nSmith\rRoe\x7fEnd"
    assert list(iter_printable_runs(data)) == ["Jane", "Doe", "Smith", "Roe", "End"]


@pytest.mark.unit
def test_iter_printable_runs_flushes_final_run():
    """A run still open at end of input is yielded."""
    assert list(iter_printable_runs(b"\x01\x02tail")) == ["tail"]


@pytest.mark.unit
def test_iter_printable_runs_empty_input():
    assert list(iter_printable_runs(b"")) == []


@pytest.mark.unit
def test_scan_drops_runs_of_three_keeps_runs_of_four():
    """Trimmed length must be strictly greater than 3."""
    assert scan_printable_runs(b"\x00abc\x00") == []
    assert scan_printable_runs(b"\x00abcd\x00") == ["abcd"]


@pytest.mark.unit
def test_scan_trims_before_measuring():
    """Padding spaces do not count towards run length and are stripped."""
    assert scan_printable_runs(b"\x00   abc   \x00  wxyz \x00") == ["wxyz"]


@pytest.mark.unit
def test_scan_keeps_encounter_order():
    data = b"%PDF-1.4\x00\x9c\x81Jane Doe\x05\x06jane@x.com\x00"
    assert scan_printable_runs(data) == ["%PDF-1.4", "Jane Doe", "jane@x.com"]


@pytest.mark.unit
def test_split_lines_drops_blank_lines_and_handles_crlf():
    text = "Jane Doe\r\n\r\n   \njane@x.com\n\tPython\n"
    assert split_lines(text) == ("Jane Doe", "jane@x.com", "\tPython")


@pytest.mark.unit
def test_try_decode_text_success():
    source = InMemoryByteSource({"a.txt": "Zoë Doe".encode("utf-8")})
    assert try_decode_text(source, "a.txt") == DecodedText("Zoë Doe")


@pytest.mark.unit
def test_try_decode_text_failure_is_tagged_not_raised():
    source = InMemoryByteSource({"a.pdf": b"\xff\xfe\x00binary"})
    outcome = try_decode_text(source, "a.pdf")
    assert isinstance(outcome, DecodeFailure)
    assert "utf-8" in outcome.reason


@pytest.mark.unit
def test_try_decode_text_propagates_acquisition_errors():
    """Missing content is not a decode outcome."""
    with pytest.raises(AcquisitionError):
        try_decode_text(InMemoryByteSource(), "missing.pdf")


@pytest.mark.unit
def test_recover_text_primary_path():
    source = InMemoryByteSource({"cv.txt": b"Jane Doe\n\n  \njane@x.com\n"})
    recovered = recover_text(source, "cv.txt", SETTINGS)

    assert not recovered.used_fallback
    assert recovered.decode_failure is None
    assert recovered.text == "Jane Doe\n\n  \njane@x.com\n"
    assert recovered.lines == ("Jane Doe", "jane@x.com")
    assert recovered.raw_text == "Jane Doe\njane@x.com"


@pytest.mark.unit
def test_recover_text_fallback_emits_printable_run_as_one_line():
    """Invalid UTF-8 falls back to the printable-run scan."""
    data = b"\x00\x01\xff" + b"Jane Doe <jane@x.com> Python SQL" + b"\x02\xfe\x03"
    source = InMemoryByteSource({"cv.pdf": data})
    recovered = recover_text(source, "cv.pdf", SETTINGS)

    assert recovered.used_fallback
    assert recovered.decode_failure
    assert recovered.lines == ("Jane Doe <jane@x.com> Python SQL",)
    assert recovered.raw_text == "Jane Doe <jane@x.com> Python SQL"


@pytest.mark.unit
def test_recover_text_fallback_boundary_lengths():
    source = InMemoryByteSource({"three.pdf": b"\xffabc\xff", "four.pdf": b"\xffabcd\xff"})

    assert recover_text(source, "three.pdf", SETTINGS).lines == ()
    assert recover_text(source, "four.pdf", SETTINGS).lines == ("abcd",)


@pytest.mark.unit
def test_recover_text_respects_run_length_setting():
    settings = ParserSettings(recovery_min_run_length=5)
    source = InMemoryByteSource({"cv.pdf": b"\xffabcde\xffabcdef\xff"})
    assert recover_text(source, "cv.pdf", settings).lines == ("abcdef",)


@pytest.mark.unit
def test_split_lines_drops_byte_order_mark_only_lines():
    assert split_lines("\ufeff\nJane Doe\n\ufeff  \n") == ("Jane Doe",)


@pytest.mark.unit
def test_split_lines_keeps_lone_carriage_returns_inside_lines():
    """Only LF and CRLF split lines."""
    assert split_lines("Jane Doe\rjane@x.com\r") == ("Jane Doe\rjane@x.com\r",)
