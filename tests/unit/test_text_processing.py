"""Unit tests for display helpers."""

import pytest

from autofill.utils.text_processing import preview_lines, trim, truncate_display


@pytest.mark.unit
def test_truncate_display():
    assert truncate_display("short", 10) == "short"
    assert truncate_display("this is a very long string", 10) == "this is..."


@pytest.mark.unit
def test_preview_lines():
    lines = ["Jane Doe", "jane@x.com", "Python", "SQL"]
    assert preview_lines(lines, max_lines=2) == "Jane Doe | jane@x.com | ... (+2 lines)"
    assert preview_lines(lines[:1]) == "Jane Doe"
    assert preview_lines([]) == "(no text)"


@pytest.mark.unit
def test_trim_removes_whitespace_and_byte_order_marks():
    assert trim("\ufeff  John Smith \u00a0\r\n") == "John Smith"
    assert trim("\ufeff") == ""
    assert trim("Jane\ufeffDoe") == "Jane\ufeffDoe"
