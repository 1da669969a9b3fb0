"""
Shared utilities for autofill.

Common functionality used across contexts:
- Text trimming and display helpers
- Timestamps for session directories
"""

from autofill.utils.text_processing import preview_lines, trim, truncate_display
from autofill.utils.timestamp import now

__all__ = ["now", "preview_lines", "trim", "truncate_display"]
