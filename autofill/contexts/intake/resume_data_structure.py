"""
Parsed resume data structure for the Intake context.

Provides ParsedResume, the immutable result of one resume parse, and the
merge helper callers use to pre-fill application and profile forms.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Tuple


@dataclass(frozen=True)
class ParsedResume:
    """
    Fields extracted from an uploaded resume.

    Every field is always present. Absence is an empty string or empty tuple,
    never None.

    Attributes:
        name: Best-effort personal name
        email: First email address found
        skills: Display-cased vocabulary skills, vocabulary order, no duplicates
        raw_text: Recovered non-blank lines joined with newlines, for manual correction
    """

    name: str = ""
    email: str = ""
    skills: Tuple[str, ...] = field(default_factory=tuple)
    raw_text: str = ""

    def __post_init__(self):
        # Accept any iterable of skills but store an immutable tuple
        object.__setattr__(self, "skills", tuple(self.skills))

    @classmethod
    def empty(cls) -> "ParsedResume":
        """Result used when nothing could be recovered."""
        return cls()

    @property
    def is_empty(self) -> bool:
        """True when no field was extracted (the UI should prompt for manual entry)."""
        return not (self.name or self.email or self.skills)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "email": self.email,
            "skills": list(self.skills),
            "raw_text": self.raw_text,
        }


def _is_unset(value: Any) -> bool:
    if isinstance(value, str):
        return not value.strip()
    return not value


def merge_into_form(form: Mapping[str, Any], parsed: ParsedResume) -> Dict[str, Any]:
    """
    Pre-fill a form from a parsed resume without overwriting user input.

    Name and email are copied only where the form's value is missing or blank;
    skills only where the form has no skills yet. Empty parsed fields are never
    copied.

    Args:
        form: Current form values (e.g., {"name": "", "email": "me@x.com"})
        parsed: Result of parse_resume()

    Returns:
        New dict with merged values (form is not modified)

    Example:
        >>> merge_into_form({"name": "", "email": "me@x.com"}, ParsedResume("Jane Doe", "jane@x.com"))
        {'name': 'Jane Doe', 'email': 'me@x.com'}
    """
    merged = dict(form)

    for key, value in (("name", parsed.name), ("email", parsed.email)):
        if value and _is_unset(merged.get(key)):
            merged[key] = value

    if parsed.skills and _is_unset(merged.get("skills")):
        merged["skills"] = list(parsed.skills)

    return merged
