"""
Heuristic field extraction from recovered resume text.

Three independent extractors, each returning an empty value when nothing is
found (never None, never an exception):
- extract_name: operates on lines
- extract_email: operates on the full text
- extract_skills: operates on the full text
"""

from typing import List, Optional, Sequence

from autofill.contexts.intake.extraction_patterns import (
    SKILL_KEYWORDS,
    ContactPatterns,
    NamePatterns,
)
from autofill.contexts.intake.settings import ParserSettings
from autofill.utils.text_processing import trim


def extract_name(lines: Sequence[str], settings: Optional[ParserSettings] = None) -> str:
    """
    Extract the candidate's name.

    Priority:
    1. First line (anywhere) labeled "Name:" or "Name -" (case-insensitive)
    2. First of the leading lines that looks like a personal name
    3. Empty string

    Args:
        lines: Recovered non-blank lines, in document order
        settings: Name heuristic bounds (defaults to built-in ParserSettings values;
                  no settings file is read, parse_resume() passes the loaded settings)

    Returns:
        Trimmed name, or "" if none found

    Example:
        >>> extract_name(["Curriculum Vitae", "Name: Jane Doe"])
        'Jane Doe'
        >>> extract_name(["John Smith", "Software Engineer"])
        'John Smith'
    """
    settings = settings or ParserSettings()

    for line in lines:
        match = NamePatterns.LABELED_NAME.match(line)
        if match:
            return trim(match.group(1))

    for line in list(lines)[: settings.name_scan_window]:
        trimmed = trim(line)
        if _looks_like_name(trimmed, settings):
            return trimmed

    return ""


def _looks_like_name(text: str, settings: ParserSettings) -> bool:
    """Check length bounds, allowed characters and word count of a trimmed line."""
    if not settings.name_min_length < len(text) < settings.name_max_length:
        return False
    if not NamePatterns.NAME_CHARACTERS.fullmatch(text):
        return False
    # Single-space split: doubled spaces count as extra (empty) words
    word_count = len(text.split(" "))
    return settings.name_min_words <= word_count <= settings.name_max_words


def extract_email(text: str) -> str:
    """
    Extract the first email address anywhere in the text.

    Example:
        >>> extract_email("Contact: jane.doe123@example.co.uk or jd@x.io")
        'jane.doe123@example.co.uk'
    """
    match = ContactPatterns.EMAIL.search(text)
    return match.group(0) if match else ""


def display_skill(keyword: str) -> str:
    """Upper-case only the first character ("typescript" -> "Typescript")."""
    return keyword[:1].upper() + keyword[1:]


def extract_skills(text: str) -> List[str]:
    """
    Find vocabulary skills mentioned in the text (case-insensitive).

    Matching is plain substring containment, so a keyword inside a longer token
    also matches ("java" in "javascript", "git" in "github").

    Returns:
        Display-cased skills in vocabulary order, without duplicates

    Example:
        >>> extract_skills("Experienced in React, TypeScript, and AWS.")
        ['Typescript', 'React', 'Aws']
    """
    lower = text.lower()
    found = [display_skill(keyword) for keyword in SKILL_KEYWORDS if keyword in lower]
    return list(dict.fromkeys(found))
