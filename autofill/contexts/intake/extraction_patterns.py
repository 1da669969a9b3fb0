"""
Reusable patterns and constants for resume field extraction.

Pattern classes follow the project convention:
- Dataclasses with frozen=True for immutability
- Class-level constants for patterns
- Helper functions that use these patterns live in field_extractor.py
"""

import re
from dataclasses import dataclass

# =============================================================================
# SKILL VOCABULARY
# =============================================================================

# Lower-case reference vocabulary, matched by substring containment.
# Order matters: extracted skills follow this order, not their position in the text.
SKILL_KEYWORDS = (
    # Languages
    "javascript",
    "typescript",
    "python",
    "java",
    "kotlin",
    "swift",
    "c++",
    "c#",
    # Frameworks and platforms
    "react",
    "react native",
    "vue",
    "angular",
    "next.js",
    "node.js",
    "express",
    "django",
    "flask",
    "spring",
    "flutter",
    "android",
    "ios",
    # Data stores and backends
    "sql",
    "postgresql",
    "mysql",
    "mongodb",
    "firebase",
    "supabase",
    "redis",
    # Cloud and tooling
    "aws",
    "gcp",
    "azure",
    "docker",
    "kubernetes",
    "ci/cd",
    "git",
    "github",
    # Design
    "figma",
    "photoshop",
    "illustrator",
    "xd",
    # Data and ML
    "machine learning",
    "deep learning",
    "tensorflow",
    "pytorch",
    "nlp",
    "data analysis",
    "pandas",
    "numpy",
    "tableau",
    "power bi",
    # Web
    "html",
    "css",
    "sass",
    "tailwind",
    "bootstrap",
    "graphql",
    "rest api",
    "microservices",
    # Methodologies
    "agile",
    "scrum",
    "jira",
)


# =============================================================================
# NAME PATTERNS
# =============================================================================


@dataclass(frozen=True)
class NamePatterns:
    """
    Regex patterns for locating the candidate's name.

    Supports:
    - Explicit label: "Name: Jane Doe", "name - Jane Doe"
    - Unlabeled header line: letters, spaces, periods, apostrophes, hyphens only
    """

    # Label must start the line; the value stops at any line terminator (lone CR included)
    LABELED_NAME: re.Pattern = re.compile(r"^name\s*[:\-]\s*([^\r\n\u2028\u2029]+)", re.IGNORECASE)

    # Whole (trimmed) line restricted to name characters
    NAME_CHARACTERS: re.Pattern = re.compile(r"[A-Za-z .'\-]{2,}")


# =============================================================================
# CONTACT PATTERNS
# =============================================================================


@dataclass(frozen=True)
class ContactPatterns:
    """
    Regex patterns for extracting contact details.
    """

    # local-part @ domain . TLD (2+ letters)
    EMAIL: re.Pattern = re.compile(r"[a-zA-Z0-9._%+\-]+@[a-zA-Z0-9.\-]+\.[a-zA-Z]{2,}")
