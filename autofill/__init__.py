"""
autofill - Resume intake and application auto-fill

Recovers best-effort text from uploaded resume files and extracts the fields
needed to pre-populate a job application form (name, email, skills).

Architecture:
- Intake Context: Byte acquisition, text recovery, field extraction and
  result assembly for uploaded resumes
- Utils: Logging setup and display helpers shared across contexts
"""

__version__ = "0.1.0"
