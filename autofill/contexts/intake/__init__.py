"""
Intake Context

Responsibilities:
- Acquires uploaded resume content through a byte source
- Recovers best-effort text from text files and opaque binaries
- Extracts name, email and skills for application auto-fill

Owns: Resume text recovery and field extraction heuristics
Never: Writes files, persists results or decides how a form is merged
"""
