"""Heuristic resume section detection."""

from __future__ import annotations

import re

from resume_match.analysis.lexical import get_context
from resume_match.models.analysis import DetectedSection

SECTION_CONTEXT_CHARS = 200
SECTION_CONFIDENCE = 0.8

SECTION_PATTERNS: tuple[tuple[str, tuple[re.Pattern[str], ...]], ...] = tuple(
    (section_type, tuple(re.compile(p, re.IGNORECASE) for p in patterns))
    for section_type, patterns in (
        ("contact", ("contact", "email", "phone")),
        ("summary", ("summary", "profile", "objective")),
        ("experience", ("experience", "employment", "work")),
        ("education", ("education", "degree", "university")),
        ("skills", ("skills", "competencies", "technologies")),
        ("projects", ("projects", "portfolio")),
        ("certifications", ("certifications", "certificates")),
    )
)


def detect_sections(text: str) -> list[DetectedSection]:
    """Emit one section per matching pattern.

    Several patterns of the same type can each match, so a single logical
    section may be reported more than once.
    """
    sections = []
    for section_type, patterns in SECTION_PATTERNS:
        for pattern in patterns:
            match = pattern.search(text)
            if match is None:
                continue
            sections.append(DetectedSection(
                type=section_type,
                title=match.group(0),
                content=get_context(text, match.start(), SECTION_CONTEXT_CHARS),
                start_index=match.start(),
                end_index=match.end(),
                confidence=SECTION_CONFIDENCE,
            ))
    return sections
