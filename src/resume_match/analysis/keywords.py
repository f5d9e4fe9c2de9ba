"""Keyword extraction.

Two deliberately separate paths:

* ``extract_keywords`` feeds the resume's own keyword cloud: a plain
  frequency count with a binary skill/general tag.
* ``extract_categorized_keywords`` feeds job matching: taxonomy lookups per
  category plus a ``general`` bucket of frequent non stop words.
"""

from __future__ import annotations

import re
from collections import Counter

from resume_match.analysis.lexical import get_context, whole_word
from resume_match.analysis.vocabulary import (
    GENERAL_CATEGORY,
    KEYWORD_TAXONOMY,
    SKILL_KEYWORDS,
    STOP_WORDS,
)
from resume_match.models.analysis import ExtractedKeyword

TOP_KEYWORDS = 20
KEYWORD_CONTEXT_CHARS = 30
SKILL_IMPORTANCE = 0.8
MAX_GENERAL_IMPORTANCE = 0.6

_NON_WORD = re.compile(r"[^\w]")
_GENERAL_WORD = re.compile(r"\b[a-z]{3,}\b")

_TAXONOMY_PATTERNS: dict[str, list[tuple[str, re.Pattern[str]]]] = {
    category: [(keyword, whole_word(keyword)) for keyword in keywords]
    for category, keywords in KEYWORD_TAXONOMY.items()
}


def extract_keywords(text: str, limit: int = TOP_KEYWORDS) -> list[ExtractedKeyword]:
    """Top ``limit`` tokens by frequency, tagged as skill or general."""
    freq: Counter[str] = Counter()
    for token in text.lower().split():
        word = _NON_WORD.sub("", token)
        if len(word) > 2:
            freq[word] += 1

    lowered = text.lower()
    keywords = []
    for word, frequency in freq.most_common(limit):
        is_skill = word in SKILL_KEYWORDS
        position = max(0, lowered.find(word))
        keywords.append(ExtractedKeyword(
            word=word,
            frequency=frequency,
            category="skill" if is_skill else "general",
            importance=SKILL_IMPORTANCE if is_skill else min(MAX_GENERAL_IMPORTANCE, frequency / 10),
            context=[get_context(text, position, KEYWORD_CONTEXT_CHARS)],
        ))
    return keywords


def general_keywords(text: str, limit: int = TOP_KEYWORDS) -> list[str]:
    """Most frequent 3+ letter words that are not stop words."""
    words = _GENERAL_WORD.findall(text.lower())
    freq = Counter(w for w in words if w not in STOP_WORDS)
    return [word for word, _ in freq.most_common(limit)]


def extract_categorized_keywords(text: str) -> dict[str, list[str]]:
    """Map each taxonomy category (plus ``general``) to the keywords found."""
    lowered = text.lower()
    extracted = {
        category: [keyword for keyword, pattern in patterns if pattern.search(lowered)]
        for category, patterns in _TAXONOMY_PATTERNS.items()
    }
    extracted[GENERAL_CATEGORY] = general_keywords(lowered)
    return extracted
