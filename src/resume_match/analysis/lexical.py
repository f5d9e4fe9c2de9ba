"""Lexical features: counts, readability, action verbs, quantified results."""

from __future__ import annotations

import math
import re
from collections.abc import Iterable

from resume_match.analysis.vocabulary import ACTION_VERBS
from resume_match.models.analysis import ContentAnalysis, QuantifiableResult

WORDS_PER_PAGE = 250
AVG_SYLLABLES_PER_WORD = 1.5
MAX_QUANTIFIABLE_RESULTS = 10
RESULT_CONTEXT_CHARS = 50

SENTENCE_SPLIT = re.compile(r"[.!?]+")
PERCENTAGE_PATTERN = re.compile(r"(\d+(?:\.\d+)?)\s*%")
CURRENCY_PATTERN = re.compile(r"\$[\d,]+(?:\.\d{2})?")
NUMBER_PATTERN = re.compile(
    r"\b(\d{1,3}(?:,\d{3})*|\d+)\s*(million|thousand|k|m|billion)?\b",
    re.IGNORECASE,
)


def whole_word(term: str) -> re.Pattern[str]:
    """Case-insensitive pattern matching ``term`` not embedded in a longer word.

    Lookarounds instead of ``\\b`` so terms that start or end with
    punctuation (``c#``, ``ci/cd``) still match.
    """
    return re.compile(rf"(?<!\w){re.escape(term)}(?!\w)", re.IGNORECASE)


def get_context(text: str, index: int, radius: int) -> str:
    """Return ``radius`` characters on each side of ``index``, trimmed."""
    start = max(0, index - radius)
    end = min(len(text), index + radius)
    return text[start:end].strip()


def split_words(text: str) -> list[str]:
    return text.split()


def split_sentences(text: str) -> list[str]:
    return [s for s in SENTENCE_SPLIT.split(text) if s.strip()]


def estimate_page_count(word_count: int) -> int:
    return max(1, math.ceil(word_count / WORDS_PER_PAGE))


def words_per_sentence(word_count: int, sentence_count: int) -> float:
    if sentence_count == 0:
        return 0.0
    return word_count / sentence_count


def readability_score(word_count: int, sentence_count: int) -> int:
    """Simplified Flesch Reading Ease, clamped to 0-100.

    Syllables are not counted; every word is assumed to carry 1.5.
    """
    avg_words = words_per_sentence(word_count, sentence_count)
    raw = 206.835 - 1.015 * avg_words - 84.6 * AVG_SYLLABLES_PER_WORD
    return round(max(0.0, min(100.0, raw)))


def find_action_verbs(text: str, vocabulary: Iterable[str] = ACTION_VERBS) -> list[str]:
    """Return the vocabulary verbs present in ``text``, in vocabulary order."""
    return [verb for verb in vocabulary if whole_word(verb).search(text)]


def _overlaps(span: tuple[int, int], taken: list[tuple[int, int]]) -> bool:
    return any(span[0] < end and start < span[1] for start, end in taken)


def extract_quantifiable_results(
    text: str, limit: int = MAX_QUANTIFIABLE_RESULTS
) -> list[QuantifiableResult]:
    """Find percentages, currency amounts and numbers, in that order.

    Bare numbers inside an already matched percentage or currency amount
    are skipped so "40%" is not reported twice.
    """
    results: list[QuantifiableResult] = []
    taken: list[tuple[int, int]] = []

    for match in PERCENTAGE_PATTERN.finditer(text):
        taken.append(match.span())
        results.append(QuantifiableResult(
            text=match.group(0),
            type="percentage",
            value=match.group(1),
            context=get_context(text, match.start(), RESULT_CONTEXT_CHARS),
        ))

    for match in CURRENCY_PATTERN.finditer(text):
        taken.append(match.span())
        results.append(QuantifiableResult(
            text=match.group(0),
            type="currency",
            value=match.group(0),
            context=get_context(text, match.start(), RESULT_CONTEXT_CHARS),
        ))

    for match in NUMBER_PATTERN.finditer(text):
        if _overlaps(match.span(1), taken):
            continue
        found = match.group(0).strip()
        results.append(QuantifiableResult(
            text=found,
            type="number",
            value=found,
            context=get_context(text, match.start(), RESULT_CONTEXT_CHARS),
        ))

    return results[:limit]


def analyze_content(text: str) -> ContentAnalysis:
    """Compute the ContentAnalysis record for ``text``. Empty text is allowed."""
    words = split_words(text)
    sentences = split_sentences(text)
    avg_words = words_per_sentence(len(words), len(sentences))

    return ContentAnalysis(
        word_count=len(words),
        character_count=len(text),
        page_count=estimate_page_count(len(words)),
        readability_score=readability_score(len(words), len(sentences)),
        sentence_count=len(sentences),
        average_words_per_sentence=round(avg_words, 1),
        complex_words=sum(1 for w in words if len(w) > 6),
        action_verbs=find_action_verbs(text),
        quantifiable_results=extract_quantifiable_results(text),
    )
