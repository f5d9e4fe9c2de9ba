"""ATS compatibility scoring.

Five sub-scores start at 100 and lose fixed points per failed check. The
checks are declared in ``ATS_RULES``; ``score_ats`` only decides which of
them fire.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from resume_match.analysis.lexical import (
    find_action_verbs,
    split_sentences,
    split_words,
    words_per_sentence,
)
from resume_match.analysis.vocabulary import ATS_ACTION_VERBS
from resume_match.models.analysis import ATSBreakdown, ATSIssue, ATSScore

MIN_WORDS = 200
MAX_WORDS = 800
MIN_ACTION_VERBS = 3
MAX_WORDS_PER_SENTENCE = 25

EMAIL_PATTERN = re.compile(r"\b[\w.%+-]+@[\w.-]+\.[A-Za-z]{2,}\b")
PHONE_PATTERN = re.compile(r"\b\d{3}[-.]?\d{3}[-.]?\d{4}\b")

IMPROVEMENTS: tuple[str, ...] = (
    "Use more quantifiable achievements (numbers, percentages)",
    "Include relevant industry keywords",
    "Ensure consistent formatting throughout",
    "Add a professional summary section",
)


@dataclass(frozen=True)
class ATSRule:
    breakdown: str  # ATSBreakdown field the points come off
    type: str
    category: str
    message: str
    points: int
    fix: str

    def to_issue(self) -> ATSIssue:
        return ATSIssue(
            type=self.type,
            category=self.category,
            message=self.message,
            impact=self.points,
            fix=self.fix,
        )


ATS_RULES: dict[str, ATSRule] = {
    "too_short": ATSRule(
        breakdown="length",
        type="critical",
        category="content",
        message=f"Resume is too short (less than {MIN_WORDS} words)",
        points=30,
        fix="Add more details about your experience and achievements",
    ),
    "too_long": ATSRule(
        breakdown="length",
        type="warning",
        category="content",
        message=f"Resume might be too long (over {MAX_WORDS} words)",
        points=15,
        fix="Consider condensing content to 1-2 pages",
    ),
    "no_email": ATSRule(
        breakdown="structure",
        type="critical",
        category="structure",
        message="No email address found",
        points=25,
        fix="Add a professional email address",
    ),
    "no_phone": ATSRule(
        breakdown="structure",
        type="warning",
        category="structure",
        message="No phone number found",
        points=15,
        fix="Add a phone number for contact",
    ),
    "few_action_verbs": ATSRule(
        breakdown="keywords",
        type="suggestion",
        category="keywords",
        message="Limited use of strong action verbs",
        points=20,
        fix='Use more action verbs like "achieved", "developed", "led"',
    ),
    "long_sentences": ATSRule(
        breakdown="readability",
        type="suggestion",
        category="formatting",
        message="Sentences are too long on average",
        points=15,
        fix="Break down long sentences for better readability",
    ),
}


def failed_checks(text: str) -> list[str]:
    """Names of the ATS_RULES that ``text`` fails, in evaluation order."""
    word_count = len(split_words(text))
    failed = []

    if word_count < MIN_WORDS:
        failed.append("too_short")
    elif word_count > MAX_WORDS:
        failed.append("too_long")

    if not EMAIL_PATTERN.search(text):
        failed.append("no_email")
    if not PHONE_PATTERN.search(text):
        failed.append("no_phone")

    if len(find_action_verbs(text, ATS_ACTION_VERBS)) < MIN_ACTION_VERBS:
        failed.append("few_action_verbs")

    if words_per_sentence(word_count, len(split_sentences(text))) > MAX_WORDS_PER_SENTENCE:
        failed.append("long_sentences")

    return failed


def score_ats(text: str) -> ATSScore:
    """Score ``text`` for ATS compatibility.

    ``formatting`` has no checks yet and always stays at 100.
    """
    scores = {name: 100 for name in ATSBreakdown.model_fields}
    issues = []
    for name in failed_checks(text):
        rule = ATS_RULES[name]
        scores[rule.breakdown] = max(0, min(100, scores[rule.breakdown] - rule.points))
        issues.append(rule.to_issue())

    breakdown = ATSBreakdown(**scores)
    values = breakdown.scores()
    return ATSScore(
        overall=round(sum(values) / len(values)),
        breakdown=breakdown,
        issues=issues,
        improvements=list(IMPROVEMENTS),
    )
