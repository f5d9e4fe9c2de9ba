"""Data models for the resume analysis engine."""

from resume_match.models.analysis import (
    ATSBreakdown,
    ATSIssue,
    ATSScore,
    ContentAnalysis,
    DetectedSection,
    ExtractedKeyword,
    FileMeta,
    QuantifiableResult,
    Recommendation,
    ResumeAnalysis,
)
from resume_match.models.job import (
    JobMatch,
    JobMatchRecommendation,
    JobPosting,
    KeywordFrequency,
    KeywordMatch,
    SkillGap,
)

__all__ = [
    "ATSBreakdown",
    "ATSIssue",
    "ATSScore",
    "ContentAnalysis",
    "DetectedSection",
    "ExtractedKeyword",
    "FileMeta",
    "JobMatch",
    "JobMatchRecommendation",
    "JobPosting",
    "KeywordFrequency",
    "KeywordMatch",
    "QuantifiableResult",
    "Recommendation",
    "ResumeAnalysis",
    "SkillGap",
]
