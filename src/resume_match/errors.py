"""Exception hierarchy for the analysis engine."""

from __future__ import annotations


class ResumeMatchError(Exception):
    """Base class for all resume-match errors."""


class ExtractionError(ResumeMatchError, ValueError):
    """Raised when a document cannot be turned into plain text."""


class AnalysisError(ResumeMatchError):
    """Raised when any resume sub-analysis fails."""


class JobMatchError(ResumeMatchError):
    """Raised when comparing a resume to a job description fails."""
