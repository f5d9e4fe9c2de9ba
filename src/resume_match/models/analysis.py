"""Pydantic models for a single resume analysis."""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Literal

from pydantic import Field

from resume_match.models.base import CamelModel

IssueType = Literal["critical", "warning", "suggestion"]
IssueCategory = Literal["formatting", "content", "structure", "keywords"]


class FileMeta(CamelModel):
    file_name: str
    file_size: int = Field(ge=0)


class ATSIssue(CamelModel):
    type: IssueType
    category: IssueCategory
    message: str
    impact: int = Field(ge=0)  # points deducted
    fix: str | None = None


class ATSBreakdown(CamelModel):
    formatting: int = Field(ge=0, le=100)
    keywords: int = Field(ge=0, le=100)
    structure: int = Field(ge=0, le=100)
    readability: int = Field(ge=0, le=100)
    length: int = Field(ge=0, le=100)

    def scores(self) -> list[int]:
        return [self.formatting, self.keywords, self.structure, self.readability, self.length]


class ATSScore(CamelModel):
    overall: int = Field(ge=0, le=100)
    breakdown: ATSBreakdown
    issues: list[ATSIssue] = []
    improvements: list[str] = []


class QuantifiableResult(CamelModel):
    text: str
    type: Literal["percentage", "number", "currency", "time"]
    value: str
    context: str


class ContentAnalysis(CamelModel):
    word_count: int
    character_count: int
    page_count: int
    readability_score: int
    sentence_count: int
    average_words_per_sentence: float
    complex_words: int  # words longer than 6 characters
    action_verbs: list[str]
    quantifiable_results: list[QuantifiableResult]


class ExtractedKeyword(CamelModel):
    word: str
    frequency: int
    category: Literal["skill", "general"]
    importance: float = Field(ge=0, le=1)
    context: list[str]


class DetectedSection(CamelModel):
    type: Literal[
        "contact", "summary", "experience", "education",
        "skills", "projects", "certifications", "other",
    ]
    title: str
    content: str
    start_index: int
    end_index: int
    confidence: float = Field(ge=0, le=1)
    issues: list[str] = []


class Recommendation(CamelModel):
    id: str
    type: Literal["critical", "important", "suggestion"]
    category: IssueCategory
    title: str
    description: str
    impact: Literal["high", "medium", "low"]
    effort: Literal["easy", "moderate", "difficult"]
    examples: list[str] = []


class ResumeAnalysis(CamelModel):
    """Complete analysis of one uploaded document. Immutable once built."""

    model_config = {"frozen": True}

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    file_name: str
    file_size: int = Field(ge=0)
    uploaded_at: datetime = Field(default_factory=datetime.now)
    extracted_text: str
    ats_score: ATSScore
    content_analysis: ContentAnalysis
    recommendations: list[Recommendation]
    keywords: list[ExtractedKeyword]
    sections: list[DetectedSection]
