"""Pydantic models for comparing a resume to a job posting."""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Literal

from pydantic import Field

from resume_match.models.base import CamelModel

SkillImportance = Literal["critical", "important", "nice-to-have"]


class JobPosting(CamelModel):
    title: str
    company: str | None = None
    description: str


class KeywordFrequency(CamelModel):
    resume: int
    job: int


class KeywordMatch(CamelModel):
    keyword: str
    in_resume: bool
    in_job: bool
    frequency: KeywordFrequency
    importance: float = Field(ge=0, le=1)
    category: str


class SkillGap(CamelModel):
    skill: str
    category: str
    importance: SkillImportance
    suggestions: list[str]
    learning_resources: list[str] = []


class JobMatchRecommendation(CamelModel):
    type: Literal["add_keyword", "emphasize_skill", "add_experience", "reformat_section"]
    priority: Literal["high", "medium", "low"]
    title: str
    description: str
    impact: str
    examples: list[str] = []


class JobMatch(CamelModel):
    """Result of matching one ResumeAnalysis against one job description."""

    model_config = {"frozen": True}

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    job_title: str
    company: str | None = None
    job_description: str
    match_score: int = Field(ge=0, le=100)
    keyword_matches: list[KeywordMatch]
    skills_gap: list[SkillGap]
    recommendations: list[JobMatchRecommendation]
    created_at: datetime = Field(default_factory=datetime.now)
