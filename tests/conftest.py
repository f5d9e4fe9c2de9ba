"""Shared test fixtures."""

from __future__ import annotations

import pytest

from resume_match.analysis.ats_scorer import score_ats
from resume_match.analysis.keywords import extract_keywords
from resume_match.analysis.lexical import analyze_content
from resume_match.analysis.recommendations import generate_recommendations
from resume_match.analysis.sections import detect_sections
from resume_match.models.analysis import FileMeta, ResumeAnalysis
from resume_match.models.job import JobPosting

SHORT_PROFILE_TEXT = (
    "John Doe. Email: john@x.com. Phone: 555-123-4567. "
    "Developed a React application serving 10000 users. Reduced load time by 40%."
)


def make_analysis(text: str, file_name: str = "resume.txt", **overrides) -> ResumeAnalysis:
    """Build an analysis synchronously from the individual analyzers."""
    fields = dict(
        file_name=file_name,
        file_size=len(text.encode("utf-8")),
        extracted_text=text,
        ats_score=score_ats(text),
        content_analysis=analyze_content(text),
        recommendations=generate_recommendations(text),
        keywords=extract_keywords(text),
        sections=detect_sections(text),
    )
    fields.update(overrides)
    return ResumeAnalysis(**fields)


@pytest.fixture
def sample_resume_text() -> str:
    return """Jane Smith
Email: jane.smith@example.com | Phone: 555-123-4567

Professional Summary
Senior software engineer with 6 years of experience building web platforms in Python and React.

Experience
Acme Corp - Senior Software Engineer (2020 - Present)
- Led a team of 5 engineers delivering a customer analytics platform.
- Developed REST APIs with Django and PostgreSQL serving 2 million requests per day.
- Reduced page load time by 40% by optimizing React rendering.
- Implemented CI/CD pipelines with Docker and Jenkins on AWS.

Beta Labs - Software Engineer (2017 - 2020)
- Built data pipelines in Python processing $1,200,000 in monthly transactions.
- Improved test coverage from 45% to 90% using Jest.

Education
B.S. Computer Science, State University

Skills
Python, JavaScript, React, Django, PostgreSQL, Docker, AWS, Git, Agile, Scrum
"""


@pytest.fixture
def sample_jd_text() -> str:
    return """Senior Backend Engineer

We are looking for a senior engineer to design and build scalable services.

Requirements:
- 5+ years of experience with Python and Django
- Strong SQL skills with PostgreSQL and Redis
- Experience with Docker, Kubernetes and AWS
- Familiarity with TypeScript and React is a plus
- Agile and Scrum experience, strong communication and mentoring skills
"""


@pytest.fixture
def sample_file_meta() -> FileMeta:
    return FileMeta(file_name="jane_smith.txt", file_size=1024)


@pytest.fixture
def sample_analysis(sample_resume_text) -> ResumeAnalysis:
    return make_analysis(sample_resume_text, file_name="jane_smith.txt")


@pytest.fixture
def sample_posting(sample_jd_text) -> JobPosting:
    return JobPosting(title="Senior Backend Engineer", company="Initech", description=sample_jd_text)


@pytest.fixture
def analysis_factory():
    return make_analysis


@pytest.fixture
def short_profile_text() -> str:
    return SHORT_PROFILE_TEXT
