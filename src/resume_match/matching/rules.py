"""Lookup tables driving job-match scoring, skill gaps and advice."""

from __future__ import annotations

CATEGORY_WEIGHTS: dict[str, float] = {
    "technologies": 0.9,
    "frameworks": 0.85,
    "cloud": 0.8,
    "experience_levels": 0.75,
    "tools": 0.7,
    "methodologies": 0.6,
    "soft_skills": 0.5,
    "general": 0.3,
}

DEFAULT_WEIGHT = 0.3
RESUME_ONLY_WEIGHT = 0.3

# Job keywords above this weight count as "critical" for recommendations.
CRITICAL_KEYWORD_WEIGHT = 0.8

GAP_CATEGORIES: tuple[str, ...] = ("technologies", "frameworks", "tools", "cloud", "methodologies")

CRITICAL_SKILLS: frozenset[str] = frozenset({
    "javascript", "typescript", "react", "node.js", "python",
    "java", "sql", "git", "html", "css",
})

IMPORTANT_SKILLS: frozenset[str] = frozenset({
    "angular", "vue", "express", "mongodb", "postgresql",
    "docker", "aws", "azure", "agile", "scrum",
})

# Categories whose missing skills are at least "important".
IMPORTANT_CATEGORIES: frozenset[str] = frozenset({"technologies"})

IMPORTANCE_ORDER: dict[str, int] = {"critical": 3, "important": 2, "nice-to-have": 1}

SKILL_SUGGESTIONS: dict[str, list[str]] = {
    "react": [
        "Add React projects to your portfolio",
        "Mention React components you've built",
        "Include React hooks experience",
    ],
    "typescript": [
        "Convert existing JavaScript projects to TypeScript",
        "Mention type safety improvements you've implemented",
        "Add TypeScript to your skills section",
    ],
    "docker": [
        "Containerize your existing applications",
        "Mention Docker in deployment experience",
        "Add container orchestration experience",
    ],
    "aws": [
        "Get AWS certification",
        "Deploy projects using AWS services",
        "Mention cloud architecture experience",
    ],
    "agile": [
        "Describe your experience with sprint planning",
        "Mention collaboration with cross-functional teams",
        "Add Scrum or Kanban methodology experience",
    ],
}

DEFAULT_SUGGESTIONS: tuple[str, ...] = (
    "Add {skill} to your skills section",
    "Include projects that demonstrate {skill} usage",
    "Mention {skill} in your experience descriptions",
)

LEARNING_RESOURCES: dict[str, list[str]] = {
    "react": [
        "React Official Documentation",
        "freeCodeCamp React Course",
        "React Developer Roadmap",
    ],
    "typescript": [
        "TypeScript Handbook",
        "TypeScript Deep Dive",
        "Execute Program TypeScript Course",
    ],
    "docker": [
        "Docker Official Tutorial",
        "Docker for Beginners Course",
        "Play with Docker",
    ],
    "aws": [
        "AWS Free Tier",
        "AWS Cloud Practitioner Certification",
        "A Cloud Guru AWS Courses",
    ],
}

DEFAULT_RESOURCES: tuple[str, ...] = (
    "{skill} Official Documentation",
    "{skill} Tutorial on YouTube",
    "{skill} Course on Coursera/Udemy",
)

# Thresholds below which the resume gets generic writing advice.
MIN_QUANTIFIABLE_RESULTS = 3
MIN_ACTION_VERBS = 5

POINTS_PER_MISSING_KEYWORD = 5
MAX_KEYWORD_POINTS = 25
