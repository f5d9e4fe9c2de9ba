"""Compare a resume's keywords against a job description's keywords."""

from __future__ import annotations

from resume_match.matching import rules
from resume_match.models.analysis import ResumeAnalysis
from resume_match.models.job import (
    JobMatch,
    JobMatchRecommendation,
    JobPosting,
    KeywordFrequency,
    KeywordMatch,
    SkillGap,
)

KeywordMap = dict[str, list[str]]


def keyword_weight(category: str) -> float:
    return rules.CATEGORY_WEIGHTS.get(category, rules.DEFAULT_WEIGHT)


def analyze_keyword_matches(resume_keywords: KeywordMap, job_keywords: KeywordMap) -> list[KeywordMatch]:
    """Pair up job and resume keywords category by category.

    A keyword seen in several categories is kept once, at its first
    occurrence. Result is sorted by importance, highest first.
    """
    matches: list[KeywordMatch] = []
    for category, job_terms in job_keywords.items():
        resume_terms = resume_keywords.get(category, [])

        for keyword in job_terms:
            in_resume = keyword in resume_terms
            matches.append(KeywordMatch(
                keyword=keyword,
                in_resume=in_resume,
                in_job=True,
                frequency=KeywordFrequency(resume=int(in_resume), job=1),
                importance=keyword_weight(category),
                category=category,
            ))

        for keyword in resume_terms:
            if keyword not in job_terms:
                matches.append(KeywordMatch(
                    keyword=keyword,
                    in_resume=True,
                    in_job=False,
                    frequency=KeywordFrequency(resume=1, job=0),
                    importance=rules.RESUME_ONLY_WEIGHT,
                    category=category,
                ))

    seen: set[str] = set()
    unique = []
    for match in matches:
        if match.keyword not in seen:
            seen.add(match.keyword)
            unique.append(match)

    return sorted(unique, key=lambda m: m.importance, reverse=True)


def calculate_match_score(
    keyword_matches: list[KeywordMatch],
    analysis: ResumeAnalysis,
    job_description: str,
) -> int:
    """Weighted keyword coverage plus small resume-quality and length bonuses."""
    job_matches = [m for m in keyword_matches if m.in_job]
    if not job_matches:
        return 0

    total_weight = sum(m.importance for m in job_matches)
    matched_weight = sum(m.importance for m in job_matches if m.in_resume)
    keyword_score = matched_weight / total_weight * 100

    # -10 .. +10
    quality_bonus = (analysis.ats_score.overall - 50) * 0.2

    # 0 .. 5
    job_word_count = len(job_description.split())
    resume_word_count = analysis.content_analysis.word_count
    length_ratio = min(resume_word_count / max(job_word_count * 0.3, 200), 1)
    length_bonus = length_ratio * 5

    return round(max(0.0, min(100.0, keyword_score + quality_bonus + length_bonus)))


def skill_importance(skill: str, category: str) -> str:
    name = skill.lower()
    if name in rules.CRITICAL_SKILLS:
        return "critical"
    if name in rules.IMPORTANT_SKILLS or category in rules.IMPORTANT_CATEGORIES:
        return "important"
    return "nice-to-have"


def skill_suggestions(skill: str) -> list[str]:
    specific = rules.SKILL_SUGGESTIONS.get(skill.lower())
    if specific is not None:
        return list(specific)
    return [t.format(skill=skill) for t in rules.DEFAULT_SUGGESTIONS]


def learning_resources(skill: str) -> list[str]:
    specific = rules.LEARNING_RESOURCES.get(skill.lower())
    if specific is not None:
        return list(specific)
    return [t.format(skill=skill) for t in rules.DEFAULT_RESOURCES]


def identify_skills_gap(resume_keywords: KeywordMap, job_keywords: KeywordMap) -> list[SkillGap]:
    """Job skills from the technical categories that the resume lacks."""
    gaps = []
    for category in rules.GAP_CATEGORIES:
        resume_skills = resume_keywords.get(category, [])
        for skill in job_keywords.get(category, []):
            if skill in resume_skills:
                continue
            gaps.append(SkillGap(
                skill=skill,
                category=category,
                importance=skill_importance(skill, category),
                suggestions=skill_suggestions(skill),
                learning_resources=learning_resources(skill),
            ))
    return sorted(gaps, key=lambda g: rules.IMPORTANCE_ORDER[g.importance], reverse=True)


def generate_job_match_recommendations(
    keyword_matches: list[KeywordMatch],
    skills_gap: list[SkillGap],
    analysis: ResumeAnalysis,
    limit: int = 5,
) -> list[JobMatchRecommendation]:
    recommendations = []

    missing = [
        m for m in keyword_matches
        if m.in_job and not m.in_resume and m.importance > rules.CRITICAL_KEYWORD_WEIGHT
    ]
    if missing:
        points = min(len(missing) * rules.POINTS_PER_MISSING_KEYWORD, rules.MAX_KEYWORD_POINTS)
        recommendations.append(JobMatchRecommendation(
            type="add_keyword",
            priority="high",
            title="Add Missing Key Technologies",
            description=f"Your resume is missing {len(missing)} important keywords from the job posting.",
            impact=f"Could increase match score by {points} points",
            examples=[f'Add "{m.keyword}" to your skills or experience sections' for m in missing[:3]],
        ))

    critical_gaps = [g for g in skills_gap if g.importance == "critical"]
    if critical_gaps:
        recommendations.append(JobMatchRecommendation(
            type="add_experience",
            priority="high",
            title="Address Critical Skills Gap",
            description=(
                f"You're missing {len(critical_gaps)} critical skills mentioned "
                "in the job requirements."
            ),
            impact="Essential for meeting minimum job requirements",
            examples=[f"Learn {g.skill} - {g.suggestions[0]}" for g in critical_gaps[:3]],
        ))

    content = analysis.content_analysis
    if len(content.quantifiable_results) < rules.MIN_QUANTIFIABLE_RESULTS:
        recommendations.append(JobMatchRecommendation(
            type="emphasize_skill",
            priority="medium",
            title="Add More Quantifiable Results",
            description="Include specific numbers and metrics to demonstrate your impact.",
            impact="Makes your achievements more compelling and measurable",
            examples=[
                "Led a team of X developers",
                "Improved performance by X%",
                "Reduced costs by $X or X%",
            ],
        ))

    if len(content.action_verbs) < rules.MIN_ACTION_VERBS:
        recommendations.append(JobMatchRecommendation(
            type="reformat_section",
            priority="medium",
            title="Use Stronger Action Verbs",
            description=(
                "Start bullet points with powerful action verbs to make your "
                "experience more impactful."
            ),
            impact="Improves readability and demonstrates proactive approach",
            examples=[
                'Replace "Worked on" with "Developed" or "Built"',
                'Replace "Helped with" with "Collaborated on" or "Contributed to"',
                'Replace "Was responsible for" with "Led" or "Managed"',
            ],
        ))

    return recommendations[:limit]


def build_job_match(
    analysis: ResumeAnalysis,
    posting: JobPosting,
    resume_keywords: KeywordMap,
    job_keywords: KeywordMap,
    max_recommendations: int = 5,
) -> JobMatch:
    """Assemble a JobMatch from already extracted keyword maps."""
    keyword_matches = analyze_keyword_matches(resume_keywords, job_keywords)
    skills_gap = identify_skills_gap(resume_keywords, job_keywords)
    return JobMatch(
        job_title=posting.title,
        company=posting.company,
        job_description=posting.description,
        match_score=calculate_match_score(keyword_matches, analysis, posting.description),
        keyword_matches=keyword_matches,
        skills_gap=skills_gap,
        recommendations=generate_job_match_recommendations(
            keyword_matches, skills_gap, analysis, limit=max_recommendations,
        ),
    )
