"""Rule-based improvement recommendations for a resume."""

from __future__ import annotations

import re

from resume_match.analysis.lexical import find_action_verbs
from resume_match.analysis.vocabulary import RECOMMENDATION_ACTION_VERBS, SUMMARY_WORDS
from resume_match.models.analysis import Recommendation

_DIGIT = re.compile(r"\d")
_SUMMARY = re.compile("|".join(SUMMARY_WORDS), re.IGNORECASE)

RECOMMENDATIONS: dict[str, Recommendation] = {
    "add-quantifiable-results": Recommendation(
        id="add-quantifiable-results",
        type="important",
        category="content",
        title="Add Quantifiable Results",
        description="Include specific numbers, percentages, or metrics to demonstrate your impact.",
        impact="high",
        effort="moderate",
        examples=[
            "Increased sales by 25%",
            "Managed a team of 10 developers",
            "Reduced processing time by 2 hours",
        ],
    ),
    "use-action-verbs": Recommendation(
        id="use-action-verbs",
        type="important",
        category="content",
        title="Use Strong Action Verbs",
        description=(
            "Start bullet points with powerful action verbs to make your "
            "achievements more impactful."
        ),
        impact="high",
        effort="easy",
        examples=[
            "Led cross-functional team...",
            "Developed innovative solution...",
            "Achieved 95% customer satisfaction...",
        ],
    ),
    "add-professional-summary": Recommendation(
        id="add-professional-summary",
        type="suggestion",
        category="structure",
        title="Add Professional Summary",
        description=(
            "Include a brief professional summary at the top of your resume "
            "to grab attention."
        ),
        impact="medium",
        effort="easy",
        examples=[
            "Experienced software engineer with 5+ years developing scalable web applications...",
        ],
    ),
}


def generate_recommendations(text: str) -> list[Recommendation]:
    fired = []
    if not _DIGIT.search(text):
        fired.append("add-quantifiable-results")
    if not find_action_verbs(text, RECOMMENDATION_ACTION_VERBS):
        fired.append("use-action-verbs")
    if not _SUMMARY.search(text):
        fired.append("add-professional-summary")
    return [RECOMMENDATIONS[key].model_copy(deep=True) for key in fired]
