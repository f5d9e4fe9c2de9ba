"""Resume ATS scoring and job-description matching engine."""

from resume_match.pipeline.orchestrator import AnalysisOrchestrator, analyze, match_job

__all__ = ["AnalysisOrchestrator", "analyze", "match_job"]
