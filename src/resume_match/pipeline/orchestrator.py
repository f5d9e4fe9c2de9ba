"""Analysis orchestrator - fans sub-analyses out and assembles the results."""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Awaitable, Callable, TypeVar

from resume_match.analysis.ats_scorer import score_ats
from resume_match.analysis.keywords import extract_categorized_keywords, extract_keywords
from resume_match.analysis.lexical import analyze_content
from resume_match.analysis.recommendations import generate_recommendations
from resume_match.analysis.sections import detect_sections
from resume_match.errors import AnalysisError, JobMatchError
from resume_match.matching.job_matcher import build_job_match
from resume_match.models.analysis import FileMeta, ResumeAnalysis
from resume_match.models.job import JobMatch, JobPosting

logger = logging.getLogger(__name__)

PhaseCallback = Callable[[str, str], None]
T = TypeVar("T")


class AnalysisOrchestrator:
    """Runs the resume analyzers concurrently and builds job matches."""

    def __init__(self, *, max_recommendations: int = 5):
        self.max_recommendations = max_recommendations

    async def analyze(
        self,
        text: str,
        file_meta: FileMeta,
        *,
        on_phase: PhaseCallback | None = None,
    ) -> ResumeAnalysis:
        """Build a complete ResumeAnalysis for one extracted document.

        Args:
            text: Plain text produced by the text extractor.
            file_meta: Name and size of the uploaded file.
            on_phase: Optional callback(phase_name, detail) for progress.

        Raises:
            AnalysisError: if any sub-analysis fails. No partial result is
                returned.
        """
        start = time.monotonic()

        def _notify(phase: str, detail: str = ""):
            if on_phase:
                on_phase(phase, detail)

        _notify("analyze", f"Analyzing {file_meta.file_name}")
        try:
            ats_score, content, keywords, sections, recommendations = await asyncio.gather(
                asyncio.to_thread(score_ats, text),
                asyncio.to_thread(analyze_content, text),
                asyncio.to_thread(extract_keywords, text),
                asyncio.to_thread(detect_sections, text),
                asyncio.to_thread(generate_recommendations, text),
            )
            analysis = ResumeAnalysis(
                file_name=file_meta.file_name,
                file_size=file_meta.file_size,
                extracted_text=text,
                ats_score=ats_score,
                content_analysis=content,
                recommendations=recommendations,
                keywords=keywords,
                sections=sections,
            )
        except Exception as e:
            logger.debug("Resume analysis failed for %s", file_meta.file_name, exc_info=True)
            raise AnalysisError(f"Analysis failed: {e}") from e

        elapsed_ms = (time.monotonic() - start) * 1000
        logger.debug("Resume analysis completed in %.0fms", elapsed_ms)
        _notify("done", f"ATS score: {ats_score.overall}")
        return analysis

    async def match_job(
        self,
        analysis: ResumeAnalysis,
        posting: JobPosting,
        *,
        on_phase: PhaseCallback | None = None,
    ) -> JobMatch:
        """Compare an existing analysis with a job posting.

        Raises:
            JobMatchError: wrapping any failure inside the match engine.
        """
        start = time.monotonic()

        def _notify(phase: str, detail: str = ""):
            if on_phase:
                on_phase(phase, detail)

        _notify("match", f"Matching against {posting.title}")
        try:
            resume_keywords, job_keywords = await asyncio.gather(
                asyncio.to_thread(extract_categorized_keywords, analysis.extracted_text),
                asyncio.to_thread(extract_categorized_keywords, posting.description),
            )
            job_match = build_job_match(
                analysis,
                posting,
                resume_keywords,
                job_keywords,
                max_recommendations=self.max_recommendations,
            )
        except Exception as e:
            logger.debug("Job match failed for %s", posting.title, exc_info=True)
            raise JobMatchError(f"Job match analysis failed: {e}") from e

        elapsed_ms = (time.monotonic() - start) * 1000
        logger.debug("Job match analysis completed in %.0fms", elapsed_ms)
        _notify("done", f"Match score: {job_match.match_score}")
        return job_match


def _run_sync(entry_point: str, make_coro: Callable[[], Awaitable[T]]) -> T:
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return asyncio.run(make_coro())
    raise RuntimeError(
        f"{entry_point}() cannot run inside an event loop; "
        f"await AnalysisOrchestrator().{entry_point}(...) instead"
    )


def analyze(text: str, file_meta: FileMeta) -> ResumeAnalysis:
    """Synchronous entry point: analyze one document's extracted text.

    Async callers (request handlers, notebooks) must await
    ``AnalysisOrchestrator().analyze`` instead.
    """
    return _run_sync("analyze", lambda: AnalysisOrchestrator().analyze(text, file_meta))


def match_job(
    analysis: ResumeAnalysis,
    job_title: str,
    company: str | None,
    job_description: str,
) -> JobMatch:
    """Synchronous entry point: match an analysis against a job description.

    Async callers must await ``AnalysisOrchestrator().match_job`` instead.
    """
    posting = JobPosting(title=job_title, company=company, description=job_description)
    return _run_sync("match_job", lambda: AnalysisOrchestrator().match_job(analysis, posting))
