"""SQLite-backed history of resume analyses and job matches."""

from __future__ import annotations

import logging
import sqlite3
from collections import Counter
from pathlib import Path

from resume_match.models.analysis import ResumeAnalysis
from resume_match.models.job import JobMatch

logger = logging.getLogger(__name__)

DEFAULT_DB_PATH = Path.home() / ".resume-match" / "analyses.db"
DEFAULT_HISTORY_LIMIT = 50
TOP_ISSUES = 5


class AnalysisStore:
    """Local store so an analysis can be reloaded later for job matching."""

    def __init__(
        self,
        db_path: str | Path = DEFAULT_DB_PATH,
        history_limit: int = DEFAULT_HISTORY_LIMIT,
    ):
        self.db_path = Path(db_path)
        self.history_limit = history_limit
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._init_db()

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(str(self.db_path))
        conn.execute("PRAGMA journal_mode=WAL")
        return conn

    def _init_db(self) -> None:
        with self._connect() as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS analyses (
                    id TEXT PRIMARY KEY,
                    file_name TEXT NOT NULL,
                    ats_score INTEGER NOT NULL,
                    uploaded_at TEXT NOT NULL,
                    analysis_json TEXT NOT NULL
                )
            """)
            conn.execute("""
                CREATE TABLE IF NOT EXISTS job_matches (
                    id TEXT PRIMARY KEY,
                    analysis_id TEXT NOT NULL,
                    job_title TEXT NOT NULL,
                    company TEXT,
                    match_score INTEGER NOT NULL,
                    created_at TEXT NOT NULL,
                    match_json TEXT NOT NULL
                )
            """)

    def save_analysis(self, analysis: ResumeAnalysis) -> None:
        """Persist an analysis, then prune history beyond the limit."""
        with self._connect() as conn:
            conn.execute(
                """INSERT OR REPLACE INTO analyses
                   (id, file_name, ats_score, uploaded_at, analysis_json)
                   VALUES (?, ?, ?, ?, ?)""",
                (
                    analysis.id,
                    analysis.file_name,
                    analysis.ats_score.overall,
                    analysis.uploaded_at.isoformat(),
                    analysis.to_json(),
                ),
            )
        self._prune()

    def get_analysis(self, analysis_id: str) -> ResumeAnalysis | None:
        with self._connect() as conn:
            row = conn.execute(
                "SELECT analysis_json FROM analyses WHERE id = ?", (analysis_id,)
            ).fetchone()
        if row is None:
            return None
        return ResumeAnalysis.model_validate_json(row[0])

    def latest_analysis(self) -> ResumeAnalysis | None:
        """Most recently uploaded analysis, if any."""
        recent = self.list_analyses(limit=1)
        return recent[0] if recent else None

    def list_analyses(self, limit: int = DEFAULT_HISTORY_LIMIT) -> list[ResumeAnalysis]:
        """Analyses ordered newest first."""
        with self._connect() as conn:
            rows = conn.execute(
                "SELECT analysis_json FROM analyses ORDER BY uploaded_at DESC LIMIT ?",
                (limit,),
            ).fetchall()
        return [ResumeAnalysis.model_validate_json(row[0]) for row in rows]

    def delete_analysis(self, analysis_id: str) -> bool:
        """Delete an analysis and its job matches. Returns whether it existed."""
        with self._connect() as conn:
            conn.execute("DELETE FROM job_matches WHERE analysis_id = ?", (analysis_id,))
            cursor = conn.execute("DELETE FROM analyses WHERE id = ?", (analysis_id,))
            return cursor.rowcount > 0

    def save_job_match(self, analysis_id: str, job_match: JobMatch) -> None:
        with self._connect() as conn:
            conn.execute(
                """INSERT OR REPLACE INTO job_matches
                   (id, analysis_id, job_title, company, match_score, created_at, match_json)
                   VALUES (?, ?, ?, ?, ?, ?, ?)""",
                (
                    job_match.id,
                    analysis_id,
                    job_match.job_title,
                    job_match.company,
                    job_match.match_score,
                    job_match.created_at.isoformat(),
                    job_match.to_json(),
                ),
            )

    def get_job_matches(self, analysis_id: str) -> list[JobMatch]:
        """Job matches for one analysis, newest first."""
        with self._connect() as conn:
            rows = conn.execute(
                "SELECT match_json FROM job_matches WHERE analysis_id = ? ORDER BY created_at DESC",
                (analysis_id,),
            ).fetchall()
        return [JobMatch.model_validate_json(row[0]) for row in rows]

    def clear(self) -> int:
        """Clear all stored analyses and matches. Returns count of deleted analyses."""
        with self._connect() as conn:
            conn.execute("DELETE FROM job_matches")
            cursor = conn.execute("DELETE FROM analyses")
            return cursor.rowcount

    def stats(self) -> dict:
        """Dashboard summary across the stored history."""
        with self._connect() as conn:
            total, avg_score = conn.execute(
                "SELECT COUNT(*), AVG(ats_score) FROM analyses"
            ).fetchone()
            match_count = conn.execute("SELECT COUNT(*) FROM job_matches").fetchone()[0]

        issues: Counter[str] = Counter()
        for analysis in self.list_analyses(limit=self.history_limit):
            issues.update(issue.message for issue in analysis.ats_score.issues)

        return {
            "total_uploads": total,
            "average_ats_score": round(avg_score, 1) if avg_score is not None else None,
            "top_issues": [message for message, _ in issues.most_common(TOP_ISSUES)],
            "job_matches": match_count,
        }

    def _prune(self) -> None:
        with self._connect() as conn:
            stale = conn.execute(
                "SELECT id FROM analyses ORDER BY uploaded_at DESC LIMIT -1 OFFSET ?",
                (self.history_limit,),
            ).fetchall()
            for (analysis_id,) in stale:
                conn.execute("DELETE FROM job_matches WHERE analysis_id = ?", (analysis_id,))
                conn.execute("DELETE FROM analyses WHERE id = ?", (analysis_id,))
        if stale:
            logger.info("Pruned %d analyses beyond history limit %d", len(stale), self.history_limit)
