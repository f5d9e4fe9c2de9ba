"""Tests for the analysis history store."""

from datetime import datetime, timedelta

import pytest

from resume_match.pipeline.orchestrator import match_job
from resume_match.store.analysis_store import AnalysisStore


@pytest.fixture
def store(tmp_path):
    return AnalysisStore(db_path=tmp_path / "test_analyses.db", history_limit=10)


@pytest.fixture
def dated(sample_analysis):
    """Copies of the sample analysis uploaded `days` ago, with fixed ids."""
    base = datetime(2024, 6, 1, 12, 0, 0)

    def _make(days: int, file_name: str = "resume.txt"):
        return sample_analysis.model_copy(update={
            "id": f"analysis-{days}",
            "file_name": file_name,
            "uploaded_at": base - timedelta(days=days),
        })
    return _make


class TestAnalyses:
    def test_save_and_get(self, store, sample_analysis):
        store.save_analysis(sample_analysis)
        result = store.get_analysis(sample_analysis.id)
        assert result == sample_analysis

    def test_get_nonexistent(self, store):
        assert store.get_analysis("missing") is None

    def test_list_newest_first(self, store, dated):
        for days in (3, 1, 2):
            store.save_analysis(dated(days))
        ids = [a.id for a in store.list_analyses()]
        assert ids == ["analysis-1", "analysis-2", "analysis-3"]

    def test_list_limit(self, store, dated):
        for days in range(5):
            store.save_analysis(dated(days))
        assert len(store.list_analyses(limit=2)) == 2

    def test_latest(self, store, dated):
        assert store.latest_analysis() is None
        store.save_analysis(dated(5))
        store.save_analysis(dated(0))
        assert store.latest_analysis().id == "analysis-0"

    def test_save_is_upsert(self, store, sample_analysis):
        store.save_analysis(sample_analysis)
        store.save_analysis(sample_analysis)
        assert len(store.list_analyses()) == 1

    def test_delete(self, store, sample_analysis):
        store.save_analysis(sample_analysis)
        assert store.delete_analysis(sample_analysis.id) is True
        assert store.get_analysis(sample_analysis.id) is None
        assert store.delete_analysis(sample_analysis.id) is False

    def test_prune_beyond_history_limit(self, tmp_path, dated):
        store = AnalysisStore(db_path=tmp_path / "small.db", history_limit=2)
        for days in (0, 1, 2):
            store.save_analysis(dated(days))
        ids = [a.id for a in store.list_analyses()]
        assert ids == ["analysis-0", "analysis-1"]

    def test_creates_parent_directory(self, tmp_path):
        db_path = tmp_path / "nested" / "dir" / "analyses.db"
        AnalysisStore(db_path=db_path)
        assert db_path.exists()


class TestJobMatches:
    @pytest.fixture
    def job_match(self, sample_analysis, sample_posting):
        return match_job(
            sample_analysis,
            sample_posting.title,
            sample_posting.company,
            sample_posting.description,
        )

    def test_save_and_get(self, store, sample_analysis, job_match):
        store.save_analysis(sample_analysis)
        store.save_job_match(sample_analysis.id, job_match)
        matches = store.get_job_matches(sample_analysis.id)
        assert matches == [job_match]

    def test_none_for_other_analysis(self, store, sample_analysis, job_match):
        store.save_job_match(sample_analysis.id, job_match)
        assert store.get_job_matches("other") == []

    def test_delete_cascades(self, store, sample_analysis, job_match):
        store.save_analysis(sample_analysis)
        store.save_job_match(sample_analysis.id, job_match)
        store.delete_analysis(sample_analysis.id)
        assert store.get_job_matches(sample_analysis.id) == []
        assert store.stats()["job_matches"] == 0


class TestClearAndStats:
    def test_clear(self, store, dated):
        store.save_analysis(dated(1))
        store.save_analysis(dated(2))
        count = store.clear()
        assert count == 2
        assert store.list_analyses() == []

    def test_empty_stats(self, store):
        stats = store.stats()
        assert stats["total_uploads"] == 0
        assert stats["average_ats_score"] is None
        assert stats["top_issues"] == []
        assert stats["job_matches"] == 0

    def test_stats(self, store, dated):
        first, second = dated(1), dated(2)
        store.save_analysis(first)
        store.save_analysis(second)

        stats = store.stats()
        assert stats["total_uploads"] == 2
        assert stats["average_ats_score"] == float(first.ats_score.overall)
        assert len(stats["top_issues"]) <= 5
        expected = {issue.message for issue in first.ats_score.issues}
        assert set(stats["top_issues"]) <= expected
