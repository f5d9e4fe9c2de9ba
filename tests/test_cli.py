"""Tests for the typer CLI."""

import json

import pytest
from typer.testing import CliRunner

from resume_match.cli import app
from resume_match.config import CONFIG_ENV_VAR

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point the CLI at a throwaway database."""
    config_path = tmp_path / "config.yaml"
    config_path.write_text(f"store:\n  db_path: {tmp_path / 'cli.db'}\n")
    monkeypatch.setenv(CONFIG_ENV_VAR, str(config_path))


@pytest.fixture
def resume_file(tmp_path, sample_resume_text):
    path = tmp_path / "jane_smith.txt"
    path.write_text(sample_resume_text, encoding="utf-8")
    return path


@pytest.fixture
def jd_file(tmp_path, sample_jd_text):
    path = tmp_path / "jd.txt"
    path.write_text(sample_jd_text, encoding="utf-8")
    return path


class TestAnalyzeCommand:
    def test_analyze(self, resume_file):
        result = runner.invoke(app, ["analyze", str(resume_file)])
        assert result.exit_code == 0, result.output
        assert "ATS score:" in result.output
        assert "Saved analysis" in result.output

    def test_json_output(self, resume_file, tmp_path):
        out = tmp_path / "out" / "analysis.json"
        result = runner.invoke(app, ["analyze", str(resume_file), "--json", str(out), "--no-save"])
        assert result.exit_code == 0, result.output
        data = json.loads(out.read_text(encoding="utf-8"))
        assert data["fileName"] == "jane_smith.txt"
        assert 0 <= data["atsScore"]["overall"] <= 100

    def test_unsupported_file(self, tmp_path):
        bad = tmp_path / "resume.xyz"
        bad.write_text("some resume text here")
        result = runner.invoke(app, ["analyze", str(bad)])
        assert result.exit_code == 1
        assert "Unsupported file format" in result.output

    def test_missing_file(self, tmp_path):
        result = runner.invoke(app, ["analyze", str(tmp_path / "nope.pdf")])
        assert result.exit_code == 1

    def test_undecodable_text_file(self, tmp_path):
        path = tmp_path / "resume.txt"
        path.write_bytes(b"Jane Smith \xff\xfe caf\xe9 backend engineer")
        result = runner.invoke(app, ["analyze", str(path), "--no-save"])
        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "Failed to parse text file" in result.output


class TestMatchCommand:
    def test_match_latest(self, resume_file, jd_file):
        runner.invoke(app, ["analyze", str(resume_file)])
        result = runner.invoke(app, ["match", "--jd", str(jd_file), "--title", "Backend Engineer"])
        assert result.exit_code == 0, result.output
        assert "Match score:" in result.output

    def test_match_with_resume(self, resume_file, jd_file, tmp_path):
        out = tmp_path / "match.json"
        result = runner.invoke(app, [
            "match", "--jd", str(jd_file), "--title", "Backend Engineer",
            "--company", "Initech", "--resume", str(resume_file), "--json", str(out),
        ])
        assert result.exit_code == 0, result.output
        data = json.loads(out.read_text(encoding="utf-8"))
        assert data["jobTitle"] == "Backend Engineer"
        assert data["company"] == "Initech"
        assert "keywordMatches" in data

    def test_no_stored_analysis(self, jd_file):
        result = runner.invoke(app, ["match", "--jd", str(jd_file), "--title", "Engineer"])
        assert result.exit_code == 1
        assert "No stored analysis" in result.output

    def test_unknown_analysis_id(self, jd_file):
        result = runner.invoke(app, [
            "match", "--jd", str(jd_file), "--title", "Engineer", "--analysis-id", "missing",
        ])
        assert result.exit_code == 1

    def test_missing_jd(self, tmp_path):
        result = runner.invoke(app, ["match", "--jd", str(tmp_path / "nope.txt"), "--title", "X"])
        assert result.exit_code == 1

    def test_undecodable_jd(self, resume_file, tmp_path):
        jd = tmp_path / "jd.txt"
        jd.write_bytes(b"Backend Engineer \xff\xfe caf\xe9 Python")
        result = runner.invoke(app, [
            "match", "--jd", str(jd), "--title", "Dev", "--resume", str(resume_file),
        ])
        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "Failed to parse text file" in result.output

    def test_short_jd_warns(self, resume_file, tmp_path):
        jd = tmp_path / "short.txt"
        jd.write_text("Python developer")
        result = runner.invoke(app, [
            "match", "--jd", str(jd), "--title", "Dev", "--resume", str(resume_file),
        ])
        assert result.exit_code == 0, result.output
        assert "shorter than" in result.output


class TestHistoryCommands:
    def test_empty_history(self):
        result = runner.invoke(app, ["history"])
        assert result.exit_code == 0
        assert "No stored analyses" in result.output

    def test_history_and_stats(self, resume_file):
        runner.invoke(app, ["analyze", str(resume_file)])

        result = runner.invoke(app, ["history"])
        assert result.exit_code == 0
        assert "Analyses" in result.output

        result = runner.invoke(app, ["stats"])
        assert result.exit_code == 0
        assert "Uploads: 1" in result.output

    def test_show_unknown(self):
        result = runner.invoke(app, ["show", "missing"])
        assert result.exit_code == 1
        assert "Analysis not found" in result.output

    def test_clear(self, resume_file):
        runner.invoke(app, ["analyze", str(resume_file)])
        result = runner.invoke(app, ["clear"])
        assert result.exit_code == 0
        assert "Deleted 1 analyses." in result.output
