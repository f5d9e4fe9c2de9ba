"""CLI interface using typer + rich."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from resume_match.config import AppConfig, load_config
from resume_match.errors import ResumeMatchError
from resume_match.models.analysis import ResumeAnalysis
from resume_match.models.job import JobMatch
from resume_match.parsers.jd_parser import is_sufficient_description, load_job_posting
from resume_match.parsers.resume_parser import read_document
from resume_match.pipeline.orchestrator import AnalysisOrchestrator
from resume_match.store.analysis_store import AnalysisStore

app = typer.Typer(
    name="resume-match",
    help="Resume ATS scoring and job description matching",
    no_args_is_help=True,
)
console = Console()

SCORE_COLORS = ((80, "green"), (60, "yellow"), (0, "red"))


def _setup_logging(config: AppConfig, verbose: bool) -> None:
    level = "DEBUG" if verbose else config.log.level.upper()
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _score_color(score: int) -> str:
    for threshold, color in SCORE_COLORS:
        if score >= threshold:
            return color
    return "red"


def _open_store(config: AppConfig) -> AnalysisStore:
    return AnalysisStore(
        db_path=config.store.resolved_db_path,
        history_limit=config.store.history_limit,
    )


def _print_analysis(analysis: ResumeAnalysis) -> None:
    ats = analysis.ats_score
    content = analysis.content_analysis
    color = _score_color(ats.overall)

    breakdown = " | ".join(
        f"{name}: {value}" for name, value in ats.breakdown.model_dump().items()
    )
    console.print(Panel(
        f"[bold {color}]ATS score: {ats.overall}[/bold {color}]\n{breakdown}\n\n"
        f"Words: {content.word_count} | Sentences: {content.sentence_count} | "
        f"Pages: {content.page_count} | Readability: {content.readability_score}",
        title=f"{analysis.file_name} ({analysis.id})",
    ))

    if ats.issues:
        table = Table(title="Issues")
        table.add_column("Type")
        table.add_column("Message")
        table.add_column("Impact", justify="right")
        table.add_column("Fix")
        for issue in ats.issues:
            table.add_row(issue.type, issue.message, f"-{issue.impact}", issue.fix or "")
        console.print(table)

    if content.action_verbs:
        console.print(f"[dim]Action verbs:[/dim] {', '.join(content.action_verbs)}")
    if analysis.keywords:
        top = ", ".join(f"{k.word} ({k.frequency})" for k in analysis.keywords[:10])
        console.print(f"[dim]Top keywords:[/dim] {top}")

    for rec in analysis.recommendations:
        console.print(f"\n[yellow]{rec.title}[/yellow] ({rec.impact} impact, {rec.effort})")
        console.print(f"  {rec.description}")
        for example in rec.examples:
            console.print(f"  - {example}")


def _print_job_match(job_match: JobMatch) -> None:
    color = _score_color(job_match.match_score)
    matched = sum(1 for m in job_match.keyword_matches if m.in_job and m.in_resume)
    wanted = sum(1 for m in job_match.keyword_matches if m.in_job)
    heading = job_match.job_title + (f" @ {job_match.company}" if job_match.company else "")
    console.print(Panel(
        f"[bold {color}]Match score: {job_match.match_score}[/bold {color}]\n"
        f"Job keywords found in resume: {matched}/{wanted}",
        title=heading,
    ))

    if job_match.skills_gap:
        table = Table(title="Skills gap")
        table.add_column("Skill")
        table.add_column("Category")
        table.add_column("Importance")
        table.add_column("Suggestion")
        for gap in job_match.skills_gap:
            table.add_row(gap.skill, gap.category, gap.importance, gap.suggestions[0])
        console.print(table)

    for rec in job_match.recommendations:
        console.print(f"\n[yellow]{rec.title}[/yellow] ({rec.priority} priority)")
        console.print(f"  {rec.description}")
        console.print(f"  [dim]{rec.impact}[/dim]")
        for example in rec.examples:
            console.print(f"  - {example}")


@app.command()
def analyze(
    file: Path = typer.Argument(help="Resume file (PDF/DOCX/TXT/MD)"),
    json_out: Path = typer.Option(None, "--json", help="Write the analysis as JSON to this path"),
    save: bool = typer.Option(True, "--save/--no-save", help="Store the analysis for later matching"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
) -> None:
    """Score a resume for ATS compatibility."""
    config = load_config()
    _setup_logging(config, verbose)

    orchestrator = AnalysisOrchestrator(max_recommendations=config.matching.max_recommendations)
    try:
        text, meta = read_document(
            file,
            max_size=config.extraction.max_file_size_bytes,
            min_text_length=config.extraction.min_text_length,
        )
        with console.status("Analyzing resume..."):
            analysis = asyncio.run(orchestrator.analyze(text, meta))
    except ResumeMatchError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    _print_analysis(analysis)

    if save:
        _open_store(config).save_analysis(analysis)
        console.print(f"\n[green]Saved analysis {analysis.id}[/green]")
    if json_out:
        json_out.parent.mkdir(parents=True, exist_ok=True)
        json_out.write_text(analysis.to_json(), encoding="utf-8")
        console.print(f"[green]JSON written: {json_out}[/green]")


@app.command()
def match(
    jd: Path = typer.Option(..., "--jd", help="Job description text file"),
    title: str = typer.Option(..., "--title", help="Job title"),
    company: str = typer.Option(None, "--company", help="Company name"),
    resume: Path = typer.Option(None, "--resume", help="Resume file to analyze first"),
    analysis_id: str = typer.Option(None, "--analysis-id", help="Stored analysis to match (default: latest)"),
    json_out: Path = typer.Option(None, "--json", help="Write the job match as JSON to this path"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
) -> None:
    """Compare a resume against a job description."""
    if not jd.exists():
        console.print(f"[red]Job description file not found: {jd}[/red]")
        raise typer.Exit(1)

    config = load_config()
    _setup_logging(config, verbose)
    store = _open_store(config)
    orchestrator = AnalysisOrchestrator(max_recommendations=config.matching.max_recommendations)

    try:
        posting = load_job_posting(jd, title=title, company=company)
        if not is_sufficient_description(posting.description, config.matching.min_job_description_length):
            console.print(
                f"[yellow]Job description is shorter than "
                f"{config.matching.min_job_description_length} characters; "
                f"the match score will not be meaningful.[/yellow]"
            )

        if resume is not None:
            text, meta = read_document(
                resume,
                max_size=config.extraction.max_file_size_bytes,
                min_text_length=config.extraction.min_text_length,
            )
            analysis = asyncio.run(orchestrator.analyze(text, meta))
            store.save_analysis(analysis)
        elif analysis_id is not None:
            analysis = store.get_analysis(analysis_id)
        else:
            analysis = store.latest_analysis()

        if analysis is None:
            console.print("[red]No stored analysis found. Run `analyze` first or pass --resume.[/red]")
            raise typer.Exit(1)

        if verbose:
            console.print(f"[dim]Resume: {analysis.file_name} ({analysis.id})[/dim]")
            console.print(f"[dim]Job description: {len(posting.description)} chars[/dim]")

        with console.status("Matching..."):
            job_match = asyncio.run(orchestrator.match_job(analysis, posting))
    except ResumeMatchError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    store.save_job_match(analysis.id, job_match)
    _print_job_match(job_match)

    if json_out:
        json_out.parent.mkdir(parents=True, exist_ok=True)
        json_out.write_text(job_match.to_json(), encoding="utf-8")
        console.print(f"[green]JSON written: {json_out}[/green]")


@app.command()
def history(
    limit: int = typer.Option(10, "--limit", "-n", help="Number of analyses to show"),
) -> None:
    """List stored analyses, newest first."""
    store = _open_store(load_config())
    analyses = store.list_analyses(limit=limit)
    if not analyses:
        console.print("[yellow]No stored analyses.[/yellow]")
        return

    table = Table(title="Analyses")
    table.add_column("ID")
    table.add_column("File")
    table.add_column("Uploaded")
    table.add_column("ATS", justify="right")
    for a in analyses:
        color = _score_color(a.ats_score.overall)
        table.add_row(
            a.id,
            a.file_name,
            a.uploaded_at.strftime("%Y-%m-%d %H:%M"),
            f"[{color}]{a.ats_score.overall}[/{color}]",
        )
    console.print(table)


@app.command()
def show(
    analysis_id: str = typer.Argument(help="Stored analysis ID"),
) -> None:
    """Show a stored analysis and its job matches."""
    store = _open_store(load_config())
    analysis = store.get_analysis(analysis_id)
    if analysis is None:
        console.print(f"[red]Analysis not found: {analysis_id}[/red]")
        raise typer.Exit(1)

    _print_analysis(analysis)
    for job_match in store.get_job_matches(analysis_id):
        console.print()
        _print_job_match(job_match)


@app.command()
def stats() -> None:
    """Summary of the stored analysis history."""
    summary = _open_store(load_config()).stats()
    average = summary["average_ats_score"]
    console.print(Panel(
        f"Uploads: {summary['total_uploads']}\n"
        f"Average ATS score: {average if average is not None else '-'}\n"
        f"Job matches: {summary['job_matches']}",
        title="History",
    ))
    if summary["top_issues"]:
        console.print("\n[yellow]Most common issues:[/yellow]")
        for issue in summary["top_issues"]:
            console.print(f"  - {issue}")


@app.command()
def clear() -> None:
    """Delete all stored analyses."""
    count = _open_store(load_config()).clear()
    console.print(f"[green]Deleted {count} analyses.[/green]")


if __name__ == "__main__":
    app()
