import re
from pathlib import Path

from resume_match.models.job import JobPosting
from resume_match.parsers.resume_parser import read_text_file

MIN_DESCRIPTION_LENGTH = 100


def parse_jd(text: str) -> str:
    """Clean and normalize job description text."""
    text = re.sub(r'\n{3,}', '\n\n', text)
    text = re.sub(r'[ \t]+', ' ', text)
    lines = [line.strip() for line in text.splitlines()]
    return '\n'.join(lines).strip()


def is_sufficient_description(text: str, min_length: int = MIN_DESCRIPTION_LENGTH) -> bool:
    """Whether a description is long enough to give a meaningful match."""
    return len(text.strip()) >= min_length


def load_job_posting(file_path: str | Path, title: str, company: str | None = None) -> JobPosting:
    """Load a job description file into a JobPosting.

    Raises:
        ExtractionError: if the file is not valid UTF-8 text.
    """
    description = parse_jd(read_text_file(Path(file_path)))
    return JobPosting(title=title, company=company, description=description)
