"""Plain-text extraction from uploaded resume files.

Only text is extracted; no layout analysis is attempted.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from resume_match.errors import ExtractionError
from resume_match.models.analysis import FileMeta

logger = logging.getLogger(__name__)

SUPPORTED_SUFFIXES = (".pdf", ".docx", ".txt", ".md")
DEFAULT_MAX_FILE_SIZE = 50 * 1024 * 1024
DEFAULT_MIN_TEXT_LENGTH = 10


def parse_resume(file_path: str | Path) -> str:
    """Parse a resume file (PDF, DOCX, TXT, MD) and return clean plain text.

    Legacy binary .doc files are not supported; save them as .docx first.
    """
    path = Path(file_path)
    suffix = path.suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        raise ExtractionError(
            f"Unsupported file format: {path.suffix or path.name}. "
            f"Supported formats: {', '.join(SUPPORTED_SUFFIXES)}"
        )
    if suffix == ".pdf":
        return clean_text(_parse_pdf(path))
    elif suffix == ".docx":
        return clean_text(_parse_docx(path))
    return clean_text(read_text_file(path))


def read_document(
    file_path: str | Path,
    *,
    max_size: int = DEFAULT_MAX_FILE_SIZE,
    min_text_length: int = DEFAULT_MIN_TEXT_LENGTH,
) -> tuple[str, FileMeta]:
    """Validate an upload, extract its text and describe where it came from."""
    path = Path(file_path)
    if not path.exists():
        raise ExtractionError(f"File not found: {path}")

    size = path.stat().st_size
    if size == 0:
        raise ExtractionError("The uploaded file is empty or corrupted.")
    if size > max_size:
        limit_mb = max_size // (1024 * 1024)
        raise ExtractionError(f"File is too large. Please upload a file smaller than {limit_mb}MB.")

    text = parse_resume(path)
    if len(text) < min_text_length:
        raise ExtractionError(
            "Insufficient text content found. The file might be image-based, "
            "scanned, or password-protected."
        )
    return text, FileMeta(file_name=path.name, file_size=size)


def clean_text(text: str) -> str:
    """Normalize extraction artifacts.

    Handles: unicode artifacts, bullet glyphs, runs of spaces/tabs,
    and excessive blank lines.
    """
    text = re.sub(r"[\u200b\u200c\u200d\u00ad\u2060\ufeff]", "", text)

    # ●, •, ◦, ◆, ■, ▪, ★, ○ → -
    text = re.sub(r"^(\s*)[●•◦◆■▪★○]\s*", r"\1- ", text, flags=re.MULTILINE)

    lines = [re.sub(r"[ \t]{2,}", " ", line).rstrip() for line in text.splitlines()]
    text = "\n".join(lines)

    text = re.sub(r"\n{3,}", "\n\n", text)
    return text.strip()


def read_text_file(path: Path) -> str:
    """Read a UTF-8 text file, reporting undecodable bytes as ExtractionError."""
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise ExtractionError(f"Failed to parse text file {path.name}: {e}") from e


def _parse_pdf(path: Path) -> str:
    import fitz  # pymupdf

    try:
        doc = fitz.open(str(path))
    except Exception as e:
        raise ExtractionError(f"Failed to parse PDF: {e}") from e

    if doc.needs_pass:
        doc.close()
        raise ExtractionError("This PDF is password-protected. Please upload an unprotected version.")

    pages = []
    for number, page in enumerate(doc, start=1):
        try:
            page_text = page.get_text()
        except Exception:
            logger.warning("Failed to extract text from page %d of %s", number, path.name)
            continue
        if page_text.strip():
            pages.append(page_text)
    total = doc.page_count
    doc.close()

    if not pages:
        raise ExtractionError(
            "No text content found in PDF. The PDF might be image-based, "
            "scanned, or password-protected."
        )
    logger.info("Extracted text from %d/%d pages of %s", len(pages), total, path.name)
    return "\n\n".join(pages)


def _parse_docx(path: Path) -> str:
    from docx import Document

    try:
        doc = Document(str(path))
    except Exception as e:
        raise ExtractionError(f"Failed to parse Word document: {e}") from e
    return "\n".join(p.text for p in doc.paragraphs if p.text.strip())
