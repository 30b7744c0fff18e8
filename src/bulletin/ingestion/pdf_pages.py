"""PDF page loader producing engine-ready ``Page`` records."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

import pymupdf

from bulletin.ingestion.errors import DocumentLoadError
from bulletin.metadata import IssueInfo, build_issue_info
from bulletin.models import Page

logger = logging.getLogger(__name__)

_PDF_MAGIC = b"%PDF-"


@dataclass(slots=True)
class LoadedIssue:
    info: IssueInfo
    pages: list[Page] = field(default_factory=list)


def looks_like_pdf(path: Path, sniffed_bytes: bytes | None = None) -> bool:
    if path.suffix.lower() == ".pdf":
        return True
    if sniffed_bytes is None:
        return False
    return sniffed_bytes.startswith(_PDF_MAGIC)


def _read_page(page: pymupdf.Page, number: int) -> Page:
    raw_text = page.get_text()
    image_count = len(page.get_images(full=True))
    return Page.from_text(number, raw_text, image_count=image_count)


def load_pdf_pages(path: str | Path) -> LoadedIssue:
    """Read every page of a PDF, substituting empty pages for failures.

    Page numbering stays contiguous so page association remains correct.
    """

    source = Path(path)
    try:
        doc = pymupdf.open(source)
    except Exception as exc:
        raise DocumentLoadError(source, f"Failed to open PDF: {exc}") from exc

    pages: list[Page] = []
    with doc:
        for number, page in enumerate(doc, start=1):
            try:
                pages.append(_read_page(page, number))
            except Exception as exc:
                logger.warning("Failed to read page %d of %s, using empty page: %s", number, source.name, exc)
                pages.append(Page.empty(number))
        info = build_issue_info(source.name, doc.metadata, len(pages))

    logger.info("Loaded %d pages from %s", len(pages), source.name)
    return LoadedIssue(info=info, pages=pages)
