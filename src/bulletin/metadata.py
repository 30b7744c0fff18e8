"""Issue-level metadata derived from filenames and PDF document info."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import PurePath

from bulletin.taxonomy import load_vocabulary

UNKNOWN_DATE = "Unknown"

_DATE_PATTERNS = (
    re.compile(r"(\d{4})\.(\d{2})"),
    re.compile(r"(\d{4})\.(summer|winter|spring|fall)", re.IGNORECASE),
)
_TITLE_SPLIT_RE = re.compile(r"[-_]+")
_WORD_START_RE = re.compile(r"\b\w")
_KEYWORD_SPLIT_RE = re.compile(r"[,;]")


@dataclass(slots=True)
class IssueInfo:
    """Descriptive metadata for one newsletter issue."""

    filename: str
    title: str
    date: str = UNKNOWN_DATE
    author: str | None = None
    subject: str | None = None
    keywords: list[str] = field(default_factory=list)
    page_count: int = 0


def title_from_filename(filename: str) -> str:
    stem = PurePath(filename).name
    if stem.lower().endswith(".pdf"):
        stem = stem[:-4]
    title = _WORD_START_RE.sub(lambda m: m.group(0).upper(), _TITLE_SPLIT_RE.sub(" ", stem)).strip()
    for short, full in load_vocabulary().title_expansions:
        if full not in title:
            title = title.replace(short, full)
    return title


def date_from_filename(filename: str) -> str:
    for pattern in _DATE_PATTERNS:
        match = pattern.search(filename)
        if match:
            return match.group(0)
    return UNKNOWN_DATE


def parse_keywords(value: str | None) -> list[str] | None:
    """Split a PDF keyword string on commas and semicolons."""

    if not value:
        return None
    keywords = [part.strip() for part in _KEYWORD_SPLIT_RE.split(value)]
    keywords = [keyword for keyword in keywords if keyword]
    return keywords or None


def _non_empty(value: str | None) -> str | None:
    if value is None:
        return None
    cleaned = " ".join(value.split())
    return cleaned or None


def build_issue_info(filename: str, document_metadata: dict[str, str] | None, page_count: int) -> IssueInfo:
    metadata = document_metadata or {}
    return IssueInfo(
        filename=filename,
        title=title_from_filename(filename),
        date=date_from_filename(filename),
        author=_non_empty(metadata.get("author")),
        subject=_non_empty(metadata.get("subject")),
        keywords=parse_keywords(metadata.get("keywords")) or [],
        page_count=page_count,
    )
