"""Structural segmentation of structured text into candidate articles.

Four matchers run in priority order, each over the whole text.  Matches from
different matchers may overlap; ranking decides what surfaces.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator

from razdel import sentenize

from bulletin.models import Candidate, PatternKind

MAX_TITLE_CHARS = 100
MIN_CONTENT_CHARS = 100
MIN_TITLE_CHARS = 3

# ---------------------------------------------------------------------------
# Pattern library
# ---------------------------------------------------------------------------

# "## Title\n\nbody" up to the next marker.
_SECTION_MARKUP_RE = re.compile(
    r"^## (?P<title>[^\n]+)\n\n(?P<body>.*?)(?:\n\n)?(?=^## |\Z)",
    re.MULTILINE | re.DOTALL,
)

# ALL-CAPS line (marker optional) up to the next ALL-CAPS line.
_CAPS_HEADER_RE = re.compile(
    r"^(?:## )?(?P<title>[A-Z][A-Z ]{8,})\n\n"
    r"(?P<body>.*?)(?:\n\n)?(?=^(?:## )?[A-Z][A-Z ]{8,}\n\n|\Z)",
    re.MULTILINE | re.DOTALL,
)

_SENTENCE_LINE = r"[^#\n][^\n]*[.!?](?=\n|\Z)"

# Short capitalised line ending in a lower-case letter, then >= 2 sentence lines.
_BOLD_HEADER_RE = re.compile(
    rf"^(?P<title>[A-Z][^\n.!?#]{{3,78}}[a-z])\n\n"
    rf"(?P<body>{_SENTENCE_LINE}(?:\n\n{_SENTENCE_LINE})+)",
    re.MULTILINE,
)

# Sentence line, blank line, then a run of sentence lines.
_PARAGRAPH_RE = re.compile(
    rf"^(?P<title>{_SENTENCE_LINE})\n\n"
    rf"(?P<body>{_SENTENCE_LINE}(?:\n\n{_SENTENCE_LINE})*)",
    re.MULTILINE,
)
_MIN_PARAGRAPH_BODY_SENTENCES = 3


# ---------------------------------------------------------------------------
# Cleaning rules
# ---------------------------------------------------------------------------

def clean_title(raw_title: str) -> str:
    """Drop header markers, collapse whitespace and cap at 100 characters."""

    title = " ".join(raw_title.lstrip("# ").split())
    return title[:MAX_TITLE_CHARS].rstrip()


def clean_content(raw_content: str) -> str:
    """Flatten content onto a single line."""

    return " ".join(raw_content.split())


def is_substantial(title: str, content: str) -> bool:
    return len(content) > MIN_CONTENT_CHARS and len(title) > MIN_TITLE_CHARS


# ---------------------------------------------------------------------------
# Matchers
# ---------------------------------------------------------------------------

def _scan(pattern: re.Pattern[str], text: str) -> Iterator[re.Match[str]]:
    """Yield successive matches; the cursor always moves forward."""

    cursor = 0
    while cursor <= len(text):
        match = pattern.search(text, cursor)
        if match is None:
            return
        yield match
        cursor = max(match.end(), match.start() + 1)


def _count_sentences(text: str) -> int:
    return sum(1 for sentence in sentenize(text) if sentence.text.strip())


def _candidate(match: re.Match[str], kind: PatternKind) -> Candidate:
    return Candidate(
        raw_title=match.group("title"),
        raw_content=match.group("body"),
        source_pattern=kind,
        start_offset=match.start(),
        end_offset=match.end(),
    )


def match_section_markup(text: str) -> list[Candidate]:
    return [_candidate(m, PatternKind.SECTION_MARKUP) for m in _scan(_SECTION_MARKUP_RE, text)]


def match_caps_headers(text: str) -> list[Candidate]:
    return [_candidate(m, PatternKind.CAPS_HEADER) for m in _scan(_CAPS_HEADER_RE, text)]


def match_bold_headers(text: str) -> list[Candidate]:
    return [_candidate(m, PatternKind.BOLD_HEADER) for m in _scan(_BOLD_HEADER_RE, text)]


def match_paragraphs(text: str) -> list[Candidate]:
    """Fallback matcher: a lead sentence followed by three or more sentences."""

    candidates: list[Candidate] = []
    cursor = 0
    while cursor <= len(text):
        match = _PARAGRAPH_RE.search(text, cursor)
        if match is None:
            break
        if _count_sentences(match.group("body")) >= _MIN_PARAGRAPH_BODY_SENTENCES:
            candidates.append(_candidate(match, PatternKind.PARAGRAPH))
            cursor = max(match.end(), match.start() + 1)
        else:
            # Retry from the next line so a later lead sentence can qualify.
            cursor = match.start() + 1
    return candidates


MATCHERS: tuple[tuple[PatternKind, Callable[[str], list[Candidate]]], ...] = (
    (PatternKind.SECTION_MARKUP, match_section_markup),
    (PatternKind.CAPS_HEADER, match_caps_headers),
    (PatternKind.BOLD_HEADER, match_bold_headers),
    (PatternKind.PARAGRAPH, match_paragraphs),
)


def find_candidates(text: str) -> list[Candidate]:
    """Run every matcher in priority order without filtering."""

    candidates: list[Candidate] = []
    for _kind, matcher in MATCHERS:
        candidates.extend(matcher(text))
    return candidates


def segment(text: str) -> list[Candidate]:
    """Return candidates whose cleaned title and content are substantial."""

    return [
        candidate
        for candidate in find_candidates(text)
        if is_substantial(clean_title(candidate.raw_title), clean_content(candidate.raw_content))
    ]
