"""Ranking of scored candidates and assembly of the extraction result."""

from __future__ import annotations

import math
import re
from collections.abc import Sequence

from bulletin.association import associate_pages
from bulletin.models import Article, ExtractionResult, Page, ScoredCandidate, Section, TermBundle
from bulletin.normalization import count_words

MAX_ARTICLES = 20
MIN_SECTION_CONTENT_CHARS = 30
WORDS_PER_MINUTE = 200

_SECTION_RE = re.compile(r"^## (?P<title>[^\n]+?)\n\n(?P<body>.*?)(?:\n\n)?(?=^## |\Z)", re.MULTILINE | re.DOTALL)


def rank_candidates(scored: Sequence[ScoredCandidate], *, limit: int = MAX_ARTICLES) -> list[ScoredCandidate]:
    """Order by significance (stable on ties) and keep the first *limit*."""

    ranked = sorted(scored, key=lambda item: -item.significance)
    return ranked[:limit]


def to_article(scored: ScoredCandidate) -> Article:
    return Article(
        title=scored.title,
        content=scored.content,
        page_numbers=list(scored.page_numbers),
        word_count=scored.word_count,
        significance=scored.significance,
        pattern_kind=scored.candidate.source_pattern,
        associated_image_count=scored.associated_image_count,
        start_offset=scored.candidate.start_offset,
        end_offset=scored.candidate.end_offset,
    )


def extract_sections(structured_text: str, pages: Sequence[Page]) -> list[Section]:
    """Split on ``## `` markers only; no fallback patterns."""

    sections: list[Section] = []
    for match in _SECTION_RE.finditer(structured_text):
        title = match.group("title").strip()
        content = match.group("body").strip()
        if not title or len(content) <= MIN_SECTION_CONTENT_CHARS:
            continue

        page_numbers = associate_pages(content, pages)
        if page_numbers:
            page_range = (min(page_numbers), max(page_numbers))
        else:
            page_range = (1, max(len(pages), 1))
        sections.append(Section(title=title, content=content, page_range=page_range))
    return sections


def reading_time_minutes(total_words: int) -> int:
    return math.ceil(total_words / WORDS_PER_MINUTE)


def assemble(
    candidates: Sequence[ScoredCandidate],
    pages: Sequence[Page],
    terms: TermBundle,
    *,
    cleaned_text: str,
    structured_text: str,
) -> ExtractionResult:
    """Build the final result from scored candidates and term output."""

    total_words = count_words(cleaned_text)
    return ExtractionResult(
        cleaned_text=cleaned_text,
        structured_text=structured_text,
        total_words=total_words,
        total_characters=len(cleaned_text),
        reading_time_minutes=reading_time_minutes(total_words),
        pages=list(pages),
        articles=[to_article(item) for item in rank_candidates(candidates)],
        sections=extract_sections(structured_text, pages),
        searchable_terms=list(terms.searchable_terms),
        key_phrases=list(terms.key_phrases),
        topics=list(terms.topics),
    )
