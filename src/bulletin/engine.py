"""Top-level extraction entry point."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from bulletin.assembly import assemble
from bulletin.association import associate_pages
from bulletin.models import Candidate, ExtractionResult, Page, ScoredCandidate
from bulletin.normalization import count_words, normalize
from bulletin.scoring import DEFAULT_PROFILE, ScoringProfile, score_significance
from bulletin.segmentation import clean_content, clean_title, is_substantial, segment
from bulletin.terms import extract_terms

logger = logging.getLogger(__name__)

PAGE_SEPARATOR = "\n\n"


def concatenate_pages(pages: Sequence[Page]) -> str:
    return "".join(page.raw_text + PAGE_SEPARATOR for page in pages)


def score_candidates(
    candidates: Iterable[Candidate],
    pages: Sequence[Page],
    *,
    profile: ScoringProfile = DEFAULT_PROFILE,
) -> list[ScoredCandidate]:
    """Clean, associate and score candidates, dropping insubstantial ones."""

    images_by_page = {page.number: page.image_count for page in pages}
    scored: list[ScoredCandidate] = []

    for candidate in candidates:
        title = clean_title(candidate.raw_title)
        content = clean_content(candidate.raw_content)
        if not is_substantial(title, content):
            continue

        page_numbers = associate_pages(content, pages)
        image_count = sum(images_by_page.get(number, 0) for number in page_numbers)
        scored.append(
            ScoredCandidate(
                candidate=candidate,
                title=title,
                content=content,
                page_numbers=page_numbers,
                word_count=count_words(content),
                associated_image_count=image_count,
                significance=score_significance(title, content, image_count, profile=profile),
            )
        )
    return scored


def extract(pages: Iterable[Page], *, profile: ScoringProfile = DEFAULT_PROFILE) -> ExtractionResult:
    """Turn per-page text into cleaned text, ranked articles, sections and terms.

    Total over any input: unreadable pages are expected to arrive as
    ``Page.empty(n)`` and garbage text degrades to an empty article list.
    """

    ordered = sorted(pages, key=lambda page: page.number)
    cleaned_text, structured_text = normalize(concatenate_pages(ordered))

    terms = extract_terms(cleaned_text)
    scored = score_candidates(segment(structured_text), ordered, profile=profile)
    result = assemble(
        scored,
        ordered,
        terms,
        cleaned_text=cleaned_text,
        structured_text=structured_text,
    )

    logger.debug(
        "Extracted %d words across %d pages: %d articles, %d sections, %d searchable terms",
        result.total_words,
        len(ordered),
        len(result.articles),
        len(result.sections),
        len(result.searchable_terms),
    )
    return result
