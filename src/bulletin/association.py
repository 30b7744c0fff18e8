"""Map a text span back to the pages it most likely came from."""

from __future__ import annotations

from collections.abc import Sequence

from bulletin.models import Page
from bulletin.normalization import clean_text

PREFIX_TOKENS = 10
MIN_TOKEN_CHARS = 3

_EDGE_PUNCTUATION = ".,!?;:-"


def _token_set(text: str) -> set[str]:
    return {token.strip(_EDGE_PUNCTUATION) for token in text.lower().split()}


def _page_text(page: Page) -> str:
    # Callers are not required to pre-clean pages.
    return page.cleaned_text or clean_text(page.raw_text)


def content_probe(content: str) -> list[str]:
    """Qualifying lowercase tokens among the first ten tokens of *content*."""

    probe: list[str] = []
    for token in content.lower().split()[:PREFIX_TOKENS]:
        word = token.strip(_EDGE_PUNCTUATION)
        if len(word) > MIN_TOKEN_CHARS:
            probe.append(word)
    return probe


def associate_pages(content: str, pages: Sequence[Page]) -> list[int]:
    """Return numbers of pages sharing a whole token with the content prefix.

    An empty list is a valid answer, not an error.
    """

    probe = content_probe(content)
    if not probe:
        return []

    numbers: list[int] = []
    for page in pages:
        page_tokens = _token_set(_page_text(page))
        if any(word in page_tokens for word in probe):
            numbers.append(page.number)
    return numbers
