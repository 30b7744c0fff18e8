"""Tag and topic suggestions built on top of an extraction result."""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass, field

from bulletin.models import ExtractionResult
from bulletin.terms import analyze_keywords

DEFAULT_MAX_TAGS = 10
DEFAULT_MAX_TOPICS = 5
PREVIEW_CHARS = 500

_NUMERIC_RE = re.compile(r"^\d+$")


@dataclass(slots=True)
class TagSuggestion:
    suggested_tags: list[str]
    topics: list[str]
    key_terms: list[str]
    keyword_counts: dict[str, int] = field(default_factory=dict)
    text_preview: str = ""
    word_count: int = 0


def filter_tags(tags: Sequence[str], limit: int) -> list[str]:
    """Drop numeric and one-character tags, then cap at *limit*."""

    kept = [
        tag
        for tag in tags
        if len(tag.strip()) >= 2 and not _NUMERIC_RE.match(tag.strip())
    ]
    return kept[:limit]


def suggest_tags(
    result: ExtractionResult,
    *,
    max_tags: int = DEFAULT_MAX_TAGS,
    max_topics: int = DEFAULT_MAX_TOPICS,
) -> TagSuggestion:
    keywords = analyze_keywords(result.cleaned_text)
    return TagSuggestion(
        suggested_tags=filter_tags(result.searchable_terms, max_tags),
        topics=filter_tags(result.topics, max_topics),
        key_terms=[item.word for item in keywords],
        keyword_counts={item.word: item.count for item in keywords},
        text_preview=result.cleaned_text[:PREVIEW_CHARS],
        word_count=result.total_words,
    )


def apply_tags(
    existing_tags: Sequence[str],
    existing_topics: Sequence[str],
    suggestion: TagSuggestion,
    *,
    max_new_tags: int = DEFAULT_MAX_TAGS,
    max_new_topics: int = DEFAULT_MAX_TOPICS,
    replace_existing: bool = False,
) -> tuple[list[str], list[str]]:
    """Merge suggested tags and topics into existing lists.

    With ``replace_existing`` the suggestions replace the existing values;
    otherwise only unseen values are appended.
    """

    if replace_existing:
        return (
            suggestion.suggested_tags[:max_new_tags],
            suggestion.topics[:max_new_topics],
        )

    new_tags = [tag for tag in suggestion.suggested_tags if tag not in existing_tags][:max_new_tags]
    new_topics = [topic for topic in suggestion.topics if topic not in existing_topics][:max_new_topics]
    return [*existing_tags, *new_tags], [*existing_topics, *new_topics]
