"""Searchable terms, key phrases, topics and keyword frequencies."""

from __future__ import annotations

import re

from bulletin.models import KeywordCount, TermBundle
from bulletin.taxonomy import load_vocabulary

MAX_KEY_PHRASES = 50
DEFAULT_KEYWORD_LIMIT = 20

_EDGE_PUNCTUATION = ".,!?;:-"
_NON_WORD_RE = re.compile(r"[^\w\s]")
_DIGITS_RE = re.compile(r"^\d+$")


def _tokens(text: str) -> list[str]:
    return text.lower().split()


def extract_searchable_terms(text: str) -> list[str]:
    """Return sorted unique lowercase terms longer than three characters."""

    stopwords = load_vocabulary().stopwords
    terms: set[str] = set()
    for token in _tokens(text):
        word = token.strip(_EDGE_PUNCTUATION)
        if len(word) > 3 and word not in stopwords:
            terms.add(word)
    return sorted(terms)


def extract_key_phrases(text: str, *, limit: int = MAX_KEY_PHRASES) -> list[str]:
    """Collect 2-word then 3-word phrases in first-seen order."""

    words = _tokens(text)
    phrases: dict[str, None] = {}

    for index in range(len(words) - 1):
        phrase = f"{words[index]} {words[index + 1]}"
        if len(phrase) > 6:
            phrases.setdefault(phrase)

    for index in range(len(words) - 2):
        phrase = f"{words[index]} {words[index + 1]} {words[index + 2]}"
        if len(phrase) > 10:
            phrases.setdefault(phrase)

    return list(phrases)[:limit]


def extract_topics(text: str) -> list[str]:
    """Return taxonomy topics with at least one trigger present in *text*."""

    lowered = text.lower()
    return [
        topic.name
        for topic in load_vocabulary().topics
        if any(trigger in lowered for trigger in topic.triggers)
    ]


def extract_terms(text: str) -> TermBundle:
    return TermBundle(
        searchable_terms=extract_searchable_terms(text),
        key_phrases=extract_key_phrases(text),
        topics=extract_topics(text),
    )


def analyze_keywords(text: str, *, limit: int = DEFAULT_KEYWORD_LIMIT) -> list[KeywordCount]:
    """Rank words by frequency using the stricter stopword list.

    Ties keep first-occurrence order.
    """

    if limit <= 0:
        raise ValueError("limit must be positive")

    stopwords = load_vocabulary().frequency_stopwords
    counts: dict[str, int] = {}
    for word in _NON_WORD_RE.sub("", text.lower()).split():
        if len(word) <= 2 or word in stopwords or _DIGITS_RE.match(word):
            continue
        counts[word] = counts.get(word, 0) + 1

    ranked = sorted(counts.items(), key=lambda item: -item[1])
    return [KeywordCount(word=word, count=count) for word, count in ranked[:limit]]
