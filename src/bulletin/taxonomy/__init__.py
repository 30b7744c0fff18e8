"""Read-only vocabulary tables: stopwords, topic taxonomy, scoring lists."""

from __future__ import annotations

import json
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

_VOCABULARY_PATH = Path(__file__).parent / "vocabulary.json"


@dataclass(frozen=True, slots=True)
class Topic:
    name: str
    triggers: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class Vocabulary:
    """Process-wide constant tables loaded once from ``vocabulary.json``.

    ``frequency_stopwords`` is a strict superset of ``stopwords``; it is the
    list used by the keyword-frequency pass.
    """

    stopwords: frozenset[str]
    frequency_stopwords: frozenset[str]
    topics: tuple[Topic, ...]
    generic_title_prefixes: tuple[str, ...]
    organization_names: tuple[str, ...]
    title_expansions: tuple[tuple[str, str], ...]


@lru_cache(maxsize=1)
def load_vocabulary() -> Vocabulary:
    data = json.loads(_VOCABULARY_PATH.read_text(encoding="utf-8"))
    stopwords = frozenset(word.lower() for word in data["stopwords"])
    return Vocabulary(
        stopwords=stopwords,
        frequency_stopwords=stopwords | frozenset(word.lower() for word in data["frequency_stopwords"]),
        topics=tuple(
            Topic(name=entry["name"], triggers=tuple(t.lower() for t in entry["triggers"]))
            for entry in data["topics"]
        ),
        generic_title_prefixes=tuple(data["generic_title_prefixes"]),
        organization_names=tuple(data["organization_names"]),
        title_expansions=tuple(data["title_expansions"].items()),
    )


__all__ = ["Topic", "Vocabulary", "load_vocabulary"]
