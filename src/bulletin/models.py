"""Canonical data structures shared by the segmentation engine."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum

from bulletin.normalization import clean_text, count_words


class PatternKind(Enum):
    """Structural matcher that produced a candidate, in priority order."""

    SECTION_MARKUP = "section_markup"
    CAPS_HEADER = "caps_header"
    BOLD_HEADER = "bold_header"
    PARAGRAPH = "paragraph"


@dataclass(slots=True)
class Page:
    """One extracted page as handed over by the page-extraction step."""

    number: int
    raw_text: str = ""
    cleaned_text: str = ""
    word_count: int = 0
    has_associated_images: bool = False
    image_count: int = 0

    @classmethod
    def from_text(cls, number: int, raw_text: str, *, image_count: int = 0) -> "Page":
        cleaned = clean_text(raw_text)
        return cls(
            number=number,
            raw_text=raw_text,
            cleaned_text=cleaned,
            word_count=count_words(cleaned),
            has_associated_images=image_count > 0,
            image_count=image_count,
        )

    @classmethod
    def empty(cls, number: int) -> "Page":
        """Placeholder for a page that could not be read."""

        return cls(number=number)


@dataclass(slots=True)
class Candidate:
    """Unscored structural match; offsets are a half-open span."""

    raw_title: str
    raw_content: str
    source_pattern: PatternKind
    start_offset: int
    end_offset: int


@dataclass(slots=True)
class ScoredCandidate:
    """Candidate after cleaning, page association and scoring."""

    candidate: Candidate
    title: str
    content: str
    page_numbers: list[int]
    word_count: int
    associated_image_count: int
    significance: int


@dataclass(slots=True)
class Article:
    """Ranked article emitted in the final result."""

    title: str
    content: str
    page_numbers: list[int]
    word_count: int
    significance: int
    pattern_kind: PatternKind
    associated_image_count: int = 0
    start_offset: int = 0
    end_offset: int = 0


@dataclass(slots=True)
class Section:
    """Coarse document division independent of article ranking."""

    title: str
    content: str
    page_range: tuple[int, int]


@dataclass(slots=True)
class TermBundle:
    searchable_terms: list[str] = field(default_factory=list)
    key_phrases: list[str] = field(default_factory=list)
    topics: list[str] = field(default_factory=list)


@dataclass(slots=True)
class KeywordCount:
    word: str
    count: int


@dataclass(slots=True)
class ExtractionResult:
    """Aggregate output of one extraction call."""

    cleaned_text: str
    structured_text: str
    total_words: int
    total_characters: int
    reading_time_minutes: int
    pages: list[Page] = field(default_factory=list)
    articles: list[Article] = field(default_factory=list)
    sections: list[Section] = field(default_factory=list)
    searchable_terms: list[str] = field(default_factory=list)
    key_phrases: list[str] = field(default_factory=list)
    topics: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, object]:
        payload = asdict(self)
        for article in payload["articles"]:
            article["pattern_kind"] = article["pattern_kind"].value
        for section in payload["sections"]:
            section["page_range"] = list(section["page_range"])
        return payload
