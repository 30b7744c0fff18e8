"""Additive significance scoring for candidate articles."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

from bulletin.normalization import count_words
from bulletin.taxonomy import load_vocabulary

MAX_SIGNIFICANCE = 100

_MIXED_CASE_RE = re.compile(r"[A-Z][a-z]")
_TERMINAL_PUNCTUATION_RE = re.compile(r"[.!?]")


@dataclass(frozen=True, slots=True)
class ScoringProfile:
    """Domain-tuning lists consulted by the scorer."""

    organization_names: tuple[str, ...]
    generic_title_prefixes: tuple[str, ...]

    @classmethod
    def default(cls) -> "ScoringProfile":
        vocabulary = load_vocabulary()
        return cls(
            organization_names=vocabulary.organization_names,
            generic_title_prefixes=vocabulary.generic_title_prefixes,
        )

    def with_organization_names(self, names: Iterable[str]) -> "ScoringProfile":
        return ScoringProfile(
            organization_names=tuple(name for name in names if name),
            generic_title_prefixes=self.generic_title_prefixes,
        )


DEFAULT_PROFILE = ScoringProfile.default()


def score_title(title: str, profile: ScoringProfile = DEFAULT_PROFILE) -> int:
    score = 0
    if len(title) > 10:
        score += 10
    if _MIXED_CASE_RE.search(title):
        score += 10
    lowered = title.lower()
    if not any(lowered.startswith(prefix.lower()) for prefix in profile.generic_title_prefixes):
        score += 10
    return score


def score_content(content: str, profile: ScoringProfile = DEFAULT_PROFILE) -> int:
    score = 0
    words = count_words(content)
    if words > 50:
        score += 10
    if words > 150:
        score += 10
    if len(_TERMINAL_PUNCTUATION_RE.findall(content)) > 2:
        score += 10
    lowered = content.lower()
    if any(name.lower() in lowered for name in profile.organization_names):
        score += 10
    return score


def score_images(associated_image_count: int) -> int:
    score = 0
    if associated_image_count > 0:
        score += 15
    if associated_image_count > 2:
        score += 15
    return score


def score_significance(
    title: str,
    content: str,
    associated_image_count: int = 0,
    *,
    profile: ScoringProfile = DEFAULT_PROFILE,
) -> int:
    """Return a 0-100 significance score.

    The title, content and image groups contribute up to 30, 40 and 30
    points respectively; the sum is clamped to 100.
    """

    total = (
        score_title(title, profile)
        + score_content(content, profile)
        + score_images(associated_image_count)
    )
    return min(total, MAX_SIGNIFICANCE)
