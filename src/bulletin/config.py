"""Runtime configuration for the command-line entry points."""

from __future__ import annotations

from dataclasses import dataclass
import logging
import os
from typing import Mapping

from bulletin.scoring import DEFAULT_PROFILE, ScoringProfile


DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_MAX_SUGGESTED_TAGS = 10
DEFAULT_MAX_SUGGESTED_TOPICS = 5

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _parse_positive_int(*, name: str, raw_value: str, minimum: int = 1) -> int:
    value = int(raw_value)
    if value < minimum:
        raise ValueError(f"{name} must be >= {minimum}")
    return value


@dataclass(frozen=True, slots=True)
class EngineSettings:
    """Validated extraction settings."""

    organization_names: tuple[str, ...] | None = None
    log_level: str = DEFAULT_LOG_LEVEL
    max_suggested_tags: int = DEFAULT_MAX_SUGGESTED_TAGS
    max_suggested_topics: int = DEFAULT_MAX_SUGGESTED_TOPICS

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "EngineSettings":
        source: Mapping[str, str] = os.environ if environ is None else environ

        organization_names: tuple[str, ...] | None = None
        names_raw = source.get("BULLETIN_ORGANIZATION_NAMES")
        if names_raw is not None:
            organization_names = tuple(name.strip() for name in names_raw.split(",") if name.strip())
            if not organization_names:
                raise ValueError("BULLETIN_ORGANIZATION_NAMES cannot be empty")

        log_level = source.get("BULLETIN_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
        if log_level not in _LOG_LEVELS:
            raise ValueError(f"BULLETIN_LOG_LEVEL must be one of {', '.join(sorted(_LOG_LEVELS))}")

        tags_raw = source.get("BULLETIN_MAX_SUGGESTED_TAGS", str(DEFAULT_MAX_SUGGESTED_TAGS)).strip()
        topics_raw = source.get("BULLETIN_MAX_SUGGESTED_TOPICS", str(DEFAULT_MAX_SUGGESTED_TOPICS)).strip()
        if not tags_raw:
            raise ValueError("BULLETIN_MAX_SUGGESTED_TAGS cannot be empty")
        if not topics_raw:
            raise ValueError("BULLETIN_MAX_SUGGESTED_TOPICS cannot be empty")

        return cls(
            organization_names=organization_names,
            log_level=log_level,
            max_suggested_tags=_parse_positive_int(name="BULLETIN_MAX_SUGGESTED_TAGS", raw_value=tags_raw),
            max_suggested_topics=_parse_positive_int(name="BULLETIN_MAX_SUGGESTED_TOPICS", raw_value=topics_raw),
        )

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)

    def scoring_profile(self) -> ScoringProfile:
        if self.organization_names is None:
            return DEFAULT_PROFILE
        return DEFAULT_PROFILE.with_organization_names(self.organization_names)
