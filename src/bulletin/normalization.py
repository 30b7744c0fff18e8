"""Text cleaning and paragraph/header structuring."""

from __future__ import annotations

import re

_DISALLOWED_RE = re.compile(r"[^A-Za-z0-9_\s.,!?;:-]")
_WHITESPACE_RE = re.compile(r"\s+")
_SPACE_BEFORE_STOP_RE = re.compile(r"\s+([.!?])")

_SENTENCE_BREAK_RE = re.compile(r"([.!?]) +([A-Z])")
# Two or more upper-case tokens bounded by whitespace or text edges.
_CAPS_RUN_RE = re.compile(r"(?<![^ \n])((?:[A-Z][A-Z0-9]*[ ]+)+[A-Z][A-Z0-9]*)(?![^ \n])")
_MIN_CAPS_RUN_CHARS = 8
_SENTENCE_OPENERS = "The|A|An|All|This|That|These|Those|Our|We|It|In|On|At|For|If|When|Please"
# Title-Case run at the very start of the text, directly followed by a word
# that opens a sentence, e.g. "Annual Meeting The board will ...".
_TITLE_LEAD_RE = re.compile(
    rf"\A(?!(?:{_SENTENCE_OPENERS})\b)"
    rf"((?:[A-Z][a-z]+[ ]){{1,7}}[A-Z][a-z]+)[ ](?=(?:{_SENTENCE_OPENERS})[ ])"
)
_SPACE_AROUND_NEWLINE_RE = re.compile(r"[ ]*\n[ ]*")
_EXCESS_NEWLINES_RE = re.compile(r"\n{3,}")


def clean_text(text: str) -> str:
    """Strip disallowed characters, collapse whitespace and tidy punctuation.

    Characters are removed before whitespace is collapsed so that the result
    is a fixed point: ``clean_text(clean_text(x)) == clean_text(x)``.
    """

    stripped = _DISALLOWED_RE.sub("", text)
    collapsed = _WHITESPACE_RE.sub(" ", stripped)
    return _SPACE_BEFORE_STOP_RE.sub(r"\1", collapsed).strip()


def _promote_caps_run(match: re.Match[str]) -> str:
    run = match.group(1)
    if len(run) < _MIN_CAPS_RUN_CHARS:
        return run
    return f"\n\n## {run}\n\n"


def structure_text(text: str) -> str:
    """Insert paragraph breaks and header markers into cleaned text."""

    if not text:
        return ""

    structured = _SENTENCE_BREAK_RE.sub("\\1\n\n\\2", text)
    structured = _CAPS_RUN_RE.sub(_promote_caps_run, structured)
    structured = _SPACE_AROUND_NEWLINE_RE.sub("\n", structured)
    structured = _TITLE_LEAD_RE.sub("\\1\n\n", structured)
    structured = _EXCESS_NEWLINES_RE.sub("\n\n", structured)
    return structured.strip()


def normalize(text: str) -> tuple[str, str]:
    """Return ``(cleaned_text, structured_text)`` for raw concatenated text."""

    cleaned = clean_text(text)
    return cleaned, structure_text(cleaned)


def count_words(text: str) -> int:
    return len(text.split())
