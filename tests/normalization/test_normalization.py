from __future__ import annotations

import pytest

from bulletin.normalization import clean_text, count_words, normalize, structure_text


# ---------------------------------------------------------------------------
# Cleaning
# ---------------------------------------------------------------------------

def test_clean_text_strips_symbols_and_tidies_punctuation() -> None:
    assert clean_text("Hello,   world !  @#$ Nice .") == "Hello, world! Nice."


def test_clean_text_keeps_allowed_punctuation() -> None:
    assert clean_text("Dues: $40; due May-1, ok?") == "Dues: 40; due May-1, ok?"


@pytest.mark.parametrize(
    "raw",
    [
        "a @ b",
        "  x  .  . ",
        "\x00bin\xffary\tnoise\n\n",
        "## Annual Meeting\n\nThe board will meet.",
        "",
    ],
)
def test_clean_text_is_idempotent(raw: str) -> None:
    once = clean_text(raw)
    assert clean_text(once) == once


@pytest.mark.parametrize(
    "raw",
    [
        "minutes were approved BOARD NEWS The board met twice. Dues are due.",
        "Annual Meeting The board will meet. All members attend!",
        "%%% \x07 garbage ###",
    ],
)
def test_normalize_is_stable_on_its_own_cleaned_output(raw: str) -> None:
    result = normalize(raw)
    assert normalize(result[0]) == result


def test_normalize_empty_input() -> None:
    assert normalize("") == ("", "")


# ---------------------------------------------------------------------------
# Structuring
# ---------------------------------------------------------------------------

def test_paragraph_break_after_sentence_end() -> None:
    structured = structure_text("The pool opens Monday. Lifeguards are on duty.")
    assert structured == "The pool opens Monday.\n\nLifeguards are on duty."


def test_caps_run_is_promoted_to_marked_header() -> None:
    structured = structure_text("minutes were approved BOARD NEWS The board met twice.")
    assert structured == "minutes were approved\n\n## BOARD NEWS\n\nThe board met twice."


def test_short_caps_run_is_left_inline() -> None:
    assert structure_text("the HOA BOD met") == "the HOA BOD met"


def test_title_case_lead_is_split_from_body() -> None:
    structured = structure_text("Annual Meeting The board will meet.")
    assert structured == "Annual Meeting\n\nThe board will meet."


def test_title_case_names_inside_text_are_left_whole() -> None:
    structured = structure_text("The pool opens Monday. Mary Jones Smith won the annual fishing contest.")
    assert structured == "The pool opens Monday.\n\nMary Jones Smith won the annual fishing contest."


def test_leading_name_without_sentence_opener_is_not_split() -> None:
    text = "Board President John Smith said the roads will be repaired."
    assert structure_text(text) == text


def test_structure_never_leaves_triple_newlines() -> None:
    structured = structure_text("intro text LAKE NEWS TODAY ROAD WORK AHEAD more words here.")
    assert "\n\n\n" not in structured
    assert structured.startswith("intro text")


def test_count_words() -> None:
    assert count_words("one two  three\nfour") == 4
    assert count_words("") == 0
