"""End-to-end tests for the extraction entry point."""

from __future__ import annotations

import json
import logging

import pytest

from bulletin import extract
from bulletin.models import Page, PatternKind
from bulletin.scoring import DEFAULT_PROFILE

_NEWSLETTER = (
    "## Annual Meeting\n\nThe board will meet on Saturday to discuss the budget and reserve "
    "schedule for next year. All members are encouraged to attend and participate in the discussion."
)

_STORY = (
    "The committee reviewed the plans for the dock and the beach. "
    "Volunteers cleaned the shoreline on Saturday. "
    "Everyone enjoyed a long lunch afterwards at the pavilion."
)


# ---------------------------------------------------------------------------
# Scenarios
# ---------------------------------------------------------------------------

def test_simple_newsletter_yields_one_article() -> None:
    result = extract([Page(number=1, raw_text=_NEWSLETTER)])

    assert len(result.articles) == 1
    article = result.articles[0]
    assert article.title == "Annual Meeting"
    assert article.pattern_kind is PatternKind.BOLD_HEADER
    assert article.page_numbers == [1]
    assert 20 <= article.word_count <= 30
    assert article.significance >= 30
    assert "\n" not in article.content


def test_names_in_running_text_do_not_become_titles() -> None:
    raw = (
        "Mary Jones Smith won the annual fishing contest on the lake. She caught a bass. "
        "The fish weighed six pounds. Her neighbors cheered from the dock."
    )
    result = extract([Page.from_text(1, raw)])

    assert all(article.pattern_kind is not PatternKind.BOLD_HEADER for article in result.articles)
    assert "Mary Jones\n\n" not in result.structured_text


def test_images_on_associated_pages_raise_significance() -> None:
    plain = extract([Page(number=1, raw_text=_NEWSLETTER)])
    illustrated = extract([Page(number=1, raw_text=_NEWSLETTER, has_associated_images=True, image_count=3)])

    assert illustrated.articles[0].associated_image_count == 3
    assert illustrated.articles[0].significance == plain.articles[0].significance + 30


def test_unstructured_text_yields_no_articles_but_terms() -> None:
    result = extract([Page.from_text(1, "Residents enjoyed the sunny weather")])

    assert result.articles == []
    assert result.sections == []
    assert result.searchable_terms == ["enjoyed", "residents", "sunny", "weather"]


def test_caps_headers_become_sections_and_articles() -> None:
    raw = f"Welcome neighbors BOARD NEWS BULLETIN {_STORY} ROAD WORK SCHEDULE {_STORY}"
    result = extract([Page.from_text(1, raw)])

    assert [section.title for section in result.sections] == ["BOARD NEWS BULLETIN", "ROAD WORK SCHEDULE"]
    assert all(section.page_range == (1, 1) for section in result.sections)
    kinds = {article.pattern_kind for article in result.articles}
    assert PatternKind.SECTION_MARKUP in kinds
    assert PatternKind.CAPS_HEADER in kinds


# ---------------------------------------------------------------------------
# Guarantees
# ---------------------------------------------------------------------------

@pytest.mark.parametrize(
    "pages",
    [
        [],
        [Page.empty(1), Page.empty(2)],
        [Page(number=1, raw_text="\x00\xff�%%%$$$")],
        [Page(number=1, raw_text="## \n\n## \n\n" * 50)],
    ],
)
def test_extract_is_total(pages: list[Page]) -> None:
    result = extract(pages)

    assert result.articles == []
    assert result.sections == []
    assert result.reading_time_minutes == 0


def test_articles_are_bounded_sorted_and_substantial() -> None:
    raw = " ".join(f"notes follow BOARD NEWS BULLETIN {_STORY}" for _ in range(30))
    result = extract([Page.from_text(1, raw)])

    assert len(result.articles) == 20
    significances = [article.significance for article in result.articles]
    assert significances == sorted(significances, reverse=True)
    for article in result.articles:
        assert len(article.content) > 100
        assert 3 < len(article.title) <= 100
        assert 0 <= article.significance <= 100


def test_pages_are_ordered_and_concatenated_by_number() -> None:
    result = extract([Page.from_text(2, "Second page words."), Page.from_text(1, "First page words.")])

    assert [page.number for page in result.pages] == [1, 2]
    assert result.cleaned_text == "First page words. Second page words."


def test_reading_time_from_total_words() -> None:
    result = extract([Page.from_text(1, "word " * 450)])

    assert result.total_words == 450
    assert result.reading_time_minutes == 3


def test_scoring_profile_is_pluggable() -> None:
    profile = DEFAULT_PROFILE.with_organization_names(["saturday"])
    result = extract([Page(number=1, raw_text=_NEWSLETTER)], profile=profile)

    assert result.articles[0].significance == 40


def test_result_serializes_to_json() -> None:
    payload = extract([Page(number=1, raw_text=_NEWSLETTER)]).to_dict()

    assert payload["articles"][0]["pattern_kind"] == "bold_header"
    assert json.loads(json.dumps(payload))["articles"][0]["title"] == "Annual Meeting"


def test_extract_logs_summary(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="bulletin.engine"):
        extract([Page(number=1, raw_text=_NEWSLETTER)])

    assert any("1 articles" in record.getMessage() for record in caplog.records)
