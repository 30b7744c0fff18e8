from __future__ import annotations

from bulletin.association import associate_pages, content_probe
from bulletin.models import Page


def _pages() -> list[Page]:
    return [
        Page.from_text(1, "The pool opens in June."),
        Page.from_text(2, "Road repairs begin Monday."),
        Page.from_text(3, "Pool passes are available."),
    ]


def test_pages_sharing_a_prefix_token_are_returned_in_page_order() -> None:
    assert associate_pages("The pool schedule is posted", _pages()) == [1, 3]


def test_only_first_ten_tokens_are_considered() -> None:
    content = "one two six ten the and for but its was repairs"
    assert content_probe(content) == []
    assert associate_pages(content, _pages()) == []


def test_matching_is_by_whole_token() -> None:
    assert associate_pages("poolside party tonight", _pages()) == []


def test_trailing_punctuation_does_not_block_a_match() -> None:
    assert associate_pages("June.", _pages()) == [1]


def test_uncleaned_pages_fall_back_to_raw_text() -> None:
    pages = [Page(number=4, raw_text="Marina closed for repairs.")]
    assert associate_pages("repairs needed at the marina", pages) == [4]


def test_empty_page_list_and_empty_content() -> None:
    assert associate_pages("anything here", []) == []
    assert associate_pages("", _pages()) == []


def test_association_is_deterministic() -> None:
    pages = _pages()
    first = associate_pages("Pool repairs begin soon", pages)
    assert first == associate_pages("Pool repairs begin soon", pages)
    assert first == sorted(first)
