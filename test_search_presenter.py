"""Unit tests for search result previews."""

import re

import pytest

from src.modules.search.presenter import TRUNCATION_MARKER, present_results, preview, strip_tags
from src.modules.search.schemas import ContentUrl, SearchResult


def test_strip_tags_keeps_text_only() -> None:
    assert strip_tags("<p>Mean, <strong>median</strong> and mode.</p>") == "Mean, median and mode."


def test_strip_tags_unescapes_entities() -> None:
    assert strip_tags("<p>x &lt; y &amp; z</p>") == "x < y & z"


def test_strip_tags_handles_missing_content() -> None:
    assert strip_tags(None) == ""
    assert strip_tags("") == ""


def test_strip_tags_does_not_turn_encoded_markup_into_tags() -> None:
    text = strip_tags("<p>Use &lt;script&gt;alert(1)&lt;/script&gt; carefully</p>")

    assert not re.search(r"<[^>]+>", text)
    assert text.startswith("Use")
    assert text.endswith("carefully")


def test_strip_tags_handles_double_encoded_markup() -> None:
    assert strip_tags("&amp;lt;b&amp;gt;bold&amp;lt;/b&amp;gt;") == "bold"


def test_preview_of_encoded_markup_has_no_tags() -> None:
    out = preview("<p>Use &lt;script&gt;alert(1)&lt;/script&gt; carefully</p>", 50)
    assert not re.search(r"<[^>]+>", out)


def test_preview_short_content_is_unchanged() -> None:
    content = "Exam is Friday"
    assert preview(content, 50) == content


def test_preview_content_exactly_at_limit_is_unchanged() -> None:
    content = "x" * 50
    assert preview(content, 50) == content


def test_preview_truncates_at_word_boundary() -> None:
    content = "<p>" + "statistics is the science of learning from data " * 5 + "</p>"
    result = preview(content, 50)

    assert result.endswith(TRUNCATION_MARKER)
    body = result[: -len(TRUNCATION_MARKER)]
    assert len(body) <= 50
    assert "<" not in result and ">" not in result
    assert "statistics is the science of learning from data statistics".startswith(body)
    assert not body.endswith(" ")


def test_preview_cuts_single_long_word() -> None:
    result = preview("a" * 80, 50)
    assert result == "a" * 50 + TRUNCATION_MARKER


def test_preview_does_not_leave_partial_word() -> None:
    assert preview("alpha beta gamma", 12) == "alpha beta" + TRUNCATION_MARKER


def test_preview_is_repeatable() -> None:
    content = "<div>Groups meet on Tuesday to discuss variance and standard deviation.</div>"
    assert preview(content, 30) == preview(content, 30)


def test_preview_rejects_non_positive_length() -> None:
    with pytest.raises(ValueError):
        preview("anything", 0)


def test_present_results_renders_url_and_preview() -> None:
    results = [
        SearchResult(
            title="Midterm dates (Announcements)",
            result_type="Forum - Post",
            content="<p>Exam is Friday</p>",
            url=ContentUrl(path="/mod/forum/discuss.php", params={"d": 7}),
        ),
        SearchResult(
            title="Welcome",
            result_type="Text and media area",
            content="",
            url=ContentUrl(path="/mod/label/view.php", params={"id": 3}),
        ),
    ]

    items = present_results(results, 200)

    assert [item.title for item in items] == ["Midterm dates (Announcements)", "Welcome"]
    assert items[0].type == "Forum - Post"
    assert items[0].preview == "Exam is Friday"
    assert items[0].url == "/mod/forum/discuss.php?d=7"
    assert items[1].preview is None
