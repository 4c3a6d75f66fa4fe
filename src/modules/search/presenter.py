# src/modules/search/presenter.py

import html
import re
from typing import Iterable, List, Optional

import nh3

from src.modules.search.schemas import SearchResult, SearchResultItem

TRUNCATION_MARKER = "..."
_TRAILING_PARTIAL_WORD = re.compile(r"\s+\S*$")

def strip_tags(content: Optional[str]) -> str:
    """
    Remove all markup from `content`, leaving plain text.
    """
    if not content:
        return ""
    # nh3 drops every tag and escapes the text it keeps; decoding the entities
    # can expose encoded markup, so repeat until nothing changes
    text = content
    while True:
        cleaned = html.unescape(nh3.clean(text, tags=set(), attributes={}))
        if cleaned == text:
            return cleaned
        text = cleaned

def preview(content: Optional[str], max_length: int) -> str:
    """
    Plain-text preview of `content` at most `max_length` characters long,
    followed by a truncation marker when text had to be cut.

    The cut happens at the last word boundary before the limit; a single word
    longer than the limit is cut mid-word.
    """
    if max_length < 1:
        raise ValueError("max_length must be a positive integer")

    text = strip_tags(content).strip()
    if len(text) <= max_length:
        return text

    cut = text[:max_length]
    if not text[max_length].isspace():
        shortened = _TRAILING_PARTIAL_WORD.sub("", cut)
        if shortened:
            cut = shortened
    return cut.rstrip() + TRUNCATION_MARKER

def present_result(result: SearchResult, preview_length: int) -> SearchResultItem:
    return SearchResultItem(
        title=result.title,
        type=result.result_type,
        preview=preview(result.content, preview_length) if result.content else None,
        url=result.url.out(),
    )

def present_results(results: Iterable[SearchResult], preview_length: int) -> List[SearchResultItem]:
    return [present_result(result, preview_length) for result in results]
