from typing import Any

from sqlalchemy import select
from sqlalchemy.sql import Select

from src.common.utils.global_messages import GlobalMessages
from src.models.models import CourseModule, Wiki, WikiPage, WikiSubwiki
from src.modules.search.placements import Placement
from src.modules.search.schemas import ContentUrl, SearchResult
from src.modules.search.sources.base import SubItemSource, type_label


class WikiPageSource(SubItemSource):
    """Wiki pages of every subwiki, matched on title and rendered content."""

    modname = "wiki"
    activity = Wiki
    match_fields = (WikiPage.title, WikiPage.cached_content)
    order_by = (Wiki.name, WikiPage.title, WikiPage.id)

    def select_rows(self) -> Select:
        return (
            select(
                WikiPage.id,
                WikiPage.title,
                WikiPage.cached_content,
                Wiki.name.label("wiki_name"),
                CourseModule.id.label("cmid"),
            )
            .select_from(WikiPage)
            .join(WikiSubwiki, WikiPage.subwiki_id == WikiSubwiki.id)
            .join(Wiki, WikiSubwiki.wiki_id == Wiki.id)
        )

    def to_result(self, row: Any, placement: Placement) -> SearchResult:
        return SearchResult(
            title=f"{row.title} ({row.wiki_name})",
            result_type=type_label(self.modname, GlobalMessages.WIKI_PAGE),
            content=row.cached_content or "",
            url=ContentUrl(path="/mod/wiki/view.php", params={"pageid": row.id}),
        )
