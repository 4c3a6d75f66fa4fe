from typing import Any

from sqlalchemy import select
from sqlalchemy.sql import Select

from src.common.utils.global_messages import GlobalMessages
from src.models.models import CourseModule, Forum, ForumDiscussion, ForumPost
from src.modules.search.placements import Placement
from src.modules.search.schemas import ContentUrl, SearchResult
from src.modules.search.sources.base import SubItemSource, type_label


class ForumPostSource(SubItemSource):
    """Forum posts, linked to the discussion they belong to."""

    modname = "forum"
    activity = Forum
    match_fields = (ForumPost.subject, ForumPost.message)
    order_by = (ForumPost.subject, ForumPost.id)

    def select_rows(self) -> Select:
        return (
            select(
                ForumPost.id,
                ForumPost.subject,
                ForumPost.message,
                Forum.name.label("forum_name"),
                ForumDiscussion.id.label("discussion_id"),
                CourseModule.id.label("cmid"),
            )
            .select_from(ForumPost)
            .join(ForumDiscussion, ForumPost.discussion_id == ForumDiscussion.id)
            .join(Forum, ForumDiscussion.forum_id == Forum.id)
        )

    def to_result(self, row: Any, placement: Placement) -> SearchResult:
        return SearchResult(
            title=f"{row.subject} ({row.forum_name})",
            result_type=type_label(self.modname, GlobalMessages.FORUM_POST),
            content=row.message or "",
            url=ContentUrl(path="/mod/forum/discuss.php", params={"d": row.discussion_id}),
        )
