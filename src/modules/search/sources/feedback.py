from typing import Any

from sqlalchemy import select
from sqlalchemy.sql import Select

from src.common.utils.global_messages import GlobalMessages
from src.models.models import CourseModule, Feedback, FeedbackItem
from src.modules.search.placements import Placement
from src.modules.search.schemas import SearchResult
from src.modules.search.sources.base import SubItemSource, type_label


class FeedbackItemSource(SubItemSource):
    """Questions of feedback surveys. Links to the survey itself."""

    modname = "feedback"
    activity = Feedback
    match_fields = (FeedbackItem.name, FeedbackItem.presentation)
    order_by = (Feedback.name, FeedbackItem.name, FeedbackItem.id)

    def select_rows(self) -> Select:
        return (
            select(
                FeedbackItem.id,
                FeedbackItem.name,
                FeedbackItem.presentation,
                Feedback.name.label("feedback_name"),
                CourseModule.id.label("cmid"),
            )
            .select_from(FeedbackItem)
            .join(Feedback, FeedbackItem.feedback_id == Feedback.id)
        )

    def to_result(self, row: Any, placement: Placement) -> SearchResult:
        return SearchResult(
            title=f"{row.name} ({row.feedback_name})",
            result_type=type_label(self.modname, GlobalMessages.FEEDBACK_ITEM),
            content=row.presentation or "",
            url=placement.url,
        )
