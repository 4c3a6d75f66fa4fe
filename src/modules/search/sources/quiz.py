from typing import Any

from sqlalchemy import select
from sqlalchemy.sql import Select

from src.common.utils.global_messages import GlobalMessages
from src.models.models import CourseModule, Quiz, QuizFeedback
from src.modules.search.placements import Placement
from src.modules.search.schemas import SearchResult
from src.modules.search.sources.base import SubItemSource, type_label


class QuizFeedbackSource(SubItemSource):
    """Overall feedback texts of quizzes. Links to the quiz itself."""

    modname = "quiz"
    activity = Quiz
    match_fields = (QuizFeedback.feedback_text,)
    order_by = (Quiz.name, QuizFeedback.id)

    def select_rows(self) -> Select:
        return (
            select(
                QuizFeedback.id,
                QuizFeedback.feedback_text,
                Quiz.name.label("quiz_name"),
                CourseModule.id.label("cmid"),
            )
            .select_from(QuizFeedback)
            .join(Quiz, QuizFeedback.quiz_id == Quiz.id)
        )

    def to_result(self, row: Any, placement: Placement) -> SearchResult:
        return SearchResult(
            title=f"{GlobalMessages.QUIZ_FEEDBACK} ({row.quiz_name})",
            result_type=type_label(self.modname, GlobalMessages.QUIZ_FEEDBACK),
            content=row.feedback_text or "",
            url=placement.url,
        )
