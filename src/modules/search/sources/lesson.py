from typing import Any

from sqlalchemy import select
from sqlalchemy.sql import Select

from src.common.utils.global_messages import GlobalMessages
from src.models.models import CourseModule, Lesson, LessonPage
from src.modules.search.placements import Placement
from src.modules.search.schemas import SearchResult
from src.modules.search.sources.base import SubItemSource, type_label


class LessonPageSource(SubItemSource):
    modname = "lesson"
    activity = Lesson
    match_fields = (LessonPage.title, LessonPage.contents)
    order_by = (Lesson.name, LessonPage.title, LessonPage.id)

    def select_rows(self) -> Select:
        return (
            select(
                LessonPage.id,
                LessonPage.title,
                LessonPage.contents,
                Lesson.name.label("lesson_name"),
                CourseModule.id.label("cmid"),
            )
            .select_from(LessonPage)
            .join(Lesson, LessonPage.lesson_id == Lesson.id)
        )

    def to_result(self, row: Any, placement: Placement) -> SearchResult:
        return SearchResult(
            title=f"{row.title} ({row.lesson_name})",
            result_type=type_label(self.modname, GlobalMessages.LESSON_PAGE),
            content=row.contents or "",
            url=placement.url,
        )
