from typing import Any

from sqlalchemy import select
from sqlalchemy.sql import Select

from src.common.utils.global_messages import GlobalMessages
from src.models.models import CourseModule, Workshop, WorkshopSubmission
from src.modules.search.placements import Placement
from src.modules.search.schemas import ContentUrl, SearchResult
from src.modules.search.sources.base import SubItemSource, type_label


class WorkshopSubmissionSource(SubItemSource):
    modname = "workshop"
    activity = Workshop
    match_fields = (WorkshopSubmission.title, WorkshopSubmission.content)
    order_by = (Workshop.name, WorkshopSubmission.title, WorkshopSubmission.id)

    def select_rows(self) -> Select:
        return (
            select(
                WorkshopSubmission.id,
                WorkshopSubmission.title,
                WorkshopSubmission.content,
                Workshop.name.label("workshop_name"),
                CourseModule.id.label("cmid"),
            )
            .select_from(WorkshopSubmission)
            .join(Workshop, WorkshopSubmission.workshop_id == Workshop.id)
        )

    def to_result(self, row: Any, placement: Placement) -> SearchResult:
        return SearchResult(
            title=f"{row.title} ({row.workshop_name})",
            result_type=type_label(self.modname, GlobalMessages.WORKSHOP_SUBMISSION),
            content=row.content or "",
            url=ContentUrl(path="/mod/workshop/submission.php", params={"id": row.id}),
        )
