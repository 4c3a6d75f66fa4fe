from typing import Any

from sqlalchemy import select
from sqlalchemy.sql import Select

from src.common.config import settings
from src.common.utils.global_messages import GlobalMessages
from src.models.models import CourseModule, DataActivity, DataContent, DataRecord
from src.modules.search.placements import Placement
from src.modules.search.presenter import preview
from src.modules.search.schemas import ContentUrl, SearchResult
from src.modules.search.sources.base import SubItemSource, type_label


class DataRecordSource(SubItemSource):
    """
    Field contents of database activity records. Records have no title of
    their own, so the title is a short preview of the matched content.
    """

    modname = "data"
    activity = DataActivity
    match_fields = (DataContent.content,)
    order_by = (DataActivity.name, DataContent.content, DataContent.id)

    def select_rows(self) -> Select:
        return (
            select(
                DataContent.id,
                DataContent.content,
                DataRecord.id.label("record_id"),
                DataActivity.name.label("data_name"),
                CourseModule.id.label("cmid"),
            )
            .select_from(DataContent)
            .join(DataRecord, DataContent.record_id == DataRecord.id)
            .join(DataActivity, DataRecord.data_id == DataActivity.id)
        )

    def to_result(self, row: Any, placement: Placement) -> SearchResult:
        title_preview = preview(row.content, settings.SEARCH_TITLE_PREVIEW_LENGTH)
        return SearchResult(
            title=f"{title_preview} ({row.data_name})",
            result_type=type_label(self.modname, GlobalMessages.DATA_RECORD),
            content=row.content or "",
            url=ContentUrl(path="/mod/data/view.php", params={"id": placement.id, "rid": row.record_id}),
        )
