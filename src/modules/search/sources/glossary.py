from typing import Any

from sqlalchemy import select
from sqlalchemy.sql import Select

from src.common.utils.global_messages import GlobalMessages
from src.models.models import CourseModule, Glossary, GlossaryEntry
from src.modules.search.placements import Placement
from src.modules.search.schemas import ContentUrl, SearchResult
from src.modules.search.sources.base import SubItemSource, type_label


class GlossaryEntrySource(SubItemSource):
    modname = "glossary"
    activity = Glossary
    match_fields = (GlossaryEntry.concept, GlossaryEntry.definition)
    order_by = (Glossary.name, GlossaryEntry.concept, GlossaryEntry.id)

    def select_rows(self) -> Select:
        return (
            select(
                GlossaryEntry.id,
                GlossaryEntry.concept,
                GlossaryEntry.definition,
                Glossary.name.label("glossary_name"),
                CourseModule.id.label("cmid"),
            )
            .select_from(GlossaryEntry)
            .join(Glossary, GlossaryEntry.glossary_id == Glossary.id)
        )

    def to_result(self, row: Any, placement: Placement) -> SearchResult:
        return SearchResult(
            title=f"{row.concept} ({row.glossary_name})",
            result_type=type_label(self.modname, GlobalMessages.GLOSSARY_ENTRY),
            content=row.definition or "",
            url=ContentUrl(path="/mod/glossary/showentry.php", params={"eid": row.id}),
        )
