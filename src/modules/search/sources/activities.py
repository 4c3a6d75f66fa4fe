from typing import Any

from sqlalchemy import literal, or_, select, union_all
from sqlalchemy.sql import Select

from src.models.models import Assign, Book, CourseModule, Forum, Label, Page, Quiz, Resource, Workshop
from src.modules.search.placements import Placement
from src.modules.search.schemas import SearchResult
from src.modules.search.sources.base import ContentSource, type_label
from src.modules.search.visibility import LIKE_ESCAPE, join_placement, visible_placement

# Activity tables whose name and description are searched directly
ACTIVITY_TABLES = (
    ("assign", Assign),
    ("resource", Resource),
    ("forum", Forum),
    ("page", Page),
    ("quiz", Quiz),
    ("workshop", Workshop),
    ("label", Label),
    ("book", Book),
)


class ActivitySource(ContentSource):
    """
    Matches activities themselves by name or description, across every
    activity type listed in ACTIVITY_TABLES.
    """

    modname = "activity"

    @property
    def name(self) -> str:
        return "activities"

    async def is_available(self) -> bool:
        # Each branch of the union joins the registry, so missing types drop out there
        return True

    def _branch(self, modname: str, activity, pattern: str, course_id: int) -> Select:
        stmt = select(
            CourseModule.id.label("cmid"),
            literal(modname).label("modname"),
            activity.name.label("title"),
            activity.intro.label("intro"),
        ).select_from(activity)
        return join_placement(stmt, activity).where(
            visible_placement(course_id, modname, activity),
            or_(
                activity.name.ilike(pattern, escape=LIKE_ESCAPE),
                activity.intro.ilike(pattern, escape=LIKE_ESCAPE),
            ),
        )

    def build_query(self, pattern: str, course_id: int) -> Select:
        matches = union_all(
            *(self._branch(modname, activity, pattern, course_id) for modname, activity in ACTIVITY_TABLES)
        ).subquery()
        return select(matches).order_by(matches.c.title, matches.c.cmid)

    def to_result(self, row: Any, placement: Placement) -> SearchResult:
        return SearchResult(
            title=row.title,
            result_type=type_label(row.modname),
            content=row.intro or "",
            url=placement.url,
        )
