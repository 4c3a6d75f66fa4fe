"""
Abstract base class for course content sources.
"""
import logging
from abc import ABC, abstractmethod
from typing import Any, List, Optional, Sequence

from pydantic import ValidationError
from sqlalchemy import or_
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import Select

from src.common.exceptions import AdapterQueryFailure
from src.common.utils.global_messages import GlobalMessages
from src.modules.search.availability import is_module_available
from src.modules.search.placements import Placement, PlacementResolver
from src.modules.search.schemas import SearchResult
from src.modules.search.visibility import LIKE_ESCAPE, join_placement, like_pattern, visible_placement

logger = logging.getLogger(__name__)


def type_label(modname: str, sub_kind: Optional[str] = None) -> str:
    """Result type label, e.g. "Forum - Post"."""
    name = GlobalMessages.module_name(modname)
    return f"{name} - {sub_kind}" if sub_kind else name


class ContentSource(ABC):
    """
    Searches one content type of a course.

    Subclasses build the matching statement (`build_query`) and shape each
    matched row into a SearchResult. The shared `search` runs the
    availability check, the query and the placement lookup.
    """

    # Module type name in the registry, e.g. "forum"
    modname: str

    def __init__(self, db: AsyncSession):
        self.db = db

    @property
    def name(self) -> str:
        return self.modname

    @abstractmethod
    def build_query(self, pattern: str, course_id: int) -> Select:
        """
        Statement selecting the visible rows of the course matching the LIKE
        `pattern`, in result order. Must include the placement id labelled `cmid`.
        """
        pass

    @abstractmethod
    def to_result(self, row: Any, placement: Placement) -> SearchResult:
        """Shape one matched row into a SearchResult."""
        pass

    async def is_available(self) -> bool:
        return await is_module_available(self.modname, self.db)

    async def search(self, term: str, course_id: int) -> List[SearchResult]:
        """
        Find content of this type in the course whose text contains `term`.

        Raises:
            AdapterQueryFailure: the store could not be queried.
        """
        try:
            if not await self.is_available():
                logger.debug("Content type '%s' is not installed, skipping", self.modname)
                return []

            result = await self.db.execute(self.build_query(like_pattern(term), course_id))
            rows = result.all()
            if not rows:
                return []
            placements = await PlacementResolver.load(self.db, course_id)
        except SQLAlchemyError as e:
            raise AdapterQueryFailure(self.name, e) from e

        results = []
        for row in rows:
            placement = placements.resolve(row.cmid)
            if placement is None:
                logger.debug("Placement %s for '%s' match is gone, skipping row", row.cmid, self.name)
                continue
            try:
                results.append(self.to_result(row, placement))
            except ValidationError as e:
                logger.debug("Dropping malformed '%s' match in placement %s: %s", self.name, row.cmid, e)
        return results


class SubItemSource(ContentSource):
    """
    Content stored in rows below an activity, e.g. forum posts or book chapters.

    Subclasses describe their rows (`select_rows`), which text columns are
    matched and how matches are ordered; the query joins the rows to their
    placement and applies the visibility filter.
    """

    # Activity table owning the content rows
    activity: Any
    # Text columns matched case-insensitively; a row matches if any column does
    match_fields: Sequence[Any] = ()
    # Stable ordering of matches, ending with a unique column
    order_by: Sequence[Any] = ()

    @abstractmethod
    def select_rows(self) -> Select:
        """
        Select the content rows joined up to the activity table.
        Must include the placement id labelled `cmid`.
        """
        pass

    def extra_filters(self) -> Sequence[Any]:
        """Additional criteria, e.g. excluding hidden sub-items."""
        return ()

    def match_clause(self, pattern: str):
        return or_(*(field.ilike(pattern, escape=LIKE_ESCAPE) for field in self.match_fields))

    def build_query(self, pattern: str, course_id: int) -> Select:
        stmt = join_placement(self.select_rows(), self.activity)
        return (
            stmt.where(
                visible_placement(course_id, self.modname, self.activity),
                self.match_clause(pattern),
                *self.extra_filters(),
            )
            .order_by(*self.order_by)
        )
