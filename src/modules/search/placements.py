# src/modules/search/placements.py

from dataclasses import dataclass
from typing import Dict, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.models.models import CourseModule, ModuleType
from src.modules.search.schemas import ContentUrl


@dataclass(frozen=True)
class Placement:
    """An activity placed in a course, as seen by course participants."""
    id: int
    modname: str
    instance_id: int
    visible: bool
    deletion_in_progress: bool

    @property
    def url(self) -> ContentUrl:
        return ContentUrl(path=f"/mod/{self.modname}/view.php", params={"id": self.id})


class PlacementResolver:
    """
    Looks up activity placements of one course.

    All placements are loaded with a single query, so a lookup per matched
    row costs nothing extra.
    """

    def __init__(self, placements: Dict[int, Placement]):
        self._placements = placements

    @classmethod
    async def load(cls, db: AsyncSession, course_id: int) -> "PlacementResolver":
        stmt = (
            select(
                CourseModule.id,
                ModuleType.name,
                CourseModule.instance_id,
                CourseModule.visible,
                CourseModule.deletion_in_progress,
            )
            .join(ModuleType, CourseModule.module_id == ModuleType.id)
            .where(CourseModule.course_id == course_id)
        )
        result = await db.execute(stmt)
        placements = {
            row.id: Placement(
                id=row.id,
                modname=row.name,
                instance_id=row.instance_id,
                visible=bool(row.visible),
                deletion_in_progress=bool(row.deletion_in_progress),
            )
            for row in result.all()
        }
        return cls(placements)

    def resolve(self, cm_id: int) -> Optional[Placement]:
        """
        Return the placement, or None when it is missing, hidden or being deleted.
        """
        placement = self._placements.get(cm_id)
        if placement is None or not placement.visible or placement.deletion_in_progress:
            return None
        return placement
