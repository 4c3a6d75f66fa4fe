# src/modules/search/visibility.py

from sqlalchemy import and_
from sqlalchemy.sql import Select

from src.models.models import CourseModule, ModuleType

LIKE_ESCAPE = "\\"

def like_pattern(term: str) -> str:
    """
    Build a substring LIKE pattern that matches `term` literally.
    """
    escaped = (
        term.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )
    return f"%{escaped}%"

def join_placement(stmt: Select, activity) -> Select:
    """Join an activity table to its course placement and module type."""
    return (
        stmt.join(CourseModule, CourseModule.instance_id == activity.id)
        .join(ModuleType, CourseModule.module_id == ModuleType.id)
    )

def visible_placement(course_id: int, modname: str, activity):
    """
    Restrict rows to placements of `modname` in the course that ordinary
    viewers can see and that are not being deleted.
    """
    return and_(
        activity.course_id == course_id,
        CourseModule.course_id == course_id,
        CourseModule.visible.is_(True),
        CourseModule.deletion_in_progress.is_(False),
        ModuleType.name == modname,
    )
