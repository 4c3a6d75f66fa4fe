# src/common/exceptions.py

class CourseSearchError(Exception):
    """Base class for course search errors."""


class CourseNotFoundError(CourseSearchError):
    """The requested course does not exist. Fatal for the whole search request."""

    def __init__(self, course_id: int):
        self.course_id = course_id
        super().__init__(f"Course {course_id} not found")


class AdapterQueryFailure(CourseSearchError):
    """
    A content source failed to query the store.

    Raised at the content source boundary; the search aggregator catches it and
    carries on with the remaining sources.
    """

    def __init__(self, source: str, cause: Exception | None = None):
        self.source = source
        self.cause = cause
        message = f"Search over '{source}' content failed"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)
