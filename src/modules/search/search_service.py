# src/modules/search/search_service.py

import asyncio
import logging
from typing import List, Optional, Sequence, Type

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from src.common.config import settings
from src.common.exceptions import AdapterQueryFailure, CourseNotFoundError
from src.models.models import Course
from src.modules.search.schemas import SearchResult
from src.modules.search.sources.activities import ActivitySource
from src.modules.search.sources.base import ContentSource
from src.modules.search.sources.book import BookChapterSource
from src.modules.search.sources.data import DataRecordSource
from src.modules.search.sources.feedback import FeedbackItemSource
from src.modules.search.sources.forum import ForumPostSource
from src.modules.search.sources.glossary import GlossaryEntrySource
from src.modules.search.sources.lesson import LessonPageSource
from src.modules.search.sources.quiz import QuizFeedbackSource
from src.modules.search.sources.wiki import WikiPageSource
from src.modules.search.sources.workshop import WorkshopSubmissionSource

logger = logging.getLogger(__name__)

# Registration order is the order results are returned in
DEFAULT_SOURCES: Sequence[Type[ContentSource]] = (
    ActivitySource,
    ForumPostSource,
    BookChapterSource,
    QuizFeedbackSource,
    LessonPageSource,
    WikiPageSource,
    GlossaryEntrySource,
    WorkshopSubmissionSource,
    FeedbackItemSource,
    DataRecordSource,
)

async def get_course_by_id(course_id: int, db: AsyncSession) -> Optional[Course]:
    return await db.get(Course, course_id)

class SearchAggregator:
    """
    Runs one search term against every content source of a course and
    concatenates their results in source registration order.

    Every source gets its own session from `session_factory`. A source that
    fails or exceeds `timeout` seconds contributes no results; the search
    carries on with the others.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker,
        sources: Optional[Sequence[Type[ContentSource]]] = None,
        concurrent: Optional[bool] = None,
        timeout: Optional[float] = None,
    ):
        self.session_factory = session_factory
        self.sources = tuple(DEFAULT_SOURCES if sources is None else sources)
        self.concurrent = settings.SEARCH_CONCURRENT if concurrent is None else concurrent
        self.timeout = settings.SEARCH_ADAPTER_TIMEOUT_SECONDS if timeout is None else timeout

    async def perform_search(self, term: Optional[str], course_id: int) -> List[SearchResult]:
        """
        Search all course content for `term`.

        Returns an empty list for a blank term without running any source.

        Raises:
            CourseNotFoundError: the course does not exist.
        """
        if term is None or not term.strip():
            return []
        term = term.strip()

        await self._ensure_course(course_id)

        if self.concurrent:
            batches = await asyncio.gather(
                *(self._run_source(source_cls, term, course_id) for source_cls in self.sources)
            )
        else:
            batches = [await self._run_source(source_cls, term, course_id) for source_cls in self.sources]

        results: List[SearchResult] = []
        for batch in batches:
            results.extend(batch)
        logger.info("Search for '%s' in course %s returned %d results", term, course_id, len(results))
        return results

    async def _ensure_course(self, course_id: int) -> None:
        async with self.session_factory() as session:
            course = await get_course_by_id(course_id, session)
        if course is None:
            raise CourseNotFoundError(course_id)

    async def _run_source(self, source_cls: Type[ContentSource], term: str, course_id: int) -> List[SearchResult]:
        async with self.session_factory() as session:
            source = source_cls(session)
            try:
                return await asyncio.wait_for(source.search(term, course_id), timeout=self.timeout)
            except AdapterQueryFailure as e:
                logger.warning("Skipping content source: %s", e, exc_info=e.cause)
            except asyncio.TimeoutError:
                logger.warning("Content source '%s' timed out after %.1fs", source.name, self.timeout)
        return []

async def perform_search(term: Optional[str], course_id: int, session_factory: async_sessionmaker) -> List[SearchResult]:
    """
    Search a course with the configured content sources.
    """
    aggregator = SearchAggregator(session_factory)
    return await aggregator.perform_search(term, course_id)
