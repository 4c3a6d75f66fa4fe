# src/modules/search/search_controller.py

from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from src.common.config import settings
from src.common.database.database import get_db_session, get_session_factory
from src.common.exceptions import CourseNotFoundError
from src.common.utils.global_messages import GlobalMessages
from src.modules.search import search_service, schemas
from src.modules.search.presenter import present_results

router = APIRouter(prefix="/search", tags=["search"])

@router.get("", response_model=schemas.SearchResponse)
async def search(
    course_id: int = Query(..., description="Course to search in"),
    q: str = Query("", description="Search query"),
    db: AsyncSession = Depends(get_db_session),
    session_factory: async_sessionmaker = Depends(get_session_factory)
):
    """
    Course content search endpoint.

    Performs a case-insensitive substring search over the activities of a course
    and the content inside them (forum posts, book chapters, wiki pages, ...).

    Query Parameters:
    - **course_id**: The course to search in.
    - **q**: Search query. An empty query returns a prompt instead of results.
    """
    course = await search_service.get_course_by_id(course_id, db)
    if not course:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=GlobalMessages.COURSE_NOT_FOUND
        )

    query = q.strip()
    if not query:
        return schemas.SearchResponse(
            course_id=course.id,
            course_name=course.fullname,
            query=query,
            state=schemas.SearchState.EMPTY_QUERY,
            heading=GlobalMessages.SEARCH_COURSE,
            message=GlobalMessages.SEARCH_PROMPT,
        )

    try:
        results = await search_service.perform_search(query, course.id, session_factory)
    except CourseNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=GlobalMessages.COURSE_NOT_FOUND
        )

    heading = GlobalMessages.SEARCH_RESULTS_FOR.format(query=query)
    if not results:
        return schemas.SearchResponse(
            course_id=course.id,
            course_name=course.fullname,
            query=query,
            state=schemas.SearchState.NO_RESULTS,
            heading=heading,
            message=GlobalMessages.SEARCH_NO_RESULTS.format(query=query),
        )

    return schemas.SearchResponse(
        course_id=course.id,
        course_name=course.fullname,
        query=query,
        state=schemas.SearchState.RESULTS,
        heading=heading,
        message=GlobalMessages.SEARCH_RESULTS_FOUND.format(count=len(results)),
        total_count=len(results),
        results=present_results(results, settings.SEARCH_PREVIEW_LENGTH),
    )

@router.get("/form", response_model=schemas.SearchFormResponse)
async def search_form(
    course_id: int = Query(..., description="Course the search box belongs to"),
    db: AsyncSession = Depends(get_db_session)
):
    """
    Describe the course search box: where it submits to and how it is labelled.
    """
    course = await search_service.get_course_by_id(course_id, db)
    if not course:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=GlobalMessages.COURSE_NOT_FOUND
        )
    return schemas.SearchFormResponse(
        course_id=course.id,
        action=router.prefix,
        placeholder=GlobalMessages.SEARCH_COURSE,
        submit_label=GlobalMessages.SEARCH_BUTTON,
    )
