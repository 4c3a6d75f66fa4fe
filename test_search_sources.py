"""Tests for the individual content sources against a seeded course."""

from unittest.mock import AsyncMock, patch

import pytest
from sqlalchemy import select, update

from src.models.models import CourseModule, ModuleType, Page
from src.modules.search.placements import PlacementResolver
from src.modules.search.search_service import perform_search
from src.modules.search.schemas import SearchResult
from src.modules.search.sources.activities import ActivitySource
from src.modules.search.sources.base import SubItemSource
from src.modules.search.sources.book import BookChapterSource
from src.modules.search.sources.data import DataRecordSource
from src.modules.search.sources.forum import ForumPostSource
from src.modules.search.sources.glossary import GlossaryEntrySource
from src.modules.search.sources.quiz import QuizFeedbackSource
from src.modules.search.visibility import like_pattern


@pytest.mark.parametrize("term", ["midterm", "friday", "MIDTERM", "Exam is"])
async def test_forum_post_matches_subject_or_message_case_insensitively(session_factory, course_id, term) -> None:
    results = await perform_search(term, course_id, session_factory)

    assert len(results) == 1
    post = results[0]
    assert post.title == "Midterm dates (Announcements)"
    assert post.result_type == "Forum - Post"
    assert post.content == "Exam is Friday"
    assert post.url.path == "/mod/forum/discuss.php"
    assert set(post.url.params) == {"d"}


async def test_activity_match_links_to_activity(session_factory, course_id) -> None:
    results = await perform_search("regression", course_id, session_factory)

    # Hidden, half-deleted and other-course pages mention regression too
    assert [r.title for r in results] == ["Lecture slides"]
    assert results[0].result_type == "File"
    assert results[0].url.path == "/mod/resource/view.php"


async def test_activities_are_ordered_by_name(session_factory, course_id) -> None:
    async with session_factory() as session:
        results = await ActivitySource(session).search("e", course_id)

    titles = [r.title for r in results]
    assert titles == sorted(titles)
    assert "Secret answers" not in titles
    assert "Old regression notes" not in titles


async def test_hidden_book_chapter_is_excluded(session_factory, course_id) -> None:
    async with session_factory() as session:
        assert await BookChapterSource(session).search("unfinished", course_id) == []
        results = await BookChapterSource(session).search("median", course_id)

    assert len(results) == 1
    assert results[0].title == "Descriptive statistics (Course handbook)"
    assert results[0].result_type == "Book - Chapter"
    assert results[0].url.path == "/mod/book/view.php"
    assert set(results[0].url.params) == {"id", "chapterid"}


async def test_quiz_feedback_links_to_quiz(session_factory, course_id) -> None:
    async with session_factory() as session:
        results = await QuizFeedbackSource(session).search("great work", course_id)

    assert len(results) == 1
    assert results[0].title == "Feedback (Week 1 quiz)"
    assert results[0].url.path == "/mod/quiz/view.php"


async def test_glossary_entry_matches_concept(session_factory, course_id) -> None:
    async with session_factory() as session:
        results = await GlossaryEntrySource(session).search("variance", course_id)

    assert results[0].title == "Variance (Key terms)"
    assert results[0].url.path == "/mod/glossary/showentry.php"


async def test_data_record_title_is_plain_text_preview(session_factory, course_id) -> None:
    async with session_factory() as session:
        results = await DataRecordSource(session).search("height", course_id)

    assert len(results) == 1
    assert results[0].title == "Height measurements with low variance (Dataset library)"
    assert results[0].content == "<b>Height</b> measurements with low variance"
    assert set(results[0].url.params) == {"id", "rid"}


async def test_content_of_hidden_placement_never_appears(session_factory, course_id) -> None:
    assert len(await perform_search("Exam is Friday", course_id, session_factory)) == 1

    async with session_factory() as session:
        async with session.begin():
            await session.execute(
                update(CourseModule).where(CourseModule.course_id == course_id).values(visible=False)
            )

    assert await perform_search("Exam is Friday", course_id, session_factory) == []


async def test_wildcards_in_term_are_matched_literally(session_factory, course_id) -> None:
    assert like_pattern("50%_done") == "%50\\%\\_done%"
    assert await perform_search("%", course_id, session_factory) == []
    assert await perform_search("_", course_id, session_factory) == []


async def test_placement_resolver_skips_hidden_and_deleted(session_factory, course_id) -> None:
    async with session_factory() as session:
        resolver = await PlacementResolver.load(session, course_id)
        page_placements = (await session.execute(
            select(CourseModule.id, Page.name)
            .join(ModuleType, CourseModule.module_id == ModuleType.id)
            .join(Page, CourseModule.instance_id == Page.id)
            .where(ModuleType.name == "page", CourseModule.course_id == course_id)
        )).all()

    assert len(page_placements) == 3
    for cm_id, name in page_placements:
        resolved = resolver.resolve(cm_id)
        if name in ("Secret answers", "Old regression notes"):
            assert resolved is None
        else:
            assert resolved is not None
            assert resolved.modname == "page"
            assert resolved.url.out() == f"/mod/page/view.php?id={cm_id}"

    assert resolver.resolve(123456) is None


async def test_forum_post_in_placement_being_deleted_never_appears(session_factory, course_id) -> None:
    forum_placements = (
        select(CourseModule.id)
        .join(ModuleType, CourseModule.module_id == ModuleType.id)
        .where(ModuleType.name == "forum")
    )
    async with session_factory() as session:
        async with session.begin():
            await session.execute(
                update(CourseModule)
                .where(CourseModule.id.in_(forum_placements))
                .values(deletion_in_progress=True)
            )

    async with session_factory() as session:
        assert await ForumPostSource(session).search("Exam is Friday", course_id) == []


async def test_match_without_resolvable_placement_is_skipped(session_factory, course_id) -> None:
    async with session_factory() as session:
        assert len(await ForumPostSource(session).search("Exam is Friday", course_id)) == 1

        with patch.object(PlacementResolver, "load", AsyncMock(return_value=PlacementResolver({}))):
            assert await ForumPostSource(session).search("Exam is Friday", course_id) == []


class UntitledForumPostSource(ForumPostSource):
    def to_result(self, row, placement) -> SearchResult:
        return SearchResult(title="", result_type="Forum - Post", url=placement.url)


async def test_malformed_match_is_dropped(session_factory, course_id) -> None:
    async with session_factory() as session:
        assert await UntitledForumPostSource(session).search("Exam is Friday", course_id) == []


def test_activity_source_builds_its_own_union_query() -> None:
    assert issubclass(ForumPostSource, SubItemSource)
    assert not issubclass(ActivitySource, SubItemSource)
    assert not hasattr(ActivitySource, "select_rows")

    stmt = ActivitySource(None).build_query(like_pattern("slides"), 1)
    assert "UNION ALL" in str(stmt)
