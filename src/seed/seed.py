import asyncio
from typing import Dict, Iterable, Optional, Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from src.common.database.database import async_session, connect_to_db
from src.models.models import (
    Assign, Book, BookChapter, Course, CourseModule, DataActivity, DataContent, DataRecord,
    Feedback, FeedbackItem, Forum, ForumDiscussion, ForumPost, Glossary, GlossaryEntry,
    Label, Lesson, LessonPage, ModuleType, Page, Quiz, QuizFeedback, Resource, Wiki,
    WikiPage, WikiSubwiki, Workshop, WorkshopSubmission,
)

ALL_MODNAMES = (
    "assign", "book", "data", "feedback", "forum", "glossary", "label",
    "lesson", "page", "quiz", "resource", "wiki", "workshop",
)

async def seed_module_types(session: AsyncSession, modnames: Iterable[str] = ALL_MODNAMES) -> Dict[str, ModuleType]:
    """
    Register the installed activity types.
    """
    module_types = {name: ModuleType(name=name) for name in modnames}
    session.add_all(module_types.values())
    await session.flush()
    return module_types

async def add_activity(
    session: AsyncSession,
    course: Course,
    module_types: Dict[str, ModuleType],
    modname: str,
    activity_cls,
    name: str,
    intro: str = "",
    visible: bool = True,
    deletion_in_progress: bool = False,
) -> Tuple[object, Optional[CourseModule]]:
    """
    Create an activity instance and place it in the course. Types that are not
    registered get the instance row only, as left behind by an uninstalled plugin.
    """
    activity = activity_cls(course_id=course.id, name=name, intro=intro)
    session.add(activity)
    await session.flush()

    module_type = module_types.get(modname)
    if module_type is None:
        return activity, None
    placement = CourseModule(
        course_id=course.id,
        module_id=module_type.id,
        instance_id=activity.id,
        visible=visible,
        deletion_in_progress=deletion_in_progress,
    )
    session.add(placement)
    await session.flush()
    return activity, placement

async def seed_course_content(session: AsyncSession, modnames: Iterable[str] = ALL_MODNAMES) -> Course:
    """
    Seed a demo course with one piece of content of every searchable type,
    plus hidden and half-deleted activities that must never show up in search.
    """
    module_types = await seed_module_types(session, modnames)

    course = Course(fullname="Introduction to Statistics", shortname="STATS101")
    other_course = Course(fullname="Advanced Statistics", shortname="STATS201")
    session.add_all([course, other_course])
    await session.flush()

    await add_activity(session, course, module_types, "page", Page, "Course syllabus",
                       "<p>Weekly topics and <strong>grading</strong> policy.</p>")
    await add_activity(session, course, module_types, "assign", Assign, "Homework 1",
                       "Compute the mean and median of the sample.")
    await add_activity(session, course, module_types, "resource", Resource, "Lecture slides",
                       "Slides for the regression lecture.")
    await add_activity(session, course, module_types, "label", Label, "Welcome",
                       "Welcome to the course!")
    await add_activity(session, course, module_types, "page", Page, "Secret answers",
                       "Regression answers for the homework.", visible=False)
    await add_activity(session, course, module_types, "page", Page, "Old regression notes",
                       "Being removed.", deletion_in_progress=True)
    await add_activity(session, other_course, module_types, "page", Page, "Regression deep dive",
                       "Belongs to another course.")

    forum, _ = await add_activity(session, course, module_types, "forum", Forum, "Announcements")
    discussion = ForumDiscussion(forum_id=forum.id, name="Exam schedule")
    session.add(discussion)
    await session.flush()
    session.add(ForumPost(discussion_id=discussion.id, subject="Midterm dates", message="Exam is Friday"))

    book, _ = await add_activity(session, course, module_types, "book", Book, "Course handbook")
    session.add_all([
        BookChapter(book_id=book.id, pagenum=1, title="Descriptive statistics",
                    content="<p>Mean, median and mode.</p>"),
        BookChapter(book_id=book.id, pagenum=2, title="Draft chapter",
                    content="Unfinished notes on variance.", hidden=True),
    ])

    quiz, _ = await add_activity(session, course, module_types, "quiz", Quiz, "Week 1 quiz")
    session.add(QuizFeedback(quiz_id=quiz.id, feedback_text="Great work on variance!",
                             min_grade=50.0, max_grade=100.0))

    lesson, _ = await add_activity(session, course, module_types, "lesson", Lesson, "Probability basics")
    session.add(LessonPage(lesson_id=lesson.id, title="Coin flips",
                           contents="Each flip has probability one half."))

    wiki, _ = await add_activity(session, course, module_types, "wiki", Wiki, "Class wiki")
    subwiki = WikiSubwiki(wiki_id=wiki.id)
    session.add(subwiki)
    await session.flush()
    session.add(WikiPage(subwiki_id=subwiki.id, title="Study groups",
                         cached_content="Groups meet on Tuesday to discuss variance."))

    glossary, _ = await add_activity(session, course, module_types, "glossary", Glossary, "Key terms")
    session.add(GlossaryEntry(glossary_id=glossary.id, concept="Variance",
                              definition="The average squared deviation from the mean."))

    workshop, _ = await add_activity(session, course, module_types, "workshop", Workshop, "Peer review")
    session.add(WorkshopSubmission(workshop_id=workshop.id, title="Survey analysis",
                                   content="We measured the variance of commute times."))

    feedback, _ = await add_activity(session, course, module_types, "feedback", Feedback, "Course evaluation")
    session.add(FeedbackItem(feedback_id=feedback.id, name="Pace",
                             presentation="Was the pace of the variance unit right?"))

    data, _ = await add_activity(session, course, module_types, "data", DataActivity, "Dataset library")
    record = DataRecord(data_id=data.id)
    session.add(record)
    await session.flush()
    session.add(DataContent(record_id=record.id, content="<b>Height</b> measurements with low variance"))

    await session.flush()
    return course

async def seed_all():
    """
    Create the tables and seed the demo course.
    """
    await connect_to_db()
    async with async_session() as session:
        # Using a transaction block to ensure all seeding operations succeed.
        async with session.begin():
            await seed_course_content(session)

if __name__ == "__main__":
    asyncio.run(seed_all())
