from sqlalchemy import Boolean, Column, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, backref, declarative_base, declared_attr, relationship

Base = declarative_base()

class Course(Base):
    __tablename__ = "courses"

    id = Column(Integer, primary_key=True)
    fullname = Column(String(255), nullable=False)
    shortname = Column(String(100), nullable=False, index=True)

    def __repr__(self):
        return f"<Course(id={self.id}, shortname={self.shortname})>"

class ModuleType(Base):
    """
    Registry of installed activity types. A content type without a row here
    is not available in this deployment.
    """
    __tablename__ = "modules"

    id = Column(Integer, primary_key=True)
    name = Column(String(20), unique=True, nullable=False, index=True)

    def __repr__(self):
        return f"<ModuleType(id={self.id}, name={self.name})>"

class CourseModule(Base):
    """
    Placement of one activity instance inside a course.
    """
    __tablename__ = "course_modules"

    id = Column(Integer, primary_key=True)
    course_id = Column(Integer, ForeignKey("courses.id"), nullable=False, index=True)
    module_id = Column(Integer, ForeignKey("modules.id"), nullable=False, index=True)
    # Primary key of the row in the activity table named by module_id
    instance_id = Column(Integer, nullable=False, index=True)
    visible = Column(Boolean, nullable=False, default=True)
    deletion_in_progress = Column(Boolean, nullable=False, default=False)

    course: Mapped[Course] = relationship("Course", backref=backref("course_modules", cascade="all, delete-orphan"))

    def __repr__(self):
        return (f"<CourseModule(id={self.id}, course_id={self.course_id}, module_id={self.module_id}, "
                f"instance_id={self.instance_id}, visible={self.visible})>")

class ActivityMixin:
    """Columns shared by every activity instance table."""

    id = Column(Integer, primary_key=True)
    name = Column(String(255), nullable=False)
    intro = Column(Text, nullable=True)

    @declared_attr
    def course_id(cls):
        return Column(Integer, ForeignKey("courses.id"), nullable=False, index=True)

    def __repr__(self):
        return f"<{type(self).__name__}(id={self.id}, name={self.name}, course_id={self.course_id})>"

class Assign(ActivityMixin, Base):
    __tablename__ = "assign"

class Resource(ActivityMixin, Base):
    __tablename__ = "resource"

class Page(ActivityMixin, Base):
    __tablename__ = "page"

class Label(ActivityMixin, Base):
    __tablename__ = "label"

class Forum(ActivityMixin, Base):
    __tablename__ = "forum"

class ForumDiscussion(Base):
    __tablename__ = "forum_discussions"

    id = Column(Integer, primary_key=True)
    forum_id = Column(Integer, ForeignKey("forum.id"), nullable=False, index=True)
    name = Column(String(255), nullable=False)

    forum: Mapped[Forum] = relationship("Forum", backref=backref("discussions", cascade="all, delete-orphan"))

    def __repr__(self):
        return f"<ForumDiscussion(id={self.id}, forum_id={self.forum_id}, name={self.name})>"

class ForumPost(Base):
    __tablename__ = "forum_posts"

    id = Column(Integer, primary_key=True)
    discussion_id = Column(Integer, ForeignKey("forum_discussions.id"), nullable=False, index=True)
    subject = Column(String(255), nullable=False)
    message = Column(Text, nullable=False, default="")

    discussion: Mapped[ForumDiscussion] = relationship(
        "ForumDiscussion", backref=backref("posts", cascade="all, delete-orphan")
    )

    def __repr__(self):
        return f"<ForumPost(id={self.id}, discussion_id={self.discussion_id}, subject={self.subject})>"

class Book(ActivityMixin, Base):
    __tablename__ = "book"

class BookChapter(Base):
    __tablename__ = "book_chapters"

    id = Column(Integer, primary_key=True)
    book_id = Column(Integer, ForeignKey("book.id"), nullable=False, index=True)
    pagenum = Column(Integer, nullable=False, default=0)
    title = Column(String(255), nullable=False)
    content = Column(Text, nullable=False, default="")
    hidden = Column(Boolean, nullable=False, default=False)

    book: Mapped[Book] = relationship("Book", backref=backref("chapters", cascade="all, delete-orphan"))

    def __repr__(self):
        return f"<BookChapter(id={self.id}, book_id={self.book_id}, pagenum={self.pagenum}, hidden={self.hidden})>"

class Quiz(ActivityMixin, Base):
    __tablename__ = "quiz"

class QuizFeedback(Base):
    __tablename__ = "quiz_feedback"

    id = Column(Integer, primary_key=True)
    quiz_id = Column(Integer, ForeignKey("quiz.id"), nullable=False, index=True)
    feedback_text = Column(Text, nullable=False, default="")
    min_grade = Column(Float, nullable=False, default=0.0)
    max_grade = Column(Float, nullable=False, default=0.0)

    quiz: Mapped[Quiz] = relationship("Quiz", backref=backref("feedback", cascade="all, delete-orphan"))

    def __repr__(self):
        return f"<QuizFeedback(id={self.id}, quiz_id={self.quiz_id}, min_grade={self.min_grade}, max_grade={self.max_grade})>"

class Lesson(ActivityMixin, Base):
    __tablename__ = "lesson"

class LessonPage(Base):
    __tablename__ = "lesson_pages"

    id = Column(Integer, primary_key=True)
    lesson_id = Column(Integer, ForeignKey("lesson.id"), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    contents = Column(Text, nullable=False, default="")

    lesson: Mapped[Lesson] = relationship("Lesson", backref=backref("pages", cascade="all, delete-orphan"))

    def __repr__(self):
        return f"<LessonPage(id={self.id}, lesson_id={self.lesson_id}, title={self.title})>"

class Wiki(ActivityMixin, Base):
    __tablename__ = "wiki"

class WikiSubwiki(Base):
    __tablename__ = "wiki_subwikis"

    id = Column(Integer, primary_key=True)
    wiki_id = Column(Integer, ForeignKey("wiki.id"), nullable=False, index=True)

    wiki: Mapped[Wiki] = relationship("Wiki", backref=backref("subwikis", cascade="all, delete-orphan"))

    def __repr__(self):
        return f"<WikiSubwiki(id={self.id}, wiki_id={self.wiki_id})>"

class WikiPage(Base):
    __tablename__ = "wiki_pages"

    id = Column(Integer, primary_key=True)
    subwiki_id = Column(Integer, ForeignKey("wiki_subwikis.id"), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    cached_content = Column(Text, nullable=False, default="")

    subwiki: Mapped[WikiSubwiki] = relationship("WikiSubwiki", backref=backref("pages", cascade="all, delete-orphan"))

    def __repr__(self):
        return f"<WikiPage(id={self.id}, subwiki_id={self.subwiki_id}, title={self.title})>"

class Glossary(ActivityMixin, Base):
    __tablename__ = "glossary"

class GlossaryEntry(Base):
    __tablename__ = "glossary_entries"

    id = Column(Integer, primary_key=True)
    glossary_id = Column(Integer, ForeignKey("glossary.id"), nullable=False, index=True)
    concept = Column(String(255), nullable=False)
    definition = Column(Text, nullable=False, default="")

    glossary: Mapped[Glossary] = relationship("Glossary", backref=backref("entries", cascade="all, delete-orphan"))

    def __repr__(self):
        return f"<GlossaryEntry(id={self.id}, glossary_id={self.glossary_id}, concept={self.concept})>"

class Workshop(ActivityMixin, Base):
    __tablename__ = "workshop"

class WorkshopSubmission(Base):
    __tablename__ = "workshop_submissions"

    id = Column(Integer, primary_key=True)
    workshop_id = Column(Integer, ForeignKey("workshop.id"), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    content = Column(Text, nullable=True)

    workshop: Mapped[Workshop] = relationship("Workshop", backref=backref("submissions", cascade="all, delete-orphan"))

    def __repr__(self):
        return f"<WorkshopSubmission(id={self.id}, workshop_id={self.workshop_id}, title={self.title})>"

class Feedback(ActivityMixin, Base):
    __tablename__ = "feedback"

class FeedbackItem(Base):
    __tablename__ = "feedback_item"

    id = Column(Integer, primary_key=True)
    feedback_id = Column(Integer, ForeignKey("feedback.id"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    presentation = Column(Text, nullable=False, default="")

    feedback: Mapped[Feedback] = relationship("Feedback", backref=backref("items", cascade="all, delete-orphan"))

    def __repr__(self):
        return f"<FeedbackItem(id={self.id}, feedback_id={self.feedback_id}, name={self.name})>"

class DataActivity(ActivityMixin, Base):
    """The database activity: user-defined records made of field contents."""
    __tablename__ = "data"

class DataRecord(Base):
    __tablename__ = "data_records"

    id = Column(Integer, primary_key=True)
    data_id = Column(Integer, ForeignKey("data.id"), nullable=False, index=True)

    data: Mapped[DataActivity] = relationship("DataActivity", backref=backref("records", cascade="all, delete-orphan"))

    def __repr__(self):
        return f"<DataRecord(id={self.id}, data_id={self.data_id})>"

class DataContent(Base):
    __tablename__ = "data_content"

    id = Column(Integer, primary_key=True)
    record_id = Column(Integer, ForeignKey("data_records.id"), nullable=False, index=True)
    content = Column(Text, nullable=True)

    record: Mapped[DataRecord] = relationship("DataRecord", backref=backref("contents", cascade="all, delete-orphan"))

    def __repr__(self):
        return f"<DataContent(id={self.id}, record_id={self.record_id})>"
