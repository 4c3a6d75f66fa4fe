from typing import Any, Sequence

from sqlalchemy import select
from sqlalchemy.sql import Select

from src.common.utils.global_messages import GlobalMessages
from src.models.models import Book, BookChapter, CourseModule
from src.modules.search.placements import Placement
from src.modules.search.schemas import ContentUrl, SearchResult
from src.modules.search.sources.base import SubItemSource, type_label


class BookChapterSource(SubItemSource):
    """Book chapters in reading order. Hidden chapters are never returned."""

    modname = "book"
    activity = Book
    match_fields = (BookChapter.title, BookChapter.content)
    order_by = (Book.name, BookChapter.pagenum, BookChapter.id)

    def select_rows(self) -> Select:
        return (
            select(
                BookChapter.id,
                BookChapter.title,
                BookChapter.content,
                Book.name.label("book_name"),
                CourseModule.id.label("cmid"),
            )
            .select_from(BookChapter)
            .join(Book, BookChapter.book_id == Book.id)
        )

    def extra_filters(self) -> Sequence[Any]:
        return (BookChapter.hidden.is_(False),)

    def to_result(self, row: Any, placement: Placement) -> SearchResult:
        return SearchResult(
            title=f"{row.title} ({row.book_name})",
            result_type=type_label(self.modname, GlobalMessages.BOOK_CHAPTER),
            content=row.content or "",
            url=ContentUrl(path="/mod/book/view.php", params={"id": placement.id, "chapterid": row.id}),
        )
