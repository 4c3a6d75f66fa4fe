class GlobalMessages:
    # Course Messages
    COURSE_NOT_FOUND = "Course not found."

    # Search Messages
    SEARCH_COURSE = "Search course content"
    SEARCH_BUTTON = "Search"
    SEARCH_RESULTS_FOR = "Search results for: {query}"
    SEARCH_PROMPT = "Type something to search course content."
    SEARCH_NO_RESULTS = 'No results found for "{query}"'
    SEARCH_RESULTS_FOUND = "{count} results found"

    # Content type labels
    MODULE_NAMES = {
        "assign": "Assignment",
        "book": "Book",
        "data": "Database",
        "feedback": "Feedback",
        "forum": "Forum",
        "glossary": "Glossary",
        "label": "Text and media area",
        "lesson": "Lesson",
        "page": "Page",
        "quiz": "Quiz",
        "resource": "File",
        "wiki": "Wiki",
        "workshop": "Workshop",
    }

    # Sub-item labels
    FORUM_POST = "Post"
    BOOK_CHAPTER = "Chapter"
    QUIZ_FEEDBACK = "Feedback"
    LESSON_PAGE = "Page"
    WIKI_PAGE = "Page"
    GLOSSARY_ENTRY = "Entry"
    WORKSHOP_SUBMISSION = "Submission"
    FEEDBACK_ITEM = "Item"
    DATA_RECORD = "Record"

    @classmethod
    def module_name(cls, modname: str) -> str:
        """Display name for a module type, falling back to the capitalised identifier."""
        return cls.MODULE_NAMES.get(modname, modname.capitalize())
