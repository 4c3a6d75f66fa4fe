# src/modules/search/schemas.py

import enum
from typing import Dict, List, Optional, Union
from urllib.parse import urlencode
from pydantic import BaseModel, Field

class ContentUrl(BaseModel):
    """
    Location of a piece of course content: a path plus query parameters.
    Rendered to a string only at the presentation boundary.
    """
    path: str
    params: Dict[str, Union[int, str]] = {}

    class Config:
        frozen = True

    def out(self) -> str:
        if not self.params:
            return self.path
        return f"{self.path}?{urlencode(self.params)}"

class SearchResult(BaseModel):
    """Uniform record produced by every content source."""
    title: str = Field(..., min_length=1)
    result_type: str = Field(..., min_length=1)
    content: str = ""
    url: ContentUrl

    class Config:
        frozen = True

class SearchState(str, enum.Enum):
    EMPTY_QUERY = "empty_query"
    NO_RESULTS = "no_results"
    RESULTS = "results"

class SearchResultItem(BaseModel):
    title: str
    type: str  # e.g. "Forum - Post", "Page"
    preview: Optional[str] = None
    url: str

class SearchResponse(BaseModel):
    course_id: int
    course_name: str
    query: str
    state: SearchState
    heading: str
    message: str
    total_count: int = 0
    results: List[SearchResultItem] = []

class SearchFormResponse(BaseModel):
    course_id: int
    action: str
    method: str = "get"
    query_field: str = "q"
    course_field: str = "course_id"
    placeholder: str
    submit_label: str
