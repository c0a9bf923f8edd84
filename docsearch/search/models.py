"""
Search data model - Values exchanged between the search engine and the view.

SearchResult and SearchResults come from the external search engine.
SearchArea is produced fresh by every grouping pass and never outlives it.
"""

from dataclasses import dataclass, field
from typing import Optional

# Maximum number of relevance-ordered pages shown first in each area
PRIORITY_COUNT = 5

# Catch-all area for top-level pages without children
DEFAULT_AREA = "other"

PATH_SEPARATOR = "/"

NO_RESULTS_MESSAGE = "No results found."


@dataclass(frozen=True)
class SearchResult:
    """A single hit from the search engine."""
    path: str
    title: Optional[str]
    type: str
    keywords: str
    title_words: str

    @property
    def is_valid(self) -> bool:
        """Results without a title cannot be displayed or sorted."""
        return bool(self.title)


@dataclass(frozen=True)
class SearchResults:
    """One completed query: the query text and its ranked results."""
    query: str
    results: tuple[SearchResult, ...] = ()

    def __post_init__(self):
        # Accept any sequence but store an immutable copy
        object.__setattr__(self, "results", tuple(self.results))


@dataclass
class SearchArea:
    """A folder-like group of results."""
    name: str
    priority_pages: list[SearchResult] = field(default_factory=list)
    pages: list[SearchResult] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.priority_pages) + len(self.pages)

    @property
    def heading(self) -> str:
        """Header text for the area, e.g. "guide (13)"."""
        return f"{self.name} ({self.count})"
