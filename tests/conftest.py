"""
Shared test fixtures for the docsearch test suite.

Provides search result builders and real settings files on disk
(no mocking of the filesystem).
"""

import pytest
import toml

from docsearch.search.models import SearchResult, SearchResults


def make_result(path, title, type="", keywords="", title_words=""):
    """Build a SearchResult with empty values for the unused fields."""
    return SearchResult(
        path=path,
        title=title,
        type=type,
        keywords=keywords,
        title_words=title_words,
    )


@pytest.fixture
def test_results():
    """
    A full ranked result set: 2 api pages and 13 guide pages.

    Slice what you need, e.g. test_results[:3].
    """
    results = [
        make_result("guide/a", "Guide A"),
        make_result("api/d", "API D"),
        make_result("guide/b", "Guide B"),
        make_result("guide/a/c", "Guide A - C"),
        make_result("api/c", "API C"),
    ]
    # Enough guide pages to overflow the priority list
    results.extend(make_result(f"guide/{letter}", f"Guide {letter}") for letter in "nmlkjihgfe")
    return results


@pytest.fixture
def search_results(test_results):
    return SearchResults(query="guide", results=test_results)


@pytest.fixture
def tmp_settings(tmp_path):
    """Create a real settings TOML file with all sections."""
    settings_path = tmp_path / "settings.toml"
    data = {
        "results": {
            "priority_count": 3,
            "default_area": "misc",
            "no_results_message": "Nothing matched.",
        },
        "logging": {"level": "DEBUG"},
    }
    settings_path.write_text(toml.dumps(data))
    return settings_path
