"""
Result Grouper - Shapes flat search results into named areas.

Each result is classified by its top-level folder:
  guide/a          → "guide"
  tutorial         → "tutorial" (if tutorial/... results are present)
  news             → "other"    (no children, no folder)

Within an area the first PRIORITY_COUNT results keep their relevance
order; the remaining results are sorted by title, case-insensitively.
Areas themselves are sorted by name.
"""

from typing import Iterable, Optional

from loguru import logger

from .models import (
    DEFAULT_AREA,
    PATH_SEPARATOR,
    PRIORITY_COUNT,
    SearchArea,
    SearchResult,
    SearchResults,
)


def filter_valid(results: Iterable[SearchResult]) -> list[SearchResult]:
    """Drop results with no title, keeping the order of the rest."""
    return [result for result in results if result.is_valid]


def sort_by_title(results: Iterable[SearchResult]) -> list[SearchResult]:
    """
    Sort results by title, ignoring case.

    sorted() is stable, so titles that are equal once uppercased keep
    their original relative order.
    """
    return sorted(results, key=lambda result: result.title.upper())


def check_priority_count(priority_count: int) -> int:
    """
    Validate a configured priority count.

    Raises:
        ValueError: If priority_count is not a positive integer
    """
    if isinstance(priority_count, bool) or not isinstance(priority_count, int) or priority_count < 1:
        raise ValueError(f"priority_count must be a positive integer, got {priority_count!r}")
    return priority_count


def compute_area_name(
    result: SearchResult,
    paths: Iterable[str],
    default_area: str = DEFAULT_AREA,
) -> str:
    """
    Compute the folder key used to bucket a result.

    Args:
        result: The result to classify
        paths: Paths of every result taking part in the grouping pass
        default_area: Area for top-level pages with no children

    Returns:
        The area name for this result
    """
    folder, _separator, rest = result.path.partition(PATH_SEPARATOR)
    if rest:
        return folder

    # Single-segment path ("news", "guide/" or ""): it becomes the index
    # of its folder only when some other result lives underneath it
    prefix = result.path + PATH_SEPARATOR
    if any(path.startswith(prefix) for path in paths):
        return result.path

    return default_area


def group_results(
    search_results: SearchResults,
    priority_count: int = PRIORITY_COUNT,
    default_area: str = DEFAULT_AREA,
) -> list[SearchArea]:
    """
    Group a query's results into areas.

    Args:
        search_results: Results of one completed query
        priority_count: Number of relevance-ordered pages per area
        default_area: Name of the catch-all area

    Returns:
        Areas sorted by name. Empty if no result has a title.

    Raises:
        ValueError: If priority_count is not positive
    """
    check_priority_count(priority_count)

    valid = filter_valid(search_results.results)
    dropped = len(search_results.results) - len(valid)
    if dropped:
        logger.debug(f"Dropped {dropped} untitled result(s) for query {search_results.query!r}")

    paths = [result.path for result in valid]

    # dict preserves insertion order, so each bucket keeps relevance order
    buckets: dict[str, list[SearchResult]] = {}
    for result in valid:
        name = compute_area_name(result, paths, default_area)
        buckets.setdefault(name, []).append(result)

    areas = [
        SearchArea(
            name=name,
            priority_pages=bucket[:priority_count],
            pages=sort_by_title(bucket[priority_count:]),
        )
        for name, bucket in sorted(buckets.items())
    ]

    logger.debug(
        f"Grouped {len(valid)} result(s) into {len(areas)} area(s) "
        f"for query {search_results.query!r}"
    )
    return areas


def find_area(areas: Iterable[SearchArea], name: str) -> Optional[SearchArea]:
    """Find an area by name."""
    for area in areas:
        if area.name == name:
            return area
    return None
