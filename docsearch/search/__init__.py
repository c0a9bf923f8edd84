"""
Search package - Result data model, grouping and click gating.

The external search engine produces flat, relevance-ordered results.
This package shapes them into areas for display and decides which
pointer activations count as in-app selections.
"""

from .click_gate import PointerActivation, should_select
from .grouping import compute_area_name, filter_valid, group_results, sort_by_title
from .models import (
    DEFAULT_AREA,
    NO_RESULTS_MESSAGE,
    PRIORITY_COUNT,
    SearchArea,
    SearchResult,
    SearchResults,
)

__all__ = [
    "SearchResult",
    "SearchResults",
    "SearchArea",
    "PRIORITY_COUNT",
    "DEFAULT_AREA",
    "NO_RESULTS_MESSAGE",
    "group_results",
    "compute_area_name",
    "filter_valid",
    "sort_by_title",
    "should_select",
    "PointerActivation",
]
