# docsearch Panels Package
"""
Headless view models that sit between the search core and a renderer.
"""

from .search_results import SearchResultsPanel

__all__ = ["SearchResultsPanel"]
