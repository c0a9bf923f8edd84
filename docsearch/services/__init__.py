# docsearch Services Package
"""
Notification plumbing between the search engine, the view and navigation.
"""

from .channel import SearchResultsChannel
from .signals import Signal

__all__ = ["Signal", "SearchResultsChannel"]
