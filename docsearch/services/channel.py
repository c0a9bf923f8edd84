"""
Search Results Channel - Push-style stream of completed queries.

The search engine pushes one SearchResults value per completed query.
Each value replaces the previous one entirely (last write wins); the
channel never merges or reorders values. Discarding stale results for
an older query is the producer's responsibility.
"""

from typing import Callable, Optional

from loguru import logger

from docsearch.search.models import SearchResults
from docsearch.services.signals import Signal


class SearchResultsChannel:
    """
    Holds the latest SearchResults and notifies subscribers of new ones.

    Signals:
        results: Emitted with each pushed SearchResults value
    """

    def __init__(self):
        self._latest: Optional[SearchResults] = None
        self._signal = Signal("results")

    @property
    def latest(self) -> Optional[SearchResults]:
        """The most recently pushed value, or None before the first push."""
        return self._latest

    def push(self, search_results: SearchResults) -> None:
        """
        Publish a new set of results.

        Args:
            search_results: Complete replacement for the visible results
        """
        self._latest = search_results
        logger.debug(
            f"Pushed {len(search_results.results)} result(s) for query {search_results.query!r}"
        )
        self._signal.emit(search_results)

    def subscribe(
        self,
        callback: Callable[[SearchResults], None],
        replay: bool = False,
    ) -> int:
        """
        Register a subscriber.

        Args:
            callback: Called with each pushed SearchResults
            replay: Deliver the current latest value immediately, if any

        Returns:
            Subscription id to pass to unsubscribe()
        """
        handler_id = self._signal.connect(callback)
        if replay and self._latest is not None:
            self._signal.emit_to(handler_id, self._latest)
        return handler_id

    def unsubscribe(self, handler_id: int) -> None:
        self._signal.disconnect(handler_id)

    @property
    def subscriber_count(self) -> int:
        return self._signal.handler_count
