"""
Search Results Panel - Grouped results view with selection notifications.

Features:
- Regroups results wholesale on every pushed SearchResults
- Exposes areas (name, heading with count, priority + overflow pages)
- Distinguishes "no results for this query" from "no query yet"
- Emits result_selected for plain primary clicks only

Rendering is left to the caller: the panel holds view state only.
"""

from typing import Any, Mapping, Optional, Union

from loguru import logger

from docsearch.search.click_gate import PointerActivation
from docsearch.search.grouping import check_priority_count, find_area, group_results
from docsearch.search.models import (
    DEFAULT_AREA,
    NO_RESULTS_MESSAGE,
    PRIORITY_COUNT,
    SearchArea,
    SearchResult,
    SearchResults,
)
from docsearch.services.channel import SearchResultsChannel
from docsearch.services.signals import Signal


class SearchResultsPanel:
    """
    View model for the search results list.

    Signals:
        result_selected: Emitted with the SearchResult the user selected
    """

    def __init__(
        self,
        channel: Optional[SearchResultsChannel] = None,
        priority_count: int = PRIORITY_COUNT,
        default_area: str = DEFAULT_AREA,
        no_results_message: str = NO_RESULTS_MESSAGE,
    ):
        self.priority_count = check_priority_count(priority_count)
        self.default_area = default_area
        self.no_results_message = no_results_message

        self.result_selected = Signal("result_selected")

        self.search_areas: list[SearchArea] = []
        self.query = ""
        self._result_count = 0

        self._channel = channel
        self._subscription = None
        if channel is not None:
            self._subscription = channel.subscribe(self.update, replay=True)

    @classmethod
    def from_settings(
        cls,
        settings: Mapping[str, Any],
        channel: Optional[SearchResultsChannel] = None,
    ) -> "SearchResultsPanel":
        """Create a panel configured from the [results] settings section."""
        results = settings.get("results", {})
        return cls(
            channel=channel,
            priority_count=results.get("priority_count", PRIORITY_COUNT),
            default_area=results.get("default_area", DEFAULT_AREA),
            no_results_message=results.get("no_results_message", NO_RESULTS_MESSAGE),
        )

    def update(self, search_results: SearchResults) -> None:
        """Replace the current view with the grouping of search_results."""
        self.search_areas = group_results(
            search_results,
            priority_count=self.priority_count,
            default_area=self.default_area,
        )
        self.query = search_results.query
        self._result_count = len(search_results.results)

    @property
    def has_query(self) -> bool:
        return bool(self.query)

    @property
    def show_no_results(self) -> bool:
        """True when a query was submitted and the engine found nothing."""
        return self.has_query and self._result_count == 0

    def area(self, name: str) -> Optional[SearchArea]:
        """Look up a displayed area by name."""
        return find_area(self.search_areas, name)

    def on_result_clicked(
        self,
        result: SearchResult,
        event: Union[PointerActivation, Mapping[str, Any]],
    ) -> bool:
        """
        Handle a pointer activation on a result link.

        Args:
            result: The result whose link was activated
            event: PointerActivation or DOM-style mapping
                   ({"button": 0, "ctrlKey": False, "metaKey": False})

        Returns:
            True if result_selected was emitted. False means the link
            should perform its default browser action.
        """
        if not isinstance(event, PointerActivation):
            event = PointerActivation.from_mapping(event)

        if not event.should_select:
            logger.debug(f"Leaving activation of {result.path} to the browser: {event}")
            return False

        logger.debug(f"Result selected: {result.path}")
        self.result_selected.emit(result)
        return True

    def close(self) -> None:
        """Stop listening to the channel."""
        if self._channel is not None and self._subscription is not None:
            self._channel.unsubscribe(self._subscription)
            self._subscription = None
