"""
docsearch - Application wiring

Loads settings, configures logging, and connects a SearchResultsChannel
to a SearchResultsPanel. The search engine pushes into the channel; the
renderer reads the panel and subscribes to panel.result_selected.

Usage:
  from docsearch.config import create_panel
  channel, panel = create_panel()
"""

from pathlib import Path
from typing import Optional, Union

from loguru import logger

from docsearch.panels.search_results import SearchResultsPanel
from docsearch.services.channel import SearchResultsChannel
from docsearch.utils.helpers import configure_logging, load_settings


def create_panel(
    settings_path: Optional[Union[str, Path]] = None,
    channel: Optional[SearchResultsChannel] = None,
) -> tuple[SearchResultsChannel, SearchResultsPanel]:
    """
    Build a results panel listening to a channel.

    Args:
        settings_path: TOML settings file (defaults to the packaged one)
        channel: Existing channel to listen to; a new one if omitted

    Returns:
        Tuple of (channel, panel)
    """
    settings = load_settings(settings_path)
    configure_logging(settings)

    channel = channel or SearchResultsChannel()
    panel = SearchResultsPanel.from_settings(settings, channel=channel)

    logger.debug(
        f"Search results panel initialized "
        f"(priority_count={panel.priority_count}, default_area={panel.default_area!r})"
    )
    return channel, panel
