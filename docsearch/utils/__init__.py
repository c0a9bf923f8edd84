# docsearch Utilities Package
"""
Shared utility functions for docsearch.
"""

from .helpers import configure_logging, load_settings

__all__ = ["load_settings", "configure_logging"]
