"""
Click Gate - Decides which link activations are in-app selections.

Only a plain primary-button click selects a result. Any other button,
or a click with ctrl/meta held (open in new tab/window), is left to the
browser's default handling.
"""

from dataclasses import dataclass
from typing import Any, Mapping

PRIMARY_BUTTON = 0

# Stands in for a missing button so malformed events never select
NO_BUTTON = -1


def should_select(button: int, ctrl_key: bool, meta_key: bool) -> bool:
    """Return True if the activation should emit a selection."""
    return button == PRIMARY_BUTTON and not ctrl_key and not meta_key


@dataclass(frozen=True)
class PointerActivation:
    """A pointer activation on a result link."""
    button: int
    ctrl_key: bool = False
    meta_key: bool = False

    @classmethod
    def from_mapping(cls, event: Mapping[str, Any]) -> "PointerActivation":
        """
        Build from a DOM-style event mapping.

        Args:
            event: Mapping with "button" (missing means no button) and optional "ctrlKey"/"metaKey"

        Example:
            PointerActivation.from_mapping({"button": 0, "ctrlKey": True})
        """
        return cls(
            button=int(event.get("button", NO_BUTTON)),
            ctrl_key=bool(event.get("ctrlKey", False)),
            meta_key=bool(event.get("metaKey", False)),
        )

    @property
    def should_select(self) -> bool:
        return should_select(self.button, self.ctrl_key, self.meta_key)
