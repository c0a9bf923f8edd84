"""
Signal - Synchronous observer registration.

Stands in for the "changed"-style service signals of a UI toolkit
without tying the core to one. Handlers run in registration order,
on the emitting thread, before emit() returns.
"""

import itertools
from typing import Any, Callable

from loguru import logger


class Signal:
    """
    A named notification with zero or more subscribers.

    Methods:
        connect(callback): Register a handler, returns its id
        disconnect(handler_id): Remove a handler
        emit(*args): Call every handler with args
    """

    def __init__(self, name: str):
        self.name = name
        self._handlers: dict[int, Callable[..., Any]] = {}
        self._ids = itertools.count(1)

    def connect(self, callback: Callable[..., Any]) -> int:
        """
        Register a handler.

        Args:
            callback: Called with the emitted arguments

        Returns:
            Handler id to pass to disconnect()
        """
        handler_id = next(self._ids)
        self._handlers[handler_id] = callback
        return handler_id

    def disconnect(self, handler_id: int) -> None:
        """Remove a handler. Unknown ids are ignored."""
        self._handlers.pop(handler_id, None)

    @property
    def handler_count(self) -> int:
        return len(self._handlers)

    def emit(self, *args: Any) -> None:
        """
        Call every handler, in registration order.

        A failing handler is logged and does not stop the others.
        """
        # Snapshot so handlers may connect/disconnect while we iterate
        for handler_id, callback in list(self._handlers.items()):
            self._invoke(handler_id, callback, args)

    def emit_to(self, handler_id: int, *args: Any) -> None:
        """Call a single handler, with the same failure isolation as emit()."""
        callback = self._handlers.get(handler_id)
        if callback is not None:
            self._invoke(handler_id, callback, args)

    def _invoke(self, handler_id: int, callback: Callable[..., Any], args: tuple) -> None:
        try:
            callback(*args)
        except Exception:
            logger.exception(f"Handler {handler_id} for signal '{self.name}' failed")
