"""Input widget that lets a tag selector handle navigation keys first."""

from __future__ import annotations

from collections.abc import Callable

from textual.widgets import Input

from tagselect_tui.controller import CONTROL_KEYS


class TagQueryInput(Input):
    """An Input that offers control keys to a handler before editing.

    Up, Down, Enter, Escape and Backspace are passed to ``key_handler``.
    If the handler returns True the key is consumed; otherwise (for example
    Backspace while there is text to delete) the Input handles it normally.
    """

    def __init__(self, key_handler: Callable[[str], bool] | None = None, **kwargs) -> None:
        """Initialize the input.

        Args:
            key_handler: Called with the Textual key name of each control key.
            **kwargs: Passed on to ``Input``.
        """
        super().__init__(**kwargs)
        self.key_handler = key_handler

    async def _on_key(self, event) -> None:
        """Offer control keys to the handler, then fall back to Input."""
        if event.key in CONTROL_KEYS and self.key_handler is not None:
            if self.key_handler(event.key):
                event.prevent_default()
                event.stop()
                return
        await super()._on_key(event)
