"""A selected tag rendered as a removable chip."""

from __future__ import annotations

from rich.text import Text
from textual.app import ComposeResult
from textual.message import Message
from textual.widget import Widget
from textual.widgets import Static


class TagChip(Widget):
    """Inline chip showing ``label ×``.  Clicking ``×`` asks for removal."""

    DEFAULT_CSS = """
    TagChip {
        layout: horizontal;
        width: auto;
        height: 1;
        margin: 0 1 0 0;
        background: $accent 30%;
    }
    TagChip > .tag-label {
        width: auto;
        padding: 0 0 0 1;
    }
    TagChip > .tag-remove {
        width: auto;
        padding: 0 1;
        color: $text-muted;
    }
    TagChip > .tag-remove:hover {
        color: $error;
    }
    """

    class RemoveRequested(Message):
        """The user clicked the chip's remove control."""

        def __init__(self, chip: TagChip, value: str) -> None:
            super().__init__()
            self.chip = chip
            self.value = value

    def __init__(self, value: str, label: str, **kwargs) -> None:
        super().__init__(**kwargs)
        self.value = value
        self.label = label

    def compose(self) -> ComposeResult:
        yield Static(Text(self.label), classes="tag-label")
        yield Static("×", classes="tag-remove")

    def on_click(self, event) -> None:
        if event.widget is not None and event.widget.has_class("tag-remove"):
            event.stop()
            self.post_message(self.RemoveRequested(self, self.value))
