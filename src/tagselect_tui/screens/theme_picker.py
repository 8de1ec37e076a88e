"""Theme picker modal screen."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import Label, OptionList
from textual.widgets.option_list import Option


class ThemePickerModal(ModalScreen[str | None]):
    """A modal dialog listing the app's registered themes.

    Dismisses with the chosen theme name, or None when cancelled.
    """

    DEFAULT_CSS = """
    ThemePickerModal {
        align: center middle;
    }
    ThemePickerModal > #theme-dialog {
        width: 40;
        height: auto;
        max-height: 80%;
        border: thick $accent;
        background: $surface;
        padding: 1 2;
    }
    ThemePickerModal #theme-list {
        height: auto;
        max-height: 16;
    }
    """

    BINDINGS = [
        ("escape", "cancel", "Cancel"),
    ]

    def __init__(self, themes: list[str] | None = None) -> None:
        """Initialize the modal.

        Args:
            themes: Theme names to offer.  Defaults to every theme the app
                has registered, sorted by name.
        """
        super().__init__()
        self._themes = themes

    @property
    def themes(self) -> list[str]:
        if self._themes is None:
            self._themes = sorted(self.app.available_themes)
        return self._themes

    def compose(self) -> ComposeResult:
        with Vertical(id="theme-dialog"):
            yield Label("Select Theme", id="theme-title")
            yield OptionList(
                *[Option(name, id=name) for name in self.themes],
                id="theme-list",
            )

    def on_mount(self) -> None:
        """Highlight the active theme."""
        if self.app.theme in self.themes:
            self.query_one("#theme-list", OptionList).highlighted = self.themes.index(self.app.theme)

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        self.dismiss(event.option.id)

    def action_cancel(self) -> None:
        self.dismiss(None)
