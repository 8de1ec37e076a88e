"""Main Textual application for tagselect-tui."""

from __future__ import annotations

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Static

from tagselect_tui.config import load_theme, save_theme
from tagselect_tui.host import HostSelect
from tagselect_tui.logger import get_logger
from tagselect_tui.models import TagSelectOptions
from tagselect_tui.screens.theme_picker import ThemePickerModal
from tagselect_tui.widgets.query_input import TagQueryInput
from tagselect_tui.widgets.tag_select import TagSelect

logger = get_logger(__name__)

_FOOTER_TEXT = (
    "\\[↑/↓] Navigate  \\[Enter] Add  \\[Backspace] Remove last  "
    "\\[Esc] Close  \\[Ctrl+S] Done  \\[Ctrl+T] Theme  \\[Ctrl+Q] Quit"
)


class TagSelectApp(App[list[str]]):
    """Pick tags for a host select control; exits with the selected values."""

    TITLE = "tagselect-tui"

    CSS = """
    #title-bar {
        padding: 0 1;
        text-style: bold;
    }
    #status-bar {
        padding: 0 1;
        color: $text-muted;
    }
    #footer-bar {
        dock: bottom;
        padding: 0 1;
        background: $panel;
    }
    """

    BINDINGS = [
        Binding("ctrl+s", "done", "Done"),
        Binding("ctrl+t", "pick_theme", "Theme"),
    ]

    def __init__(self, host: HostSelect, options: TagSelectOptions | None = None) -> None:
        """Initialize the app.

        Args:
            host: The host control whose selection is edited.
            options: Tag selector options.
        """
        super().__init__()
        self.host = host
        self.tag_options = options
        saved_theme = load_theme()
        if saved_theme and saved_theme in self.available_themes:
            self.theme = saved_theme

    def compose(self) -> ComposeResult:
        yield Static(self.host.name or "Tags", id="title-bar")
        yield TagSelect(self.host, self.tag_options, id="tag-select")
        yield Static(self._status_text(self.host.selected_values()), id="status-bar")
        yield Static(_FOOTER_TEXT, id="footer-bar")

    def on_mount(self) -> None:
        self.query_one("#tag-select", TagSelect).query_one(TagQueryInput).focus()

    def on_tag_select_changed(self, event: TagSelect.Changed) -> None:
        """Show the current values in the status bar."""
        self.query_one("#status-bar", Static).update(self._status_text(event.values))

    @staticmethod
    def _status_text(values: list[str]) -> str:
        if not values:
            return "No tags selected"
        return f"{len(values)} selected: {', '.join(values)}"

    def action_done(self) -> None:
        """Exit, returning the selected values."""
        values = self.query_one("#tag-select", TagSelect).values
        logger.info("Exiting with {} value(s)", len(values))
        self.exit(values)

    def action_pick_theme(self) -> None:
        """Open the theme picker and persist the choice."""

        def on_theme_selected(theme: str | None) -> None:
            if theme is not None:
                self.theme = theme
                save_theme(theme)

        self.push_screen(ThemePickerModal(), callback=on_theme_selected)
