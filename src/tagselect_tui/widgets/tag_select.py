"""Tag selector widget: chips, a query field and a suggestion dropdown."""

from __future__ import annotations

from typing import Any

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.events import DescendantBlur, DescendantFocus
from textual.message import Message
from textual.widget import Widget
from textual.widgets import Input, OptionList

from tagselect_tui.controller import TagSelectController
from tagselect_tui.host import ChangeEvent, HostSelect
from tagselect_tui.models import Option, SuggestionEntry, SuggestionKind, TagSelectOptions
from tagselect_tui.widgets.query_input import TagQueryInput
from tagselect_tui.widgets.tag_chip import TagChip


class TagSelect(Widget):
    """Edit the selection of a multi-select host control as a list of tags.

    All state lives in a ``TagSelectController``; this widget only forwards
    keys, clicks and query edits to it and repaints what it exposes.
    """

    DEFAULT_CSS = """
    TagSelect {
        height: auto;
        border: tall $border-blurred;
    }
    TagSelect:focus-within {
        border: tall $border;
    }
    TagSelect > .tag-select-row {
        height: auto;
    }
    TagSelect .tag-chips {
        width: auto;
        height: 1;
        margin: 1 0 0 1;
    }
    TagSelect .tag-query {
        width: 1fr;
        border: none;
        height: 3;
        padding: 1 1;
    }
    TagSelect > .tag-dropdown {
        height: auto;
        max-height: 8;
        border: none;
        background: $panel;
    }
    """

    class Changed(Message):
        """The selection changed."""

        def __init__(self, tag_select: TagSelect, values: list[str]) -> None:
            super().__init__()
            self.tag_select = tag_select
            self.values = values

        @property
        def control(self) -> TagSelect:
            return self.tag_select

    def __init__(
        self,
        host: HostSelect,
        options: TagSelectOptions | None = None,
        *,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
        **overrides: Any,
    ) -> None:
        """Initialize the widget.

        Args:
            host: The multi-select control to edit.
            options: Behaviour options for the selector.
            name: Widget name.
            id: Widget id.
            classes: Widget CSS classes.
            **overrides: Individual options overriding those in *options*.

        Raises:
            ConfigurationError: If *host* is not multi-select or the options
                are invalid.
        """
        super().__init__(name=name, id=id, classes=classes)
        self.host = host
        self._painted_tags: tuple[Option, ...] | None = None
        self.controller = TagSelectController(host, options, renderer=self, **overrides)

    def compose(self) -> ComposeResult:
        with Horizontal(classes="tag-select-row"):
            yield Horizontal(classes="tag-chips")
            yield TagQueryInput(
                key_handler=self.controller.on_key,
                placeholder=self.controller.options.placeholder,
                classes="tag-query",
            )
        dropdown = OptionList(classes="tag-dropdown")
        dropdown.can_focus = False
        yield dropdown

    def on_mount(self) -> None:
        self.host.add_change_listener(self._on_host_change)
        self._sync_view()

    def on_unmount(self) -> None:
        self.host.remove_change_listener(self._on_host_change)
        self.controller.destroy()

    # -- public surface ------------------------------------------------------

    @property
    def values(self) -> list[str]:
        """The selected values, in display order."""
        return self.controller.get_values()

    def add_tag(self, value: str, label: str | None = None) -> bool:
        return self.controller.add(value, label)

    def remove_tag(self, value: str) -> bool:
        return self.controller.remove(value)

    def clear_tags(self) -> int:
        """Remove every removable tag; returns how many were removed."""
        return self.controller.clear()

    def reload(self) -> None:
        """Re-read options and selection from the host control."""
        self.controller.refresh()

    # -- Renderer protocol -----------------------------------------------------

    def paint(self, controller: TagSelectController) -> None:
        if self.is_mounted:
            self._sync_view()

    def reveal(self, index: int) -> None:
        if self.is_mounted:
            self.query_one(".tag-dropdown", OptionList).scroll_to_highlight()

    # -- event handlers --------------------------------------------------------

    def on_input_changed(self, event: Input.Changed) -> None:
        event.stop()
        if event.value != self.controller.query:
            self.controller.on_query_changed(event.value)

    def on_descendant_focus(self, event: DescendantFocus) -> None:
        self.controller.on_focus()

    def on_descendant_blur(self, event: DescendantBlur) -> None:
        self.call_after_refresh(self._close_if_focus_left)

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        event.stop()
        entries = self.controller.get_suggestions()
        if 0 <= event.option_index < len(entries):
            self.controller.on_suggestion_clicked(entries[event.option_index])
        self.query_one(TagQueryInput).focus()

    def on_tag_chip_remove_requested(self, event: TagChip.RemoveRequested) -> None:
        event.stop()
        self.controller.on_tag_remove_clicked(event.value)

    # -- internals -------------------------------------------------------------

    def _on_host_change(self, event: ChangeEvent) -> None:
        self.post_message(self.Changed(self, self.controller.get_values()))

    def _close_if_focus_left(self) -> None:
        focused = self.app.focused
        if focused is not None and focused not in self.walk_children():
            self.controller.on_outside_interaction()

    @staticmethod
    def _prompt(entry: SuggestionEntry) -> str | Text:
        match entry.kind:
            case SuggestionKind.EXISTING:
                return Text(entry.text)
            case SuggestionKind.CREATE_NEW:
                return Text(entry.text, style="bold")
            case _:
                return Text(entry.text, style="italic dim")

    def _sync_view(self) -> None:
        """Repaint chips, query and dropdown from the controller."""
        controller = self.controller

        query_input = self.query_one(TagQueryInput)
        if query_input.value != controller.query:
            query_input.value = controller.query

        tags = tuple(controller.get_selected_tags())
        if tags != self._painted_tags:
            self._painted_tags = tags
            chips = self.query_one(".tag-chips", Horizontal)
            chips.remove_children()
            chips.mount_all([TagChip(tag.value, tag.label) for tag in tags])

        dropdown = self.query_one(".tag-dropdown", OptionList)
        dropdown.clear_options()
        dropdown.add_options([self._prompt(entry) for entry in controller.get_suggestions()])
        index = controller.get_highlight_index()
        dropdown.highlighted = index if index >= 0 else None
        dropdown.display = controller.is_open
