"""The tag selector controller: turns UI events into model updates.

The controller owns the option catalog, the selection model, the query and
the navigation cursor of one tag selector.  A rendering collaborator feeds
it events (keys, clicks, query edits) and paints whatever it exposes
through ``get_suggestions``, ``get_highlight_index`` and
``get_selected_tags``.  The controller never holds references to widgets.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import replace
from typing import Any, Protocol

from tagselect_tui.catalog import OptionCatalog
from tagselect_tui.cursor import NavigationCursor
from tagselect_tui.errors import ConfigurationError
from tagselect_tui.host import HostSelect
from tagselect_tui.logger import get_logger
from tagselect_tui.models import Option, SuggestionEntry, TagSelectOptions
from tagselect_tui.selection import SelectionModel
from tagselect_tui.suggestions import build_suggestions, propose_tag_value

logger = get_logger(__name__)

KEY_DOWN = "down"
KEY_UP = "up"
KEY_ENTER = "enter"
KEY_ESCAPE = "escape"
KEY_BACKSPACE = "backspace"

CONTROL_KEYS = frozenset({KEY_DOWN, KEY_UP, KEY_ENTER, KEY_ESCAPE, KEY_BACKSPACE})


class Renderer(Protocol):
    """What the controller needs from whatever draws it."""

    def paint(self, controller: TagSelectController) -> None:
        """Redraw tags, query and dropdown from the controller's state."""

    def reveal(self, index: int) -> None:
        """Scroll the dropdown so that row *index* is visible."""


class _NullRenderer:
    """Renderer used when nothing is attached."""

    def paint(self, controller: TagSelectController) -> None:
        pass

    def reveal(self, index: int) -> None:
        pass


class TagSelectController:
    """Selection, suggestion and navigation state for one tag selector."""

    def __init__(
        self,
        host: HostSelect,
        options: TagSelectOptions | None = None,
        renderer: Renderer | None = None,
        **overrides: Any,
    ) -> None:
        """Initialize the controller.

        Args:
            host: The multi-select control whose selection is kept in sync.
            options: Behaviour options.  Defaults to ``TagSelectOptions()``.
            renderer: Collaborator that draws the selector.
            **overrides: Individual options overriding those in *options*.

        Raises:
            ConfigurationError: If *host* is not a multi-select control or
                the options are invalid.
        """
        if not host.multiple:
            raise ConfigurationError("A tag selector requires a host control with multiple selection")
        options = options or TagSelectOptions()
        if overrides:
            try:
                options = replace(options, **overrides)
            except TypeError as exc:
                raise ConfigurationError(str(exc)) from exc
        options.validate()

        self.host = host
        self.options = options
        self.catalog = OptionCatalog(Option(opt.value, opt.label) for opt in host.options)
        self.selection = SelectionModel(
            self.catalog,
            host,
            max_tags=options.max_tags,
            min_tags=options.min_tags,
            on_change=options.on_change,
        )
        self.cursor = NavigationCursor()
        self.query = ""
        self.is_open = False
        self._suggestions: list[SuggestionEntry] = []
        self._renderer: Renderer = renderer or _NullRenderer()
        self._initialized = False
        self._destroyed = False

        if options.auto_initialize:
            self.initialize()

    # -- lifecycle ---------------------------------------------------------

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    @property
    def is_destroyed(self) -> bool:
        return self._destroyed

    def initialize(self) -> TagSelectController:
        """Load the host's pre-selected options as tags.

        Does nothing if already initialized or destroyed.
        """
        if self._initialized or self._destroyed:
            return self
        self._initialized = True
        self._restore_from_host()
        logger.debug(
            "Initialized tag selector {!r} with {} option(s), {} selected",
            self.host.name,
            len(self.catalog),
            self.selection.count(),
        )
        self._recompute()
        return self

    def attach_renderer(self, renderer: Renderer | None) -> None:
        """Replace the rendering collaborator and paint the current state."""
        self._renderer = renderer or _NullRenderer()
        if not self._destroyed:
            self._renderer.paint(self)

    def destroy(self) -> None:
        """Release the renderer and suggestions.  Safe to call repeatedly.

        The host control keeps its selection; event sinks and mutating
        methods become no-ops afterwards.
        """
        if self._destroyed:
            return
        self._destroyed = True
        self.is_open = False
        self.cursor.reset()
        self._suggestions = []
        self._renderer = _NullRenderer()
        logger.debug("Destroyed tag selector {!r}", self.host.name)

    # -- state for the renderer ----------------------------------------------

    def get_suggestions(self) -> list[SuggestionEntry]:
        return list(self._suggestions)

    def get_highlight_index(self) -> int:
        return self.cursor.index

    def get_selected_tags(self) -> list[Option]:
        """Return the selected tags as options, in display order."""
        return [
            Option(value, self.catalog.label_for(value))
            for value in self.selection.current_values()
        ]

    # -- event sinks ---------------------------------------------------------

    def on_focus(self) -> None:
        """The query field gained focus: open the dropdown."""
        if self._destroyed:
            return
        self.is_open = True
        self._recompute()

    def on_query_changed(self, text: str) -> None:
        """The user edited the query."""
        if self._destroyed:
            return
        self.query = text
        self.is_open = True
        self._recompute()

    def on_key(self, key: str) -> bool:
        """Handle a control key pressed in the query field.

        Args:
            key: Textual key name (``down``, ``up``, ``enter``, ``escape``,
                ``backspace``).

        Returns:
            True if the key was consumed and the field must not process it.
        """
        if self._destroyed:
            return False
        match key:
            case "down":
                self.is_open = True
                index = self.cursor.move_next(len(self._suggestions))
                self._paint()
                if index >= 0:
                    self._renderer.reveal(index)
                return True
            case "up":
                index = self.cursor.move_previous()
                self._paint()
                if index >= 0:
                    self._renderer.reveal(index)
                return True
            case "enter":
                self._submit()
                return True
            case "escape":
                self.close_dropdown()
                return True
            case "backspace":
                if self.query:
                    return False
                self._remove_last()
                return True
        return False

    def on_suggestion_clicked(self, entry: SuggestionEntry) -> bool:
        """A dropdown row was clicked.

        Returns:
            True if a tag was selected.
        """
        if self._destroyed:
            return False
        return self._activate(entry)

    def on_tag_remove_clicked(self, value: str) -> bool:
        """The remove control of a tag was clicked."""
        return self.remove(value)

    def on_outside_interaction(self) -> None:
        """Focus or a click went somewhere outside the selector."""
        self.close_dropdown()

    def close_dropdown(self) -> None:
        if self._destroyed or not self.is_open:
            return
        self.is_open = False
        self._paint()

    # -- public programmatic surface -----------------------------------------

    def get_values(self) -> list[str]:
        return self.selection.current_values()

    def add(self, value: str, label: str | None = None) -> bool:
        """Select a tag, creating its option if the value is new.

        Returns:
            True if the tag was added.
        """
        if self._destroyed:
            return False
        added = self.selection.select(value, label if label is not None else value)
        if added:
            logger.info("Selected {!r} in {!r}", value, self.host.name)
            self._recompute()
        return added

    def remove(self, value: str) -> bool:
        """Deselect a tag.

        Returns:
            True if the tag was removed.
        """
        if self._destroyed:
            return False
        removed = self.selection.deselect(value)
        if removed:
            logger.info("Removed {!r} from {!r}", value, self.host.name)
            self._recompute()
        return removed

    def clear(self) -> int:
        """Remove every tag that can be removed.

        Tags are removed in display order; once ``min_tags`` is reached the
        remaining ones are kept.

        Returns:
            The number of tags removed.
        """
        if self._destroyed:
            return 0
        removed = sum(1 for value in self.selection.current_values() if self.selection.deselect(value))
        if removed:
            logger.info("Cleared {} tag(s) from {!r}", removed, self.host.name)
            self._recompute()
        return removed

    def refresh(self) -> None:
        """Re-derive tags and suggestions from the host control.

        Picks up options added to the host since construction and its
        current selection, then rebuilds the suggestion list.
        """
        if self._destroyed:
            return
        self._restore_from_host()
        self._recompute()

    # -- internals -----------------------------------------------------------

    def _restore_from_host(self) -> None:
        for opt in self.host.options:
            self.catalog.append(Option(opt.value, opt.label))
        self.selection.restore((opt.value, opt.label) for opt in self.host.selected_options())

    def _recompute(self) -> None:
        self._suggestions = build_suggestions(
            self.catalog, self.selection, self.query, self.options
        )
        self.cursor.reset()
        self._paint()

    def _paint(self) -> None:
        self._renderer.paint(self)

    def _activate(self, entry: SuggestionEntry | None) -> bool:
        if entry is None or not entry.is_actionable:
            return False
        selected = self.selection.select(entry.value, entry.label)
        if selected:
            logger.info("Selected {!r} ({}) in {!r}", entry.value, entry.kind.value, self.host.name)
        self.query = ""
        self._recompute()
        return selected

    def _submit(self) -> None:
        entry = self.cursor.activate(self._suggestions)
        if entry is not None:
            self._activate(entry)
            return
        label = self.query.strip()
        if not label or not self.options.allow_new:
            return
        value = propose_tag_value(label)
        if self.selection.select(value, label):
            logger.info("Selected typed tag {!r} in {!r}", value, self.host.name)
        self.query = ""
        self._recompute()

    def _remove_last(self) -> None:
        values = self.selection.current_values()
        if values:
            self.remove(values[-1])


def attach_all(
    hosts: Iterable[HostSelect],
    options: TagSelectOptions | None = None,
    **overrides: Any,
) -> list[TagSelectController]:
    """Build a controller for every multi-select control in *hosts*.

    Single-select controls are skipped.  Each controller gets its own copy
    of the options so that no state is shared between selectors.
    """
    controllers: list[TagSelectController] = []
    for host in hosts:
        if not host.multiple:
            continue
        own = replace(options) if options is not None else None
        controllers.append(TagSelectController(host, own, **overrides))
    return controllers
