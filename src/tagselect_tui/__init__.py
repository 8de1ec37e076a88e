"""A tag-entry widget for Textual: filter, create and navigate tags from the keyboard."""

from __future__ import annotations

from tagselect_tui.catalog import OptionCatalog
from tagselect_tui.controller import TagSelectController, attach_all
from tagselect_tui.cursor import NO_HIGHLIGHT, NavigationCursor
from tagselect_tui.errors import ConfigurationError, TagSelectError
from tagselect_tui.host import ChangeEvent, HostForm, HostOption, HostSelect
from tagselect_tui.models import Option, SuggestionEntry, SuggestionKind, TagSelectOptions
from tagselect_tui.selection import SelectionModel
from tagselect_tui.suggestions import build_suggestions, iter_suggestions, propose_tag_value

__all__ = [
    "NO_HIGHLIGHT",
    "ChangeEvent",
    "ConfigurationError",
    "HostForm",
    "HostOption",
    "HostSelect",
    "NavigationCursor",
    "Option",
    "OptionCatalog",
    "SelectionModel",
    "SuggestionEntry",
    "SuggestionKind",
    "TagSelectController",
    "TagSelectError",
    "TagSelectOptions",
    "attach_all",
    "build_suggestions",
    "iter_suggestions",
    "propose_tag_value",
]
