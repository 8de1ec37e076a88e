"""Textual widgets for tagselect-tui."""

from __future__ import annotations

from tagselect_tui.widgets.query_input import TagQueryInput
from tagselect_tui.widgets.tag_chip import TagChip
from tagselect_tui.widgets.tag_select import TagSelect

__all__ = ["TagChip", "TagQueryInput", "TagSelect"]
