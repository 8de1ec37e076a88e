"""Tests for the TagSelect widget."""

from __future__ import annotations

import pytest
from textual.app import App, ComposeResult
from textual.widgets import Input, OptionList

from tagselect_tui.errors import ConfigurationError
from tagselect_tui.host import HostOption, HostSelect
from tagselect_tui.models import TagSelectOptions
from tagselect_tui.widgets.query_input import TagQueryInput
from tagselect_tui.widgets.tag_chip import TagChip
from tagselect_tui.widgets.tag_select import TagSelect


class TagSelectTestApp(App):
    """Minimal app hosting a TagSelect and a second input for focus tests."""

    AUTO_FOCUS = None

    def __init__(self, host: HostSelect, options: TagSelectOptions | None = None) -> None:
        super().__init__()
        self.host = host
        self.tag_options = options
        self.changes: list[list[str]] = []

    def compose(self) -> ComposeResult:
        yield TagSelect(self.host, self.tag_options, id="tags")
        yield Input(id="other-input", placeholder="Other field")

    def on_tag_select_changed(self, event: TagSelect.Changed) -> None:
        self.changes.append(event.values)


@pytest.fixture
def host() -> HostSelect:
    return HostSelect(
        [
            HostOption("apple", "Apple"),
            HostOption("banana", "Banana", selected=True),
            HostOption("cherry", "Cherry"),
        ],
        name="fruit",
    )


async def _focus_query(app: App, pilot) -> TagQueryInput:
    query = app.query_one(TagQueryInput)
    query.focus()
    await pilot.pause()
    return query


class TestTagSelectRendering:
    """Tests for what the widget paints."""

    async def test_preselected_tags_render_as_chips(self, host: HostSelect):
        app = TagSelectTestApp(host)
        async with app.run_test(size=(80, 20)) as pilot:
            await pilot.pause()
            chips = list(app.query(TagChip))
            assert [chip.value for chip in chips] == ["banana"]
            assert chips[0].label == "Banana"

    async def test_dropdown_hidden_until_focus(self, host: HostSelect):
        app = TagSelectTestApp(host)
        async with app.run_test(size=(80, 20)) as pilot:
            await pilot.pause()
            dropdown = app.query_one(".tag-dropdown", OptionList)
            assert dropdown.display is False
            await _focus_query(app, pilot)
            assert dropdown.display is True
            assert dropdown.option_count == 2

    async def test_placeholder_from_options(self, host: HostSelect):
        app = TagSelectTestApp(host, TagSelectOptions(placeholder="Pick fruit"))
        async with app.run_test(size=(80, 20)) as pilot:
            await pilot.pause()
            assert app.query_one(TagQueryInput).placeholder == "Pick fruit"

    async def test_single_select_host_rejected(self):
        with pytest.raises(ConfigurationError):
            TagSelect(HostSelect([("a", "A")], multiple=False))


class TestTagSelectKeyboard:
    """Tests for typing and keyboard navigation."""

    async def test_typing_filters_dropdown(self, host: HostSelect):
        app = TagSelectTestApp(host)
        async with app.run_test(size=(80, 20)) as pilot:
            await _focus_query(app, pilot)
            await pilot.press("c", "h")
            await pilot.pause()
            tag_select = app.query_one(TagSelect)
            assert tag_select.controller.query == "ch"
            assert app.query_one(".tag-dropdown", OptionList).option_count == 1

    async def test_down_enter_selects_highlighted(self, host: HostSelect):
        app = TagSelectTestApp(host)
        async with app.run_test(size=(80, 20)) as pilot:
            await _focus_query(app, pilot)
            await pilot.press("down", "down", "enter")
            await pilot.pause()
            tag_select = app.query_one(TagSelect)
            assert tag_select.values == ["banana", "cherry"]
            assert host.selected_values() == ["banana", "cherry"]
            assert [chip.value for chip in app.query(TagChip)] == ["banana", "cherry"]

    async def test_down_highlights_dropdown_row(self, host: HostSelect):
        app = TagSelectTestApp(host)
        async with app.run_test(size=(80, 20)) as pilot:
            await _focus_query(app, pilot)
            await pilot.press("down")
            await pilot.pause()
            assert app.query_one(".tag-dropdown", OptionList).highlighted == 0

    async def test_enter_creates_typed_tag(self, host: HostSelect):
        app = TagSelectTestApp(host)
        async with app.run_test(size=(80, 20)) as pilot:
            query = await _focus_query(app, pilot)
            await pilot.press(*"Kiwi")
            await pilot.pause()
            await pilot.press("enter")
            await pilot.pause()
            assert app.query_one(TagSelect).values == ["banana", "kiwi"]
            assert query.value == ""
            assert host.find("kiwi") == HostOption("kiwi", "Kiwi", selected=True)

    async def test_enter_does_not_move_focus(self, host: HostSelect):
        app = TagSelectTestApp(host)
        async with app.run_test(size=(80, 20)) as pilot:
            query = await _focus_query(app, pilot)
            await pilot.press("enter")
            await pilot.pause()
            assert app.focused is query

    async def test_backspace_on_empty_query_removes_last_tag(self, host: HostSelect):
        app = TagSelectTestApp(host)
        async with app.run_test(size=(80, 20)) as pilot:
            await _focus_query(app, pilot)
            await pilot.press("backspace")
            await pilot.pause()
            assert app.query_one(TagSelect).values == []
            assert list(app.query(TagChip)) == []

    async def test_backspace_edits_text_first(self, host: HostSelect):
        app = TagSelectTestApp(host)
        async with app.run_test(size=(80, 20)) as pilot:
            query = await _focus_query(app, pilot)
            await pilot.press("a", "backspace")
            await pilot.pause()
            assert query.value == ""
            assert app.query_one(TagSelect).values == ["banana"]

    async def test_escape_hides_dropdown(self, host: HostSelect):
        app = TagSelectTestApp(host)
        async with app.run_test(size=(80, 20)) as pilot:
            await _focus_query(app, pilot)
            await pilot.press("escape")
            await pilot.pause()
            assert app.query_one(".tag-dropdown", OptionList).display is False

    async def test_focus_leaving_closes_dropdown(self, host: HostSelect):
        app = TagSelectTestApp(host)
        async with app.run_test(size=(80, 20)) as pilot:
            await _focus_query(app, pilot)
            app.query_one("#other-input", Input).focus()
            await pilot.pause()
            await pilot.pause()
            assert app.query_one(TagSelect).controller.is_open is False


class TestTagSelectMessages:
    """Tests for TagSelect.Changed and programmatic changes."""

    async def test_changed_posted_on_selection(self, host: HostSelect):
        app = TagSelectTestApp(host)
        async with app.run_test(size=(80, 20)) as pilot:
            await pilot.pause()
            tag_select = app.query_one(TagSelect)
            assert tag_select.add_tag("apple", "Apple")
            await pilot.pause()
            assert app.changes == [["banana", "apple"]]

    async def test_refused_add_posts_nothing(self, host: HostSelect):
        app = TagSelectTestApp(host, TagSelectOptions(max_tags=1))
        async with app.run_test(size=(80, 20)) as pilot:
            await pilot.pause()
            assert app.query_one(TagSelect).add_tag("apple") is False
            await pilot.pause()
            assert app.changes == []

    async def test_clear_removes_chips(self, host: HostSelect):
        app = TagSelectTestApp(host)
        async with app.run_test(size=(80, 20)) as pilot:
            await pilot.pause()
            tag_select = app.query_one(TagSelect)
            tag_select.add_tag("apple")
            assert tag_select.clear_tags() == 2
            await pilot.pause()
            assert list(app.query(TagChip)) == []

    async def test_reload_reads_host(self, host: HostSelect):
        app = TagSelectTestApp(host)
        async with app.run_test(size=(80, 20)) as pilot:
            await pilot.pause()
            host.add_option("mango", "Mango", selected=True)
            app.query_one(TagSelect).reload()
            await pilot.pause()
            assert [chip.value for chip in app.query(TagChip)] == ["banana", "mango"]

    async def test_remove_requested_message_removes_tag(self, host: HostSelect):
        app = TagSelectTestApp(host)
        async with app.run_test(size=(80, 20)) as pilot:
            await pilot.pause()
            chip = app.query_one(TagChip)
            chip.post_message(TagChip.RemoveRequested(chip, chip.value))
            await pilot.pause()
            assert app.query_one(TagSelect).values == []

    async def test_option_selected_activates_suggestion(self, host: HostSelect):
        app = TagSelectTestApp(host)
        async with app.run_test(size=(80, 20)) as pilot:
            await _focus_query(app, pilot)
            dropdown = app.query_one(".tag-dropdown", OptionList)
            dropdown.highlighted = 1
            dropdown.action_select()
            await pilot.pause()
            assert app.query_one(TagSelect).values == ["banana", "cherry"]
            assert isinstance(app.focused, TagQueryInput)

    async def test_unmount_destroys_controller(self, host: HostSelect):
        app = TagSelectTestApp(host)
        async with app.run_test(size=(80, 20)) as pilot:
            await pilot.pause()
            tag_select = app.query_one(TagSelect)
            controller = tag_select.controller
            await tag_select.remove()
            await pilot.pause()
            assert controller.is_destroyed
            assert host.selected_values() == ["banana"]
