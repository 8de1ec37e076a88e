"""Shared test fixtures."""

from __future__ import annotations

import pytest

from tagselect_tui.controller import TagSelectController
from tagselect_tui.host import HostOption, HostSelect
from tagselect_tui.models import Option, TagSelectOptions


class RecordingRenderer:
    """Renderer that records what the controller asked it to do."""

    def __init__(self) -> None:
        self.paints = 0
        self.revealed: list[int] = []

    def paint(self, controller) -> None:
        self.paints += 1

    def reveal(self, index: int) -> None:
        self.revealed.append(index)


@pytest.fixture
def fruit_options() -> list[Option]:
    """A small catalog of fruit options."""
    return [
        Option("apple", "Apple"),
        Option("banana", "Banana"),
        Option("cherry", "Cherry"),
        Option("pineapple", "Pineapple"),
    ]


@pytest.fixture
def fruit_host(fruit_options: list[Option]) -> HostSelect:
    """A multi-select host offering the fruit catalog, nothing selected."""
    return HostSelect(
        [HostOption(opt.value, opt.label) for opt in fruit_options],
        name="fruit",
    )


@pytest.fixture
def preselected_host() -> HostSelect:
    """A host with two of its options pre-selected."""
    return HostSelect(
        [
            HostOption("red", "Red", selected=True),
            HostOption("green", "Green"),
            HostOption("blue", "Blue", selected=True),
        ],
        name="colours",
    )


@pytest.fixture
def renderer() -> RecordingRenderer:
    return RecordingRenderer()


@pytest.fixture
def make_controller(fruit_host: HostSelect, renderer: RecordingRenderer):
    """Factory building a controller over the fruit host."""

    def _make(**overrides) -> TagSelectController:
        return TagSelectController(fruit_host, TagSelectOptions(), renderer=renderer, **overrides)

    return _make
