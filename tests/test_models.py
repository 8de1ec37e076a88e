"""Tests for option and suggestion data models."""

from __future__ import annotations

import pytest

from tagselect_tui.errors import ConfigurationError, TagSelectError
from tagselect_tui.models import (
    DEFAULT_CREATE_PROMPT,
    DEFAULT_NO_RESULTS_TEXT,
    DEFAULT_PLACEHOLDER,
    Option,
    SuggestionEntry,
    SuggestionKind,
    TagSelectOptions,
)


class TestSuggestionEntry:
    """Tests for SuggestionEntry constructors and properties."""

    def test_existing_uses_option_label_as_text(self):
        entry = SuggestionEntry.existing(Option("a", "Apple"))
        assert entry.kind is SuggestionKind.EXISTING
        assert entry.text == "Apple"
        assert entry.value == "a"
        assert entry.label == "Apple"
        assert entry.is_actionable

    def test_create_new_carries_proposed_tag(self):
        entry = SuggestionEntry.create_new("red-apple", "Red Apple", 'Create "Red Apple"')
        assert entry.kind is SuggestionKind.CREATE_NEW
        assert entry.value == "red-apple"
        assert entry.label == "Red Apple"
        assert entry.text == 'Create "Red Apple"'
        assert entry.is_actionable

    def test_no_results_is_not_actionable(self):
        entry = SuggestionEntry.no_results("Nothing here")
        assert entry.value is None
        assert entry.label is None
        assert not entry.is_actionable

    def test_limit_reached_is_not_actionable(self):
        entry = SuggestionEntry.limit_reached("Maximum 2 tags reached")
        assert entry.kind is SuggestionKind.LIMIT_REACHED
        assert not entry.is_actionable

    def test_entries_compare_by_value(self):
        assert SuggestionEntry.existing(Option("a", "A")) == SuggestionEntry.existing(Option("a", "A"))


class TestTagSelectOptionsDefaults:
    """Tests for the default option values."""

    def test_defaults(self):
        options = TagSelectOptions()
        assert options.placeholder == DEFAULT_PLACEHOLDER
        assert options.allow_new is True
        assert options.max_tags is None
        assert options.min_tags == 0
        assert options.create_prompt_template == DEFAULT_CREATE_PROMPT
        assert options.no_results_text == DEFAULT_NO_RESULTS_TEXT
        assert options.on_change is None
        assert options.auto_initialize is True

    def test_defaults_validate(self):
        TagSelectOptions().validate()

    def test_format_create_prompt(self):
        assert TagSelectOptions().format_create_prompt("Kiwi") == 'Create "Kiwi"'

    def test_limit_reached_text(self):
        assert TagSelectOptions(max_tags=3).limit_reached_text == "Maximum 3 tags reached"


class TestTagSelectOptionsValidate:
    """Tests for TagSelectOptions.validate."""

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"min_tags": -1},
            {"max_tags": 0},
            {"max_tags": 2, "min_tags": 3},
            {"max_tags": True},
            {"min_tags": 1.5},
            {"create_prompt_template": "Create it"},
            {"allow_new": "yes"},
            {"no_results_text": None},
            {"on_change": "not callable"},
        ],
    )
    def test_invalid_values_raise(self, kwargs):
        with pytest.raises(ConfigurationError):
            TagSelectOptions(**kwargs).validate()

    def test_max_equal_to_min_is_valid(self):
        TagSelectOptions(max_tags=2, min_tags=2).validate()

    def test_configuration_error_is_tag_select_error(self):
        assert issubclass(ConfigurationError, TagSelectError)


class TestTagSelectOptionsFromMapping:
    """Tests for TagSelectOptions.from_mapping."""

    def test_builds_options(self):
        options = TagSelectOptions.from_mapping({"max_tags": 4, "allow_new": False})
        assert options.max_tags == 4
        assert options.allow_new is False

    def test_accepts_hyphenated_keys(self):
        options = TagSelectOptions.from_mapping({"min-tags": 1, "no-results-text": "Nope"})
        assert options.min_tags == 1
        assert options.no_results_text == "Nope"

    def test_unknown_key_raises(self):
        with pytest.raises(ConfigurationError, match="colour"):
            TagSelectOptions.from_mapping({"colour": "red"})

    def test_invalid_value_raises(self):
        with pytest.raises(ConfigurationError):
            TagSelectOptions.from_mapping({"create_prompt_template": "no placeholder"})
