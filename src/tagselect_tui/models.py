"""Data models for options, suggestion entries, and widget options."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, fields
from enum import Enum
from typing import Any

from tagselect_tui.errors import ConfigurationError

DEFAULT_PLACEHOLDER = "Type to search or add new tags..."
DEFAULT_CREATE_PROMPT = 'Create "{tag}"'
DEFAULT_NO_RESULTS_TEXT = "No options available"

TAG_PLACEHOLDER = "{tag}"


@dataclass(frozen=True)
class Option:
    """A selectable choice: ``value`` is the unique key, ``label`` the display text."""

    value: str
    label: str


class SuggestionKind(Enum):
    """The variants a dropdown row can take."""

    EXISTING = "existing"
    CREATE_NEW = "create_new"
    NO_RESULTS = "no_results"
    LIMIT_REACHED = "limit_reached"

    @property
    def is_actionable(self) -> bool:
        """Return True for rows that select a tag when activated."""
        match self:
            case SuggestionKind.EXISTING | SuggestionKind.CREATE_NEW:
                return True
            case SuggestionKind.NO_RESULTS | SuggestionKind.LIMIT_REACHED:
                return False


@dataclass(frozen=True)
class SuggestionEntry:
    """A single row of the suggestion dropdown.

    For ``EXISTING`` rows ``option`` is the catalog option.  For
    ``CREATE_NEW`` rows it holds the proposed value and label of the tag
    that would be created.  Informational rows carry no option.
    """

    kind: SuggestionKind
    text: str
    option: Option | None = None

    @classmethod
    def existing(cls, option: Option) -> SuggestionEntry:
        """Build a row for an option already in the catalog."""
        return cls(SuggestionKind.EXISTING, option.label, option)

    @classmethod
    def create_new(cls, value: str, label: str, text: str) -> SuggestionEntry:
        """Build the synthetic row offering to create a new tag."""
        return cls(SuggestionKind.CREATE_NEW, text, Option(value, label))

    @classmethod
    def no_results(cls, text: str) -> SuggestionEntry:
        return cls(SuggestionKind.NO_RESULTS, text)

    @classmethod
    def limit_reached(cls, text: str) -> SuggestionEntry:
        return cls(SuggestionKind.LIMIT_REACHED, text)

    @property
    def is_actionable(self) -> bool:
        """Return True if activating this row selects a tag."""
        return self.kind.is_actionable and self.option is not None

    @property
    def value(self) -> str | None:
        """The value that activating this row would select, if any."""
        return self.option.value if self.option else None

    @property
    def label(self) -> str | None:
        """The label of the tag that activating this row would select, if any."""
        return self.option.label if self.option else None


@dataclass
class TagSelectOptions:
    """Behaviour options for a tag selector.

    Options are validated once, when a controller is built from them.
    """

    placeholder: str = DEFAULT_PLACEHOLDER
    allow_new: bool = True
    max_tags: int | None = None
    min_tags: int = 0
    create_prompt_template: str = DEFAULT_CREATE_PROMPT
    no_results_text: str = DEFAULT_NO_RESULTS_TEXT
    on_change: Callable[[list[str]], None] | None = None
    auto_initialize: bool = True

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> TagSelectOptions:
        """Build options from a plain mapping such as a TOML config section.

        Args:
            data: Option names mapped to values.  Hyphenated keys
                (``max-tags``) are accepted as well as underscored ones.

        Returns:
            A new, validated TagSelectOptions.

        Raises:
            ConfigurationError: If a key is unknown or a value is invalid.
        """
        known = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        for key, value in data.items():
            name = key.replace("-", "_")
            if name not in known:
                raise ConfigurationError(f"Unknown tag selector option: {key}")
            kwargs[name] = value
        options = cls(**kwargs)
        options.validate()
        return options

    def validate(self) -> None:
        """Check option values.

        Raises:
            ConfigurationError: If any value is out of range or of the wrong type.
        """
        if not isinstance(self.allow_new, bool):
            raise ConfigurationError("allow_new must be a boolean")
        if not isinstance(self.auto_initialize, bool):
            raise ConfigurationError("auto_initialize must be a boolean")
        if isinstance(self.min_tags, bool) or not isinstance(self.min_tags, int):
            raise ConfigurationError("min_tags must be an integer")
        if self.min_tags < 0:
            raise ConfigurationError(f"min_tags must not be negative, got {self.min_tags}")
        if self.max_tags is not None:
            if isinstance(self.max_tags, bool) or not isinstance(self.max_tags, int):
                raise ConfigurationError("max_tags must be an integer or None")
            if self.max_tags < 1:
                raise ConfigurationError(f"max_tags must be at least 1, got {self.max_tags}")
            if self.max_tags < self.min_tags:
                raise ConfigurationError(
                    f"max_tags ({self.max_tags}) is lower than min_tags ({self.min_tags})"
                )
        if not isinstance(self.create_prompt_template, str) or (
            TAG_PLACEHOLDER not in self.create_prompt_template
        ):
            raise ConfigurationError(
                f"create_prompt_template must contain {TAG_PLACEHOLDER!r}"
            )
        if not isinstance(self.no_results_text, str):
            raise ConfigurationError("no_results_text must be a string")
        if not isinstance(self.placeholder, str):
            raise ConfigurationError("placeholder must be a string")
        if self.on_change is not None and not callable(self.on_change):
            raise ConfigurationError("on_change must be callable")

    def format_create_prompt(self, tag: str) -> str:
        """Return the create prompt with *tag* substituted in."""
        return self.create_prompt_template.replace(TAG_PLACEHOLDER, tag)

    @property
    def limit_reached_text(self) -> str:
        """Text shown in place of suggestions once ``max_tags`` is reached."""
        return f"Maximum {self.max_tags} tags reached"
