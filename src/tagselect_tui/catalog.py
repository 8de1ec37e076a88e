"""The option catalog: every choice a tag selector can offer."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from tagselect_tui.models import Option


class OptionCatalog:
    """An ordered collection of options, unique by value.

    The catalog only grows: options created while tagging are appended at
    the end, so the order of pre-defined options never changes.
    """

    def __init__(self, options: Iterable[Option] = ()) -> None:
        self._options: list[Option] = []
        self._by_value: dict[str, Option] = {}
        for option in options:
            self.append(option)

    def __iter__(self) -> Iterator[Option]:
        return iter(self._options)

    def __len__(self) -> int:
        return len(self._options)

    def __contains__(self, value: object) -> bool:
        return value in self._by_value

    def get(self, value: str) -> Option | None:
        """Return the option with the given value, or None."""
        return self._by_value.get(value)

    def label_for(self, value: str) -> str:
        """Return the label for *value*, falling back to the value itself."""
        option = self._by_value.get(value)
        return option.label if option else value

    def append(self, option: Option) -> bool:
        """Append an option unless its value is already present.

        Returns:
            True if the option was added, False if the value was a duplicate.
        """
        if option.value in self._by_value:
            return False
        self._options.append(option)
        self._by_value[option.value] = option
        return True

    def values(self) -> list[str]:
        """Return all option values in catalog order."""
        return [option.value for option in self._options]
