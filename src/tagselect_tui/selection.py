"""The selection model: which tags are currently chosen."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator

from tagselect_tui.catalog import OptionCatalog
from tagselect_tui.host import HostSelect
from tagselect_tui.logger import get_logger
from tagselect_tui.models import Option

logger = get_logger(__name__)


class SelectionModel:
    """An ordered set of selected values with count bounds.

    Insertion order is display order.  ``max_tags`` caps every ``select``;
    ``min_tags`` only guards ``deselect``, so a selection may start out
    below it.  Refused mutations return False and leave state untouched.

    Every successful mutation is written back to the host control, which
    then dispatches a change notification, and ``on_change`` (if given) is
    called once with the full list of selected values.
    """

    def __init__(
        self,
        catalog: OptionCatalog,
        host: HostSelect,
        *,
        max_tags: int | None = None,
        min_tags: int = 0,
        on_change: Callable[[list[str]], None] | None = None,
    ) -> None:
        self.catalog = catalog
        self.host = host
        self.max_tags = max_tags
        self.min_tags = min_tags
        self.on_change = on_change
        self._values: list[str] = []
        self._members: set[str] = set()

    def __contains__(self, value: object) -> bool:
        return value in self._members

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    @property
    def is_full(self) -> bool:
        """True when ``max_tags`` is set and has been reached."""
        return self.max_tags is not None and len(self._values) >= self.max_tags

    def count(self) -> int:
        return len(self._values)

    def current_values(self) -> list[str]:
        """Return a snapshot of the selected values in insertion order."""
        return list(self._values)

    def select(self, value: str, label: str | None = None) -> bool:
        """Add *value* to the selection.

        Args:
            value: The value to select.
            label: Label used if the value is new to the catalog.  Defaults
                to the value itself.

        Returns:
            True if the value was selected, False if it was already selected
            or the selection is full.
        """
        if value in self._members:
            logger.debug("Refused select of {!r}: already selected", value)
            return False
        if self.is_full:
            logger.debug("Refused select of {!r}: limit of {} reached", value, self.max_tags)
            return False

        label = label if label is not None else value
        if self.catalog.append(Option(value, label)):
            logger.info("Created new option {!r} ({!r})", value, label)
        self._values.append(value)
        self._members.add(value)
        self._emit_change(value, True, label)
        return True

    def deselect(self, value: str) -> bool:
        """Remove *value* from the selection.

        Returns:
            True if the value was removed, False if it was not selected or
            removing it would drop the selection below ``min_tags``.
        """
        if value not in self._members:
            logger.debug("Refused deselect of {!r}: not selected", value)
            return False
        if len(self._values) <= self.min_tags:
            logger.debug("Refused deselect of {!r}: minimum of {} reached", value, self.min_tags)
            return False

        self._values.remove(value)
        self._members.discard(value)
        self._emit_change(value, False)
        return True

    def restore(self, pairs: Iterable[tuple[str, str]]) -> list[str]:
        """Replace the selection with *pairs* without emitting changes.

        Used when the selection is (re)built from the host control.
        Duplicates are skipped and anything beyond ``max_tags`` is dropped
        and deselected in the host, so the host never holds more selected
        values than the model.

        Args:
            pairs: ``(value, label)`` pairs in display order.

        Returns:
            The values that were dropped.
        """
        self._values.clear()
        self._members.clear()
        dropped: list[str] = []
        for value, label in pairs:
            if value in self._members:
                continue
            if self.is_full:
                dropped.append(value)
                self.host.set_selected(value, False)
                continue
            self.catalog.append(Option(value, label))
            self._values.append(value)
            self._members.add(value)
        if dropped:
            logger.warning(
                "Dropped {} pre-selected value(s) over the limit of {}: {}",
                len(dropped),
                self.max_tags,
                ", ".join(dropped),
            )
        return dropped

    def _emit_change(self, value: str, selected: bool, label: str | None = None) -> None:
        """Write the change back to the host and notify observers."""
        self.host.set_selected(value, selected, label)
        self.host.dispatch_change()
        if self.on_change is not None:
            self.on_change(self.current_values())
