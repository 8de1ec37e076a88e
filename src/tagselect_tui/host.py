"""Host form controls that a tag selector keeps in sync.

A ``HostSelect`` plays the part of a multi-select form field: it owns a list
of options with ``selected`` flags and notifies listeners whenever its
selection changes.  Change notifications bubble up to the ``HostForm`` the
select belongs to, so form-level logic sees every change.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field


@dataclass
class HostOption:
    """One option of a host select control."""

    value: str
    label: str
    selected: bool = False


@dataclass(frozen=True)
class ChangeEvent:
    """Notification that a host control's selection changed."""

    target: HostSelect
    values: list[str] = field(default_factory=list)
    bubbles: bool = True


ChangeListener = Callable[[ChangeEvent], None]


class _Listeners:
    """A list of change listeners that tolerates removal during dispatch."""

    def __init__(self) -> None:
        self._listeners: list[ChangeListener] = []

    def add(self, listener: ChangeListener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def discard(self, listener: ChangeListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def notify(self, event: ChangeEvent) -> None:
        for listener in list(self._listeners):
            listener(event)


class HostSelect:
    """An in-memory multi-choice form control."""

    def __init__(
        self,
        options: Iterable[HostOption | tuple[str, str]] = (),
        *,
        name: str = "",
        multiple: bool = True,
    ) -> None:
        """Initialize the control.

        Args:
            options: Host options, or ``(value, label)`` pairs.
            name: Form field name used when the owning form is submitted.
            multiple: Whether the control accepts more than one selection.
        """
        self.name = name
        self.multiple = multiple
        self.options: list[HostOption] = [
            opt if isinstance(opt, HostOption) else HostOption(*opt) for opt in options
        ]
        self.form: HostForm | None = None
        self._listeners = _Listeners()

    def find(self, value: str) -> HostOption | None:
        """Return the first option with the given value, or None."""
        for option in self.options:
            if option.value == value:
                return option
        return None

    def selected_options(self) -> list[HostOption]:
        """Return the selected options in document order."""
        return [option for option in self.options if option.selected]

    def selected_values(self) -> list[str]:
        return [option.value for option in self.options if option.selected]

    def add_option(self, value: str, label: str, selected: bool = False) -> HostOption:
        """Append a new option to the control."""
        option = HostOption(value, label, selected)
        self.options.append(option)
        return option

    def set_selected(self, value: str, selected: bool, label: str | None = None) -> None:
        """Set the selected flag of an option, creating it first if needed.

        A novel value is only created when it is being selected; deselecting
        an unknown value does nothing.

        Args:
            value: Value of the option to update.
            selected: The new selected state.
            label: Label for the option if it has to be created.
        """
        option = self.find(value)
        if option is None:
            if not selected:
                return
            option = self.add_option(value, label if label is not None else value)
        option.selected = selected

    def add_change_listener(self, listener: ChangeListener) -> None:
        self._listeners.add(listener)

    def remove_change_listener(self, listener: ChangeListener) -> None:
        self._listeners.discard(listener)

    def dispatch_change(self) -> ChangeEvent:
        """Notify listeners of a change, then bubble the event to the form."""
        event = ChangeEvent(target=self, values=self.selected_values())
        self._listeners.notify(event)
        if event.bubbles and self.form is not None:
            self.form.handle_change(event)
        return event


class HostForm:
    """A group of host controls submitted together."""

    def __init__(self, selects: Iterable[HostSelect] = ()) -> None:
        self.selects: list[HostSelect] = []
        self._listeners = _Listeners()
        for select in selects:
            self.add(select)

    def add(self, select: HostSelect) -> HostSelect:
        """Attach a control to this form."""
        select.form = self
        self.selects.append(select)
        return select

    def add_change_listener(self, listener: ChangeListener) -> None:
        self._listeners.add(listener)

    def remove_change_listener(self, listener: ChangeListener) -> None:
        self._listeners.discard(listener)

    def handle_change(self, event: ChangeEvent) -> None:
        """Receive a change bubbled up from one of the form's controls."""
        self._listeners.notify(event)

    def data(self) -> dict[str, list[str]]:
        """Return the submitted values of every named control."""
        return {select.name: select.selected_values() for select in self.selects if select.name}
