"""
Form state container.

Holds the current value, initial value and error of every field of one
rendered form. Mutations are explicit method calls; interested parties
register a callback with ``subscribe`` and receive a ``FormChange`` after
each mutation.
"""
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FormChange:
    """A single mutation of a FormState"""
    action: str  # 'add', 'change', 'error', 'remove', 'reset', 'reset_all'
    name: Optional[str] = None
    value: Any = None


@dataclass(frozen=True)
class FieldState:
    """Read-only view of one form field"""
    name: str
    value: Any
    initial_value: Any
    error: Optional[str]


FormListener = Callable[[FormChange], None]


class FormState:
    """Mutable field state owned by a single form"""

    def __init__(self, form_id: str):
        self.form_id = form_id
        self.values: Dict[str, Any] = {}
        self.initial_values: Dict[str, Any] = {}
        self.errors: Dict[str, Optional[str]] = {}
        self._listeners: List[FormListener] = []

    def subscribe(self, listener: FormListener) -> Callable[[], None]:
        """
        Register a change listener.

        Returns:
            Callable that removes the listener again
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self, change: FormChange) -> None:
        for listener in list(self._listeners):
            listener(change)

    def add_field(self, name: str, default_value: Any, initial_value: Any = None) -> None:
        """
        Register a field. Existing entries are left as they are.

        Args:
            name: Field name (may be a dot/bracket path)
            default_value: Current value when the field is new
            initial_value: Value restored on reset, falls back to default_value
        """
        if initial_value is None:
            initial_value = default_value

        if name not in self.values:
            self.values[name] = default_value
        if name not in self.initial_values:
            self.initial_values[name] = initial_value
        if name not in self.errors:
            self.errors[name] = None

        self._notify(FormChange("add", name, self.values[name]))

    def set_value(self, name: str, value: Any) -> None:
        self.values[name] = value
        self._notify(FormChange("change", name, value))

    def set_error(self, name: str, message: Optional[str]) -> None:
        self.errors[name] = message
        self._notify(FormChange("error", name, message))

    def remove_field(self, name: str) -> None:
        self.values.pop(name, None)
        self.initial_values.pop(name, None)
        self.errors.pop(name, None)
        self._notify(FormChange("remove", name))

    def reset_field(self, name: str) -> None:
        """Restore one field's initial value and clear its error"""
        if name not in self.values:
            return
        self.values[name] = self.initial_values.get(name)
        self.errors[name] = None
        self._notify(FormChange("reset", name, self.values[name]))

    def reset_all(self) -> None:
        """Restore every initial value and clear every error"""
        for name, initial in self.initial_values.items():
            self.values[name] = initial
        for name in self.errors:
            self.errors[name] = None
        self._notify(FormChange("reset_all"))

    def field(self, name: str) -> FieldState:
        return FieldState(
            name=name,
            value=self.values.get(name),
            initial_value=self.initial_values.get(name),
            error=self.errors.get(name),
        )

    @property
    def has_errors(self) -> bool:
        return any(error for error in self.errors.values())

    @property
    def is_dirty(self) -> bool:
        """True when any value differs from its initial value"""
        return any(
            self.values.get(name) != initial
            for name, initial in self.initial_values.items()
        )

    def __repr__(self) -> str:
        return f"FormState(id={self.form_id}, fields={list(self.values)})"
