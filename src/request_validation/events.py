"""Observer pattern implementation for validation events.

Provides event types, observer protocol, and mixin for adding observer
support to error sinks and validators, plus an observer that forwards
events to the standard logging module.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Protocol, runtime_checkable

__all__ = [
    "LoggingObserver",
    "ObservableMixin",
    "ValidationEvent",
    "ValidationEventType",
    "ValidationObserver",
]


class ValidationEventType(Enum):
    """Types of validation events that can be observed."""

    ERROR_ADDED = auto()
    """Emitted when a keyed error is added to a ValidationErrors instance."""

    GENERAL_ERROR_ADDED = auto()
    """Emitted when an error without a JSON path is added."""

    VALIDATION_STARTED = auto()
    """Emitted when a validator begins a validation pass."""

    VALIDATION_COMPLETED = auto()
    """Emitted when a validator finishes a validation pass."""


@dataclass
class ValidationEvent:
    """A validation event that can be observed.

    Attributes:
        event_type: The type of event that occurred.
        source: The object that emitted the event (sink or validator).
        data: Event-specific data dictionary.

    Example:
        event = ValidationEvent(
            event_type=ValidationEventType.ERROR_ADDED,
            source=errors,
            data={"key": "options.fields[1]", "message": "must not be blank"},
        )
    """

    event_type: ValidationEventType
    source: object
    data: dict[str, Any] = field(default_factory=dict)


@runtime_checkable
class ValidationObserver(Protocol):
    """Protocol for validation event observers.

    Example:
        class CountingObserver:
            def __init__(self) -> None:
                self.count = 0

            def on_event(self, event: ValidationEvent) -> None:
                if event.event_type == ValidationEventType.ERROR_ADDED:
                    self.count += 1
    """

    def on_event(self, event: ValidationEvent) -> None:
        """Handle a validation event.

        Args:
            event: The validation event to handle.
        """
        ...


class ObservableMixin:
    """Mixin class to add observer support to any class.

    Observers are stored lazily so that dataclasses can include the mixin
    without declaring an extra field.
    """

    _observers: list[ValidationObserver]

    def _ensure_observers(self) -> None:
        """Ensure the observers list is initialized."""
        if not hasattr(self, "_observers") or self._observers is None:
            self._observers = []

    def add_observer(self, observer: ValidationObserver) -> None:
        """Add an observer to receive validation events.

        Args:
            observer: An object implementing the ValidationObserver protocol.
        """
        self._ensure_observers()
        if observer not in self._observers:
            self._observers.append(observer)

    def remove_observer(self, observer: ValidationObserver) -> None:
        """Remove an observer from receiving validation events.

        Args:
            observer: The observer to remove.
        """
        self._ensure_observers()
        if observer in self._observers:
            self._observers.remove(observer)

    def notify(self, event: ValidationEvent) -> None:
        """Notify all observers of a validation event.

        Args:
            event: The validation event to broadcast to observers.
        """
        self._ensure_observers()
        for observer in self._observers:
            observer.on_event(event)

    @property
    def observers(self) -> list[ValidationObserver]:
        """Get a copy of the current observers list."""
        self._ensure_observers()
        return self._observers.copy()

    def clear_observers(self) -> None:
        """Remove all observers."""
        self._ensure_observers()
        self._observers.clear()


class LoggingObserver:
    """Observer that writes validation events to a logger.

    Recorded errors are logged at ``level``; pass start and completion are
    logged at DEBUG.

    Example:
        errors = ValidationErrors()
        errors.add_observer(LoggingObserver(logging.getLogger("api.requests")))
    """

    def __init__(self, logger: logging.Logger | None = None, level: int = logging.INFO) -> None:
        self._logger = logger or logging.getLogger(__name__)
        self._level = level

    def on_event(self, event: ValidationEvent) -> None:
        data = event.data
        if event.event_type == ValidationEventType.ERROR_ADDED:
            self._logger.log(self._level, "%s: %s", data.get("key"), data.get("message"))
        elif event.event_type == ValidationEventType.GENERAL_ERROR_ADDED:
            self._logger.log(self._level, "%s", data.get("message"))
        elif event.event_type == ValidationEventType.VALIDATION_STARTED:
            self._logger.debug("Validation started: %s", data.get("validator_name"))
        elif event.event_type == ValidationEventType.VALIDATION_COMPLETED:
            self._logger.debug(
                "Validation completed: %s (%d errors in %.2fms)",
                data.get("validator_name"),
                data.get("error_count", 0),
                data.get("duration_ms", 0.0),
            )
