"""Validation error containers.

ValidationErrors collects failures while validating one request;
ValidationReport is its serializable snapshot.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from request_validation.config import get_message_index
from request_validation.events import (
    ObservableMixin,
    ValidationEvent,
    ValidationEventType,
)
from request_validation.messages import ErrorMessageIndex

__all__ = ["ValidationErrors", "ValidationReport"]


@dataclass
class ValidationErrors(ObservableMixin):
    """Request validation error bundle.

    Errors are collected into two categories: errors keyed by the JSON path
    of the offending field, and general errors that apply to the request as
    a whole. Entries are only ever appended; nothing is removed.

    A ValidationErrors instance belongs to a single validation pass and is
    not safe for concurrent writers. The message index is captured from the
    process-wide default when none is given.

    Example:
        errors = ValidationErrors()
        check_not_blank(body.get("name"), "name", errors)
        if errors.is_not_empty:
            return 422, errors.report().to_dict()
    """

    by_key: dict[str, list[str]] = field(default_factory=dict)
    general: list[str] = field(default_factory=list)
    messages: ErrorMessageIndex = field(
        default_factory=get_message_index, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        if not isinstance(self.messages, ErrorMessageIndex):
            raise TypeError(
                "messages must implement ErrorMessageIndex, "
                f"got {type(self.messages).__name__}"
            )

    @property
    def is_empty(self) -> bool:
        """True if no errors have been recorded."""
        return not self.by_key and not self.general

    @property
    def is_not_empty(self) -> bool:
        """True if one or more errors have been recorded."""
        return bool(self.by_key) or bool(self.general)

    def add(self, key: str, message: str) -> None:
        """Add an error for the field at the given JSON path.

        Args:
            key: JSON path of the field the error applies to.
            message: Error message.

        Note:
            Emits a ValidationEventType.ERROR_ADDED event.
        """
        self.by_key.setdefault(key, []).append(message)
        self.notify(
            ValidationEvent(
                event_type=ValidationEventType.ERROR_ADDED,
                source=self,
                data={"key": key, "message": message},
            )
        )

    def add_general(self, message: str) -> None:
        """Add an error that is not tied to a JSON path.

        Note:
            Emits a ValidationEventType.GENERAL_ERROR_ADDED event.
        """
        self.general.append(message)
        self.notify(
            ValidationEvent(
                event_type=ValidationEventType.GENERAL_ERROR_ADDED,
                source=self,
                data={"message": message},
            )
        )

    def merge(self, other: ValidationErrors) -> ValidationErrors:
        """Append every error from another bundle to this one.

        Keys already present keep their existing messages; the other
        bundle's messages are appended after them.

        Returns:
            Self, for method chaining.
        """
        for key, messages in other.by_key.items():
            for message in messages:
                self.add(key, message)
        for message in other.general:
            self.add_general(message)
        return self

    def report(self) -> ValidationReport:
        """Snapshot the recorded errors as a ValidationReport."""
        return ValidationReport(
            by_key={key: list(messages) for key, messages in self.by_key.items()},
            general=list(self.general),
        )

    def __bool__(self) -> bool:
        return self.is_not_empty

    def __len__(self) -> int:
        """Total number of recorded messages."""
        return sum(len(messages) for messages in self.by_key.values()) + len(self.general)


class ValidationReport(BaseModel):
    """Serializable view of a ValidationErrors instance.

    Serializes with the ``byKey`` alias:

        {"byKey": {"name": ["must not be null"]}, "general": []}

    ``general`` is left out of to_dict() and to_json() output when it is
    empty unless ``include_empty_general`` is set.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    by_key: dict[str, list[str]] = Field(default_factory=dict, alias="byKey")
    general: list[str] = Field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """True if the report holds no errors."""
        return not self.by_key and not self.general

    def _exclude(self, include_empty_general: bool) -> set[str] | None:
        if include_empty_general or self.general:
            return None
        return {"general"}

    def to_dict(self, include_empty_general: bool = False) -> dict[str, Any]:
        """Dump the report as a plain dict keyed by ``byKey`` and ``general``."""
        return self.model_dump(by_alias=True, exclude=self._exclude(include_empty_general))

    def to_json(self, include_empty_general: bool = False, indent: int | None = None) -> str:
        """Dump the report as a JSON string."""
        return self.model_dump_json(
            by_alias=True,
            exclude=self._exclude(include_empty_general),
            indent=indent,
        )
