"""Abstract request validator and composite validator.

Provides a base class that owns the validation pass for a request type:
it creates a fresh ValidationErrors for every call to validate(), so one
validator instance can serve concurrent requests.
"""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Generic, TypeVar

from request_validation.errors import ValidationErrors
from request_validation.events import (
    ObservableMixin,
    ValidationEvent,
    ValidationEventType,
)

if TYPE_CHECKING:
    from request_validation.messages import ErrorMessageIndex

__all__ = ["CompositeValidator", "RequestValidator"]

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RequestValidator(ObservableMixin, ABC, Generic[T]):
    """Abstract base class for request validators.

    Generic over T, the type of request body being validated. Subclasses
    implement check(), recording failures into the given errors; validate()
    runs a complete pass.

    Observers added to the validator receive VALIDATION_STARTED and
    VALIDATION_COMPLETED events, and are attached to the pass's
    ValidationErrors so they also see every ERROR_ADDED event.

    Example:
        class CreateDatasetValidator(RequestValidator[dict[str, Any]]):
            @property
            def name(self) -> str:
                return "create_dataset"

            def check(self, item: dict[str, Any], jpath: str, errors: ValidationErrors) -> None:
                req_check_length(item.get("name"), child_key(jpath, "name"), 3, 1024, errors)
                opt_check_max_length(
                    item.get("description"), child_key(jpath, "description"), 4000, errors
                )

        errors = CreateDatasetValidator().validate(body)
        if errors:
            return 422, errors.report().to_dict()
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Name of this validator for logging and identification."""
        ...

    @abstractmethod
    def check(self, item: T, jpath: str, errors: ValidationErrors) -> None:
        """Record every failure found in ``item``.

        Args:
            item: Request body, or the part of it this validator handles.
            jpath: JSON path of ``item``; empty at the document root.
            errors: Error bundle for the current validation pass.
        """
        ...

    def validate(
        self,
        item: T,
        *,
        root: str = "",
        messages: ErrorMessageIndex | None = None,
    ) -> ValidationErrors:
        """Run a validation pass over ``item``.

        Args:
            item: Request body to validate.
            root: JSON path of ``item``. Defaults to the document root.
            messages: Message index for this pass. Defaults to the
                process-wide index.

        Returns:
            A new ValidationErrors holding every failure found.
        """
        errors = ValidationErrors() if messages is None else ValidationErrors(messages=messages)
        for observer in self.observers:
            errors.add_observer(observer)

        start_time = time.perf_counter()
        self.notify(
            ValidationEvent(
                event_type=ValidationEventType.VALIDATION_STARTED,
                source=self,
                data={"item": item, "validator_name": self.name, "root": root},
            )
        )

        self.check(item, root, errors)

        duration_ms = (time.perf_counter() - start_time) * 1000
        logger.debug(
            "%s recorded %d validation errors in %.2fms", self.name, len(errors), duration_ms
        )
        self.notify(
            ValidationEvent(
                event_type=ValidationEventType.VALIDATION_COMPLETED,
                source=self,
                data={
                    "item": item,
                    "validator_name": self.name,
                    "is_valid": errors.is_empty,
                    "error_count": len(errors),
                    "duration_ms": duration_ms,
                },
            )
        )
        return errors

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"


class CompositeValidator(RequestValidator[T], Generic[T]):
    """Validator that runs several validators against the same request.

    All validators share the pass's ValidationErrors, so their errors are
    merged by JSON path. Every validator runs, whatever the earlier ones
    recorded.

    Only the composite emits VALIDATION_STARTED and VALIDATION_COMPLETED.
    Observers of a child validator are attached to the pass's
    ValidationErrors while that child runs, so they receive the
    ERROR_ADDED events it produces.

    Example:
        composite = CompositeValidator([NameValidator(), OptionsValidator()])
        errors = composite.validate(body)
    """

    def __init__(
        self,
        validators: list[RequestValidator[T]] | None = None,
        *,
        name: str = "composite",
    ) -> None:
        """Initialize composite validator.

        Args:
            validators: Validators to run, in order. The list is copied.
                Defaults to empty list.
            name: Name for this composite validator. Defaults to "composite".
        """
        self._validators: list[RequestValidator[T]] = list(validators or [])
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def check(self, item: T, jpath: str, errors: ValidationErrors) -> None:
        for validator in self._validators:
            attached = [o for o in validator.observers if o not in errors.observers]
            for observer in attached:
                errors.add_observer(observer)
            try:
                validator.check(item, jpath, errors)
            finally:
                for observer in attached:
                    errors.remove_observer(observer)

    def add_validator(self, validator: RequestValidator[T]) -> None:
        """Add a validator to the end of the composite."""
        self._validators.append(validator)

    def remove_validator(self, name: str) -> bool:
        """Remove a validator by name.

        Returns:
            True if a validator was removed, False if not found.
        """
        for i, v in enumerate(self._validators):
            if v.name == name:
                self._validators.pop(i)
                return True
        return False

    def has_validator(self, name: str) -> bool:
        """Check if a validator with the given name exists."""
        return any(v.name == name for v in self._validators)

    def get_validator(self, name: str) -> RequestValidator[T] | None:
        """Get a validator by name, or None if not found."""
        for v in self._validators:
            if v.name == name:
                return v
        return None

    @property
    def validators(self) -> list[RequestValidator[T]]:
        """Get copy of validators list."""
        return self._validators.copy()

    @property
    def validator_names(self) -> list[str]:
        """Get list of validator names in order."""
        return [v.name for v in self._validators]

    def __len__(self) -> int:
        """Return number of validators in the composite."""
        return len(self._validators)

    def __repr__(self) -> str:
        names = ", ".join(self.validator_names)
        return f"CompositeValidator(name={self._name!r}, validators=[{names}])"
