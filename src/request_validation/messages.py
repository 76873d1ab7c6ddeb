"""Error message index.

Central source of the human-readable text recorded by the validation
functions in this package. Substitute a custom ErrorMessageIndex to change
wording or to localize messages.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, field_validator

__all__ = ["ErrorMessageIndex", "SimpleErrorMessageIndex"]


@runtime_checkable
class ErrorMessageIndex(Protocol):
    """Protocol for error message providers.

    Implementations must be pure: every method returns the same text for the
    same arguments, so one index may be shared between validation passes.

    Example:
        class ShoutingIndex:
            null_error_message = "REQUIRED"
            blank_error_message = "REQUIRED"
            empty_error_message = "REQUIRED"

            def min_length_error_message(self, min_length: int, actual: int) -> str:
                return f"TOO SHORT ({actual} < {min_length})"

            ...
    """

    null_error_message: str
    """Message recorded when a field is null."""

    blank_error_message: str
    """Message recorded when a text field is empty or whitespace only."""

    empty_error_message: str
    """Message recorded when a collection field has no elements."""

    def min_length_error_message(self, min_length: int, actual: int) -> str:
        """Message for text shorter, in characters, than the allowed minimum."""
        ...

    def max_length_error_message(self, max_length: int, actual: int) -> str:
        """Message for text larger, in UTF-8 bytes, than the allowed maximum."""
        ...

    def min_value_error_message(self, minimum: Any, actual: Any) -> str:
        """Message for a value below the allowed minimum."""
        ...

    def max_value_error_message(self, maximum: Any, actual: Any) -> str:
        """Message for a value above the allowed maximum."""
        ...


class SimpleErrorMessageIndex(BaseModel):
    """Default ErrorMessageIndex backed by overridable format templates.

    Templates use ``str.format`` positional fields: ``{0}`` is the bound the
    value was tested against and ``{1}`` is the observed value (or length).
    Length templates receive ints. Value templates receive whatever ordered
    type was checked, so they must not use type-specific format specs such
    as ``{0:d}``.

    Attributes:
        null_error_message: Text for null fields.
        blank_error_message: Text for blank text fields.
        empty_error_message: Text for empty collections.
        min_length_template: Template for too-short text.
        max_length_template: Template for text over the byte limit.
        min_value_template: Template for values below a minimum.
        max_value_template: Template for values above a maximum.

    Example:
        index = SimpleErrorMessageIndex(
            max_length_template="may not exceed {0} bytes (got {1})",
        )
        index.max_length_error_message(10, 12)
        # "may not exceed 10 bytes (got 12)"
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    null_error_message: str = "must not be null"
    blank_error_message: str = "must not be blank"
    empty_error_message: str = "must not be empty"

    min_length_template: str = "must be at least {0} characters in length"
    max_length_template: str = "exceeds the max allowed length of {0} bytes"
    min_value_template: str = "must be greater than or equal to {0}"
    max_value_template: str = "must be less than or equal to {0}"

    @field_validator("min_length_template", "max_length_template")
    @classmethod
    def _check_length_template(cls, value: str) -> str:
        try:
            value.format(0, 0)
        except (IndexError, KeyError, ValueError) as e:
            raise ValueError(
                f"template must only use positional fields {{0}} and {{1}}: {value!r}"
            ) from e
        return value

    @field_validator("min_value_template", "max_value_template")
    @classmethod
    def _check_value_template(cls, value: str) -> str:
        # Value checks accept any ordered type, so the template must format them all.
        for sample in (0, 0.5, Decimal("0.5"), date(2000, 1, 1)):
            try:
                value.format(sample, sample)
            except (IndexError, KeyError, TypeError, ValueError) as e:
                raise ValueError(
                    "template must only use positional fields {0} and {1} and must "
                    f"format any value type: {value!r} fails for {sample!r}"
                ) from e
        return value

    def min_length_error_message(self, min_length: int, actual: int) -> str:
        return self.min_length_template.format(min_length, actual)

    def max_length_error_message(self, max_length: int, actual: int) -> str:
        return self.max_length_template.format(max_length, actual)

    def min_value_error_message(self, minimum: Any, actual: Any) -> str:
        return self.min_value_template.format(minimum, actual)

    def max_value_error_message(self, maximum: Any, actual: Any) -> str:
        return self.max_value_template.format(maximum, actual)
