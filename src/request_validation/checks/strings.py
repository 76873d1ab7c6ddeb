"""Text length checks.

Minimum lengths are measured in characters; maximum lengths are measured in
UTF-8 bytes, matching databases that size text columns in bytes.

Each bound comes in three shapes:

- ``check_*`` for values already known to be present.
- ``opt_check_*`` for optional values; None passes without an error.
- ``req_check_*`` for required values; None records a null error and the
  bounds are not tested.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeGuard

from request_validation.checks.numbers import range_bounds
from request_validation.checks.presence import check_not_null
from request_validation.jpath import resolve

if TYPE_CHECKING:
    from request_validation.errors import ValidationErrors

__all__ = [
    "byte_length",
    "check_length",
    "check_length_range",
    "check_max_length",
    "check_min_length",
    "opt_check_length",
    "opt_check_length_range",
    "opt_check_max_length",
    "opt_check_min_length",
    "req_check_length",
    "req_check_length_range",
    "req_check_max_length",
    "req_check_min_length",
]


def byte_length(value: str) -> int:
    """Size of the text in bytes when encoded as UTF-8."""
    return len(value.encode("utf-8"))


# ---------------------------------------------------------------------------
# Already not null
# ---------------------------------------------------------------------------


def check_min_length(
    value: str,
    jpath: str,
    min_length: int,
    errors: ValidationErrors,
    *,
    index: int | None = None,
) -> bool:
    """Validate that the text is at least ``min_length`` characters long.

    Args:
        value: Text to validate.
        jpath: JSON path to the element being checked.
        min_length: Minimum valid length, in characters.
        errors: Error bundle that receives any failure.
        index: Index of the value in a parent array, appended to ``jpath``
            when recording errors.

    Returns:
        True if the text is long enough.
    """
    length = len(value)
    if length < min_length:
        errors.add(
            resolve(jpath, index),
            errors.messages.min_length_error_message(min_length, length),
        )
        return False
    return True


def check_max_length(
    value: str,
    jpath: str,
    max_length: int,
    errors: ValidationErrors,
    *,
    index: int | None = None,
) -> bool:
    """Validate that the UTF-8 size of the text does not exceed ``max_length``.

    Returns:
        True if the encoded text fits in ``max_length`` bytes.
    """
    size = byte_length(value)
    if size > max_length:
        errors.add(
            resolve(jpath, index),
            errors.messages.max_length_error_message(max_length, size),
        )
        return False
    return True


def check_length(
    value: str,
    jpath: str,
    min_length: int,
    max_length: int,
    errors: ValidationErrors,
    *,
    index: int | None = None,
) -> bool:
    """Validate both the character minimum and the byte maximum.

    Both bounds are always tested, so a single value may record two errors.
    """
    min_ok = check_min_length(value, jpath, min_length, errors, index=index)
    max_ok = check_max_length(value, jpath, max_length, errors, index=index)
    return min_ok and max_ok


# ---------------------------------------------------------------------------
# Optional
# ---------------------------------------------------------------------------


def opt_check_min_length(
    value: str | None,
    jpath: str,
    min_length: int,
    errors: ValidationErrors,
    *,
    index: int | None = None,
) -> bool:
    """check_min_length() for optional text; None is valid."""
    if value is None:
        return True
    return check_min_length(value, jpath, min_length, errors, index=index)


def opt_check_max_length(
    value: str | None,
    jpath: str,
    max_length: int,
    errors: ValidationErrors,
    *,
    index: int | None = None,
) -> bool:
    """check_max_length() for optional text; None is valid."""
    if value is None:
        return True
    return check_max_length(value, jpath, max_length, errors, index=index)


def opt_check_length(
    value: str | None,
    jpath: str,
    min_length: int,
    max_length: int,
    errors: ValidationErrors,
    *,
    index: int | None = None,
) -> bool:
    """check_length() for optional text; None is valid."""
    if value is None:
        return True
    return check_length(value, jpath, min_length, max_length, errors, index=index)


# ---------------------------------------------------------------------------
# Required
# ---------------------------------------------------------------------------


def req_check_min_length(
    value: str | None,
    jpath: str,
    min_length: int,
    errors: ValidationErrors,
    *,
    index: int | None = None,
) -> TypeGuard[str]:
    """check_min_length() for required text; None records a null error."""
    return check_not_null(value, jpath, errors, index=index) and check_min_length(
        value, jpath, min_length, errors, index=index
    )


def req_check_max_length(
    value: str | None,
    jpath: str,
    max_length: int,
    errors: ValidationErrors,
    *,
    index: int | None = None,
) -> TypeGuard[str]:
    """check_max_length() for required text; None records a null error."""
    return check_not_null(value, jpath, errors, index=index) and check_max_length(
        value, jpath, max_length, errors, index=index
    )


def req_check_length(
    value: str | None,
    jpath: str,
    min_length: int,
    max_length: int,
    errors: ValidationErrors,
    *,
    index: int | None = None,
) -> TypeGuard[str]:
    """check_length() for required text; None records a null error."""
    return check_not_null(value, jpath, errors, index=index) and check_length(
        value, jpath, min_length, max_length, errors, index=index
    )


# ---------------------------------------------------------------------------
# Range forms
# ---------------------------------------------------------------------------


def check_length_range(
    value: str,
    jpath: str,
    lengths: range,
    errors: ValidationErrors,
    *,
    index: int | None = None,
) -> bool:
    """check_length() with bounds taken from ``lengths``.

    ``range(3, 25)`` means at least 3 characters and at most 24 bytes.
    """
    min_length, max_length = range_bounds(lengths)
    return check_length(value, jpath, min_length, max_length, errors, index=index)


def opt_check_length_range(
    value: str | None,
    jpath: str,
    lengths: range,
    errors: ValidationErrors,
    *,
    index: int | None = None,
) -> bool:
    if value is None:
        return True
    return check_length_range(value, jpath, lengths, errors, index=index)


def req_check_length_range(
    value: str | None,
    jpath: str,
    lengths: range,
    errors: ValidationErrors,
    *,
    index: int | None = None,
) -> TypeGuard[str]:
    """check_length_range() for required text; None records a null error."""
    return check_not_null(value, jpath, errors, index=index) and check_length_range(
        value, jpath, lengths, errors, index=index
    )
