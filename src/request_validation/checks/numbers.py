"""Range checks for ordered values.

Works for any value that supports ``<`` and ``>`` against its bounds: ints
of any width, floats, Decimals, dates. Bounds are inclusive.

Each check comes in the same three shapes as the text checks: ``check_*``,
``opt_check_*`` (None passes) and ``req_check_*`` (None records a null
error).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, TypeGuard, TypeVar

from request_validation.checks.presence import check_not_null
from request_validation.jpath import resolve

if TYPE_CHECKING:
    from request_validation.errors import ValidationErrors

__all__ = [
    "check_in_range",
    "check_int_range",
    "check_maximum",
    "check_minimum",
    "opt_check_in_range",
    "opt_check_int_range",
    "opt_check_maximum",
    "opt_check_minimum",
    "range_bounds",
    "req_check_in_range",
    "req_check_int_range",
    "req_check_maximum",
    "req_check_minimum",
]


class Ordered(Protocol):
    def __lt__(self, other: Any, /) -> bool: ...

    def __gt__(self, other: Any, /) -> bool: ...


N = TypeVar("N", bound=Ordered)


# ---------------------------------------------------------------------------
# Already not null
# ---------------------------------------------------------------------------


def check_minimum(
    value: N,
    jpath: str,
    minimum: N,
    errors: ValidationErrors,
    *,
    index: int | None = None,
) -> bool:
    """Validate that the value is greater than or equal to ``minimum``.

    Args:
        value: Value to validate.
        jpath: JSON path to the element being checked.
        minimum: Smallest valid value.
        errors: Error bundle that receives any failure.
        index: Index of the value in a parent array, appended to ``jpath``
            when recording errors.

    Returns:
        True if the value is not below the minimum.
    """
    if value < minimum:
        errors.add(
            resolve(jpath, index),
            errors.messages.min_value_error_message(minimum, value),
        )
        return False
    return True


def check_maximum(
    value: N,
    jpath: str,
    maximum: N,
    errors: ValidationErrors,
    *,
    index: int | None = None,
) -> bool:
    """Validate that the value is less than or equal to ``maximum``."""
    if value > maximum:
        errors.add(
            resolve(jpath, index),
            errors.messages.max_value_error_message(maximum, value),
        )
        return False
    return True


def check_in_range(
    value: N,
    jpath: str,
    minimum: N,
    maximum: N,
    errors: ValidationErrors,
    *,
    index: int | None = None,
) -> bool:
    """Validate that ``minimum <= value <= maximum``.

    Both bounds are always tested. For ``minimum <= maximum`` at most one of
    them can fail.
    """
    min_ok = check_minimum(value, jpath, minimum, errors, index=index)
    max_ok = check_maximum(value, jpath, maximum, errors, index=index)
    return min_ok and max_ok


# ---------------------------------------------------------------------------
# Optional
# ---------------------------------------------------------------------------


def opt_check_minimum(
    value: N | None,
    jpath: str,
    minimum: N,
    errors: ValidationErrors,
    *,
    index: int | None = None,
) -> bool:
    if value is None:
        return True
    return check_minimum(value, jpath, minimum, errors, index=index)


def opt_check_maximum(
    value: N | None,
    jpath: str,
    maximum: N,
    errors: ValidationErrors,
    *,
    index: int | None = None,
) -> bool:
    if value is None:
        return True
    return check_maximum(value, jpath, maximum, errors, index=index)


def opt_check_in_range(
    value: N | None,
    jpath: str,
    minimum: N,
    maximum: N,
    errors: ValidationErrors,
    *,
    index: int | None = None,
) -> bool:
    """check_in_range() for optional values; None is valid with or without an index."""
    if value is None:
        return True
    return check_in_range(value, jpath, minimum, maximum, errors, index=index)


# ---------------------------------------------------------------------------
# Required
# ---------------------------------------------------------------------------


def req_check_minimum(
    value: N | None,
    jpath: str,
    minimum: N,
    errors: ValidationErrors,
    *,
    index: int | None = None,
) -> TypeGuard[N]:
    return check_not_null(value, jpath, errors, index=index) and check_minimum(
        value, jpath, minimum, errors, index=index
    )


def req_check_maximum(
    value: N | None,
    jpath: str,
    maximum: N,
    errors: ValidationErrors,
    *,
    index: int | None = None,
) -> TypeGuard[N]:
    return check_not_null(value, jpath, errors, index=index) and check_maximum(
        value, jpath, maximum, errors, index=index
    )


def req_check_in_range(
    value: N | None,
    jpath: str,
    minimum: N,
    maximum: N,
    errors: ValidationErrors,
    *,
    index: int | None = None,
) -> TypeGuard[N]:
    """check_in_range() for required values; None records a null error."""
    return check_not_null(value, jpath, errors, index=index) and check_in_range(
        value, jpath, minimum, maximum, errors, index=index
    )


# ---------------------------------------------------------------------------
# Integer range forms
# ---------------------------------------------------------------------------


def range_bounds(bounds: range) -> tuple[int, int]:
    """Inclusive ``(minimum, maximum)`` of a step-1 range.

    ``range(1, 11)`` covers 1 through 10. An empty range such as
    ``range(5, 1)`` gives inverted bounds, ``(5, 0)``.

    Raises:
        ValueError: If the range step is not 1.
    """
    if bounds.step != 1:
        raise ValueError(f"range step must be 1, got {bounds!r}")
    return bounds.start, bounds.stop - 1


def check_int_range(
    value: int,
    jpath: str,
    bounds: range,
    errors: ValidationErrors,
    *,
    index: int | None = None,
) -> bool:
    """check_in_range() with inclusive bounds taken from ``bounds``.

    Example:
        check_int_range(body["size"], "size", range(1, 101), errors)
    """
    minimum, maximum = range_bounds(bounds)
    return check_in_range(value, jpath, minimum, maximum, errors, index=index)


def opt_check_int_range(
    value: int | None,
    jpath: str,
    bounds: range,
    errors: ValidationErrors,
    *,
    index: int | None = None,
) -> bool:
    if value is None:
        return True
    return check_int_range(value, jpath, bounds, errors, index=index)


def req_check_int_range(
    value: int | None,
    jpath: str,
    bounds: range,
    errors: ValidationErrors,
    *,
    index: int | None = None,
) -> TypeGuard[int]:
    """check_int_range() for required values; None records a null error."""
    return check_not_null(value, jpath, errors, index=index) and check_int_range(
        value, jpath, bounds, errors, index=index
    )
