"""Presence-gated delegation for nested objects and arrays.

``require`` and ``require_non_empty`` only run the caller's checks once the
parent value is known to be present, so nested checks never see None.

Example:
    def check_options(options: dict[str, Any]) -> None:
        def check_fields(fields: list[str | None]) -> None:
            for i, f in enumerate(fields):
                check_not_blank(f, "options.fields", errors, index=i)

        require_non_empty(options.get("fields"), "options.fields", errors, check_fields)

    require(body.get("options"), "options", errors, check_options)
"""

from __future__ import annotations

from collections.abc import Callable, Sized
from typing import TYPE_CHECKING, TypeVar

from request_validation.checks.presence import check_not_empty, check_not_null

if TYPE_CHECKING:
    from request_validation.errors import ValidationErrors

__all__ = ["require", "require_non_empty"]

T = TypeVar("T")
S = TypeVar("S", bound=Sized)


def require(
    value: T | None,
    jpath: str,
    errors: ValidationErrors,
    checks: Callable[[T], object],
    *,
    index: int | None = None,
) -> bool:
    """Run ``checks`` on the value only if it is not None.

    If the value is None a null error is recorded and ``checks`` is not
    called. Otherwise ``checks`` is called exactly once with the value.

    Args:
        value: Value to test.
        jpath: JSON path to the element being checked.
        errors: Error bundle that receives any failure.
        checks: Validation function to run on the present value.
        index: Index of the value in a parent array, appended to ``jpath``
            when recording errors.

    Returns:
        True if ``checks`` was called.
    """
    if not check_not_null(value, jpath, errors, index=index):
        return False
    checks(value)
    return True


def require_non_empty(
    value: S | None,
    jpath: str,
    errors: ValidationErrors,
    checks: Callable[[S], object],
    *,
    index: int | None = None,
) -> bool:
    """Run ``checks`` on the collection only if it is present and not empty.

    None records a null error and an empty collection records an empty
    error; in both cases ``checks`` is not called.

    Returns:
        True if ``checks`` was called.
    """
    if not check_not_empty(value, jpath, errors, index=index):
        return False
    checks(value)
    return True
