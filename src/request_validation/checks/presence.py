"""Presence checks: not null, not blank, not empty.

A True result from any of these means the value was not None, which the
TypeGuard return annotations pass on to type checkers.
"""

from __future__ import annotations

from collections.abc import Sized
from typing import TYPE_CHECKING, TypeGuard, TypeVar

from request_validation.jpath import resolve

if TYPE_CHECKING:
    from request_validation.errors import ValidationErrors

__all__ = ["check_not_blank", "check_not_empty", "check_not_null"]

T = TypeVar("T")
S = TypeVar("S", bound=Sized)


def check_not_null(
    value: T | None,
    jpath: str,
    errors: ValidationErrors,
    *,
    index: int | None = None,
) -> TypeGuard[T]:
    """Require that the value is not None.

    Args:
        value: Value to test.
        jpath: JSON path to the element being checked, e.g.
            ``"meta.publication[2].citation"``.
        errors: Error bundle that receives any failure.
        index: Index of the value in a parent array, appended to ``jpath``
            when recording errors.

    Returns:
        True if the value is present, False if a null error was recorded.
    """
    if value is None:
        errors.add(resolve(jpath, index), errors.messages.null_error_message)
        return False
    return True


def check_not_blank(
    value: str | None,
    jpath: str,
    errors: ValidationErrors,
    *,
    index: int | None = None,
) -> TypeGuard[str]:
    """Require that the text is not None, empty, or whitespace only.

    At most one error is recorded: the null message for None, otherwise the
    blank message.

    Returns:
        True if the text has non-whitespace content.
    """
    if not check_not_null(value, jpath, errors, index=index):
        return False
    if not value.strip():
        errors.add(resolve(jpath, index), errors.messages.blank_error_message)
        return False
    return True


def check_not_empty(
    value: S | None,
    jpath: str,
    errors: ValidationErrors,
    *,
    index: int | None = None,
) -> TypeGuard[S]:
    """Require that the collection (or text) is not None and has elements.

    At most one error is recorded: the null message for None, otherwise the
    empty message.
    """
    if not check_not_null(value, jpath, errors, index=index):
        return False
    if len(value) == 0:
        errors.add(resolve(jpath, index), errors.messages.empty_error_message)
        return False
    return True
