"""Process-wide default error message index.

The default is read when a ValidationErrors instance is created without an
explicit index. Configure it once at application startup, before any
validation pass begins.

Example:
    from request_validation import SimpleErrorMessageIndex, set_message_index

    set_message_index(SimpleErrorMessageIndex(null_error_message="is required"))
"""

from __future__ import annotations

import logging

from request_validation.messages import ErrorMessageIndex, SimpleErrorMessageIndex

__all__ = [
    "DEFAULT_MESSAGE_INDEX",
    "get_message_index",
    "reset_message_index",
    "set_message_index",
]

logger = logging.getLogger(__name__)

DEFAULT_MESSAGE_INDEX: ErrorMessageIndex = SimpleErrorMessageIndex()
"""Message index used until set_message_index() is called."""

_message_index: ErrorMessageIndex = DEFAULT_MESSAGE_INDEX


def get_message_index() -> ErrorMessageIndex:
    """Return the current process-wide message index."""
    return _message_index


def set_message_index(index: ErrorMessageIndex) -> None:
    """Replace the process-wide message index.

    Sinks created before this call keep the index they captured.

    Args:
        index: Object implementing the ErrorMessageIndex protocol.

    Raises:
        TypeError: If ``index`` does not implement ErrorMessageIndex.
    """
    global _message_index

    if not isinstance(index, ErrorMessageIndex):
        raise TypeError(
            f"message index must implement ErrorMessageIndex, got {type(index).__name__}"
        )
    logger.debug("Default message index set to %s", type(index).__name__)
    _message_index = index


def reset_message_index() -> None:
    """Restore DEFAULT_MESSAGE_INDEX as the process-wide message index."""
    global _message_index

    logger.debug("Default message index reset")
    _message_index = DEFAULT_MESSAGE_INDEX
