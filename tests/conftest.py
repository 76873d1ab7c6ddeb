"""Shared fixtures and Hypothesis strategies for tests."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

import pytest
from hypothesis import strategies as st

from request_validation import reset_message_index
from request_validation.errors import ValidationErrors
from request_validation.events import ValidationEvent, ValidationEventType
from request_validation.messages import SimpleErrorMessageIndex

# -----------------------------------------------------------------------------
# Hypothesis Strategies
# -----------------------------------------------------------------------------

# Strategy for object keys (letters and numbers only)
field_names = st.text(
    min_size=1,
    max_size=30,
    alphabet=st.characters(whitelist_categories=("L", "N")),
)

# Strategy for non-empty JSON paths
json_paths = st.lists(field_names, min_size=1, max_size=4).map(".".join)

# Strategy for array indices
indices = st.integers(min_value=0, max_value=10_000)

# Strategy for messages
messages = st.text(min_size=1, max_size=200)

# Strategy for ASCII-only text, where characters and bytes agree
ascii_text = st.text(alphabet=st.characters(min_codepoint=0x21, max_codepoint=0x7E), max_size=50)


# -----------------------------------------------------------------------------
# Test Observers
# -----------------------------------------------------------------------------


class RecordingObserver:
    """Observer that records all events for testing."""

    def __init__(self) -> None:
        self.events: list[ValidationEvent] = []

    def on_event(self, event: ValidationEvent) -> None:
        self.events.append(event)

    @property
    def event_types(self) -> list[ValidationEventType]:
        return [e.event_type for e in self.events]


class CallCounter:
    """Callable that records the values it was called with."""

    def __init__(self) -> None:
        self.calls: list[Any] = []

    def __call__(self, value: Any) -> None:
        self.calls.append(value)

    @property
    def count(self) -> int:
        return len(self.calls)


# -----------------------------------------------------------------------------
# Pytest Fixtures
# -----------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _restore_message_index() -> Iterator[None]:
    """Keep tests that change the process-wide index from leaking."""
    yield
    reset_message_index()


@pytest.fixture
def errors() -> ValidationErrors:
    """Create a fresh ValidationErrors instance."""
    return ValidationErrors()


@pytest.fixture
def custom_index() -> SimpleErrorMessageIndex:
    """Create a message index with non-default wording."""
    return SimpleErrorMessageIndex(
        null_error_message="is required",
        blank_error_message="is blank",
        empty_error_message="has no items",
        min_length_template="too short: {1} < {0}",
        max_length_template="too long: {1} > {0}",
        min_value_template="too small: {1} < {0}",
        max_value_template="too large: {1} > {0}",
    )


@pytest.fixture
def recording_observer() -> RecordingObserver:
    """Create a RecordingObserver instance."""
    return RecordingObserver()


@pytest.fixture
def counter() -> CallCounter:
    """Create a CallCounter instance."""
    return CallCounter()
