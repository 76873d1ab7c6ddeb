"""Tests for check_not_null(), check_not_blank() and check_not_empty()."""

from __future__ import annotations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from request_validation import ValidationErrors
from request_validation.checks.presence import (
    check_not_blank,
    check_not_empty,
    check_not_null,
)

from .conftest import indices


class TestCheckNotNull:
    """Tests for check_not_null()."""

    def test_none_records_null_message(self, errors: ValidationErrors) -> None:
        """None fails with the null message."""
        assert check_not_null(None, "name", errors) is False
        assert errors.by_key == {"name": ["must not be null"]}

    @pytest.mark.parametrize("value", ["", 0, False, [], {}, "x"])
    def test_falsy_values_are_present(self, errors: ValidationErrors, value: object) -> None:
        """Only None counts as absent."""
        assert check_not_null(value, "name", errors) is True
        assert errors.is_empty

    def test_index_is_appended(self, errors: ValidationErrors) -> None:
        """The index is folded into the recorded path."""
        check_not_null(None, "items", errors, index=2)

        assert errors.by_key == {"items[2]": ["must not be null"]}

    def test_uses_bundle_message_index(self, custom_index) -> None:
        """Messages come from the bundle's index."""
        errors = ValidationErrors(messages=custom_index)

        check_not_null(None, "name", errors)

        assert errors.by_key == {"name": ["is required"]}


class TestCheckNotBlank:
    """Tests for check_not_blank()."""

    def test_none_records_only_null(self, errors: ValidationErrors) -> None:
        """None records the null message and not the blank message."""
        assert check_not_blank(None, "name", errors) is False
        assert errors.by_key == {"name": ["must not be null"]}

    @pytest.mark.parametrize("value", ["", " ", "\t\n", "　"])
    def test_blank_records_blank(self, errors: ValidationErrors, value: str) -> None:
        """Empty and whitespace-only text records the blank message."""
        assert check_not_blank(value, "name", errors) is False
        assert errors.by_key == {"name": ["must not be blank"]}

    @pytest.mark.parametrize("value", ["x", "  x  ", "0"])
    def test_text_passes(self, errors: ValidationErrors, value: str) -> None:
        """Text with any non-whitespace character passes."""
        assert check_not_blank(value, "name", errors) is True
        assert errors.is_empty

    def test_index_is_appended(self, errors: ValidationErrors) -> None:
        """The index is folded into the recorded path."""
        check_not_blank("", "options.fields", errors, index=1)

        assert errors.by_key == {"options.fields[1]": ["must not be blank"]}

    @given(value=st.one_of(st.none(), st.text(max_size=20)), index=indices)
    @settings(max_examples=100)
    def test_at_most_one_message(self, value: str | None, index: int) -> None:
        """A single call records zero or one message."""
        errors = ValidationErrors()

        result = check_not_blank(value, "f", errors, index=index)

        assert len(errors) == (0 if result else 1)


class TestCheckNotEmpty:
    """Tests for check_not_empty()."""

    def test_none_records_null(self, errors: ValidationErrors) -> None:
        """None records the null message."""
        assert check_not_empty(None, "items", errors) is False
        assert errors.by_key == {"items": ["must not be null"]}

    @pytest.mark.parametrize("value", [[], {}, "", ()])
    def test_empty_records_empty(self, errors: ValidationErrors, value: object) -> None:
        """Zero-length values record the empty message."""
        assert check_not_empty(value, "items", errors) is False  # type: ignore[arg-type]
        assert errors.by_key == {"items": ["must not be empty"]}

    def test_non_empty_passes(self, errors: ValidationErrors) -> None:
        """Collections with elements pass."""
        assert check_not_empty([None], "items", errors) is True
        assert errors.is_empty

    def test_whitespace_string_is_not_empty(self, errors: ValidationErrors) -> None:
        """Emptiness is about length, unlike blankness."""
        assert check_not_empty(" ", "items", errors) is True
