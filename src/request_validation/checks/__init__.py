"""Field checks that record failures into a ValidationErrors instance."""

from request_validation.checks.numbers import (
    check_in_range,
    check_int_range,
    check_maximum,
    check_minimum,
    opt_check_in_range,
    opt_check_int_range,
    opt_check_maximum,
    opt_check_minimum,
    range_bounds,
    req_check_in_range,
    req_check_int_range,
    req_check_maximum,
    req_check_minimum,
)
from request_validation.checks.presence import (
    check_not_blank,
    check_not_empty,
    check_not_null,
)
from request_validation.checks.require import require, require_non_empty
from request_validation.checks.strings import (
    byte_length,
    check_length,
    check_length_range,
    check_max_length,
    check_min_length,
    opt_check_length,
    opt_check_length_range,
    opt_check_max_length,
    opt_check_min_length,
    req_check_length,
    req_check_length_range,
    req_check_max_length,
    req_check_min_length,
)

__all__ = [
    # Presence
    "check_not_blank",
    "check_not_empty",
    "check_not_null",
    # Text length
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
    # Ordered values
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
    # Delegation
    "require",
    "require_non_empty",
]
