"""Request field validation with JSON path keyed error reporting."""

import logging

from request_validation.checks import (
    byte_length,
    check_in_range,
    check_int_range,
    check_length,
    check_length_range,
    check_max_length,
    check_maximum,
    check_min_length,
    check_minimum,
    check_not_blank,
    check_not_empty,
    check_not_null,
    opt_check_in_range,
    opt_check_int_range,
    opt_check_length,
    opt_check_length_range,
    opt_check_max_length,
    opt_check_maximum,
    opt_check_min_length,
    opt_check_minimum,
    range_bounds,
    req_check_in_range,
    req_check_int_range,
    req_check_length,
    req_check_length_range,
    req_check_max_length,
    req_check_maximum,
    req_check_min_length,
    req_check_minimum,
    require,
    require_non_empty,
)
from request_validation.config import (
    DEFAULT_MESSAGE_INDEX,
    get_message_index,
    reset_message_index,
    set_message_index,
)
from request_validation.errors import ValidationErrors, ValidationReport
from request_validation.events import (
    LoggingObserver,
    ObservableMixin,
    ValidationEvent,
    ValidationEventType,
    ValidationObserver,
)
from request_validation.jpath import (
    append,
    append_index,
    append_key,
    child_key,
    join,
    resolve,
)
from request_validation.messages import ErrorMessageIndex, SimpleErrorMessageIndex
from request_validation.reporting import build_report_table, print_report
from request_validation.validators import CompositeValidator, RequestValidator

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # JSON paths
    "append",
    "append_index",
    "append_key",
    "child_key",
    "join",
    "resolve",
    # Messages and configuration
    "DEFAULT_MESSAGE_INDEX",
    "ErrorMessageIndex",
    "SimpleErrorMessageIndex",
    "get_message_index",
    "reset_message_index",
    "set_message_index",
    # Error bundle
    "ValidationErrors",
    "ValidationReport",
    # Checks
    "byte_length",
    "check_in_range",
    "check_int_range",
    "check_length",
    "check_length_range",
    "check_max_length",
    "check_maximum",
    "check_min_length",
    "check_minimum",
    "check_not_blank",
    "check_not_empty",
    "check_not_null",
    "opt_check_in_range",
    "opt_check_int_range",
    "opt_check_length",
    "opt_check_length_range",
    "opt_check_max_length",
    "opt_check_maximum",
    "opt_check_min_length",
    "opt_check_minimum",
    "range_bounds",
    "req_check_in_range",
    "req_check_int_range",
    "req_check_length",
    "req_check_length_range",
    "req_check_max_length",
    "req_check_maximum",
    "req_check_min_length",
    "req_check_minimum",
    "require",
    "require_non_empty",
    # Validators
    "CompositeValidator",
    "RequestValidator",
    # Observer pattern
    "LoggingObserver",
    "ObservableMixin",
    "ValidationEvent",
    "ValidationEventType",
    "ValidationObserver",
    # Rich output
    "build_report_table",
    "print_report",
]

__version__ = "0.6.0"
