"""
Customer Portal guard helpers.

Precondition checks, fatal-error classification and domain exception
enrichment used by the customer portal business logic.
"""

__version__ = "1.0.0"
__description__ = "Guard and assertion helpers for the customer portal"

from .config import settings
from .exceptions import (
    ArgumentNullError,
    CustomerPortalException,
    ErrorCode,
    FatalRuntimeError,
    InvalidArgumentError,
    PortalDomainException,
)
from .fatal import FatalCondition, fatal_condition, is_fatal
from .guards import (
    add_detail,
    assert_http_response_success,
    assert_not_empty,
    assert_not_null,
    assert_phone_number,
    assert_positive_decimal,
    assert_positive_int,
    assert_response_success,
)

__all__ = [
    "ArgumentNullError",
    "CustomerPortalException",
    "ErrorCode",
    "FatalCondition",
    "FatalRuntimeError",
    "InvalidArgumentError",
    "PortalDomainException",
    "add_detail",
    "assert_http_response_success",
    "assert_not_empty",
    "assert_not_null",
    "assert_phone_number",
    "assert_positive_decimal",
    "assert_positive_int",
    "assert_response_success",
    "fatal_condition",
    "is_fatal",
    "settings",
    "__version__",
]
