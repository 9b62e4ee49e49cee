"""
Guard and assertion helpers for the customer portal.

Each guard validates one precondition and raises immediately when it is
violated. Guards return None on success, except where noted.
"""

import re
from decimal import Decimal
from typing import Any, Optional, Union

import httpx

from .config import settings
from .exceptions import (
    ArgumentNullError,
    ErrorCode,
    InvalidArgumentError,
    PortalDomainException,
)
from .fatal import is_fatal
from .logging_config import get_logger
from .resources import (
    ASSERT_NUMBER_POSITIVE_INVALID_ERROR,
    ASSERT_NUMBER_POSITIVE_INVALID_PREFIX,
    ASSERT_PHONE_NUMBER_INVALID_ERROR,
    ASSERT_PHONE_NUMBER_INVALID_PREFIX,
    ASSERT_STRING_NOT_EMPTY_INVALID_ERROR,
    ASSERT_STRING_NOT_EMPTY_INVALID_PREFIX,
    HTTP_RESPONSE_FAILURE_MESSAGE,
    RESPONSE_BODY_DETAIL_KEY,
)

logger = get_logger(__name__)

# US phone numbers: optional 1 or 0 prefix, area code starting 2-9
# (optionally parenthesized), exchange, line number.
USA_PHONE_FORMAT = r"^[01]?[- .]?(\([2-9]\d{2}\)|[2-9]\d{2})[- .]?\d{3}[- .]?\d{4}$"
USA_PHONE_PATTERN = re.compile(USA_PHONE_FORMAT)

HTTP_SUCCESS_MIN = 200
HTTP_SUCCESS_MAX = 299

__all__ = [
    "USA_PHONE_FORMAT",
    "add_detail",
    "assert_http_response_success",
    "assert_not_empty",
    "assert_not_null",
    "assert_phone_number",
    "assert_positive_decimal",
    "assert_positive_int",
    "assert_response_success",
    "is_fatal",
]


def _log_guard_failure(check: str, caption: Optional[str]) -> None:
    if not settings.LOG_GUARD_FAILURES:
        return
    logger.debug(
        "Guard check failed",
        extra={"extra_fields": {"check": check, "caption": caption}},
    )


def assert_not_null(value: Any, caption: Optional[str]) -> None:
    """
    Ensure that a given value is not None.

    Args:
        value: The value to validate
        caption: The name to report in the exception

    Raises:
        ArgumentNullError: If value is None
    """
    if value is None:
        _log_guard_failure("not_null", caption)
        raise ArgumentNullError(caption)


def assert_not_empty(value: Optional[str], caption: Optional[str]) -> None:
    """
    Ensure that a string is not None, empty or whitespace only.

    Args:
        value: The string to validate
        caption: The name to report in the exception

    Raises:
        InvalidArgumentError: If the string carries no content
    """
    if value is None or not value.strip():
        _log_guard_failure("not_empty", caption)
        raise InvalidArgumentError(
            ASSERT_STRING_NOT_EMPTY_INVALID_ERROR.format(
                caption if caption is not None else ASSERT_STRING_NOT_EMPTY_INVALID_PREFIX
            ),
            caption,
        )


def assert_phone_number(phone_number: Optional[str], caption: Optional[str]) -> None:
    """
    Ensure that a string is a valid US phone number.

    Only the format is checked, not whether the number is allocated.

    Args:
        phone_number: The phone number to validate
        caption: The name to report in the exception

    Raises:
        ArgumentNullError: If phone_number is None
        InvalidArgumentError: If phone_number does not match the US format
    """
    assert_not_null(phone_number, "phone_number")

    if not USA_PHONE_PATTERN.match(phone_number):
        _log_guard_failure("phone_number", caption)
        raise InvalidArgumentError(
            ASSERT_PHONE_NUMBER_INVALID_ERROR.format(
                caption if caption is not None else ASSERT_PHONE_NUMBER_INVALID_PREFIX
            ),
            caption,
        )


def _assert_positive(
    number: Union[int, float, Decimal], caption: Optional[str], check: str
) -> None:
    # NaN is never positive; Decimal NaN would raise InvalidOperation on compare.
    is_nan = number.is_nan() if isinstance(number, Decimal) else number != number
    if is_nan or not number > 0:
        _log_guard_failure(check, caption)
        raise InvalidArgumentError(
            ASSERT_NUMBER_POSITIVE_INVALID_ERROR.format(
                caption if caption is not None else ASSERT_NUMBER_POSITIVE_INVALID_PREFIX
            ),
            caption,
        )


def assert_positive_int(number: int, caption: Optional[str]) -> None:
    """Ensure that an integer is strictly greater than zero."""
    _assert_positive(number, caption, "positive_int")


def assert_positive_decimal(number: Decimal, caption: Optional[str]) -> None:
    """Ensure that a decimal is strictly greater than zero."""
    _assert_positive(number, caption, "positive_decimal")


def add_detail(
    exception: PortalDomainException, key: str, value: str
) -> PortalDomainException:
    """
    Append a detail to a portal domain exception.

    An existing detail with the same key is overwritten.

    Args:
        exception: The exception to append to
        key: The detail key
        value: The detail value

    Returns:
        The same exception instance, updated

    Raises:
        ArgumentNullError: If exception is None
        InvalidArgumentError: If key or value is empty
    """
    assert_not_null(exception, "exception")
    assert_not_empty(key, "key")
    assert_not_empty(value, "value")

    exception.details[key] = value

    return exception


def assert_http_response_success(
    http_status_code: int,
    error_code: ErrorCode,
    error_message: str,
    response_body: Any = None,
) -> None:
    """
    Ensure that an HTTP status code denotes success (200-299).

    Args:
        http_status_code: The HTTP status code
        error_code: The error code to report in case of failure
        error_message: The error message to report
        response_body: A response body to include in the exception if raised

    Raises:
        PortalDomainException: If the status code is outside the success range.
            The body's string form is attached under the ``ResponseBody`` detail.
        ValueError: If error_code is not a known ErrorCode value
    """
    error_code = ErrorCode(error_code)

    if HTTP_SUCCESS_MIN <= http_status_code <= HTTP_SUCCESS_MAX:
        return

    body_text = "" if response_body is None else str(response_body)
    formatted_error_message = HTTP_RESPONSE_FAILURE_MESSAGE.format(
        error_message, http_status_code, body_text
    )

    if settings.LOG_GUARD_FAILURES:
        logger.warning(
            "Unsuccessful HTTP response",
            extra={
                "extra_fields": {
                    "status_code": http_status_code,
                    "error_code": error_code.value,
                    "response_body": body_text[: settings.RESPONSE_BODY_LOG_LIMIT],
                }
            },
        )

    exception = PortalDomainException(error_code, formatted_error_message)
    # A blank body cannot be stored as a detail and must not mask the failure.
    if body_text.strip():
        add_detail(exception, RESPONSE_BODY_DETAIL_KEY, body_text)

    raise exception


def assert_response_success(
    response: httpx.Response,
    error_code: ErrorCode,
    error_message: str,
) -> httpx.Response:
    """
    Ensure that an httpx response is successful.

    Args:
        response: Response returned by an httpx client
        error_code: The error code to report in case of failure
        error_message: The error message to report

    Returns:
        The response, for chaining into ``.json()``

    Raises:
        ArgumentNullError: If response is None
        PortalDomainException: If the response status is not 2xx
    """
    assert_not_null(response, "response")

    if not response.is_success:
        assert_http_response_success(
            response.status_code, error_code, error_message, response.text
        )

    return response
