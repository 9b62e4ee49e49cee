"""
Custom exception classes for the customer portal.

Provides the domain exception raised to portal business logic, the
argument errors raised by the guard helpers, and the explicit fatal
runtime error used by the fatal classification.
"""

from enum import Enum
from typing import TYPE_CHECKING, Dict, Optional

if TYPE_CHECKING:
    from .fatal import FatalCondition


class ErrorCode(str, Enum):
    """Error-code classifications reported with a portal domain exception."""

    SERVER_ERROR = "SERVER_ERROR"
    INVALID_INPUT = "INVALID_INPUT"
    DOWNSTREAM_SERVICE_ERROR = "DOWNSTREAM_SERVICE_ERROR"
    PAYMENT_GATEWAY_FAILURE = "PAYMENT_GATEWAY_FAILURE"
    PARTNER_CENTER_ERROR = "PARTNER_CENTER_ERROR"
    SUBSCRIPTION_NOT_FOUND = "SUBSCRIPTION_NOT_FOUND"
    CUSTOMER_NOT_FOUND = "CUSTOMER_NOT_FOUND"
    ACCESS_DENIED = "ACCESS_DENIED"
    BRANDING_UPDATE_FAILURE = "BRANDING_UPDATE_FAILURE"
    OFFER_NOT_FOUND = "OFFER_NOT_FOUND"


class CustomerPortalException(Exception):
    """
    Base exception for all customer portal errors.

    All custom exceptions should inherit from this class
    for consistent error handling.
    """

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, str]] = None,
    ) -> None:
        """
        Initialize customer portal exception.

        Args:
            message: Human-readable error message
            details: Additional context about the error
        """
        self.message = message
        self.details = details if details is not None else {}
        super().__init__(self.message)


class PortalDomainException(CustomerPortalException):
    """
    Exception raised when a portal business operation fails.

    Callers catch this type specifically and inspect ``error_code``
    and ``details`` to decide how to report the failure.
    """

    def __init__(
        self,
        error_code: ErrorCode,
        message: str = "",
        details: Optional[Dict[str, str]] = None,
    ) -> None:
        """
        Initialize portal domain exception.

        Args:
            error_code: Classification of the failure, or its string value
            message: Human-readable error message
            details: Initial diagnostic details, keyed by name

        Raises:
            ValueError: If error_code is not a known ErrorCode value
        """
        self.error_code = ErrorCode(error_code)
        super().__init__(message, details)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(error_code={self.error_code.value!r}, "
            f"message={self.message!r})"
        )


class InvalidArgumentError(CustomerPortalException, ValueError):
    """
    Exception raised when a guard precondition is violated.

    Attributes:
        argument_name: Caption of the offending argument, if one was given
    """

    def __init__(
        self,
        message: str,
        argument_name: Optional[str] = None,
    ) -> None:
        self.argument_name = argument_name
        super().__init__(message)


class ArgumentNullError(InvalidArgumentError):
    """Exception raised when a required argument is None."""

    def __init__(self, argument_name: Optional[str]) -> None:
        message = "Value cannot be None"
        if argument_name is not None:
            message += f" (argument: {argument_name})"
        super().__init__(message, argument_name)


class FatalRuntimeError(CustomerPortalException):
    """
    Exception signalling an unrecoverable runtime condition.

    Raised by integration code when the hosting runtime reports a failure
    that has no dedicated Python exception type (for example a corrupted
    extension module).
    """

    def __init__(
        self,
        condition: "FatalCondition",
        message: Optional[str] = None,
    ) -> None:
        self.condition = condition
        super().__init__(message or f"Fatal runtime condition: {condition.value}")
