"""
Customer Portal Tests - Test Configuration.

Provides pytest fixtures shared by the guard, exception and logging tests.
"""

from typing import Iterator

import pytest

from customer_portal.config import settings
from customer_portal.exceptions import ErrorCode, PortalDomainException
from customer_portal.logging_config import clear_request_id


@pytest.fixture
def domain_exception() -> PortalDomainException:
    """
    Fresh portal domain exception without details.

    Returns:
        PortalDomainException classified as a downstream service error
    """
    return PortalDomainException(
        ErrorCode.DOWNSTREAM_SERVICE_ERROR, "Could not load subscriptions"
    )


@pytest.fixture
def guard_logging_enabled(monkeypatch: pytest.MonkeyPatch) -> None:
    """Force guard failure logging on regardless of the host environment."""
    monkeypatch.setattr(settings, "LOG_GUARD_FAILURES", True)


@pytest.fixture(autouse=True)
def reset_request_id() -> Iterator[None]:
    """Make sure no request ID leaks between tests."""
    clear_request_id()
    yield
    clear_request_id()
