"""
Message templates for guard failures.

Templates take the caller's caption as their only positional argument.
When no caption is given the matching default caption is used instead.
"""

ASSERT_STRING_NOT_EMPTY_INVALID_ERROR = "{0} is not set"
ASSERT_STRING_NOT_EMPTY_INVALID_PREFIX = "String"

ASSERT_PHONE_NUMBER_INVALID_ERROR = "{0} is not a valid phone number"
ASSERT_PHONE_NUMBER_INVALID_PREFIX = "Phone number"

ASSERT_NUMBER_POSITIVE_INVALID_ERROR = "{0} must be greater than zero"
ASSERT_NUMBER_POSITIVE_INVALID_PREFIX = "Number"

HTTP_RESPONSE_FAILURE_MESSAGE = "{0}. Response code: {1}. Response body: {2}."
RESPONSE_BODY_DETAIL_KEY = "ResponseBody"
