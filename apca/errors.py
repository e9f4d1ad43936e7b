"""
Exceptions raised while building Alpaca API connection information.

**Conceptual**: Every failure to produce an ApiInfo is reported as an
ApiInfoError. Callers that only care whether configuration succeeded catch the
base class; callers that want to react differently (e.g. prompt for missing
credentials vs. report a malformed URL) catch the subclasses.

Hierarchy:
    ApiInfoError
    ├── UrlParseError              base URL is not a valid absolute URL
    └── EnvironmentVariableError   problem with a named environment variable
        ├── MissingVariableError   required variable is not set
        └── InvalidEncodingError   variable is set but is not valid text
"""

from typing import Optional


class ApiInfoError(Exception):
    """
    Base exception for Alpaca API configuration errors.

    **Recovery**: None of these errors are retried internally. Fix the input
    (arguments, environment or .env file) and construct the ApiInfo again.
    """
    pass


class UrlParseError(ApiInfoError, ValueError):
    """
    Raised when a base URL cannot be parsed as an absolute URL.

    The parser's own exception is chained as ``__cause__``.

    Attributes:
        url: The text that failed to parse.
        reason: Diagnostic from the underlying parser.
    """

    def __init__(self, url: str, reason: Optional[str] = None):
        self.url = url
        self.reason = reason
        message = f"Invalid URL {url!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class EnvironmentVariableError(ApiInfoError):
    """
    Base for errors tied to a single environment variable.

    Attributes:
        name: Name of the offending environment variable (e.g. APCA_API_KEY_ID).
    """

    def __init__(self, name: str, message: str):
        self.name = name
        super().__init__(message)


class MissingVariableError(EnvironmentVariableError):
    """
    Raised when a required environment variable is not set.

    **Recovery**: Export the variable or add it to your .env file.
    """

    def __init__(self, name: str):
        super().__init__(name, f"{name} environment variable not found")


class InvalidEncodingError(EnvironmentVariableError):
    """
    Raised when an environment variable is set but its value is not valid text.

    **Conceptual**: Environment values are raw bytes at the OS level. Values
    that are not valid UTF-8 are rejected instead of being decoded lossily.
    """

    def __init__(self, name: str):
        super().__init__(name, f"{name} environment variable is not a valid string")
