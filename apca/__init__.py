"""
apca – configuration layer for the Alpaca trading API.

Builds the validated connection information (base URL, key id, secret) that
request-building code needs before talking to the Alpaca REST API.
"""

from apca.config.api_info import ApiInfo
from apca.errors import (
    ApiInfoError,
    EnvironmentVariableError,
    InvalidEncodingError,
    MissingVariableError,
    UrlParseError,
)

__all__ = [
    "ApiInfo",
    "ApiInfoError",
    "EnvironmentVariableError",
    "InvalidEncodingError",
    "MissingVariableError",
    "UrlParseError",
]
