"""
Connection information for the Alpaca Trading API.

**Conceptual**: Every request to Alpaca needs three things: the base URL of
the API (paper or live), the key id identifying the account, and the secret
used to authenticate. This module bundles them into a single immutable value,
ApiInfo, which is validated once at construction and then handed to whatever
builds requests (account, orders, positions, assets, clock, events).

Two ways to build one:
  - ApiInfo.from_parts(url, key_id, secret): explicit values (tests, notebooks,
    credentials fetched from a vault).
  - ApiInfo.from_env(): the APCA_* environment variables used by the official
    Alpaca SDKs.

Validation is limited to what this layer can know: the base URL must parse as
an absolute URL, and environment values must be present (key id, secret) and
valid text. Credential contents are never inspected.
"""

import logging
import os
from dataclasses import dataclass, field
from typing import Mapping, Optional, Union

from pydantic import AnyUrl, TypeAdapter, ValidationError

from apca.errors import InvalidEncodingError, MissingVariableError, UrlParseError

logger = logging.getLogger(__name__)

# Environment variable names (shared with the official Alpaca SDKs)
ENV_API_BASE_URL = "APCA_API_BASE_URL"
ENV_KEY_ID = "APCA_API_KEY_ID"
ENV_SECRET = "APCA_API_SECRET_KEY"

PAPER_API_BASE_URL = "https://paper-api.alpaca.markets"
LIVE_API_BASE_URL = "https://api.alpaca.markets"

# Used by from_env when APCA_API_BASE_URL is not set
API_BASE_URL = PAPER_API_BASE_URL

EnvValue = Union[str, bytes]

_url_adapter = TypeAdapter(AnyUrl)


def parse_url(text: Union[str, bytes, AnyUrl]) -> AnyUrl:
    """
    Parse text into an absolute URL.

    **Conceptual**: Parsing follows the WHATWG URL standard (pydantic's AnyUrl).
    Any scheme is accepted and a host is not required, so "mailto:" or
    "file:///" URLs parse as well as "https://" ones. Relative input such as
    "paper-api.alpaca.markets" is rejected.

    Normalization depends on the scheme. The special schemes (http, https,
    ws, wss, ftp, file) get a lowercase, IDNA-encoded host and an empty path
    becomes "/". Other schemes keep their text as written.

    Args:
        text: Candidate URL. Bytes are decoded as UTF-8; text must be
              encodable as UTF-8 (no lone surrogates).

    Returns:
        Parsed AnyUrl; str() gives the normalized text.

    Raises:
        UrlParseError: If text is not a valid absolute URL.

    Example:
        >>> str(parse_url("https://paper-api.alpaca.markets"))
        'https://paper-api.alpaca.markets/'
    """
    if isinstance(text, bytes):
        try:
            text = text.decode("utf-8")
        except UnicodeDecodeError as e:
            raise UrlParseError(repr(text), "not valid UTF-8") from e
    else:
        text = str(text)

    try:
        text.encode("utf-8")
    except UnicodeEncodeError as e:
        raise UrlParseError(text, "not valid UTF-8") from e

    try:
        return _url_adapter.validate_python(text)
    except ValidationError as e:
        reason = "; ".join(error["msg"] for error in e.errors())
        raise UrlParseError(text, reason) from e


def _decode(name: str, value: EnvValue) -> str:
    """Return value as text, or raise InvalidEncodingError naming the variable."""
    if isinstance(value, bytes):
        try:
            return value.decode("utf-8")
        except UnicodeDecodeError as e:
            raise InvalidEncodingError(name) from e

    # os.environ surrogate-escapes bytes it could not decode
    try:
        value.encode("utf-8")
    except UnicodeEncodeError as e:
        raise InvalidEncodingError(name) from e
    return value


def _get_text(environ: Mapping[str, EnvValue], name: str) -> Optional[str]:
    value = environ.get(name)
    if value is None:
        return None
    return _decode(name, value)


def _require_text(environ: Mapping[str, EnvValue], name: str) -> str:
    value = _get_text(environ, name)
    if value is None:
        raise MissingVariableError(name)
    return value


@dataclass(frozen=True)
class ApiInfo:
    """
    Validated connection information for the Alpaca API.

    **Conceptual**: An ApiInfo either exists and is complete, or was never
    created: both constructors raise instead of returning partial values.
    Instances are frozen and can be shared freely between threads and clients.

    **Security note**: The secret is excluded from repr(), so logging or
    printing an ApiInfo does not leak it. The attribute itself is a plain str.

    Attributes:
        api_base_url: Base URL of the Trading API (parsed AnyUrl;
                      str(api_base_url) gives the normalized text).
        key_id: Key id used for authentication. Not validated.
        secret: Secret used for authentication. Not validated.
    """
    api_base_url: AnyUrl
    key_id: str
    secret: str = field(repr=False)

    @classmethod
    def from_parts(
        cls,
        api_base_url: Union[str, bytes, AnyUrl],
        key_id: object,
        secret: object,
    ) -> "ApiInfo":
        """
        Create an ApiInfo from its constituent parts.

        Credentials are converted with str() and kept verbatim: no trimming,
        no case changes.

        Args:
            api_base_url: Base URL of the Trading API.
            key_id: Key id (anything convertible to str).
            secret: Secret (anything convertible to str).

        Returns:
            ApiInfo with the parsed URL and the given credentials.

        Raises:
            UrlParseError: If api_base_url is not a valid absolute URL.

        Usage example:
            >>> info = ApiInfo.from_parts(
            ...     "https://paper-api.alpaca.markets/",
            ...     "XXXXXXXXXXXXXXXXXXXX",
            ...     "YYYYYYYYYYYYYYYYYYYYYYYYYYYYYYYYYYYYYYYY",
            ... )
            >>> str(info.api_base_url)
            'https://paper-api.alpaca.markets/'
        """
        return cls(
            api_base_url=parse_url(api_base_url),
            key_id=str(key_id),
            secret=str(secret),
        )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, EnvValue]] = None) -> "ApiInfo":
        """
        Create an ApiInfo from environment variables.

        **Environment variables**:
          - APCA_API_BASE_URL (optional): Base URL of the Trading API.
            Defaults to the paper trading endpoint if not set.
          - APCA_API_KEY_ID (required): Key id.
          - APCA_API_SECRET_KEY (required): Secret.

        Checks run top to bottom (base URL, key id, secret) and the first
        failure is raised; a caller missing both credentials hears about
        APCA_API_KEY_ID first.

        Args:
            environ: Mapping to read variables from; values may be str or
                     bytes. Defaults to os.environ.

        Returns:
            ApiInfo built from the environment.

        Raises:
            InvalidEncodingError: If a variable is set but is not valid text.
            UrlParseError: If the resolved base URL is not a valid URL.
            MissingVariableError: If APCA_API_KEY_ID or APCA_API_SECRET_KEY
                                  is not set.

        Usage example:
            >>> # In .env file:
            >>> # APCA_API_KEY_ID=your_key_id
            >>> # APCA_API_SECRET_KEY=your_secret
            >>>
            >>> info = ApiInfo.from_env()
            >>> str(info.api_base_url)  # 'https://paper-api.alpaca.markets/'
        """
        if environ is None:
            environ = os.environ

        base_url_text = _get_text(environ, ENV_API_BASE_URL)
        if base_url_text is None:
            logger.debug("%s not set, using default %s", ENV_API_BASE_URL, API_BASE_URL)
            base_url_text = API_BASE_URL
        api_base_url = parse_url(base_url_text)

        key_id = _require_text(environ, ENV_KEY_ID)
        secret = _require_text(environ, ENV_SECRET)

        logger.debug("Loaded Alpaca API info for %s", api_base_url)
        return cls(api_base_url=api_base_url, key_id=key_id, secret=secret)
