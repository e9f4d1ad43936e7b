"""
Process-level access to the Alpaca API configuration.

**Conceptual**: Library code takes an ApiInfo as an argument. Application
code (scripts, entry points) needs one place that reads the environment once
and hands out the same ApiInfo afterwards; this module is that place.

On import, a .env file at the project root is loaded with python-dotenv.
Variables already present in the environment win over the file, so exported
values always take precedence.

Usage pattern:
    from apca.config.settings import get_api_info

    api_info = get_api_info()
    print(api_info.api_base_url)
"""

import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from apca.config.api_info import ApiInfo

logger = logging.getLogger(__name__)

# Load .env from project root
env_path = Path(__file__).parent.parent.parent / ".env"
load_dotenv(dotenv_path=env_path, override=False)

_default_api_info: Optional[ApiInfo] = None


def get_api_info() -> ApiInfo:
    """
    Get the process-wide ApiInfo, loading it from the environment on first use.

    Errors from ApiInfo.from_env propagate unchanged and nothing is cached,
    so a later call after fixing the environment succeeds.

    Returns:
        Cached ApiInfo.

    Raises:
        ApiInfoError: If the environment does not hold a valid configuration.
    """
    global _default_api_info

    if _default_api_info is None:
        _default_api_info = ApiInfo.from_env()
        logger.info("Using Alpaca API at %s", _default_api_info.api_base_url)

    return _default_api_info


def reset_api_info():
    """
    Forget the cached ApiInfo (tests, credential rotation).

    The next get_api_info() call reads the environment again.
    """
    global _default_api_info
    _default_api_info = None
