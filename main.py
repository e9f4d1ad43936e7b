"""
apca – Main entry point.

Reports whether the environment holds a usable Alpaca API configuration.
See actions/check_api_info.py for the detailed check.
"""

import sys

from apca.config.settings import get_api_info
from apca.errors import ApiInfoError


def main() -> int:
    """Resolve the API configuration and print where requests would go."""
    try:
        api_info = get_api_info()
    except ApiInfoError as e:
        print(f"apca configuration error: {e}", file=sys.stderr)
        return 1

    print(f"apca configured for {api_info.api_base_url}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
