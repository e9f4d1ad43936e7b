#!/usr/bin/env python3
"""
Check that the environment holds a usable Alpaca API configuration.

**Purpose**: Resolve the APCA_* environment variables (and .env file) the same
way application code does, and print what would be used. The secret is
masked. Nothing is sent over the network.

**Usage**:
    python actions/check_api_info.py
    python actions/check_api_info.py --env-file ~/.config/alpaca/paper.env
    python actions/check_api_info.py --verbose

**Requirements**:
  - APCA_API_KEY_ID and APCA_API_SECRET_KEY set in the environment or .env
  - APCA_API_BASE_URL optional (defaults to the paper trading endpoint)

**Example output**:
    $ python actions/check_api_info.py
    ✓ Base URL: https://paper-api.alpaca.markets/
    ✓ Key id:   PKXXXXXXXXXXXXXXXXXX
    ✓ Secret:   ************************************YYYY

**Exit codes**:
  - 0: Configuration is valid
  - 1: Configuration error (missing variable, bad URL, invalid encoding)
"""

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

# Add project root to Python path so we can import apca
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from apca.config.settings import get_api_info
from apca.errors import ApiInfoError


def parse_args(argv=None):
    """
    Parse command line arguments.

    Args:
        argv: Argument list (defaults to sys.argv[1:]).

    Returns:
        Namespace with attributes: env_file (str or None), verbose (bool)
    """
    parser = argparse.ArgumentParser(
        description="Check the Alpaca API configuration in the environment",
        epilog="""
Environment variables:
  APCA_API_BASE_URL     Base URL (default: https://paper-api.alpaca.markets)
  APCA_API_KEY_ID       Key id (required)
  APCA_API_SECRET_KEY   Secret (required)
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--env-file",
        type=str,
        default=None,
        help="Additional .env file to load (does not override exported variables)",
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    return parser.parse_args(argv)


def mask_secret(value: str, visible: int = 4) -> str:
    """
    Mask all but the last `visible` characters of a secret.

    Values no longer than `visible` are masked entirely.

    Example:
        >>> mask_secret("abcdefgh")
        '****efgh'
    """
    if visible <= 0 or len(value) <= visible:
        return "*" * len(value)
    return "*" * (len(value) - visible) + value[-visible:]


def main(argv=None) -> int:
    """
    Main entry point for the script.

    Returns:
        Process exit code (0 on success, 1 on configuration error).
    """
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.env_file:
        if not load_dotenv(dotenv_path=args.env_file, override=False):
            print(f"  ⚠ No variables loaded from {args.env_file}")

    try:
        api_info = get_api_info()
    except ApiInfoError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    print(f"✓ Base URL: {api_info.api_base_url}")
    print(f"✓ Key id:   {api_info.key_id}")
    print(f"✓ Secret:   {mask_secret(api_info.secret)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
