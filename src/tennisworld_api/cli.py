#!/usr/bin/env python3
"""
TennisWorld CLI - MongoDB connectivity commands

Usage:
    python -m tennisworld_api.cli probe    # Insert, find and delete a sample player
    python -m tennisworld_api.cli check    # Connect, report host and disconnect
"""

import argparse
import logging
import sys
from typing import List, Optional

from .core import Config, setup_logging
from .store_probe import StoreProbe, check_connection

logger = logging.getLogger(__name__)


def cmd_probe(config: Config) -> int:
    """Run the store probe once; store errors are logged, not reported via exit code"""
    StoreProbe(config.require_mongodb_uri()).run()
    return 0


def cmd_check(config: Config) -> int:
    """Check the connection; exit code reflects the outcome"""
    return 0 if check_connection(config.require_mongodb_uri()) else 1


COMMANDS = {
    "probe": cmd_probe,
    "check": cmd_check,
}


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="TennisWorld CLI - MongoDB connectivity commands",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m tennisworld_api.cli probe     Insert/find/delete a sample player
  python -m tennisworld_api.cli check     Verify MONGODB_URI is reachable
        """
    )
    parser.add_argument(
        "command",
        choices=sorted(COMMANDS),
        help="Command to run"
    )

    args = parser.parse_args(argv)

    try:
        config = Config.from_env()
        setup_logging(config)
        return COMMANDS[args.command](config)
    except ValueError as e:
        # Configuration problems are fatal and happen before any connection attempt
        logging.basicConfig()
        logger.error(f"Configuration error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
