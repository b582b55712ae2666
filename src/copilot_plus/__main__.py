"""
CLI entry point for Copilot Plus MCP server.
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from copilot_plus.config import DEFAULT_CSV_PATH
from copilot_plus.server import run_server


def main() -> None:
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Copilot Plus MCP Server - Spending insights from a Copilot Money export"
    )
    parser.add_argument(
        "--csv",
        type=Path,
        default=DEFAULT_CSV_PATH,
        help="Path to a Copilot Money CSV export (default: $COPILOT_PLUS_CSV)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    args = parser.parse_args()

    # Configure logging
    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,  # MCP uses stdout for protocol, so log to stderr
    )

    if args.csv is not None and not args.csv.exists():
        logging.error(f"Export not found: {args.csv}")
        sys.exit(2)

    # Run the server
    try:
        asyncio.run(run_server(csv_path=args.csv))
    except KeyboardInterrupt:
        logging.info("Server stopped by user")
        sys.exit(0)
    except Exception as e:
        logging.exception(f"Server error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
