"""Entry point for editor-history MCP server."""

import argparse
import logging
import sys

from editor_history import __version__
from editor_history.config import get_settings
from editor_history.server import create_server, initialize_services, shutdown_services


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="editor-history",
        description="Editor History - checkpoint-based undo/redo for a code editor via MCP",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser.parse_args()


def configure_logging(level: str) -> None:
    """Send logs to stderr; stdout carries the stdio transport."""
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main() -> None:
    """Main entry point for the MCP server."""
    settings = get_settings()
    configure_logging(settings.log_level)

    initialize_services(settings)
    mcp = create_server()

    try:
        mcp.run()
    finally:
        shutdown_services()


def cli() -> None:
    """CLI entry point."""
    # Parse args first (handles --help and --version)
    parse_args()

    main()


if __name__ == "__main__":
    cli()
