"""Main entry point for the icon search MCP server."""
import asyncio
import sys

from icon_search.server import main


def run() -> None:
    """Run the stdio server, exiting with status 1 if startup fails."""
    try:
        asyncio.run(main())
    except Exception as e:
        print(f"Failed to start MCP server: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    run()
