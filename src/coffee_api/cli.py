"""Command-line interface for coffee-api."""

import argparse
import sys

import uvicorn

from coffee_api import __version__
from coffee_api.config import Settings
from coffee_api.exceptions import CoffeeApiError


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    settings = Settings.from_env()
    parser = argparse.ArgumentParser(
        prog="coffee-api",
        description="Serve the in-memory coffee menu over GraphQL",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"coffee-api {__version__}",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve = subparsers.add_parser("serve", help="Run the HTTP server")
    serve.add_argument("--host", default=settings.host, help=f"Bind address (default: {settings.host})")
    serve.add_argument("--port", type=int, default=settings.port, help=f"Bind port (default: {settings.port})")
    serve.add_argument("--reload", action="store_true", help="Reload on code changes")

    subparsers.add_parser("schema", help="Print the GraphQL schema (SDL)")

    args = parser.parse_args(argv)

    try:
        if args.command == "schema":
            _print_schema()
        else:
            uvicorn.run(
                "coffee_api.app:create_app",
                factory=True,
                host=args.host,
                port=args.port,
                reload=args.reload,
                log_level=settings.log_level.lower(),
            )
    except CoffeeApiError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


def _print_schema() -> None:
    from coffee_api.graphql_schema import schema

    print(schema.as_str())


if __name__ == "__main__":
    sys.exit(main())
