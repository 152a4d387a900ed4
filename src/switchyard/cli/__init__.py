"""Switchyard CLI — route table inspection and resolution checks.

Entry point registered as ``switchyard`` in ``pyproject.toml``::

    [project.scripts]
    switchyard = "switchyard.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``switchyard`` command."""
    parser = argparse.ArgumentParser(
        prog="switchyard",
        description="switchyard — inspect and exercise a request router.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level for the switchyard logger (debug, info, warning, ...)",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- switchyard routes ------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List registered routes")
    routes_parser.add_argument(
        "router",
        help="Import string (e.g. myapp:router)",
    )

    # -- switchyard resolve -----------------------------------------------
    resolve_parser = subparsers.add_parser("resolve", help="Show which route a request resolves to")
    resolve_parser.add_argument(
        "router",
        help="Import string (e.g. myapp:router)",
    )
    resolve_parser.add_argument("method", help="Request method (e.g. GET)")
    resolve_parser.add_argument("url", help="Request URL (e.g. /users/42)")

    args = parser.parse_args(argv)

    if args.log_level:
        from switchyard.config import RouterConfig, configure_logging

        configure_logging(RouterConfig(log_level=args.log_level))

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "routes":
        from switchyard.cli._routes import run_routes

        run_routes(args)
    elif args.command == "resolve":
        from switchyard.cli._routes import run_resolve

        run_resolve(args)
