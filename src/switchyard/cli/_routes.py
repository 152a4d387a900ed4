"""``switchyard routes`` and ``switchyard resolve``.

Resolve an import string to a Router, then print its route table or
the route a single request would reach.
"""

import argparse
import sys

from switchyard.cli._resolve import resolve_router
from switchyard.errors import NotFound
from switchyard.routing.router import Router


def _load(import_string: str) -> Router:
    try:
        return resolve_router(import_string)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc


def _link_name(link: object) -> str:
    return getattr(link, "__name__", type(link).__name__)


def run_routes(args: argparse.Namespace) -> None:
    """Print a table of INDEX, METHOD, PATH, KIND and HANDLERS."""
    router = _load(args.router)

    routes = router.routes
    if not routes:
        print("No routes registered.")
        return

    rows: list[tuple[str, str, str, str, str]] = [
        (
            str(route.index),
            str(route.method),
            route.path,
            str(route.kind),
            " -> ".join(_link_name(h) for h in route.handlers),
        )
        for route in routes
    ]
    headers = ("#", "METHOD", "PATH", "KIND", "HANDLERS")
    widths = [max(len(h), *(len(r[i]) for r in rows)) for i, h in enumerate(headers)]

    fmt = "  ".join(f"{{:<{w}}}" for w in widths[:-1]) + "  {}"
    print(fmt.format(*headers))
    print("-" * min(sum(widths) + 2 * (len(widths) - 1), 80))
    for row in rows:
        print(fmt.format(*row))

    if router.middlewares:
        print()
        print("MIDDLEWARE: " + " -> ".join(_link_name(m) for m in router.middlewares))


def run_resolve(args: argparse.Namespace) -> None:
    """Print the route *method* *url* resolves to, or exit 1 on 404."""
    router = _load(args.router)

    try:
        match = router.resolve(args.method, args.url)
    except NotFound as exc:
        print(str(exc), file=sys.stderr)
        raise SystemExit(1) from exc

    route = match.route
    print(f"route   #{route.index} {route.method} {route.path} ({route.kind})")
    if match.params:
        for key, value in match.params.items():
            print(f"param   {key!s} = {value}")
    print("chain   " + " -> ".join(_link_name(h) for h in route.handlers))
