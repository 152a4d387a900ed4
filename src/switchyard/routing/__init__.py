"""Routing — pattern compilation, route registry and resolution.

Routes are registered during setup and frozen into a read-only lookup
structure before the first request is dispatched.
"""

from switchyard.routing.pattern import CaptureSlot, CompiledPattern, compile_pattern
from switchyard.routing.route import Route, RouteKind, RouteMatch
from switchyard.routing.router import Router

__all__ = [
    "CaptureSlot",
    "CompiledPattern",
    "Route",
    "RouteKind",
    "RouteMatch",
    "Router",
    "compile_pattern",
]
