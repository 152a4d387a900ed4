"""Route, RouteKind and RouteMatch."""

from dataclasses import dataclass, field
from enum import StrEnum
from http import HTTPMethod
from typing import TYPE_CHECKING

from switchyard._internal.types import Link, ParamKey

if TYPE_CHECKING:
    from switchyard.routing.pattern import CompiledPattern


class RouteKind(StrEnum):
    """How a route is looked up.

    STATIC:      no markers, exact ``"METHOD:path"`` lookup
    PARAMETRIC:  at least one ``[name]`` slot
    WILDCARD:    only ``*`` slots, captured by position
    """

    STATIC = "static"
    PARAMETRIC = "parametric"
    WILDCARD = "wildcard"


@dataclass(frozen=True, slots=True)
class Route:
    """A frozen route definition.

    Created by ``Router.add`` and never mutated afterwards. ``pattern``
    is ``None`` exactly when the route is static.
    """

    index: int
    method: HTTPMethod
    path: str
    handlers: tuple[Link, ...]
    pattern: "CompiledPattern | None" = field(default=None, repr=False)

    @property
    def kind(self) -> RouteKind:
        if self.pattern is None:
            return RouteKind.STATIC
        return self.pattern.kind

    @property
    def is_static(self) -> bool:
        return self.pattern is None

    @property
    def prefix(self) -> str:
        """Literal text before the first marker (the whole path if static)."""
        if self.pattern is None:
            return self.path
        return self.pattern.prefix

    @property
    def prefix_length(self) -> int:
        return len(self.prefix)

    @property
    def param_names(self) -> tuple[str, ...]:
        if self.pattern is None:
            return ()
        return self.pattern.param_names

    @property
    def handler_count(self) -> int:
        return len(self.handlers)

    @property
    def static_key(self) -> str:
        """Key under which a static route sits in the router's index."""
        return f"{self.method}:{self.path}"


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful resolution."""

    route: Route
    params: dict[ParamKey, str]

    @property
    def route_index(self) -> int:
        return self.route.index
