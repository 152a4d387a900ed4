"""Shared type aliases used across switchyard modules."""

from collections.abc import Awaitable, Callable
from typing import Any, TypeAlias

# Continuation handed to every chain link; moves the cursor, returns an awaitable step
Advance: TypeAlias = Callable[[], Awaitable[None]]

# Middleware or route handler — called as link(request, response, advance)
Link: TypeAlias = Callable[[Any, Any, Advance], Any]

# Path parameter key: a name for [name] slots, a position for * slots
ParamKey: TypeAlias = str | int
