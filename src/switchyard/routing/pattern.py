"""Path pattern compiler.

A pattern is a literal path with two kinds of markers::

    "/users/[id]"            -> named slot "id"
    "/files/*"               -> positional slot 0
    "/u/[user]/files/*"      -> named slot "user", positional slot 1

Each marker tests as ``[^/]+`` (one or more characters, no slash) and
captures as ``(.*)``. Literal text is regex-escaped. A pattern with no
markers is static and compiles to ``None``: the router matches it by
string equality instead.
"""

import re
from dataclasses import dataclass

from switchyard._internal.types import ParamKey
from switchyard.errors import ConfigurationError
from switchyard.routing.route import RouteKind

_MARKERS = re.compile(r"[\[*]")

TEST_SLOT = r"[^/]+"
MATCH_SLOT = r"(.*)"


@dataclass(frozen=True, slots=True)
class CaptureSlot:
    """One marker in a pattern.

    Named:       ``[id]`` (name="id")
    Positional:  ``*``    (name=None)

    ``position`` is the zero-based index of the slot among all slots of
    the pattern, and is the params key for positional slots.
    """

    position: int
    name: str | None = None

    @property
    def is_named(self) -> bool:
        return self.name is not None

    @property
    def key(self) -> ParamKey:
        return self.name if self.name is not None else self.position


@dataclass(frozen=True, slots=True)
class CompiledPattern:
    """Matchers derived from a dynamic path pattern."""

    source: str
    kind: RouteKind
    prefix: str
    test_regex: re.Pattern[str]
    match_regex: re.Pattern[str]
    slots: tuple[CaptureSlot, ...]

    @property
    def prefix_length(self) -> int:
        return len(self.prefix)

    @property
    def param_names(self) -> tuple[str, ...]:
        return tuple(slot.name for slot in self.slots if slot.name is not None)

    @property
    def wildcard_count(self) -> int:
        return sum(1 for slot in self.slots if slot.name is None)

    def test(self, url: str) -> bool:
        """True if *url* structurally matches the whole pattern."""
        return self.test_regex.match(url) is not None

    def extract(self, url: str) -> dict[ParamKey, str]:
        """Capture slot values from *url*.

        Groups that captured nothing are left out rather than set to
        ``""``. Returns ``{}`` when *url* does not match at all.
        """
        found = self.match_regex.match(url)
        if found is None:
            return {}
        params: dict[ParamKey, str] = {}
        for slot, value in zip(self.slots, found.groups(), strict=True):
            if value:
                params[slot.key] = value
        return params


def _read_name(pattern: str, start: int) -> tuple[str, int]:
    """Read a ``[name]`` marker whose ``[`` sits at *start*.

    Returns the name and the index just past the closing ``]``.
    """
    end = pattern.find("]", start + 1)
    if end < 0:
        msg = f"Unterminated '[' at position {start} in route pattern {pattern!r}."
        raise ConfigurationError(msg)
    name = pattern[start + 1 : end]
    if not name:
        msg = f"Empty parameter name '[]' at position {start} in route pattern {pattern!r}."
        raise ConfigurationError(msg)
    if any(ch in name for ch in "[*/"):
        msg = (
            f"Invalid parameter name {name!r} in route pattern {pattern!r}. "
            "Names cannot contain '[', '*' or '/'."
        )
        raise ConfigurationError(msg)
    return name, end + 1


def compile_pattern(pattern: str) -> CompiledPattern | None:
    """Compile *pattern* into test and capture matchers.

    Returns ``None`` for static patterns (no ``[`` and no ``*``).
    Raises ``ConfigurationError`` for malformed ``[name]`` markers.

    Examples::

        compile_pattern("/about")            -> None
        compile_pattern("/users/[id]").test_regex.pattern
            -> r"\\A/users/[^/]+\\Z"
        compile_pattern("/files/*").extract("/files/a.txt")
            -> {0: "a.txt"}
    """
    first = _MARKERS.search(pattern)
    if first is None:
        return None

    test_parts: list[str] = []
    match_parts: list[str] = []
    slots: list[CaptureSlot] = []
    pos = 0

    for marker in _MARKERS.finditer(pattern):
        start = marker.start()
        # Markers inside a [name] already consumed are skipped
        if start < pos:
            continue
        literal = re.escape(pattern[pos:start])
        test_parts.append(literal)
        match_parts.append(literal)

        if marker.group() == "*":
            slots.append(CaptureSlot(position=len(slots)))
            pos = start + 1
        else:
            name, pos = _read_name(pattern, start)
            slots.append(CaptureSlot(position=len(slots), name=name))

        test_parts.append(TEST_SLOT)
        match_parts.append(MATCH_SLOT)

    tail = re.escape(pattern[pos:])
    test_parts.append(tail)
    match_parts.append(tail)

    kind = RouteKind.PARAMETRIC if any(s.is_named for s in slots) else RouteKind.WILDCARD

    return CompiledPattern(
        source=pattern,
        kind=kind,
        prefix=pattern[: first.start()],
        test_regex=re.compile(r"\A" + "".join(test_parts) + r"\Z"),
        match_regex=re.compile(r"\A" + "".join(match_parts) + r"\Z", re.DOTALL),
        slots=tuple(slots),
    )
