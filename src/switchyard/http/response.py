"""Mutable outbound response.

Modeled on a streaming transport response: ``write_head`` once, any
number of ``write`` calls, then exactly one ``end``. The recorded
status, headers and body let tests assert on what a chain produced.
"""

from dataclasses import dataclass, field


@dataclass(slots=True)
class Response:
    """A response buffer a host transport can flush once ``finished``."""

    status: int = 200
    headers: list[tuple[str, str]] = field(default_factory=list)
    chunks: list[bytes] = field(default_factory=list)
    headers_sent: bool = False
    finished: bool = False

    def write_head(self, status: int, headers: dict[str, str] | list[tuple[str, str]] | None = None) -> None:
        """Set the status line and extend the headers.

        Raises ``RuntimeError`` if the head was already written.
        """
        if self.headers_sent:
            msg = "Response head already written."
            raise RuntimeError(msg)
        self.status = status
        if headers:
            items = headers.items() if isinstance(headers, dict) else headers
            self.headers.extend((str(k), str(v)) for k, v in items)
        self.headers_sent = True

    def set_header(self, name: str, value: str) -> None:
        """Replace any existing header named *name* (case-insensitive)."""
        if self.headers_sent:
            msg = f"Cannot set header {name!r} after the response head was written."
            raise RuntimeError(msg)
        lower = name.lower()
        self.headers = [(k, v) for k, v in self.headers if k.lower() != lower]
        self.headers.append((name, value))

    def write(self, chunk: str | bytes) -> None:
        """Append a body chunk, writing a default head first if needed."""
        if self.finished:
            msg = "Cannot write to a finished response."
            raise RuntimeError(msg)
        if not self.headers_sent:
            self.headers_sent = True
        self.chunks.append(chunk.encode() if isinstance(chunk, str) else chunk)

    def end(self, body: str | bytes = "") -> None:
        """Write the final chunk and mark the response finished."""
        if self.finished:
            msg = "Response already finished."
            raise RuntimeError(msg)
        if body:
            self.write(body)
        elif not self.headers_sent:
            self.headers_sent = True
        self.finished = True

    @property
    def body(self) -> bytes:
        return b"".join(self.chunks)

    @property
    def text(self) -> str:
        return self.body.decode("utf-8")

    def get_header(self, name: str) -> str | None:
        lower = name.lower()
        for key, value in self.headers:
            if key.lower() == lower:
                return value
        return None
