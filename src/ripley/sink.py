"""Text sinks that rendered output is written into.

A sink is anything with a ``write(text)`` method: `StringSink`, an open
text file, ``io.StringIO``, ``sys.stdout``. Each render owns its sink.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Sink(Protocol):
    """Append-only text destination. Call order is the contract."""

    def write(self, text: str) -> object: ...


class StringSink:
    """StringBuilder sink: append chunks, join once at the end.

    Example:
        >>> sink = StringSink()
        >>> sink.write("<p>")
        >>> sink.write("hi</p>")
        >>> sink.getvalue()
        '<p>hi</p>'
    """

    __slots__ = ("chunks",)

    def __init__(self) -> None:
        self.chunks: list[str] = []

    def write(self, text: str) -> None:
        self.chunks.append(text)

    def getvalue(self) -> str:
        return "".join(self.chunks)

    def __str__(self) -> str:
        return self.getvalue()
