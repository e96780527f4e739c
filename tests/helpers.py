"""Helpers shared by Ripley tests."""

from ripley import StringSink, execute


def run(program, **scope) -> str:
    """Execute a program against a fresh StringSink and return the output."""
    sink = StringSink()
    execute(program, sink, scope)
    return sink.getvalue()
