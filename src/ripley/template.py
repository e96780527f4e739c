"""Ripley Template: compiled program ready for rendering.

Architecture:
    ```
    Template
    ├── _program: Instruction      # Optimized emission program
    ├── _escape: callable          # Escaper for dynamic values
    ├── _globals: dict             # Environment globals (copied)
    └── _name                      # For repr and error messages
    ```

Thread-Safety:
- Templates are immutable after construction
- ``render()`` creates only local state (one StringSink per call)
- Multiple threads can call ``render()`` concurrently

"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from ripley.executor import execute
from ripley.nodes import Instruction
from ripley.sink import Sink, StringSink
from ripley.utils.html import html_escape


class Template:
    """Compiled element tree with a ``render()`` API.

    Example:
        >>> from ripley import Environment, Var
        >>> t = Environment().from_tree(["h1", Var("title")])
        >>> t.render(title="Tom & Jerry")
        '<h1>Tom &amp; Jerry</h1>'

    """

    __slots__ = ("_escape", "_globals", "_name", "_program")

    def __init__(
        self,
        program: Instruction,
        *,
        escape: Callable[[Any], str] = html_escape,
        globals: dict[str, Any] | None = None,
        name: str | None = None,
    ):
        self._program = program
        self._escape = escape
        self._globals = dict(globals or {})
        self._name = name

    @property
    def program(self) -> Instruction:
        """The emission program this template executes."""
        return self._program

    @property
    def name(self) -> str | None:
        return self._name

    def _make_context(self, method: str, args: tuple[Any, ...], kwargs: dict[str, Any]) -> dict[str, Any]:
        ctx: dict[str, Any] = {}
        ctx.update(self._globals)
        if args:
            if len(args) == 1 and isinstance(args[0], dict):
                ctx.update(args[0])
            else:
                raise TypeError(
                    f"{method}() takes at most 1 positional argument (a dict), got {len(args)}"
                )
        ctx.update(kwargs)
        return ctx

    def render(self, *args: Any, **kwargs: Any) -> str:
        """Render template with given context.

        Args:
            *args: Single dict of context variables
            **kwargs: Context variables as keyword arguments

        Returns:
            Rendered HTML as string
        """
        sink = StringSink()
        execute(
            self._program,
            sink,
            self._make_context("render", args, kwargs),
            escape=self._escape,
        )
        return sink.getvalue()

    def render_into(self, sink: Sink, *args: Any, **kwargs: Any) -> None:
        """Render template into a caller-owned sink (file, StringIO, ...)."""
        execute(
            self._program,
            sink,
            self._make_context("render_into", args, kwargs),
            escape=self._escape,
        )

    def __repr__(self) -> str:
        return f"<Template {self._name or '(inline)'}>"
