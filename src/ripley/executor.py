"""Executor: runs an emission program against a sink.

Instructions write to the sink strictly in program order. The program is
never mutated; all per-render state (the scope chain and the sink) is
local to one `execute` call, so one program can serve concurrent renders.

Loop variables live in child scopes (`collections.ChainMap`) that shadow
outer names. Exceptions from expressions and from the sink propagate
unchanged.
"""

from __future__ import annotations

from collections import ChainMap
from collections.abc import Callable, Mapping
from typing import Any

from ripley.expressions import evaluate
from ripley.nodes import (
    Branch,
    Guard,
    Instruction,
    MultiBranch,
    Repeat,
    Sequence,
    WriteDynamic,
    WriteLiteral,
)
from ripley.sink import Sink
from ripley.utils.html import html_escape


class Executor:
    """Interpret instructions for a single render.

    Attributes:
        _sink: Destination of every write
        _escape: Escaper applied to escaped dynamic writes
        _dispatch: Instruction type name → handler
    """

    __slots__ = ("_dispatch", "_escape", "_sink")

    def __init__(self, sink: Sink, escape: Callable[[Any], str] = html_escape):
        self._sink = sink
        self._escape = escape
        self._dispatch: dict[str, Callable[[Any, ChainMap[str, Any]], None]] = {
            "WriteLiteral": self._run_write_literal,
            "WriteDynamic": self._run_write_dynamic,
            "Sequence": self._run_sequence,
            "Repeat": self._run_repeat,
            "Branch": self._run_branch,
            "Guard": self._run_guard,
            "MultiBranch": self._run_multi_branch,
        }

    def run(self, node: Instruction, scope: ChainMap[str, Any]) -> None:
        handler = self._dispatch.get(type(node).__name__)
        if handler is None:
            raise TypeError(f"Unknown instruction: {node!r}")
        handler(node, scope)

    def _run_write_literal(self, node: WriteLiteral, scope: ChainMap[str, Any]) -> None:
        self._sink.write(node.text)

    def _run_write_dynamic(self, node: WriteDynamic, scope: ChainMap[str, Any]) -> None:
        parts = []
        for expr in node.exprs:
            value = evaluate(expr, scope)
            parts.append("" if value is None else str(value))
        text = "".join(parts)
        self._sink.write(self._escape(text) if node.escape else text)

    def _run_sequence(self, node: Sequence, scope: ChainMap[str, Any]) -> None:
        for child in node.body:
            self.run(child, scope)

    def _run_repeat(self, node: Repeat, scope: ChainMap[str, Any]) -> None:
        self._loop(node.bindings, node.body, scope)

    def _loop(
        self,
        bindings: tuple[tuple[str, Any], ...],
        body: Instruction,
        scope: ChainMap[str, Any],
    ) -> None:
        """Nested iteration, first binding outermost."""
        if not bindings:
            self.run(body, scope)
            return
        (name, iterable), rest = bindings[0], bindings[1:]
        inner = scope.new_child()
        for item in evaluate(iterable, scope):
            inner[name] = item
            self._loop(rest, body, inner)

    def _run_branch(self, node: Branch, scope: ChainMap[str, Any]) -> None:
        if evaluate(node.test, scope):
            self.run(node.then, scope)
        else:
            self.run(node.else_, scope)

    def _run_guard(self, node: Guard, scope: ChainMap[str, Any]) -> None:
        if evaluate(node.test, scope):
            self.run(node.body, scope)

    def _run_multi_branch(self, node: MultiBranch, scope: ChainMap[str, Any]) -> None:
        for test, body in node.clauses:
            if evaluate(test, scope):
                self.run(body, scope)
                return


def execute(
    program: Instruction,
    sink: Sink,
    scope: Mapping[str, Any] | None = None,
    *,
    escape: Callable[[Any], str] = html_escape,
) -> None:
    """Run ``program`` once, writing its output to ``sink``.

    Args:
        program: Compiled (optionally optimized) instruction tree
        sink: Destination with a ``write(text)`` method
        scope: Variables visible to expressions
        escape: Escaper for dynamic text content
    """
    Executor(sink, escape).run(program, ChainMap(dict(scope or {})))
