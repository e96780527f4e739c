"""Ripley Environment: compiler configuration and template factory.

The Environment holds the options shared by every template it builds:
the escaper, whether to optimize, the optimization passes, and globals
visible to every render.

Thread-Safety:
Environments are configured once and then only read. Compilation keeps
all state local, so ``from_tree()`` may be called from many threads.

"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any

from ripley.compiler import DEFAULT_PASSES, Compiler, optimize
from ripley.nodes import Instruction
from ripley.template import Template
from ripley.utils.html import html_escape

logger = logging.getLogger(__name__)


class Environment:
    """Central configuration for compiling element trees.

    Attributes:
        escape: Escaper used for literal text (compile time) and dynamic
            values (render time)
        optimize: Run the optimization passes after compiling
        passes: Ordered optimization passes
        globals: Variables available to every render

    Example:
            >>> from ripley import Environment, FOR, Var
            >>> env = Environment(globals={"site": "Demo"})
            >>> t = env.from_tree(["ul", [FOR, [("x", Var("xs"))], ["li", Var("x")]]])
            >>> t.render(xs=["a", "b"])
            '<ul><li>a</li><li>b</li></ul>'

    """

    def __init__(
        self,
        *,
        escape: Callable[[Any], str] = html_escape,
        optimize: bool = True,
        passes: Sequence[Callable[[Instruction], Instruction]] = DEFAULT_PASSES,
        globals: dict[str, Any] | None = None,
    ):
        self.escape = escape
        self.optimize = optimize
        self.passes = tuple(passes)
        self.globals: dict[str, Any] = dict(globals or {})

    def compile(self, tree: Any) -> Instruction:
        """Compile an element tree to a (possibly optimized) program.

        Raises:
            MalformedSpecialForm: A special form has the wrong shape
            UnsupportedNodeShape: A node cannot be compiled
        """
        program = Compiler(self.escape).compile(tree)
        if self.optimize:
            program = optimize(program, self.passes)
        return program

    def from_tree(self, tree: Any, name: str | None = None) -> Template:
        """Compile an element tree into a `Template`."""
        logger.debug("Compiling template %s", name or "(inline)")
        return Template(
            self.compile(tree),
            escape=self.escape,
            globals=self.globals,
            name=name,
        )
