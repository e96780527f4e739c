"""Special-form compilation for Ripley compiler.

Provides mixin for compiling the control-flow special forms
(fragment, for, if, when, cond). Each form checks its own shape and
compiles its sub-bodies through the host compiler.

Uses inline TYPE_CHECKING declarations for host attributes.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from ripley.environment.exceptions import MalformedSpecialForm
from ripley.forms import Special
from ripley.nodes import Branch, Guard, MultiBranch, Repeat, Sequence
from ripley.shape import get_key, props_and_children

if TYPE_CHECKING:
    from ripley.nodes import Instruction

logger = logging.getLogger(__name__)


class SpecialFormMixin:
    """Mixin for compiling special forms.

    Host attributes and cross-mixin dependencies are declared via inline
    TYPE_CHECKING blocks.

    """

    # ─────────────────────────────────────────────────────────────────────────
    # Cross-mixin dependencies (type-check only)
    # ─────────────────────────────────────────────────────────────────────────
    if TYPE_CHECKING:
        # From Compiler core
        def compile(self, node: Any) -> Instruction: ...

    def _get_special_dispatch(self) -> dict[Special, Callable[[Any], Instruction]]:
        """Get special form → handler table (cached on first call)."""
        if not hasattr(self, "_special_dispatch"):
            self._special_dispatch = {
                Special.FRAGMENT: self._compile_fragment,
                Special.FOR: self._compile_for,
                Special.IF: self._compile_if,
                Special.WHEN: self._compile_when,
                Special.COND: self._compile_cond,
            }
        return self._special_dispatch

    def _compile_fragment(self, node: Any) -> Instruction:
        """Compile [FRAGMENT, props?, child...].

        A fragment has no tag of its own: props and key are accepted but
        produce no markup.
        """
        props, children = props_and_children(node)
        logger.debug("Fragment with props: %r and key %r", props, get_key(node))
        return Sequence(tuple(self.compile(child) for child in children))

    def _compile_for(self, node: Any) -> Instruction:
        """Compile [FOR, bindings, body].

        ``bindings`` is a list of ``(name, iterable)`` pairs; the first pair
        is the outermost loop. The body is compiled once.
        """
        expected = "[FOR, [(name, iterable), ...], body]"
        if len(node) != 3:
            raise MalformedSpecialForm(
                "for", expected, node, f"got {len(node) - 1} trailing items instead of 2"
            )
        bindings = node[1]
        if not isinstance(bindings, (list, tuple)) or not bindings:
            raise MalformedSpecialForm(
                "for", expected, node, "bindings must be a non-empty list of pairs"
            )
        pairs: list[tuple[str, Any]] = []
        for binding in bindings:
            if (
                not isinstance(binding, (list, tuple))
                or len(binding) != 2
                or not isinstance(binding[0], str)
            ):
                raise MalformedSpecialForm(
                    "for", expected, node, f"invalid binding {binding!r}"
                )
            pairs.append((binding[0], binding[1]))
        return Repeat(tuple(pairs), self.compile(node[2]))

    def _compile_if(self, node: Any) -> Instruction:
        """Compile [IF, test, then, else]."""
        if len(node) != 4:
            raise MalformedSpecialForm(
                "if",
                "[IF, test, then, else] with exactly 3 forms",
                node,
                f"got {len(node) - 1} trailing items",
            )
        _, test, then, else_ = node
        return Branch(test, self.compile(then), self.compile(else_))

    def _compile_when(self, node: Any) -> Instruction:
        """Compile [WHEN, test, then]."""
        if len(node) != 3:
            raise MalformedSpecialForm(
                "when",
                "[WHEN, test, then] with exactly 2 forms",
                node,
                f"got {len(node) - 1} trailing items",
            )
        _, test, then = node
        return Guard(test, self.compile(then))

    def _compile_cond(self, node: Any) -> Instruction:
        """Compile [COND, test1, expr1, test2, expr2, ...]."""
        clauses = list(node[1:])
        if len(clauses) % 2:
            raise MalformedSpecialForm(
                "cond",
                "[COND, test, expr, ...] with an even number of forms",
                node,
                f"got {len(clauses)} trailing items",
            )
        return MultiBranch(
            tuple(
                (clauses[i], self.compile(clauses[i + 1]))
                for i in range(0, len(clauses), 2)
            )
        )
