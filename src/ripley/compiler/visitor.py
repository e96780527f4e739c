"""Post-order transformer over emission programs.

Each instruction kind has one ``visit_<Kind>`` method, found through an
O(1) dispatch table keyed by class name. The default methods rebuild
compound instructions from their visited children and return leaves
unchanged, so a pass only overrides the kinds it rewrites.
"""

from __future__ import annotations

from collections.abc import Callable

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


class InstructionTransformer:
    """Base class for program rewrite passes.

    Children are always visited before their parent (post-order). An
    unchanged subtree is returned as the same object.
    """

    def __call__(self, program: Instruction) -> Instruction:
        return self.visit(program)

    def visit(self, node: Instruction) -> Instruction:
        handler = self._get_dispatch().get(type(node).__name__)
        if handler is None:
            return node
        return handler(node)

    def _get_dispatch(self) -> dict[str, Callable[[Instruction], Instruction]]:
        """Get instruction type → handler table (cached on first call)."""
        if not hasattr(self, "_dispatch"):
            self._dispatch = {
                "WriteLiteral": self.visit_WriteLiteral,
                "WriteDynamic": self.visit_WriteDynamic,
                "Sequence": self.visit_Sequence,
                "Repeat": self.visit_Repeat,
                "Branch": self.visit_Branch,
                "Guard": self.visit_Guard,
                "MultiBranch": self.visit_MultiBranch,
            }
        return self._dispatch

    def visit_body(self, body: tuple[Instruction, ...]) -> tuple[Instruction, ...]:
        return tuple(self.visit(child) for child in body)

    def visit_WriteLiteral(self, node: WriteLiteral) -> Instruction:
        return node

    def visit_WriteDynamic(self, node: WriteDynamic) -> Instruction:
        return node

    def visit_Sequence(self, node: Sequence) -> Instruction:
        body = self.visit_body(tuple(node.body))
        if all(new is old for new, old in zip(body, node.body, strict=True)):
            return node
        return Sequence(body)

    def visit_Repeat(self, node: Repeat) -> Instruction:
        body = self.visit(node.body)
        return node if body is node.body else Repeat(node.bindings, body)

    def visit_Branch(self, node: Branch) -> Instruction:
        then = self.visit(node.then)
        else_ = self.visit(node.else_)
        if then is node.then and else_ is node.else_:
            return node
        return Branch(node.test, then, else_)

    def visit_Guard(self, node: Guard) -> Instruction:
        body = self.visit(node.body)
        return node if body is node.body else Guard(node.test, body)

    def visit_MultiBranch(self, node: MultiBranch) -> Instruction:
        clauses = tuple((test, self.visit(body)) for test, body in node.clauses)
        if all(new[1] is old[1] for new, old in zip(clauses, node.clauses, strict=True)):
            return node
        return MultiBranch(clauses)
