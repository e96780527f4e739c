"""Peephole optimization of emission programs.

Two passes run in order over the whole program:

1. **flatten_sequences**: ``Sequence(a, Sequence(b), Sequence(c), d)``
   becomes ``Sequence(a, b, c, d)``. Merging only looks at siblings of one
   Sequence, so flattening first maximizes adjacency.
2. **merge_literals**: runs of adjacent `WriteLiteral` instructions in a
   Sequence collapse into one, flushed right before the next non-literal
   instruction and at the end of the Sequence.

Neither pass moves text across a dynamic or control-flow instruction, so
the optimized program writes exactly the same stream as the unoptimized one.
Both passes are total over well-formed programs and never raise.

Example:
    Before:  Sequence(WriteLiteral("<li>"), Sequence(WriteLiteral("item")),
                      WriteDynamic(x), WriteLiteral("</li>"))
    After:   Sequence(WriteLiteral("<li>item"), WriteDynamic(x),
                      WriteLiteral("</li>"))

"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from ripley.compiler.visitor import InstructionTransformer
from ripley.nodes import Instruction, Sequence, WriteLiteral


class FlattenSequences(InstructionTransformer):
    """Splice nested Sequences into their parent Sequence."""

    def visit_Sequence(self, node: Sequence) -> Instruction:
        body: list[Instruction] = []
        for child in self.visit_body(tuple(node.body)):
            # Children are already flat (post-order)
            if isinstance(child, Sequence):
                body.extend(child.body)
            else:
                body.append(child)
        return Sequence(tuple(body))


class MergeLiterals(InstructionTransformer):
    """Collapse runs of adjacent WriteLiteral instructions."""

    def visit_Sequence(self, node: Sequence) -> Instruction:
        body: list[Instruction] = []
        pending: list[str] = []
        for child in self.visit_body(tuple(node.body)):
            if isinstance(child, WriteLiteral):
                pending.append(child.text)
                continue
            self._flush(pending, body)
            body.append(child)
        self._flush(pending, body)
        return Sequence(tuple(body))

    @staticmethod
    def _flush(pending: list[str], body: list[Instruction]) -> None:
        text = "".join(pending)
        pending.clear()
        if text:
            body.append(WriteLiteral(text))


flatten_sequences = FlattenSequences()
merge_literals = MergeLiterals()

Pass = Callable[[Instruction], Instruction]

DEFAULT_PASSES: tuple[Pass, ...] = (flatten_sequences, merge_literals)


def optimize(program: Instruction, passes: Iterable[Pass] = DEFAULT_PASSES) -> Instruction:
    """Apply optimization passes to a program, in order."""
    for optimization in passes:
        program = optimization(program)
    return program
