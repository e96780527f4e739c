"""Ripley emission program nodes.

The compiler turns an element tree into a tree of these instructions.
All nodes are frozen, slotted dataclasses.

Output:
    WriteLiteral, WriteDynamic, Sequence

Control flow:
    Repeat, Branch, Guard, MultiBranch

"""

from ripley.nodes.base import Instruction
from ripley.nodes.control_flow import Branch, Guard, MultiBranch, Repeat
from ripley.nodes.output import Sequence, WriteDynamic, WriteLiteral

__all__ = [
    "Branch",
    "Guard",
    "Instruction",
    "MultiBranch",
    "Repeat",
    "Sequence",
    "WriteDynamic",
    "WriteLiteral",
]
