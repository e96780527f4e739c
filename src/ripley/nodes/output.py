"""Output instructions for the Ripley emission program."""

from __future__ import annotations

from collections.abc import Sequence as SequenceABC
from dataclasses import dataclass
from typing import Any

from ripley.nodes.base import Instruction


@dataclass(frozen=True, slots=True)
class WriteLiteral(Instruction):
    """Write pre-escaped static text, finalized at compile time."""

    text: str


@dataclass(frozen=True, slots=True)
class WriteDynamic(Instruction):
    """Evaluate expressions at render time and write their concatenation.

    The joined value is HTML-escaped unless ``escape`` is false, which is
    only the case for attribute values.
    """

    exprs: tuple[Any, ...]
    escape: bool = True


@dataclass(frozen=True, slots=True)
class Sequence(Instruction):
    """Ordered composition of instructions."""

    body: SequenceABC[Instruction] = ()
