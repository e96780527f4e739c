"""Control flow instructions produced by special forms."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from ripley.nodes.base import Instruction


@dataclass(frozen=True, slots=True)
class Repeat(Instruction):
    """Loop: run ``body`` once per binding combination.

    ``bindings`` is an ordered tuple of ``(name, iterable)`` pairs, the
    first pair being the outermost loop.
    """

    bindings: tuple[tuple[str, Any], ...]
    body: Instruction


@dataclass(frozen=True, slots=True)
class Branch(Instruction):
    """Two-way conditional: ``then`` if ``test`` is truthy, else ``else_``."""

    test: Any
    then: Instruction
    else_: Instruction


@dataclass(frozen=True, slots=True)
class Guard(Instruction):
    """One-way conditional: ``body`` only if ``test`` is truthy."""

    test: Any
    body: Instruction


@dataclass(frozen=True, slots=True)
class MultiBranch(Instruction):
    """Ordered clauses, first truthy test wins; no match writes nothing."""

    clauses: Sequence[tuple[Any, Instruction]] = ()
