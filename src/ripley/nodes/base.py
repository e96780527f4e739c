"""Base instruction class for the Ripley emission program."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Instruction:
    """Base class for all emission instructions.

    Instructions are immutable so a compiled program can be shared by
    any number of concurrent renders.

    """
