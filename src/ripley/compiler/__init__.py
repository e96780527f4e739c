"""Ripley compiler: element tree → emission program.

Pipeline:
    element tree → Compiler.compile() → flatten_sequences → merge_literals

"""

from ripley.compiler.core import Compiler
from ripley.compiler.optimizer import (
    DEFAULT_PASSES,
    FlattenSequences,
    MergeLiterals,
    flatten_sequences,
    merge_literals,
    optimize,
)
from ripley.compiler.visitor import InstructionTransformer

__all__ = [
    "DEFAULT_PASSES",
    "Compiler",
    "FlattenSequences",
    "InstructionTransformer",
    "MergeLiterals",
    "flatten_sequences",
    "merge_literals",
    "optimize",
]
