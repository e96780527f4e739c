"""Ripley: compile hiccup-style element trees into HTML emission programs.

An element tree is plain Python data: lists for markup, strings for text,
expressions for values known only at render time.

Quickstart:
    >>> from ripley import FOR, Var, html
    >>> html(
    ...     ["div.main",
    ...      ["h3", "section"],
    ...      ["ul", [FOR, [("x", range(3))], ["li", {"data-idx": Var("x")}, "item", Var("x")]]]]
    ... )
    '<div class="main"><h3>section</h3><ul><li data-idx="0">item0</li>...</ul></div>'

Architecture:
Element tree → Compiler → emission program → Optimizer → Executor → Sink

Pipeline stages:
1. **Compiler**: Classifies element tokens, expands special forms
   (fragment, for, if, when, cond) and escapes literal text
2. **Optimizer**: Flattens nested sequences and merges adjacent literal
   writes, so static markup becomes a few large string writes
3. **Executor**: Runs the program against a sink, evaluating and
   escaping dynamic values

Thread-Safety:
Compilation is pure and programs are immutable. Any number of renders may
run one program concurrently, each writing to its own sink.

Debugging:
Set ``RIPLEY_DEBUG=1`` to append a compiler trace to ``ripley.debug``.

"""

from typing import Any

from ripley.environment import (
    CompileError,
    Environment,
    ErrorCode,
    MalformedSpecialForm,
    RipleyError,
    UndefinedError,
    UnsupportedNodeShape,
    disable_debug_log,
    enable_debug_log,
)
from ripley.compiler import Compiler, optimize
from ripley.executor import execute
from ripley.expressions import Attr, Call, Const, Expr, Item, Var, call, evaluate
from ripley.forms import COND, FOR, FRAGMENT, IF, NO_VALUE, WHEN, Special
from ripley.nodes import Instruction
from ripley.shape import Keyed, keyed
from ripley.sink import Sink, StringSink
from ripley.tags import TagInfo, classify
from ripley.template import Template
from ripley.utils.html import html_escape

__version__ = "0.1.0"

__all__ = [
    "COND",
    "FOR",
    "FRAGMENT",
    "IF",
    "NO_VALUE",
    "WHEN",
    "Attr",
    "Call",
    "CompileError",
    "Compiler",
    "Const",
    "Environment",
    "ErrorCode",
    "Expr",
    "Instruction",
    "Item",
    "Keyed",
    "MalformedSpecialForm",
    "RipleyError",
    "Sink",
    "Special",
    "StringSink",
    "TagInfo",
    "Template",
    "UndefinedError",
    "UnsupportedNodeShape",
    "Var",
    "__version__",
    "call",
    "classify",
    "compile_html",
    "disable_debug_log",
    "enable_debug_log",
    "evaluate",
    "execute",
    "html",
    "html_escape",
    "keyed",
    "optimize",
]

_default_env = Environment()


def compile_html(tree: Any) -> Instruction:
    """Compile and optimize an element tree with default settings."""
    return _default_env.compile(tree)


def html(tree: Any, /, *args: Any, **context: Any) -> str:
    """Compile an element tree and render it once.

    For trees rendered repeatedly, build a `Template` with
    ``Environment().from_tree(tree)`` and call ``render()`` on it.
    """
    return _default_env.from_tree(tree).render(*args, **context)
