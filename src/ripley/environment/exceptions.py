"""Exceptions for Ripley.

Exception Hierarchy:
RipleyError (base)
├── CompileError              # Compile-time, fatal to the enclosing program
│   ├── MalformedSpecialForm  # Wrong arity or shape for for/if/when/cond
│   └── UnsupportedNodeShape  # Node is not markup, text or an expression
└── UndefinedError            # Render-time lookup of an unbound variable

Compile errors abort compilation; there is no partially compiled program.
Errors raised by user expressions or by a sink while rendering are not
wrapped and reach the caller unchanged.

Example:
    ```
    R-CMP-001: Malformed if form: expected [IF, test, then, else] with exactly 3 forms, got 2 trailing items
      Form: [<Special.IF: 'if'>, True, 'then']
      Docs: https://ripley.readthedocs.io/en/latest/errors.html#r-cmp-001
    ```

"""

from __future__ import annotations

from enum import Enum
from typing import Any

_RIPLEY_DOCS_BASE = "https://ripley.readthedocs.io/en/latest/errors.html"


class ErrorCode(Enum):
    """Searchable error codes for Ripley errors.

    Format: R-{CATEGORY}-{NUMBER}
    Categories: CMP (compiler), RUN (runtime)
    """

    # Compiler errors (R-CMP-xxx)
    MALFORMED_SPECIAL_FORM = "R-CMP-001"
    UNSUPPORTED_NODE_SHAPE = "R-CMP-002"

    # Runtime errors (R-RUN-xxx)
    UNDEFINED_VARIABLE = "R-RUN-001"

    @property
    def docs_url(self) -> str:
        """Documentation URL for this error code."""
        anchor = self.value.lower()
        return f"{_RIPLEY_DOCS_BASE}#{anchor}"

    @property
    def category(self) -> str:
        """Error category ('compiler' or 'runtime')."""
        prefix = self.value.split("-")[1]
        return {
            "CMP": "compiler",
            "RUN": "runtime",
        }.get(prefix, "unknown")


def describe_shape(node: Any, limit: int = 80) -> str:
    """Short ``repr`` of a node for error messages."""
    text = repr(node)
    if len(text) > limit:
        text = text[: limit - 3] + "..."
    return text


class RipleyError(Exception):
    """Base exception for all Ripley errors.

    Attributes:
        code: Optional ErrorCode for searchable error identification.
    """

    code: ErrorCode | None = None

    def format_compact(self) -> str:
        """Format error as a short diagnostic without traceback noise.

        Format::

            R-CMP-002: Can't compile to HTML: 42
              Docs: https://ripley.readthedocs.io/en/latest/errors.html#r-cmp-002

        """
        header = str(self)
        parts: list[str] = []
        if self.code:
            code_str = self.code.value
            if code_str not in header:
                header = f"{code_str}: {header}"
        parts.append(header)
        if self.code:
            parts.append(f"  Docs: {self.code.docs_url}")
        return "\n".join(parts)


class CompileError(RipleyError):
    """Element tree could not be compiled."""


class MalformedSpecialForm(CompileError):
    """Special form with the wrong arity or argument shape.

    Attributes:
        form: Name of the special form ("for", "if", "when", "cond").
        expected: Human-readable description of the required shape.
        received: The offending node.
    """

    code = ErrorCode.MALFORMED_SPECIAL_FORM

    def __init__(self, form: str, expected: str, received: Any, detail: str | None = None):
        self.form = form
        self.expected = expected
        self.received = received
        message = f"Malformed {form} form: expected {expected}"
        if detail:
            message += f", {detail}"
        message += f"\n  Form: {describe_shape(received)}"
        super().__init__(message)


class UnsupportedNodeShape(CompileError):
    """Node is neither markup, literal text nor a dynamic reference.

    Attributes:
        node: The offending node.
        hint: Optional suggestion for fixing the tree.
    """

    code = ErrorCode.UNSUPPORTED_NODE_SHAPE

    def __init__(self, node: Any, message: str | None = None, hint: str | None = None):
        self.node = node
        self.hint = hint
        text = message or f"Can't compile to HTML: {describe_shape(node)}"
        if hint:
            text += f"\n  Hint: {hint}"
        super().__init__(text)


class UndefinedError(RipleyError):
    """Render-time reference to a variable that is not in scope."""

    code = ErrorCode.UNDEFINED_VARIABLE

    def __init__(self, name: str, available: list[str] | None = None):
        self.name = name
        self.available = available or []
        message = f"Undefined variable '{name}'"
        if self.available:
            message += f" (in scope: {', '.join(sorted(self.available))})"
        super().__init__(message)
