"""Ripley Compiler Core: main Compiler class.

The Compiler transforms an element tree into an emission program: a tree
of immutable instructions (see `ripley.nodes`) that an executor later
runs against a sink.

Design Principles:
1. **Data, not code**: The output is an inspectable instruction tree, not
   generated source, so optimization passes are plain data rewrites
2. **Escape early**: Literal text is escaped once at compile time;
   dynamic values are escaped at render time
3. **O(1) dispatch**: Dict-based special form → handler lookup

Element Compilation:
    ["div.main", {"title": "x"}, "hi"] compiles to

    ```python
    Sequence((
        WriteLiteral("<div"),
        WriteLiteral(' title="x"'),
        WriteLiteral(' class="main"'),
        WriteLiteral(">"),
        WriteLiteral("hi"),
        WriteLiteral("</div>"),
    ))
    ```

    which the optimizer collapses to a single WriteLiteral.

"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from ripley.compiler.special_forms import SpecialFormMixin
from ripley.environment.exceptions import UnsupportedNodeShape
from ripley.expressions import Expr
from ripley.forms import NO_VALUE, special_form
from ripley.nodes import Instruction, Sequence, WriteDynamic, WriteLiteral
from ripley.shape import element_props, is_markup, props_and_children
from ripley.tags import classify
from ripley.utils.html import html_escape

logger = logging.getLogger(__name__)


class Compiler(SpecialFormMixin):
    """Compile Ripley element trees to emission programs.

    Node shapes, in dispatch order:
        - markup node led by a special form → special form handler
        - markup node led by a ``str`` token → literal HTML element
        - ``str`` → escaped `WriteLiteral`
        - `Expr` → `WriteDynamic`
        - anything else → `UnsupportedNodeShape`

    Attributes:
        _escape: Escaper applied to literal text at compile time

    Example:
            >>> from ripley.compiler import Compiler
            >>> program = Compiler().compile(["b", "<hi>"])
            >>> program.body[2]
            WriteLiteral(text='&lt;hi&gt;')

    """

    __slots__ = ("_escape", "_special_dispatch")

    def __init__(self, escape: Callable[[Any], str] = html_escape):
        self._escape = escape

    def compile(self, node: Any) -> Instruction:
        """Compile one element-tree node to an (unoptimized) program."""
        if is_markup(node):
            if not node:
                raise UnsupportedNodeShape(node, "Can't compile empty markup node to HTML")
            form = special_form(node[0])
            if form is not None:
                return self._get_special_dispatch()[form](node)
            if isinstance(node[0], str):
                return self._compile_element(node)
            raise UnsupportedNodeShape(
                node,
                "Markup node must start with an element or special form token, "
                f"got {node[0]!r}",
                hint="build dynamic values with call(...) instead of a list",
            )

        if isinstance(node, str):
            # Static content
            return WriteLiteral(self._escape(node))

        if isinstance(node, Expr):
            return WriteDynamic((node,))

        raise UnsupportedNodeShape(
            node, hint="wrap runtime values in an expression such as Const(...) or Var(...)"
        )

    def _compile_element(self, node: Any) -> Instruction:
        """Compile HTML markup element, like ["div.someclass", "content"]."""
        tag = classify(node[0])
        props = element_props(node, tag)
        _, children = props_and_children(node)
        logger.debug(
            "HTML Element: %s with props: %r and %d children", tag.name, props, len(children)
        )

        body: list[Instruction] = [WriteLiteral(f"<{tag.name}")]
        for attr, value in props.items():
            if value is NO_VALUE:
                continue
            body.extend(self._compile_attribute(str(attr), value))
        body.append(WriteLiteral(">"))
        body.extend(self.compile(child) for child in children)
        body.append(WriteLiteral(f"</{tag.name}>"))
        return Sequence(tuple(body))

    def _compile_attribute(self, name: str, value: Any) -> list[Instruction]:
        """Compile one attribute. Values are written verbatim, never escaped.

        ``None`` renders as an empty value, as it does for dynamic values.
        """
        if isinstance(value, Expr):
            return [
                WriteLiteral(f' {name}="'),
                WriteDynamic((value,), escape=False),
                WriteLiteral('"'),
            ]
        text = "" if value is None else str(value)
        return [WriteLiteral(f' {name}="{text}"')]
