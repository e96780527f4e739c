"""Element-tree vocabulary: special-form tags and the omit sentinel.

Special forms replace the element token of a markup node:

    [FRAGMENT, child, ...]                    # children without a wrapper
    [FOR, [("x", items)], body]               # body once per item
    [IF, test, then, else_]
    [WHEN, test, then]
    [COND, test1, expr1, test2, expr2, ...]   # first truthy test wins

The string ``"<>"`` is accepted as shorthand for `FRAGMENT`.
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class Special(Enum):
    """Reserved special-form tags."""

    FRAGMENT = "fragment"
    FOR = "for"
    IF = "if"
    WHEN = "when"
    COND = "cond"


FRAGMENT = Special.FRAGMENT
FOR = Special.FOR
IF = Special.IF
WHEN = Special.WHEN
COND = Special.COND

FRAGMENT_ALIAS = "<>"


def special_form(token: Any) -> Special | None:
    """Return the special form named by ``token``, or None for anything else."""
    if isinstance(token, Special):
        return token
    if isinstance(token, str) and token == FRAGMENT_ALIAS:
        return Special.FRAGMENT
    return None


class _NoValue:
    """Property value that omits the attribute entirely."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "NO_VALUE"

    def __reduce__(self) -> str:
        return "NO_VALUE"


NO_VALUE = _NoValue()
