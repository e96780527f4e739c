"""Dynamic-reference expressions for Ripley element trees.

An expression stands for a value that is only known at render time.
Placed as a child of a markup node it becomes a `WriteDynamic`
instruction (escaped at render time); placed as a property value it is
written verbatim inside the attribute quotes; used as a ``test`` or a
``for`` iterable it drives control flow.

Example:
    >>> from ripley import FOR, Var, html
    >>> html(["ul", [FOR, [("x", Var("items"))], ["li", Var("x")]]], items=[1, 2])
    '<ul><li>1</li><li>2</li></ul>'

Anything that is not an `Expr` is treated as a constant by `evaluate`.

"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from ripley.environment.exceptions import UndefinedError


@dataclass(frozen=True, slots=True)
class Expr:
    """Base class for expressions."""

    def evaluate(self, scope: Mapping[str, Any]) -> Any:
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class Const(Expr):
    """Constant value, for places where an explicit expression reads better."""

    value: Any

    def evaluate(self, scope: Mapping[str, Any]) -> Any:
        return self.value


@dataclass(frozen=True, slots=True)
class Var(Expr):
    """Variable reference resolved against the render scope."""

    name: str

    def evaluate(self, scope: Mapping[str, Any]) -> Any:
        try:
            return scope[self.name]
        except KeyError:
            raise UndefinedError(self.name, list(scope)) from None


@dataclass(frozen=True, slots=True)
class Attr(Expr):
    """Attribute access: ``obj.attr``"""

    obj: Any
    attr: str

    def evaluate(self, scope: Mapping[str, Any]) -> Any:
        return getattr(evaluate(self.obj, scope), self.attr)


@dataclass(frozen=True, slots=True)
class Item(Expr):
    """Subscript access: ``obj[key]``"""

    obj: Any
    key: Any

    def evaluate(self, scope: Mapping[str, Any]) -> Any:
        return evaluate(self.obj, scope)[evaluate(self.key, scope)]


@dataclass(frozen=True, slots=True)
class Call(Expr):
    """Function call with evaluated arguments: ``func(*args, **kwargs)``

    Build with `call()` rather than the constructor.
    """

    func: Callable[..., Any]
    args: tuple[Any, ...] = ()
    kwargs: tuple[tuple[str, Any], ...] = ()

    def evaluate(self, scope: Mapping[str, Any]) -> Any:
        func = evaluate(self.func, scope)
        args = [evaluate(arg, scope) for arg in self.args]
        kwargs = {name: evaluate(value, scope) for name, value in self.kwargs}
        return func(*args, **kwargs)


def call(func: Callable[..., Any] | Expr, *args: Any, **kwargs: Any) -> Call:
    """Create a `Call` expression.

    Example:
        >>> call(str.upper, Var("name"))
        Call(func=<method 'upper' of 'str' objects>, args=(Var(name='name'),), kwargs=())
    """
    return Call(func, tuple(args), tuple(kwargs.items()))


def evaluate(value: Any, scope: Mapping[str, Any]) -> Any:
    """Evaluate ``value`` if it is an expression, else return it unchanged."""
    if isinstance(value, Expr):
        return value.evaluate(scope)
    return value
