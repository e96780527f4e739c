"""Tests for program execution against sinks."""

from __future__ import annotations

import io
from dataclasses import dataclass

import pytest

from ripley import Attr, Const, Item, StringSink, UndefinedError, Var, call, evaluate, execute
from ripley.executor import Executor
from ripley.nodes import (
    Branch,
    Guard,
    Instruction,
    MultiBranch,
    Repeat,
    Sequence,
    WriteDynamic,
    WriteLiteral,
)

from .helpers import run


@dataclass(frozen=True, slots=True)
class FakeUser:
    name: str


class RecordingSink:
    def __init__(self) -> None:
        self.calls: list[str] = []

    def write(self, text: str) -> None:
        self.calls.append(text)


class BrokenSink:
    def write(self, text: str) -> None:
        raise OSError("disk full")


class TestWrites:
    def test_literal_written_verbatim(self) -> None:
        assert run(WriteLiteral("<b>&amp;</b>")) == "<b>&amp;</b>"

    def test_dynamic_escaped(self) -> None:
        assert run(WriteDynamic((Var("v"),)), v="<b>") == "&lt;b&gt;"

    def test_dynamic_unescaped(self) -> None:
        assert run(WriteDynamic((Var("v"),), escape=False), v="<b>") == "<b>"

    def test_dynamic_concatenates_in_order(self) -> None:
        program = WriteDynamic((Const("a"), Var("v"), Const(3)))
        assert run(program, v="&") == "a&amp;3"

    def test_none_renders_empty(self) -> None:
        assert run(WriteDynamic((Var("v"),)), v=None) == ""

    def test_writes_in_program_order(self) -> None:
        sink = RecordingSink()
        program = Sequence((WriteLiteral("a"), WriteDynamic((Const("b"),)), WriteLiteral("c")))
        execute(program, sink)
        assert sink.calls == ["a", "b", "c"]

    def test_textio_sink(self) -> None:
        out = io.StringIO()
        execute(Sequence((WriteLiteral("x"), WriteLiteral("y"))), out)
        assert out.getvalue() == "xy"

    def test_custom_escape(self) -> None:
        sink = StringSink()
        execute(WriteDynamic((Const("abc"),)), sink, escape=str.upper)
        assert sink.getvalue() == "ABC"


class TestControlFlow:
    def test_repeat(self) -> None:
        program = Repeat((("i", range(3)),), WriteDynamic((Var("i"),)))
        assert run(program) == "012"

    def test_repeat_evaluates_iterable(self) -> None:
        program = Repeat((("i", Var("xs")),), WriteDynamic((Var("i"),)))
        assert run(program, xs="ab") == "ab"

    def test_repeat_scope_does_not_leak(self) -> None:
        program = Sequence(
            (Repeat((("i", [1, 2]),), WriteLiteral("-")), WriteDynamic((Var("i"),)))
        )
        with pytest.raises(UndefinedError):
            run(program)

    def test_branch(self) -> None:
        program = Branch(Var("t"), WriteLiteral("T"), WriteLiteral("F"))
        assert run(program, t=1) == "T"
        assert run(program, t=0) == "F"

    def test_guard(self) -> None:
        program = Guard(Var("t"), WriteLiteral("T"))
        assert run(program, t="yes") == "T"
        assert run(program, t="") == ""

    def test_multi_branch_stops_at_first_match(self) -> None:
        calls = []

        def probe(value):
            calls.append(value)
            return value

        program = MultiBranch(
            (
                (call(probe, False), WriteLiteral("a")),
                (call(probe, True), WriteLiteral("b")),
                (call(probe, True), WriteLiteral("c")),
            )
        )
        assert run(program) == "b"
        assert calls == [False, True]

    def test_multi_branch_no_match(self) -> None:
        assert run(MultiBranch(((False, WriteLiteral("a")),))) == ""

    def test_unknown_instruction(self) -> None:
        with pytest.raises(TypeError, match="Unknown instruction"):
            run(Instruction())


class TestErrors:
    """Render-time failures propagate unchanged."""

    def test_undefined_variable(self) -> None:
        with pytest.raises(UndefinedError) as exc_info:
            run(WriteDynamic((Var("missing"),)), present=1)
        assert exc_info.value.name == "missing"
        assert "present" in str(exc_info.value)

    def test_expression_error_not_wrapped(self) -> None:
        program = WriteDynamic((call(lambda: 1 / 0),))
        with pytest.raises(ZeroDivisionError):
            run(program)

    def test_sink_error_not_wrapped(self) -> None:
        with pytest.raises(OSError, match="disk full"):
            execute(WriteLiteral("x"), BrokenSink())

    def test_program_reusable_after_error(self) -> None:
        program = WriteDynamic((Var("v"),))
        with pytest.raises(UndefinedError):
            run(program)
        assert run(program, v="ok") == "ok"


class TestExpressions:
    def test_attr(self) -> None:
        assert evaluate(Attr(Var("user"), "name"), {"user": FakeUser("Ada")}) == "Ada"

    def test_item(self) -> None:
        assert evaluate(Item(Var("row"), "id"), {"row": {"id": 5}}) == 5

    def test_call_with_kwargs(self) -> None:
        expr = call(sorted, Var("xs"), reverse=Var("desc"))
        assert evaluate(expr, {"xs": [1, 3, 2], "desc": True}) == [3, 2, 1]

    def test_constants_pass_through(self) -> None:
        marker = object()
        assert evaluate(marker, {}) is marker

    def test_expressions_compare_structurally(self) -> None:
        assert Attr(Var("a"), "b") == Attr(Var("a"), "b")
        assert call(len, Var("a")) == call(len, Var("a"))

    def test_executor_is_per_render(self) -> None:
        sink = StringSink()
        Executor(sink).run(WriteLiteral("x"), {})
        assert sink.chunks == ["x"]
