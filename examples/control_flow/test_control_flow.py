"""Tests for the control flow example."""

from ripley.nodes import Guard, MultiBranch, Repeat


class TestControlFlowApp:
    def test_rows(self, example_app) -> None:
        assert "<tr><td>Write docs</td><td class=\"status\">done</td><td>ada</td></tr>" in (
            example_app.output
        )

    def test_cond_second_clause_and_escaping(self, example_app) -> None:
        assert (
            '<tr><td>Fix &lt;bug&gt;</td><td class="status"><strong>overdue</strong></td>'
            "<td>-</td></tr>"
        ) in example_app.output

    def test_cond_fallback(self, example_app) -> None:
        assert '<td class="status">open</td><td>bob</td>' in example_app.output

    def test_footer(self, example_app) -> None:
        assert example_app.output.endswith('<tr class="footer"><td>Total: 3</td></tr></table>')

    def test_footer_hidden(self, example_app) -> None:
        output = example_app.template.render(tasks=[], show_footer=False)
        assert output == '<table class="tasks"></table>'

    def test_program_shape(self, example_app) -> None:
        kinds = [type(i) for i in example_app.template.program.body]
        assert Repeat in kinds
        assert Guard in kinds
        loop = next(i for i in example_app.template.program.body if isinstance(i, Repeat))
        assert any(isinstance(i, MultiBranch) for i in loop.body.body)
