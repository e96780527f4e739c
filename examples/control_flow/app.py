"""Control flow -- if, when, cond and fragments.

Special forms take the place of the element token. They compile to
branch instructions, so the static markup around them is still merged
into single writes.

Run:
    python app.py
"""

from ripley import COND, FOR, FRAGMENT, IF, WHEN, Environment, Item, Var, call

env = Environment()


def is_overdue(task: dict) -> bool:
    return task["days_left"] < 0


template = env.from_tree(
    [
        "table.tasks",
        [
            FOR,
            [("task", Var("tasks"))],
            [
                "tr",
                ["td", Item(Var("task"), "title")],
                [
                    "td.status",
                    [
                        COND,
                        Item(Var("task"), "done"), "done",
                        call(is_overdue, Var("task")), ["strong", "overdue"],
                        True, "open",
                    ],
                ],
                ["td", [IF, Item(Var("task"), "owner"), Item(Var("task"), "owner"), "-"]],
            ],
        ],
        [
            WHEN,
            Var("show_footer"),
            [FRAGMENT, ["tr.footer", ["td", "Total: ", call(len, Var("tasks"))]]],
        ],
    ]
)

tasks = [
    {"title": "Write docs", "done": True, "days_left": 2, "owner": "ada"},
    {"title": "Fix <bug>", "done": False, "days_left": -1, "owner": None},
    {"title": "Release", "done": False, "days_left": 5, "owner": "bob"},
]

output = template.render(tasks=tasks, show_footer=True)


def main() -> None:
    print(output)


if __name__ == "__main__":
    main()
