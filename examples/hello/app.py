"""Hello World -- the simplest ripley example.

Compile an element tree once and render it with context variables.

Run:
    python app.py
"""

from ripley import Environment, Var

env = Environment()

# Compile once
template = env.from_tree(["p.greeting", "Hello, ", Var("name"), "!"])

# Render with context
output = template.render(name="World")


def main() -> None:
    print(output)
    print()

    # Multiple renders with different context
    for name in ["Ripley", "Tom & Jerry", "<script>"]:
        print(template.render(name=name))


if __name__ == "__main__":
    main()
