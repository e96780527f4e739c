"""Concurrent rendering -- one compiled program, 8 threads.

The compiled program is immutable and every render writes to its own
sink, so threads share the template with no locking.

Run:
    python app.py
"""

from concurrent.futures import ThreadPoolExecutor

from ripley import FOR, Environment, Var, call

env = Environment()

# Each thread renders the same template with different context
template = env.from_tree(
    [
        "article",
        {"id": call("page-{}".format, Var("page_id"))},
        ["h1", Var("title")],
        ["ul", [FOR, [("tag", Var("tags"))], ["li", Var("tag")]]],
    ]
)

pages = [
    {"page_id": i, "title": f"Page {i}", "tags": [f"tag-{i}-a", f"tag-{i}-b", f"tag-{i}-c"]}
    for i in range(8)
]


def render_page(page: dict) -> str:
    """Render a single page -- called from a worker thread."""
    return template.render(**page)


with ThreadPoolExecutor(max_workers=8) as pool:
    results = list(pool.map(render_page, pages))

output = "\n".join(results)


def main() -> None:
    print(f"Rendered {len(results)} pages across 8 threads:\n")
    for i, page_html in enumerate(results):
        print(f"--- Thread {i} ---")
        print(page_html)
        print()


if __name__ == "__main__":
    main()
