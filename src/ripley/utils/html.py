"""HTML escaping for Ripley.

Used at compile time for literal text nodes and at render time for
dynamic values. Attribute values are not passed through here.

Complexity: O(n) single pass using `str.translate()`.
"""

from __future__ import annotations

from typing import Any

_ESCAPE_TABLE = str.maketrans(
    {
        "&": "&amp;",
        "<": "&lt;",
        ">": "&gt;",
        '"': "&quot;",
        "'": "&#39;",
    }
)


def html_escape(value: Any) -> str:
    """Escape a value for safe inclusion in HTML text content.

    ``None`` renders as the empty string; anything else goes through
    ``str()`` first.

    Example:
        >>> html_escape("<b>Tom & Jerry</b>")
        '&lt;b&gt;Tom &amp; Jerry&lt;/b&gt;'
    """
    if value is None:
        return ""
    if not isinstance(value, str):
        value = str(value)
    return value.translate(_ESCAPE_TABLE)
