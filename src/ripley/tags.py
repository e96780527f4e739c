"""Element token classification.

An element token is the first item of a markup node, written like a CSS
selector: ``"div.main.row#hero"`` names a ``div`` element with classes
``main`` and ``row`` and id ``hero``.

Classification never fails. A malformed token degrades to empty fields.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

_NAME_RE = re.compile(r"^([^.#]+)")
_CLASS_RE = re.compile(r"\.([^.#]+)")
_ID_RE = re.compile(r"#([^.#]+)")


@dataclass(frozen=True, slots=True)
class TagInfo:
    """Parsed element token."""

    name: str
    class_names: tuple[str, ...]
    id: str | None


def element_name(token: str) -> str:
    """Leading run of the token before the first ``.`` or ``#``."""
    match = _NAME_RE.match(token)
    return match.group(1) if match else ""


def element_class_names(token: str) -> list[str]:
    """All ``.class`` segments, left to right, duplicates preserved."""
    return _CLASS_RE.findall(token)


def element_id(token: str) -> str | None:
    """Text after the first ``#`` up to the next ``.`` or ``#``, if any."""
    match = _ID_RE.search(token)
    return match.group(1) if match else None


def classify(token: str) -> TagInfo:
    """Split an element token into name, class names and id.

    Example:
        >>> classify("div.main.row#hero")
        TagInfo(name='div', class_names=('main', 'row'), id='hero')
    """
    return TagInfo(
        name=element_name(token),
        class_names=tuple(element_class_names(token)),
        id=element_id(token),
    )
