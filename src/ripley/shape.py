"""Markup node shape analysis.

A markup node is a list or tuple: element token, optional property mapping,
then children. A node may also carry a stable key as out-of-band
metadata by being a `Keyed` list.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from ripley.tags import TagInfo


class Keyed(list):
    """Markup node carrying a stable ``key``.

    The key is metadata, never a child. Literal elements render it as a
    ``key`` attribute.
    """

    __slots__ = ("key",)

    def __init__(self, key: Any, items: Sequence[Any] = ()):
        super().__init__(items)
        self.key = key

    def __repr__(self) -> str:
        return f"keyed({self.key!r}, {list.__repr__(self)})"


def keyed(key: Any, node: Sequence[Any]) -> Keyed:
    """Attach a stable key to a markup node.

    Example:
        >>> keyed("row-1", ["li", "first"]).key
        'row-1'
    """
    return Keyed(key, node)


def is_markup(node: Any) -> bool:
    """Markup nodes are lists and tuples (including `Keyed`)."""
    return isinstance(node, (list, tuple))


def get_key(node: Any) -> Any | None:
    """Stable key of a node, or None when it carries none."""
    return node.key if isinstance(node, Keyed) else None


def props_and_children(node: Sequence[Any]) -> tuple[Mapping[str, Any] | None, list[Any]]:
    """Split a markup node into its property mapping and children.

    The item after the element token is the property mapping if it is a
    ``Mapping``; otherwise there are no properties and children start right
    after the token.
    """
    has_props = len(node) > 1 and isinstance(node[1], Mapping)
    props = node[1] if has_props else None
    children = list(node[2:] if has_props else node[1:])
    return props, children


def element_props(node: Sequence[Any], tag: TagInfo) -> dict[str, Any]:
    """Final attribute map of a literal element.

    Merge order, later entries winning: stable ``key``, caller properties,
    ``class`` from the token, ``id`` from the token.
    """
    props, _ = props_and_children(node)
    merged: dict[str, Any] = {}
    key = get_key(node)
    if key is not None:
        merged["key"] = key
    if props:
        merged.update(props)
    if tag.class_names:
        merged["class"] = " ".join(tag.class_names)
    if tag.id:
        merged["id"] = tag.id
    return merged
