"""Read-only traversal helpers for navigation trees."""

from __future__ import annotations

from typing import Any, Iterator

from docsnav.schemas import GroupConfig, NavigationPage

# Child collections that can hold navigation content, besides ``pages``.
CONTAINER_FIELDS = ("groups", "tabs", "anchors", "dropdowns", "languages", "versions")


def iter_leaves(node: Any) -> Iterator[str]:
    """Yield every leaf path below ``node``.

    ``node`` may be a leaf, a list of navigation items, or any navigation
    model (group, tab, anchor, whole navigation tree).
    """
    if node is None:
        return
    if isinstance(node, str):
        yield node
        return
    if isinstance(node, list):
        for item in node:
            yield from iter_leaves(item)
        return
    yield from iter_leaves(getattr(node, "pages", None))
    for field_name in CONTAINER_FIELDS:
        yield from iter_leaves(getattr(node, field_name, None))


def iter_page_lists(node: Any) -> Iterator[list[NavigationPage]]:
    """Yield every ``pages`` list below ``node``, outermost first."""
    if node is None or isinstance(node, str):
        return
    if isinstance(node, list):
        for item in node:
            yield from iter_page_lists(item)
        return
    pages = getattr(node, "pages", None)
    if pages is not None:
        yield pages
        for group in iter_groups(pages):
            yield from iter_page_lists(group)
    for field_name in CONTAINER_FIELDS:
        yield from iter_page_lists(getattr(node, field_name, None))


def iter_groups(pages: list[NavigationPage] | None) -> Iterator[GroupConfig]:
    """Yield the groups directly contained in a pages list."""
    for item in pages or []:
        if isinstance(item, GroupConfig):
            yield item


def find_group(pages: list[NavigationPage] | None, name: str) -> GroupConfig | None:
    """Return the first group in ``pages`` whose name equals ``name`` exactly."""
    for group in iter_groups(pages):
        if group.group == name:
            return group
    return None


def is_blank(value: str | None) -> bool:
    """True for ``None``, empty and whitespace-only strings."""
    return value is None or not value.strip()
