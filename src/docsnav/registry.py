"""Case-insensitive registry of the page paths present in a navigation tree."""

from __future__ import annotations

from collections import Counter
from typing import Any, Iterator

from docsnav.schemas import NavigationPage
from docsnav.tree import iter_leaves


def normalize_path(path: str) -> str:
    """Normalize a page path for case-insensitive comparison."""
    return path.casefold()


class PathRegistry:
    """Incrementally maintained index of every leaf path in a tree.

    Paths compare case-insensitively. Each path is reference counted so that
    duplicates kept on purpose (on load, or when duplicates are explicitly
    allowed) stay known until their last occurrence goes away.

    The ``*_leaf`` methods are the only places that add, remove or rename
    leaves inside a pages list; they keep the list and the registry in step.
    """

    def __init__(self) -> None:
        self._counts: Counter[str] = Counter()

    def __contains__(self, path: object) -> bool:
        return isinstance(path, str) and self._counts[normalize_path(path)] > 0

    def __len__(self) -> int:
        return len(self._counts)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._counts))

    def __repr__(self) -> str:
        return f"PathRegistry({sorted(self._counts)!r})"

    def add(self, path: str) -> None:
        self._counts[normalize_path(path)] += 1

    def discard(self, path: str) -> None:
        key = normalize_path(path)
        if self._counts[key] <= 1:
            self._counts.pop(key, None)
        else:
            self._counts[key] -= 1

    def rename(self, old_path: str, new_path: str) -> None:
        """Swap ``old_path`` for ``new_path`` in a single step."""
        self.discard(old_path)
        self.add(new_path)

    def clear(self) -> None:
        self._counts.clear()

    def register(self, node: Any) -> None:
        """Add every leaf below ``node`` (leaf, list, or navigation model)."""
        for path in iter_leaves(node):
            self.add(path)

    def unregister(self, node: Any) -> None:
        """Remove every leaf below ``node``."""
        for path in iter_leaves(node):
            self.discard(path)

    def append_leaf(self, pages: list[NavigationPage], path: str) -> None:
        pages.append(path)
        self.add(path)

    def remove_leaf(self, pages: list[NavigationPage], index: int) -> str:
        path = pages[index]
        if not isinstance(path, str):
            raise TypeError(f"Item at index {index} is not a page path")
        del pages[index]
        self.discard(path)
        return path

    def rename_leaf(self, pages: list[NavigationPage], index: int, new_path: str) -> None:
        old_path = pages[index]
        if not isinstance(old_path, str):
            raise TypeError(f"Item at index {index} is not a page path")
        pages[index] = new_path
        self.rename(old_path, new_path)
