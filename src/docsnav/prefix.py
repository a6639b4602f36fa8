"""Apply a URL prefix to every page reference in a navigation tree."""

from __future__ import annotations

import re
from typing import Any

from docsnav.registry import PathRegistry
from docsnav.schemas import (
    AnchorConfig,
    GroupConfig,
    NavigationConfig,
    NavigationPage,
    TabConfig,
)
from docsnav.tree import is_blank

# Links such as https://..., mailto:... point outside the site.
_EXTERNAL_LINK_RE = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.\-]*:")


def normalize_prefix(prefix: str) -> str:
    """Strip trailing slashes from a prefix.

    Raises:
        ValueError: If ``prefix`` is blank.
    """
    if is_blank(prefix):
        raise ValueError("A URL prefix is required")
    return prefix.strip().rstrip("/")


class UrlPrefixRewriter:
    """Rewrites ``value`` to ``prefix/value`` across a navigation tree.

    Page paths, group roots and tab/anchor links are rewritten. Each page
    rename goes through ``registry`` so it never keeps the old path.
    """

    def __init__(self, registry: PathRegistry, prefix: str) -> None:
        self.registry = registry
        self.prefix = normalize_prefix(prefix)

    def apply(self, navigation: NavigationConfig) -> None:
        self._apply_to_pages(navigation.pages)
        for group in navigation.groups or []:
            self._apply_to_group(group)
        for tab in navigation.tabs or []:
            self._apply_to_tab(tab)
        for anchor in navigation.anchors or []:
            self._apply_to_anchor(anchor)
        for field_name in ("dropdowns", "languages", "versions"):
            for section in getattr(navigation, field_name) or []:
                self._apply_to_section(section)

    def _prefixed(self, value: str) -> str:
        return f"{self.prefix}/{value}"

    def _apply_to_pages(self, pages: list[NavigationPage] | None) -> None:
        if not pages:
            return
        for index, item in enumerate(pages):
            if isinstance(item, str):
                self.registry.rename_leaf(pages, index, self._prefixed(item))
            else:
                self._apply_to_group(item)

    def _apply_to_group(self, group: GroupConfig) -> None:
        if not is_blank(group.root):
            group.root = self._prefixed(group.root)
        self._apply_to_pages(group.pages)

    def _apply_to_href(self, section: TabConfig | AnchorConfig) -> None:
        if not is_blank(section.href) and not _EXTERNAL_LINK_RE.match(section.href):
            section.href = self._prefixed(section.href)

    def _apply_to_tab(self, tab: TabConfig) -> None:
        self._apply_to_href(tab)
        self._apply_to_section(tab)

    def _apply_to_anchor(self, anchor: AnchorConfig) -> None:
        self._apply_to_href(anchor)
        self._apply_to_section(anchor)

    def _apply_to_section(self, section: Any) -> None:
        """Rewrite the nested content of a tab, anchor, dropdown, language or version."""
        self._apply_to_pages(getattr(section, "pages", None))
        for group in getattr(section, "groups", None) or []:
            self._apply_to_group(group)
        for tab in getattr(section, "tabs", None) or []:
            self._apply_to_tab(tab)
        for anchor in getattr(section, "anchors", None) or []:
            self._apply_to_anchor(anchor)
        for field_name in ("dropdowns", "languages", "versions"):
            for nested in getattr(section, field_name, None) or []:
                self._apply_to_section(nested)
