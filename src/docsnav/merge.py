"""Navigation tree merging.

Two independently authored navigation trees are folded together without
duplicating pages: target order is kept, new source items are appended in
source order, and groups, tabs and anchors with the same identity are
reconciled recursively.
"""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass
from typing import Any, Callable, TypeVar

from docsnav.config import DOCSNAV_ROOT_GROUP_NAME
from docsnav.registry import PathRegistry, normalize_path
from docsnav.schemas import (
    AnchorConfig,
    GroupConfig,
    NavigationConfig,
    NavigationPage,
    TabConfig,
)
from docsnav.tree import CONTAINER_FIELDS, is_blank, iter_leaves

logger = logging.getLogger(__name__)

_GROUP_SCALARS = ("tag", "root", "icon", "hidden", "expanded", "openapi", "asyncapi")
_TAB_SCALARS = ("tab", "href", "icon", "hidden", "openapi", "asyncapi", "global_")
_ANCHOR_SCALARS = ("anchor", "href", "icon", "color", "hidden", "openapi", "asyncapi", "global_")
# Collections that are appended as-is; their items are not path identified.
_CONCATENATED = ("dropdowns", "languages", "versions")

_Section = TypeVar("_Section", TabConfig, AnchorConfig)


@dataclass
class MergeOptions:
    """Options for navigation merging.

    Attributes:
        combine_empty_groups: If True, all groups with an empty name collapse
            into one. By default each empty-named group stays a separate
            anonymous section.
        add_root_pages_to_getting_started: If True, new top-level pages go
            into an existing root group (``Getting Started``) instead of the
            top level.
        allow_duplicate_paths: If True, pages already present are added
            again instead of being skipped.
        ignore_known_paths: If True, pages known elsewhere in the tree are
            added again; a page already in the same list is still skipped.
    """

    combine_empty_groups: bool = False
    add_root_pages_to_getting_started: bool = False
    allow_duplicate_paths: bool = False
    ignore_known_paths: bool = False


class TreeMerger:
    """Merges navigation content into a target tree in place.

    Every page added to the target is recorded in ``registry``; source nodes
    are copied, so the source tree is never shared with the target.

    Args:
        registry: Registry of the paths already present in the target tree.
            A fresh registry is used when omitted.
        options: Merge options. Uses defaults if None.
    """

    def __init__(
        self,
        registry: PathRegistry | None = None,
        options: MergeOptions | None = None,
    ) -> None:
        self.registry = registry if registry is not None else PathRegistry()
        self.options = options or MergeOptions()

    def merge_navigation(self, target: NavigationConfig, source: NavigationConfig | None) -> None:
        """Merge a whole navigation tree into ``target``."""
        if source is None:
            return
        if source.pages is not None:
            if target.pages is None:
                target.pages = []
            self.merge_pages(target.pages, source.pages)
        if source.groups is not None:
            if target.groups is None:
                target.groups = []
            self.merge_groups(target.groups, source.groups)
        if source.tabs is not None:
            if target.tabs is None:
                target.tabs = []
            self.merge_tabs(target.tabs, source.tabs)
        if source.anchors is not None:
            if target.anchors is None:
                target.anchors = []
            self.merge_anchors(target.anchors, source.anchors)
        for field_name in _CONCATENATED:
            self._concatenate(target, source, field_name)
        if source.global_ is not None:
            target.global_ = source.global_.model_copy(deep=True)

    def merge_pages(
        self,
        target: list[NavigationPage],
        source: list[NavigationPage] | None,
    ) -> None:
        """Merge ``source`` pages into ``target`` pages.

        Leaves already present (in ``target`` or anywhere the registry knows
        of) are skipped. Named groups merge with the first target group of
        the same name. Empty-named groups are kept apart unless
        ``combine_empty_groups`` is set. Null-named groups are dropped.

        Raises:
            ValueError: If ``target`` is None.
        """
        if target is None:
            raise ValueError("A target pages list is required for merging")

        combine_empty = self.options.combine_empty_groups
        output: list[NavigationPage] = []
        seen: set[str] = set()
        groups_by_name: dict[str, GroupConfig] = {}

        for item in target:
            if isinstance(item, str):
                output.append(item)
                seen.add(normalize_path(item))
            elif item.group is None:
                logger.debug("Dropping target group with a null name")
                self.registry.unregister(item)
            elif is_blank(item.group) and not combine_empty:
                output.append(item)
                seen.update(normalize_path(path) for path in iter_leaves(item))
            else:
                key = "" if is_blank(item.group) else item.group
                existing = groups_by_name.get(key)
                if existing is None:
                    groups_by_name[key] = item
                    output.append(item)
                    seen.update(normalize_path(path) for path in iter_leaves(item))
                else:
                    # A repeated group folds into the first one; its pages are
                    # re-added through the merge so duplicates fall out.
                    logger.debug("Folding repeated target group %r", key)
                    self.registry.unregister(item)
                    self.merge_group(existing, item)

        for item in source or []:
            if isinstance(item, str):
                self._merge_leaf(item, output, seen, groups_by_name)
            elif item.group is None:
                logger.debug("Dropping source group with a null name")
            elif is_blank(item.group) and not combine_empty:
                adopted = self._adopt_group(item)
                if adopted is not None:
                    output.append(adopted)
            else:
                key = "" if is_blank(item.group) else item.group
                existing = groups_by_name.get(key)
                if existing is not None:
                    self.merge_group(existing, item)
                    continue
                adopted = self._adopt_group(item)
                if adopted is not None:
                    groups_by_name[key] = adopted
                    output.append(adopted)

        target[:] = output

    def merge_group(self, target: GroupConfig, source: GroupConfig) -> None:
        """Reconcile two groups of the same identity."""
        _overwrite_scalars(target, source, _GROUP_SCALARS)
        if source.pages is not None:
            if target.pages is None:
                target.pages = []
            self.merge_pages(target.pages, source.pages)

    def merge_groups(self, target: list[GroupConfig], source: list[GroupConfig] | None) -> None:
        """Merge a list of groups by name.

        A groups list is a pages list without leaves, so the same rules apply.
        """
        self.merge_pages(target, source)  # type: ignore[arg-type]

    def merge_tabs(self, target: list[TabConfig], source: list[TabConfig] | None) -> None:
        """Merge tabs matched by name, then by ``href``."""
        self._merge_sections(target, source, "tab", self.merge_tab)

    def merge_anchors(self, target: list[AnchorConfig], source: list[AnchorConfig] | None) -> None:
        """Merge anchors matched by name, then by ``href``."""
        self._merge_sections(target, source, "anchor", self.merge_anchor)

    def merge_tab(self, target: TabConfig, source: TabConfig) -> None:
        """Reconcile two tabs of the same identity."""
        _overwrite_scalars(target, source, _TAB_SCALARS)
        self._merge_section_content(target, source)
        self._concatenate(target, source, "anchors")
        for field_name in _CONCATENATED:
            self._concatenate(target, source, field_name)

    def merge_anchor(self, target: AnchorConfig, source: AnchorConfig) -> None:
        """Reconcile two anchors of the same identity."""
        _overwrite_scalars(target, source, _ANCHOR_SCALARS)
        self._merge_section_content(target, source)
        if source.tabs is not None:
            if target.tabs is None:
                target.tabs = []
            self.merge_tabs(target.tabs, source.tabs)
        for field_name in _CONCATENATED:
            self._concatenate(target, source, field_name)

    def _merge_section_content(self, target: TabConfig | AnchorConfig, source: TabConfig | AnchorConfig) -> None:
        if source.pages is not None:
            if target.pages is None:
                target.pages = []
            self.merge_pages(target.pages, source.pages)
        if source.groups is not None:
            if target.groups is None:
                target.groups = []
            self.merge_groups(target.groups, source.groups)

    def _merge_leaf(
        self,
        path: str,
        output: list[NavigationPage],
        seen: set[str],
        groups_by_name: dict[str, GroupConfig],
    ) -> None:
        key = normalize_path(path)
        known = key in seen or (not self.options.ignore_known_paths and path in self.registry)
        if not self.options.allow_duplicate_paths and known:
            logger.debug("Skipping duplicate page %s", path)
            return

        root_group = None
        if self.options.add_root_pages_to_getting_started:
            root_group = groups_by_name.get(DOCSNAV_ROOT_GROUP_NAME)

        if root_group is not None:
            if root_group.pages is None:
                root_group.pages = []
            self.registry.append_leaf(root_group.pages, path)
        else:
            self.registry.append_leaf(output, path)
        seen.add(key)

    def _adopt_group(self, source: GroupConfig) -> GroupConfig | None:
        """Copy a new source group, keeping only pages not already present.

        Named groups are always kept. Returns None for an empty-named group
        whose pages were all duplicates.
        """
        adopted = source.model_copy(deep=True)
        if not source.pages:
            return adopted
        adopted.pages = []
        self.merge_pages(adopted.pages, source.pages)
        if not adopted.pages and is_blank(source.group):
            logger.debug("Skipping empty-named group: all of its pages are already present")
            return None
        return adopted

    def _merge_sections(
        self,
        target: list[_Section],
        source: list[_Section] | None,
        name_field: str,
        reconcile: Callable[[Any, Any], None],
    ) -> None:
        if target is None:
            raise ValueError("A target list is required for merging")

        output = list(target)
        by_name: dict[str, _Section] = {}
        by_href: dict[str, _Section] = {}
        for item in target:
            name = getattr(item, name_field)
            if not is_blank(name):
                by_name.setdefault(name, item)
            if not is_blank(item.href):
                by_href.setdefault(item.href, item)

        for item in source or []:
            name = getattr(item, name_field)
            match = None if is_blank(name) else by_name.get(name)
            if match is None and not is_blank(item.href):
                match = by_href.get(item.href)

            if match is None:
                match = self._adopt_section(item, reconcile)
                output.append(match)
            else:
                reconcile(match, item)

            # Index both keys so later items can find this entry by either one.
            if not is_blank(name):
                by_name.setdefault(name, match)
            if not is_blank(item.href):
                by_href.setdefault(item.href, match)

        target[:] = output

    def _adopt_section(self, source: _Section, reconcile: Callable[[Any, Any], None]) -> _Section:
        adopted = source.model_copy(deep=True)
        for field_name in ("pages",) + CONTAINER_FIELDS:
            if field_name in type(adopted).model_fields:
                setattr(adopted, field_name, None)
        reconcile(adopted, source)
        return adopted

    def _concatenate(self, target: Any, source: Any, field_name: str) -> None:
        items = getattr(source, field_name, None)
        if items is None:
            return
        if getattr(target, field_name, None) is None:
            setattr(target, field_name, [])
        destination = getattr(target, field_name)
        for item in items:
            item_copy = item.model_copy(deep=True)
            self.registry.register(item_copy)
            destination.append(item_copy)


def _overwrite_scalars(target: Any, source: Any, field_names: tuple[str, ...]) -> None:
    """Copy set, non-blank source fields onto ``target``."""
    for field_name in field_names:
        value = getattr(source, field_name)
        if value is None or (isinstance(value, str) and not value.strip()):
            continue
        setattr(target, field_name, copy.deepcopy(value))
