"""Load, merge and reshape docs.json navigation."""

from __future__ import annotations

import copy
import logging
from pathlib import Path
from typing import Any, Iterable

from pydantic import ValidationError

from docsnav.config import (
    DEFAULT_SCHEMA_URL,
    DEFAULT_SITE_NAME,
    DEFAULT_THEME,
    DOCSNAV_PRIMARY_COLOR,
    DOCSNAV_ROOT_GROUP_NAME,
    DOCSNAV_THEME,
)
from docsnav.discovery import NavigationDiscovery
from docsnav.exceptions import ConfigurationNotLoadedError, ConfigurationParseError
from docsnav.merge import MergeOptions, TreeMerger
from docsnav.prefix import UrlPrefixRewriter
from docsnav.registry import PathRegistry, normalize_path
from docsnav.schemas import (
    ColorsConfig,
    Diagnostic,
    DiagnosticCode,
    DocsJsonConfig,
    GroupConfig,
    NavigationConfig,
    NavigationPage,
)
from docsnav.tree import find_group, is_blank, iter_page_lists
from docsnav.validation import DocsJsonValidator

logger = logging.getLogger(__name__)

# Placeholder primary color that apply_defaults replaces.
_PLACEHOLDER_PRIMARY_COLOR = "#000000"
_SECTION_FIELDS = ("tabs", "anchors", "dropdowns", "languages", "versions")


class DocsJsonManager:
    """Loads and manages a docs.json configuration and its navigation tree.

    The manager keeps a registry of every page path in the navigation. It is
    rebuilt from scratch on load and updated incrementally by every other
    operation, so ``is_path_known`` always reflects the current tree.

    Args:
        file_path: Optional path of the docs.json file used by ``load()``
            and ``save()``.
        validator: Validator used on load. A default one is created if None.

    Raises:
        ValueError: If ``file_path`` does not exist or is not a JSON file.
    """

    def __init__(
        self,
        file_path: str | Path | None = None,
        validator: DocsJsonValidator | None = None,
    ) -> None:
        self._validator = validator or DocsJsonValidator()
        self._registry = PathRegistry()
        self.configuration: DocsJsonConfig | None = None
        self.diagnostics: list[Diagnostic] = []
        self.file_path: Path | None = None

        if file_path is not None:
            if is_blank(str(file_path)):
                raise ValueError("file_path cannot be blank")
            path = Path(file_path).expanduser().resolve()
            if not path.is_file():
                raise ValueError(f"The file path specified does not exist: {path}")
            if path.suffix.lower() != ".json":
                raise ValueError(f"The file path specified does not point to a JSON file: {path}")
            self.file_path = path

    @property
    def is_loaded(self) -> bool:
        return self.configuration is not None

    @property
    def known_paths(self) -> PathRegistry:
        return self._registry

    def load(self, source: str | Path | DocsJsonConfig | None = None) -> None:
        """Load a configuration, replacing the current one.

        Args:
            source: ``None`` reads the file given to the constructor, a
                ``Path`` reads that file, a ``str`` is parsed as JSON content,
                and a ``DocsJsonConfig`` is copied.

        Raises:
            ValueError: If there is nothing to load from.
            ConfigurationParseError: If the JSON content is malformed.
        """
        if isinstance(source, DocsJsonConfig):
            self._load_config(source.model_copy(deep=True), location="object")
            return

        if source is None:
            if self.file_path is None:
                raise ValueError(
                    "No file path has been specified. Pass a path to the constructor or a source to load()."
                )
            source = self.file_path

        if isinstance(source, Path):
            content = source.read_text(encoding="utf-8")
            location = str(source)
        else:
            if is_blank(source):
                raise ValueError("Configuration content cannot be blank")
            content = source
            location = "string"

        try:
            config = DocsJsonConfig.model_validate_json(content)
        except ValidationError as exc:
            self.configuration = None
            self.diagnostics = []
            self._registry.clear()
            raise ConfigurationParseError(f"JSON parsing error in {location}: {exc}") from exc

        self._load_config(config, location=location)

    def save(self, file_path: str | Path | None = None) -> None:
        """Write the configuration as indented JSON.

        Raises:
            ConfigurationNotLoadedError: If no configuration is loaded.
            ValueError: If no path is given and none was set on construction.
        """
        self._require_configuration("saving")
        target = Path(file_path) if file_path is not None else self.file_path
        if target is None:
            raise ValueError("No file path is specified. Pass one to save().")
        target.write_text(self.to_json(), encoding="utf-8")
        logger.debug("Saved configuration to %s", target)

    def to_json(self) -> str:
        config = self._require_configuration("serializing")
        return config.model_dump_json(by_alias=True, exclude_none=True, indent=2)

    @staticmethod
    def create_default(name: str, theme: str = DOCSNAV_THEME) -> DocsJsonConfig:
        """Create a minimal configuration with a starter navigation.

        Raises:
            ValueError: If ``name`` is blank.
        """
        if is_blank(name):
            raise ValueError("name cannot be blank")
        return DocsJsonConfig(
            name=name,
            theme=theme,
            colors=ColorsConfig(primary=DOCSNAV_PRIMARY_COLOR),
            navigation=NavigationConfig(
                pages=[
                    GroupConfig(group=DOCSNAV_ROOT_GROUP_NAME, pages=["index", "quickstart"]),
                    GroupConfig(group="API Reference", pages=["api-reference/index"]),
                ]
            ),
        )

    def apply_defaults(self, name: str | None = None, theme: str = DOCSNAV_THEME) -> None:
        """Fill in missing name, theme, schema, colors and navigation pages."""
        config = self._require_configuration("applying defaults")

        if is_blank(config.name):
            config.name = name or DEFAULT_SITE_NAME
        if is_blank(config.theme) or config.theme == DEFAULT_THEME:
            config.theme = theme
        if config.schema_ is None:
            config.schema_ = DEFAULT_SCHEMA_URL

        defaults = self.create_default(config.name, config.theme)
        if config.navigation is None:
            config.navigation = defaults.navigation
            self._registry.register(config.navigation)
        elif not config.navigation.pages:
            config.navigation.pages = defaults.navigation.pages
            self._registry.register(config.navigation.pages)

        colors = config.colors
        if colors is None or is_blank(colors.primary) or colors.primary == _PLACEHOLDER_PRIMARY_COLOR:
            config.colors = defaults.colors

    def merge(
        self,
        other: DocsJsonConfig,
        combine_base_properties: bool = True,
        options: MergeOptions | None = None,
    ) -> None:
        """Merge another configuration into the loaded one.

        Non-blank base properties of ``other`` win when
        ``combine_base_properties`` is True; navigation is always merged.

        Raises:
            ValueError: If ``other`` is None.
            ConfigurationNotLoadedError: If no configuration is loaded.
        """
        if other is None:
            raise ValueError("other configuration is required")
        config = self._require_configuration("merging")

        if combine_base_properties:
            for field_name in ("name", "description", "theme"):
                value = getattr(other, field_name)
                if not is_blank(value):
                    setattr(config, field_name, value)
            for field_name in ("colors", "logo", "footer"):
                value = getattr(other, field_name)
                if value is not None:
                    setattr(config, field_name, copy.deepcopy(value))

        if other.navigation is not None:
            if config.navigation is None:
                config.navigation = NavigationConfig()
            self._merger(options).merge_navigation(config.navigation, other.navigation)

    def merge_navigation(
        self,
        source: NavigationConfig | str | Path | None,
        options: MergeOptions | None = None,
    ) -> None:
        """Merge a navigation tree, or the navigation of another docs.json file.

        Args:
            source: A navigation tree, or the path of a docs.json file.
            options: Merge options. Uses defaults if None.

        Raises:
            ConfigurationNotLoadedError: If no configuration is loaded.
            FileNotFoundError: If ``source`` is a path that does not exist.
            ConfigurationParseError: If the docs.json file is malformed.
        """
        if source is None:
            return
        config = self._require_configuration("merging navigation")

        if not isinstance(source, NavigationConfig):
            source = self._read_navigation(source)
            if source is None:
                return

        if config.navigation is None:
            config.navigation = NavigationConfig()
        self._merger(options).merge_navigation(config.navigation, source)

    def populate_navigation_from_path(
        self,
        path: str | Path,
        file_extensions: Iterable[str] | None = None,
        include_api_reference: bool = False,
        preserve_existing: bool = True,
        allow_duplicate_paths: bool = False,
        exclude_directories: Iterable[str] | None = None,
    ) -> None:
        """Discover navigation from a content directory.

        The discovered tree goes through the same merge as ``merge_navigation``.
        With ``preserve_existing`` the current pages are kept and discovered
        content is merged in; otherwise the current pages are replaced.
        Diagnostics from the scan are appended to ``diagnostics``.

        Raises:
            ValueError: If ``path`` is blank.
            ConfigurationNotLoadedError: If no configuration is loaded.
            ContentDirectoryNotFoundError: If ``path`` does not exist.
        """
        if is_blank(str(path)):
            raise ValueError("path cannot be blank")
        config = self._require_configuration("populating navigation")

        discovery = NavigationDiscovery(
            file_extensions=file_extensions,
            include_api_reference=include_api_reference,
            group_root_files=True,
            exclude_directories=exclude_directories,
        )
        discovered = discovery.build(path)
        self.diagnostics.extend(discovery.diagnostics)

        if config.navigation is None:
            config.navigation = NavigationConfig()
        navigation = config.navigation
        if navigation.pages is None:
            navigation.pages = []
        if not preserve_existing:
            self._registry.unregister(navigation.pages)
            navigation.pages.clear()

        merger = TreeMerger(self._registry, MergeOptions(ignore_known_paths=allow_duplicate_paths))
        merger.merge_pages(navigation.pages, discovered)
        logger.info(
            "Populated navigation from %s (%d known pages, %d diagnostics)",
            path,
            len(self._registry),
            len(discovery.diagnostics),
        )

    def add_page(self, group_path: str | None, page_path: str, allow_duplicate_paths: bool = False) -> bool:
        """Add a page under a slash-separated group path, creating groups as needed.

        Args:
            group_path: Group path such as ``"Guides/Advanced"``; blank adds
                the page at the top level.
            page_path: The page path to add.
            allow_duplicate_paths: If True, add the page even if it is known.

        Returns:
            True if the page was added, False if it was already present.
        """
        config = self._require_configuration("adding pages")
        if is_blank(page_path):
            raise ValueError("page_path cannot be blank")

        if config.navigation is None:
            config.navigation = NavigationConfig()
        if config.navigation.pages is None:
            config.navigation.pages = []

        target = config.navigation.pages
        if not is_blank(group_path):
            for group_name in group_path.split("/"):
                group = self.find_or_create_group(target, group_name)
                if group.pages is None:
                    group.pages = []
                target = group.pages

        return self._add_leaf(target, page_path, allow_duplicate_paths)

    def add_page_to_group(self, group: GroupConfig, page_path: str, allow_duplicate_paths: bool = False) -> bool:
        """Add a page to ``group`` unless it is already known."""
        if is_blank(page_path):
            raise ValueError("page_path cannot be blank")
        if group.pages is None:
            group.pages = []
        return self._add_leaf(group.pages, page_path, allow_duplicate_paths)

    def find_or_create_group(self, pages: list[NavigationPage], group_name: str) -> GroupConfig:
        if is_blank(group_name):
            raise ValueError("group_name cannot be blank")
        group = find_group(pages, group_name)
        if group is None:
            group = GroupConfig(group=group_name, pages=[])
            pages.append(group)
        return group

    def add_navigation_item(self, pages: list[NavigationPage], item: NavigationPage) -> bool:
        """Add a page or a group to ``pages``.

        A group whose name already exists in ``pages`` is merged into it.

        Returns:
            True if a new item was added; False if it was a duplicate page or
            was merged into an existing group.
        """
        if isinstance(item, str):
            return self._add_leaf(pages, item, allow_duplicate_paths=False)
        if item.group is None:
            raise ValueError("Group name cannot be null")

        existing = find_group(pages, item.group)
        if existing is not None:
            self._merger(None).merge_group(existing, item)
            return False

        group = item.model_copy(deep=True)
        pages.append(group)
        self._registry.register(group)
        return True

    def remove_page(self, page_path: str) -> bool:
        """Remove every occurrence of a page (case-insensitive) from the navigation.

        Returns:
            True if at least one occurrence was removed.
        """
        config = self._require_configuration("removing pages")
        if config.navigation is None:
            return False

        key = normalize_path(page_path)
        removed = False
        for pages in iter_page_lists(config.navigation):
            for index in reversed(range(len(pages))):
                item = pages[index]
                if isinstance(item, str) and normalize_path(item) == key:
                    self._registry.remove_leaf(pages, index)
                    removed = True
        return removed

    def apply_url_prefix(self, prefix: str) -> None:
        """Prefix every page path, group root and tab/anchor link.

        Raises:
            ValueError: If ``prefix`` is blank.
            ConfigurationNotLoadedError: If no configuration is loaded.
        """
        rewriter = UrlPrefixRewriter(self._registry, prefix)
        config = self._require_configuration("applying a URL prefix")
        if config.navigation is None:
            return
        rewriter.apply(config.navigation)

    def is_path_known(self, page_path: str) -> bool:
        return page_path in self._registry

    def _require_configuration(self, action: str) -> DocsJsonConfig:
        if self.configuration is None:
            raise ConfigurationNotLoadedError(
                f"No configuration is loaded. Load a configuration before {action}."
            )
        return self.configuration

    def _merger(self, options: MergeOptions | None) -> TreeMerger:
        return TreeMerger(self._registry, options)

    def _add_leaf(self, pages: list[NavigationPage], page_path: str, allow_duplicate_paths: bool) -> bool:
        if not allow_duplicate_paths and page_path in self._registry:
            return False
        self._registry.append_leaf(pages, page_path)
        return True

    def _read_navigation(self, file_path: str | Path) -> NavigationConfig | None:
        if is_blank(str(file_path)):
            raise ValueError("file_path cannot be blank")
        path = Path(file_path)
        if not path.is_file():
            raise FileNotFoundError(f"The specified docs.json file does not exist: {path}")
        try:
            other = DocsJsonConfig.model_validate_json(path.read_text(encoding="utf-8"))
        except ValidationError as exc:
            raise ConfigurationParseError(f"JSON parsing error in {path}: {exc}") from exc
        return other.navigation

    def _load_config(self, config: DocsJsonConfig, *, location: str) -> None:
        self.diagnostics = []
        self.configuration = config

        if config.navigation is not None:
            self._clean_groups(config.navigation, location)

        for message in self._validator.validate(config):
            self._record(location, DiagnosticCode.VALIDATION, message, is_warning=True)

        # Duplicates already in a loaded file are kept; they are only
        # prevented for later additions.
        self._registry.clear()
        self._registry.register(config.navigation)
        logger.debug("Loaded configuration from %s with %d known pages", location, len(self._registry))

    def _clean_groups(self, node: Any, location: str, parent: str | None = None) -> None:
        """Drop null-named groups and flag empty-named ones, recursively."""
        for field_name in ("pages", "groups"):
            items = getattr(node, field_name, None)
            if not items:
                continue
            kept: list[Any] = []
            for item in items:
                if isinstance(item, GroupConfig):
                    if item.group is None:
                        where = f" in group '{parent}'" if parent else ""
                        self._record(
                            location,
                            DiagnosticCode.NULL_GROUP,
                            f"Removed a group with a null name{where}; null group names are rejected by the site.",
                            is_warning=False,
                        )
                        continue
                    if is_blank(item.group):
                        where = f" in group '{parent}'" if parent else ""
                        self._record(
                            location,
                            DiagnosticCode.EMPTY_GROUP,
                            f"Empty group name found{where}. Empty groups are kept as separate ungrouped sections.",
                            is_warning=True,
                        )
                    self._clean_groups(item, location, parent=item.group)
                kept.append(item)
            items[:] = kept

        for field_name in _SECTION_FIELDS:
            for section in getattr(node, field_name, None) or []:
                self._clean_groups(section, location, parent=parent)

    def _record(self, location: str, code: DiagnosticCode, message: str, *, is_warning: bool) -> None:
        if is_warning:
            logger.warning("%s: %s", location, message)
        else:
            logger.error("%s: %s", location, message)
        self.diagnostics.append(
            Diagnostic(location=location, code=code, message=message, is_warning=is_warning)
        )
