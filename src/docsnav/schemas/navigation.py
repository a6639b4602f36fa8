"""Navigation tree models.

A ``pages`` list holds leaves and groups interchangeably: a ``str`` is a
page reference (a leaf) and a :class:`GroupConfig` is a nested group.
"""

from __future__ import annotations

from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field

ApiSpec = Union[str, list[str], dict[str, Any]]


class NavigationModel(BaseModel):
    """Base for navigation models; unknown keys are kept for round-trips."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class IconConfig(NavigationModel):
    """Icon given as an object instead of a bare icon name."""

    name: str
    style: str | None = None
    library: str | None = None


class GroupConfig(NavigationModel):
    """A named (or intentionally unnamed) container of pages.

    ``group`` is ``None`` only when the source JSON carried an explicit
    ``null``; that state is invalid and is purged on load. An empty string
    is a valid anonymous section.
    """

    group: str | None = ""
    pages: list[str | GroupConfig] | None = None
    root: str | None = None
    tag: str | None = None
    icon: str | IconConfig | None = None
    hidden: bool | None = None
    expanded: bool | None = None
    openapi: ApiSpec | None = None
    asyncapi: ApiSpec | None = None


NavigationPage = Union[str, GroupConfig]


class GlobalNavigationConfig(NavigationModel):
    """Site-wide navigation entries shown on every page."""

    anchors: list[dict[str, Any]] | None = None
    dropdowns: list[dict[str, Any]] | None = None
    languages: list[dict[str, Any]] | None = None
    tabs: list[dict[str, Any]] | None = None
    versions: list[dict[str, Any]] | None = None


class TabConfig(NavigationModel):
    """A top-level tab, identified by its name or by its ``href``."""

    tab: str = ""
    href: str | None = None
    icon: str | IconConfig | None = None
    hidden: bool | None = None
    openapi: ApiSpec | None = None
    asyncapi: ApiSpec | None = None
    global_: GlobalNavigationConfig | None = Field(default=None, alias="global")
    pages: list[NavigationPage] | None = None
    groups: list[GroupConfig] | None = None
    anchors: list[AnchorConfig] | None = None
    dropdowns: list[DropdownConfig] | None = None
    languages: list[LanguageConfig] | None = None
    versions: list[VersionConfig] | None = None


class AnchorConfig(NavigationModel):
    """A sidebar anchor, identified by its name or by its ``href``."""

    anchor: str = ""
    href: str | None = None
    icon: str | IconConfig | None = None
    color: dict[str, str] | None = None
    hidden: bool | None = None
    openapi: ApiSpec | None = None
    asyncapi: ApiSpec | None = None
    global_: GlobalNavigationConfig | None = Field(default=None, alias="global")
    pages: list[NavigationPage] | None = None
    groups: list[GroupConfig] | None = None
    tabs: list[TabConfig] | None = None
    dropdowns: list[DropdownConfig] | None = None
    languages: list[LanguageConfig] | None = None
    versions: list[VersionConfig] | None = None


class DropdownConfig(NavigationModel):
    dropdown: str = ""
    href: str | None = None
    icon: str | IconConfig | None = None
    hidden: bool | None = None
    pages: list[NavigationPage] | None = None
    groups: list[GroupConfig] | None = None
    tabs: list[TabConfig] | None = None
    anchors: list[AnchorConfig] | None = None


class LanguageConfig(NavigationModel):
    language: str = ""
    default: bool | None = None
    href: str | None = None
    hidden: bool | None = None
    pages: list[NavigationPage] | None = None
    groups: list[GroupConfig] | None = None
    tabs: list[TabConfig] | None = None
    anchors: list[AnchorConfig] | None = None


class VersionConfig(NavigationModel):
    version: str = ""
    default: bool | None = None
    href: str | None = None
    hidden: bool | None = None
    pages: list[NavigationPage] | None = None
    groups: list[GroupConfig] | None = None
    tabs: list[TabConfig] | None = None
    anchors: list[AnchorConfig] | None = None


class NavigationConfig(NavigationModel):
    """The navigation tree of a docs.json file."""

    pages: list[NavigationPage] | None = None
    groups: list[GroupConfig] | None = None
    tabs: list[TabConfig] | None = None
    anchors: list[AnchorConfig] | None = None
    dropdowns: list[DropdownConfig] | None = None
    languages: list[LanguageConfig] | None = None
    versions: list[VersionConfig] | None = None
    global_: GlobalNavigationConfig | None = Field(default=None, alias="global")


for _model in (
    GroupConfig,
    TabConfig,
    AnchorConfig,
    DropdownConfig,
    LanguageConfig,
    VersionConfig,
    NavigationConfig,
):
    _model.model_rebuild()
