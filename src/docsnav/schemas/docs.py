"""Top-level docs.json model."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from docsnav.config import DEFAULT_SCHEMA_URL, DEFAULT_THEME
from docsnav.schemas.navigation import NavigationConfig


class ColorsConfig(BaseModel):
    """Brand colors as hex strings."""

    model_config = ConfigDict(extra="allow")

    primary: str = ""
    light: str | None = None
    dark: str | None = None


class LogoConfig(BaseModel):
    """Logo image paths for light and dark mode."""

    model_config = ConfigDict(extra="allow")

    light: str | None = None
    dark: str | None = None
    href: str | None = None


class DocsJsonConfig(BaseModel):
    """A docs.json configuration.

    Only the fields this package reads or merges are typed; every other key
    is carried through untouched.

    Attributes:
        schema_: JSON schema URL, serialized as ``$schema``.
        name: Site name.
        theme: Site theme.
        description: Optional site description.
        colors: Brand colors.
        logo: Optional logo configuration.
        footer: Optional footer configuration, kept as raw JSON.
        navigation: The navigation tree.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    schema_: str | None = Field(default=DEFAULT_SCHEMA_URL, alias="$schema")
    name: str = ""
    theme: str = DEFAULT_THEME
    description: str | None = None
    colors: ColorsConfig | None = Field(default_factory=ColorsConfig)
    logo: LogoConfig | None = None
    footer: dict[str, Any] | None = None
    navigation: NavigationConfig | None = Field(default_factory=NavigationConfig)
