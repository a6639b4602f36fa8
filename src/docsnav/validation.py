"""Validation rules for docs.json configurations."""

from __future__ import annotations

import re
from typing import Final

from docsnav.schemas import DocsJsonConfig
from docsnav.tree import is_blank

VALID_THEMES: Final[tuple[str, ...]] = (
    "mint",
    "maple",
    "palm",
    "willow",
    "linden",
    "almond",
    "aspen",
)

_HEX_COLOR_RE = re.compile(r"^#([a-fA-F0-9]{6}|[a-fA-F0-9]{3})$")
_NAVIGATION_FIELDS = ("pages", "groups", "anchors", "tabs", "dropdowns", "languages", "versions")


class DocsJsonValidator:
    """Checks a configuration against the site schema rules.

    Every rule appends human readable messages; an empty list means the
    configuration is valid.
    """

    def validate(self, config: DocsJsonConfig) -> list[str]:
        errors: list[str] = []
        self.validate_required(config, errors)
        self.validate_theme(config, errors)
        self.validate_colors(config, errors)
        self.validate_logo(config, errors)
        self.validate_navigation(config, errors)
        return errors

    def validate_required(self, config: DocsJsonConfig, errors: list[str]) -> None:
        if is_blank(config.theme):
            errors.append("Theme is required.")
        if is_blank(config.name):
            errors.append("Name is required.")
        if config.colors is None:
            errors.append("Colors configuration is required.")
        if config.navigation is None:
            errors.append("Navigation configuration is required.")

    def validate_theme(self, config: DocsJsonConfig, errors: list[str]) -> None:
        if is_blank(config.theme):
            return
        if config.theme.lower() not in VALID_THEMES:
            errors.append(
                f"Invalid theme '{config.theme}'. Valid themes are: {', '.join(VALID_THEMES)}"
            )

    def validate_colors(self, config: DocsJsonConfig, errors: list[str]) -> None:
        colors = config.colors
        if colors is None:
            return
        if is_blank(colors.primary):
            errors.append("Primary color is required in colors configuration.")
        elif not _HEX_COLOR_RE.match(colors.primary):
            errors.append(
                f"Primary color '{colors.primary}' must be a valid hex color (e.g., #FF0000 or #F00)."
            )
        for label, value in (("Light", colors.light), ("Dark", colors.dark)):
            if not is_blank(value) and not _HEX_COLOR_RE.match(value):
                errors.append(
                    f"{label} color '{value}' must be a valid hex color (e.g., #FF0000 or #F00)."
                )

    def validate_logo(self, config: DocsJsonConfig, errors: list[str]) -> None:
        logo = config.logo
        if logo is None:
            return
        for label, value in (("light", logo.light), ("dark", logo.dark)):
            if not is_blank(value) and len(value) < 3:
                errors.append(f"Logo {label} path must be at least 3 characters long.")

    def validate_navigation(self, config: DocsJsonConfig, errors: list[str]) -> None:
        navigation = config.navigation
        if navigation is None:
            return
        if not any(getattr(navigation, field_name) for field_name in _NAVIGATION_FIELDS):
            errors.append(
                "Navigation must contain at least one of: pages, groups, anchors, tabs, "
                "dropdowns, languages, or versions."
            )
