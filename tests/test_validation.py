"""Tests for docs.json validation rules."""

from __future__ import annotations

from docsnav.schemas import ColorsConfig, DocsJsonConfig, LogoConfig, NavigationConfig
from docsnav.validation import DocsJsonValidator


def _valid_config(**overrides) -> DocsJsonConfig:
    values = {
        "name": "Docs",
        "theme": "mint",
        "colors": ColorsConfig(primary="#0D9373"),
        "navigation": NavigationConfig(pages=["index"]),
    }
    values.update(overrides)
    return DocsJsonConfig(**values)


class TestDocsJsonValidator:
    """Tests for DocsJsonValidator.validate."""

    def test_valid_configuration(self) -> None:
        """A complete configuration has no errors."""
        assert DocsJsonValidator().validate(_valid_config()) == []

    def test_missing_required_fields(self) -> None:
        """Blank name and missing colors/navigation are reported."""
        errors = DocsJsonValidator().validate(_valid_config(name="", colors=None, navigation=None))

        assert "Name is required." in errors
        assert "Colors configuration is required." in errors
        assert "Navigation configuration is required." in errors

    def test_invalid_theme(self) -> None:
        """Unknown themes are reported; theme names are case-insensitive."""
        validator = DocsJsonValidator()

        assert any("Invalid theme 'neon'" in error for error in validator.validate(_valid_config(theme="neon")))
        assert validator.validate(_valid_config(theme="Maple")) == []

    def test_invalid_colors(self) -> None:
        """Colors must be 3 or 6 digit hex values."""
        colors = ColorsConfig(primary="green", light="#FFF", dark="#12345")

        errors = DocsJsonValidator().validate(_valid_config(colors=colors))

        assert len(errors) == 2
        assert errors[0].startswith("Primary color 'green'")
        assert errors[1].startswith("Dark color '#12345'")

    def test_blank_primary_color(self) -> None:
        """A colors block needs a primary color."""
        errors = DocsJsonValidator().validate(_valid_config(colors=ColorsConfig()))
        assert errors == ["Primary color is required in colors configuration."]

    def test_short_logo_paths(self) -> None:
        """Logo paths shorter than three characters are reported."""
        errors = DocsJsonValidator().validate(_valid_config(logo=LogoConfig(light="a", dark="/logo/dark.svg")))
        assert errors == ["Logo light path must be at least 3 characters long."]

    def test_empty_navigation(self) -> None:
        """Navigation must contain at least one collection."""
        errors = DocsJsonValidator().validate(_valid_config(navigation=NavigationConfig()))
        assert len(errors) == 1
        assert errors[0].startswith("Navigation must contain at least one of")
