"""Shared schemas for docsnav."""

from docsnav.schemas.diagnostics import Diagnostic, DiagnosticCode
from docsnav.schemas.docs import ColorsConfig, DocsJsonConfig, LogoConfig
from docsnav.schemas.navigation import (
    AnchorConfig,
    DropdownConfig,
    GlobalNavigationConfig,
    GroupConfig,
    IconConfig,
    LanguageConfig,
    NavigationConfig,
    NavigationPage,
    TabConfig,
    VersionConfig,
)

__all__ = [
    "AnchorConfig",
    "ColorsConfig",
    "Diagnostic",
    "DiagnosticCode",
    "DocsJsonConfig",
    "DropdownConfig",
    "GlobalNavigationConfig",
    "GroupConfig",
    "IconConfig",
    "LanguageConfig",
    "LogoConfig",
    "NavigationConfig",
    "NavigationPage",
    "TabConfig",
    "VersionConfig",
]
