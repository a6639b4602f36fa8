"""docsnav: load, merge and generate docs.json navigation trees."""

from docsnav.discovery import NavigationDiscovery
from docsnav.exceptions import (
    ConfigurationNotLoadedError,
    ConfigurationParseError,
    ContentDirectoryNotFoundError,
    DocsNavError,
)
from docsnav.manager import DocsJsonManager
from docsnav.merge import MergeOptions, TreeMerger
from docsnav.prefix import UrlPrefixRewriter
from docsnav.registry import PathRegistry
from docsnav.schemas import Diagnostic, DiagnosticCode, DocsJsonConfig, GroupConfig, NavigationConfig
from docsnav.validation import DocsJsonValidator

__all__ = [
    "ConfigurationNotLoadedError",
    "ConfigurationParseError",
    "ContentDirectoryNotFoundError",
    "Diagnostic",
    "DiagnosticCode",
    "DocsJsonConfig",
    "DocsJsonManager",
    "DocsJsonValidator",
    "DocsNavError",
    "GroupConfig",
    "MergeOptions",
    "NavigationConfig",
    "NavigationDiscovery",
    "PathRegistry",
    "TreeMerger",
    "UrlPrefixRewriter",
]
