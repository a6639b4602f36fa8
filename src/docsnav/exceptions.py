"""Custom exceptions for docsnav."""


class DocsNavError(Exception):
    """Base exception for docsnav operations."""


class ConfigurationNotLoadedError(DocsNavError, RuntimeError):
    """No docs.json configuration has been loaded yet."""


class ConfigurationParseError(DocsNavError):
    """The primary docs.json content could not be parsed."""


class ContentDirectoryNotFoundError(DocsNavError, FileNotFoundError):
    """The content directory to scan does not exist."""
