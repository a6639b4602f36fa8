"""Build navigation from a directory of content files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from pydantic import ValidationError

from docsnav.config import (
    API_REFERENCE_DIRECTORY,
    DOCSNAV_EXCLUDED_DIRECTORIES,
    DOCSNAV_FILE_EXTENSIONS,
    DOCSNAV_OVERRIDE_FILE_NAME,
    DOCSNAV_ROOT_GROUP_NAME,
    HIDDEN_DIRECTORY_PREFIX,
    INDEX_FILE_NAME,
    LEGACY_FILE_EXTENSION,
)
from docsnav.exceptions import ContentDirectoryNotFoundError
from docsnav.schemas import Diagnostic, DiagnosticCode, GroupConfig, NavigationPage

logger = logging.getLogger(__name__)


def format_group_name(directory_name: str) -> str:
    """Turn a directory name into a group label (``getting-started`` -> ``Getting Started``)."""
    formatted = directory_name.replace("-", " ").replace("_", " ").lower()
    return " ".join(word.capitalize() for word in formatted.split(" "))


def _normalize_extension(extension: str) -> str:
    extension = extension.strip().lower()
    return extension if extension.startswith(".") else f".{extension}"


def _sort_key(entry: Path) -> tuple[int, int, str]:
    # Index first, then files before directories, then case-insensitive name.
    name = entry.name if entry.is_dir() else entry.stem
    is_index = name.lower() == INDEX_FILE_NAME
    return (0 if is_index else 1, 1 if entry.is_dir() else 0, name.casefold())


class NavigationDiscovery:
    """Walks a content directory and emits an equivalent navigation subtree.

    Processing order for each directory:

    1. If the directory holds an override descriptor (``navigation.json``),
       that group is the whole contribution of the directory and everything
       below it. An unreadable descriptor is reported and ignored.
    2. Content files and qualifying subdirectories are collected. Hidden,
       excluded and (unless requested) ``api-reference`` directories are
       skipped; legacy ``.md`` files are reported and skipped.
    3. Entries are sorted: index first, files before directories, then
       alphabetically (case-insensitive).
    4. Subdirectories become groups named after the directory.
    5. Files become page paths relative to the scan root, without extension.

    Args:
        file_extensions: Accepted content file extensions. Defaults to
            ``.mdx`` only.
        include_api_reference: If True, scan the ``api-reference`` directory.
        group_root_files: If True, files of the scan root go into a leading
            ``Getting Started`` group.
        exclude_directories: Extra directory names to skip (case-insensitive).
        override_file_name: Name of the per-directory override descriptor.
    """

    def __init__(
        self,
        *,
        file_extensions: Iterable[str] | None = None,
        include_api_reference: bool = False,
        group_root_files: bool = True,
        exclude_directories: Iterable[str] | None = None,
        override_file_name: str = DOCSNAV_OVERRIDE_FILE_NAME,
    ) -> None:
        self.file_extensions = tuple(
            _normalize_extension(ext) for ext in (file_extensions or DOCSNAV_FILE_EXTENSIONS)
        )
        self.include_api_reference = include_api_reference
        self.group_root_files = group_root_files
        self.excluded_directories = {
            name.casefold() for name in (*DOCSNAV_EXCLUDED_DIRECTORIES, *(exclude_directories or ()))
        }
        self.override_file_name = override_file_name
        self.diagnostics: list[Diagnostic] = []

    def build(self, root: Path | str) -> list[NavigationPage]:
        """Scan ``root`` and return the discovered navigation pages.

        Raises:
            ContentDirectoryNotFoundError: If ``root`` is not a directory.
        """
        root_path = Path(root)
        if not root_path.is_dir():
            raise ContentDirectoryNotFoundError(f"The specified path does not exist: {root_path}")

        result = self._scan_directory(root_path, root_path, group_root_files=self.group_root_files)
        if isinstance(result, GroupConfig):
            return [result]
        return result

    def _scan_directory(
        self,
        current: Path,
        root: Path,
        *,
        group_root_files: bool,
    ) -> GroupConfig | list[NavigationPage]:
        override = self._load_override(current)
        if override is not None:
            return override

        pages: list[NavigationPage] = []
        root_group: GroupConfig | None = None

        for entry in self._collect_entries(current):
            if entry.is_dir():
                child = self._scan_directory(entry, root, group_root_files=False)
                if isinstance(child, GroupConfig):
                    pages.append(child)
                    continue
                if not child:
                    continue
                group_name = format_group_name(entry.name)
                if group_root_files and group_name == DOCSNAV_ROOT_GROUP_NAME:
                    group_name = f"{group_name} ({entry.name})"
                pages.append(GroupConfig(group=group_name, pages=child))
                continue

            url = entry.relative_to(root).with_suffix("").as_posix()
            if not group_root_files:
                pages.append(url)
                continue
            if root_group is None:
                root_group = GroupConfig(group=DOCSNAV_ROOT_GROUP_NAME, pages=[])
                pages.insert(0, root_group)
            root_group.pages.append(url)

        return pages

    def _collect_entries(self, directory: Path) -> list[Path]:
        entries: list[Path] = []
        for entry in sorted(directory.iterdir()):
            if entry.is_dir():
                if self._is_included_directory(entry.name):
                    entries.append(entry)
                continue
            if not entry.is_file():
                continue
            suffix = entry.suffix.lower()
            if suffix in self.file_extensions:
                entries.append(entry)
            elif suffix == LEGACY_FILE_EXTENSION:
                self._warn(
                    entry,
                    DiagnosticCode.MD_FILE_WARNING,
                    f"Found {LEGACY_FILE_EXTENSION} file '{entry.name}' - only "
                    f"{', '.join(self.file_extensions)} files are supported in navigation",
                )
        entries.sort(key=_sort_key)
        return entries

    def _is_included_directory(self, name: str) -> bool:
        if name.startswith(HIDDEN_DIRECTORY_PREFIX):
            return False
        if name.casefold() in self.excluded_directories:
            return False
        if not self.include_api_reference and name.casefold() == API_REFERENCE_DIRECTORY:
            return False
        return True

    def _load_override(self, directory: Path) -> GroupConfig | None:
        path = directory / self.override_file_name
        if not path.is_file():
            return None

        try:
            group = GroupConfig.model_validate_json(path.read_text(encoding="utf-8"))
        except ValidationError as exc:
            self._warn(path, DiagnosticCode.NAVIGATION_JSON, f"Invalid {path.name} file: {exc}")
            return None
        except (OSError, UnicodeDecodeError) as exc:
            self._warn(path, DiagnosticCode.NAVIGATION_JSON, f"Error reading {path.name} file: {exc}")
            return None

        if group.group is None:
            self._warn(path, DiagnosticCode.NAVIGATION_JSON, f"{path.name} has a null group name")
            return None

        logger.debug("Using navigation override %s", path)
        return group

    def _warn(self, path: Path, code: DiagnosticCode, message: str) -> None:
        logger.warning("%s: %s", path, message)
        self.diagnostics.append(
            Diagnostic(location=str(path), code=code, message=message, is_warning=True)
        )
