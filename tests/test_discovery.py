"""Tests for directory-based navigation discovery."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from docsnav.discovery import NavigationDiscovery, format_group_name
from docsnav.exceptions import ContentDirectoryNotFoundError
from docsnav.schemas import DiagnosticCode, GroupConfig

pytestmark = pytest.mark.filesystem


class TestFormatGroupName:
    """Tests for format_group_name function."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("getting-started", "Getting Started"),
            ("api_docs", "Api Docs"),
            ("GUIDES", "Guides"),
            ("advanced", "Advanced"),
        ],
    )
    def test_formats_directory_names(self, name: str, expected: str) -> None:
        """Dashes and underscores become spaces and words are capitalized."""
        assert format_group_name(name) == expected


class TestNavigationDiscovery:
    """Tests for NavigationDiscovery.build."""

    def test_missing_directory_raises(self, tmp_path: Path) -> None:
        """A missing root raises ContentDirectoryNotFoundError."""
        with pytest.raises(ContentDirectoryNotFoundError):
            NavigationDiscovery().build(tmp_path / "missing")

    def test_missing_directory_is_file_not_found(self, tmp_path: Path) -> None:
        """The error is also a FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            NavigationDiscovery().build(tmp_path / "missing")

    def test_sorting_puts_index_first(self, make_tree) -> None:
        """Index comes first, then the rest alphabetically."""
        root = make_tree({"zebra.mdx": "", "index.mdx": "", "apple.mdx": ""})

        pages = NavigationDiscovery(group_root_files=False).build(root)

        assert pages == ["index", "apple", "zebra"]

    def test_root_files_go_into_getting_started(self, make_tree) -> None:
        """Root-level files are grouped under Getting Started."""
        root = make_tree({"index.mdx": "", "quickstart.mdx": "", "guides": {"setup.mdx": ""}})

        pages = NavigationDiscovery().build(root)

        assert [item.group for item in pages] == ["Getting Started", "Guides"]
        assert pages[0].pages == ["index", "quickstart"]
        assert pages[1].pages == ["guides/setup"]

    def test_files_before_directories(self, make_tree) -> None:
        """Within a directory, files are listed before subdirectories."""
        root = make_tree({"guides": {"zeta.mdx": "", "advanced": {"deep.mdx": ""}, "index.mdx": ""}})

        pages = NavigationDiscovery().build(root)

        guides = pages[0]
        assert guides.pages[:2] == ["guides/index", "guides/zeta"]
        assert isinstance(guides.pages[2], GroupConfig)
        assert guides.pages[2].group == "Advanced"
        assert guides.pages[2].pages == ["guides/advanced/deep"]

    def test_root_group_name_collision(self, make_tree) -> None:
        """A directory named like the root group is disambiguated."""
        root = make_tree({"index.mdx": "", "getting-started": {"install.mdx": ""}})

        pages = NavigationDiscovery().build(root)

        assert [item.group for item in pages] == [
            "Getting Started",
            "Getting Started (getting-started)",
        ]

    def test_skips_hidden_excluded_and_empty_directories(self, make_tree) -> None:
        """Hidden, excluded and empty directories contribute nothing."""
        root = make_tree(
            {
                "index.mdx": "",
                ".git": {"config.mdx": ""},
                "node_modules": {"pkg.mdx": ""},
                "conceptual": {"idea.mdx": ""},
                "empty": {},
                "drafts": {"wip.mdx": ""},
            }
        )

        pages = NavigationDiscovery(exclude_directories=["DRAFTS"]).build(root)

        assert len(pages) == 1
        assert pages[0].pages == ["index"]

    def test_api_reference_is_opt_in(self, make_tree) -> None:
        """The api-reference directory is only scanned on request."""
        root = make_tree({"index.mdx": "", "api-reference": {"users.mdx": ""}})

        without = NavigationDiscovery().build(root)
        with_api = NavigationDiscovery(include_api_reference=True).build(root)

        assert [item.group for item in without] == ["Getting Started"]
        assert [item.group for item in with_api] == ["Getting Started", "Api Reference"]

    def test_custom_extensions(self, make_tree) -> None:
        """Only files with accepted extensions become pages."""
        root = make_tree({"a.mdx": "", "b.txt": "", "c.rst": ""})

        pages = NavigationDiscovery(file_extensions=["mdx", ".RST"], group_root_files=False).build(root)

        assert pages == ["a", "c"]

    def test_md_files_produce_warning(self, make_tree) -> None:
        """Legacy .md files are skipped with a warning."""
        root = make_tree({"index.mdx": "", "readme.md": ""})
        discovery = NavigationDiscovery(group_root_files=False)

        pages = discovery.build(root)

        assert pages == ["index"]
        assert [diagnostic.code for diagnostic in discovery.diagnostics] == [DiagnosticCode.MD_FILE_WARNING]
        assert discovery.diagnostics[0].is_warning


class TestNavigationOverride:
    """Tests for per-directory navigation.json overrides."""

    def test_override_replaces_directory_contents(self, make_tree) -> None:
        """Only the descriptor's pages appear for an overridden directory."""
        descriptor = json.dumps({"group": "Custom Guides", "pages": ["guides/one"]})
        root = make_tree(
            {
                "guides": {
                    "navigation.json": descriptor,
                    "one.mdx": "",
                    "two.mdx": "",
                    "nested": {"three.mdx": ""},
                }
            }
        )

        pages = NavigationDiscovery().build(root)

        assert len(pages) == 1
        assert pages[0].group == "Custom Guides"
        assert pages[0].pages == ["guides/one"]

    def test_override_at_root(self, make_tree) -> None:
        """A root descriptor is the whole result."""
        root = make_tree({"navigation.json": json.dumps({"group": "All", "pages": ["x"]}), "index.mdx": ""})

        pages = NavigationDiscovery().build(root)

        assert pages == [GroupConfig(group="All", pages=["x"])]

    def test_invalid_override_falls_back_to_scan(self, make_tree) -> None:
        """A malformed descriptor is reported and the directory is scanned."""
        root = make_tree({"guides": {"navigation.json": "{not json", "one.mdx": ""}})
        discovery = NavigationDiscovery()

        pages = discovery.build(root)

        assert pages[0].group == "Guides"
        assert pages[0].pages == ["guides/one"]
        assert discovery.diagnostics[0].code == DiagnosticCode.NAVIGATION_JSON

    def test_null_group_override_is_ignored(self, make_tree) -> None:
        """A descriptor with a null group name is reported and ignored."""
        root = make_tree({"guides": {"navigation.json": json.dumps({"group": None, "pages": ["x"]}), "one.mdx": ""}})
        discovery = NavigationDiscovery()

        pages = discovery.build(root)

        assert pages[0].pages == ["guides/one"]
        assert discovery.diagnostics[0].code == DiagnosticCode.NAVIGATION_JSON
