"""Test setup for docsnav."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, Callable

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from docsnav import DocsJsonManager  # noqa: E402


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for pytest."""
    config.addinivalue_line(
        "markers",
        "filesystem: marks tests that build content trees on disk",
    )


@pytest.fixture
def make_tree(tmp_path: Path) -> Callable[[dict[str, Any]], Path]:
    """Create a content tree from a nested dict and return its root.

    String values are file contents, dict values are subdirectories.
    """

    def _make(layout: dict[str, Any], root: Path | None = None) -> Path:
        base = root or tmp_path / "docs"
        base.mkdir(parents=True, exist_ok=True)
        for name, value in layout.items():
            if isinstance(value, dict):
                _make(value, base / name)
            else:
                (base / name).write_text(value, encoding="utf-8")
        return base

    return _make


@pytest.fixture
def docs_json(tmp_path: Path) -> Callable[[dict[str, Any]], Path]:
    """Write a docs.json file and return its path."""

    def _write(content: dict[str, Any], name: str = "docs.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(content), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def loaded_manager() -> DocsJsonManager:
    """A manager with a small configuration already loaded."""
    manager = DocsJsonManager()
    manager.load(
        json.dumps(
            {
                "name": "Test Docs",
                "theme": "mint",
                "colors": {"primary": "#0D9373"},
                "navigation": {
                    "pages": [
                        "index",
                        {"group": "Guides", "pages": ["guides/setup", "guides/usage"]},
                    ]
                },
            }
        )
    )
    return manager
