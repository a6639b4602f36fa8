"""Tests for docs.json schema models."""

from __future__ import annotations

import json

from docsnav.config import DEFAULT_SCHEMA_URL
from docsnav.schemas import DocsJsonConfig, GroupConfig


class TestDocsJsonConfig:
    """Tests for DocsJsonConfig parsing and serialization."""

    def test_schema_alias_round_trip(self) -> None:
        """The $schema key maps to schema_ and back."""
        config = DocsJsonConfig.model_validate({"$schema": "https://example.com/schema.json", "name": "X"})

        assert config.schema_ == "https://example.com/schema.json"
        dumped = config.model_dump(by_alias=True, exclude_none=True)
        assert dumped["$schema"] == "https://example.com/schema.json"

    def test_defaults(self) -> None:
        """Missing fields take the documented defaults."""
        config = DocsJsonConfig.model_validate({})

        assert config.schema_ == DEFAULT_SCHEMA_URL
        assert config.theme == "mint"
        assert config.navigation is not None
        assert config.colors is not None

    def test_unknown_keys_are_preserved(self) -> None:
        """Keys without a typed field survive a round trip."""
        raw = {"name": "X", "seo": {"indexing": "all"}, "navigation": {"pages": ["index"], "extra": 1}}
        config = DocsJsonConfig.model_validate(raw)

        dumped = json.loads(config.model_dump_json(by_alias=True, exclude_none=True))

        assert dumped["seo"] == {"indexing": "all"}
        assert dumped["navigation"]["extra"] == 1

    def test_global_alias(self) -> None:
        """The global key maps to global_."""
        config = DocsJsonConfig.model_validate(
            {"navigation": {"global": {"anchors": [{"anchor": "Blog", "href": "https://blog"}]}}}
        )

        assert config.navigation.global_ is not None
        dumped = config.model_dump(by_alias=True, exclude_none=True)
        assert "global" in dumped["navigation"]


class TestGroupConfig:
    """Tests for the group name states."""

    def test_null_group_name_is_kept_as_none(self) -> None:
        """An explicit null stays distinct from an empty name."""
        group = GroupConfig.model_validate({"group": None, "pages": ["a"]})
        assert group.group is None

    def test_missing_group_name_defaults_to_empty(self) -> None:
        """A missing group key is an empty (anonymous) group."""
        group = GroupConfig.model_validate({"pages": ["a"]})
        assert group.group == ""

    def test_pages_hold_leaves_and_groups(self) -> None:
        """Pages lists parse strings as leaves and objects as groups."""
        group = GroupConfig.model_validate({"group": "G", "pages": ["a", {"group": "Inner", "pages": ["b"]}]})

        assert group.pages[0] == "a"
        assert isinstance(group.pages[1], GroupConfig)
        assert group.pages[1].group == "Inner"
