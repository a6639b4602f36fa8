"""Local configuration for docsnav."""

from __future__ import annotations

import os


DEFAULT_SCHEMA_URL = "https://mintlify.com/docs.json"
DEFAULT_THEME = "mint"
DEFAULT_PRIMARY_COLOR = "#0D9373"
DEFAULT_SITE_NAME = "API Documentation"
DEFAULT_ROOT_GROUP_NAME = "Getting Started"
DEFAULT_OVERRIDE_FILE_NAME = "navigation.json"
DEFAULT_FILE_EXTENSIONS = ".mdx"

LEGACY_FILE_EXTENSION = ".md"
INDEX_FILE_NAME = "index"
HIDDEN_DIRECTORY_PREFIX = "."
API_REFERENCE_DIRECTORY = "api-reference"
EXCLUDED_DIRECTORIES = ("node_modules", "conceptual", "overrides")


def _split_env_list(value: str) -> tuple[str, ...]:
    return tuple(item.strip() for item in value.split(",") if item.strip())


DOCSNAV_THEME = os.getenv("DOCSNAV_THEME", DEFAULT_THEME)
DOCSNAV_PRIMARY_COLOR = os.getenv("DOCSNAV_PRIMARY_COLOR", DEFAULT_PRIMARY_COLOR)
DOCSNAV_ROOT_GROUP_NAME = os.getenv("DOCSNAV_ROOT_GROUP_NAME", DEFAULT_ROOT_GROUP_NAME)
# Per-directory descriptor that takes over navigation for a whole subtree.
DOCSNAV_OVERRIDE_FILE_NAME = os.getenv("DOCSNAV_OVERRIDE_FILE_NAME", DEFAULT_OVERRIDE_FILE_NAME)
DOCSNAV_FILE_EXTENSIONS = _split_env_list(os.getenv("DOCSNAV_FILE_EXTENSIONS", DEFAULT_FILE_EXTENSIONS))
DOCSNAV_EXCLUDED_DIRECTORIES = EXCLUDED_DIRECTORIES + _split_env_list(
    os.getenv("DOCSNAV_EXCLUDED_DIRECTORIES", "")
)
