"""
Global Configuration and Scan Defaults.

This module centralizes the defaults used by the map pipeline: which
directories are offered to the user, which files are scanned, which
directories are never descended into and where the map is written.

A project can override them with an optional `.clip/config.yaml`.
"""

import logging
from pathlib import Path
from typing import List, Set

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

logger = logging.getLogger(__name__)

# --- Directory Selection ---

# Conventional React project directories, offered in this order when present
CANDIDATE_DIRECTORIES: List[str] = ["src", "public", "app", "lib", "components", "pages"]

# Suggested answer for the free-text directory prompt
DEFAULT_CUSTOM_DIRECTORY = "src"

# --- File Discovery ---

# Equivalent to the glob `<dir>/**/*.{js,jsx,ts,tsx}` (matched case-insensitively)
SOURCE_EXTENSIONS: Set[str] = {".js", ".jsx", ".ts", ".tsx"}

# Build and dependency directories pruned from the walk
IGNORE_DIRECTORIES: Set[str] = {
    "node_modules",
    "dist",
    "build",
    ".git",
}

# --- Module Resolution ---

# Extensions probed, in order, for extensionless relative specifiers
RESOLVE_EXTENSIONS: List[str] = [".js", ".jsx", ".ts", ".tsx", ".mjs", ".cjs"]

# TypeScript ESM projects import `./foo.js` while the file on disk is `foo.ts`
TS_EXTENSION_ALIASES = {
    ".js": [".ts", ".tsx"],
    ".jsx": [".tsx"],
    ".mjs": [".mts"],
    ".cjs": [".cts"],
}

# --- Output ---

OUTPUT_FILENAME = "clipMap.html"

CONFIG_DIR = ".clip"
CONFIG_FILENAME = "config.yaml"


class ConfigError(Exception):
    """Raised when `.clip/config.yaml` cannot be read or is invalid."""


class ClipConfig(BaseModel):
    """
    Effective configuration for a map run.

    Every field defaults to the module-level constant of the same concern,
    so an absent or empty config file changes nothing.
    """

    candidate_directories: List[str] = Field(default_factory=lambda: list(CANDIDATE_DIRECTORIES))
    extensions: Set[str] = Field(default_factory=lambda: set(SOURCE_EXTENSIONS))
    ignore_directories: Set[str] = Field(default_factory=lambda: set(IGNORE_DIRECTORIES))
    output_file: str = OUTPUT_FILENAME

    model_config = ConfigDict(extra="forbid")

    def normalized_extensions(self) -> Set[str]:
        """Extensions lower-cased and dot-prefixed, ready for suffix comparison."""
        return {
            ext.lower() if ext.startswith(".") else f".{ext.lower()}"
            for ext in self.extensions
        }


def config_path(root_dir: Path) -> Path:
    return root_dir / CONFIG_DIR / CONFIG_FILENAME


def load_config(root_dir: Path | None = None) -> ClipConfig:
    """
    Load the project configuration.

    Args:
        root_dir (Path | None): Project root. Defaults to the current directory.

    Returns:
        ClipConfig: Defaults merged with `.clip/config.yaml` when it exists.

    Raises:
        ConfigError: If the file is unreadable, not a mapping, or has bad values.
    """
    path = config_path(root_dir or Path.cwd())
    if not path.exists():
        return ClipConfig()

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Failed to read {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path} must contain a mapping, got {type(data).__name__}")

    try:
        config = ClipConfig(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {path}:\n{e}") from e

    logger.debug(f"Loaded configuration from {path}")
    return config
