"""Unit tests for configuration loading."""

import pytest

from clipreact.config import (
    CANDIDATE_DIRECTORIES,
    OUTPUT_FILENAME,
    SOURCE_EXTENSIONS,
    ClipConfig,
    ConfigError,
    load_config,
)


def write_config(root, text: str) -> None:
    path = root / ".clip" / "config.yaml"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text)


class TestLoadConfig:
    def test_defaults_without_file(self, tmp_path):
        config = load_config(tmp_path)

        assert config.candidate_directories == CANDIDATE_DIRECTORIES
        assert config.extensions == SOURCE_EXTENSIONS
        assert config.output_file == OUTPUT_FILENAME

    def test_overrides(self, tmp_path):
        write_config(tmp_path, "candidate_directories: [client]\noutput_file: deps.html\n")

        config = load_config(tmp_path)

        assert config.candidate_directories == ["client"]
        assert config.output_file == "deps.html"
        assert "node_modules" in config.ignore_directories

    def test_empty_file(self, tmp_path):
        write_config(tmp_path, "")
        assert load_config(tmp_path) == ClipConfig()

    def test_non_mapping(self, tmp_path):
        write_config(tmp_path, "- src\n- lib\n")
        with pytest.raises(ConfigError, match="mapping"):
            load_config(tmp_path)

    def test_unknown_key(self, tmp_path):
        write_config(tmp_path, "colour: blue\n")
        with pytest.raises(ConfigError, match="Invalid configuration"):
            load_config(tmp_path)

    def test_malformed_yaml(self, tmp_path):
        write_config(tmp_path, "output_file: [unclosed\n")
        with pytest.raises(ConfigError, match="Failed to read"):
            load_config(tmp_path)


class TestClipConfig:
    def test_normalized_extensions(self):
        config = ClipConfig(extensions={"JS", ".Tsx", "mjs"})
        assert config.normalized_extensions() == {".js", ".tsx", ".mjs"}
