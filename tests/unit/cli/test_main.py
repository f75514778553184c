"""Unit tests for the top-level command group."""

import pytest
from click.testing import CliRunner

from clipreact.cli.main import main


@pytest.fixture
def runner():
    return CliRunner()


class TestMain:
    @pytest.mark.parametrize("flag", ["-h", "--help"])
    def test_help(self, runner, flag):
        result = runner.invoke(main, [flag])

        assert result.exit_code == 0
        assert "Usage:" in result.output
        assert "map" in result.output
        assert "https://github.com/Clip-react/clip" in result.output

    @pytest.mark.parametrize("flag", ["-v", "--version"])
    def test_version(self, runner, flag):
        result = runner.invoke(main, [flag])

        assert result.exit_code == 0
        assert result.output.strip() == "clip-react, version 1.0.0"

    def test_map_help(self, runner):
        result = runner.invoke(main, ["map", "--help"])

        assert result.exit_code == 0
        assert "--directory" in result.output

    def test_unknown_command(self, runner):
        result = runner.invoke(main, ["scan"])
        assert result.exit_code != 0
