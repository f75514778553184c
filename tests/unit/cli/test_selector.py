"""Unit tests for the interactive directory selector."""

from unittest.mock import patch

import pytest

from clipreact.cli.selector import (
    detect_available_directories,
    prompt_custom_directory,
    prompt_directory_selection,
    validate_directory,
)


@pytest.fixture
def project(tmp_path):
    for name in ("src", "pages", "custom/sub"):
        (tmp_path / name).mkdir(parents=True)
    (tmp_path / "lib").write_text("not a directory")
    return tmp_path


class TestDetection:
    def test_keeps_candidate_order(self, project):
        assert detect_available_directories(project) == ["src", "pages"]

    def test_custom_candidates(self, project):
        assert detect_available_directories(project, ["custom", "app"]) == ["custom"]

    def test_nothing_detected(self, tmp_path):
        assert detect_available_directories(tmp_path) == []


class TestValidation:
    def test_empty_input(self, project):
        assert validate_directory("", project) == "Please enter a valid path."
        assert validate_directory("   ", project) == "Please enter a valid path."

    def test_missing_directory(self, project):
        error = validate_directory("nope", project)
        assert error == 'The directory "nope" does not exist. Please enter a valid path.'

    def test_file_is_not_a_directory(self, project):
        assert validate_directory("lib", project) is not None

    def test_existing_directory(self, project):
        assert validate_directory("custom/sub", project) is None


class TestPrompts:
    def test_custom_prompt_repeats_until_valid(self, project):
        with patch("clipreact.cli.selector.Prompt.ask", side_effect=["", "nope", " custom/sub "]) as mock_ask:
            assert prompt_custom_directory(project) == "custom/sub"

        assert mock_ask.call_count == 3

    def test_select_detected_directory(self, project):
        with patch("clipreact.cli.selector.Prompt.ask", return_value="2") as mock_ask:
            assert prompt_directory_selection(project) == "pages"

        assert mock_ask.call_args.kwargs["choices"] == ["1", "2", "3"]
        assert mock_ask.call_args.kwargs["default"] == "1"

    def test_select_other_directory(self, project):
        with patch("clipreact.cli.selector.Prompt.ask", side_effect=["3", "custom"]):
            assert prompt_directory_selection(project) == "custom"

    def test_no_candidates_goes_straight_to_custom_prompt(self, tmp_path):
        (tmp_path / "code").mkdir()

        with patch("clipreact.cli.selector.Prompt.ask", return_value="code") as mock_ask:
            assert prompt_directory_selection(tmp_path) == "code"

        mock_ask.assert_called_once()
        assert "choices" not in mock_ask.call_args.kwargs
