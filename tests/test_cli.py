"""Tests for the palette preview command."""

from unittest.mock import patch

import pytest

from chat_uikit_bridge.cli import cli, parse_seed


class TestParseSeed:
    """Test cases for parse_seed."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [("210", 210), ("12.5", 12.5), ("#1E90FF", "#1E90FF"), ("teal", "teal"), (None, None)],
    )
    def test_parse(self, value, expected):
        """Test numeric strings become numbers and others pass through."""
        assert parse_seed(value) == expected


class TestCli:
    """Test cases for the cli entry point."""

    def test_prints_variables(self, capsys):
        """Test the palette variables are printed one per line."""
        with patch("chat_uikit_bridge.cli.setup_logging"):
            cli(["#1E90FF"])

        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == "--cui-color-primary: hsla(210, 100%, 60%, 1);"
        assert len(lines) == 60

    def test_default_seed(self, capsys):
        """Test no seed prints the default hue palette."""
        with patch("chat_uikit_bridge.cli.setup_logging"):
            cli([])

        assert "hsla(203, 100%, 60%, 1)" in capsys.readouterr().out.splitlines()[0]

    def test_custom_prefix(self, capsys):
        """Test the --prefix option renames the variables."""
        with patch("chat_uikit_bridge.cli.setup_logging"):
            cli(["120", "--prefix=--brand"])

        assert capsys.readouterr().out.startswith("--brand-primary: hsla(120, 100%, 60%, 1);")

    def test_logging_configured_from_settings(self, capsys):
        """Test level, JSON flag and log file all come from settings."""
        from chat_uikit_bridge.core.config import settings

        with (
            patch.object(settings, "log_file", "bridge.log"),
            patch.object(settings, "log_level", "DEBUG"),
            patch.object(settings, "log_json", True),
            patch("chat_uikit_bridge.cli.setup_logging") as mock_setup,
        ):
            cli(["0"])

        mock_setup.assert_called_once_with(level="DEBUG", json_output=True, log_file="bridge.log")
