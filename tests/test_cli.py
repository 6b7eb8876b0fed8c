"""Tests for CLI argument parsing."""

import sys
from unittest.mock import patch

import pytest

from cli import ParsedArgs, create_parser, parse_args, resolve_settings
from constants import APP_VERSION


class TestParseArgs:
    """Test parse_args() function."""

    def test_no_args(self):
        with patch.object(sys, "argv", ["projdesk"]):
            args = parse_args()
        assert args == ParsedArgs(api_base=None, timeout=None)

    def test_api_base_flag(self):
        args = parse_args(["--api-base", "http://localhost:9000"])
        assert args.api_base == "http://localhost:9000"

    def test_timeout_flag(self):
        args = parse_args(["--timeout", "4"])
        assert args.timeout == "4"

    def test_version_exits(self, capsys):
        with pytest.raises(SystemExit) as exc:
            parse_args(["--version"])
        assert exc.value.code == 0
        assert APP_VERSION in capsys.readouterr().out

    def test_help_lists_environment(self):
        help_text = create_parser().format_help()
        assert "PROJDESK_API_BASE" in help_text
        assert "--api-base" in help_text


class TestResolveSettings:
    """Test resolve_settings() function."""

    def test_valid_settings(self, monkeypatch):
        monkeypatch.delenv("PROJDESK_TIMEOUT", raising=False)
        settings = resolve_settings(ParsedArgs(api_base="http://x.test/", timeout=None))
        assert settings.api_base == "http://x.test"

    def test_invalid_settings_exit_with_error_box(self, capsys):
        with pytest.raises(SystemExit) as exc:
            resolve_settings(ParsedArgs(api_base="not-a-url", timeout=None))
        assert exc.value.code == 1
        err = capsys.readouterr().err
        assert "Error: Invalid configuration" in err
        assert "PROJDESK_API_BASE" in err
