"""Tests for persistent preferences (config.toml)."""

import argparse
import os
import tempfile
from pathlib import Path
from unittest.mock import patch

import pytest

from morse.core.config import (
    apply_config_defaults,
    load_config,
    save_config,
)
from morse.core.errors import OutputWriteError


class TestSaveLoadConfig:
    """Test config save/load roundtrip."""

    def test_save_and_load_roundtrip(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            cfg_file = Path(tmpdir) / "config.toml"
            with patch("morse.core.config._CONFIG_DIR", Path(tmpdir)), \
                 patch("morse.core.config._CONFIG_FILE", cfg_file):
                path = save_config({"slash_wordspacer": True, "color": False})
                assert path == cfg_file
                loaded = load_config()
                assert loaded == {"slash_wordspacer": True, "color": False}

    def test_unknown_keys_not_written(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            cfg_file = Path(tmpdir) / "config.toml"
            with patch("morse.core.config._CONFIG_DIR", Path(tmpdir)), \
                 patch("morse.core.config._CONFIG_FILE", cfg_file):
                save_config({"color": True, "mystery": 1})
                assert "mystery" not in cfg_file.read_text()

    def test_creates_missing_directory(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            cfg_dir = Path(tmpdir) / "nested" / "morse"
            cfg_file = cfg_dir / "config.toml"
            with patch("morse.core.config._CONFIG_DIR", cfg_dir), \
                 patch("morse.core.config._CONFIG_FILE", cfg_file):
                save_config({"color": True})
                assert cfg_file.exists()

    def test_missing_file_returns_empty(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            cfg_file = Path(tmpdir) / "nonexistent" / "config.toml"
            with patch("morse.core.config._CONFIG_FILE", cfg_file):
                assert load_config() == {}

    def test_invalid_keys_skipped(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            cfg_file = Path(tmpdir) / "config.toml"
            cfg_file.write_text('unknown_key = "value"\nslash_wordspacer = true\n')
            with patch("morse.core.config._CONFIG_FILE", cfg_file):
                loaded = load_config()
                assert "unknown_key" not in loaded
                assert loaded["slash_wordspacer"] is True

    def test_invalid_value_skipped(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            cfg_file = Path(tmpdir) / "config.toml"
            cfg_file.write_text('slash_wordspacer = "sometimes"\ncolor = false\n')
            with patch("morse.core.config._CONFIG_FILE", cfg_file):
                loaded = load_config()
                assert "slash_wordspacer" not in loaded
                assert loaded["color"] is False

    def test_boolean_parsing(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            cfg_file = Path(tmpdir) / "config.toml"
            cfg_file.write_text("slash_wordspacer = yes\ncolor = 0\n")
            with patch("morse.core.config._CONFIG_FILE", cfg_file):
                loaded = load_config()
                assert loaded["slash_wordspacer"] is True
                assert loaded["color"] is False

    def test_comments_and_empty_lines_ignored(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            cfg_file = Path(tmpdir) / "config.toml"
            cfg_file.write_text("# comment\n\ncolor = \"on\"\n# another\n")
            with patch("morse.core.config._CONFIG_FILE", cfg_file):
                assert load_config() == {"color": True}

    def test_file_permissions(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            cfg_file = Path(tmpdir) / "config.toml"
            with patch("morse.core.config._CONFIG_DIR", Path(tmpdir)), \
                 patch("morse.core.config._CONFIG_FILE", cfg_file):
                save_config({"color": True})
                mode = oct(os.stat(cfg_file).st_mode & 0o777)
                assert mode == "0o600"

    def test_unwritable_dir_raises_output_error(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            blocker = Path(tmpdir) / "blocker"
            blocker.write_text("not a directory")
            with patch("morse.core.config._CONFIG_DIR", blocker), \
                 patch("morse.core.config._CONFIG_FILE", blocker / "config.toml"):
                with pytest.raises(OutputWriteError, match="Could not write config"):
                    save_config({"color": True})


class TestApplyConfigDefaults:
    """Test that config defaults are applied correctly to argparse namespace."""

    def test_config_fills_unset_values(self):
        args = argparse.Namespace(slash_wordspacer=False, color=True)
        apply_config_defaults(args, {"slash_wordspacer": True, "color": False})
        assert args.slash_wordspacer is True
        assert args.color is False

    def test_cli_overrides_config(self):
        args = argparse.Namespace(slash_wordspacer=True, color=False)
        apply_config_defaults(args, {"slash_wordspacer": False, "color": True})
        assert args.slash_wordspacer is True
        assert args.color is False

    def test_empty_config_no_changes(self):
        args = argparse.Namespace(slash_wordspacer=False, color=True)
        apply_config_defaults(args, {})
        assert args.slash_wordspacer is False
        assert args.color is True

    def test_missing_attribute_ignored(self):
        args = argparse.Namespace(color=True)
        apply_config_defaults(args, {"slash_wordspacer": True})
        assert not hasattr(args, "slash_wordspacer")
