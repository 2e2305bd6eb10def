"""Tests for exprcalc.toml loading."""

from __future__ import annotations

import tomllib
from pathlib import Path

import pytest
from pydantic import ValidationError

from exprcalc.config import CONFIG_FILENAME, CalcConfig, load_config


class TestLoadConfig:
    """Configuration file parsing."""

    def test_defaults_without_file(self, workdir: Path) -> None:
        config = load_config()
        assert config == CalcConfig()
        assert config.precision is None
        assert config.strict is False
        assert config.result_prefix == "Result: "
        assert config.log_level == "WARNING"

    def test_reads_file_from_cwd(self, workdir: Path) -> None:
        (workdir / CONFIG_FILENAME).write_text(
            '[exprcalc]\nprecision = 2\nstrict = true\nresult_prefix = "= "\nlog_level = "debug"\n'
        )
        config = load_config()
        assert config.precision == 2
        assert config.strict is True
        assert config.result_prefix == "= "
        assert config.log_level == "DEBUG"

    def test_missing_section_uses_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "other.toml"
        path.write_text('[project]\nname = "x"\n')
        assert load_config(path) == CalcConfig()

    def test_explicit_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError, match="Config file not found"):
            load_config(tmp_path / "nope.toml")

    def test_invalid_toml(self, tmp_path: Path) -> None:
        path = tmp_path / CONFIG_FILENAME
        path.write_text("[exprcalc\n")
        with pytest.raises(tomllib.TOMLDecodeError):
            load_config(path)

    def test_negative_precision_rejected(self, tmp_path: Path) -> None:
        path = tmp_path / CONFIG_FILENAME
        path.write_text("[exprcalc]\nprecision = -1\n")
        with pytest.raises(ValidationError):
            load_config(path)

    def test_unknown_key_rejected(self, tmp_path: Path) -> None:
        path = tmp_path / CONFIG_FILENAME
        path.write_text("[exprcalc]\ncolour = true\n")
        with pytest.raises(ValidationError):
            load_config(path)

    def test_unknown_log_level_rejected(self) -> None:
        with pytest.raises(ValidationError, match="log_level must be one of"):
            CalcConfig(log_level="LOUD")


class TestOverrides:
    """Command-line values layered over file values."""

    def test_none_values_are_ignored(self) -> None:
        config = CalcConfig(precision=3)
        assert config.with_overrides(precision=None, strict=None) is config

    def test_values_replace_file_settings(self) -> None:
        config = CalcConfig(precision=3, strict=False)
        updated = config.with_overrides(precision=1, strict=True)
        assert updated.precision == 1
        assert updated.strict is True
        assert config.precision == 3
