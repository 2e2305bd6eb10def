"""Shared pytest fixtures for exprcalc tests."""

from pathlib import Path

import pytest

from exprcalc.core.nodes import Number


@pytest.fixture
def num():
    """Return a shorthand constructor for Number leaves."""

    def _num(value: float) -> Number:
        return Number(value=value)

    return _num


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test inside an empty directory (no exprcalc.toml)."""
    monkeypatch.chdir(tmp_path)
    return tmp_path
