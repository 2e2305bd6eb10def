"""
exprcalc configuration.

Parses the [exprcalc] section from exprcalc.toml into a typed model.
Command-line flags override values from the file.
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "exprcalc.toml"

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class CalcConfig(BaseModel):
    """Settings for evaluating and printing expressions."""

    model_config = ConfigDict(extra="forbid")

    precision: int | None = Field(
        default=None, ge=0, description="Fixed digits after the decimal point"
    )
    strict: bool = Field(default=False, description="Reject input left after the expression")
    result_prefix: str = Field(default="Result: ", description="Text printed before the value")
    log_level: str = Field(default="WARNING", description="Root logging level")

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level

    def with_overrides(self, **overrides: Any) -> CalcConfig:
        """Return a copy with every non-None override applied."""
        updates = {key: value for key, value in overrides.items() if value is not None}
        if not updates:
            return self
        return CalcConfig.model_validate({**self.model_dump(), **updates})


def load_config(toml_path: Path | None = None) -> CalcConfig:
    """
    Load configuration from exprcalc.toml.

    Args:
        toml_path: Path to the TOML file; defaults to ./exprcalc.toml

    Returns:
        CalcConfig with parsed values or defaults

    Raises:
        pydantic.ValidationError: If a value has the wrong type or range
        tomllib.TOMLDecodeError: If the file is not valid TOML
    """
    path = toml_path if toml_path is not None else Path.cwd() / CONFIG_FILENAME

    if not path.exists():
        if toml_path is not None:
            raise FileNotFoundError(f"Config file not found: {path}")
        return CalcConfig()

    with open(path, "rb") as f:
        data = tomllib.load(f)

    section = data.get("exprcalc", {})
    logger.debug("Loaded configuration from %s", path)
    return CalcConfig.model_validate(section)
