"""Configuration loader for clocktui."""

from __future__ import annotations

import os
import tempfile
import tomllib
from pathlib import Path
from typing import Any, Literal, TypeAlias

import tomlkit
from pydantic import BaseModel, Field, ValidationError, field_validator

from clocktui.core.tokenizer import CLASSIC_FORMAT
from clocktui.limits import (
    DEFAULT_FORMAT,
    LOGIC_TICK_INTERVAL,
    RENDER_TICK_INTERVAL,
    TRANSITION_TIMING,
)
from clocktui.paths import get_config_path

ThemeChoice: TypeAlias = Literal["auto", "truecolor", "256"]
THEME_CHOICES = frozenset({"auto", "truecolor", "256"})


class ConfigError(Exception):
    """The config file exists but cannot be used."""


class TimingConfig(BaseModel):
    """Tick and transition timing, in milliseconds."""

    logic_tick_interval: int = Field(
        default=LOGIC_TICK_INTERVAL, gt=0, description="How often the wall clock is sampled"
    )
    render_tick_interval: int = Field(
        default=RENDER_TICK_INTERVAL, gt=0, description="Animation frame interval"
    )
    transition_timing: int = Field(
        default=TRANSITION_TIMING, ge=0, description="Duration of one block transition"
    )


class DisplayConfig(BaseModel):
    """What is shown and how."""

    format_spec: str = Field(default=DEFAULT_FORMAT, description="strftime-style format")
    classic: bool = Field(default=False, description="Six digit cells, HH MM SS")
    theme: ThemeChoice = Field(default="auto", description="auto, truecolor or 256")

    @field_validator("theme", mode="before")
    @classmethod
    def validate_theme(cls, value: object) -> str:
        """Gracefully coerce unknown theme names to auto-detection."""
        if isinstance(value, str) and value.lower() in THEME_CHOICES:
            return value.lower()
        return "auto"


class ClockConfig(BaseModel):
    """Root configuration model."""

    timing: TimingConfig = Field(default_factory=TimingConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)

    @property
    def effective_format(self) -> str:
        return CLASSIC_FORMAT if self.display.classic else self.display.format_spec

    @classmethod
    def load(cls, config_path: Path | None = None) -> ClockConfig:
        """Load configuration from TOML, or defaults when the file is absent."""
        if config_path is None:
            config_path = get_config_path()
        if not config_path.exists():
            return cls()

        try:
            with open(config_path, "rb") as f:
                data = tomllib.load(f)
            return cls.model_validate(data)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"{config_path}: invalid TOML: {exc}") from exc
        except ValidationError as exc:
            raise ConfigError(f"{config_path}: {exc}") from exc

    def with_overrides(self, **overrides: Any) -> ClockConfig:
        """Return a copy with non-None CLI overrides applied to the right section."""
        timing = {
            key: value
            for key, value in overrides.items()
            if value is not None and key in TimingConfig.model_fields
        }
        display = {
            key: value
            for key, value in overrides.items()
            if value is not None and key in DisplayConfig.model_fields
        }
        unknown = set(overrides) - set(TimingConfig.model_fields) - set(DisplayConfig.model_fields)
        if unknown:
            raise TypeError(f"unknown config keys: {', '.join(sorted(unknown))}")

        try:
            return ClockConfig.model_validate(
                {
                    "timing": self.timing.model_dump() | timing,
                    "display": self.display.model_dump() | display,
                }
            )
        except ValidationError as exc:
            raise ConfigError(str(exc)) from exc

    def to_toml(self) -> str:
        doc = tomlkit.document()
        doc.add(tomlkit.comment("clocktui configuration (times in milliseconds)"))
        for section, model in (("timing", self.timing), ("display", self.display)):
            table = tomlkit.table()
            for key, value in model.model_dump().items():
                table[key] = value
            doc[section] = table
        return tomlkit.dumps(doc)

    def save(self, path: Path | None = None) -> Path:
        """Write the config as TOML, atomically. Returns the written path."""
        if path is None:
            path = get_config_path()
        _atomic_write(path, self.to_toml())
        return path


def _atomic_write(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.")
    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.write(content)
        tmp_path.replace(path)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise
