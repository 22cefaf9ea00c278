"""Configuration management using pydantic-settings."""

import tomllib
from datetime import date
from enum import Enum
from pathlib import Path
from typing import Self

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .domain.rules import DEFAULT_MIN_YEAR

CONFIG_PATH = Path("~/.config/curprfc/config.toml").expanduser()


class OutputFormat(str, Enum):
    """Available result renderers."""

    TEXT = "text"
    HTML = "html"
    YAML = "yaml"


class DatesConfig(BaseSettings):
    """Accepted birth-date range."""

    model_config = SettingsConfigDict(env_prefix="CURPRFC_DATES_")

    min_year: int = DEFAULT_MIN_YEAR
    max_year: int | None = None  # None: current year

    @model_validator(mode="after")
    def check_range(self) -> Self:
        upper = self.max_year if self.max_year is not None else date.today().year
        if self.min_year > upper:
            raise ValueError(f"min_year {self.min_year} is after max_year {upper}")
        return self


class OutputConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="CURPRFC_OUTPUT_")

    format: OutputFormat = OutputFormat.TEXT
    color: bool = True


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="CURPRFC_", env_nested_delimiter="__")

    dates: DatesConfig = DatesConfig()
    output: OutputConfig = OutputConfig()


def load_settings(config_path: Path | None = None) -> Settings:
    """Load settings from TOML file, falling back to defaults."""
    path = config_path or CONFIG_PATH

    if path.exists():
        with open(path, "rb") as f:
            data = tomllib.load(f)

        dates = DatesConfig(**data.get("dates", {}))
        output = OutputConfig(**data.get("output", {}))
        return Settings(dates=dates, output=output)

    return Settings()
