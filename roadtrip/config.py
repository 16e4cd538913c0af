"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for all configuration:
- graph artifact locations (borders, capital distances, state names)
- prompt loop wording and exit keyword
- logging level and format

Values come only from explicit constructor arguments. The process
environment and dotenv files are never consulted, so a run is fully
determined by its command line.

    config = AppConfig(graph=GraphConfig(borders_file="borders.txt"))
    print(config.graph.borders_path)
"""

from __future__ import annotations

import logging
import sys
from functools import lru_cache
from pathlib import Path
from typing import Optional, TextIO, Tuple, Type

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict


class _InitOnlySettings(BaseSettings):
    """Settings base that only honors constructor arguments."""

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        return (init_settings,)


class GraphConfig(_InitOnlySettings):
    """Graph data configuration.

    File names are resolved against ``data_dir``; an absolute file name
    wins over the directory.
    """

    model_config = SettingsConfigDict(frozen=True)

    data_dir: Path = Field(default_factory=Path.cwd)
    borders_file: str = "borders.txt"
    distances_file: str = "capdist.csv"
    state_names_file: str = "state_name.tsv"
    # utf-8-sig also reads plain UTF-8 and drops a leading byte-order mark.
    encoding: str = "utf-8-sig"

    @property
    def borders_path(self) -> Path:
        """Full path to the borders text file."""
        return self.data_dir / self.borders_file

    @property
    def distances_path(self) -> Path:
        """Full path to the capital-distance CSV file."""
        return self.data_dir / self.distances_file

    @property
    def state_names_path(self) -> Path:
        """Full path to the code/name TSV file."""
        return self.data_dir / self.state_names_file

    @classmethod
    def from_paths(
        cls, borders: str, distances: str, state_names: str, **kwargs
    ) -> GraphConfig:
        """Build a config from the three artifact paths given on the command line."""
        return cls(
            borders_file=str(borders),
            distances_file=str(distances),
            state_names_file=str(state_names),
            **kwargs,
        )


class ReplConfig(_InitOnlySettings):
    """Prompt loop configuration."""

    model_config = SettingsConfigDict(frozen=True)

    exit_keyword: str = "EXIT"
    first_prompt: str = "Enter the name of the first country (type EXIT to quit): "
    second_prompt: str = "Enter the name of the second country (type EXIT to quit): "
    invalid_country_message: str = (
        "Invalid country name. Please enter a valid country name."
    )

    @field_validator("exit_keyword")
    @classmethod
    def _exit_keyword_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("exit_keyword must not be blank")
        return value.strip()


class ObservabilityConfig(_InitOnlySettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(frozen=True)

    level: str = "WARNING"
    format: str = "%(levelname)s: %(message)s"

    @field_validator("level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level


class AppConfig(_InitOnlySettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.repl.exit_keyword)
        print(config.graph.borders_path)
    """

    graph: GraphConfig = Field(default_factory=GraphConfig)
    repl: ReplConfig = Field(default_factory=ReplConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


def configure_logging(
    config: ObservabilityConfig, stream: Optional[TextIO] = None
) -> None:
    """Route log records to the error stream using the configured level/format."""
    logging.basicConfig(
        level=config.level,
        format=config.format,
        stream=stream or sys.stderr,
        force=True,
    )


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is built once and cached. To rebuild it
    (e.g., in tests), use reset_config() first.

    Returns:
        The application configuration instance.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache.

    Call this in tests to ensure a fresh configuration is built.
    """
    get_config.cache_clear()
