"""Configuration management."""

from pathlib import Path

import yaml
from pydantic import BaseModel, Field

from memorize.logging import GameLogConfig
from memorize.themes import DEFAULT_THEME


class GameConfig(BaseModel):
    """Game configuration."""

    theme: str = DEFAULT_THEME
    number_of_pairs: int = Field(default=16, ge=1)
    seed: int | None = None


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    show_content: bool = False


class Config(BaseModel):
    """Root configuration."""

    game: GameConfig = Field(default_factory=GameConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    game_log: GameLogConfig = Field(
        default_factory=lambda: GameLogConfig(output_path="logs")
    )


def load_config(path: Path | str | None = None) -> Config:
    """Load configuration from YAML file.

    Args:
        path: Path to config file. If None, uses default config.

    Returns:
        Config object.
    """
    if path is None:
        return Config()

    config_path = Path(path)
    if not config_path.exists():
        return Config()

    with open(config_path) as f:
        data = yaml.safe_load(f)

    return Config(**data) if data else Config()
