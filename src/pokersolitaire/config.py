"""Application configuration for pokersolitaire."""

import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Self

DEFAULT_HIGH_SCORE_FILE = Path.home() / ".local" / "share" / "pokersolitaire" / "highscore.json"


class ConfigError(ValueError):
    """Raised when a config file holds a value of the wrong type."""


@dataclass
class GameConfig:
    """Configuration for dealing."""

    seed: int | None = None


@dataclass
class DisplayConfig:
    """Configuration for the terminal display."""

    show_empty_lines: bool = True
    use_color: bool = True


@dataclass
class StorageConfig:
    """Where the high score is kept."""

    high_score_file: Path = DEFAULT_HIGH_SCORE_FILE


@dataclass
class Config:
    """Application configuration."""

    game: GameConfig = field(default_factory=GameConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)
    storage: StorageConfig = field(default_factory=StorageConfig)

    @classmethod
    def load(cls) -> Self:
        """Load config from file, falling back to defaults."""
        config_paths = [
            Path.cwd() / "pokersolitaire.toml",
            Path.cwd() / ".pokersolitaire.toml",
            Path.home() / ".config" / "pokersolitaire" / "config.toml",
            Path.home() / ".pokersolitaire.toml",
        ]

        for path in config_paths:
            if path.exists():
                return cls.from_file(path)

        return cls()

    @classmethod
    def from_file(cls, path: Path) -> Self:
        """Load config from a TOML file."""
        with open(path, "rb") as f:
            data = tomllib.load(f)

        game_data = data.get("game", {})
        seed = game_data.get("seed")
        if seed is not None:
            seed = _expect(seed, int, "game.seed")
        game = GameConfig(seed=seed)

        display_data = data.get("display", {})
        display = DisplayConfig(
            show_empty_lines=_expect(
                display_data.get("show_empty_lines", True), bool, "display.show_empty_lines"
            ),
            use_color=_expect(display_data.get("use_color", True), bool, "display.use_color"),
        )

        storage_data = data.get("storage", {})
        high_score_file = storage_data.get("high_score_file")
        storage = StorageConfig(
            high_score_file=(
                Path(_expect(high_score_file, str, "storage.high_score_file")).expanduser()
                if high_score_file is not None
                else DEFAULT_HIGH_SCORE_FILE
            ),
        )

        return cls(game=game, display=display, storage=storage)


def _expect(value: Any, kind: type, key: str) -> Any:
    # bool is an int subclass; don't let `seed = true` through
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise ConfigError(f"{key} must be {kind.__name__}, got {value!r}")
    return value


# Global config instance (loaded lazily)
_config: Config | None = None


def get_config() -> Config:
    """Get the global config instance."""
    global _config
    if _config is None:
        _config = Config.load()
    return _config
