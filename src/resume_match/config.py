"""Application configuration loaded from config.yaml."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

CONFIG_ENV_VAR = "RESUME_MATCH_CONFIG"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _check_range(name: str, value: int, low: int, high: int) -> None:
    if not low <= value <= high:
        raise ValueError(f"{name} must be between {low} and {high}, got {value}")


@dataclass(frozen=True)
class ExtractionConfig:
    max_file_size_mb: int = 50
    min_text_length: int = 10

    def __post_init__(self) -> None:
        _check_range("max_file_size_mb", self.max_file_size_mb, 1, 500)
        _check_range("min_text_length", self.min_text_length, 0, 10_000)

    @property
    def max_file_size_bytes(self) -> int:
        return self.max_file_size_mb * 1024 * 1024


@dataclass(frozen=True)
class MatchingConfig:
    min_job_description_length: int = 100
    max_recommendations: int = 5

    def __post_init__(self) -> None:
        _check_range("min_job_description_length", self.min_job_description_length, 0, 10_000)
        _check_range("max_recommendations", self.max_recommendations, 1, 20)


@dataclass(frozen=True)
class StoreConfig:
    db_path: str = "~/.resume-match/analyses.db"
    history_limit: int = 50

    def __post_init__(self) -> None:
        _check_range("history_limit", self.history_limit, 1, 10_000)

    @property
    def resolved_db_path(self) -> Path:
        return Path(self.db_path).expanduser()


@dataclass(frozen=True)
class LogConfig:
    level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.level.upper() not in LOG_LEVELS:
            raise ValueError(f"level must be one of {', '.join(LOG_LEVELS)}, got {self.level!r}")


@dataclass(frozen=True)
class AppConfig:
    extraction: ExtractionConfig = field(default_factory=ExtractionConfig)
    matching: MatchingConfig = field(default_factory=MatchingConfig)
    store: StoreConfig = field(default_factory=StoreConfig)
    log: LogConfig = field(default_factory=LogConfig)


def _find_config() -> Path | None:
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)

    candidates = [
        Path.cwd() / "config.yaml",
        Path(__file__).resolve().parent.parent.parent / "config.yaml",
    ]
    for c in candidates:
        if c.exists():
            return c
    return None


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load config from YAML file, falling back to defaults."""
    if path is None:
        path = _find_config()

    raw: dict = {}
    if path is not None:
        p = Path(path)
        if p.exists():
            raw = yaml.safe_load(p.read_text()) or {}

    return AppConfig(
        extraction=ExtractionConfig(**raw.get("extraction", {})),
        matching=MatchingConfig(**raw.get("matching", {})),
        store=StoreConfig(**raw.get("store", {})),
        log=LogConfig(**raw.get("log", {})),
    )
