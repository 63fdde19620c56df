"""User configuration and logging setup."""
from __future__ import annotations

import json
import logging
import os
from dataclasses import asdict, dataclass
from pathlib import Path

_DEFAULT_LOG_LEVEL = "WARNING"
_VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass(slots=True)
class GameConfig:
    log_level: str = _DEFAULT_LOG_LEVEL
    seed: int | None = None


def get_user_data_dir() -> Path:
    """Return the per-user data directory."""
    if os.name == "nt":
        base = os.environ.get("APPDATA")
        if base:
            return Path(base) / "dirquest"
        return Path.home() / "dirquest"
    return Path.home() / ".config" / "dirquest"


def get_default_config_path() -> Path:
    return get_user_data_dir() / "config.json"


def _normalize_log_level(value: object) -> str:
    if isinstance(value, str) and value.upper() in _VALID_LOG_LEVELS:
        return value.upper()
    return _DEFAULT_LOG_LEVEL


def _normalize_seed(value: object) -> int | None:
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return None


def load_config(path: Path | None = None) -> GameConfig:
    """Load config from disk or return defaults."""
    config_path = path or get_default_config_path()
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return GameConfig()
    if not isinstance(raw, dict):
        return GameConfig()
    return GameConfig(log_level=_normalize_log_level(raw.get("log_level")), seed=_normalize_seed(raw.get("seed")))


def save_config(config: GameConfig, path: Path | None = None) -> None:
    """Persist config to disk."""
    config_path = path or get_default_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    payload = asdict(
        GameConfig(log_level=_normalize_log_level(config.log_level), seed=_normalize_seed(config.seed))
    )
    config_path.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")


def configure_logging(config: GameConfig) -> None:
    """Install a stderr handler and apply the configured level to the package loggers."""
    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger("dirquest").setLevel(getattr(logging, _normalize_log_level(config.log_level)))
