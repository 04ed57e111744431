"""Helpers for loading and validating amida configuration."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal, Optional
import logging
import threading

import yaml  # type: ignore[import-untyped]

from amida.core.exceptions import ConfigurationError

EvaluationName = Literal["eager", "lazy"]

_EVALUATION_NAMES = ("eager", "lazy")
_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


@dataclass(frozen=True)
class BoardConfig:
    evaluation: EvaluationName = "eager"
    check_invariants: bool = True


@dataclass(frozen=True)
class LoggingConfig:
    level: str = "INFO"
    format: str = "%(levelname)s: %(message)s"

    @property
    def level_number(self) -> int:
        return logging.getLevelName(self.level)


@dataclass(frozen=True)
class ServerConfig:
    host: str = "127.0.0.1"
    port: int = 3334


@dataclass(frozen=True)
class AmidaConfig:
    board: BoardConfig = field(default_factory=BoardConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    server: ServerConfig = field(default_factory=ServerConfig)


# Configuration cache with thread safety
_LOADER_CACHE: dict[str, AmidaConfig] = {}
_CACHE_LOCK = threading.RLock()


def _get_config_path(path: Optional[str] = None) -> str:
    if path is None:
        # Bundled defaults live next to the package root
        path = str(Path(__file__).parent.parent / "config.yaml")

    return path


def _load_yaml_file(path: Path) -> dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as fh:
            raw = yaml.safe_load(fh)
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigurationError(f"Failed to parse config: {exc}") from exc

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigurationError("top level of the config must be a mapping")
    return raw


def _section(raw: dict[str, Any], name: str) -> dict[str, Any]:
    value = raw.get(name) or {}
    if not isinstance(value, dict):
        raise ConfigurationError(name, "section must be a mapping")
    return value


def _build_board_cfg(board_raw: dict[str, Any]) -> BoardConfig:
    evaluation = str(board_raw.get("evaluation", "eager")).lower()
    if evaluation not in _EVALUATION_NAMES:
        raise ConfigurationError(
            "board.evaluation",
            f"must be one of {list(_EVALUATION_NAMES)}",
            details={"provided": evaluation},
        )
    return BoardConfig(
        evaluation=evaluation,  # type: ignore[arg-type]
        check_invariants=bool(board_raw.get("check_invariants", True)),
    )


def _build_logging_cfg(logging_raw: dict[str, Any]) -> LoggingConfig:
    level = str(logging_raw.get("level", "INFO")).upper()
    if level not in _LOG_LEVELS:
        raise ConfigurationError(
            "logging.level",
            f"unknown level '{level}'",
            details={"allowed": list(_LOG_LEVELS)},
        )
    return LoggingConfig(
        level=level,
        format=str(logging_raw.get("format", LoggingConfig.format)),
    )


def _build_server_cfg(server_raw: dict[str, Any]) -> ServerConfig:
    try:
        port = int(server_raw.get("port", ServerConfig.port))
    except (TypeError, ValueError) as exc:
        raise ConfigurationError("server.port", "must be an integer") from exc

    if not 0 < port < 65536:
        raise ConfigurationError(
            "server.port", "must be in 1..65535", details={"provided": port}
        )
    return ServerConfig(
        host=str(server_raw.get("host", ServerConfig.host)),
        port=port,
    )


def _parse_amida_cfg_from_dict(raw: dict[str, Any]) -> AmidaConfig:
    return AmidaConfig(
        board=_build_board_cfg(_section(raw, "board")),
        logging=_build_logging_cfg(_section(raw, "logging")),
        server=_build_server_cfg(_section(raw, "server")),
    )


def load_config(path: Optional[str] = None) -> AmidaConfig:
    """Load and validate configuration from a YAML file.

    Args:
        path: Optional path to YAML config. If None, load the bundled amida/config.yaml.

    Returns:
        AmidaConfig instance

    Raises:
        ConfigurationError: on parse or validation errors
    """

    p = Path(_get_config_path(path=path))
    raw = _load_yaml_file(p)

    return _parse_amida_cfg_from_dict(raw=raw)


def get_config(path: Optional[str] = None) -> AmidaConfig:
    """Return the loaded config for path, loading and caching if necessary.

    Configs are cached per resolved path; repeated calls for the same file
    return the cached instance without re-reading the YAML file.

    THREAD SAFETY: This function is thread-safe. Multiple threads can
    safely call this concurrently.
    """
    key = _get_config_path(path=path)
    with _CACHE_LOCK:
        if key not in _LOADER_CACHE:
            _LOADER_CACHE[key] = load_config(path=path)
        return _LOADER_CACHE[key]


def clear_config_cache() -> None:
    """Clear all cached configurations.

    All subsequent calls to get_config() will reload from disk.
    """
    with _CACHE_LOCK:
        _LOADER_CACHE.clear()


def configure_logging(cfg: LoggingConfig) -> None:
    """Apply a LoggingConfig to the root logger."""
    logging.basicConfig(level=cfg.level_number, format=cfg.format)
