"""Helpers for loading and validating Blackbox configuration."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional
import threading

import yaml  # type: ignore[import-untyped]

from blackbox.core.exceptions import ConfigurationError


@dataclass(frozen=True)
class BoardConfig:
    size: int
    atoms: int


@dataclass(frozen=True)
class SimulationConfig:
    step_limit_factor: int = 1


@dataclass(frozen=True)
class BlackboxConfig:
    board: BoardConfig
    simulation: SimulationConfig


# Configuration cache with thread safety
_LOADER_CACHE: dict[str, BlackboxConfig] = {}
_CACHE_LOCK = threading.RLock()


def _get_config_path(path: Optional[str] = None) -> str:
    if path is None:
        # Bundled defaults live next to the package modules
        path = str(Path(__file__).parent.parent / "config.yaml")

    return path


def _load_yaml_file(path: Path) -> dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as fh:
            raw = yaml.safe_load(fh)
    except Exception as exc:
        raise ConfigurationError(f"Failed to parse config: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigurationError(f"Config root must be a mapping, got {type(raw).__name__}")
    return raw


def _as_int(key: str, value: Any) -> int:
    # YAML booleans are ints to Python; reject them explicitly
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(key, f"expected an integer, got {value!r}")
    return value


def parse_config(raw: dict[str, Any]) -> BlackboxConfig:
    """Convert a raw mapping (as read from YAML) into a validated config."""
    try:
        board_raw = raw["board"]
        simulation_raw = raw.get("simulation") or {}

        cfg = BlackboxConfig(
            board=BoardConfig(
                size=_as_int("board.size", board_raw["size"]),
                atoms=_as_int("board.atoms", board_raw["atoms"]),
            ),
            simulation=SimulationConfig(
                step_limit_factor=_as_int(
                    "simulation.step_limit_factor",
                    simulation_raw.get("step_limit_factor", 1),
                ),
            ),
        )
    except KeyError as exc:
        raise ConfigurationError(f"Missing required config key: {exc}") from exc
    except (TypeError, AttributeError) as exc:
        raise ConfigurationError(f"Invalid config schema: {exc}") from exc

    _validate_config(cfg)
    return cfg


def _validate_config(cfg: BlackboxConfig) -> None:
    """Basic sanity checks to fail fast on bad configs."""
    if cfg.board.size < 1:
        raise ConfigurationError("board.size", "must be at least 1")

    cells = cfg.board.size * cfg.board.size
    if not 0 <= cfg.board.atoms <= cells:
        raise ConfigurationError("board.atoms", f"must be between 0 and {cells}")

    if cfg.simulation.step_limit_factor < 1:
        raise ConfigurationError("simulation.step_limit_factor", "must be at least 1")


def load_config(path: Optional[str] = None) -> BlackboxConfig:
    """Load and validate configuration from a YAML file.

    Args:
        path: Optional path to YAML config. If None, load the bundled blackbox/config.yaml.

    Returns:
        BlackboxConfig instance

    Raises:
        ConfigurationError: on parse or validation errors
    """

    p = Path(_get_config_path(path=path))
    raw = _load_yaml_file(p)

    return parse_config(raw=raw)


def get_config() -> BlackboxConfig:
    """Return the bundled default config, loading and caching it if necessary.

    THREAD SAFETY: This function is thread-safe. Multiple threads can
    safely call this concurrently.
    """
    key = _get_config_path()
    with _CACHE_LOCK:
        if key not in _LOADER_CACHE:
            _LOADER_CACHE[key] = load_config()
        return _LOADER_CACHE[key]


def clear_config_cache() -> None:
    """Clear all cached configurations.

    All subsequent calls to get_config() will reload from disk.
    """
    with _CACHE_LOCK:
        _LOADER_CACHE.clear()
