# src/sc2pathlib/config.py
"""
Pathing configuration.

Responsibility:
  - Load config/pathing.yaml (optional; defaults apply when it is missing)
  - Map it into a PathingConfig dataclass
  - Hand out a process-local cached instance to the entry points

Layout of pathing.yaml:

    cost_scales:
      orthogonal: 10000
      diagonal: 14142
    heuristics:
      loose_divisor: 3

The cached instance is only ever read after construction, so concurrent
searches can share it.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .errors import ConfigError
from .grid import CostScales, DIAGONAL_SCALE, ORTHOGONAL_SCALE
from .heuristics import DEFAULT_LOOSE_DIVISOR


log = logging.getLogger(__name__)

# Default config directory; tests monkeypatch this to point at a temp dir.
CONFIG_DIR = Path(__file__).resolve().parents[2] / "config"
CONFIG_FILE = "pathing.yaml"
CONFIG_DIR_ENV = "SC2PATHLIB_CONFIG_DIR"

# Smallest diagonal scale that keeps the Manhattan heuristic admissible.
MIN_DIAGONAL_SCALE = 2


@dataclass(frozen=True)
class PathingConfig:
    """Cost scales for the grid model plus heuristic tuning."""

    scales: CostScales = field(default_factory=CostScales)
    loose_divisor: int = DEFAULT_LOOSE_DIVISOR

    def __post_init__(self) -> None:
        _validate_config(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PathingConfig":
        """Convenience constructor from a plain dict (e.g. YAML)."""
        scales_raw = data.get("cost_scales") or {}
        heur_raw = data.get("heuristics") or {}
        if not isinstance(scales_raw, dict) or not isinstance(heur_raw, dict):
            raise ConfigError(
                code="invalid_section",
                details={"cost_scales": scales_raw, "heuristics": heur_raw},
            )

        return cls(
            scales=CostScales(
                orthogonal=scales_raw.get("orthogonal", ORTHOGONAL_SCALE),
                diagonal=scales_raw.get("diagonal", DIAGONAL_SCALE),
            ),
            loose_divisor=heur_raw.get("loose_divisor", DEFAULT_LOOSE_DIVISOR),
        )


def _validate_config(config: PathingConfig) -> None:
    """
    Scales and divisor must be positive integers.

    The raw Manhattan heuristic drops by 2 on a diagonal step, so a diagonal
    scale below 2 would let it overestimate and break optimality.
    """
    values = {
        "orthogonal": config.scales.orthogonal,
        "diagonal": config.scales.diagonal,
        "loose_divisor": config.loose_divisor,
    }
    for name, value in values.items():
        if isinstance(value, bool) or not isinstance(value, int) or value < 1:
            raise ConfigError(code="invalid_value", details={"key": name, "value": value})

    if config.scales.diagonal < MIN_DIAGONAL_SCALE:
        raise ConfigError(
            code="diagonal_scale_too_small",
            details={"diagonal": config.scales.diagonal, "minimum": MIN_DIAGONAL_SCALE},
        )


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------


def _config_dir() -> Path:
    override = os.getenv(CONFIG_DIR_ENV)
    if override:
        return Path(override)
    return CONFIG_DIR


def load_pathing_config(path: Optional[Path] = None) -> PathingConfig:
    """
    Load PathingConfig from YAML.

    Uses path if given, otherwise <config dir>/pathing.yaml. A missing file
    yields the defaults. Malformed content raises ConfigError.
    """
    path = path or _config_dir() / CONFIG_FILE
    if not path.exists():
        log.debug("No pathing config at %s; using defaults", path)
        return PathingConfig()

    with path.open("r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise ConfigError(code="invalid_yaml", details={"path": str(path), "error": str(exc)}) from exc

    if data is None:
        return PathingConfig()
    if not isinstance(data, dict):
        raise ConfigError(
            code="not_a_mapping",
            details={"path": str(path), "type": type(data).__name__},
        )
    return PathingConfig.from_dict(data)


_pathing_config: Optional[PathingConfig] = None


def get_pathing_config() -> PathingConfig:
    """
    Return a process-local PathingConfig singleton.

    First call reads the YAML file, subsequent calls return the same instance.
    """
    global _pathing_config
    if _pathing_config is None:
        _pathing_config = load_pathing_config()
    return _pathing_config


def reset_pathing_config_cache() -> None:
    """Drop the cached config so the next access re-reads from disk."""
    global _pathing_config
    _pathing_config = None
