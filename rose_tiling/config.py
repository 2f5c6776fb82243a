"""Configuration helpers for the tiling engine."""

from __future__ import annotations

import copy
from dataclasses import dataclass


@dataclass
class EngineConfig:
    """Tunable knobs that do not change the geometry produced."""

    # Grid cells per leg length of the first triangle in the hashing merge.
    grid_resolution: float = 100.0
    # Generation counts above this are logged as likely to exhaust memory.
    generation_warning_threshold: int = 12


_ENGINE_CONFIG = EngineConfig()


def get_engine_config() -> EngineConfig:
    return copy.deepcopy(_ENGINE_CONFIG)


def set_engine_config(config: EngineConfig) -> None:
    global _ENGINE_CONFIG
    _ENGINE_CONFIG = copy.deepcopy(config)


__all__ = ["EngineConfig", "get_engine_config", "set_engine_config"]
