"""Configuration and telemetry shared across the engine."""

from . import telemetry
from .config import EngineConfig, get_config, reset_config, set_config

__all__ = [
    "EngineConfig",
    "get_config",
    "reset_config",
    "set_config",
    "telemetry",
]
