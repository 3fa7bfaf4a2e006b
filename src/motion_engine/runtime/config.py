"""Environment-driven settings shared by the locators and telemetry."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

ENV_PREFIX = "MOTION_ENGINE_"
DEFAULT_TAB_WIDTH = 4

_ACTIVE: Optional["EngineConfig"] = None


def env(name: str, default: Optional[str] = None) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}", default)


def env_flag(name: str, default: bool) -> bool:
    raw = env(name)
    if raw is None:
        return default
    return raw.lower() in {"1", "true", "yes", "on"}


def parse_tab_width(raw: str | int) -> int:
    try:
        width = int(raw)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Invalid tab width {raw!r}") from exc
    if width <= 0:
        raise ValueError("tab width must be positive")
    return width


@dataclass(frozen=True, slots=True)
class EngineConfig:
    """Snapshot of the ``MOTION_ENGINE_*`` environment."""

    tab_width: int = DEFAULT_TAB_WIDTH
    log_level: str = "INFO"
    log_file: str = ""
    log_json: bool = False
    console: bool = True
    color: bool = True
    trace: bool = False

    def __post_init__(self) -> None:
        parse_tab_width(self.tab_width)

    @classmethod
    def from_env(cls) -> "EngineConfig":
        return cls(
            tab_width=parse_tab_width(env("TAB_WIDTH") or DEFAULT_TAB_WIDTH),
            log_level=(env("LOG_LEVEL") or "INFO").upper(),
            log_file=env("LOG_FILE") or "",
            log_json=env_flag("LOG_JSON", False),
            console=not env_flag("DISABLE_CONSOLE", False),
            color=not env_flag("NO_COLOR", False),
            trace=env_flag("TRACE", False),
        )


def get_config() -> EngineConfig:
    """Return the cached configuration, reading the environment on first use."""

    global _ACTIVE
    if _ACTIVE is None:
        _ACTIVE = EngineConfig.from_env()
    return _ACTIVE


def set_config(config: EngineConfig) -> None:
    global _ACTIVE
    _ACTIVE = config


def reset_config() -> None:
    """Forget the cached configuration so the next read hits the environment."""

    global _ACTIVE
    _ACTIVE = None


__all__ = [
    "DEFAULT_TAB_WIDTH",
    "ENV_PREFIX",
    "EngineConfig",
    "env",
    "env_flag",
    "get_config",
    "parse_tab_width",
    "reset_config",
    "set_config",
]
