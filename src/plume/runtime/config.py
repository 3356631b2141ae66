"""Editor tunables resolved from ``PLUME_*`` environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

ENV_PREFIX = "PLUME_"


def _lookup(env: Mapping[str, str], name: str) -> Optional[str]:
    return env.get(f"{ENV_PREFIX}{name}")


def _env_int(env: Mapping[str, str], name: str, fallback: int) -> int:
    value = _lookup(env, name)
    if value is None:
        return fallback
    try:
        parsed = int(value)
    except ValueError:
        return fallback
    return parsed if parsed > 0 else fallback


def _env_float(env: Mapping[str, str], name: str, fallback: float) -> float:
    value = _lookup(env, name)
    if value is None:
        return fallback
    try:
        parsed = float(value)
    except ValueError:
        return fallback
    return parsed if parsed > 0 else fallback


@dataclass(frozen=True, slots=True)
class EditorConfig:
    """Immutable knobs consulted by the buffer, renderer and input loop."""

    tab_stop: int = 8
    quit_times: int = 3
    message_timeout: float = 5.0
    read_timeout: float = 0.1

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "EditorConfig":
        source = os.environ if env is None else env
        defaults = cls()
        return cls(
            tab_stop=_env_int(source, "TAB_STOP", defaults.tab_stop),
            quit_times=_env_int(source, "QUIT_TIMES", defaults.quit_times),
            message_timeout=_env_float(
                source, "MESSAGE_TIMEOUT", defaults.message_timeout
            ),
            read_timeout=_env_float(source, "READ_TIMEOUT", defaults.read_timeout),
        )


__all__ = ["EditorConfig", "ENV_PREFIX"]
