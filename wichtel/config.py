from __future__ import annotations

import os
import random
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

LOG_LEVELS = frozenset({"CRITICAL", "FATAL", "ERROR", "WARN", "WARNING", "INFO", "DEBUG", "NOTSET"})


@dataclass(frozen=True)
class RuntimeConfig:
    max_attempts: int | None
    seed: int | None
    log_level: str


def load_env(dotenv_path: str | Path | None = None) -> None:
    path = Path(dotenv_path) if dotenv_path else None
    if path and path.exists():
        load_dotenv(path)
        return
    load_dotenv()


def _int_env(name: str) -> int | None:
    raw = os.getenv(name, "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def runtime_config() -> RuntimeConfig:
    max_attempts = _int_env("WICHTEL_MAX_ATTEMPTS")
    if max_attempts is not None and max_attempts < 0:
        raise ValueError(f"WICHTEL_MAX_ATTEMPTS must not be negative, got {max_attempts}")
    if max_attempts == 0:
        # 0 keeps the draw unbounded
        max_attempts = None
    seed = _int_env("WICHTEL_SEED")
    log_level = os.getenv("WICHTEL_LOG_LEVEL", "WARNING").strip().upper() or "WARNING"
    if log_level not in LOG_LEVELS:
        raise ValueError(
            f"WICHTEL_LOG_LEVEL must be one of {sorted(LOG_LEVELS)}, got {log_level!r}"
        )
    return RuntimeConfig(max_attempts=max_attempts, seed=seed, log_level=log_level)


def make_rng(seed: int | None = None) -> random.Random:
    return random.Random(seed)
