# app/state.py
from __future__ import annotations
from dataclasses import dataclass, asdict
from enum import Enum
from pathlib import Path
import json
import logging

DEFAULT_FORMAT = "HH:mm:ss"
DEFAULT_INTERVAL_MS = 1000

_CONFIG_FILE = Path("stopwatch.json")


class StopWatchState(Enum):
    STOPPED = 0
    STARTED = 1
    PAUSED = 2


def validate_format(fmt) -> str:
    if not isinstance(fmt, str) or not fmt:
        raise ValueError(f"Format must be a non-empty string, got {fmt!r}")
    return fmt


def validate_interval(interval_ms) -> int:
    # bool is an int subclass; reject it explicitly
    if isinstance(interval_ms, bool) or not isinstance(interval_ms, int):
        raise ValueError(f"Interval must be an integer, got {interval_ms!r}")
    if interval_ms <= 0:
        raise ValueError(f"Interval must be positive, got {interval_ms}")
    return interval_ms


@dataclass
class StopWatchConfig:
    format: str = DEFAULT_FORMAT
    interval_ms: int = DEFAULT_INTERVAL_MS

    def __post_init__(self):
        validate_format(self.format)
        validate_interval(self.interval_ms)


def load_config(path: Path = _CONFIG_FILE) -> StopWatchConfig:
    """Load stopwatch settings from JSON; defaults when missing or unreadable."""
    path = Path(path)
    if not path.exists():
        return StopWatchConfig()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError("expected a JSON object")
        return StopWatchConfig(
            format=data.get("format", DEFAULT_FORMAT),
            interval_ms=data.get("interval_ms", DEFAULT_INTERVAL_MS),
        )
    except (OSError, ValueError) as e:
        logging.warning("Ignoring invalid config %s: %s", path, e)
        return StopWatchConfig()


def save_config(config: StopWatchConfig, path: Path = _CONFIG_FILE) -> None:
    Path(path).write_text(
        json.dumps(asdict(config), ensure_ascii=False, indent=2), encoding="utf-8"
    )
