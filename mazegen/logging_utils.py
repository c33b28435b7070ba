"""Minimal structured logging helper.

Emits key=value pairs (or one JSON object per line) with a timestamp and level.
Generation code logs through this instead of the stdlib logging tree so that a
library caller sees nothing unless it opts in via the environment.

Usage:
    from mazegen.logging_utils import get_logger
    log = get_logger("maze")
    log.info(event="maze_generated", seed=42, runs=17)

Environment:
    MAZEGEN_LOG_LEVEL  debug|info|warn|error (default: warn)
    MAZEGEN_LOG_JSON   1/true/yes/on to emit JSON records

Reserved keys: level, ts, logger.
"""

from __future__ import annotations

import json
import os
import sys
import time

LEVELS = {"debug": 10, "info": 20, "warn": 30, "error": 40}
_TRUTHY = ("1", "true", "TRUE", "yes", "on")


def _current_level() -> int:
    return LEVELS.get(os.getenv("MAZEGEN_LOG_LEVEL", "warn").lower(), 30)


def _json_mode() -> bool:
    return os.getenv("MAZEGEN_LOG_JSON", "0") in _TRUTHY


def _format(level: str, **fields) -> str:
    if _json_mode():
        rec = {k: v for k, v in fields.items() if v is not None}
        rec["level"] = level
        rec["ts"] = int(time.time())
        return json.dumps(rec, separators=(",", ":"), default=repr)
    parts = [f"level={level}", f"ts={int(time.time())}"]
    for k, v in fields.items():
        if v is None:
            continue
        if isinstance(v, (int, float)):
            parts.append(f"{k}={v}")
        else:
            s = str(v).replace(" ", "_")
            parts.append(f"{k}={s}")
    return " ".join(parts)


class _Logger:
    def __init__(self, name: str | None = None):
        self.name = name or "mazegen"

    def enabled(self, lvl: str) -> bool:
        return LEVELS[lvl] >= _current_level()

    def _log(self, lvl: str, **fields):
        if not self.enabled(lvl):
            return
        if "logger" not in fields:
            fields["logger"] = self.name
        print(_format(lvl, **fields), file=sys.stdout if lvl != "error" else sys.stderr)

    def debug(self, **fields):
        self._log("debug", **fields)

    def info(self, **fields):
        self._log("info", **fields)

    def warn(self, **fields):
        self._log("warn", **fields)

    def error(self, **fields):
        self._log("error", **fields)


_LOGGER_CACHE = {}


def get_logger(name: str) -> _Logger:
    if name not in _LOGGER_CACHE:
        _LOGGER_CACHE[name] = _Logger(name)
    return _LOGGER_CACHE[name]


log = get_logger("mazegen")
