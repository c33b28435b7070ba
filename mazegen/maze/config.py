import os
from dataclasses import dataclass, field
from typing import Optional

from .template import DEFAULT_HEIGHT, DEFAULT_TEMPLATE, DEFAULT_WIDTH

_FALSY = {'0', 'false', 'no', 'off', ''}


def parse_seed(raw: str) -> int:
    """Decimal first (so ``007`` is 7), then prefixed forms like ``0x2a``."""
    try:
        return int(raw, 10)
    except ValueError:
        return int(raw, 0)


@dataclass
class MazeConfig:
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    template: str = field(default=DEFAULT_TEMPLATE, repr=False)
    seed: Optional[int] = None
    stamp: Optional[str] = None
    entropy: bool = False
    enable_metrics: bool = True

    @classmethod
    def from_env(cls, environ=None, **overrides) -> "MazeConfig":
        """Build a config from ``MAZE_*`` environment variables; keyword overrides win.

        MAZE_SEED (int), MAZE_STAMP, MAZE_USE_ENTROPY, MAZE_ENABLE_METRICS,
        MAZE_TEMPLATE (path to a template file).
        """
        env = os.environ if environ is None else environ
        cfg = cls()
        raw_seed = env.get('MAZE_SEED')
        if raw_seed not in (None, ''):
            try:
                cfg.seed = parse_seed(raw_seed)
            except ValueError:
                raise ValueError(f"MAZE_SEED must be an integer, got {raw_seed!r}") from None
        if env.get('MAZE_STAMP'):
            cfg.stamp = env['MAZE_STAMP']
        if 'MAZE_USE_ENTROPY' in env:
            cfg.entropy = env['MAZE_USE_ENTROPY'].lower() not in _FALSY
        if 'MAZE_ENABLE_METRICS' in env:
            cfg.enable_metrics = env['MAZE_ENABLE_METRICS'].lower() not in _FALSY
        template_path = env.get('MAZE_TEMPLATE')
        if template_path:
            with open(template_path, 'r', encoding='utf-8') as f:
                cfg.template = f.read()
        for key, value in overrides.items():
            if value is not None:
                setattr(cfg, key, value)
        return cfg


__all__ = ["MazeConfig", "parse_seed"]
