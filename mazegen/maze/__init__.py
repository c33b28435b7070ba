"""Public maze package interface.

    from mazegen.maze import generate, PcgSource, DEFAULT_TEMPLATE
    full = generate(DEFAULT_TEMPLATE, PcgSource(42))

``generate`` is deterministic for a deterministic source; ``generate_from_config``
resolves the source from a ``MazeConfig`` and also returns generation metrics.
"""

from __future__ import annotations

from typing import Any, Dict, Tuple

from ..logging_utils import get_logger
from .config import MazeConfig
from .grid import HalfGrid
from .mirror import FullMap, mirror
from .render import render_color, render_text
from .rng import BUILD_STAMP, EntropySource, PcgSource, RandomSource, make_source, seed_from_stamp
from .template import DEFAULT_HEIGHT, DEFAULT_TEMPLATE, DEFAULT_WIDTH, TemplateError, parse_template
from .tiles import Position

log = get_logger("maze")


def generate(
    template: str,
    random_source: RandomSource,
    width: int = DEFAULT_WIDTH,
    height: int = DEFAULT_HEIGHT,
) -> FullMap:
    grid = HalfGrid.from_template(template, random_source, width=width, height=height)
    grid.generate_walls()
    return mirror(grid.walls)


def generate_from_config(config: MazeConfig) -> Tuple[FullMap, Dict[str, Any]]:
    source = make_source(config.seed, stamp=config.stamp, entropy=config.entropy)
    grid = HalfGrid.from_template(
        config.template,
        source,
        width=config.width,
        height=config.height,
        enable_metrics=config.enable_metrics,
    )
    runs = grid.generate_walls()
    full = mirror(grid.walls)
    metrics = dict(grid.metrics)
    log.info(
        event="maze_generated",
        source=repr(source),
        width=full.width,
        height=full.height,
        runs=runs,
        runtime_ms=metrics.get('runtime_ms'),
    )
    return full, metrics


__all__ = [
    "BUILD_STAMP",
    "DEFAULT_HEIGHT",
    "DEFAULT_TEMPLATE",
    "DEFAULT_WIDTH",
    "EntropySource",
    "FullMap",
    "HalfGrid",
    "MazeConfig",
    "PcgSource",
    "Position",
    "RandomSource",
    "TemplateError",
    "generate",
    "generate_from_config",
    "make_source",
    "mirror",
    "parse_template",
    "render_color",
    "render_text",
    "seed_from_stamp",
]
