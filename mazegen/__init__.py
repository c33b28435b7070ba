"""Arcade maze generator.

Public surface lives in :mod:`mazegen.maze`; this module only re-exports the
common entry points.
"""

from .maze import FullMap, HalfGrid, MazeConfig, generate, generate_from_config  # noqa: F401

__version__ = "0.4.0"

__all__ = ["FullMap", "HalfGrid", "MazeConfig", "generate", "generate_from_config", "__version__"]
