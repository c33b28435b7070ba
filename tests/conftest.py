import os
import sys

import pytest

# Ensure repository root importable early
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from mazegen.maze import DEFAULT_TEMPLATE, parse_template  # noqa: E402


@pytest.fixture(autouse=True)
def _quiet_logs(monkeypatch):
    # Tests that inspect log output opt back in explicitly
    monkeypatch.setenv("MAZEGEN_LOG_LEVEL", "warn")
    monkeypatch.delenv("MAZEGEN_LOG_JSON", raising=False)
    for key in ("MAZE_SEED", "MAZE_STAMP", "MAZE_USE_ENTROPY", "MAZE_ENABLE_METRICS", "MAZE_TEMPLATE"):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture(scope="session")
def seed_walls():
    """Parsed default template (left half, walls[y][x])."""
    return parse_template(DEFAULT_TEMPLATE)
