from typing import Dict


def init_metrics() -> Dict[str, int | float]:
    return {
        'runs': 0,
        'blocks_carved': 0,
        'flood_blocks': 0,
        'turns': 0,
        'extended_runs': 0,
        'wall_tiles_initial': 0,
        'wall_tiles_final': 0,
        'runtime_ms': 0.0,
    }
