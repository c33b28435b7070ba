import statistics
import time

import pytest

from mazegen.maze import DEFAULT_TEMPLATE, MazeConfig, PcgSource, generate, generate_from_config

# Simple performance guardrail. Not a strict micro-benchmark; aims to catch large regressions
# such as the connection graph going quadratic in the number of anchors.
# Adjust thresholds if CI hardware differs significantly.

SEEDS = [0, 7, 13, 42, 12345]
MAX_SECONDS_PER = 2.0
MEDIAN_MAX_MS = 750.0


@pytest.mark.performance
def test_full_board_generation_time():
    timings = []
    for s in SEEDS:
        start = time.perf_counter()
        full = generate(DEFAULT_TEMPLATE, PcgSource(s))
        elapsed = time.perf_counter() - start
        timings.append(elapsed)
        assert full.height == 31
        assert elapsed < MAX_SECONDS_PER, f"Seed {s} took {elapsed:.3f}s (> {MAX_SECONDS_PER}s)"


@pytest.mark.performance
def test_runtime_metric_median():
    runtimes = [generate_from_config(MazeConfig(seed=s))[1]['runtime_ms'] for s in SEEDS]
    median_rt = statistics.median(runtimes)
    assert median_rt < MEDIAN_MAX_MS, f"Median runtime {median_rt}ms exceeded {MEDIAN_MAX_MS}ms (runtimes={runtimes})"
