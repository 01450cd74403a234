# benchmark.py

import cProfile
import pstats

import numpy as np

import constants as C
import logger as log
from kd_tree import KdTree
from point_io import random_points, random_rectangle
from point_set import PointSet
from stopwatch import Stopwatch

def _time_structure(structure, points, rectangles, queries):
    """Builds the structure and runs every query against it, timing each phase."""
    timings = {}
    watch = Stopwatch()

    with watch:
        for p in points:
            structure.insert(p)
    timings['insert'] = watch.total_seconds

    watch.reset()
    with watch:
        range_results = [structure.range(rect) for rect in rectangles]
    timings['range'] = watch.total_seconds

    watch.reset()
    with watch:
        nearest_results = [structure.nearest(q) for q in queries]
    timings['nearest'] = watch.total_seconds

    return timings, range_results, nearest_results

def _same_nearest(query, a, b):
    """Two nearest answers agree if both are empty or both are equally far away."""
    if a is None or b is None:
        return a is None and b is None
    return a.distance_squared_to(query) == b.distance_squared_to(query)

def run_benchmark(point_count=C.BENCHMARK_POINT_COUNT, query_count=C.BENCHMARK_QUERY_COUNT,
                  seed=C.RANDOM_SEED, max_rect_side=C.BENCHMARK_MAX_RECT_SIDE):
    """
    Times KdTree against the brute-force PointSet on the same random workload
    and cross-checks every answer.

    Returns a dict with the workload sizes, per-structure timings (seconds per
    phase) and the number of range and nearest answers that disagree.
    """
    rng = np.random.default_rng(seed)
    points = random_points(point_count, seed=rng)
    rectangles = [random_rectangle(rng, max_rect_side) for _ in range(query_count)]
    queries = random_points(query_count, seed=rng)

    total = Stopwatch().start()
    log.set_stopwatch(total)
    try:
        log.log(f"Benchmark: {point_count} points, {query_count} range and nearest queries.")

        tree_timings, tree_ranges, tree_nearest = _time_structure(KdTree(), points, rectangles, queries)
        log.log(f"KdTree done: insert {tree_timings['insert']:.4f}s, range {tree_timings['range']:.4f}s, nearest {tree_timings['nearest']:.4f}s")

        set_timings, set_ranges, set_nearest = _time_structure(PointSet(), points, rectangles, queries)
        log.log(f"PointSet done: insert {set_timings['insert']:.4f}s, range {set_timings['range']:.4f}s, nearest {set_timings['nearest']:.4f}s")

        range_mismatches = sum(1 for a, b in zip(tree_ranges, set_ranges) if set(a) != set(b))
        nearest_mismatches = sum(1 for q, a, b in zip(queries, tree_nearest, set_nearest)
                                 if not _same_nearest(q, a, b))
        if range_mismatches or nearest_mismatches:
            log.log(f"WARNING: {range_mismatches} range and {nearest_mismatches} nearest answers disagree.")
        else:
            log.log("All answers agree.")
    finally:
        total.stop()
        log.set_stopwatch(None)

    return {
        'point_count': point_count,
        'query_count': query_count,
        'timings': {'kd_tree': tree_timings, 'point_set': set_timings},
        'range_mismatches': range_mismatches,
        'nearest_mismatches': nearest_mismatches,
        'total_seconds': total.total_seconds,
    }

def profile_benchmark(line_count=C.PROFILER_PRINT_LINE_COUNT, **kwargs):
    """Runs run_benchmark under cProfile and prints the costliest calls."""
    profiler = cProfile.Profile()
    try:
        result = profiler.runcall(run_benchmark, **kwargs)
    finally:
        print("\n\n--- PROFILER REPORT ---")
        stats = pstats.Stats(profiler)
        # Sort the stats by the cumulative time spent in each function
        stats.sort_stats(pstats.SortKey.CUMULATIVE)
        stats.print_stats(line_count)
    return result
