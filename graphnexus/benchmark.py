"""
Performance harness for the graph engine.

Builds star-plus-random graphs of increasing size, or loads a given
edge-list file, and reports the average wall time of every operation.
"""

import argparse
import logging
import sys
import time
from typing import Callable, Dict, List, Optional, Sequence, Tuple

import numpy as np

from .config.graph_config import GraphConfig
from .core.exceptions import GraphError
from .graph.weighted_graph import WeightedGraph
from .utils.logging_utils import print_benchmark_results, setup_logging

logger = logging.getLogger(__name__)

GRAPH_SIZES = (10, 100, 1000, 10000)
ITERATIONS = 5
SEED = 42


def generate_star_graph(size: int, rng: np.random.Generator) -> Tuple[List[str], List[int]]:
    """
    Generate a connected graph: a star around vertex "0" plus ``2 * size``
    random chords with weights in ``[1, 100]``.
    
    Args:
        size: Number of vertices
        rng: Random generator
        
    Returns:
        ``(edges, weights)`` lists for ``load_edges``
    """
    edges: List[str] = []
    weights: List[int] = []
    for i in range(1, size):
        edges.extend(("0", str(i)))
        weights.append(i)
    
    us = rng.integers(0, size, size=2 * size)
    vs = rng.integers(0, size, size=2 * size)
    ws = rng.integers(1, 101, size=2 * size)
    for u, v, w in zip(us, vs, ws):
        if u != v:
            edges.extend((str(u), str(v)))
            weights.append(int(w))
    return edges, weights


def measure(operation: Callable[[], object], iterations: int = ITERATIONS) -> float:
    """Average wall time of ``operation`` in milliseconds."""
    samples = np.empty(iterations)
    for i in range(iterations):
        start = time.perf_counter()
        operation()
        samples[i] = time.perf_counter() - start
    return float(samples.mean() * 1000.0)


def benchmark_graph(
    graph: WeightedGraph,
    rng: np.random.Generator,
    iterations: int = ITERATIONS,
) -> Dict[str, float]:
    """
    Time every query and algorithm on a loaded graph.
    
    Args:
        graph: Loaded, non-empty graph
        rng: Random generator used to pick vertices
        iterations: Repetitions per operation
        
    Returns:
        Mapping of operation name to average milliseconds
    """
    vertices = graph.get_vertices()
    
    def pick() -> str:
        return vertices[int(rng.integers(0, len(vertices)))]
    
    mst = graph.get_mst()
    timings: Dict[str, float] = {
        'get_vertex_count': measure(graph.get_vertex_count, iterations),
        'get_edge_count': measure(graph.get_edge_count, iterations),
        'has_vertex': measure(lambda: graph.has_vertex(pick()), iterations),
        'get_vertices': measure(graph.get_vertices, iterations),
        'has_edge': measure(lambda: graph.has_edge(pick(), pick()), iterations),
        'get_weight': measure(lambda: graph.get_weight(pick(), pick()), iterations),
        'get_adjacent': measure(lambda: graph.get_adjacent(pick()), iterations),
        'get_mst': measure(graph.get_mst, iterations),
        'get_shortest_paths': measure(lambda: graph.get_shortest_paths(pick()), iterations),
        'get_report': measure(lambda: graph.get_report(pick(), mst), iterations),
    }
    return timings


def run_generated(
    sizes: Sequence[int] = GRAPH_SIZES,
    iterations: int = ITERATIONS,
    seed: int = SEED,
    config: Optional[GraphConfig] = None,
) -> Dict[int, Dict[str, float]]:
    """Benchmark generated graphs of each size and print the results."""
    rng = np.random.default_rng(seed)
    results: Dict[int, Dict[str, float]] = {}
    for size in sizes:
        edges, weights = generate_star_graph(size, rng)
        graph = WeightedGraph(config)
        timings = {'load_edges': measure(lambda: graph.load_edges(edges, weights), 1)}
        timings.update(benchmark_graph(graph, rng, iterations))
        results[size] = timings
        print_benchmark_results(f"Graph with {size} vertices", timings)
    return results


def run_file(
    path: str,
    iterations: int = ITERATIONS,
    seed: int = SEED,
    config: Optional[GraphConfig] = None,
) -> Dict[str, float]:
    """Benchmark a graph loaded from an edge-list file and print the results."""
    rng = np.random.default_rng(seed)
    graph = WeightedGraph(config)
    timings = {'load': measure(lambda: graph.load(path), 1)}
    if graph.get_vertex_count() == 0:
        logger.warning(f"Graph in {path} is empty; skipping query timings")
    else:
        timings.update(benchmark_graph(graph, rng, iterations))
    print_benchmark_results(f"Graph from {path}", timings)
    return timings


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="graphnexus-bench", description="Time graph engine operations.")
    parser.add_argument("--file", type=str, default=None, help="Edge-list file to benchmark")
    parser.add_argument("--sizes", type=int, nargs="+", default=list(GRAPH_SIZES))
    parser.add_argument("--iterations", type=int, default=ITERATIONS)
    parser.add_argument("--seed", type=int, default=SEED)
    parser.add_argument("--log-level", type=str, default="WARNING")
    args = parser.parse_args(argv)
    
    setup_logging(args.log_level)
    try:
        if args.file:
            run_file(args.file, args.iterations, args.seed)
        else:
            run_generated(args.sizes, args.iterations, args.seed)
    except GraphError as e:
        logger.error(f"An error occurred during benchmarking: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
