"""
Command line driver that loads edge-list files and prints their analysis.
"""

import argparse
import logging
import sys
from typing import List, Optional

from rich.console import Console

from .config.graph_config import GraphConfig
from .core.exceptions import ConfigurationError, GraphError
from .graph.connectivity_analyzer import ConnectivityAnalyzer
from .graph.weighted_graph import WeightedGraph
from .utils.logging_utils import (
    print_graph_statistics,
    print_mst,
    print_report,
    print_shortest_paths,
    setup_logging,
)
from .validators.graph_validator import GraphValidator
from .validators.subgraph_validator import SubgraphValidator

logger = logging.getLogger(__name__)


def analyze_file(
    path: str,
    config: GraphConfig,
    source: Optional[str] = None,
    max_rows: Optional[int] = None,
    console: Optional[Console] = None,
) -> WeightedGraph:
    """
    Load one edge-list file and print its analysis.
    
    Args:
        path: Edge-list file
        config: Configuration used for loading and reporting
        source: Source vertex; defaults to the first vertex of the graph
        max_rows: Maximum rows per printed table
        console: Console to print to
        
    Returns:
        The loaded graph
        
    Raises:
        GraphError: If loading fails or the source vertex is unknown
    """
    console = console or Console()
    graph = WeightedGraph(config)
    graph.load(path)
    
    vertices = graph.get_vertices()
    if not vertices:
        console.print(f"Graph in {path} has no vertices")
        return graph
    
    start = source if source is not None else vertices[0]
    if not graph.has_vertex(start):
        raise GraphError(f"Source vertex '{start}' is not in {path}")
    
    distances = graph.get_shortest_paths(start)
    mst = graph.get_mst()
    report = graph.get_report(start, mst)
    
    print_shortest_paths(start, distances, console=console, max_rows=max_rows)
    print_mst(mst, total_weight=graph.total_weight(mst), console=console, max_rows=max_rows)
    print_report(start, report, console=console)
    
    connectivity = ConnectivityAnalyzer().analyze(graph)
    if not connectivity.is_connected:
        console.print(
            f"Graph has {connectivity.component_count} components; "
            f"the MST spans only the component of '{vertices[0]}'",
            style="yellow",
            markup=False,
        )
    
    validation = GraphValidator().validate(graph)
    validation.merge(SubgraphValidator().validate(graph, start, mst))
    for issue in validation.errors + validation.warnings:
        logger.warning(issue)
    
    stats = [
        ("Vertex count", graph.get_vertex_count()),
        ("Edge count", graph.get_edge_count()),
        ("Components", connectivity.component_count),
        ("Isolated vertices", len(connectivity.isolated_nodes)),
        (f"Has vertex '{start}'", graph.has_vertex(start)),
    ]
    adjacent = graph.get_adjacent(start)
    if adjacent:
        neighbor = adjacent[0]
        stats.append((f"Has edge ({start},{neighbor})", graph.has_edge(start, neighbor)))
        stats.append((f"Weight of edge ({start},{neighbor})", graph.get_weight(start, neighbor)))
    stats.append((f"Adjacent to '{start}'", ", ".join(adjacent) or "(none)"))
    print_graph_statistics(stats, title=f"Graph statistics for {path}", console=console)
    return graph


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="graphnexus",
        description="Analyze weighted undirected graphs stored as edge-list files.",
    )
    parser.add_argument("files", nargs="+", help="Edge-list files to analyze")
    parser.add_argument("--source", type=str, default=None, help="Source vertex (default: first vertex)")
    parser.add_argument("--config", type=str, default=None, help="JSON configuration file")
    parser.add_argument("--max-rows", type=int, default=None, help="Maximum rows per table")
    parser.add_argument("--log-level", type=str, default=None, help="Logging level (overrides config)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    
    try:
        config = GraphConfig.from_file(args.config) if args.config else GraphConfig()
        if args.log_level:
            config.update_settings(log_level=args.log_level)
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    setup_logging(config.log_level)
    
    console = Console()
    failed = 0
    for path in args.files:
        console.rule(f"Testing file: {path}")
        try:
            analyze_file(path, config, source=args.source, max_rows=args.max_rows, console=console)
        except GraphError as e:
            logger.error(f"An error occurred while processing {path}: {e}")
            failed += 1
    
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
