"""
Graph Module - Weighted Graph Storage and Conversion

Contains the adjacency-map graph engine, the edge-list file reader and the
components that convert and inspect loaded graphs.
"""

from .weighted_graph import WeightedGraph
from .edge_list_reader import EdgeListReader
from .graph_builder import GraphBuilder
from .connectivity_analyzer import ConnectivityAnalyzer, ConnectivityResult

__all__ = [
    'WeightedGraph',
    'EdgeListReader',
    'GraphBuilder',
    'ConnectivityAnalyzer',
    'ConnectivityResult',
]
