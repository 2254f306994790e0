"""
GraphNexus - Weighted Undirected Graph Analysis

A small library for loading weighted undirected graphs with string vertices
and answering analytical queries over them.

Key Features:
- Adjacency-map graph engine with strict, all-or-nothing loading
- Prim minimum spanning tree
- Dijkstra single-source shortest paths
- Report of vertices whose shortest distance a subgraph preserves
- NetworkX conversion, connectivity and invariant diagnostics

Architecture:
- core/: Interface, models, constants and exceptions
- graph/: Graph engine, file reader, conversion and connectivity
- analysis/: MST, shortest paths and report algorithms
- validators/: Invariant and argument diagnostics
- config/: Configuration management

Example Usage:
    from graphnexus import WeightedGraph
    
    graph = WeightedGraph()
    graph.load_edges(["a", "b", "b", "c", "c", "a"], [1, 2, 3])
    
    graph.get_shortest_paths("a")      # {'a': 0, 'b': 1, 'c': 3}
    mst = graph.get_mst()              # ['a', 'b', 'b', 'c']
    graph.get_report("a", mst)         # {'a', 'b', 'c'}
"""

# Core interface, models and exceptions
from .core.interfaces import Graph
from .core.models import Edge, iter_pairs, flatten_pairs
from .core.constants import INFINITY, MISSING_WEIGHT
from .core.exceptions import (
    GraphError,
    GraphLoadError,
    MalformedInputError,
    InvalidWeightError,
    VertexCountMismatchError,
    SizeMismatchError,
    GraphIOError,
    ConfigurationError,
)

from .config.graph_config import GraphConfig

# Main graph implementation
from .graph.weighted_graph import WeightedGraph
from .graph.graph_builder import GraphBuilder
from .graph.connectivity_analyzer import ConnectivityAnalyzer, ConnectivityResult

from .validators import GraphValidator, SubgraphValidator, ValidationIssue, ValidationResult

__version__ = "1.0.0"

__all__ = [
    # Interface and models
    'Graph',
    'Edge',
    'iter_pairs',
    'flatten_pairs',
    'INFINITY',
    'MISSING_WEIGHT',
    
    # Exceptions
    'GraphError',
    'GraphLoadError',
    'MalformedInputError',
    'InvalidWeightError',
    'VertexCountMismatchError',
    'SizeMismatchError',
    'GraphIOError',
    'ConfigurationError',
    
    # Main classes
    'GraphConfig',
    'WeightedGraph',
    'GraphBuilder',
    'ConnectivityAnalyzer',
    'ConnectivityResult',
    'GraphValidator',
    'SubgraphValidator',
    'ValidationIssue',
    'ValidationResult',
]

# Module configuration
import logging
logging.getLogger(__name__).addHandler(logging.NullHandler())
