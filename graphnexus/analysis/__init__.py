"""
Analysis algorithms over the Graph interface.
"""

from .mst import prim_mst
from .shortest_paths import dijkstra
from .report import shortest_path_report, subgraph_distances

__all__ = [
    'prim_mst',
    'dijkstra',
    'shortest_path_report',
    'subgraph_distances',
]
