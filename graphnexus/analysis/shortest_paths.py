"""
Single-source shortest paths via Dijkstra's algorithm.
"""

import heapq
import logging
from typing import Dict

from ..core.constants import INFINITY
from ..core.interfaces import Graph

logger = logging.getLogger(__name__)


def dijkstra(graph: Graph, source: str) -> Dict[str, int]:
    """
    Compute shortest distances from ``source`` to every vertex.
    
    Args:
        graph: Graph with non-negative integer weights
        source: Source vertex
        
    Returns:
        Mapping of every vertex to its distance; unreachable vertices map to
        ``INFINITY``. Empty if ``source`` is not in the graph.
    """
    if not graph.has_vertex(source):
        logger.debug(f"Shortest paths requested from unknown vertex '{source}'")
        return {}
    
    distances = {v: INFINITY for v in graph.get_vertices()}
    distances[source] = 0
    queue = [(0, source)]
    
    while queue:
        dist, u = heapq.heappop(queue)
        # Stale entry superseded by a shorter path
        if dist > distances[u]:
            continue
        
        for v, w in graph.get_incident(u):
            new_dist = dist + w
            if new_dist < distances[v]:
                distances[v] = new_dist
                heapq.heappush(queue, (new_dist, v))
    
    return distances
