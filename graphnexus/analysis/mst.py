"""
Minimum spanning tree via Prim's algorithm.
"""

import heapq
import itertools
import logging
from typing import List

from ..core.interfaces import Graph

logger = logging.getLogger(__name__)


def prim_mst(graph: Graph) -> List[str]:
    """
    Compute a minimum spanning tree starting from the first vertex.
    
    Frontier edges are ordered by weight; equal weights leave the heap in
    the order they were pushed. Only the start vertex's connected component
    is spanned.
    
    Args:
        graph: Graph to span
        
    Returns:
        Flattened edge list ``[u0, v0, u1, v1, ...]`` in extraction order.
        An empty graph gives ``[]`` and a single-vertex graph gives a
        one-element list holding that vertex.
    """
    vertices = graph.get_vertices()
    if not vertices:
        return []
    if len(vertices) == 1:
        return [vertices[0]]
    
    start = vertices[0]
    visited = {start}
    counter = itertools.count()
    frontier = []
    for v, w in graph.get_incident(start):
        heapq.heappush(frontier, (w, next(counter), start, v))
    
    result: List[str] = []
    while frontier and len(visited) < len(vertices):
        _, _, u, v = heapq.heappop(frontier)
        if v in visited:
            continue
        
        visited.add(v)
        result.append(u)
        result.append(v)
        
        for x, w in graph.get_incident(v):
            if x not in visited:
                heapq.heappush(frontier, (w, next(counter), v, x))
    
    if len(visited) < len(vertices):
        logger.debug(
            f"MST from '{start}' spans {len(visited)} of {len(vertices)} vertices; graph is disconnected"
        )
    return result
