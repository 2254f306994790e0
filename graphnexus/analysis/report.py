"""
Shortest-path report: which vertices keep their true distance in a subgraph.
"""

import logging
from collections import deque
from typing import Dict, List, Optional, Sequence, Set, Tuple

from ..core.interfaces import Graph
from ..core.models import iter_pairs
from .shortest_paths import dijkstra

logger = logging.getLogger(__name__)


def subgraph_distances(
    graph: Graph,
    source: str,
    subgraph: Sequence[str],
) -> Tuple[Dict[str, int], List[Tuple[str, str]]]:
    """
    Distances from ``source`` along a breadth-first traversal of ``subgraph``.
    
    The traversal follows hop order but each hop costs the full graph's
    weight for that pair. A vertex's distance is fixed when it is first
    discovered. Pairs that are not edges of ``graph`` are not traversed.
    
    Args:
        graph: The full graph, used for edge weights
        source: Traversal root
        subgraph: Flattened pair sequence
        
    Returns:
        Mapping of every vertex reached from ``source`` to its distance, and
        the pairs that were skipped because ``graph`` has no such edge
    """
    adjacency: Dict[str, Dict[str, None]] = {}
    skipped: List[Tuple[str, str]] = []
    for u, v in iter_pairs(subgraph):
        if not graph.has_edge(u, v):
            skipped.append((u, v))
            continue
        adjacency.setdefault(u, {})[v] = None
        adjacency.setdefault(v, {})[u] = None
    
    distances = {source: 0}
    queue = deque([source])
    while queue:
        u = queue.popleft()
        for v in adjacency.get(u, {}):
            if v not in distances:
                distances[v] = distances[u] + graph.get_weight(u, v)
                queue.append(v)
    
    return distances, skipped


def shortest_path_report(
    graph: Graph,
    source: str,
    subgraph: Optional[Sequence[str]],
    missing_edge_policy: str = 'skip',
) -> Optional[Set[str]]:
    """
    Find the vertices whose subgraph distance equals their true distance.
    
    Args:
        graph: The full graph
        source: Source vertex
        subgraph: Flattened pair sequence (same encoding as MST output,
            including the one-element single-vertex form)
        missing_edge_policy: ``'skip'`` ignores pairs absent from ``graph``;
            ``'reject'`` treats them as invalid arguments
        
    Returns:
        Set of vertices, ``{source}`` for a subgraph without pairs, or None when the
        source is unknown or the arguments are otherwise invalid
    """
    if not graph.has_vertex(source):
        return None
    # A lone vertex (single-vertex MST encoding) carries no edges
    if not subgraph or len(subgraph) == 1:
        return {source}
    if len(subgraph) % 2:
        logger.warning(f"Invalid report arguments: subgraph has odd length {len(subgraph)}")
        return None
    
    reached, missing = subgraph_distances(graph, source, subgraph)
    if missing:
        if missing_edge_policy == 'reject':
            logger.warning(f"Rejecting report: {len(missing)} subgraph pair(s) are not graph edges")
            return None
        logger.warning(f"Skipping {len(missing)} subgraph pair(s) that are not graph edges")
    
    true_distances = dijkstra(graph, source)
    return {v for v, dist in reached.items() if true_distances.get(v) == dist}
