"""
Adjacency-map implementation of the Graph interface.
"""

import logging
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Set, Tuple, Union

from ..analysis import dijkstra, prim_mst, shortest_path_report
from ..config.graph_config import GraphConfig
from ..core.constants import MISSING_WEIGHT
from ..core.exceptions import (
    GraphLoadError,
    InvalidWeightError,
    MalformedInputError,
    SizeMismatchError,
    VertexCountMismatchError,
)
from ..core.interfaces import Graph
from ..core.models import Edge, iter_pairs
from .edge_list_reader import EdgeListReader

logger = logging.getLogger(__name__)

Adjacency = Dict[str, Dict[str, int]]


class WeightedGraph(Graph):
    """
    Weighted undirected graph stored as a mapping of vertex to neighbor weights.
    
    Every edge ``(u, v, w)`` is stored as ``u -> {v: w}`` and ``v -> {u: w}``.
    Loading replaces the whole structure; nothing else mutates it, so a
    loaded instance can be shared by concurrent readers. A load must not run
    concurrently with anything else on the same instance.
    """
    
    def __init__(self, config: Optional[GraphConfig] = None):
        self.config = config or GraphConfig()
        self._adjacency: Adjacency = {}
        self._reader = EdgeListReader(
            encoding=self.config.encoding,
            skip_blank_lines=self.config.skip_blank_lines,
        )
    
    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------
    def load(self, path: Union[str, Path]) -> None:
        self._adjacency = {}
        try:
            declared, rows = self._reader.read(path)
            adjacency = self._build_adjacency(rows)
            if len(adjacency) != declared:
                raise VertexCountMismatchError(
                    f"Declared vertex count {declared} does not match actual vertex count {len(adjacency)}",
                    details={'declared': declared, 'actual': len(adjacency)},
                )
        except GraphLoadError as e:
            logger.error(f"Failed to load graph from {path}: {e}")
            raise
        
        self._adjacency = adjacency
        logger.info(
            f"Graph loaded from {path}: {self.get_vertex_count()} vertices, {self.get_edge_count()} edges"
        )
    
    def load_edges(self, edges: Sequence[str], weights: Sequence[int]) -> None:
        self._adjacency = {}
        try:
            if len(edges) != 2 * len(weights):
                raise SizeMismatchError(
                    f"Mismatch between edges and weights lists: {len(edges)} endpoints for {len(weights)} weights",
                    details={'edges': len(edges), 'weights': len(weights)},
                )
            rows = [(u, v, w) for (u, v), w in zip(iter_pairs(edges), weights)]
            adjacency = self._build_adjacency(rows)
        except GraphLoadError as e:
            logger.error(f"Failed to load graph from edge lists: {e}")
            raise
        
        self._adjacency = adjacency
        logger.info(
            f"Graph loaded from edge lists: {self.get_vertex_count()} vertices, {self.get_edge_count()} edges"
        )
    
    @staticmethod
    def _build_adjacency(rows: Iterable[Tuple[str, str, int]]) -> Adjacency:
        """
        Build a fresh adjacency map from ``(u, v, w)`` rows.
        
        A zero-weight self-loop only registers its vertex. Repeated pairs keep
        the last weight.
        """
        adjacency: Adjacency = {}
        for index, (u, v, w) in enumerate(rows):
            if not isinstance(u, str) or not isinstance(v, str):
                raise MalformedInputError(
                    f"Edge {index}: vertex identifiers must be strings, got {u!r}, {v!r}",
                    details={'edge': index},
                )
            if isinstance(w, bool) or not isinstance(w, int):
                raise MalformedInputError(
                    f"Edge {index}: weight {w!r} is not an integer",
                    details={'edge': index, 'weight': w},
                )
            if w < 0:
                raise InvalidWeightError(
                    f"Edge {index}: negative edge weight {w} not allowed",
                    details={'edge': index, 'weight': w},
                )
            
            if u == v and w == 0:
                adjacency.setdefault(u, {})
                continue
            adjacency.setdefault(u, {})[v] = w
            adjacency.setdefault(v, {})[u] = w
        
        return adjacency
    
    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def get_vertex_count(self) -> int:
        return len(self._adjacency)
    
    def has_vertex(self, v: str) -> bool:
        return v in self._adjacency
    
    def get_vertices(self) -> List[str]:
        return list(self._adjacency)
    
    def get_edge_count(self) -> int:
        # Each undirected edge is stored twice
        return sum(len(neighbors) for neighbors in self._adjacency.values()) // 2
    
    def has_edge(self, u: str, v: str) -> bool:
        return v in self._adjacency.get(u, {})
    
    def get_weight(self, u: str, v: str) -> int:
        return self._adjacency.get(u, {}).get(v, MISSING_WEIGHT)
    
    def get_adjacent(self, u: str) -> List[str]:
        return list(self._adjacency.get(u, {}))
    
    def get_incident(self, u: str) -> List[Tuple[str, int]]:
        return list(self._adjacency.get(u, {}).items())
    
    def edges(self) -> Iterator[Edge]:
        """Yield each undirected edge once, in order of first appearance."""
        done: Set[str] = set()
        for u, neighbors in self._adjacency.items():
            for v, w in neighbors.items():
                if v not in done:
                    yield Edge(u, v, w)
            done.add(u)
    
    def total_weight(self, subgraph: Sequence[str]) -> Optional[int]:
        """
        Sum of full-graph weights over a flattened pair sequence.
        
        Returns:
            The total, or None if any pair is not an edge of this graph
        """
        total = 0
        for u, v in iter_pairs(subgraph):
            w = self.get_weight(u, v)
            if w == MISSING_WEIGHT:
                return None
            total += w
        return total
    
    # ------------------------------------------------------------------
    # Analysis
    # ------------------------------------------------------------------
    def get_mst(self) -> List[str]:
        return prim_mst(self)
    
    def get_shortest_paths(self, s: str) -> Dict[str, int]:
        return dijkstra(self, s)
    
    def get_report(self, s: str, subgraph: Optional[Sequence[str]]) -> Optional[Set[str]]:
        return shortest_path_report(
            self, s, subgraph, missing_edge_policy=self.config.missing_edge_policy
        )
    
    def __contains__(self, v: str) -> bool:
        return self.has_vertex(v)
    
    def __len__(self) -> int:
        return self.get_vertex_count()
    
    def __repr__(self) -> str:
        return f"WeightedGraph(vertices={self.get_vertex_count()}, edges={self.get_edge_count()})"
