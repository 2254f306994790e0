"""
Core interfaces for the graphnexus package.

This module defines the abstract base class that describes the capability
set of a weighted undirected graph: loading, queries, and the analytical
operations built on top of them. Alternative internal representations only
need to subclass ``Graph``.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Sequence, Set, Tuple


class Graph(ABC):
    """
    Abstract base class for weighted undirected graphs.
    
    Vertices are identified by strings; equal strings denote the same vertex.
    Weights are non-negative integers.
    """
    
    @abstractmethod
    def load(self, path: str) -> None:
        """
        Replace the graph with the contents of an edge-list file.
        
        Args:
            path: Path to a file whose first line is the vertex count,
                followed by ``u v w`` lines
                
        Raises:
            GraphLoadError: If the file is unreadable or malformed
        """
        pass
    
    @abstractmethod
    def load_edges(self, edges: Sequence[str], weights: Sequence[int]) -> None:
        """
        Replace the graph with the given edges.
        
        Args:
            edges: Flattened endpoints; ``(edges[2i], edges[2i+1])`` is edge i
            weights: ``weights[i]`` is the weight of edge i
            
        Raises:
            GraphLoadError: On a size mismatch or a negative weight
        """
        pass
    
    @abstractmethod
    def get_vertex_count(self) -> int:
        pass
    
    @abstractmethod
    def has_vertex(self, v: str) -> bool:
        pass
    
    @abstractmethod
    def get_vertices(self) -> List[str]:
        """Every vertex, in order of first appearance."""
        pass
    
    @abstractmethod
    def get_edge_count(self) -> int:
        pass
    
    @abstractmethod
    def has_edge(self, u: str, v: str) -> bool:
        pass
    
    @abstractmethod
    def get_weight(self, u: str, v: str) -> int:
        """Weight of edge ``(u, v)`` or -1 if there is no such edge."""
        pass
    
    @abstractmethod
    def get_adjacent(self, u: str) -> List[str]:
        """Neighbors of ``u``; empty if ``u`` is unknown."""
        pass
    
    @abstractmethod
    def get_incident(self, u: str) -> List[Tuple[str, int]]:
        """``(neighbor, weight)`` pairs for ``u``; empty if ``u`` is unknown."""
        pass
    
    @abstractmethod
    def get_mst(self) -> List[str]:
        """
        Minimum spanning tree as a flattened pair sequence.
        
        A single-vertex graph yields a one-element list holding that vertex.
        """
        pass
    
    @abstractmethod
    def get_shortest_paths(self, s: str) -> Dict[str, int]:
        pass
    
    @abstractmethod
    def get_report(self, s: str, subgraph: Optional[Sequence[str]]) -> Optional[Set[str]]:
        """
        Vertices whose shortest distance from ``s`` is preserved by ``subgraph``.
        
        Returns:
            The set of vertices, or None for invalid arguments
        """
        pass
