"""
Graph builder module for converting between graph representations.
"""

import logging
from typing import List, Optional, Tuple

import networkx as nx

from ..config.graph_config import GraphConfig
from ..core.interfaces import Graph
from .weighted_graph import WeightedGraph

logger = logging.getLogger(__name__)


class GraphBuilder:
    """
    Builds graphs from and exports graphs to other representations.
    """
    
    def __init__(self, config: Optional[GraphConfig] = None):
        self.config = config
    
    def to_edge_lists(self, graph: Graph) -> Tuple[List[str], List[int]]:
        """
        Export a graph as the parallel lists accepted by ``load_edges``.
        
        Isolated vertices are exported as zero-weight self-loops so that
        reloading the lists reproduces the vertex set.
        
        Args:
            graph: Graph to export
            
        Returns:
            ``(edges, weights)`` with ``len(edges) == 2 * len(weights)``
        """
        edges: List[str] = []
        weights: List[int] = []
        done = set()
        
        for u in graph.get_vertices():
            incident = graph.get_incident(u)
            if not incident:
                edges.extend((u, u))
                weights.append(0)
            for v, w in incident:
                if v not in done:
                    edges.extend((u, v))
                    weights.append(w)
            done.add(u)
        
        return edges, weights
    
    def to_networkx(self, graph: Graph) -> nx.Graph:
        """
        Build a NetworkX graph with ``weight`` edge attributes.
        
        Args:
            graph: Graph to convert
            
        Returns:
            Undirected NetworkX graph with the same vertices and edges
        """
        nx_graph = nx.Graph()
        for u in graph.get_vertices():
            nx_graph.add_node(u)
        for u in graph.get_vertices():
            for v, w in graph.get_incident(u):
                nx_graph.add_edge(u, v, weight=w)
        return nx_graph
    
    def from_networkx(self, nx_graph: nx.Graph, weight: str = 'weight') -> WeightedGraph:
        """
        Build a WeightedGraph from a NetworkX graph.
        
        Node labels are converted to strings. Edges without the weight
        attribute get weight 1, matching NetworkX's own default.
        
        Args:
            nx_graph: Undirected NetworkX graph
            weight: Name of the edge attribute holding the weight
            
        Returns:
            Loaded WeightedGraph
            
        Raises:
            GraphLoadError: If a weight is negative or not an integer
        """
        if nx_graph.is_directed():
            logger.warning("Converting a directed NetworkX graph; edge directions are dropped")
        
        edges: List[str] = []
        weights: List[int] = []
        for node in nx_graph.nodes():
            if nx_graph.degree(node) == 0:
                edges.extend((str(node), str(node)))
                weights.append(0)
        for u, v, data in nx_graph.edges(data=True):
            edges.extend((str(u), str(v)))
            weights.append(data.get(weight, 1))
        
        graph = WeightedGraph(self.config)
        graph.load_edges(edges, weights)
        return graph
