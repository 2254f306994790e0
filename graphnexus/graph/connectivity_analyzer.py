"""
Connectivity analyzer for weighted graphs.
"""

import logging
from typing import Dict, Any, List

import networkx as nx

from ..core.interfaces import Graph
from .graph_builder import GraphBuilder

logger = logging.getLogger(__name__)


class ConnectivityResult:
    """Results from connectivity analysis."""
    
    def __init__(self):
        self.connectivity_ratio = 0.0
        self.connected_components: List[List[str]] = []
        self.isolated_nodes: List[str] = []
        self.analysis_details: Dict[str, Any] = {}
    
    @property
    def is_connected(self) -> bool:
        return len(self.connected_components) <= 1
    
    @property
    def component_count(self) -> int:
        return len(self.connected_components)


class ConnectivityAnalyzer:
    """
    Analyzes connectivity properties of weighted graphs.
    """
    
    def __init__(self, builder: GraphBuilder = None):
        self.builder = builder or GraphBuilder()
    
    def analyze(self, graph: Graph) -> ConnectivityResult:
        """
        Analyze connectivity of the given graph.
        
        Args:
            graph: Graph to analyze
            
        Returns:
            ConnectivityResult with components, and the vertices inside each,
            in order of first appearance
        """
        result = ConnectivityResult()
        nx_graph = self.builder.to_networkx(graph)
        total_nodes = nx_graph.number_of_nodes()
        if total_nodes == 0:
            return result
        
        order = {v: i for i, v in enumerate(nx_graph.nodes())}
        result.connected_components = [
            sorted(component, key=order.__getitem__)
            for component in nx.connected_components(nx_graph)
        ]
        
        # Ratio of present edges to the edges of a complete graph
        result.connectivity_ratio = nx.density(nx_graph) if total_nodes > 1 else 1.0
        
        result.isolated_nodes = sorted(nx.isolates(nx_graph), key=order.__getitem__)
        
        result.analysis_details = {
            'total_nodes': total_nodes,
            'total_edges': graph.get_edge_count(),
            'component_count': result.component_count,
            'isolated_count': len(result.isolated_nodes),
        }
        logger.debug(f"Connectivity analysis: {result.analysis_details}")
        return result
