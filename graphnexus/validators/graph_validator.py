"""
Invariant checks for a loaded graph.
"""

from ..core.interfaces import Graph
from .base_validator import BaseValidator
from .validation_result import ValidationResult


class GraphValidator(BaseValidator):
    """
    Checks the structural invariants of a loaded graph.
    
    Errors are reported for asymmetric adjacency entries and negative
    weights. Self-loops are reported as warnings because they break the
    ``edge_count * 2 == sum of degrees`` identity.
    """
    
    def validate(self, graph: Graph) -> ValidationResult:
        """
        Validate a graph.
        
        Args:
            graph: Graph to check
        
        Returns:
            ValidationResult whose issues carry the offending pairs, edges or
            vertices; ``details`` holds the degree sum and edge count
        """
        result = self._create_result()
        asymmetric = []
        negative = []
        self_loops = []
        degree_sum = 0
        
        for u in graph.get_vertices():
            for v, w in graph.get_incident(u):
                degree_sum += 1
                if u == v:
                    self_loops.append(u)
                if w < 0:
                    negative.append((u, v, w))
                if graph.get_weight(v, u) != w:
                    asymmetric.append((u, v))
        
        if asymmetric:
            result.add_error(f"Asymmetric edges: {self._format_items(asymmetric)}", asymmetric)
        if negative:
            result.add_error(f"Negative weights: {self._format_items(negative)}", negative)
        if self_loops:
            result.add_warning(f"Self-loops on: {self._format_items(self_loops)}", self_loops)
        elif degree_sum != 2 * graph.get_edge_count():
            result.add_error(
                f"Degree sum {degree_sum} does not match edge count {graph.get_edge_count()}"
            )
        
        result.details['degree_sum'] = degree_sum
        result.details['edge_count'] = graph.get_edge_count()
        return result
