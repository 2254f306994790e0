"""
Subgraph validator for shortest-path reports.
"""

from typing import Optional, Sequence

from ..core.interfaces import Graph
from ..core.models import iter_pairs
from .base_validator import BaseValidator
from .validation_result import ValidationResult


class SubgraphValidator(BaseValidator):
    """
    Validates a source vertex and a flattened subgraph against a full graph.
    """
    
    def validate(self, graph: Graph, source: str, subgraph: Optional[Sequence[str]]) -> ValidationResult:
        """
        Validate report arguments.
        
        Args:
            graph: The full graph
            source: Source vertex of the report
            subgraph: Flattened pair sequence, may be None
        
        Returns:
            ValidationResult. Pairs absent from the full graph are warnings
            whose subjects are those pairs; they are also listed in
            ``details['missing_pairs']``.
        """
        result = self._create_result()
        result.details['missing_pairs'] = []
        
        if not graph.has_vertex(source):
            result.add_error(f"Source vertex '{source}' is not in the graph", [source])
        
        if not subgraph:
            return result
        
        if len(subgraph) > 1 and len(subgraph) % 2:
            result.add_error(
                f"Subgraph has odd length {len(subgraph)}; expected vertex pairs",
                [subgraph[-1]],
            )
        
        missing = [(u, v) for u, v in iter_pairs(subgraph) if not graph.has_edge(u, v)]
        if missing:
            result.details['missing_pairs'] = missing
            result.add_warning(f"Subgraph pairs absent from the graph: {self._format_items(missing)}", missing)
        
        return result
