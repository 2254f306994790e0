"""
Validators package for graph diagnostics.
"""

from .base_validator import BaseValidator
from .graph_validator import GraphValidator
from .subgraph_validator import SubgraphValidator
from .validation_result import ValidationIssue, ValidationResult, ValidationSeverity

__all__ = [
    'BaseValidator',
    'GraphValidator',
    'SubgraphValidator',
    'ValidationIssue',
    'ValidationResult',
    'ValidationSeverity',
]
