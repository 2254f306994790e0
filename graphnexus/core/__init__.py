"""
Core components for weighted graph modeling.

This package provides the capability-set interface, the data models and the
exception taxonomy shared by every graph representation.
"""

from .interfaces import Graph
from .models import Edge, iter_pairs, flatten_pairs
from .exceptions import (
    GraphError,
    GraphLoadError,
    MalformedInputError,
    InvalidWeightError,
    VertexCountMismatchError,
    SizeMismatchError,
    GraphIOError,
    ConfigurationError,
)

__all__ = [
    'Graph',
    'Edge',
    'iter_pairs',
    'flatten_pairs',
    'GraphError',
    'GraphLoadError',
    'MalformedInputError',
    'InvalidWeightError',
    'VertexCountMismatchError',
    'SizeMismatchError',
    'GraphIOError',
    'ConfigurationError',
]
