"""
Custom exceptions for the graphnexus package.
"""


class GraphError(Exception):
    """Base exception class for graph engine errors."""
    pass


class GraphLoadError(GraphError):
    """Raised when a graph cannot be loaded."""
    
    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.details = details or {}


class MalformedInputError(GraphLoadError):
    """Raised when input has the wrong shape or an unparsable value."""
    pass


class InvalidWeightError(GraphLoadError):
    """Raised when an edge weight is negative."""
    pass


class VertexCountMismatchError(GraphLoadError):
    """Raised when the declared vertex count differs from the loaded one."""
    pass


class SizeMismatchError(GraphLoadError):
    """Raised when the edge list is not exactly twice the weight list."""
    pass


class GraphIOError(GraphLoadError):
    """Raised when the underlying source cannot be read."""
    pass


class ConfigurationError(GraphError):
    """Raised when configuration is invalid or missing."""
    pass
