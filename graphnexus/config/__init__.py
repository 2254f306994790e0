"""
Configuration package for graphnexus.
"""

from .graph_config import GraphConfig, MISSING_EDGE_POLICIES

__all__ = [
    'GraphConfig',
    'MISSING_EDGE_POLICIES',
]
