"""
Multiplier resolution and graph optimization.
"""
from .resolver import MultiplierResolver, check_value, convert, resolve
from .optimizer import GraphOptimizer, optimize_graph

__all__ = [
    "MultiplierResolver",
    "GraphOptimizer",
    "check_value",
    "convert",
    "resolve",
    "optimize_graph",
]
