"""
Unit graphs and their construction.
"""
from .unit_graph import UnitGraph
from .builder import GraphBuilder, build_graph, normalize_record, validate_connectivity

__all__ = ["UnitGraph", "GraphBuilder", "build_graph", "normalize_record", "validate_connectivity"]
