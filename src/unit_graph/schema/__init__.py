"""
Data models for Mini Unit Graph.
"""
from .unit import ConversionRecord, UnitInfo
from .graph import Edge, PathResult
from .conversion import ConversionResult, MultiplierResult
from .api import (
    ConvertRequest,
    ErrorResponse,
    GraphResponse,
    MultiplierRequest,
    OptimizeResponse,
    PropertiesResponse,
    UnitsResponse,
)

__all__ = [
    "ConversionRecord",
    "UnitInfo",
    "Edge",
    "PathResult",
    "ConversionResult",
    "MultiplierResult",
    "ConvertRequest",
    "MultiplierRequest",
    "PropertiesResponse",
    "UnitsResponse",
    "GraphResponse",
    "OptimizeResponse",
    "ErrorResponse",
]
