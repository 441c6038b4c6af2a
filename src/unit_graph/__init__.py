"""
Mini Unit Graph: unit conversion derived from sparse factors over per-property graphs.
"""
from .config import Config
from .converter import UnitConverter
from .conversion import GraphOptimizer, MultiplierResolver, convert, optimize_graph, resolve
from .errors import (
    AmbiguousProperty,
    ConfigError,
    DisconnectedGraph,
    InvalidFactor,
    InvalidRecord,
    InvalidValue,
    LoaderError,
    NoPathFound,
    PropertyNotFound,
    UnitGraphError,
    UnitNotFound,
    UnitsNotRelated,
)
from .graph import GraphBuilder, UnitGraph, build_graph, validate_connectivity
from .registry import PropertyRegistry
from .schema import ConversionRecord, ConversionResult, MultiplierResult, PathResult, UnitInfo

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "Config",
    "UnitConverter",
    "UnitGraph",
    "GraphBuilder",
    "build_graph",
    "validate_connectivity",
    "MultiplierResolver",
    "resolve",
    "convert",
    "GraphOptimizer",
    "optimize_graph",
    "PropertyRegistry",
    "ConversionRecord",
    "ConversionResult",
    "MultiplierResult",
    "PathResult",
    "UnitInfo",
    "UnitGraphError",
    "ConfigError",
    "LoaderError",
    "InvalidRecord",
    "InvalidFactor",
    "InvalidValue",
    "DisconnectedGraph",
    "UnitNotFound",
    "PropertyNotFound",
    "NoPathFound",
    "UnitsNotRelated",
    "AmbiguousProperty",
]
