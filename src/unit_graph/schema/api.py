"""
Data models for the Mini Unit Graph API.
"""
from typing import Dict, List, Optional

from pydantic import BaseModel

from .graph import Edge
from .unit import UnitInfo


class ConvertRequest(BaseModel):
    """Request model for value conversion."""
    value: float
    unit_from: str
    unit_to: str
    property: Optional[str] = None


class MultiplierRequest(BaseModel):
    """Request model for multiplier lookup."""
    unit_from: str
    unit_to: str
    property: Optional[str] = None


class PropertiesResponse(BaseModel):
    """Response model for the properties endpoint."""
    properties: List[str]


class UnitsResponse(BaseModel):
    """Response model for the units endpoint."""
    units: List[UnitInfo]


class GraphResponse(BaseModel):
    """Nodes and weighted edges of one property graph, ready for rendering."""
    property: str
    units: List[UnitInfo]
    edges: List[Edge]
    edge_labels: List[str]
    stats: Dict[str, int]


class OptimizeResponse(BaseModel):
    """Response model for the optimize endpoint."""
    status: str
    edges_added: Dict[str, int]


class ErrorResponse(BaseModel):
    """Error body returned for failed queries."""
    error: str
    detail: str
    candidates: List[str] = []
