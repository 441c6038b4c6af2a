"""
Data models for unit graphs.
"""
from typing import List

from pydantic import BaseModel


class Edge(BaseModel):
    """Directed conversion edge: ``value_in_target = value_in_source * weight``."""
    source: str
    target: str
    weight: float


class PathResult(BaseModel):
    """Multiplier between two units and the units traversed to derive it."""
    multiplier: float
    path: List[str]
