"""
Data models for conversion results.
"""
from typing import List

from pydantic import BaseModel


class ConversionResult(BaseModel):
    """Result of converting a value between two units."""
    value: float
    multiplier: float
    property: str
    path: List[str]


class MultiplierResult(BaseModel):
    """Multiplier between two units of one property."""
    multiplier: float
    property: str
    path: List[str]
