"""
Data models for units and conversion records.
"""
from typing import Optional

from pydantic import BaseModel


class ConversionRecord(BaseModel):
    """One known conversion factor: a value in ``unit_from`` times ``factor`` is in ``unit_to``."""
    unit_from: str
    label_from: Optional[str] = None
    unit_to: str
    label_to: Optional[str] = None
    factor: float


class UnitInfo(BaseModel):
    """Row of the units table."""
    name: str
    full_name: Optional[str] = None
    property: Optional[str] = None
