"""
Configuration for Mini Unit Graph.
"""
from .config import Config

__all__ = ["Config"]
