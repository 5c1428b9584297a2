"""
Models package - Pydantic schemas for configuration values
"""

from .location import Location

__all__ = [
    "Location"
]
