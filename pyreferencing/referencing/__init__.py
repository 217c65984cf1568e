"""
Referencing domain types.

Public API:
    AxisDirection    - Coordinate system axis directions
    GeneralEnvelope  - n-dimensional axis-aligned box
"""

from pyreferencing.referencing.cs import AxisDirection
from pyreferencing.referencing.envelope import GeneralEnvelope

__all__ = [
    "AxisDirection",
    "GeneralEnvelope",
]
