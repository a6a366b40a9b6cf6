"""Immutable integer points with parsing and proximity queries."""

from point_struct.errors import (
    InvalidArgumentError,
    InvalidFormatError,
    NullArgumentError,
    PointError,
)
from point_struct.geometry import Alignment, Point

__version__ = "0.1.0"
__all__ = [
    "Point",
    "Alignment",
    "PointError",
    "InvalidFormatError",
    "InvalidArgumentError",
    "NullArgumentError",
]
