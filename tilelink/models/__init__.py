"""Data models package.

This package contains board dataclasses, shape masks, and boundary schemas.
"""
from .board import (
    Cell,
    Tile,
    Path,
    Board,
    GenerationOutcome,
    GenerationResult,
    occupied_cells,
)
from .shape import (
    LiteralShape,
    GeneratedShape,
    ShapeMask,
    resolve_shape,
    full_rectangle,
    diamond,
    frame,
    cross,
)
from .schemas import (
    BoardRequest,
    TileSchema,
)

__all__ = [
    # Board models
    "Cell",
    "Tile",
    "Path",
    "Board",
    "GenerationOutcome",
    "GenerationResult",
    "occupied_cells",
    # Shapes
    "LiteralShape",
    "GeneratedShape",
    "ShapeMask",
    "resolve_shape",
    "full_rectangle",
    "diamond",
    "frame",
    "cross",
    # Schemas
    "BoardRequest",
    "TileSchema",
]
