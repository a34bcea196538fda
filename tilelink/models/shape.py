"""Shape masks marking which cells of the bounding box are playable."""
import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Union

logger = logging.getLogger(__name__)

Grid = List[List[bool]]
ShapeFunction = Callable[[int, int], Sequence[Sequence[bool]]]


@dataclass(frozen=True)
class LiteralShape:
    """A mask given as rows of booleans (grid[y][x])."""
    grid: Sequence[Sequence[bool]]


@dataclass(frozen=True)
class GeneratedShape:
    """A mask produced by a pure function of (width, height)."""
    function: ShapeFunction


ShapeMask = Union[LiteralShape, GeneratedShape]


def full_rectangle(width: int, height: int) -> Grid:
    """Every cell playable."""
    return [[True] * max(width, 0) for _ in range(max(height, 0))]


def _overlay(grid: Sequence[Sequence[bool]], width: int, height: int) -> Grid:
    # Cells the grid does not cover stay playable
    mask = full_rectangle(width, height)
    for y, row in enumerate(grid[:height]):
        for x, value in enumerate(list(row)[:width]):
            mask[y][x] = bool(value)
    return mask


def resolve_shape(shape: Optional[ShapeMask], width: int, height: int) -> Grid:
    """
    Resolve a shape mask into a width x height boolean grid.

    Args:
        shape: Literal grid, generator function, or None for the full rectangle.
        width: Board width in cells.
        height: Board height in cells.

    Returns:
        Grid indexed as grid[y][x]; True marks a playable cell.
    """
    # Degenerate boxes have no cells to overlay
    if shape is None or width <= 0 or height <= 0:
        return full_rectangle(width, height)

    if isinstance(shape, LiteralShape):
        return _overlay(shape.grid, width, height)

    try:
        return _overlay(shape.function(width, height), width, height)
    except Exception as e:
        logger.warning(
            f"Shape function {getattr(shape.function, '__name__', shape.function)!r} "
            f"failed for {width}x{height}, using full rectangle: {e}"
        )
        return full_rectangle(width, height)


# Built-in shape functions

def diamond(width: int, height: int) -> Grid:
    """Cells inside the ellipse-like diamond centred in the box."""
    cx = (width - 1) / 2.0
    cy = (height - 1) / 2.0
    rx = max(cx, 0.5)
    ry = max(cy, 0.5)
    return [
        [abs(x - cx) / rx + abs(y - cy) / ry <= 1.0 for x in range(width)]
        for y in range(height)
    ]


def frame(width: int, height: int) -> Grid:
    """A two-cell-thick border around an empty centre."""
    return [
        [x < 2 or y < 2 or x >= width - 2 or y >= height - 2 for x in range(width)]
        for y in range(height)
    ]


def cross(width: int, height: int) -> Grid:
    """A plus sign whose arms are half the box wide."""
    x0, x1 = width // 4, width - width // 4
    y0, y1 = height // 4, height - height // 4
    return [
        [(x0 <= x < x1) or (y0 <= y < y1) for x in range(width)]
        for y in range(height)
    ]
