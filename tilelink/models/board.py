"""Board data models and structures."""
from dataclasses import dataclass, field
from typing import Dict, List, Any, Optional, Tuple, Set, Iterator, NamedTuple
from enum import Enum


class Cell(NamedTuple):
    """Grid coordinate, 0-indexed. Path corners may lie one step outside the grid."""
    x: int
    y: int

    def to_dict(self) -> Dict[str, int]:
        """Convert to dictionary."""
        return {"x": self.x, "y": self.y}


@dataclass
class Tile:
    """A single playable cell's occupant."""
    id: int
    tile_type: int
    position: Cell
    matched: bool = False
    selected: bool = False
    # Transient attributes owned by the caller (gameplay modifiers)
    frozen: bool = False
    fading: bool = False
    moving: bool = False
    rotation: int = 0

    @property
    def x(self) -> int:
        return self.position.x

    @property
    def y(self) -> int:
        return self.position.y

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "type": self.tile_type,
            "x": self.x,
            "y": self.y,
            "matched": self.matched,
            "selected": self.selected,
            "frozen": self.frozen,
            "fading": self.fading,
            "moving": self.moving,
            "rotation": self.rotation,
        }


@dataclass(frozen=True)
class Path:
    """A validated connection: an axis-aligned polyline with 0, 1 or 2 corners."""
    start: Cell
    end: Cell
    corners: Tuple[Cell, ...] = ()

    @property
    def turns(self) -> int:
        return len(self.corners)

    @property
    def waypoints(self) -> List[Cell]:
        """Start, corners and end in travel order."""
        return [self.start, *self.corners, self.end]

    def cells(self) -> Iterator[Cell]:
        """
        Walk every grid step of the polyline, endpoints included.

        Used by callers that animate the connection line cell by cell.
        """
        points = self.waypoints
        yield points[0]
        for (x0, y0), (x1, y1) in zip(points, points[1:]):
            dx = (x1 > x0) - (x1 < x0)
            dy = (y1 > y0) - (y1 < y0)
            x, y = x0, y0
            while (x, y) != (x1, y1):
                x += dx
                y += dy
                yield Cell(x, y)

    def reversed(self) -> "Path":
        """Same route travelled from the other end."""
        return Path(start=self.end, end=self.start, corners=tuple(reversed(self.corners)))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "start": self.start.to_dict(),
            "end": self.end.to_dict(),
            "corners": [c.to_dict() for c in self.corners],
        }


@dataclass
class Board:
    """All tiles of one level instance plus the mask that shaped it."""
    width: int
    height: int
    tiles: List[Tile] = field(default_factory=list)
    mask: List[List[bool]] = field(default_factory=list)

    def tile_at(self, x: int, y: int) -> Optional[Tile]:
        """Get the unmatched tile at a cell, if any."""
        for tile in self.tiles:
            if not tile.matched and tile.x == x and tile.y == y:
                return tile
        return None

    def unmatched(self) -> List[Tile]:
        return [t for t in self.tiles if not t.matched]

    def obstacles_for(self, a: Tile, b: Tile) -> Set[Cell]:
        """Cells of every unmatched tile other than the two endpoints."""
        return occupied_cells(self.tiles, exclude=(a.id, b.id))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "width": self.width,
            "height": self.height,
            "tiles": [t.to_dict() for t in self.tiles],
            "mask": [list(row) for row in self.mask],
        }


def occupied_cells(tiles: List[Tile], exclude: Tuple[int, ...] = ()) -> Set[Cell]:
    """Positions of unmatched tiles, skipping the ids in ``exclude``."""
    return {t.position for t in tiles if not t.matched and t.id not in exclude}


class GenerationOutcome(str, Enum):
    """Which generation path produced a board."""
    EMPTY = "empty"              # Degenerate mask, no tiles
    VALIDATED = "validated"      # Primary strategy, strict checker passed
    BEST_EFFORT = "best_effort"  # Fallback, best loosely validated candidate
    UNVERIFIED = "unverified"    # Fallback, nothing validated


@dataclass
class GenerationResult:
    """Result of board generation."""
    board: Board
    outcome: GenerationOutcome
    attempts: int = 0
    complexity: Optional[float] = None
    generation_time_ms: int = 0

    @property
    def tiles(self) -> List[Tile]:
        return self.board.tiles

    @property
    def is_validated(self) -> bool:
        return self.outcome == GenerationOutcome.VALIDATED

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "board": self.board.to_dict(),
            "outcome": self.outcome.value,
            "attempts": self.attempts,
            "complexity": round(self.complexity, 3) if self.complexity is not None else None,
            "generation_time_ms": self.generation_time_ms,
        }
