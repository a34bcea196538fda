"""Tile connectivity search: straight line, one corner, two corners."""
from typing import Iterable, List, Optional, Set, Tuple

from ..models.board import Cell, Path, Tile, occupied_cells


class InvalidSelectionError(ValueError):
    """Raised when a connectivity query does not name two distinct tiles on distinct cells."""


class PathFinder:
    """Finds orthogonal routes of at most two turns between two tiles.

    Stateless; the obstacle set and board bounds are passed in per call.
    Search order is fixed so the same inputs always yield the same path:

    1. straight line
    2. one corner, trying (a.x, b.y) before (b.x, a.y)
    3. two corners, vertical rails x = -1..width ascending, then
       horizontal rails y = -1..height ascending

    Rails one cell outside the grid (x = -1, x = width, y = -1, y = height)
    are valid, modelling a line drawn just past the visible board.
    """

    def connect(
        self,
        a: Tile,
        b: Tile,
        obstacles: Iterable[Cell],
        width: int,
        height: int,
    ) -> Optional[Path]:
        """
        Find a connecting path between two tiles.

        Types are not compared here; callers gate on type equality first.

        Args:
            a: Start tile.
            b: End tile.
            obstacles: Cells of unmatched tiles other than a and b.
            width: Board width.
            height: Board height.

        Returns:
            Path with 0, 1 or 2 corners, or None if no such path exists.

        Raises:
            InvalidSelectionError: If a and b are the same tile or share a cell.
        """
        if a.id == b.id:
            raise InvalidSelectionError(f"Tile {a.id} cannot be connected to itself")

        start, end = a.position, b.position
        if start == end:
            raise InvalidSelectionError(f"Tiles {a.id} and {b.id} both sit on {start}")

        # Endpoints block transit: a route may not run through either tile
        blocked: Set[Cell] = set(obstacles)
        blocked.add(start)
        blocked.add(end)

        if (start.x == end.x or start.y == end.y) and self._clear_line(start, end, blocked):
            return Path(start=start, end=end, corners=())

        path = self._one_corner(start, end, blocked)
        if path is not None:
            return path

        return self._two_corners(start, end, blocked, width, height)

    def find_path(
        self,
        a: Tile,
        b: Tile,
        tiles: List[Tile],
        width: int,
        height: int,
    ) -> Optional[Path]:
        """
        Connectivity query used by the game loop for the two selected tiles.

        The obstacle set is every unmatched tile in ``tiles`` except a and b.
        Positions are read from the tiles in the list, matched by id.

        Raises:
            InvalidSelectionError: If a and b share an id, or either id is not in tiles.
        """
        a, b = self.resolve_selection(a, b, tiles)
        obstacles = occupied_cells(tiles, exclude=(a.id, b.id))
        return self.connect(a, b, obstacles, width, height)

    @staticmethod
    def resolve_selection(a: Tile, b: Tile, tiles: List[Tile]) -> Tuple[Tile, Tile]:
        """Look up the two selected tiles in the board's list by id."""
        if a.id == b.id:
            raise InvalidSelectionError(f"Tile {a.id} was selected twice")

        by_id = {t.id: t for t in tiles}
        missing = [t.id for t in (a, b) if t.id not in by_id]
        if missing:
            raise InvalidSelectionError(f"Tiles not on board: {missing}")

        return by_id[a.id], by_id[b.id]

    @staticmethod
    def _clear_line(p: Cell, q: Cell, blocked: Set[Cell]) -> bool:
        """True if every cell strictly between p and q on their shared line is free."""
        if p.x == q.x:
            lo, hi = sorted((p.y, q.y))
            return all(Cell(p.x, y) not in blocked for y in range(lo + 1, hi))
        if p.y == q.y:
            lo, hi = sorted((p.x, q.x))
            return all(Cell(x, p.y) not in blocked for x in range(lo + 1, hi))
        return False

    def _one_corner(self, start: Cell, end: Cell, blocked: Set[Cell]) -> Optional[Path]:
        for corner in (Cell(start.x, end.y), Cell(end.x, start.y)):
            if corner in blocked:
                continue
            if self._clear_line(start, corner, blocked) and self._clear_line(corner, end, blocked):
                return Path(start=start, end=end, corners=(corner,))
        return None

    def _two_corners(
        self,
        start: Cell,
        end: Cell,
        blocked: Set[Cell],
        width: int,
        height: int,
    ) -> Optional[Path]:
        # Vertical rails
        for x in range(-1, width + 1):
            if x == start.x or x == end.x:
                continue
            path = self._via(start, Cell(x, start.y), Cell(x, end.y), end, blocked)
            if path is not None:
                return path

        # Horizontal rails
        for y in range(-1, height + 1):
            if y == start.y or y == end.y:
                continue
            path = self._via(start, Cell(start.x, y), Cell(end.x, y), end, blocked)
            if path is not None:
                return path

        return None

    def _via(
        self,
        start: Cell,
        c1: Cell,
        c2: Cell,
        end: Cell,
        blocked: Set[Cell],
    ) -> Optional[Path]:
        if c1 in blocked or c2 in blocked:
            return None
        if (self._clear_line(start, c1, blocked)
                and self._clear_line(c1, c2, blocked)
                and self._clear_line(c2, end, blocked)):
            return Path(start=start, end=end, corners=(c1, c2))
        return None
