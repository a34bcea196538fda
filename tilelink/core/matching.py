"""Game-loop helpers for matching selected tiles."""
from typing import List, Optional

from ..models.board import Path, Tile, occupied_cells
from .path_finder import PathFinder


def try_match(
    a: Tile,
    b: Tile,
    tiles: List[Tile],
    width: int,
    height: int,
    path_finder: Optional[PathFinder] = None,
) -> Optional[Path]:
    """
    Match two selected tiles if they are equal in type and connectable.

    On success both tiles (as found in ``tiles``) are marked matched and
    deselected. Nothing is mutated on failure.

    Args:
        a: First selected tile.
        b: Second selected tile.
        tiles: Current full tile list.
        width: Board width.
        height: Board height.
        path_finder: Optional PathFinder to use.

    Returns:
        The path used for the match, or None.

    Raises:
        InvalidSelectionError: If a and b are the same tile or not on the board.
    """
    finder = path_finder or PathFinder()
    a, b = finder.resolve_selection(a, b, tiles)

    if a.matched or b.matched or a.tile_type != b.tile_type:
        return None

    obstacles = occupied_cells(tiles, exclude=(a.id, b.id))
    path = finder.connect(a, b, obstacles, width, height)
    if path is None:
        return None

    for tile in (a, b):
        tile.matched = True
        tile.selected = False
    return path


def is_cleared(tiles: List[Tile]) -> bool:
    """True once every tile has been matched."""
    return all(t.matched for t in tiles)
