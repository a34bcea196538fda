"""Utility helper functions."""
from typing import Dict, Any, List, Optional, Tuple

from ..models.board import Board, Tile


def validate_board(board: Board) -> Tuple[bool, Optional[str]]:
    """
    Validate board invariants.

    Args:
        board: Board to validate.

    Returns:
        Tuple of (is_valid, error_message).
    """
    seen_ids = set()
    seen_positions = set()
    type_counts: Dict[int, int] = {}

    for tile in board.tiles:
        if tile.id in seen_ids:
            return False, f"Duplicate tile id {tile.id}"
        seen_ids.add(tile.id)

        if tile.position in seen_positions:
            return False, f"Two tiles at ({tile.x}, {tile.y})"
        seen_positions.add(tile.position)

        if not (0 <= tile.x < board.width and 0 <= tile.y < board.height):
            return False, f"Tile {tile.id} at ({tile.x}, {tile.y}) is out of bounds"

        if board.mask and not board.mask[tile.y][tile.x]:
            return False, f"Tile {tile.id} at ({tile.x}, {tile.y}) is not on a playable cell"

        type_counts[tile.tile_type] = type_counts.get(tile.tile_type, 0) + 1

    for tile_type, count in sorted(type_counts.items()):
        if count % 2 != 0:
            return False, f"Type {tile_type} has an odd tile count ({count})"

    return True, None


def format_board_for_display(board: Board) -> str:
    """
    Format a board for human-readable display.

    Unmatched tiles show their type, matched tiles show '..', playable
    empty cells show '  ' and masked-out cells show '##'.

    Args:
        board: Board to format.

    Returns:
        Formatted string representation.
    """
    lines = [f"Board {board.width}x{board.height} ({len(board.unmatched())} tiles left):"]

    grid = []
    for y in range(board.height):
        row = []
        for x in range(board.width):
            playable = not board.mask or board.mask[y][x]
            row.append("  " if playable else "##")
        grid.append(row)

    for tile in board.tiles:
        if 0 <= tile.x < board.width and 0 <= tile.y < board.height:
            grid[tile.y][tile.x] = ".." if tile.matched else f"{tile.tile_type:2d}"

    for row in grid:
        lines.append("  " + " ".join(row))

    return "\n".join(lines)


def board_statistics(tiles: List[Tile]) -> Dict[str, Any]:
    """
    Extract tile statistics from a board.

    Args:
        tiles: Tile list to summarize.

    Returns:
        Dictionary with tile statistics.
    """
    stats: Dict[str, Any] = {
        "total_tiles": len(tiles),
        "matched_tiles": 0,
        "tile_types": {},
    }

    for tile in tiles:
        if tile.matched:
            stats["matched_tiles"] += 1
        stats["tile_types"][tile.tile_type] = stats["tile_types"].get(tile.tile_type, 0) + 1

    stats["remaining_tiles"] = stats["total_tiles"] - stats["matched_tiles"]
    return stats
