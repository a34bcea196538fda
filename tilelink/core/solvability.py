"""Board solvability checks and hint lookup."""
from typing import Dict, List, Optional, Set, Tuple

from ..models.board import Path, Tile, occupied_cells
from .path_finder import PathFinder


class SolvabilityChecker:
    """Decides whether a board can still be cleared.

    Two named checks are offered:

    - ``is_solvable`` (strict): greedily pairs every unmatched tile with a
      connectable partner of the same type; all tiles must end up paired.
      Connectivity is judged with every other unmatched tile in place, so
      the pairs stay connectable in any clearing order. Used to accept
      freshly generated boards.
    - ``every_tile_has_partner`` (loose): each unmatched tile only needs
      some connectable partner; no perfect matching is required. Used by
      the fallback generator; runtime hints use ``find_hint``.
    """

    def __init__(self, path_finder: Optional[PathFinder] = None):
        self.path_finder = path_finder or PathFinder()

    def find_pairing(
        self, tiles: List[Tile], width: int, height: int
    ) -> Optional[List[Tuple[Tile, Tile]]]:
        """
        Greedily pair unmatched tiles in row-major cell order.

        The walk order depends only on where each type sits, not on list
        order, so re-dealing cells among same-type tiles keeps the answer.

        Args:
            tiles: Full tile list (matched tiles are ignored).
            width: Board width.
            height: Board height.

        Returns:
            Disjoint connectable same-type pairs covering every unmatched
            tile, or None if some tile found no free partner.
        """
        unmatched = sorted((t for t in tiles if not t.matched), key=lambda t: (t.y, t.x))
        occupied = occupied_cells(tiles)
        paired: Set[int] = set()
        pairs: List[Tuple[Tile, Tile]] = []

        for i, first in enumerate(unmatched):
            if first.id in paired:
                continue

            partner = None
            for second in unmatched[i + 1:]:
                if second.id in paired or second.tile_type != first.tile_type:
                    continue
                if self._connectable(first, second, occupied, width, height):
                    partner = second
                    break

            if partner is None:
                return None

            paired.add(first.id)
            paired.add(partner.id)
            pairs.append((first, partner))

        return pairs

    def is_solvable(self, tiles: List[Tile], width: int, height: int) -> bool:
        """Strict check: every unmatched tile can be put in a disjoint connectable pair."""
        return self.find_pairing(tiles, width, height) is not None

    def every_tile_has_partner(self, tiles: List[Tile], width: int, height: int) -> bool:
        """Loose check: every unmatched tile has at least one connectable same-type partner."""
        unmatched = [t for t in tiles if not t.matched]
        occupied = occupied_cells(tiles)

        by_type: Dict[int, List[Tile]] = {}
        for tile in unmatched:
            by_type.setdefault(tile.tile_type, []).append(tile)

        has_partner: Set[int] = set()
        for group in by_type.values():
            for tile in group:
                if tile.id in has_partner:
                    continue
                partner = next(
                    (other for other in group
                     if other.id != tile.id
                     and self._connectable(tile, other, occupied, width, height)),
                    None,
                )
                if partner is None:
                    return False
                has_partner.add(tile.id)
                has_partner.add(partner.id)

        return True

    def find_hint(
        self, tiles: List[Tile], width: int, height: int
    ) -> Optional[Tuple[Tile, Tile, Path]]:
        """
        Find the first currently matchable pair, scanning in list order.

        Returns:
            (tile_a, tile_b, path) or None when no move is available.
        """
        unmatched = [t for t in tiles if not t.matched]
        occupied = occupied_cells(tiles)

        for i, first in enumerate(unmatched):
            for second in unmatched[i + 1:]:
                if second.tile_type != first.tile_type:
                    continue
                obstacles = occupied - {first.position, second.position}
                path = self.path_finder.connect(first, second, obstacles, width, height)
                if path is not None:
                    return first, second, path
        return None

    def has_available_move(self, tiles: List[Tile], width: int, height: int) -> bool:
        return self.find_hint(tiles, width, height) is not None

    def _connectable(self, a: Tile, b: Tile, occupied, width: int, height: int) -> bool:
        obstacles = occupied - {a.position, b.position}
        return self.path_finder.connect(a, b, obstacles, width, height) is not None
