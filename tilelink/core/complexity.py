"""Board complexity scoring by connection-path shape."""
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from ..models.board import Tile, occupied_cells
from .path_finder import PathFinder


@dataclass
class PathShapeStats:
    """Counts of same-type pairs by connection shape."""
    total_pairs: int = 0
    straight: int = 0
    one_corner: int = 0
    two_corner: int = 0

    @property
    def connectable(self) -> int:
        return self.straight + self.one_corner + self.two_corner

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "total_pairs": self.total_pairs,
            "connectable": self.connectable,
            "straight": self.straight,
            "one_corner": self.one_corner,
            "two_corner": self.two_corner,
        }


class ComplexityScorer:
    """Scores boards in [0, 1]; higher means more pairs need turns to connect."""

    # Weight configuration for the score
    WEIGHTS = {
        "two_corner": 0.6,
        "one_corner": 0.3,
        "not_straight": 0.1,
    }

    def __init__(self, path_finder: Optional[PathFinder] = None):
        self.path_finder = path_finder or PathFinder()

    def path_shape_stats(self, tiles: List[Tile], width: int, height: int) -> PathShapeStats:
        """Classify every unmatched same-type pair by the corner count of its path."""
        unmatched = [t for t in tiles if not t.matched]
        occupied = occupied_cells(tiles)
        stats = PathShapeStats()

        for i, first in enumerate(unmatched):
            for second in unmatched[i + 1:]:
                if first.tile_type != second.tile_type:
                    continue
                stats.total_pairs += 1

                obstacles = occupied - {first.position, second.position}
                path = self.path_finder.connect(first, second, obstacles, width, height)
                if path is None:
                    continue
                if path.turns == 0:
                    stats.straight += 1
                elif path.turns == 1:
                    stats.one_corner += 1
                else:
                    stats.two_corner += 1

        return stats

    def score(self, tiles: List[Tile], width: int, height: int) -> float:
        """
        Score a board by its distribution of connection shapes.

        Fractions are taken over connectable pairs only; a board without
        any connectable pair scores 0.

        Args:
            tiles: Full tile list; not mutated.
            width: Board width.
            height: Board height.

        Returns:
            Score in [0, 1].
        """
        stats = self.path_shape_stats(tiles, width, height)
        connectable = stats.connectable
        if connectable == 0:
            return 0.0

        straight_ratio = stats.straight / connectable
        one_corner_ratio = stats.one_corner / connectable
        two_corner_ratio = stats.two_corner / connectable

        return (
            two_corner_ratio * self.WEIGHTS["two_corner"]
            + one_corner_ratio * self.WEIGHTS["one_corner"]
            + (1 - straight_ratio) * self.WEIGHTS["not_straight"]
        )
