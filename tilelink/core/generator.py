"""Board generator engine with solvability guarantees."""
import logging
import random
import time
from typing import Dict, List, Optional, Tuple

from ..config import EngineSettings, get_settings
from ..models.board import (
    Board,
    Cell,
    GenerationOutcome,
    GenerationResult,
    Tile,
)
from ..models.schemas import BoardRequest
from ..models.shape import ShapeMask, resolve_shape
from .complexity import ComplexityScorer
from .path_finder import PathFinder
from .solvability import SolvabilityChecker

logger = logging.getLogger(__name__)


class BoardGenerator:
    """Generates boards of paired tiles that can be cleared."""

    # 8-neighbourhood used by the anti-clustering rule
    NEIGHBOR_OFFSETS = [
        (-1, -1), (-1, 0), (-1, 1),
        (0, -1),           (0, 1),
        (1, -1),  (1, 0),  (1, 1),
    ]

    def __init__(
        self,
        settings: Optional[EngineSettings] = None,
        path_finder: Optional[PathFinder] = None,
        checker: Optional[SolvabilityChecker] = None,
        scorer: Optional[ComplexityScorer] = None,
        rng: Optional[random.Random] = None,
    ):
        self.settings = settings or get_settings()
        self.path_finder = path_finder or PathFinder()
        self.checker = checker or SolvabilityChecker(self.path_finder)
        self.scorer = scorer or ComplexityScorer(self.path_finder)
        # Process-wide random source unless one is injected
        self.rng = rng or random

    def generate(
        self,
        width: int,
        height: int,
        tile_type_count: int,
        shape: Optional[ShapeMask] = None,
    ) -> GenerationResult:
        """
        Generate a board.

        The constrained strategy runs first and returns its first board that
        passes the strict solvability check. If its attempt budget runs out,
        the fallback strategy returns its best-scoring loosely validated
        candidate, or an unverified random pairing when none validated.

        Args:
            width: Grid width.
            height: Grid height.
            tile_type_count: Number of tile types; reused cyclically across pairs.
            shape: Optional shape mask; defaults to the full rectangle.

        Returns:
            GenerationResult with the board and which strategy produced it.
        """
        start_time = time.time()
        tile_type_count = max(1, tile_type_count)

        mask = resolve_shape(shape, width, height)
        board = Board(width=width, height=height, mask=mask)

        positions = self._playable_positions(mask)
        if len(positions) % 2 != 0:
            dropped = positions.pop()
            logger.debug(f"Odd playable cell count, dropping {dropped}")

        if len(positions) < 2:
            logger.debug(f"Not enough playable cells for a {width}x{height} board")
            return GenerationResult(
                board=board,
                outcome=GenerationOutcome.EMPTY,
                generation_time_ms=int((time.time() - start_time) * 1000),
            )

        types = self._pair_types(len(positions) // 2, tile_type_count)

        tiles, attempts = self._generate_constrained(positions, types, width, height)
        complexity = None
        if tiles is not None:
            outcome = GenerationOutcome.VALIDATED
        else:
            logger.warning(
                f"Constrained generation exhausted {attempts} attempts for "
                f"{width}x{height} ({tile_type_count} types), falling back to simple layout"
            )
            tiles, complexity, fallback_attempts = self._generate_fallback(
                positions, types, width, height
            )
            attempts += fallback_attempts
            if complexity is not None:
                outcome = GenerationOutcome.BEST_EFFORT
            else:
                outcome = GenerationOutcome.UNVERIFIED

        board.tiles = tiles
        return GenerationResult(
            board=board,
            outcome=outcome,
            attempts=attempts,
            complexity=complexity,
            generation_time_ms=int((time.time() - start_time) * 1000),
        )

    def generate_board(
        self,
        width: int,
        height: int,
        tile_type_count: int,
        shape: Optional[ShapeMask] = None,
    ) -> List[Tile]:
        """Generate a board and return only its flat tile list."""
        return self.generate(width, height, tile_type_count, shape).tiles

    def generate_from_request(self, request: BoardRequest) -> GenerationResult:
        """Generate a board from validated level-configuration input."""
        return self.generate(
            request.width,
            request.height,
            request.tile_type_count,
            request.to_shape(),
        )

    @staticmethod
    def _playable_positions(mask: List[List[bool]]) -> List[Cell]:
        """Playable cells in row-major order."""
        return [
            Cell(x, y)
            for y, row in enumerate(mask)
            for x, playable in enumerate(row)
            if playable
        ]

    @staticmethod
    def _pair_types(pair_count: int, tile_type_count: int) -> List[int]:
        """Two copies of each pair's type, types assigned 1..tile_type_count cyclically."""
        types = []
        for index in range(pair_count):
            tile_type = (index % tile_type_count) + 1
            types.extend([tile_type, tile_type])
        return types

    def _generate_constrained(
        self,
        positions: List[Cell],
        types: List[int],
        width: int,
        height: int,
    ) -> Tuple[Optional[List[Tile]], int]:
        """Primary strategy: spaced placement, strict validation, first success wins."""
        max_attempts = self.settings.primary_max_attempts

        for attempt in range(1, max_attempts + 1):
            shuffled = list(types)
            self.rng.shuffle(shuffled)

            tiles = self._place_spaced(positions, shuffled, width, height)
            if tiles is None:
                continue

            if self.checker.is_solvable(tiles, width, height):
                logger.info(f"Generated valid board in {attempt} attempts")
                return self._shuffle_within_types(tiles), attempt

        return None, max_attempts

    def _place_spaced(
        self,
        positions: List[Cell],
        types: List[int],
        width: int,
        height: int,
    ) -> Optional[List[Tile]]:
        """Place each type in the first remaining cell that does not cluster it."""
        remaining = list(positions)
        placed: Dict[Cell, int] = {}
        tiles: List[Tile] = []

        for tile_id, tile_type in enumerate(types):
            for index, pos in enumerate(remaining):
                if self._is_clustered(placed, pos, tile_type, width, height):
                    continue
                placed[pos] = tile_type
                tiles.append(Tile(id=tile_id, tile_type=tile_type, position=pos))
                del remaining[index]
                break
            else:
                return None

        return tiles

    def _is_clustered(
        self,
        placed: Dict[Cell, int],
        pos: Cell,
        tile_type: int,
        width: int,
        height: int,
    ) -> bool:
        """True if enough in-bounds neighbours already hold this type."""
        same_type_count = 0
        for dx, dy in self.NEIGHBOR_OFFSETS:
            nx, ny = pos.x + dx, pos.y + dy
            if 0 <= nx < width and 0 <= ny < height and placed.get(Cell(nx, ny)) == tile_type:
                same_type_count += 1
        return same_type_count >= self.settings.cluster_threshold

    def _shuffle_within_types(self, tiles: List[Tile]) -> List[Tile]:
        """Re-deal cells among tiles of the same type; the type-to-cell layout is unchanged."""
        groups: Dict[int, List[Tile]] = {}
        for tile in tiles:
            groups.setdefault(tile.tile_type, []).append(tile)

        result: List[Tile] = []
        for group in groups.values():
            cells = [t.position for t in group]
            self.rng.shuffle(cells)
            for tile, cell in zip(group, cells):
                tile.position = cell
            result.extend(group)
        return result

    def _random_pairing(self, positions: List[Cell], types: List[int]) -> List[Tile]:
        shuffled_positions = list(positions)
        shuffled_types = list(types)
        self.rng.shuffle(shuffled_positions)
        self.rng.shuffle(shuffled_types)
        return [
            Tile(id=index, tile_type=tile_type, position=pos)
            for index, (pos, tile_type) in enumerate(zip(shuffled_positions, shuffled_types))
        ]

    def _generate_fallback(
        self,
        positions: List[Cell],
        types: List[int],
        width: int,
        height: int,
    ) -> Tuple[List[Tile], Optional[float], int]:
        """
        Fallback strategy: random pairings, loose validation, keep the best score.

        Returns:
            (tiles, complexity, attempts). complexity is None when no candidate
            validated and the tiles are an arbitrary unverified pairing.
        """
        max_attempts = self.settings.fallback_max_attempts
        target = self.settings.target_complexity

        best_tiles: Optional[List[Tile]] = None
        best_score = -1.0
        attempts = 0

        for attempts in range(1, max_attempts + 1):
            candidate = self._random_pairing(positions, types)
            if not self.checker.every_tile_has_partner(candidate, width, height):
                continue

            score = self.scorer.score(candidate, width, height)
            if score > best_score:
                best_score = score
                best_tiles = candidate

            if score >= target:
                break

        if best_tiles is not None:
            logger.info(f"Fallback accepted board with complexity {best_score:.3f} after {attempts} attempts")
            return best_tiles, best_score, attempts

        logger.warning(
            f"Fallback found no validated board in {attempts} attempts, returning unverified layout"
        )
        return self._random_pairing(positions, types), None, attempts
