"""Tests for board models and schemas."""
import pytest
from pydantic import ValidationError

from tilelink.models.board import Board, Cell, GenerationOutcome, GenerationResult, Tile
from tilelink.models.schemas import TileSchema


class TestBoard:
    """Test cases for Board helpers."""

    def test_tile_at_ignores_matched(self, make_board):
        """Test that matched tiles are not returned by tile_at."""
        board = make_board(["12"])
        board.tiles[0].matched = True

        assert board.tile_at(0, 0) is None
        assert board.tile_at(1, 0).tile_type == 2

    def test_obstacles_exclude_endpoints(self, make_board):
        """Test the obstacle set derived for a selection."""
        board = make_board(["1231"])
        a, _, c, d = board.tiles
        c.matched = True

        assert board.obstacles_for(a, d) == {Cell(1, 0)}

    def test_cell_compares_as_tuple(self):
        """Test that cells behave like coordinate pairs."""
        assert Cell(1, 2) == (1, 2)
        x, y = Cell(3, 4)
        assert (x, y) == (3, 4)


class TestGenerationResult:
    """Test cases for GenerationResult."""

    def test_to_dict_rounds_complexity(self):
        """Test GenerationResult to_dict conversion."""
        result = GenerationResult(
            board=Board(width=0, height=0),
            outcome=GenerationOutcome.BEST_EFFORT,
            attempts=3,
            complexity=0.123456,
        )

        data = result.to_dict()

        assert data["outcome"] == "best_effort"
        assert data["complexity"] == 0.123
        assert not result.is_validated


class TestTileSchema:
    """Test cases for TileSchema."""

    def test_to_tile(self):
        """Test converting a serialized tile."""
        tile = TileSchema(id=3, type=2, x=1, y=0, matched=True).to_tile()

        assert tile.id == 3
        assert tile.tile_type == 2
        assert tile.position == Cell(1, 0)
        assert tile.matched

    def test_from_tile(self):
        """Test serializing an engine tile."""
        schema = TileSchema.from_tile(Tile(id=1, tile_type=4, position=Cell(2, 3), rotation=90))

        assert schema.type == 4
        assert schema.rotation == 90

    def test_rejects_negative_position(self):
        """Test schema validation."""
        with pytest.raises(ValidationError):
            TileSchema(id=1, type=1, x=-1, y=0)
