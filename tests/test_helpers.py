"""Tests for utility helpers."""
from tilelink.models.board import Board, Cell, Tile
from tilelink.utils.helpers import board_statistics, format_board_for_display, validate_board


class TestValidateBoard:
    """Test cases for validate_board."""

    def test_valid_board(self, make_board):
        """Test a well-formed board."""
        is_valid, error = validate_board(make_board(["1122"]))

        assert is_valid
        assert error is None

    def test_duplicate_position(self):
        """Test two tiles on one cell."""
        board = Board(width=2, height=1, tiles=[
            Tile(id=0, tile_type=1, position=Cell(0, 0)),
            Tile(id=1, tile_type=1, position=Cell(0, 0)),
        ])

        is_valid, error = validate_board(board)

        assert not is_valid
        assert "Two tiles" in error

    def test_tile_off_mask(self):
        """Test a tile on a masked-out cell."""
        board = Board(
            width=2,
            height=1,
            tiles=[
                Tile(id=0, tile_type=1, position=Cell(0, 0)),
                Tile(id=1, tile_type=1, position=Cell(1, 0)),
            ],
            mask=[[True, False]],
        )

        is_valid, error = validate_board(board)

        assert not is_valid
        assert "playable" in error

    def test_odd_type_count(self, make_board):
        """Test a type without a partner."""
        is_valid, error = validate_board(make_board(["112"]))

        assert not is_valid
        assert "Type 2" in error


class TestFormatBoard:
    """Test cases for format_board_for_display."""

    def test_format_shows_types_and_mask(self):
        """Test tile types, matched tiles and masked cells in the output."""
        board = Board(
            width=3,
            height=1,
            tiles=[
                Tile(id=0, tile_type=7, position=Cell(0, 0)),
                Tile(id=1, tile_type=7, position=Cell(1, 0), matched=True),
            ],
            mask=[[True, True, False]],
        )

        text = format_board_for_display(board)

        assert "Board 3x1" in text
        assert " 7" in text
        assert ".." in text
        assert "##" in text


class TestBoardStatistics:
    """Test cases for board_statistics."""

    def test_counts(self, make_board):
        """Test per-type and matched counts."""
        board = make_board(["1122"])
        board.tiles[0].matched = True

        stats = board_statistics(board.tiles)

        assert stats["total_tiles"] == 4
        assert stats["matched_tiles"] == 1
        assert stats["remaining_tiles"] == 3
        assert stats["tile_types"] == {1: 2, 2: 2}
