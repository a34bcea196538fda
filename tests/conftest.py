"""Shared test fixtures."""
import pytest
from typing import List

from tilelink.models.board import Board, Cell, Tile


def build_board(rows: List[str]) -> Board:
    """Build a board from text rows: '.' is an empty cell, a digit is a tile type."""
    tiles = []
    for y, row in enumerate(rows):
        for x, ch in enumerate(row):
            if ch == ".":
                continue
            tiles.append(Tile(id=len(tiles), tile_type=int(ch), position=Cell(x, y)))
    height = len(rows)
    width = max(len(row) for row in rows) if rows else 0
    return Board(width=width, height=height, tiles=tiles, mask=[[True] * width for _ in range(height)])


@pytest.fixture
def make_board():
    """Factory fixture turning text rows into a Board."""
    return build_board


@pytest.fixture
def star_board():
    """
    Four type-1 tiles where three leaves can only reach the centre tile.

    Every tile has a reachable partner, but no full pairing exists.
    """
    return build_board([
        "..2..",
        ".212.",
        "21112",
        ".222.",
        ".....",
    ])


@pytest.fixture
def stuck_board():
    """Diagonal pairs on a full 2x2 board: nothing can connect."""
    return build_board([
        "12",
        "21",
    ])
