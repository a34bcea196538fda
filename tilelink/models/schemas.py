"""Pydantic schemas for data crossing the engine boundary."""
from pydantic import BaseModel, Field
from typing import List, Optional

from .board import Cell, Tile
from .shape import LiteralShape


class BoardRequest(BaseModel):
    """Board parameters supplied by the level-configuration collaborator."""
    width: int = Field(..., description="Grid width in cells (non-positive yields an empty board)")
    height: int = Field(..., description="Grid height in cells (non-positive yields an empty board)")
    tile_type_count: int = Field(..., ge=1, description="Number of distinct tile types")
    shape: Optional[List[List[bool]]] = Field(
        default=None,
        description="Literal shape mask as rows (shape[y][x]); omitted means full rectangle",
    )

    def to_shape(self) -> Optional[LiteralShape]:
        """Wrap the literal mask for the generator."""
        if self.shape is None:
            return None
        return LiteralShape(grid=self.shape)


class TileSchema(BaseModel):
    """Serialized tile, as stored or sent by the game loop."""
    id: int = Field(..., description="Tile id, unique within the board")
    type: int = Field(..., ge=1, description="Tile type value")
    x: int = Field(..., ge=0, description="Column")
    y: int = Field(..., ge=0, description="Row")
    matched: bool = Field(default=False, description="Whether the tile has been cleared")
    selected: bool = Field(default=False, description="Whether the tile is currently selected")
    frozen: bool = Field(default=False)
    fading: bool = Field(default=False)
    moving: bool = Field(default=False)
    rotation: int = Field(default=0)

    def to_tile(self) -> Tile:
        """Convert to an engine Tile."""
        return Tile(
            id=self.id,
            tile_type=self.type,
            position=Cell(self.x, self.y),
            matched=self.matched,
            selected=self.selected,
            frozen=self.frozen,
            fading=self.fading,
            moving=self.moving,
            rotation=self.rotation,
        )

    @classmethod
    def from_tile(cls, tile: Tile) -> "TileSchema":
        return cls(**tile.to_dict())
