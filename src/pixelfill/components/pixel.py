from dataclasses import dataclass
from typing import Tuple

@dataclass(slots=True)
class Pixel:
    """Board cell an entity draws; ``x`` is the column, ``y`` the row from the bottom."""
    x: int
    y: int


@dataclass(slots=True)
class PixelSprite:
    """Colour currently shown for a pixel entity."""
    color: Tuple[int, int, int]
