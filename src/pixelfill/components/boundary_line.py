from dataclasses import dataclass

from pixelfill.utils.grid import Direction

@dataclass(slots=True)
class BoundaryLine:
    """Border segment drawn on one edge of a cell.

    The neighbouring cell across the same edge owns its own BoundaryLine.
    """
    x: int
    y: int
    direction: Direction
