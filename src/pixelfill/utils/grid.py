from __future__ import annotations

import copy
from enum import Enum
from typing import Callable, Generic, Iterator, List, Tuple, TypeVar

T = TypeVar("T")

Coord = Tuple[int, int]


class Direction(Enum):
    """Grid directions as (dx, dy) offsets. Row 0 is the bottom row, so UP is +y."""
    UP = (0, 1)
    RIGHT = (1, 0)
    DOWN = (0, -1)
    LEFT = (-1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


class Grid(Generic[T]):
    """Dense row-major 2D container with a fixed size.

    Cells are addressed by ``(x, y)`` = (column, row). Reads and writes outside
    the grid are not errors: ``get`` returns ``None`` and ``set`` does nothing.
    """

    __slots__ = ("width", "height", "_rows")

    def __init__(self, width: int, height: int, rows: List[List[T]]):
        self.width = width
        self.height = height
        self._rows = rows

    @classmethod
    def generate(cls, width: int, height: int, factory: Callable[[int, int], T]) -> Grid[T]:
        width = max(0, width)
        height = max(0, height)
        rows = [[factory(x, y) for x in range(width)] for y in range(height)]
        return cls(width, height, rows)

    @classmethod
    def fill(cls, width: int, height: int, value: T) -> Grid[T]:
        return cls.generate(width, height, lambda x, y: copy.copy(value))

    def in_bounds(self, coord: Coord) -> bool:
        x, y = coord
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, coord: Coord) -> T | None:
        if not self.in_bounds(coord):
            return None
        x, y = coord
        return self._rows[y][x]

    def set(self, coord: Coord, value: T) -> None:
        if not self.in_bounds(coord):
            return
        x, y = coord
        self._rows[y][x] = value

    def coords(self) -> Iterator[Coord]:
        for y in range(self.height):
            for x in range(self.width):
                yield (x, y)

    def neighbor(self, coord: Coord, direction: Direction) -> Coord | None:
        """Coordinate one step in ``direction``, or None past the edge."""
        candidate = (coord[0] + direction.dx, coord[1] + direction.dy)
        if not self.in_bounds(candidate):
            return None
        return candidate

    def __len__(self) -> int:
        return self.width * self.height

    def __repr__(self) -> str:
        return f"Grid(width={self.width}, height={self.height})"
