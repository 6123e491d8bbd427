from __future__ import annotations

from collections import deque
from typing import Dict, Sequence

from pixelfill.components.art_board import ArtBoard
from pixelfill.utils.grid import Coord, Direction, Grid

COLORS = {
    'R': (220, 40, 40),
    'G': (40, 180, 60),
    'B': (40, 60, 200),
    'W': (255, 255, 255),
    'K': (0, 0, 0),
}


def raster_from_strings(*lines: str) -> list[list[tuple[int, int, int]]]:
    """RGB rows, top line first, one letter from COLORS per pixel."""
    return [[COLORS[ch] for ch in line] for line in lines]


def board_from_strings(*lines: str) -> ArtBoard:
    return ArtBoard.from_raster(raster_from_strings(*lines))


def grid_from_rows(rows: Sequence[Sequence[int]]) -> Grid[int]:
    """Grid whose row y is rows[y] (no flipping)."""
    width = len(rows[0]) if rows else 0
    return Grid(width, len(rows), [list(row) for row in rows])


def bfs_labels(grid: Grid) -> Dict[Coord, int]:
    """Reference 4-connected component labelling over equal values."""
    labels: Dict[Coord, int] = {}
    next_label = 0
    for start in grid.coords():
        if start in labels:
            continue
        value = grid.get(start)
        labels[start] = next_label
        queue = deque([start])
        while queue:
            current = queue.popleft()
            for direction in Direction:
                neighbor = grid.neighbor(current, direction)
                if neighbor is None or neighbor in labels:
                    continue
                if grid.get(neighbor) == value:
                    labels[neighbor] = next_label
                    queue.append(neighbor)
        next_label += 1
    return labels


def paint_snapshot(board: ArtBoard) -> dict:
    snapshot = {}
    for y in range(board.height):
        for x in range(board.width):
            paint = board.paint_at((x, y))
            snapshot[(x, y)] = (paint.filled, paint.color)
    return snapshot


class RecordingSurface:
    """Render surface that hands out tuple handles and records every call."""

    def __init__(self):
        self.cells: dict = {}
        self.boundaries: list = []
        self.painted: list = []
        self.removed: list = []

    def spawn_cell(self, coord, color):
        handle = ('cell', coord)
        self.cells[handle] = color
        return handle

    def spawn_boundary(self, coord, direction):
        handle = ('boundary', coord, direction)
        self.boundaries.append(handle)
        return handle

    def paint_cell(self, handle, color):
        self.painted.append((handle, color))
        self.cells[handle] = color

    def remove_boundary(self, handle):
        self.removed.append(handle)
