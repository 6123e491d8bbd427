from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Dict, FrozenSet, Hashable, Protocol, Sequence, Tuple

from pixelfill.utils.color import RGB, pale_color
from pixelfill.utils.grid import Coord, Direction, Grid
from pixelfill.utils.image_loader import raster_from_image
from pixelfill.utils.region_set import RegionSet

logger = logging.getLogger(__name__)

Handle = Hashable
Point = Tuple[float, float]


class RenderSurface(Protocol):
    """Render collaborator that owns the visual side of a board.

    Handles returned by the spawn methods are opaque to the board; it only
    stores them and hands them back.
    """

    def spawn_cell(self, coord: Coord, color: RGB) -> Handle: ...

    def spawn_boundary(self, coord: Coord, direction: Direction) -> Handle: ...

    def paint_cell(self, handle: Handle, color: RGB) -> None: ...

    def remove_boundary(self, handle: Handle) -> None: ...


@dataclass(slots=True)
class CellPaint:
    """Displayed colour of a cell; ``filled`` flips once and never reverts."""
    color: RGB
    filled: bool = False


class ArtBoard:
    """Paint-by-number board: colour regions, their borders and fill progress.

    Coordinates are ``(x, y)`` with row 0 at the bottom of the picture. Every
    lookup miss (outside the grid, no handle registered yet) is treated as
    nothing to do.
    """

    def __init__(
        self,
        color_ids: Grid[int],
        palette: Dict[int, RGB],
    ):
        self.palette: Dict[int, RGB] = dict(palette)
        self._color_ids = color_ids
        self._regions = RegionSet.from_grid(color_ids)
        self._boundaries: Grid[Dict[Direction, Any]] = Grid.generate(
            color_ids.width, color_ids.height, lambda x, y: self._scan_boundaries((x, y))
        )
        self._paint: Grid[CellPaint] = Grid.generate(
            color_ids.width,
            color_ids.height,
            lambda x, y: CellPaint(color=pale_color(self.palette[color_ids.get((x, y))])),
        )
        self._cell_handles: Grid[Any] = Grid.fill(color_ids.width, color_ids.height, None)
        self._surface: RenderSurface | None = None
        self._filled_count = 0

    @classmethod
    def from_raster(cls, rows: Sequence[Sequence[Sequence[int]]]) -> ArtBoard:
        """Build a board from RGB rows given top row first (image storage order)."""
        width = min((len(row) for row in rows), default=0)
        height = len(rows) if width else 0
        color_to_id: Dict[RGB, int] = {}
        id_rows = []
        for row in rows[:height]:
            id_row = []
            for pixel in row[:width]:
                color = (int(pixel[0]), int(pixel[1]), int(pixel[2]))
                color_id = color_to_id.get(color)
                if color_id is None:
                    color_id = len(color_to_id)
                    color_to_id[color] = color_id
                id_row.append(color_id)
            id_rows.append(id_row)
        # Images store the top row first; the board counts rows from the bottom.
        id_rows.reverse()
        palette = {color_id: color for color, color_id in color_to_id.items()}
        board = cls(Grid(width, height, id_rows), palette)
        logger.debug(
            "Built %dx%d board: %d colours, %d regions, %d boundary entries",
            width, height, len(palette), board.region_count, board.boundary_count(),
        )
        return board

    @classmethod
    def from_image(cls, image) -> ArtBoard:
        """Build a board from a Pillow image."""
        return cls.from_raster(raster_from_image(image))

    def _scan_boundaries(self, coord: Coord) -> Dict[Direction, Any]:
        own = self._regions.find(coord)
        entries: Dict[Direction, Any] = {}
        for direction in Direction:
            neighbor = self._color_ids.neighbor(coord, direction)
            if neighbor is None:
                continue
            if self._regions.find(neighbor) != own:
                entries[direction] = None
        return entries

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def width(self) -> int:
        return self._color_ids.width

    @property
    def height(self) -> int:
        return self._color_ids.height

    @property
    def regions(self) -> RegionSet:
        return self._regions

    @property
    def region_count(self) -> int:
        return self._regions.region_count

    @property
    def filled_count(self) -> int:
        return self._filled_count

    def is_complete(self) -> bool:
        return self._filled_count == self.width * self.height

    def color_id_at(self, coord: Coord) -> int | None:
        return self._color_ids.get(coord)

    def color_at(self, coord: Coord) -> RGB | None:
        color_id = self._color_ids.get(coord)
        if color_id is None:
            return None
        return self.palette.get(color_id)

    def paint_at(self, coord: Coord) -> CellPaint | None:
        return self._paint.get(coord)

    def is_filled(self, coord: Coord) -> bool:
        paint = self._paint.get(coord)
        return paint is not None and paint.filled

    def region_root(self, coord: Coord) -> Coord | None:
        return self._regions.find(coord)

    def region_members(self, coord: Coord) -> FrozenSet[Coord]:
        root = self._regions.find(coord)
        if root is None:
            return frozenset()
        return frozenset(self._regions.linked_members(root) or ())

    def boundary_directions(self, coord: Coord) -> FrozenSet[Direction] | None:
        entries = self._boundaries.get(coord)
        if entries is None:
            return None
        return frozenset(entries)

    def boundary_handle(self, coord: Coord, direction: Direction) -> Handle | None:
        entries = self._boundaries.get(coord)
        if entries is None:
            return None
        return entries.get(direction)

    def boundary_count(self) -> int:
        return sum(len(self._boundaries.get(coord)) for coord in self._boundaries.coords())

    def cell_handle(self, coord: Coord) -> Handle | None:
        return self._cell_handles.get(coord)

    @staticmethod
    def cell_at_point(point: Point) -> Coord | None:
        """Nearest cell to a board-local point; None for negative coordinates."""
        x = math.floor(point[0] + 0.5)
        y = math.floor(point[1] + 0.5)
        if x < 0 or y < 0:
            return None
        return (x, y)

    # ------------------------------------------------------------------
    # Rendering handles
    # ------------------------------------------------------------------
    def register_render_handles(self, surface: RenderSurface) -> None:
        """Spawn a preview sprite per cell and a line per boundary entry.

        Cells and (cell, direction) pairs that already own a handle are left
        alone, so repeated calls never duplicate visuals.
        """
        self._surface = surface
        for coord in self._color_ids.coords():
            if self._cell_handles.get(coord) is None:
                self._cell_handles.set(coord, surface.spawn_cell(coord, self._paint.get(coord).color))
            entries = self._boundaries.get(coord)
            for direction in entries:
                if entries[direction] is None:
                    entries[direction] = surface.spawn_boundary(coord, direction)

    # ------------------------------------------------------------------
    # Filling
    # ------------------------------------------------------------------
    def fill_at(self, point: Point) -> FrozenSet[Coord]:
        """Fill the whole region under ``point``; returns the region's cells.

        Each filled cell drops only the boundary entries it owns itself; the
        neighbour's side of a shared border stays until that region is filled.
        """
        coord = self.cell_at_point(point)
        if coord is None:
            return frozenset()
        root = self._regions.find(coord)
        if root is None:
            return frozenset()
        members = self._regions.linked_members(root)
        if members is None:
            return frozenset()
        for member in members:
            self._fill_cell(member)
        logger.debug("Filled region %s (%d cells)", root, len(members))
        return frozenset(members)

    def _fill_cell(self, coord: Coord) -> None:
        paint = self._paint.get(coord)
        color = self.color_at(coord)
        if paint is None or color is None:
            return
        if not paint.filled:
            paint.filled = True
            self._filled_count += 1
        paint.color = color
        surface = self._surface
        handle = self._cell_handles.get(coord)
        if surface is not None and handle is not None:
            surface.paint_cell(handle, color)
        entries = self._boundaries.get(coord)
        for boundary_handle in entries.values():
            if surface is not None and boundary_handle is not None:
                surface.remove_boundary(boundary_handle)
        entries.clear()
