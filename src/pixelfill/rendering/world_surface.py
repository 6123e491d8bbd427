from __future__ import annotations

from esper import World

from pixelfill.components.boundary_line import BoundaryLine
from pixelfill.components.pixel import Pixel, PixelSprite
from pixelfill.utils.color import RGB
from pixelfill.utils.grid import Coord, Direction


class WorldRenderSurface:
    """Render surface backed by esper entities.

    Handles are entity ids: one entity per cell (Pixel + PixelSprite) and one
    per boundary side (BoundaryLine). RenderSystem draws whatever exists.
    """

    def __init__(self, world: World):
        self.world = world

    def spawn_cell(self, coord: Coord, color: RGB) -> int:
        x, y = coord
        return self.world.create_entity(Pixel(x=x, y=y), PixelSprite(color=color))

    def spawn_boundary(self, coord: Coord, direction: Direction) -> int:
        x, y = coord
        return self.world.create_entity(BoundaryLine(x=x, y=y, direction=direction))

    def paint_cell(self, handle: int, color: RGB) -> None:
        try:
            sprite = self.world.component_for_entity(handle, PixelSprite)
        except KeyError:
            return
        sprite.color = color

    def remove_boundary(self, handle: int) -> None:
        if self.world.entity_exists(handle):
            self.world.delete_entity(handle, immediate=True)
