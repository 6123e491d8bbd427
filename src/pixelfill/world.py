from esper import World

from pixelfill.components.art_board import ArtBoard
from pixelfill.rendering.world_surface import WorldRenderSurface


def create_world(board: ArtBoard) -> World:
    """Create the ECS world holding ``board`` and one entity per visible cell and border."""
    world = World()
    world.create_entity(board)
    board.register_render_handles(WorldRenderSurface(world))
    return world


def get_board(world: World) -> ArtBoard | None:
    for _, board in world.get_component(ArtBoard):
        return board
    return None
