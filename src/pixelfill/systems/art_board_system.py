from __future__ import annotations

import logging
from typing import Any

from esper import World

from pixelfill.components.art_board import ArtBoard
from pixelfill.components.board_completion import BoardCompletion
from pixelfill.events.bus import (
    EVENT_BOARD_CLICK,
    EVENT_BOARD_COMPLETED,
    EVENT_BOARD_READY,
    EVENT_REGION_FILLED,
    EventBus,
)

logger = logging.getLogger(__name__)


class ArtBoardSystem:
    """Applies board clicks to the ArtBoard and announces fill progress."""

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.board_entity: int | None = None
        for ent, _ in self.world.get_component(ArtBoard):
            self.board_entity = ent
            break
        self.event_bus.subscribe(EVENT_BOARD_CLICK, self.on_board_click)
        board = self.board
        if board is not None:
            self.event_bus.emit(
                EVENT_BOARD_READY,
                width=board.width,
                height=board.height,
                region_count=board.region_count,
            )

    @property
    def board(self) -> ArtBoard | None:
        if self.board_entity is None:
            return None
        try:
            return self.world.component_for_entity(self.board_entity, ArtBoard)
        except KeyError:
            return None

    def on_board_click(self, sender: Any, **payload: Any) -> None:
        x = payload.get("x")
        y = payload.get("y")
        if x is None or y is None:
            return
        try:
            point = (float(x), float(y))
        except (TypeError, ValueError):
            return
        board = self.board
        if board is None:
            return
        coord = board.cell_at_point(point)
        if coord is None or board.is_filled(coord):
            return
        root = board.region_root(coord)
        cells = board.fill_at(point)
        if not cells:
            return
        self.event_bus.emit(EVENT_REGION_FILLED, root=root, cells=cells, color=board.color_at(coord))
        if board.is_complete() and not self.world.has_component(self.board_entity, BoardCompletion):
            self.world.add_component(self.board_entity, BoardCompletion(filled_count=board.filled_count))
            logger.info("Board complete: %d cells filled", board.filled_count)
            self.event_bus.emit(EVENT_BOARD_COMPLETED, filled_count=board.filled_count)
