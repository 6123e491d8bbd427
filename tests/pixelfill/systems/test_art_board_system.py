import pytest

from pixelfill.components.board_completion import BoardCompletion
from pixelfill.events.bus import (
    EVENT_BOARD_CLICK,
    EVENT_BOARD_COMPLETED,
    EVENT_BOARD_READY,
    EVENT_REGION_FILLED,
    EventBus,
)
from pixelfill.systems.art_board_system import ArtBoardSystem
from pixelfill.world import create_world
from tests.helpers import COLORS, board_from_strings


class EventCapture:
    def __init__(self, bus: EventBus, *names):
        self.received = []
        for name in names:
            bus.subscribe(name, self._make_handler(name))

    def _make_handler(self, name):
        def handler(sender, **payload):
            self.received.append((name, payload))
        return handler

    def named(self, name):
        return [payload for event, payload in self.received if event == name]


@pytest.fixture
def setup_world():
    bus = EventBus()
    capture = EventCapture(bus, EVENT_BOARD_READY, EVENT_REGION_FILLED, EVENT_BOARD_COMPLETED)
    board = board_from_strings("RRG", "BBG")
    world = create_world(board)
    system = ArtBoardSystem(world, bus)
    return bus, world, board, system, capture


def test_ready_event_reports_board_shape(setup_world):
    bus, world, board, system, capture = setup_world
    assert capture.named(EVENT_BOARD_READY) == [{'width': 3, 'height': 2, 'region_count': 3}]
    assert system.board is board


def test_click_fills_region_and_emits_event(setup_world):
    bus, world, board, system, capture = setup_world
    bus.emit(EVENT_BOARD_CLICK, x=0.2, y=1.1)
    filled = capture.named(EVENT_REGION_FILLED)
    assert len(filled) == 1
    assert filled[0]['cells'] == {(0, 1), (1, 1)}
    assert filled[0]['color'] == COLORS['R']
    assert filled[0]['root'] == board.region_root((0, 1))
    assert board.is_filled((1, 1))


def test_repeat_click_on_filled_region_is_silent(setup_world):
    bus, world, board, system, capture = setup_world
    bus.emit(EVENT_BOARD_CLICK, x=0.0, y=0.0)
    bus.emit(EVENT_BOARD_CLICK, x=1.0, y=0.0)
    assert len(capture.named(EVENT_REGION_FILLED)) == 1


def test_invalid_and_outside_clicks_are_ignored(setup_world):
    bus, world, board, system, capture = setup_world
    bus.emit(EVENT_BOARD_CLICK, x=None, y=0.0)
    bus.emit(EVENT_BOARD_CLICK, x='left', y=0.0)
    bus.emit(EVENT_BOARD_CLICK, x=-3.0, y=0.0)
    bus.emit(EVENT_BOARD_CLICK, x=10.0, y=0.0)
    assert capture.named(EVENT_REGION_FILLED) == []
    assert board.filled_count == 0


def test_completion_is_announced_once(setup_world):
    bus, world, board, system, capture = setup_world
    for point in [(0.0, 0.0), (0.0, 1.0), (2.0, 0.0)]:
        bus.emit(EVENT_BOARD_CLICK, x=point[0], y=point[1])
    assert capture.named(EVENT_BOARD_COMPLETED) == [{'filled_count': 6}]
    assert world.component_for_entity(system.board_entity, BoardCompletion).filled_count == 6
    bus.emit(EVENT_BOARD_CLICK, x=2.0, y=1.0)
    assert len(capture.named(EVENT_BOARD_COMPLETED)) == 1


def test_system_without_board_ignores_clicks():
    from esper import World

    bus = EventBus()
    system = ArtBoardSystem(World(), bus)
    bus.emit(EVENT_BOARD_CLICK, x=0.0, y=0.0)
    assert system.board is None
