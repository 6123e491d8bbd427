from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Set, Union

from pixelfill.utils.grid import Coord, Grid


@dataclass(slots=True)
class RegionRoot:
    """Canonical cell of a region; owns the full member set."""
    members: Set[Coord] = field(default_factory=set)


@dataclass(slots=True)
class RegionChild:
    """Non-root cell; ``parent`` is a coordinate, never an owning reference."""
    parent: Coord


RegionEntry = Union[RegionRoot, RegionChild]


class RegionSet:
    """Union-find over grid coordinates.

    Regions are built once by ``from_grid`` and never re-linked afterwards.
    Lookups walk parent links without path compression; chains only form
    during construction so they stay bounded by the image size.
    """

    def __init__(self, entries: Grid[RegionEntry]):
        self._entries = entries
        self._region_count = len(entries)

    @classmethod
    def from_grid(cls, data: Grid) -> RegionSet:
        region_set = cls(Grid.generate(data.width, data.height, lambda x, y: RegionRoot({(x, y)})))
        # Right and down cover every adjacent pair once; transitivity handles
        # paths that turn corners.
        for x, y in data.coords():
            current = data.get((x, y))
            for neighbor in ((x + 1, y), (x, y + 1)):
                if data.in_bounds(neighbor) and current == data.get(neighbor):
                    region_set.union((x, y), neighbor)
        return region_set

    @property
    def region_count(self) -> int:
        return self._region_count

    def find(self, coord: Coord) -> Coord | None:
        current = coord
        while True:
            entry = self._entries.get(current)
            if entry is None:
                return None
            if isinstance(entry, RegionRoot):
                return current
            current = entry.parent

    def linked_members(self, root: Coord) -> Set[Coord] | None:
        """Member set of ``root``; None unless ``root`` is itself a root."""
        entry = self._entries.get(root)
        if isinstance(entry, RegionRoot):
            return entry.members
        return None

    def union(self, a: Coord, b: Coord) -> None:
        a_root = self.find(a)
        b_root = self.find(b)
        if a_root is None or b_root is None or a_root == b_root:
            return
        keep = self._entries.get(a_root)
        merged = self._entries.get(b_root)
        keep.members |= merged.members
        self._entries.set(b_root, RegionChild(parent=a_root))
        self._region_count -= 1

    def roots(self) -> Iterator[Coord]:
        for coord in self._entries.coords():
            if isinstance(self._entries.get(coord), RegionRoot):
                yield coord
