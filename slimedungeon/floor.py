"""Floors of a dungeon: rooms laid out by the generator and given maps."""

from __future__ import annotations

import os
import random
import re
from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable, Optional

from slimedungeon.config import PREFIXES_FOR_SPECIAL_ROOMS, SpecialRoomType
from slimedungeon.dungeon_generator import DungeonGenerator, Node, SidePathConfig
from slimedungeon.gametypes import DoorEntrance, MapInfo, Vec2

_MAP_FILE = re.compile(r"map_.*\.json")

_DIRECTION_TO_ENTRANCE: dict[Node, DoorEntrance] = {
    (-1, 0): DoorEntrance.WEST,
    (1, 0): DoorEntrance.EAST,
    (0, 1): DoorEntrance.NORTH,
    (0, -1): DoorEntrance.SOUTH,
}


@dataclass
class Room:
    """One room of a floor and the map it is drawn from."""

    map_id: str = ""
    floor_id: int = 0
    door_positions: dict[DoorEntrance, Vec2] = field(default_factory=dict)

    def map_path(self, asset_path: str) -> str:
        """Return the path of this room's map file under the asset directory."""
        return f"{asset_path}/maps/floor_0{self.floor_id}/map_{self.map_id}.json"


def map_id_from_filename(filename: str) -> Optional[str]:
    """Return the map id of a file named like "map_<id>.json", else None."""
    name = os.path.basename(filename)
    if _MAP_FILE.fullmatch(name) is None:
        return None
    underscore = name.rfind("_")
    dot = name.rfind(".")
    return name[underscore + 1 : dot]


def door_entrances(
    door_positions: Iterable[tuple[int, int]], width: int, height: int
) -> set[DoorEntrance]:
    """Return the sides of a width x height map on which door tiles lie."""
    doors: set[DoorEntrance] = set()
    for x, y in door_positions:
        if y == 0:
            doors.add(DoorEntrance.NORTH)
        elif y == height - 1:
            doors.add(DoorEntrance.SOUTH)
        if x == 0:
            doors.add(DoorEntrance.WEST)
        elif x == width - 1:
            doors.add(DoorEntrance.EAST)
    return doors


class FloorGenerator:
    """Generates a floor layout and picks a fitting map for every room."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.generator = DungeonGenerator()
        self.floor_id = 0
        self._floor: dict[Node, Room] = {}
        self._rng = rng if rng is not None else random.Random()

    def generate_floor(self, height: int, width: int, seed: Optional[int]) -> None:
        """Start a fresh layout on a height x width grid."""
        self.generator = DungeonGenerator(height, width, seed)

    def generate_main_path(self, length: int) -> None:
        self.generator.generate_main_path(length)

    def generate_side_path(self, config: SidePathConfig) -> None:
        self.generator.generate_side_path(config)

    def make_lock_and_key(self) -> None:
        self.generator.make_lock_and_key()

    def is_connected(self, first: Node, second: Node) -> bool:
        return self.generator.is_connected(first, second)

    def starting_room(self) -> Node:
        return self.generator.starting_room

    def ending_room(self) -> Node:
        return self.generator.ending_room

    def boss_room(self) -> Node:
        return self.generator.boss_room()

    def get_floor(
        self, available_maps: Iterable[MapInfo], generate: bool = True
    ) -> dict[Node, Room]:
        """Give every room a map with matching doors, spreading maps evenly.

        With generate false the previously chosen floor is returned.
        """
        room_types: dict[Node, SpecialRoomType] = {
            self.starting_room(): SpecialRoomType.SPAWN_ROOM
        }
        room_types.setdefault(self.boss_room(), SpecialRoomType.BOSS_ROOM)

        if not generate:
            return dict(self._floor)

        self._floor = {}
        maps = list(available_maps)
        special_prefixes = set(PREFIXES_FOR_SPECIAL_ROOMS.values())
        chosen: Counter[MapInfo] = Counter()

        for node, neighbours in self.generator.graph.items():
            doors = {
                _DIRECTION_TO_ENTRANCE[direction]
                for direction in ((n[0] - node[0], n[1] - node[1]) for n in neighbours)
                if direction in _DIRECTION_TO_ENTRANCE
            }
            room_type = room_types.get(node)
            if room_type is None:
                fits_type = [m for m in maps if m.map_id[:1] not in special_prefixes]
            else:
                prefix = PREFIXES_FOR_SPECIAL_ROOMS[room_type]
                fits_type = [m for m in maps if m.map_id[:1] == prefix]

            candidates = [m for m in fits_type if set(m.doors_loc) == doors]
            if not candidates:
                continue

            least = min(chosen[m] for m in candidates)
            pool = [m for m in candidates if chosen[m] == least]
            selected = self._rng.choice(pool)
            chosen[selected] += 1
            self._floor[node] = Room(selected.map_id, self.floor_id)

        return dict(self._floor)