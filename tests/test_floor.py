import itertools
import random
from collections import Counter

import pytest

from slimedungeon.dungeon_generator import SidePathConfig
from slimedungeon.floor import FloorGenerator, Room, door_entrances, map_id_from_filename
from slimedungeon.gametypes import DoorEntrance, MapInfo

ALL_DOORS = list(DoorEntrance)


def _door_sets():
    for size in range(len(ALL_DOORS) + 1):
        yield from itertools.combinations(ALL_DOORS, size)


def _maps(normal_prefixes=("n",)):
    maps = []
    for index, doors in enumerate(_door_sets()):
        for prefix in normal_prefixes + ("s", "b"):
            maps.append(MapInfo(f"{prefix}{index}", list(doors)))
    return maps


def _floor(seed=42):
    floor = FloorGenerator(rng=random.Random(1))
    floor.generate_floor(5, 6, seed)
    floor.generate_main_path(6)
    return floor


def _expected_doors(floor, node):
    result = set()
    for other in floor.generator.graph[node]:
        diff = (other[0] - node[0], other[1] - node[1])
        result.add(
            {
                (-1, 0): DoorEntrance.WEST,
                (1, 0): DoorEntrance.EAST,
                (0, 1): DoorEntrance.NORTH,
                (0, -1): DoorEntrance.SOUTH,
            }[diff]
        )
    return result


def test_room_map_path():
    assert Room("s1", 1).map_path("assets") == "assets/maps/floor_01/map_s1.json"


def test_room_defaults():
    room = Room()
    assert (room.map_id, room.floor_id, room.door_positions) == ("", 0, {})


@pytest.mark.parametrize(
    "filename, expected",
    [
        ("map_s1.json", "s1"),
        ("dir/map_b2.json", "b2"),
        ("map_a_b.json", "b"),
        ("readme.txt", None),
        ("map_1.png", None),
    ],
)
def test_map_id_from_filename(filename, expected):
    assert map_id_from_filename(filename) == expected


def test_door_entrances_sides():
    doors = door_entrances([(0, 3), (5, 0), (9, 2), (4, 4)], 10, 5)
    assert doors == {DoorEntrance.WEST, DoorEntrance.NORTH, DoorEntrance.EAST, DoorEntrance.SOUTH}


def test_door_entrances_corner_and_inner():
    assert door_entrances([(0, 0)], 10, 5) == {DoorEntrance.NORTH, DoorEntrance.WEST}
    assert door_entrances([(3, 2)], 10, 5) == set()


def test_get_floor_assigns_every_room():
    floor = _floor()
    rooms = floor.get_floor(_maps())
    assert set(rooms) == set(floor.generator.graph)


def test_get_floor_doors_match_neighbours():
    floor = _floor()
    maps = {m.map_id: m for m in _maps()}
    rooms = floor.get_floor(maps.values())
    for node, room in rooms.items():
        assert set(maps[room.map_id].doors_loc) == _expected_doors(floor, node)


def test_get_floor_spawn_room_uses_spawn_map():
    floor = _floor()
    rooms = floor.get_floor(_maps())
    start = floor.starting_room()
    assert rooms[start].map_id.startswith("s")
    for node, room in rooms.items():
        if node != start:
            assert room.map_id.startswith("n")


def test_get_floor_uses_floor_id():
    floor = _floor()
    floor.floor_id = 2
    rooms = floor.get_floor(_maps())
    assert {room.floor_id for room in rooms.values()} == {2}


def test_get_floor_without_generate_returns_previous():
    floor = _floor()
    first = floor.get_floor(_maps())
    again = floor.get_floor([], generate=False)
    assert again == first


def test_get_floor_no_maps_gives_empty_floor():
    floor = _floor()
    assert floor.get_floor([]) == {}


def test_get_floor_spreads_maps_evenly():
    floor = _floor(seed=7)
    maps = _maps(normal_prefixes=("nA", "nB"))
    rooms = floor.get_floor(maps)
    counts = Counter(room.map_id for room in rooms.values())
    for index, _ in enumerate(_door_sets()):
        assert abs(counts[f"nA{index}"] - counts[f"nB{index}"]) <= 1


def test_rooms_and_connections_delegate():
    floor = _floor()
    start = floor.starting_room()
    neighbour = next(iter(floor.generator.graph[start]))
    assert floor.is_connected(start, neighbour)
    assert floor.ending_room() in floor.generator.graph
    assert floor.boss_room() == start


def test_main_path_too_long_raises():
    floor = FloorGenerator()
    floor.generate_floor(2, 2, 3)
    with pytest.raises(ValueError):
        floor.generate_main_path(5)


def test_side_path_with_taken_name_raises():
    floor = _floor()
    with pytest.raises(ValueError):
        floor.generate_side_path(SidePathConfig("Main", "Main", "", 0, 1))


def test_make_lock_and_key_places_one_lock_and_key():
    floor = _floor()
    floor.make_lock_and_key()
    nodes = list(floor.generator.graph)
    locks = [floor.generator.lock_at(n) for n in nodes if floor.generator.lock_at(n)]
    keys = [floor.generator.key_at(n) for n in nodes if floor.generator.key_at(n)]
    assert locks == ["A"]
    assert keys == ["a"]