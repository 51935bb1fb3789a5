import pytest

from slimedungeon.gametypes import (
    DoorEntrance,
    MapInfo,
    Vec2,
    WeaponType,
    direction_to_door,
    door_to_direction,
    string_to_weapon_type,
)


def test_vec2_add_vectors():
    assert Vec2(1.0, 2.0) + Vec2(3.0, 4.0) == Vec2(4.0, 6.0)


def test_vec2_add_commutes():
    a, b = Vec2(1.5, -2.0), Vec2(0.25, 7.0)
    assert a + b == b + a


def test_vec2_add_scalar_adds_to_both():
    v = Vec2(1.0, 2.0) + 1
    assert v.x - 1.0 == 1.0 and v.y - 1.0 == 2.0


def test_vec2_add_tuple_matches_vector():
    assert Vec2(1.0, 2.0) + (3.0, 4.0) == Vec2(1.0, 2.0) + Vec2(3.0, 4.0)


def test_vec2_mul_identity_and_zero():
    v = Vec2(3.5, -1.25)
    assert v * 1 == v
    assert v * 0 == Vec2(0.0, 0.0)
    assert v * Vec2(1.0, 1.0) == v


def test_vec2_rmul_matches_mul_and_sum():
    v = Vec2(2.0, -3.0)
    assert 2 * v == v * 2
    assert 2 * v == v + v


def test_vec2_neg():
    v = Vec2(2.0, -3.0)
    assert -(-v) == v
    assert v + (-v) == Vec2(0.0, 0.0)
    assert v * -1 == -v


def test_vec2_rejects_strings():
    with pytest.raises(TypeError):
        Vec2(1.0, 1.0) + "x"


def test_string_to_weapon_type():
    assert string_to_weapon_type("melee") is WeaponType.MELEE
    assert string_to_weapon_type("wand") is WeaponType.WAND
    assert string_to_weapon_type("bow") is WeaponType.BOW
    assert string_to_weapon_type("sword") is WeaponType.MELEE


def test_door_directions_from_source():
    assert door_to_direction(DoorEntrance.NORTH) == (0, 1)
    assert door_to_direction(DoorEntrance.SOUTH) == (0, -1)
    assert door_to_direction(DoorEntrance.EAST) == (1, 0)
    assert door_to_direction(DoorEntrance.WEST) == (-1, 0)


@pytest.mark.parametrize("door", list(DoorEntrance))
def test_door_direction_round_trip(door):
    assert direction_to_door(door_to_direction(door)) is door


def test_opposite_door():
    dx, dy = door_to_direction(DoorEntrance.NORTH)
    assert direction_to_door((-dx, -dy)) is DoorEntrance.SOUTH


def test_direction_to_door_accepts_vec2():
    assert direction_to_door(Vec2(1.0, 0.0)) is DoorEntrance.EAST


def test_direction_to_door_unknown_raises():
    with pytest.raises(KeyError):
        direction_to_door((1, 1))


def test_door_entrance_values_are_letters():
    assert direction_to_door((0, 1)) == ord("N")
    assert chr(direction_to_door((-1, 0))) == "W"


def test_map_info_identity_by_id():
    a = MapInfo("3", [DoorEntrance.NORTH])
    b = MapInfo("3", [DoorEntrance.SOUTH, DoorEntrance.EAST])
    c = MapInfo("4", [DoorEntrance.NORTH])
    assert a == b
    assert a != c
    assert len({a, b, c}) == 2