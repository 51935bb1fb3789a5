"""Shared game types: vectors, enumerations and small records."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum, IntFlag
from typing import Union

Entity = int
ComponentTypeId = int

MAX_ENTITIES = 5000
MAX_COMPONENTS = 64


@dataclass(frozen=True)
class Vec2:
    """A two-dimensional float vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Union["Vec2", tuple, int, float]) -> "Vec2":
        if isinstance(other, Vec2):
            return Vec2(self.x + other.x, self.y + other.y)
        if isinstance(other, tuple) and len(other) == 2:
            return Vec2(self.x + other[0], self.y + other[1])
        if isinstance(other, (int, float)) and not isinstance(other, bool):
            return Vec2(self.x + other, self.y + other)
        return NotImplemented

    def __mul__(self, other: Union["Vec2", tuple, int, float]) -> "Vec2":
        if isinstance(other, Vec2):
            return Vec2(self.x * other.x, self.y * other.y)
        if isinstance(other, tuple) and len(other) == 2:
            return Vec2(self.x * other[0], self.y * other[1])
        if isinstance(other, (int, float)) and not isinstance(other, bool):
            return Vec2(self.x * other, self.y * other)
        return NotImplemented

    def __rmul__(self, other: Union[int, float]) -> "Vec2":
        if isinstance(other, (int, float)) and not isinstance(other, bool):
            return Vec2(other * self.x, other * self.y)
        return NotImplemented

    def __neg__(self) -> "Vec2":
        return Vec2(-self.x, -self.y)


class FragmentShader(Enum):
    NONE = 0
    DEATH = 1


class SoundType(Enum):
    MENU_BACKGROUND_MUSIC = 0
    GAME_BACKGROUND_MUSIC = 1


class StateAction(Enum):
    PUSH = 0
    POP = 1
    PUT_ON_TOP = 2


class SpecialBlock(IntEnum):
    DOORS_COLLIDER = 0
    STATIC_WALL_COLLIDER = 1
    SPAWNER_BLOCK = 2
    STARTING_POINT = 3
    DOWN_DOOR = 4
    BOSS_SPAWNER_BLOCK = 5
    CHEST_SPAWNER_BLOCK = 6


class ItemBehaviour(IntEnum):
    HEAL = 0
    DMGUP = 1


ITEM_BEHAVIOURS = {"Heal": ItemBehaviour.HEAL, "DmgUp": ItemBehaviour.DMGUP}


class EnemyType(IntEnum):
    MELEE = 0
    BOSS = 1


ENEMY_TYPES = {"Melee": EnemyType.MELEE, "Boss": EnemyType.BOSS}


class DoorEntrance(IntEnum):
    NORTH = ord("N")
    SOUTH = ord("S")
    WEST = ord("W")
    EAST = ord("E")


class WeaponType(IntEnum):
    UNKNOWN = 0
    MELEE = 1
    WAND = 2
    BOW = 3


class ObjectType(IntEnum):
    NORMAL = 1
    BULLET = 2


class FlipFlag(IntFlag):
    NO_FLIP = 0x0
    DIAGONAL_FLIP = 0x2
    VERTICAL_FLIP = 0x4
    HORIZONTAL_FLIP = 0x8
    DIAGONAL_VERTICAL_FLIP = 0x6
    DIAGONAL_HORIZONTAL_FLIP = 0xA
    HORIZONTAL_VERTICAL_FLIP = 0xC
    ALL_FLIPS = 0xE


class SlotType(IntEnum):
    WEAPON = 1
    HELMET = 2
    BODY_ARMOUR = 3


class ItemLootType(IntEnum):
    WEAPON_LOOT = 1
    BODY_ARMOUR_LOOT = 2
    POTION_LOOT = 3
    HELMET_LOOT = 4


def string_to_weapon_type(name: str) -> WeaponType:
    """Map a weapon type name to its enum; unknown names fall back to melee."""
    return {
        "melee": WeaponType.MELEE,
        "wand": WeaponType.WAND,
        "bow": WeaponType.BOW,
    }.get(name, WeaponType.MELEE)


_DOOR_TO_DIRECTION: dict[DoorEntrance, tuple[int, int]] = {
    DoorEntrance.NORTH: (0, 1),
    DoorEntrance.SOUTH: (0, -1),
    DoorEntrance.EAST: (1, 0),
    DoorEntrance.WEST: (-1, 0),
}
_DIRECTION_TO_DOOR = {direction: door for door, direction in _DOOR_TO_DIRECTION.items()}


def door_to_direction(door: DoorEntrance) -> tuple[int, int]:
    """Return the grid direction a door leads to."""
    return _DOOR_TO_DIRECTION[DoorEntrance(door)]


def direction_to_door(direction) -> DoorEntrance:
    """Return the door that lies in a grid direction; raise KeyError if none."""
    if isinstance(direction, Vec2):
        key = (int(direction.x), int(direction.y))
    else:
        key = (direction[0], direction[1])
    return _DIRECTION_TO_DOOR[key]


@dataclass(eq=False)
class MapInfo:
    """A room map and the doors it has; identity is the map id alone."""

    map_id: str = ""
    doors_loc: list[DoorEntrance] = field(default_factory=list)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MapInfo):
            return NotImplemented
        return self.map_id == other.map_id

    def __hash__(self) -> int:
        return hash(self.map_id)


@dataclass
class CollisionData:
    entity_id: Entity
    tag: str


@dataclass
class RaycastData:
    entity_id: Entity
    tag: str
    position: Vec2


@dataclass
class PickUpInfo:
    character_entity: Entity
    item_entity: Entity
    slot: SlotType


MAP_WIDTH = 0
MAP_HEIGHT = 0
MAP_OFFSET = Vec2(0.0, 0.0)
STARTING_POSITION = Vec2(325.0, 325.0)