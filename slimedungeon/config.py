"""Game-wide tuning values, lookup tables and collision filtering rules.

Game units are pixels; the physics world works in meters.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum, IntEnum

from slimedungeon.components import TileComponent
from slimedungeon.gametypes import EnemyType, ItemBehaviour, Vec2
from slimedungeon.tiled import Collision

DEBUG_MODE = True
GAME_SCALE = 3.0
METER_TO_PIXEL_RATIO = 30.0
PIXEL_TO_METER_RATIO = 1 / 30.0
TILE_HEIGHT = 16.0
ONE_FRAME_TIME = 1 / 60.0
ONE_FRAME_TIME_MS = 1000.0 / 60.0

FRAME_CYCLE = 60
MAXIMUM_NUMBER_OF_LAYERS = 10
PLAYER_ATTACK_RANGE = 1000.0
PLAYER_ATTACK_DAMAGE = 10.0
PLAYER_ATTACK_ANGLE = 0.785
DEFAULT_DENSITY = 1.0
DEFAULT_FRICTION = 1.0
DEFAULT_RESTITUTION = 0.05

MAP_FIRST_ENTITY = 1000
NUMBER_OF_MAP_ENTITIES = 500
ENEMY_FIRST_ENTITY = 2000
NUMBER_OF_ENEMY_ENTITIES = 100
PLAYER_ENTITY = 1
PLAYER_ANIMATION = 184

PLAYER_ACC = 300
ENEMY_ACC = 25

STARTING_ROOM_ID = 0

INIT_WIDTH = 1920
INIT_HEIGHT = 1080

BACKGROUND_COLOR = "#17205C"

MAX_CHARACTER_HP = 100.0
DEFAULT_CHARACTER_HP = 100.0

DEFAULT_ENEMY_KNOCKBACK_FORCE = 300.0
APPLY_KNOCKBACK = False
MAX_DUNGEON_DEPTH = 5

TEXT_TAG_DEFAULT_SIZE = 20
TEXT_TAG_DEFAULT_LIFETIME = 60.0
TEXT_TAG_DEFAULT_SPEED = 1.0
TEXT_TAG_DEFAULT_ACCELERATION = 10.0
TEXT_TAG_DEFAULT_FADE_VALUE = 20

ARMOUR_LAYER = 6
WEAPON_LAYER = 7

WEAPON_DEFAULT_DAMAGE_AMOUNT = 0
WEAPON_DEFAULT_IS_ATTACKING = False
WEAPON_DEFAULT_QUEUED_ATTACK = False
WEAPON_DEFAULT_QUEUED_ATTACK_FLAG = False
WEAPON_DEFAULT_IS_SWINGING_FORWARD = True
WEAPON_DEFAULT_IS_FACING_RIGHT = True
WEAPON_DEFAULT_CURRENT_ANGLE = 0.0
WEAPON_DEFAULT_INITIAL_ANGLE = 30.0
WEAPON_DEFAULT_ROTATION_SPEED = 15.0
WEAPON_DEFAULT_SWING_DISTANCE = 90.0
WEAPON_DEFAULT_REMAINING_DISTANCE = 0.0
WEAPON_DEFAULT_RECOIL_AMOUNT = 10.0

WEAPON_INTERACTION_DISTANCE = 200

STARTING_POSITION = Vec2(325.0, 325.0)
SPAWN_OFFSET = 25.0

INVULNERABILITY_TIME_AFTER_DMG = 30.0

FULL_HP_COLOR = (0.0, 1.0, 0.0, 1.0)
LOW_HP_COLOR = (1.0, 0.0, 0.0, 1.0)

ROTATION_90 = 90.0
ROTATION_180 = 180.0
ROTATION_270 = 270.0
MAX_LEFT_FACING_ANGLE = 420

DEFAULT_IP = "127.0.0.1"
DEFAULT_PORT = "10823"
MILLIS_PER_TICK = 10

_PLAYER_TAG = re.compile(r"Player [0-9]+")


@dataclass(frozen=True)
class ColorBalance:
    red_balance: int = 0
    green_balance: int = 0
    blue_balance: int = 0


def color_to_string(floor_id: int) -> str:
    """Return the background colour used on a floor."""
    return {0: "#331541", 1: "#18215d", 2: "#25392e"}.get(floor_id, BACKGROUND_COLOR)


MAP_FLOOR_TO_TEXTURE_FILE = {1: "CosmicLilac", 2: "Jungle"}

MAP_DUNGEON_LEVEL_TO_FLOOR_INFO = {1: 1, 2: 1, 3: 1, 4: 2, 5: 2}

MAP_COLOR_SCHEME = {
    1: ColorBalance(25, 0, 0),
    2: ColorBalance(0, 25, 0),
    3: ColorBalance(0, 15, 15),
    4: ColorBalance(45, 6, 35),
    5: ColorBalance(15, 62, 35),
}


class SpecialRoomType(Enum):
    NORMAL_ROOM = 0
    SPAWN_ROOM = 1
    BOSS_ROOM = 2


PREFIXES_FOR_SPECIAL_ROOMS = {
    SpecialRoomType.SPAWN_ROOM: "s",
    SpecialRoomType.BOSS_ROOM: "b",
}


@dataclass
class EnemyConfig:
    name: str = ""
    hp: float = 0.0
    damage: float = 0.0
    texture_data: TileComponent = field(default_factory=TileComponent)
    collision_data: Collision = field(default_factory=Collision)


ENEMY_DATA: dict[EnemyType, tuple[EnemyConfig, ...]] = {
    EnemyType.MELEE: (
        EnemyConfig(
            name="Slime",
            hp=20.0,
            damage=5.0,
            texture_data=TileComponent(18, "AnimSlimes", 4),
            collision_data=Collision(1, 8.5625, 13.24865, 16.375, 8.5227000004),
        ),
    ),
    EnemyType.BOSS: (
        EnemyConfig(
            name="Boss",
            hp=200.0,
            damage=30.0,
            texture_data=TileComponent(54, "AnimSlimes", 4),
            collision_data=Collision(1, 8.5625, 13.24865, 16.375, 8.5227000004),
        ),
    ),
}


@dataclass
class ItemConfig:
    name: str = ""
    value: float = 0.0
    behaviour: ItemBehaviour = ItemBehaviour.HEAL
    texture_data: TileComponent = field(default_factory=TileComponent)


ITEMS_DATA: tuple[ItemConfig, ...] = (
    ItemConfig("HPPotion", 10.0, ItemBehaviour.HEAL, TileComponent(690, "Items", 4)),
    ItemConfig("DMGPotion", 2.0, ItemBehaviour.DMGUP, TileComponent(693, "Items", 4)),
)


class EntityCategory(IntEnum):
    BOUNDARY = 0x0001
    PLAYER = 0x0002
    DOOR = 0x0003
    ENEMY = 0x0004
    PASSAGE = 0x0005
    BULLET = 0x0006
    ITEM = 0x0007
    WEAPON = 0x0008


_C = EntityCategory

CATEGORIES_LOOKUP: dict[str, EntityCategory] = {
    "Wall": _C.BOUNDARY,
    "Bullet": _C.BULLET,
    "Enemy": _C.ENEMY,
    "Passage": _C.PASSAGE,
    "Item": _C.ITEM,
    "Player": _C.PLAYER,
    "Door": _C.DOOR,
    "Weapon": _C.WEAPON,
}

BIT_MASK_LOOKUP: dict[str, int] = {
    "Wall": _C.BOUNDARY | _C.PLAYER | _C.ENEMY | _C.BULLET | _C.ITEM,
    "Bullet": _C.BOUNDARY | _C.ENEMY,
    "Enemy": _C.BOUNDARY | _C.PLAYER | _C.WEAPON,
    "Passage": _C.BOUNDARY | _C.PLAYER,
    "Item": int(_C.BOUNDARY),
    "Player": _C.BOUNDARY | _C.ENEMY | _C.ITEM,
    "Door": _C.BOUNDARY | _C.PLAYER,
    "Weapon": int(_C.ENEMY),
}


def is_player_tag(tag: str) -> bool:
    """Tell whether a collider tag names a player, as in "Player 3"."""
    return _PLAYER_TAG.fullmatch(tag) is not None


def _lookup_name(tag: str) -> str | None:
    if tag in CATEGORIES_LOOKUP:
        return tag
    if is_player_tag(tag):
        return "Player"
    if tag in ("Chest", "Potion"):
        return "Passage"
    return None


def string_to_category_bits(tag: str) -> int:
    """Return the collision category bits for a tag, 0 when unknown."""
    name = _lookup_name(tag)
    return int(CATEGORIES_LOOKUP[name]) if name is not None else 0


def string_to_mask_bits(tag: str) -> int:
    """Return the bits of the categories a tag collides with, 0 when unknown."""
    name = _lookup_name(tag)
    return int(BIT_MASK_LOOKUP[name]) if name is not None else 0


def string_to_index_group(tag: str) -> int:
    """Return the collision group index; bullets never collide with each other."""
    return -8 if tag == "Bullet" else 0