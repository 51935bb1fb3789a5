"""Component records attached to entities."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Callable, Optional

from slimedungeon.gametypes import (
    DoorEntrance,
    EnemyType,
    Entity,
    ItemBehaviour,
    SlotType,
    SoundType,
    Vec2,
)


@dataclass
class AnimationFrame:
    tile_id: int = 0
    duration: float = 0.0


@dataclass
class AnimationComponent:
    frames: list[AnimationFrame] = field(default_factory=list)
    current_frame: int = 0
    time_until_next_frame: float = 0.0
    loop_animation: bool = True


@dataclass
class TileComponent:
    id: int = 0
    tile_set: str = ""
    layer: int = 0


@dataclass
class CharacterComponent:
    hp: float = 1.0
    damage: float = 0.0
    attacked: bool = False
    time_since_attacked: int = 0
    knock_back_force: Vec2 = Vec2(0.0, 0.0)


@dataclass
class FloorComponent:
    current_player_floor: int = 0


@dataclass
class SpawnerComponent:
    spawn_cooldown: float = 100.0
    loop_spawn: bool = False
    no_spawns: int = 0
    enemy_type: EnemyType = EnemyType.MELEE


@dataclass
class SoundComponent:
    sound_to_play: SoundType = SoundType.MENU_BACKGROUND_MUSIC
    is_looping: bool = False
    volume: float = 100.0
    stop_playing: bool = False


@dataclass
class ItemComponent:
    name: str = ""
    value: float = 0.0
    behaviour: ItemBehaviour = ItemBehaviour.HEAL
    texture_data: TileComponent = field(default_factory=TileComponent)
    equipped: bool = False


@dataclass
class DoorComponent:
    entrance: DoorEntrance


@dataclass
class ItemAnimationComponent:
    animation_duration: float = 0.0
    current_animation_time: float = 0.0
    destroy: bool = False
    starting_position_y: float = 0.0
    should_animate: bool = True


@dataclass
class PassageComponent:
    move_in_dungeon: deque = field(default_factory=deque)
    move_callback: Optional[Callable[[], None]] = None
    active_passage: bool = True


@dataclass
class TravellingDungeonComponent:
    doors_passed: int = 0
    move_in_dungeon: deque = field(default_factory=deque)
    move_callback: Optional[Callable[[tuple[int, int]], None]] = None


@dataclass
class EquipmentComponent:
    slots: dict[SlotType, Entity] = field(default_factory=dict)


@dataclass
class InventoryComponent:
    slots: dict[SlotType, Entity] = field(default_factory=dict)


@dataclass
class HelmetComponent:
    id: int = 0


@dataclass
class BodyArmourComponent:
    id: int = 0


@dataclass
class WeaponSwingComponent:
    enemy_hit: set[Entity] = field(default_factory=set)
    enemy_collided: set[Entity] = field(default_factory=set)


@dataclass
class MapComponent:
    path: str = ""


@dataclass
class PlayerComponent:
    collided_doors: int = 0


@dataclass
class FightActionEvent:
    entity: Entity