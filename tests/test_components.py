import pytest

from slimedungeon.components import (
    AnimationComponent,
    AnimationFrame,
    CharacterComponent,
    DoorComponent,
    EquipmentComponent,
    FightActionEvent,
    InventoryComponent,
    ItemComponent,
    PassageComponent,
    SoundComponent,
    SpawnerComponent,
    TileComponent,
    TravellingDungeonComponent,
    WeaponSwingComponent,
)
from slimedungeon.gametypes import DoorEntrance, EnemyType, SlotType, SoundType


def test_character_defaults_from_source():
    character = CharacterComponent()
    assert character.hp == 1
    assert character.attacked is False


def test_sound_defaults_from_source():
    sound = SoundComponent()
    assert sound.volume == 100.0
    assert sound.sound_to_play is SoundType.MENU_BACKGROUND_MUSIC
    assert sound.stop_playing is False


def test_spawner_defaults_from_source():
    spawner = SpawnerComponent()
    assert spawner.spawn_cooldown == 100.0
    assert spawner.enemy_type is EnemyType.MELEE


def test_animation_lists_are_independent():
    a, b = AnimationComponent(), AnimationComponent()
    a.frames.append(AnimationFrame(tile_id=5, duration=100.0))
    assert b.frames == []
    assert a.loop_animation is True


def test_slot_maps_are_independent():
    equipment, other = EquipmentComponent(), EquipmentComponent()
    equipment.slots[SlotType.WEAPON] = 7
    assert other.slots == {}
    assert InventoryComponent().slots == {}


def test_swing_sets_are_independent():
    swing = WeaponSwingComponent()
    swing.enemy_hit.add(3)
    assert WeaponSwingComponent().enemy_hit == set()
    assert swing.enemy_collided == set()


def test_passage_queue_and_callback():
    calls = []
    passage = PassageComponent(move_callback=lambda: calls.append(True))
    passage.move_in_dungeon.append(True)
    passage.move_callback()
    assert calls == [True]
    assert list(PassageComponent().move_in_dungeon) == []
    assert passage.active_passage is True


def test_travelling_callback_receives_direction():
    seen = []
    travelling = TravellingDungeonComponent(move_callback=seen.append)
    travelling.move_callback((0, 1))
    assert seen == [(0, 1)]
    assert travelling.doors_passed == 0


def test_item_texture_default_is_fresh():
    a, b = ItemComponent(), ItemComponent()
    a.texture_data.id = 690
    assert b.texture_data == TileComponent()


def test_door_requires_entrance():
    with pytest.raises(TypeError):
        DoorComponent()
    assert DoorComponent(DoorEntrance.EAST).entrance is DoorEntrance.EAST


def test_fight_action_event_holds_entity():
    assert FightActionEvent(12).entity == 12
    assert FightActionEvent(12) == FightActionEvent(entity=12)