# slimedungeon

The core of a small dungeon-crawler game, usable as a library. It has no
dependencies outside the standard library.

## Modules

- `slimedungeon.gametypes`: shared value types and enums: `Vec2`,
  `DoorEntrance`, `WeaponType`, `SlotType`, `StateAction`, `MapInfo`,
  `CollisionData`, `PickUpInfo` and more, plus `string_to_weapon_type`,
  `door_to_direction` and `direction_to_door`.
- `slimedungeon.components`: plain dataclass components such as
  `TileComponent`, `CharacterComponent`, `EquipmentComponent`,
  `PassageComponent` and `TravellingDungeonComponent`.
- `slimedungeon.ecs`: an entity-component system. `Coordinator` creates and
  destroys entities, stores components by type and keeps each registered
  `System`'s `entities` set in step with the entities' bit signatures.
  Misuse raises `EcsError`.
- `slimedungeon.config`: tuning constants, enemy and item tables and the
  collision-filter helpers `string_to_category_bits`, `string_to_mask_bits`,
  `string_to_index_group` and `is_player_tag`.
- `slimedungeon.tiled`: dataclasses for Tiled maps and tilesets.
  `map_from_dict` and `tileset_from_dict` build them from decoded JSON.
  `parse_map` and `parse_tileset` read a file, and on failure log the error
  and return an empty record.
- `slimedungeon.dungeon_generator`: `DungeonGenerator` lays out rooms on a
  grid from a seed. It builds a "Main" path, then side paths from a
  `SidePathConfig`, and can place a lock and its key. It raises
  `PathGenerationError` when a layout cannot be found and `ValueError` for a
  bad configuration.
- `slimedungeon.floor`: `FloorGenerator` drives the generator and, in
  `get_floor`, gives each room a `MapInfo` whose doors match the room's
  connections. It keeps "s…" maps for the spawn room and "b…" maps for the
  boss room, and spreads the choices evenly. `map_id_from_filename` and
  `door_entrances` help build the `MapInfo` list. `Room.map_path` gives a
  room's map file path.
- `slimedungeon.inputs`: `InputHandler` maps `Key` and `MouseButton` to
  `InputType` actions. It tracks which actions are held and which were
  pressed since the last `update()`.
- `slimedungeon.statemachine`: `StateManager` keeps a stack of `State`
  screens plus overlay states. `handle_state_change` takes parallel lists of
  `StateAction`s and new states, or `None`.

## Install

```
pip install .
```

## Example

```python
from slimedungeon.dungeon_generator import DungeonGenerator, SidePathConfig
from slimedungeon.ecs import Coordinator, System
from slimedungeon.components import CharacterComponent

gen = DungeonGenerator(5, 6, seed=42)          # height, width, seed
gen.generate_main_path(6)
gen.generate_side_path(SidePathConfig(
    path_name="FirstC", starting_path_name="Main", end_path_name="Main",
    min_path_length=3, max_path_length=5,
))
print(gen.starting_room, gen.ending_room, gen.nodes)

class Living(System):
    pass

world = Coordinator()
world.register_component(CharacterComponent)
living = world.register_system(Living)
world.set_system_signature(Living, world.signature_of(CharacterComponent))

hero = world.create_entity()
world.add_component(hero, CharacterComponent(hp=100))
print(world.get_component(hero, CharacterComponent).hp)   # 100
print(hero in living.entities)                            # True
```

Input handling:

```python
from slimedungeon.inputs import InputHandler, InputType, Key

handler = InputHandler()
handler.handle_key(Key.W, True)
handler.is_pressed(InputType.MOVE_UP)   # True
handler.update()
handler.is_pressed(InputType.MOVE_UP)   # False
handler.is_held(InputType.MOVE_UP)      # True
```

## What this package does not do

This is the game's logic and data layer only. It has no window, renderer,
sound, physics simulation, networking or multiplayer, and no game loop or
command to start a game. `State.render` and `StateManager.render` pass along
whatever target object you give them. `FloorGenerator.get_floor` does not
scan an asset directory. You supply the list of `MapInfo` records yourself.

## Tests

```
pip install .[test]
pytest
```