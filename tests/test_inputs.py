from slimedungeon.gametypes import Vec2
from slimedungeon.inputs import InputHandler, InputType, Key, MouseButton


def test_press_sets_pressed_and_held():
    handler = InputHandler()
    handler.handle_key(Key.W, True)
    assert handler.is_pressed(InputType.MOVE_UP)
    assert handler.is_held(InputType.MOVE_UP)
    assert not handler.is_held(InputType.MOVE_DOWN)


def test_update_clears_pressed_but_keeps_held():
    handler = InputHandler()
    handler.handle_key(Key.A, True)
    handler.update()
    assert not handler.is_pressed(InputType.MOVE_LEFT)
    assert handler.is_held(InputType.MOVE_LEFT)


def test_release_clears_both():
    handler = InputHandler()
    handler.handle_key(Key.D, True)
    handler.handle_key(Key.D, False)
    assert not handler.is_pressed(InputType.MOVE_RIGHT)
    assert not handler.is_held(InputType.MOVE_RIGHT)


def test_repeat_press_while_held_is_not_a_new_press():
    handler = InputHandler()
    handler.handle_key(Key.S, True)
    handler.update()
    handler.handle_key(Key.S, True)
    assert not handler.is_pressed(InputType.MOVE_DOWN)
    assert handler.is_held(InputType.MOVE_DOWN)


def test_unbound_key_is_ignored():
    handler = InputHandler()
    handler.handle_key(Key.Q, True)
    assert not any(handler.is_held(action) for action in InputType)


def test_mouse_left_and_space_both_attack():
    handler = InputHandler()
    handler.handle_key(MouseButton.LEFT, True)
    assert handler.is_pressed(InputType.ATTACK)
    handler.handle_key(MouseButton.LEFT, False)
    handler.handle_key(Key.SPACE, True)
    assert handler.is_held(InputType.ATTACK)


def test_default_bindings_for_menu_and_debug():
    handler = InputHandler()
    handler.handle_key(Key.ESCAPE, True)
    handler.handle_key(Key.F1, True)
    handler.handle_key(Key.E, True)
    assert handler.is_pressed(InputType.RETURN_IN_MENU)
    assert handler.is_pressed(InputType.DEBUG_MODE)
    assert handler.is_pressed(InputType.PICK_UP_ITEM)


def test_clear_pressed():
    handler = InputHandler()
    handler.handle_key(Key.X, True)
    handler.clear_pressed()
    assert not handler.is_pressed(InputType.TEST)


def test_custom_bindings():
    handler = InputHandler({Key.Q: InputType.ATTACK})
    handler.handle_key(Key.Q, True)
    handler.handle_key(Key.W, True)
    assert handler.is_held(InputType.ATTACK)
    assert not handler.is_held(InputType.MOVE_UP)


def test_mouse_position_and_window_size_are_stored():
    handler = InputHandler()
    handler.update_mouse_position(Vec2(12.5, 40.0))
    handler.update_window_size((1920, 1080))
    assert handler.mouse_position == Vec2(12.5, 40.0)
    assert handler.window_size == (1920, 1080)