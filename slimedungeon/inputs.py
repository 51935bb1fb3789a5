"""Keyboard and mouse input mapped onto game actions."""

from __future__ import annotations

from enum import Enum, auto
from types import MappingProxyType
from typing import Mapping, Optional, Union

from slimedungeon.gametypes import Vec2


class InputType(Enum):
    """A game action that keys and buttons are bound to."""

    MOVE_LEFT = auto()
    MOVE_RIGHT = auto()
    MOVE_UP = auto()
    MOVE_DOWN = auto()
    ATTACK = auto()
    PICK_UP_ITEM = auto()
    DEBUG_MODE = auto()
    RETURN_IN_MENU = auto()
    TEST = auto()


class Key(Enum):
    """Keyboard keys the game knows about."""

    A = auto()
    D = auto()
    E = auto()
    Q = auto()
    S = auto()
    W = auto()
    X = auto()
    SPACE = auto()
    ESCAPE = auto()
    ENTER = auto()
    F1 = auto()


class MouseButton(Enum):
    """Mouse buttons the game knows about."""

    LEFT = auto()
    RIGHT = auto()
    MIDDLE = auto()


InputKey = Union[Key, MouseButton]

DEFAULT_BINDINGS: Mapping[InputKey, InputType] = MappingProxyType(
    {
        Key.W: InputType.MOVE_UP,
        Key.A: InputType.MOVE_LEFT,
        Key.S: InputType.MOVE_DOWN,
        Key.D: InputType.MOVE_RIGHT,
        Key.SPACE: InputType.ATTACK,
        Key.E: InputType.PICK_UP_ITEM,
        Key.X: InputType.TEST,
        Key.F1: InputType.DEBUG_MODE,
        Key.ESCAPE: InputType.RETURN_IN_MENU,
        MouseButton.LEFT: InputType.ATTACK,
    }
)


class InputHandler:
    """Tracks which actions are held and which were pressed this frame."""

    def __init__(self, bindings: Optional[Mapping[InputKey, InputType]] = None) -> None:
        self.bindings: dict[InputKey, InputType] = dict(
            DEFAULT_BINDINGS if bindings is None else bindings
        )
        self._held: set[InputType] = set()
        self._pressed: set[InputType] = set()
        self.mouse_position = Vec2(0.0, 0.0)
        self.window_size: tuple[int, int] = (0, 0)

    def is_held(self, action: InputType) -> bool:
        return action in self._held

    def is_pressed(self, action: InputType) -> bool:
        """Tell whether the action went down since the last update."""
        return action in self._pressed

    def handle_key(self, key: InputKey, pressed: bool) -> None:
        """Record a key or button going down or up; unbound keys are ignored."""
        action = self.bindings.get(key)
        if action is not None:
            self._update_action(action, pressed)

    def update_mouse_position(self, position: Vec2) -> None:
        self.mouse_position = position

    def update_window_size(self, size: tuple[int, int]) -> None:
        self.window_size = size

    def clear_pressed(self) -> None:
        self._pressed.clear()

    def update(self) -> None:
        """Advance one frame: presses only last until the next update."""
        self.clear_pressed()

    def _update_action(self, action: InputType, pressed: bool) -> None:
        if pressed:
            if action not in self._held:
                self._pressed.add(action)
            self._held.add(action)
        else:
            self._pressed.discard(action)
            self._held.discard(action)