"""Menu and game screens kept as a stack of states, plus overlays."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Optional, Sequence

from slimedungeon.gametypes import StateAction

StateChangeCallback = Callable[[Sequence[StateAction], Sequence[Optional["State"]]], None]


class State(ABC):
    """A screen of the game.

    When reset_ecs is set, on_reset runs each time the state is about to
    be initialised, so the state starts from a clean world.
    """

    def __init__(
        self, reset_ecs: bool = True, on_reset: Optional[Callable[[], None]] = None
    ) -> None:
        self.reset_ecs = reset_ecs
        self.on_reset = on_reset
        self.state_change_callback: Optional[StateChangeCallback] = None

    def _before_init(self) -> None:
        if self.reset_ecs and self.on_reset is not None:
            self.on_reset()

    @abstractmethod
    def init(self) -> None:
        """Set the state up; called whenever it becomes the active state."""

    @abstractmethod
    def update(self, delta_time: float) -> None:
        """Advance the state by delta_time."""

    @abstractmethod
    def render(self, target: Any) -> None:
        """Draw the state onto target."""


class StateManager:
    """Runs the top state of a stack, with overlay states drawn above it."""

    def __init__(self) -> None:
        self._states: list[State] = []
        self._overlays: list[State] = []

    def handle_state_change(
        self, actions: Sequence[StateAction], new_states: Sequence[Optional[State]]
    ) -> None:
        """Apply actions in order; each may pop, and may bring a new state."""
        if len(actions) != len(new_states):
            raise ValueError("every action needs a matching new state or None")
        for action, state in zip(actions, new_states):
            if action is StateAction.POP:
                self._pop()
            if state is not None:
                state.state_change_callback = self.handle_state_change
                self._push(state, action)

    def _push(self, state: State, action: StateAction) -> None:
        if action is StateAction.PUT_ON_TOP:
            self._overlays.append(state)
        else:
            self._states.append(state)
        state._before_init()
        state.init()

    def _pop(self) -> None:
        if self._overlays:
            self._overlays.pop()
            return
        if self._states:
            self._states.pop()
        if self._states:
            top = self._states[-1]
            top._before_init()
            top.init()

    def update(self, delta_time: float) -> None:
        """Update the topmost overlay, or the top state when there is none."""
        if self._overlays:
            self._overlays[-1].update(delta_time)
        elif self._states:
            self._states[-1].update(delta_time)

    def render(self, target: Any) -> None:
        """Draw the top state, then every overlay from bottom to top."""
        if self._states:
            self._states[-1].render(target)
        for overlay in self._overlays:
            overlay.render(target)