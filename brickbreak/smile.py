"""A small state machine that drives the game's screens."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional


@dataclass(frozen=True, eq=False)
class State:
    """A named screen with optional enter, update, draw and exit hooks."""

    id: str
    enter: Optional[Callable[[Any], None]] = None
    update: Optional[Callable[[float], None]] = None
    draw: Optional[Callable[[], None]] = None
    exit: Optional[Callable[[], None]] = None


class StateMachine:
    """Holds the active state and forwards frame events to it."""

    def __init__(self) -> None:
        self._current: Optional[State] = None

    def reset(self) -> None:
        """Forget the active state without running its exit hook."""
        self._current = None

    @property
    def current(self) -> Optional[State]:
        """The active state, or None when no state is active."""
        return self._current

    def change_state(self, state: Optional[State], args: Any = None) -> None:
        """Exit the active state, then make ``state`` active and enter it."""
        if self._current is not None and self._current.exit is not None:
            self._current.exit()
        self._current = state
        if self._current is not None and self._current.enter is not None:
            self._current.enter(args)

    def update(self, dt: float) -> None:
        """Run the active state's update hook, if there is one."""
        if self._current is not None and self._current.update is not None:
            self._current.update(dt)

    def draw(self) -> None:
        """Run the active state's draw hook, if there is one."""
        if self._current is not None and self._current.draw is not None:
            self._current.draw()

    def shutdown(self) -> None:
        """Exit the active state and leave the machine with none."""
        if self._current is not None and self._current.exit is not None:
            self._current.exit()
        self._current = None