"""Mouse button tracking with press-and-hold detection."""

from __future__ import annotations

import enum
from typing import Callable, Sequence

import pygame

from pongsdl.timing import monotonic_ms


class MouseState(enum.Enum):
    PRESSED = 0
    RELEASED = 1
    HELD = 2


class MouseButton(enum.IntEnum):
    LEFT = 1
    MIDDLE = 2
    RIGHT = 3


class MouseHandler:
    """Tracks button states and the cursor; a press becomes HELD after the hold delay."""

    def __init__(
        self,
        hold_delay: float = 0.15,
        clock: Callable[[], int] | None = None,
    ) -> None:
        self.hold_delay = hold_delay
        self._clock = clock if clock is not None else monotonic_ms
        self._states = {button: MouseState.RELEASED for button in MouseButton}
        self._timers = {button: 0.0 for button in MouseButton}
        self._last_tick = 0.0
        self.position: tuple[int, int] = (0, 0)

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type not in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP):
            return
        try:
            button = MouseButton(event.button)
        except ValueError:
            return
        if event.type == pygame.MOUSEBUTTONDOWN:
            self.press(button)
        else:
            self.release(button)

    def press(self, button: MouseButton) -> None:
        self._states[MouseButton(button)] = MouseState.PRESSED

    def release(self, button: MouseButton) -> None:
        self._states[MouseButton(button)] = MouseState.RELEASED

    def update(self, position: Sequence[int] | None = None) -> None:
        """Refresh the cursor position and advance the hold timers; call once a frame."""
        if position is None:
            position = pygame.mouse.get_pos()
        self.position = (int(position[0]), int(position[1]))

        now = float(self._clock())
        elapsed = (now - self._last_tick) / 1000.0
        self._last_tick = now

        for button, state in self._states.items():
            if state in (MouseState.PRESSED, MouseState.HELD):
                self._timers[button] += elapsed
            else:
                self._timers[button] = 0.0
            if self._timers[button] >= self.hold_delay:
                self._states[button] = MouseState.HELD

    def state(self, button: MouseButton) -> MouseState:
        return self._states[MouseButton(button)]

    def is_inside(self, rect: Sequence[int]) -> bool:
        """Whether the cursor lies within the rectangle, edges included."""
        x, y, w, h = rect
        px, py = self.position
        return x <= px <= x + w and y <= py <= y + h