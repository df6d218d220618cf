"""The keyboard-driven paddle."""

from __future__ import annotations

import pygame

from pongsdl.window import SCREEN_HEIGHT, SCREEN_WIDTH

_DIRECTIONS = {
    pygame.K_UP: (0, -1),
    pygame.K_DOWN: (0, 1),
    pygame.K_LEFT: (-1, 0),
    pygame.K_RIGHT: (1, 0),
}


class Player:
    """A paddle moved by the arrow keys and kept inside the play area."""

    def __init__(
        self,
        height: int = 0,
        width: int = 0,
        velocity: int = 5,
        bounds: tuple[int, int] = (SCREEN_WIDTH, SCREEN_HEIGHT),
    ) -> None:
        self.height = height
        self.width = width
        self.velocity = velocity
        self.bounds = bounds
        self.x = 0
        self.y = 0
        self.velocity_x = 0
        self.velocity_y = 0

    @property
    def position(self) -> tuple[int, int]:
        return (self.x, self.y)

    def handle_key(self, key: int, pressed: bool, repeat: bool = False) -> None:
        """Start moving on a key press and stop on its release; repeats are ignored."""
        if repeat or key not in _DIRECTIONS:
            return
        dx, dy = _DIRECTIONS[key]
        sign = 1 if pressed else -1
        self.velocity_x += sign * dx * self.velocity
        self.velocity_y += sign * dy * self.velocity

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type in (pygame.KEYDOWN, pygame.KEYUP):
            self.handle_key(
                event.key,
                event.type == pygame.KEYDOWN,
                bool(getattr(event, "repeat", False)),
            )

    def move(self) -> None:
        """Step by the current velocity, undoing any step that leaves the bounds."""
        max_x, max_y = self.bounds

        self.x += self.velocity_x
        if self.x < 0 or self.x + self.width > max_x:
            self.x -= self.velocity_x

        self.y += self.velocity_y
        if self.y < 0 or self.y + self.height > max_y:
            self.y -= self.velocity_y

    def set_size(self, height: int, width: int) -> None:
        self.height = height
        self.width = width