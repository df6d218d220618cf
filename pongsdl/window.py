"""The game window and its drawing surface."""

from __future__ import annotations

import pygame

SCREEN_WIDTH = 1280
SCREEN_HEIGHT = 900


class Window:
    """A fixed-size display window that is cleared and presented each frame."""

    def __init__(
        self,
        title: str = "SDL Tutorial",
        width: int = SCREEN_WIDTH,
        height: int = SCREEN_HEIGHT,
    ) -> None:
        self.title = title
        self.width = width
        self.height = height
        self._surface: pygame.Surface | None = None

    def size(self) -> tuple[int, int]:
        return (self.width, self.height)

    @property
    def surface(self) -> pygame.Surface:
        if self._surface is None:
            raise RuntimeError("window is not open")
        return self._surface

    @property
    def is_open(self) -> bool:
        return self._surface is not None

    def open(self) -> pygame.Surface:
        """Create the display window and return its surface."""
        pygame.display.init()
        self._surface = pygame.display.set_mode(self.size())
        pygame.display.set_caption(self.title)
        return self._surface

    def clear(self, color=(0, 0, 0, 255)) -> None:
        self.surface.fill(color)

    def present(self) -> None:
        self.surface  # raises when closed
        pygame.display.flip()

    def close(self) -> None:
        if self._surface is not None:
            self._surface = None
            pygame.display.quit()

    def __enter__(self) -> "Window":
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()