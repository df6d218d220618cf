"""The game object: start-up, the event loop, per-frame logic and drawing."""

from __future__ import annotations

import argparse
import enum
import logging
import os
import sys
from typing import Sequence

import pygame

from pongsdl.audio import Audio, AudioError, Music, Sound
from pongsdl.mouse import MouseButton, MouseHandler, MouseState
from pongsdl.player import Player
from pongsdl.textures import TextureError, TextureHandler, TextureId
from pongsdl.timing import TimeHandler
from pongsdl.window import Window

log = logging.getLogger(__name__)

BLACK = (0, 0, 0, 255)

_SOUND_KEYS = {
    pygame.K_1: Sound.LOW,
    pygame.K_2: Sound.HIGH,
    pygame.K_3: Sound.MEDIUM,
    pygame.K_4: Sound.SCRATCH,
}

_MUSIC_KEYS = {
    pygame.K_p: Music.PAUSE_OR_RESUME,
    pygame.K_m: Music.DEFAULT,
    pygame.K_o: Music.STOP,
    pygame.K_u: Music.HOLY_F,
    pygame.K_i: Music.GIMME_LOVE,
    pygame.K_y: Music.PANDEMONIUM,
    pygame.K_t: Music.ARE_YOU_GONNA_BE_MY_GIRL,
    pygame.K_l: Music.WEZ_PIGULKE,
    pygame.K_k: Music.HOLD,
    pygame.K_j: Music.GOLD,
    pygame.K_h: Music.THATS_WHAT_I_LIKE,
    pygame.K_g: Music.IM_COMING,
    pygame.K_r: Music.BEAUTIFUL_MADNESS,
    pygame.K_f: Music.A_LITTLE_MESSED_UP,
}

_FRAME_KEYS = {pygame.K_w: 0, pygame.K_e: 5}

# key -> (animation frame, direction of the position change)
_ARROW_KEYS = {
    pygame.K_UP: (3, (0, -1)),
    pygame.K_DOWN: (2, (0, 1)),
    pygame.K_LEFT: (1, (-1, 0)),
    pygame.K_RIGHT: (4, (1, 0)),
}


class GameError(Exception):
    """Raised when the game cannot start."""


class BackgroundCheck(enum.Enum):
    MOUSE_OUT = 0
    MOUSE_OVER_MOTION = 1
    MOUSE_DOWN = 2
    MOUSE_UP = 3


_BACKGROUND_MESSAGES = {
    BackgroundCheck.MOUSE_DOWN: "Mouse clicked on the background",
    BackgroundCheck.MOUSE_UP: "Mouse released on the background",
    BackgroundCheck.MOUSE_OVER_MOTION: "Mouse is hovering over the background",
}


class Game:
    """Owns every subsystem and drives them frame by frame."""

    def __init__(self, base_dir: str | os.PathLike = ".") -> None:
        self.base_dir = os.fspath(base_dir)
        self.window = Window()
        self.audio = Audio(self.base_dir)
        self.textures = TextureHandler(self.base_dir)
        self.mouse = MouseHandler()
        self.time = TimeHandler()
        self.player = Player(0, 0, 5, self.window.size())
        self.quit = False
        self.background_check = BackgroundCheck.MOUSE_OUT
        self.speed = 0
        self.pos_change = (0, 0)
        self.frame = 0

    def init(self) -> None:
        """Start the display, the mixer and the font system."""
        try:
            self.window.open()
        except pygame.error as exc:
            raise GameError(f"window could not be created: {exc}") from exc
        try:
            pygame.mixer.init(44100, -16, 2, 2048)
        except pygame.error as exc:
            raise GameError(f"mixer could not initialize: {exc}") from exc
        try:
            pygame.font.init()
        except pygame.error as exc:
            raise GameError(f"font system could not initialize: {exc}") from exc

    def load_media(self) -> None:
        """Load audio and textures; missing audio is logged, missing textures raise."""
        try:
            self.audio.load()
        except AudioError as exc:
            log.warning("Audio failed to initialize: %s", exc)
        try:
            self.textures.load()
        except TextureError:
            log.error("Textures failed to initialize")
            raise

    def run(self) -> None:
        """Process events, update and draw until a quit event arrives."""
        while not self.quit:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.quit = True
                else:
                    self.handle_event(event)
            self.logic()
            self.render()

    def handle_event(self, event: pygame.event.Event) -> None:
        self.mouse.handle_event(event)
        self.player.handle_event(event)
        self._handle_key(event)

    def _handle_key(self, event: pygame.event.Event) -> None:
        self.speed = 1
        if event.type != pygame.KEYDOWN:
            return
        key = event.key
        try:
            if key in _SOUND_KEYS:
                self.audio.play_sound(_SOUND_KEYS[key])
            elif key in _MUSIC_KEYS:
                self.audio.play_music(_MUSIC_KEYS[key])
        except AudioError as exc:
            log.warning("%s", exc)

        if key in _FRAME_KEYS:
            self.frame = _FRAME_KEYS[key]
        elif key in _ARROW_KEYS:
            self.frame, (dx, dy) = _ARROW_KEYS[key]
            x, y = self.pos_change
            self.pos_change = (x + dx * self.speed, y + dy * self.speed)

    def _mouse_position(self) -> tuple[int, int]:
        if pygame.display.get_init():
            return pygame.mouse.get_pos()
        return self.mouse.position

    def logic(self) -> None:
        """Advance input state and move the player one step."""
        self.mouse.update(self._mouse_position())
        if self.mouse.state(MouseButton.LEFT) is MouseState.HELD:
            log.debug("left mouse button held")

        message = _BACKGROUND_MESSAGES.get(self.background_check)
        if message is not None:
            log.debug(message)
        self.background_check = BackgroundCheck.MOUSE_OUT

        rect = self.textures.get_rect(TextureId.PONG_PLAYER)
        self.player.set_size(rect.h, rect.w)
        self.player.move()

    def render(self) -> None:
        """Draw one frame and show it."""
        target = self.window.surface
        self.window.clear(BLACK)

        self.textures.set_scale(TextureId.PONG_PLAYER, 1.0)
        self.textures.set_pos(TextureId.PONG_PLAYER, self.player.position)
        self.textures.render(target, TextureId.PONG_PLAYER)

        self.textures.set_pos(TextureId.PONG_BALL, (200, 200))
        self.textures.render(target, TextureId.PONG_BALL)

        self.textures.set_pos(TextureId.FIRE_PROJECTILES, (400, 400))
        self.textures.set_scale(TextureId.FIRE_PROJECTILES, 1.0)
        self.textures.set_current_clip(TextureId.FIRE_PROJECTILES, 2)
        self.textures.render(target, TextureId.FIRE_PROJECTILES)

        self.textures.change_text(TextureId.TIME_TEXT, self.time.full())
        width, _ = self.window.size()
        self.textures.set_pos(TextureId.TIME_TEXT, (width // 2 - 100, 50))
        self.textures.render(target, TextureId.TIME_TEXT)

        self.window.present()

    def close(self) -> None:
        """Release media and shut every subsystem down."""
        self.textures.close()
        self.audio.close()
        self.window.close()
        pygame.font.quit()
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="pongsdl", description="Run the game.")
    parser.add_argument(
        "--assets",
        default=".",
        help="directory holding the Audio, Images and Fonts folders",
    )
    args = parser.parse_args(argv)

    game = Game(args.assets)
    try:
        game.init()
    except GameError as exc:
        print(f"Failed to initialize! {exc}", file=sys.stderr)
        return 1
    try:
        game.load_media()
    except TextureError as exc:
        print(f"Failed to load media! {exc}", file=sys.stderr)
        game.close()
        return 1
    try:
        game.run()
    finally:
        game.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())