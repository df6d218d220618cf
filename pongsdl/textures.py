"""Images, sprite sheets and text surfaces with per-texture drawing state."""

from __future__ import annotations

import enum
import os
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Sequence

import pygame

from pongsdl.timing import TimeHandler

Color = Sequence[int]
Point = Sequence[int]


class TextureError(Exception):
    """Raised when a texture cannot be loaded or drawn."""


class TextureId(enum.Enum):
    FIRE_PROJECTILES = 0
    TIME_TEXT = 1
    PONG_BALL = 2
    PONG_PLAYER = 3
    MAIN_TEXT = 4
    BLUE_EFFECTS = 5
    BACKGROUND_ALIEN = 6

    @property
    def has_hitbox(self) -> bool:
        return self.value < 4


def _empty_rect() -> pygame.Rect:
    return pygame.Rect(0, 0, 0, 0)


@dataclass
class Texture:
    """A drawable surface plus where and how to draw it."""

    path: str = ""
    rect: pygame.Rect = field(default_factory=_empty_rect)
    scale: float = 1.0
    current_clip: pygame.Rect | None = None
    rotation: float = 0.0
    rotation_center: tuple[int, int] | None = None
    flip: tuple[bool, bool] = (False, False)
    color_mod: tuple[int, int, int] | None = None
    alpha: int | None = None
    blend_flags: int = 0
    clip_prop: pygame.Rect | None = None
    clip_list: list[pygame.Rect] = field(default_factory=list)
    frames_per_anim: int = 0
    last_tick: float = 0.0
    frame_counter: float = 0.0
    is_text: bool = False
    text: str = ""
    pt_size: int = 24
    text_color: tuple[int, int, int] = (255, 255, 255)
    font: Any = None
    surface: pygame.Surface | None = None


def build_clip_list(clip: Sequence[int], rows: int, columns: int) -> list[pygame.Rect]:
    """Frames of a sprite sheet, left to right, then top to bottom."""
    x, y, w, h = clip
    return [
        pygame.Rect(x + column * w, y + row * h, w, h)
        for row in range(rows)
        for column in range(columns)
    ]


def _image(path: str, clip=None, sheet=None) -> Texture:
    texture = Texture(path=path)
    if clip is not None:
        texture.clip_prop = pygame.Rect(clip)
        rows, columns, frames = sheet
        texture.clip_list = build_clip_list(clip, rows, columns)
        texture.frames_per_anim = frames
    return texture


def _text(path: str, text: str, pt_size: int = 24) -> Texture:
    return Texture(path=path, is_text=True, text=text, pt_size=pt_size)


def _default_textures() -> dict[TextureId, Texture]:
    return {
        TextureId.FIRE_PROJECTILES: _image(
            "Images/500_Bullets/BulletsDrugie.png", (0, 0, 24, 24), (15, 24, 8)
        ),
        TextureId.TIME_TEXT: _text("Fonts/Digital Dismay.ttf", "Place Holder", 48),
        TextureId.PONG_BALL: _image("Images/PongBall.png"),
        TextureId.PONG_PLAYER: _image("Images/PongPlayer.png"),
        TextureId.MAIN_TEXT: _text("Fonts/lazy.ttf", "THIS IS MADNESS"),
        TextureId.BLUE_EFFECTS: _image(
            "Images/VFX/BlueBulletsMINE.png", (0, 0, 32, 32), (16, 8, 4)
        ),
        TextureId.BACKGROUND_ALIEN: _image(
            "Images/BackgroundSprite.jpg", (0, 0, 640, 640), (2, 3, 1)
        ),
    }


class TextureHandler:
    """Holds every texture of the game and draws them by id."""

    def __init__(
        self,
        base_dir: str | os.PathLike = ".",
        clock: Callable[[], int] | None = None,
    ) -> None:
        self.base_dir = os.fspath(base_dir)
        self._time = TimeHandler(clock)
        self._textures = _default_textures()

    @property
    def textures(self) -> Mapping[TextureId, Texture]:
        return self._textures

    def _full_path(self, texture: Texture) -> str:
        return os.path.join(self.base_dir, texture.path)

    def load(self) -> None:
        """Load every image and font and render every text; stop at the first failure."""
        if any(t.is_text for t in self._textures.values()):
            pygame.font.init()
        for texture_id in TextureId:
            texture = self._textures[texture_id]
            texture.scale = 1.0
            self._create_surface(texture_id)

    def _create_surface(self, texture_id: TextureId) -> None:
        texture = self._textures[texture_id]
        path = self._full_path(texture)
        if texture.is_text:
            if texture.font is None:
                try:
                    texture.font = pygame.font.Font(path, texture.pt_size)
                except (OSError, pygame.error) as exc:
                    raise TextureError(f"cannot open font {path} for {texture_id.name}: {exc}") from exc
            try:
                surface = texture.font.render(texture.text, False, texture.text_color)
            except pygame.error as exc:
                raise TextureError(f"cannot render text for {texture_id.name}: {exc}") from exc
        else:
            try:
                surface = pygame.image.load(path)
            except (OSError, pygame.error) as exc:
                raise TextureError(f"cannot load image {path} for {texture_id.name}: {exc}") from exc
        texture.surface = surface
        texture.rect.size = surface.get_size()

    def render(self, target: pygame.Surface, texture: TextureId) -> pygame.Rect:
        """Draw a texture onto the target and return the area it covered."""
        tex = self._textures[texture]
        if tex.surface is None:
            raise TextureError(f"texture {texture.name} is not loaded")

        source = tex.surface
        if tex.current_clip is not None:
            source = source.subsurface(tex.current_clip.clip(source.get_rect()))

        dest = self.get_rect(texture)
        image = pygame.transform.scale(source, (max(dest.w, 0), max(dest.h, 0)))
        flip_x, flip_y = tex.flip
        if flip_x or flip_y:
            image = pygame.transform.flip(image, flip_x, flip_y)
        if tex.color_mod is not None:
            image.fill(tex.color_mod, special_flags=pygame.BLEND_RGB_MULT)
        if tex.alpha is not None:
            image.set_alpha(tex.alpha)

        if tex.rotation:
            cx, cy = tex.rotation_center if tex.rotation_center is not None else (dest.w / 2, dest.h / 2)
            pivot = pygame.math.Vector2(dest.x + cx, dest.y + cy)
            offset = pygame.math.Vector2(dest.center) - pivot
            image = pygame.transform.rotate(image, -tex.rotation)
            position = image.get_rect(center=pivot + offset.rotate(tex.rotation))
        else:
            position = dest

        return target.blit(image, position, special_flags=tex.blend_flags)

    def set_pos(self, texture: TextureId, pos: Point = (0, 0), change: Point = (0, 0)) -> None:
        rect = self._textures[texture].rect
        rect.x = pos[0] + change[0]
        rect.y = pos[1] + change[1]

    def transform(
        self,
        texture: TextureId,
        scale: float = 1.0,
        flip: tuple[bool, bool] = (False, False),
        angle: float = 0.0,
        center: Point | None = None,
    ) -> None:
        self.set_scale(texture, scale)
        self.set_rotate(texture, angle, center)
        self.set_flip(texture, flip)

    def set_scale_all(self, ratio: float = 1.0) -> None:
        for tex in self._textures.values():
            tex.scale = ratio

    def set_scale(self, texture: TextureId, ratio: float = 1.0) -> None:
        self._textures[texture].scale = ratio

    def set_color(self, texture: TextureId, color: Color) -> None:
        """Multiply the texture's colours by the given RGB when drawn."""
        r, g, b = color[:3]
        self._textures[texture].color_mod = (r, g, b)

    def set_alpha(self, texture: TextureId, alpha: int) -> None:
        if not 0 <= alpha <= 255:
            raise ValueError("alpha must be between 0 and 255")
        self._textures[texture].alpha = alpha

    def set_blend_mode(self, texture: TextureId, mode: int) -> None:
        """Set the pygame blit flags used when drawing the texture."""
        self._textures[texture].blend_flags = mode

    def set_flip(self, texture: TextureId, flip: tuple[bool, bool] = (False, False)) -> None:
        flip_x, flip_y = flip
        self._textures[texture].flip = (bool(flip_x), bool(flip_y))

    def set_rotate(self, texture: TextureId, angle: float = 0.0, center: Point | None = None) -> None:
        tex = self._textures[texture]
        tex.rotation = angle
        tex.rotation_center = None if center is None else (center[0], center[1])

    def animate(self, texture: TextureId, sprite_number: int, speed: float = 12.0) -> None:
        """Advance the frame of animation ``sprite_number`` at ``speed`` frames a second."""
        tex = self._textures[texture]
        first_frame = sprite_number * tex.frames_per_anim

        now = float(self._time.ms())
        elapsed = (now - tex.last_tick) / 1000.0
        tex.last_tick = now

        tex.frame_counter += speed * elapsed
        if tex.frame_counter >= tex.frames_per_anim:
            tex.frame_counter = 0.0
        self.set_current_clip(texture, int(first_frame + tex.frame_counter))

    def change_text(self, texture: TextureId, text: str) -> None:
        tex = self._textures[texture]
        if not tex.is_text:
            raise TextureError(f"texture {texture.name} is not text")
        tex.text = text
        if tex.font is None:
            raise TextureError(f"font for {texture.name} is not loaded")
        self._create_surface(texture)

    def set_current_clip(self, texture: TextureId, frame: int) -> None:
        tex = self._textures[texture]
        if not 0 <= frame < len(tex.clip_list):
            raise IndexError(f"frame {frame} out of range for {texture.name}")
        tex.current_clip = tex.clip_list[frame]

    def get_rect(self, texture: TextureId) -> pygame.Rect:
        """Position and scaled size of the texture, or of its current frame."""
        tex = self._textures[texture]
        size = tex.current_clip if tex.current_clip is not None else tex.rect
        return pygame.Rect(
            tex.rect.x,
            tex.rect.y,
            int(size.w * tex.scale),
            int(size.h * tex.scale),
        )

    def close(self) -> None:
        for tex in self._textures.values():
            tex.surface = None
            tex.font = None

    def __enter__(self) -> "TextureHandler":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()