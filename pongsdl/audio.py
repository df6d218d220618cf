"""Sound effects and music tracks, loaded once and played on demand."""

from __future__ import annotations

import enum
import os
from typing import Any, Protocol

import pygame

MASTER_VOLUME = 15
_FALLBACK_VOLUME = 64
_MAX_VOLUME = 128


class AudioError(Exception):
    """Raised when audio cannot be loaded or played."""


class Sound(enum.Enum):
    SCRATCH = 0
    HIGH = 1
    MEDIUM = 2
    LOW = 3


class Music(enum.Enum):
    STOP = -2
    PAUSE_OR_RESUME = -1

    DEFAULT = 0
    HOLY_F = 1
    PANDEMONIUM = 2
    GIMME_LOVE = 3
    ARE_YOU_GONNA_BE_MY_GIRL = 4
    WEZ_PIGULKE = 5
    A_LITTLE_MESSED_UP = 6
    BEAUTIFUL_MADNESS = 7
    IM_COMING = 8
    THATS_WHAT_I_LIKE = 9
    GOLD = 10
    HOLD = 11

    @property
    def is_track(self) -> bool:
        return self.value >= 0


SOUND_PATHS: dict[Sound, str] = {
    Sound.SCRATCH: "Audio/Sounds/scratch.wav",
    Sound.HIGH: "Audio/Sounds/high.wav",
    Sound.MEDIUM: "Audio/Sounds/medium.wav",
    Sound.LOW: "Audio/Sounds/low.wav",
}

MUSIC_PATHS: dict[Music, str] = {
    Music.DEFAULT: "Audio/Music/beat.wav",
    Music.HOLY_F: "Audio/Music/HolyFuck.mp3",
    Music.PANDEMONIUM: "Audio/Music/Pandemonium.mp3",
    Music.GIMME_LOVE: "Audio/Music/GimmeLove.mp3",
    Music.ARE_YOU_GONNA_BE_MY_GIRL: "Audio/Music/AreYouGonnaBeMyGirl.mp3",
    Music.WEZ_PIGULKE: "Audio/Music/WezPigulke.mp3",
    Music.GOLD: "Audio/Music/Gold.mp3",
    Music.THATS_WHAT_I_LIKE: "Audio/Music/ThatsWhatILike.mp3",
    Music.IM_COMING: "Audio/Music/ImComing.mp3",
    Music.HOLD: "Audio/Music/Hold.mp3",
    Music.BEAUTIFUL_MADNESS: "Audio/Music/BeautifulMadness.mp3",
    Music.A_LITTLE_MESSED_UP: "Audio/Music/ALittleMessedUp.mp3",
}

_VOLUMES: dict[Music, int] = {
    Music.DEFAULT: 16,
    Music.HOLY_F: 48,
    Music.PANDEMONIUM: 16,
    Music.GIMME_LOVE: 32,
    Music.ARE_YOU_GONNA_BE_MY_GIRL: 88,
    Music.WEZ_PIGULKE: 32,
    Music.A_LITTLE_MESSED_UP: 32,
    Music.BEAUTIFUL_MADNESS: 64,
    Music.IM_COMING: 32,
    Music.THATS_WHAT_I_LIKE: 48,
    Music.GOLD: 32,
    Music.HOLD: 32,
}


def volume_for(music: Music) -> int:
    """The playback volume (0-128) chosen for a track."""
    return _VOLUMES.get(music, _FALLBACK_VOLUME)


class Mixer(Protocol):
    def load_sound(self, path: str) -> Any: ...
    def load_music(self, path: str) -> Any: ...
    def play_sound(self, sound: Any, loops: int, channel: int, volume: int) -> None: ...
    def play_music(self, track: Any, loops: int) -> None: ...
    def set_music_volume(self, volume: int) -> None: ...
    def halt_music(self) -> None: ...
    def pause_music(self) -> None: ...
    def resume_music(self) -> None: ...
    def music_paused(self) -> bool: ...
    def music_playing(self) -> bool: ...
    def free_sound(self, sound: Any) -> None: ...
    def quit(self) -> None: ...


class PygameMixer:
    """Mixer backed by pygame.mixer; volumes are given on a 0-128 scale."""

    def __init__(self) -> None:
        self._paused = False

    def load_sound(self, path: str) -> pygame.mixer.Sound:
        return pygame.mixer.Sound(path)

    def load_music(self, path: str) -> str:
        if not os.path.isfile(path):
            raise FileNotFoundError(path)
        return path

    def play_sound(self, sound: pygame.mixer.Sound, loops: int, channel: int, volume: int) -> None:
        sound.set_volume(volume / _MAX_VOLUME)
        if channel < 0:
            sound.play(loops)
        else:
            pygame.mixer.Channel(channel).play(sound, loops)

    def play_music(self, track: str, loops: int) -> None:
        pygame.mixer.music.load(track)
        # ``loops`` counts plays in total; pygame counts repeats after the first.
        pygame.mixer.music.play(-1 if loops < 0 else max(loops - 1, 0))
        self._paused = False

    def set_music_volume(self, volume: int) -> None:
        pygame.mixer.music.set_volume(volume / _MAX_VOLUME)

    def halt_music(self) -> None:
        pygame.mixer.music.stop()
        self._paused = False

    def pause_music(self) -> None:
        pygame.mixer.music.pause()
        self._paused = True

    def resume_music(self) -> None:
        pygame.mixer.music.unpause()
        self._paused = False

    def music_paused(self) -> bool:
        return self._paused

    def music_playing(self) -> bool:
        return self._paused or bool(pygame.mixer.music.get_busy())

    def free_sound(self, sound: pygame.mixer.Sound) -> None:
        sound.stop()

    def quit(self) -> None:
        pygame.mixer.quit()


class Audio:
    """Owns the game's sound effects and music tracks."""

    def __init__(self, base_dir: str | os.PathLike = ".", mixer: Mixer | None = None) -> None:
        self.base_dir = os.fspath(base_dir)
        self._mixer: Mixer = mixer if mixer is not None else PygameMixer()
        self._sounds: dict[Sound, Any] = {}
        self._music: dict[Music, Any] = {}

    def sound_path(self, sound: Sound) -> str:
        return os.path.join(self.base_dir, SOUND_PATHS[sound])

    def music_path(self, music: Music) -> str:
        return os.path.join(self.base_dir, MUSIC_PATHS[music])

    def load(self) -> None:
        """Load every sound and track; raise AudioError naming any that failed."""
        failed: list[str] = []
        for sound in Sound:
            path = self.sound_path(sound)
            try:
                self._sounds[sound] = self._mixer.load_sound(path)
            except (OSError, pygame.error) as exc:
                failed.append(f"{path} ({exc})")
        for music in MUSIC_PATHS:
            path = self.music_path(music)
            try:
                self._music[music] = self._mixer.load_music(path)
            except (OSError, pygame.error) as exc:
                failed.append(f"{path} ({exc})")
        if failed:
            raise AudioError("failed to load: " + ", ".join(failed))

    def play_sound(self, sound: Sound, loops: int = 0, channel: int = -1) -> None:
        try:
            chunk = self._sounds[sound]
        except KeyError:
            raise AudioError(f"sound {sound.name} is not loaded") from None
        self._mixer.play_sound(chunk, loops, channel, MASTER_VOLUME)

    def play_music(self, music: Music, loops: int = 10) -> None:
        """Stop, toggle pause, or start a track if nothing is playing."""
        if music is Music.STOP:
            self._mixer.halt_music()
        elif music is Music.PAUSE_OR_RESUME:
            if self._mixer.music_paused():
                self._mixer.resume_music()
            else:
                self._mixer.pause_music()
        elif not self._mixer.music_playing():
            try:
                track = self._music[music]
            except KeyError:
                raise AudioError(f"music {music.name} is not loaded") from None
            self._mixer.play_music(track, loops)
            self._mixer.set_music_volume(volume_for(music))

    def close(self) -> None:
        """Release every loaded sound and track and shut the mixer down."""
        for chunk in self._sounds.values():
            self._mixer.free_sound(chunk)
        self._sounds.clear()
        if self._music:
            self._mixer.halt_music()
        self._music.clear()
        self._mixer.quit()

    def __enter__(self) -> "Audio":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()