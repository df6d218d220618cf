# pongsdl

A small arcade sandbox built on pygame. It opens a 1280×900 window and draws
a paddle you steer with the arrow keys, a ball, one frame of a projectile
sprite sheet and a clock that shows how long the game has been running.
Number and letter keys trigger sound effects and a music jukebox.

## Installing

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Running

```
pongsdl
pongsdl --assets path/to/media
```

`--assets` names the directory that holds the media (default: the working
directory). Paths inside it:

- `Images/` – `PongPlayer.png`, `PongBall.png`, the sprite sheets
  `500_Bullets/BulletsDrugie.png` and `VFX/BlueBulletsMINE.png`, and
  `BackgroundSprite.jpg`
- `Fonts/` – `lazy.ttf` and `Digital Dismay.ttf`
- `Audio/Sounds/` – `scratch.wav`, `high.wav`, `medium.wav`, `low.wav`
- `Audio/Music/` – the jukebox tracks (`beat.wav` and a set of `.mp3` files)

If the window, mixer or font system cannot be started, or an image or font
cannot be loaded, `pongsdl` prints a message to standard error and exits
with status 1. Missing audio files are only logged as a warning; the game
still runs, and pressing a key for a sound or track that did not load logs a
warning instead of playing it.

## Controls

| Key                   | Action                                    |
|-----------------------|-------------------------------------------|
| Arrow keys            | Move the paddle (it stays inside the window) |
| 1 / 2 / 3 / 4         | Low, high, medium and scratch sounds      |
| m                     | Play the default beat                     |
| u i y t l k j h g r f | Play one of the jukebox tracks            |
| p                     | Pause or resume the music                 |
| o                     | Stop the music                            |
| Close window          | Quit                                      |

A new track only starts when no music is playing or paused; stop it with `o`
first.

## Using the pieces

The building blocks can be used on their own:

- `pongsdl.timing` – `TimeHandler` (milliseconds, seconds, minutes and hours
  from an injectable clock) and `format_elapsed(ms)`, which renders a
  millisecond count in the game's clock format.
- `pongsdl.player` – `Player`, a paddle whose velocity follows arrow-key
  presses and releases (`handle_key`, `handle_event`) and whose `move` undoes
  any step that would leave its bounds.
- `pongsdl.mouse` – `MouseHandler`, tracking `MouseState.PRESSED`, `HELD` and
  `RELEASED` for the `MouseButton` left, middle and right buttons; a press
  becomes held after `hold_delay` seconds of `update` calls. `is_inside`
  tests the cursor against a rectangle, edges included.
- `pongsdl.audio` – `Audio` (`load`, `play_sound`, `play_music`, `close`)
  with the `Sound` and `Music` catalogues and per-track volumes from
  `volume_for(music)`. The mixer is pluggable; the default uses
  `pygame.mixer`. Load failures raise `AudioError`.
- `pongsdl.textures` – `TextureHandler`, which loads the images and text
  surfaces keyed by `TextureId`, positions, scales, flips, rotates, tints and
  animates them, and draws them onto a surface. `build_clip_list` slices a
  sprite sheet into frames. Load failures raise `TextureError`.
- `pongsdl.window` – `Window`, the display surface (`open`, `clear`,
  `present`, `close`; also a context manager).
- `pongsdl.game` – `Game`, which ties everything together, and `main`, the
  entry point of the `pongsdl` command.

## What it does not do

This is a sandbox, not a finished game of pong. The ball is drawn at a fixed
place and never moves, there is no second paddle, no collision and no score.
The projectile sprite shows a single fixed frame, and the background and
main-text textures are loaded but never drawn. No media files come with the
package; you supply them in the layout above.