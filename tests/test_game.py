import pygame
import pytest

from pongsdl.audio import Audio, Music
from pongsdl.game import BackgroundCheck, Game, main
from pongsdl.mouse import MouseButton, MouseState
from pongsdl.textures import TextureError, TextureId
from pongsdl.timing import TimeHandler, format_elapsed


class FakeMixer:
    def __init__(self, fail=False):
        self.fail = fail
        self.calls = []
        self.playing = False
        self.paused = False

    def load_sound(self, path):
        if self.fail:
            raise OSError("missing")
        return path

    def load_music(self, path):
        if self.fail:
            raise OSError("missing")
        return path

    def play_sound(self, sound, loops, channel, volume):
        self.calls.append(("sound", sound))

    def play_music(self, track, loops):
        self.calls.append(("music", track))
        self.playing = True

    def set_music_volume(self, volume):
        self.calls.append(("volume", volume))

    def halt_music(self):
        self.calls.append(("halt",))
        self.playing = False

    def pause_music(self):
        self.paused = True

    def resume_music(self):
        self.paused = False

    def music_paused(self):
        return self.paused

    def music_playing(self):
        return self.playing

    def free_sound(self, sound):
        pass

    def quit(self):
        pass


def key_down(key):
    return pygame.event.Event(pygame.KEYDOWN, key=key, repeat=0)


def key_up(key):
    return pygame.event.Event(pygame.KEYUP, key=key, repeat=0)


@pytest.fixture
def game(tmp_path):
    g = Game(tmp_path)
    mixer = FakeMixer()
    g.audio = Audio(tmp_path, mixer)
    g.audio.load()
    g.mixer = mixer
    return g


@pytest.fixture
def display(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    pygame.display.init()
    pygame.font.init()
    yield
    pygame.font.quit()
    pygame.display.quit()


@pytest.fixture
def ready_game(game, display):
    game.window.open()
    for texture_id, tex in game.textures.textures.items():
        if tex.is_text:
            tex.font = pygame.font.Font(None, tex.pt_size)
            tex.surface = tex.font.render(tex.text, False, tex.text_color)
        elif tex.clip_list:
            last = tex.clip_list[-1]
            tex.surface = pygame.Surface((last.right, last.bottom))
        else:
            tex.surface = pygame.Surface((20, 80))
        tex.rect.size = tex.surface.get_size()
    yield game
    game.window.close()


def test_number_key_plays_sound(game):
    game.handle_event(key_down(pygame.K_1))
    kind, path = game.mixer.calls[-1]
    assert kind == "sound"
    assert path.endswith("low.wav")


def test_music_key_starts_track_with_its_volume(game):
    game.handle_event(key_down(pygame.K_m))
    assert game.mixer.calls[0][0] == "music"
    assert game.mixer.calls[0][1].endswith("beat.wav")
    assert game.mixer.calls[1] == ("volume", 16)


def test_pause_key_toggles(game):
    game.handle_event(key_down(pygame.K_p))
    assert game.mixer.paused is True
    game.handle_event(key_down(pygame.K_p))
    assert game.mixer.paused is False


def test_stop_key_halts_music(game):
    game.handle_event(key_down(pygame.K_o))
    assert game.mixer.calls == [("halt",)]


def test_unloaded_audio_does_not_raise(tmp_path):
    g = Game(tmp_path)
    g.audio = Audio(tmp_path, FakeMixer())
    g.handle_event(key_down(pygame.K_2))
    assert g.speed == 1


@pytest.mark.parametrize(
    "key, frame",
    [(pygame.K_w, 0), (pygame.K_e, 5), (pygame.K_UP, 3),
     (pygame.K_DOWN, 2), (pygame.K_LEFT, 1), (pygame.K_RIGHT, 4)],
)
def test_frame_keys(game, key, frame):
    game.frame = 7
    game.handle_event(key_down(key))
    assert game.frame == frame


def test_arrow_changes_position_by_speed(game):
    game.handle_event(key_down(pygame.K_UP))
    game.handle_event(key_down(pygame.K_LEFT))
    assert game.pos_change == (-game.speed, -game.speed)


def test_arrow_keys_drive_player(game):
    game.handle_event(key_down(pygame.K_RIGHT))
    assert game.player.velocity_x == game.player.velocity
    game.handle_event(key_up(pygame.K_RIGHT))
    assert game.player.velocity_x == 0


def test_mouse_event_reaches_mouse_handler(game):
    event = pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(0, 0))
    game.handle_event(event)
    assert game.mouse.state(MouseButton.LEFT) is MouseState.PRESSED


def test_logic_moves_player(game):
    game.handle_event(key_down(pygame.K_RIGHT))
    game.logic()
    game.logic()
    assert game.player.position == (2 * game.player.velocity, 0)


def test_logic_keeps_player_in_bounds(game):
    game.handle_event(key_down(pygame.K_LEFT))
    game.logic()
    assert game.player.position == (0, 0)


def test_logic_resets_background_check(game):
    game.background_check = BackgroundCheck.MOUSE_DOWN
    game.logic()
    assert game.background_check is BackgroundCheck.MOUSE_OUT


def test_logic_takes_player_size_from_texture(game):
    game.textures.textures[TextureId.PONG_PLAYER].rect.size = (20, 80)
    game.logic()
    assert (game.player.width, game.player.height) == (20, 80)


def test_load_media_raises_for_missing_textures(tmp_path):
    g = Game(tmp_path)
    g.audio = Audio(tmp_path, FakeMixer(fail=True))
    with pytest.raises(TextureError):
        g.load_media()


def test_render_places_textures(ready_game):
    ready_game.time = TimeHandler(lambda: 61_000)
    ready_game.player.x, ready_game.player.y = (30, 40)
    ready_game.render()
    tex = ready_game.textures.textures
    assert tex[TextureId.TIME_TEXT].text == format_elapsed(61_000)
    assert tex[TextureId.PONG_PLAYER].rect.topleft == (30, 40)
    assert tex[TextureId.PONG_BALL].rect.topleft == (200, 200)
    assert tex[TextureId.FIRE_PROJECTILES].current_clip == tex[TextureId.FIRE_PROJECTILES].clip_list[2]
    width, _ = ready_game.window.size()
    assert tex[TextureId.TIME_TEXT].rect.topleft == (width // 2 - 100, 50)


def test_run_stops_on_quit_event(ready_game):
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    ready_game.run()
    assert ready_game.quit is True


def test_main_help_exits_cleanly():
    with pytest.raises(SystemExit) as info:
        main(["--help"])
    assert info.value.code == 0


def test_main_rejects_unknown_option():
    with pytest.raises(SystemExit) as info:
        main(["--bogus"])
    assert info.value.code == 2


def test_music_enum_used_by_keys_is_track(game):
    game.handle_event(key_down(pygame.K_t))
    assert game.mixer.calls[1] == ("volume", 88)
    assert Music.ARE_YOU_GONNA_BE_MY_GIRL.is_track