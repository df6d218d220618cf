import pygame
import pytest

from pongsdl.mouse import MouseButton, MouseHandler, MouseState


class FakeClock:
    def __init__(self):
        self.now = 0

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def mouse(clock):
    return MouseHandler(0.15, clock)


@pytest.mark.parametrize("button", list(MouseButton))
def test_initially_released(mouse, button):
    assert mouse.state(button) is MouseState.RELEASED


def test_press_then_hold(mouse, clock):
    mouse.press(MouseButton.LEFT)
    mouse.update((0, 0))
    assert mouse.state(MouseButton.LEFT) is MouseState.PRESSED
    clock.now = 100
    mouse.update((0, 0))
    assert mouse.state(MouseButton.LEFT) is MouseState.PRESSED
    clock.now = 200
    mouse.update((0, 0))
    assert mouse.state(MouseButton.LEFT) is MouseState.HELD


def test_release_resets(mouse, clock):
    mouse.press(MouseButton.RIGHT)
    clock.now = 500
    mouse.update((0, 0))
    assert mouse.state(MouseButton.RIGHT) is MouseState.HELD
    mouse.release(MouseButton.RIGHT)
    clock.now = 600
    mouse.update((0, 0))
    assert mouse.state(MouseButton.RIGHT) is MouseState.RELEASED
    mouse.press(MouseButton.RIGHT)
    clock.now = 650
    mouse.update((0, 0))
    assert mouse.state(MouseButton.RIGHT) is MouseState.PRESSED


def test_buttons_are_independent(mouse, clock):
    mouse.press(MouseButton.MIDDLE)
    clock.now = 1000
    mouse.update((0, 0))
    assert mouse.state(MouseButton.MIDDLE) is MouseState.HELD
    assert mouse.state(MouseButton.LEFT) is MouseState.RELEASED


def test_handle_events(mouse):
    mouse.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=3))
    assert mouse.state(MouseButton.RIGHT) is MouseState.PRESSED
    mouse.handle_event(pygame.event.Event(pygame.MOUSEBUTTONUP, button=3))
    assert mouse.state(MouseButton.RIGHT) is MouseState.RELEASED


def test_unknown_button_ignored(mouse):
    mouse.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=4))
    assert all(mouse.state(b) is MouseState.RELEASED for b in MouseButton)


def test_other_events_ignored(mouse):
    mouse.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_a))
    assert mouse.state(MouseButton.LEFT) is MouseState.RELEASED


def test_update_records_position(mouse):
    mouse.update((12, 34))
    assert mouse.position == (12, 34)


@pytest.mark.parametrize(
    "pos, inside",
    [((10, 10), True), ((30, 30), True), ((20, 15), True),
     ((31, 30), False), ((9, 15), False), ((15, 9), False), ((15, 31), False)],
)
def test_is_inside_edges_inclusive(mouse, pos, inside):
    mouse.update(pos)
    assert mouse.is_inside((10, 10, 20, 20)) is inside


def test_is_inside_accepts_rect(mouse):
    mouse.update((5, 5))
    assert mouse.is_inside(pygame.Rect(0, 0, 5, 5)) is True


def test_invalid_button_raises(mouse):
    with pytest.raises(ValueError):
        mouse.press(9)