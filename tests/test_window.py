import random

import pygame
import pytest

from spinwheel.animation.scheduler import FrameScheduler
from spinwheel.app import SpinWheelApp
from spinwheel.core.events import EventType
from spinwheel.core.state import WheelState
from spinwheel.persistence.store import MemoryStore
from spinwheel.simulator.window import WheelWindow, WindowConfig


@pytest.fixture
def app(settings):
    settings.display.canvas_size = 120
    settings.display.window_width = 320
    settings.display.window_height = 320
    return SpinWheelApp(
        settings,
        store=MemoryStore(),
        scheduler=FrameScheduler(),
        rng=random.Random(5),
    )


@pytest.fixture
def window(app, settings, monkeypatch):
    """Window on SDL's dummy driver, no display needed."""
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    window = WheelWindow(app, WindowConfig.from_settings(settings))
    window._init_pygame()
    yield window
    pygame.quit()


def press(window, key):
    window._handle_keydown(pygame.event.Event(pygame.KEYDOWN, key=key))


def land(app):
    start = app.scheduler.now
    app.update(start + 5000)
    app.update(start + 5650)


@pytest.mark.parametrize("key", [pygame.K_SPACE, pygame.K_RETURN, pygame.K_KP_ENTER])
def test_spin_keys(window, app, key):
    press(window, key)
    assert app.session.state == WheelState.SPINNING


def test_spin_key_while_spinning_is_ignored(window, app):
    press(window, pygame.K_SPACE)
    press(window, pygame.K_SPACE)

    ignored = app.event_bus.get_history(EventType.SPIN_IGNORED)
    assert len(ignored) == 1
    assert app.session.state == WheelState.SPINNING


def test_enter_activates_close_while_result_shown(window, app):
    press(window, pygame.K_SPACE)
    land(app)
    assert app.modal.visible
    assert app.modal.focus == "close"

    press(window, pygame.K_RETURN)
    assert not app.modal.visible
    assert app.session.state == WheelState.IDLE
    assert app.event_bus.get_history(EventType.RESULT_DISMISSED)[-1].data["via"] == "close"

    press(window, pygame.K_SPACE)
    assert app.session.state == WheelState.SPINNING


def test_escape_dismisses_then_quits(window, app):
    press(window, pygame.K_SPACE)
    land(app)

    press(window, pygame.K_ESCAPE)
    assert not app.modal.visible
    assert app.running

    press(window, pygame.K_ESCAPE)
    assert not app.running
    assert app.event_bus.get_history(EventType.SHUTDOWN)


def test_q_quits(window, app):
    press(window, pygame.K_q)
    assert not app.running


def test_hub_click_spins(window, app):
    x, y = app.layout.wheel_center
    pygame.event.post(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(int(x), int(y))))
    window._handle_events()

    assert app.session.state == WheelState.SPINNING


def test_render_with_result_and_debug(window, app):
    press(window, pygame.K_d)
    assert window._show_debug

    press(window, pygame.K_SPACE)
    app.update(0)
    app.update(2500)
    window._render()

    land(app)
    assert app.modal.visible
    window._render()

    # Backdrop covers the corner while the dialog is open
    corner = window._screen.get_at((1, 1))[:3]
    background = app.theme.colors.to_rgb("background")
    assert tuple(corner) != background
