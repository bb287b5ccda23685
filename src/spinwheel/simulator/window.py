"""
Desktop window using pygame.

Maps keyboard and mouse input onto bus events, drives the app clock from
pygame ticks and draws the wheel, effects and result dialog.
"""

import pygame
import asyncio
import logging
import os
from dataclasses import dataclass

from ..app import SpinWheelApp
from ..core.events import Event, EventType
from ..graphics.text import FONT_CANDIDATES, break_into_lines
from ..presentation.layout import Box

logger = logging.getLogger(__name__)


@dataclass
class WindowConfig:
    """Window configuration."""
    width: int = 720
    height: int = 720
    title: str = "Spin Wheel"
    fullscreen: bool = False
    fps: int = 60
    show_debug: bool = False

    @classmethod
    def from_settings(cls, settings) -> "WindowConfig":
        display = settings.display
        return cls(
            width=display.window_width,
            height=display.window_height,
            fps=display.fps,
            show_debug=settings.debug,
        )


class WheelWindow:
    """
    Window presenting a SpinWheelApp.

    Keyboard Mapping:
        SPACE/ENTER: Spin (activates Close while the result is shown)
        ESC: Dismiss result, or quit when none is shown
        D: Toggle debug overlay
        S: Capture screenshot
        Q: Quit

    Mouse:
        Click hub: Spin
        Click Close or outside the dialog: Dismiss result
    """

    def __init__(self, app: SpinWheelApp, config: WindowConfig | None = None) -> None:
        self.app = app
        self.config = config or WindowConfig()
        self.event_bus = app.event_bus
        self.theme = app.theme

        self._screen: pygame.Surface | None = None
        self._clock: pygame.time.Clock | None = None
        self._running = False
        self._frame_count = 0
        self._show_debug = self.config.show_debug

        self._font: pygame.font.Font | None = None
        self._small_font: pygame.font.Font | None = None
        self._title_font: pygame.font.Font | None = None

        self.event_bus.subscribe(EventType.SHUTDOWN, lambda e: self.stop())

        logger.info("WheelWindow created")

    def _init_pygame(self) -> None:
        """Initialize pygame and create window."""
        pygame.init()
        pygame.display.set_caption(self.theme.messages.title or self.config.title)

        flags = pygame.DOUBLEBUF
        if self.config.fullscreen:
            flags |= pygame.FULLSCREEN

        self._screen = pygame.display.set_mode(
            (self.config.width, self.config.height),
            flags
        )
        self._clock = pygame.time.Clock()

        pygame.font.init()
        self._font = self._load_font(22)
        self._small_font = self._load_font(14)
        self._title_font = self._load_font(18)

        logger.info(f"Pygame initialized: {self.config.width}x{self.config.height}")

    def _load_font(self, size: int) -> pygame.font.Font:
        for font_path in FONT_CANDIDATES:
            if os.path.exists(font_path):
                try:
                    return pygame.font.Font(font_path, size)
                except (OSError, pygame.error) as e:
                    logger.debug(f"Font {font_path} failed: {e}")

        logger.debug("No bundled font found, using pygame default")
        return pygame.font.Font(None, size + 6)

    # Input
    def _handle_events(self) -> None:
        """Process pygame events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._quit()

            elif event.type == pygame.KEYDOWN:
                self._handle_keydown(event)

            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                self.event_bus.emit(Event(
                    EventType.POINTER_CLICK,
                    data={"pos": event.pos},
                    source="window",
                ))

    def _handle_keydown(self, event: pygame.event.Event) -> None:
        """Handle key press."""
        key = event.key
        modal = self.app.modal

        if key == pygame.K_q:
            self._quit()
        elif key == pygame.K_ESCAPE:
            if modal.visible:
                self.event_bus.emit(Event(EventType.ESCAPE, source="window"))
            else:
                self._quit()
        elif key in (pygame.K_SPACE, pygame.K_RETURN, pygame.K_KP_ENTER):
            # Keyboard focus sits on the Close button while a result is shown
            if modal.visible and modal.focus == "close":
                self.event_bus.emit(Event(EventType.CLOSE_PRESS, source="window"))
            else:
                self.event_bus.emit(Event(EventType.SPIN_PRESS, source="window"))
        elif key == pygame.K_d:
            self._show_debug = not self._show_debug
        elif key == pygame.K_s:
            self._capture_screenshot()

    def _quit(self) -> None:
        self.event_bus.emit(Event(EventType.SHUTDOWN, source="window"))

    # Rendering
    def _render(self) -> None:
        """Render one frame."""
        colors = self.theme.colors
        self._screen.fill(colors.to_rgb("background"))

        self._render_wheel()
        self._render_rings()
        self._render_pointer()
        self._render_hub()
        self._render_confetti()
        self._render_modal()

        if self._show_debug:
            self._render_debug()

        pygame.display.flip()

    def _render_wheel(self) -> None:
        frame = self.app.frame()
        height, width = frame.shape[:2]
        surface = pygame.image.frombuffer(frame.tobytes(), (width, height), "RGBA")
        box = self.app.layout.wheel
        self._screen.blit(surface, (box.x, box.y))

        center = self.app.layout.wheel_center
        pygame.draw.circle(
            self._screen, self.theme.colors.to_rgb("accent"),
            center, box.width / 2 + 2, width=4,
        )

    def _render_rings(self) -> None:
        box = self.app.layout.wheel
        radius = box.width / 2
        for ring in self.app.effects.rings:
            ring_radius = int(radius * ring.scale) + 6
            size = ring_radius * 2 + 4
            surf = pygame.Surface((size, size), pygame.SRCALPHA)
            alpha = int(255 * ring.alpha)
            pygame.draw.circle(surf, ring.color + (alpha,), (size // 2, size // 2), ring_radius, width=6)
            cx, cy = self.app.layout.wheel_center
            self._screen.blit(surf, (cx - size / 2, cy - size / 2))

    def _render_pointer(self) -> None:
        box = self.app.layout.wheel
        cx = box.x + box.width / 2
        top = box.y - 14
        points = [(cx - 16, top), (cx + 16, top), (cx, top + 34)]
        pygame.draw.polygon(self._screen, self.theme.colors.to_rgb("pointer"), points)
        pygame.draw.polygon(self._screen, self.theme.colors.to_rgb("background"), points, width=2)

    def _render_hub(self) -> None:
        layout = self.app.layout
        colors = self.theme.colors
        color = colors.to_rgb("hub") if self.app.spin_enabled else colors.to_rgb("hub_disabled")

        pygame.draw.circle(self._screen, color, layout.wheel_center, layout.hub_radius)
        pygame.draw.circle(
            self._screen, colors.to_rgb("text"), layout.wheel_center, layout.hub_radius, width=3,
        )

        label = self._font.render(self.theme.messages.spin, True, colors.to_rgb("text"))
        self._screen.blit(label, label.get_rect(center=layout.wheel_center))

    def _render_confetti(self) -> None:
        w, h = self.config.width, self.config.height
        for piece in self.app.effects.confetti:
            if not piece.started:
                continue
            x, y, angle = piece.position(w, h)
            surf = pygame.Surface((8, 14), pygame.SRCALPHA)
            surf.fill(piece.color + (255,))
            rotated = pygame.transform.rotate(surf, angle)
            self._screen.blit(rotated, rotated.get_rect(center=(x, y)))

    def _render_modal(self) -> None:
        modal = self.app.modal
        if not modal.visible:
            return

        colors = self.theme.colors
        layout = self.app.layout

        backdrop = pygame.Surface((self.config.width, self.config.height), pygame.SRCALPHA)
        backdrop.fill(colors.to_rgb("backdrop") + (self.theme.backdrop_alpha,))
        self._screen.blit(backdrop, (0, 0))

        dialog = self._rect(layout.dialog)
        pygame.draw.rect(self._screen, colors.to_rgb("panel"), dialog, border_radius=14)
        pygame.draw.rect(self._screen, colors.to_rgb("accent"), dialog, width=2, border_radius=14)

        title = self._title_font.render(self.theme.messages.result_title, True, colors.to_rgb("accent"))
        self._screen.blit(title, title.get_rect(midtop=(dialog.centerx, dialog.y + 18)))

        lines = break_into_lines(
            modal.text, dialog.width - 40, lambda s: self._font.size(s)[0]
        )
        line_h = self._font.get_linesize()
        y = dialog.y + 54
        for line in lines:
            text = self._font.render(line, True, colors.to_rgb("text"))
            self._screen.blit(text, text.get_rect(midtop=(dialog.centerx, y)))
            y += line_h

        close = self._rect(layout.close_button)
        pygame.draw.rect(self._screen, colors.to_rgb("accent"), close, border_radius=10)
        if modal.focus == "close":
            pygame.draw.rect(self._screen, colors.to_rgb("text"), close.inflate(6, 6), width=2, border_radius=12)
        label = self._title_font.render(self.theme.messages.close, True, colors.to_rgb("panel"))
        self._screen.blit(label, label.get_rect(center=close.center))

    def _render_debug(self) -> None:
        session = self.app.session
        lines = [
            f"FPS: {self._clock.get_fps():.1f}" if self._clock else "FPS: --",
            f"State: {session.state.name}",
            f"Spins: {session.spin_count}",
            "Odds: " + " ".join(f"{p:.1f}" for p in session.probabilities()),
        ]

        y = 10
        for line in lines:
            text_surface = self._small_font.render(line, True, self.theme.colors.to_rgb("text"))
            self._screen.blit(text_surface, (10, y))
            y += 18

    @staticmethod
    def _rect(box: Box) -> pygame.Rect:
        return pygame.Rect(int(box.x), int(box.y), int(box.width), int(box.height))

    def _capture_screenshot(self) -> None:
        """Capture and save a screenshot."""
        if self._screen:
            filename = f"screenshot_{self._frame_count}.png"
            pygame.image.save(self._screen, filename)
            logger.info(f"Screenshot saved: {filename}")

    # Loop
    async def run(self) -> None:
        """Main window loop."""
        self._init_pygame()
        self._running = True

        logger.info("Window started")

        while self._running and self.app.running:
            self._handle_events()

            now = pygame.time.get_ticks()
            self.app.update(now)
            self._render()

            if self._clock:
                self._clock.tick(self.config.fps)

            self._frame_count += 1

            await asyncio.sleep(0)

        self._cleanup()

    def _cleanup(self) -> None:
        """Clean up pygame resources."""
        pygame.quit()
        logger.info("Window closed")

    def stop(self) -> None:
        """Stop the loop."""
        self._running = False
