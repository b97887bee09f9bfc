"""
pygame-backed drawing context and host loop.

The games never talk to pygame directly: they receive pointer presses and
ticks through `EventHandler` and draw through the `Context` primitives.
"""

import logging
import math
from abc import ABC, abstractmethod
from typing import Sequence, Tuple

import pygame

from .config import FPS, WINDOW_SIZE
from .geometry import Point, from_pixels, length_to_pixels, to_pixels

logger = logging.getLogger(__name__)

Color = Sequence[float]


def to_pygame_color(color: Color) -> pygame.Color:
    """RGB(A) floats in [0, 1] -> pygame.Color."""
    channels = [max(0, min(255, round(255 * c))) for c in color]
    if len(channels) == 3:
        channels.append(255)
    return pygame.Color(*channels)


def rotated_rectangle(center: Point, radii: Tuple[float, float], rotation: float):
    """Corners of a rectangle rotated by `rotation` turns around its center."""
    angle = rotation * 2 * math.pi
    cos_a, sin_a = math.cos(angle), math.sin(angle)
    rx, ry = radii
    corners = []
    for sx, sy in ((-1, -1), (1, -1), (1, 1), (-1, 1)):
        x, y = sx * rx, sy * ry
        corners.append((center[0] + x * cos_a - y * sin_a,
                        center[1] + x * sin_a + y * cos_a))
    return corners


# ====== Host interface ======
class EventHandler(ABC):
    @abstractmethod
    def on_pointer_press(self, point: Point):
        """Called for every primary button press, `point` in normalized space."""

    @abstractmethod
    def on_tick(self, ctx: "Context"):
        """Called once per frame, before the display is flipped."""


# ====== Drawing context ======
class Context:
    def __init__(self, width=WINDOW_SIZE, height=WINDOW_SIZE, title="", fps=FPS):
        pygame.init()
        self.screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption(title)
        self.clock = pygame.time.Clock()
        self.fps = fps
        self.running = False

        # style state
        self.stroke: Color = (0.0, 0.0, 0.0, 1.0)
        self.fill: Color = (1.0, 1.0, 1.0, 1.0)
        self.stroke_weight = 0.01

    def size(self) -> Tuple[int, int]:
        return self.screen.get_size()

    def _px(self, point: Point):
        return to_pixels(point, self.size())

    def _stroke_px(self) -> int:
        return max(1, round(length_to_pixels(self.stroke_weight, self.size())))

    def _visible(self, color: Color) -> bool:
        return len(color) < 4 or color[3] > 0

    def _layer(self) -> pygame.Surface:
        # shapes are drawn on a transparent layer so alpha is honored
        return pygame.Surface(self.size(), pygame.SRCALPHA)

    def background(self, color: Color):
        self.screen.fill(to_pygame_color(color))

    def square(self, bottom_left: Point, radius: float):
        side = 2 * radius
        left, top = self._px((bottom_left[0], bottom_left[1] + side))
        side_px = length_to_pixels(side, self.size())
        rect = pygame.Rect(round(left), round(top), round(side_px), round(side_px))
        layer = self._layer()
        if self._visible(self.fill):
            pygame.draw.rect(layer, to_pygame_color(self.fill), rect)
        if self._visible(self.stroke):
            pygame.draw.rect(layer, to_pygame_color(self.stroke), rect, self._stroke_px())
        self.screen.blit(layer, (0, 0))

    def circle(self, center: Point, radius: float):
        center_px = self._px(center)
        radius_px = length_to_pixels(radius, self.size())
        layer = self._layer()
        if self._visible(self.fill):
            pygame.draw.circle(layer, to_pygame_color(self.fill), center_px, radius_px)
        if self._visible(self.stroke):
            pygame.draw.circle(layer, to_pygame_color(self.stroke), center_px, radius_px,
                               self._stroke_px())
        self.screen.blit(layer, (0, 0))

    def rectangle(self, center: Point, radii: Tuple[float, float], rotation: float = 0.0):
        corners = [self._px(c) for c in rotated_rectangle(center, radii, rotation)]
        layer = self._layer()
        if self._visible(self.fill):
            pygame.draw.polygon(layer, to_pygame_color(self.fill), corners)
        if self._visible(self.stroke):
            pygame.draw.polygon(layer, to_pygame_color(self.stroke), corners, self._stroke_px())
        self.screen.blit(layer, (0, 0))

    def mouse(self) -> Point:
        return from_pixels(pygame.mouse.get_pos(), self.size())

    def stop(self):
        self.running = False

    # ====== Host loop ======
    def start(self, handler: EventHandler):
        self.running = True
        try:
            while self.running:
                self.clock.tick(self.fps)
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        logger.info("Window closed")
                        self.stop()
                    elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                        self.stop()
                    elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                        handler.on_pointer_press(from_pixels(event.pos, self.size()))
                if not self.running:
                    break
                handler.on_tick(self)
                pygame.display.flip()
        finally:
            # closes the window only, pygame stays initialized for the next game
            pygame.display.quit()
