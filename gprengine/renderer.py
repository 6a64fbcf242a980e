"""Frame rendering onto the window and simple shape helpers."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

import pygame

from .angle import PI
from .observer import ObserverSubject
from .window import get_window

Point = tuple[float, float]
Triangle = tuple[Point, Point, Point]


class DrawInterface(ABC):
    """Something drawn every frame, in three passes."""

    def pre_draw(self) -> None:
        """Called on every drawable before any draw pass."""

    @abstractmethod
    def draw(self) -> None:
        """Draw onto the renderer."""

    def post_draw(self) -> None:
        """Called on every drawable after all draw passes."""


@dataclass
class _RendererState:
    surface: Optional[pygame.Surface] = None


_state = _RendererState()

draw_observers: ObserverSubject[DrawInterface] = ObserverSubject()


def begin_renderer() -> None:
    """Attach the renderer to the current window."""
    surface = get_window()
    if surface is None:
        raise RuntimeError("SDL renderer failed to initialise: no window")
    _state.surface = surface


def update_renderer() -> None:
    """Follow the window's display surface, which a resize may replace."""
    surface = pygame.display.get_surface()
    if surface is not None:
        _state.surface = surface


def draw_renderer() -> None:
    """Clear to black, run every draw pass and present the frame."""
    surface = _require_renderer()
    surface.fill((0, 0, 0, 255))
    for drawable in draw_observers:
        drawable.pre_draw()
    for drawable in draw_observers:
        drawable.draw()
    for drawable in draw_observers:
        drawable.post_draw()
    pygame.display.flip()


def end_renderer() -> None:
    """Detach the renderer."""
    _state.surface = None


def circle_triangles(
    center_x: float, center_y: float, radius: float, nb_segments: int = 20
) -> list[Triangle]:
    """The triangle fan approximating a filled circle."""
    center = (center_x, center_y)

    def rim(i: int) -> Point:
        angle = 2 * PI * i / nb_segments
        return (center_x + radius * math.cos(angle), center_y + radius * math.sin(angle))

    return [(center, rim(i), rim(i + 1)) for i in range(nb_segments)]


def draw_circle(
    center_x: float, center_y: float, radius: float, color, nb_segments: int = 20
) -> None:
    """Draw a filled circle as a fan of triangles."""
    surface = _require_renderer()
    for triangle in circle_triangles(center_x, center_y, radius, nb_segments):
        pygame.draw.polygon(surface, color, triangle)


def get_renderer() -> Optional[pygame.Surface]:
    """The surface frames are drawn onto, or None before begin_renderer."""
    return _state.surface


def _require_renderer() -> pygame.Surface:
    if _state.surface is None:
        raise RuntimeError("renderer is not initialised")
    return _state.surface