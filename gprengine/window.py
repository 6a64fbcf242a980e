"""The application window and its event loop."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace
from typing import Optional

import pygame

from .observer import ObserverSubject
from .vec2 import Vec2I


class OnEventInterface(ABC):
    """Something that wants to see every window event."""

    @abstractmethod
    def on_event(self, event: pygame.event.Event) -> None:
        """Handle one event taken from the queue."""


@dataclass
class WindowConfig:
    """Settings used the next time the window is created."""

    title: str = "gprengine"
    width: int = 1280
    height: int = 720
    fullscreen: bool = False
    resizable: bool = False


@dataclass
class _WindowState:
    config: WindowConfig = field(default_factory=WindowConfig)
    surface: Optional[pygame.Surface] = None
    size: Vec2I = field(default_factory=Vec2I)
    is_open: bool = False


_state = _WindowState()

event_observers: ObserverSubject[OnEventInterface] = ObserverSubject()


def get_window() -> Optional[pygame.Surface]:
    """The window's display surface, or None when there is no window."""
    return _state.surface


def begin_window() -> None:
    """Create the window from the current configuration."""
    config = _state.config
    flags = pygame.RESIZABLE if config.resizable else 0
    try:
        if not pygame.display.get_init():
            pygame.display.init()
        surface = pygame.display.set_mode((config.width, config.height), flags)
    except pygame.error as exc:
        raise RuntimeError(f"Failed to create window, error: {exc}") from exc
    pygame.display.set_caption(config.title)
    _state.surface = surface
    _state.size = Vec2I(config.width, config.height)
    _state.is_open = True


def update_window() -> None:
    """Drain the event queue, tracking quit and resize requests."""
    for event in pygame.event.get():
        if event.type in (pygame.QUIT, pygame.WINDOWCLOSE):
            _state.is_open = False
        elif event.type == pygame.WINDOWRESIZED:
            _state.size = Vec2I(event.x, event.y)
        for observer in event_observers:
            observer.on_event(event)


def end_window() -> None:
    """Destroy the window."""
    pygame.display.quit()
    _state.surface = None


def get_window_size() -> Vec2I:
    """The window size in pixels as last known."""
    return Vec2I(_state.size.x, _state.size.y)


def is_window_open() -> bool:
    return _state.is_open


def set_window_config(config: WindowConfig) -> None:
    """Store a copy of the configuration for the next window."""
    _state.config = replace(config)


def close_window() -> None:
    """Ask the main loop to stop after the current frame."""
    _state.is_open = False