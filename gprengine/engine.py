"""The main loop that drives the window, renderer and systems."""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from dataclasses import dataclass

import pygame

from .observer import ObserverSubject
from .renderer import begin_renderer, draw_renderer, end_renderer, update_renderer
from .window import begin_window, end_window, is_window_open, update_window


class SystemInterface(ABC):
    """A part of the game that is started, updated every frame and stopped."""

    @abstractmethod
    def begin(self) -> None:
        """Called once after the window and renderer exist."""

    @abstractmethod
    def end(self) -> None:
        """Called once before the renderer and window are destroyed."""

    @abstractmethod
    def update(self, dt: float) -> None:
        """Called every frame with the seconds elapsed since the last one."""


@dataclass
class _Clock:
    dt: float = 0.0


_clock = _Clock()

system_observers: ObserverSubject[SystemInterface] = ObserverSubject()


def _begin_engine() -> None:
    try:
        pygame.display.init()
        pygame.joystick.init()
    except pygame.error as exc:
        raise RuntimeError(f"SDL failed to initialise: {exc}") from exc
    begin_window()
    begin_renderer()
    for system in system_observers:
        system.begin()


def _end_engine() -> None:
    for system in system_observers:
        system.end()
    end_renderer()
    end_window()
    pygame.quit()


def run_engine() -> None:
    """Open the window and run frames until it is closed."""
    _begin_engine()
    try:
        previous = time.perf_counter_ns()
        while is_window_open():
            current = time.perf_counter_ns()
            _clock.dt = (current - previous) / 1e9
            previous = current
            update_window()
            update_renderer()
            for system in system_observers:
                system.update(_clock.dt)
            draw_renderer()
    finally:
        _end_engine()


def get_delta_time() -> float:
    """Seconds between the last two frames."""
    return _clock.dt