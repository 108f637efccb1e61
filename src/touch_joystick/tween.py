"""A small cooperative tween, advanced by whoever owns the frame clock."""

from __future__ import annotations

from typing import Callable, Optional


def ease_in_out_quad(t: float) -> float:
    """Quadratic ease in/out on [0, 1]."""
    if t < 0.5:
        return 2.0 * t * t
    return 1.0 - ((-2.0 * t + 2.0) ** 2) / 2.0


def linear(t: float) -> float:
    return t


class Tween:
    """Interpolates one float from ``start`` to ``end`` over ``duration`` ms.

    Usage mirrors a fluent builder::

        tween.build(1.0, 0.5, 500).animate(on_step)
        tween.advance(16)   # called once per frame by the host

    Building again replaces whatever was running; nothing is queued.
    """

    def __init__(self) -> None:
        self._start = 0.0
        self._end = 0.0
        self._duration = 0.0
        self._elapsed = 0.0
        self._easing: Callable[[float], float] = ease_in_out_quad
        self._on_step: Optional[Callable[[float], None]] = None
        self._running = False
        self._paused = False

    def build(self, start: float, end: float, duration: float,
              easing: Callable[[float], float] = ease_in_out_quad) -> "Tween":
        self.stop()
        self._start = float(start)
        self._end = float(end)
        self._duration = max(0.0, float(duration))
        self._easing = easing
        return self

    def animate(self, on_step: Callable[[float], None]) -> "Tween":
        self._on_step = on_step
        self._elapsed = 0.0
        self._paused = False
        self._running = True
        if self._duration <= 0.0:
            self._finish()
        return self

    def advance(self, elapsed_ms: float) -> None:
        """Move the animation forward by ``elapsed_ms``."""
        if not self._running or self._paused:
            return
        self._elapsed += max(0.0, elapsed_ms)
        if self._elapsed >= self._duration:
            self._finish()
            return
        t = self._easing(self._elapsed / self._duration)
        self._emit(self._start + (self._end - self._start) * t)

    def stop(self) -> None:
        self._running = False
        self._paused = False

    def pause(self) -> None:
        if self._running:
            self._paused = True

    def resume(self) -> None:
        self._paused = False

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def is_paused(self) -> bool:
        return self._paused

    def _finish(self) -> None:
        self._running = False
        self._emit(self._end)

    def _emit(self, value: float) -> None:
        if self._on_step is not None:
            self._on_step(value)
