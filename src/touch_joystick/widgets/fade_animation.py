from __future__ import annotations

from typing import Callable, Optional

from PyQt5.QtCore import QAbstractAnimation, QEasingCurve, QObject, QVariantAnimation

from ..tween import ease_in_out_quad, linear

_EASING_TYPES = {
    ease_in_out_quad: QEasingCurve.InOutQuad,
    linear: QEasingCurve.Linear,
}


class QtFadeTween(QObject):
    """Tween with the same builder API as :class:`touch_joystick.tween.Tween`,
    driven by the Qt event loop instead of manual ``advance`` calls."""

    def __init__(self, parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self._animation = QVariantAnimation(self)
        self._animation.valueChanged.connect(self._on_value_changed)
        self._on_step: Optional[Callable[[float], None]] = None
        self._end = 0.0

    @property
    def animation(self) -> QVariantAnimation:
        return self._animation

    def build(self, start: float, end: float, duration: float,
              easing: Callable[[float], float] = ease_in_out_quad) -> "QtFadeTween":
        self.stop()
        # Setting key values emits valueChanged; keep it away from the old target.
        self._on_step = None
        self._end = float(end)
        self._animation.setStartValue(float(start))
        self._animation.setEndValue(self._end)
        self._animation.setDuration(max(0, int(duration)))
        curve = QEasingCurve(_EASING_TYPES.get(easing, QEasingCurve.Linear))
        if easing not in _EASING_TYPES:
            curve.setCustomType(easing)
        self._animation.setEasingCurve(curve)
        return self

    def animate(self, on_step: Callable[[float], None]) -> "QtFadeTween":
        self._on_step = on_step
        if self._animation.duration() <= 0:
            on_step(self._end)
            return self
        self._animation.start()
        return self

    def stop(self) -> None:
        self._animation.stop()

    def pause(self) -> None:
        if self._animation.state() == QAbstractAnimation.Running:
            self._animation.pause()

    def resume(self) -> None:
        if self._animation.state() == QAbstractAnimation.Paused:
            self._animation.resume()

    @property
    def is_running(self) -> bool:
        return self._animation.state() != QAbstractAnimation.Stopped

    @property
    def is_paused(self) -> bool:
        return self._animation.state() == QAbstractAnimation.Paused

    def _on_value_changed(self, value) -> None:
        if self._on_step is not None and value is not None:
            self._on_step(float(value))
